from typing import Optional
from fastapi import APIRouter, Depends, Header, Request
from paybroker.schemas.common import APIResponse
from paybroker.services.webhook_service import WebhookService
from paybroker.api.deps import get_webhook_service

router = APIRouter()


@router.post("/webhook", response_model=APIResponse, response_model_exclude_none=True)
async def razorpay_webhook(
    request: Request,
    x_razorpay_signature: Optional[str] = Header(None),
    service: WebhookService = Depends(get_webhook_service),
):
    """
    Handle Razorpay webhook events.

    - Verifies the signature over the raw body using RAZORPAY_WEBHOOK_SECRET
    - Logs 'payment.captured' events, accepts every other event unchanged
    - Returns {"success": true}
    """
    body = await request.body()
    service.process(body, x_razorpay_signature)
    return APIResponse()
