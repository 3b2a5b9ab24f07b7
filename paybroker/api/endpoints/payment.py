from fastapi import APIRouter, Depends, Request
from paybroker.core.rate_limit import RATE_LIMIT_SCOPE, limiter, rate_limit
from paybroker.schemas.common import APIResponse
from paybroker.schemas.payment import OrderCreateRequest, OrderResponse, PaymentVerificationRequest
from paybroker.services.payment_service import PaymentService
from paybroker.api.deps import get_payment_service

router = APIRouter()


@router.post("/create-order", response_model=OrderResponse)
@limiter.shared_limit(rate_limit, scope=RATE_LIMIT_SCOPE)
def create_order(request: Request, payload: OrderCreateRequest, service: PaymentService = Depends(get_payment_service)):
    """
    Create a Razorpay order for payment.

    Accepts: amount in rupees
    Returns: order_id, amount in paise, currency
    """
    order = service.create_order(payload.amount)
    return OrderResponse(**order)


@router.post("/verify-payment", response_model=APIResponse)
@limiter.shared_limit(rate_limit, scope=RATE_LIMIT_SCOPE)
def verify_payment(request: Request, payload: PaymentVerificationRequest, service: PaymentService = Depends(get_payment_service)):
    """
    Verify the checkout signature, then confirm with Razorpay that the
    payment is captured for the claimed amount.
    """
    message = service.verify_payment(
        payload.razorpay_payment_id,
        payload.razorpay_order_id,
        payload.razorpay_signature,
        payload.amount,
    )
    return APIResponse(message=message)
