from datetime import datetime, timezone
from fastapi import APIRouter
from paybroker.api.endpoints import payment, webhook
from paybroker.schemas.common import HealthResponse

api_router = APIRouter()
api_router.include_router(payment.router, tags=["payment"])
api_router.include_router(webhook.router, tags=["webhook"])

@api_router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    return HealthResponse(timestamp=datetime.now(timezone.utc).isoformat())
