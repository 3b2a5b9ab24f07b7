import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from paybroker.core.config import Settings, get_settings
from paybroker.core.exceptions import PaymentError
from paybroker.core.logging import setup_logging
from paybroker.core.rate_limit import configure_limiter, rate_limit_exceeded_handler
from paybroker.api.api import api_router
from paybroker.services.provider import PaymentProvider, RazorpayProvider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    if not settings.has_provider_keys:
        logger.warning("RAZORPAY_KEY_ID / RAZORPAY_KEY_SECRET missing; orders and verification will fail.")
    if not settings.RAZORPAY_WEBHOOK_SECRET:
        logger.warning("RAZORPAY_WEBHOOK_SECRET missing; every webhook will be rejected.")
    logger.info(f"Server running on port {settings.PORT}")
    yield
    logger.info("Server shutting down")


def create_app(settings: Optional[Settings] = None, provider: Optional[PaymentProvider] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.provider = provider or RazorpayProvider.from_settings(settings)

    # Only /create-order and /verify-payment carry a limit. Webhooks come
    # from Razorpay and must never be dropped.
    app.state.limiter = configure_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PaymentError, payment_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(api_router)
    app.add_api_route("/", root, methods=["GET"], include_in_schema=False)
    return app


async def root(request: Request):
    return {"message": f"{request.app.state.settings.PROJECT_NAME} is running"}


async def payment_error_handler(request: Request, exc: PaymentError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request payload"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# Global Exception Handler
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )

