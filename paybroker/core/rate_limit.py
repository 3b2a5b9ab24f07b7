import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from paybroker.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP"
RATE_LIMIT_SCOPE = "payments"

# One limiter per process, keyed by client IP. Routes opt in with
# @limiter.shared_limit(rate_limit, scope=RATE_LIMIT_SCOPE) so that
# /create-order and /verify-payment draw from the same window.
limiter = Limiter(key_func=get_remote_address)

_current = {"limit": get_settings().RATE_LIMIT}


def rate_limit() -> str:
    """Limit string for the running app, e.g. "100/15 minutes"."""
    return _current["limit"]


def configure_limiter(settings: Settings) -> Limiter:
    _current["limit"] = settings.RATE_LIMIT
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    limiter.reset()
    return limiter


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(
        status_code=429,
        content={"success": False, "message": RATE_LIMIT_MESSAGE},
    )
