import logging
from functools import lru_cache
from typing import Optional

import razorpay
from razorpay.errors import SignatureVerificationError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _utility(key_secret: str):
    # Utility reads the key secret from the client's auth tuple; no request
    # is ever sent through this client.
    return razorpay.Client(auth=("", key_secret)).utility


def verify_payment_signature(order_id: str, payment_id: str, signature: Optional[str], key_secret: str) -> bool:
    """Check the checkout signature Razorpay computed over "<order_id>|<payment_id>"."""
    if not signature or not key_secret or not signature.isascii():
        return False
    try:
        _utility(key_secret).verify_payment_signature({
            "razorpay_order_id": order_id,
            "razorpay_payment_id": payment_id,
            "razorpay_signature": signature,
        })
    except SignatureVerificationError:
        return False
    return True


def verify_webhook_signature(body: bytes, signature: Optional[str], webhook_secret: str) -> bool:
    """
    Check the `X-Razorpay-Signature` header against the raw request body.

    The body must be the bytes exactly as received. Re-serializing parsed
    JSON changes whitespace and key order and breaks the comparison.
    """
    if not signature or not webhook_secret or not signature.isascii():
        return False
    try:
        payload = body.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Webhook body is not valid UTF-8")
        return False
    try:
        _utility(webhook_secret).verify_webhook_signature(payload, signature, webhook_secret)
    except SignatureVerificationError:
        return False
    return True
