import math
import time
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict

from paybroker.core.config import Settings
from paybroker.core.exceptions import (
    AmountOrStatusMismatch,
    InvalidInput,
    ProviderError,
    SignatureMismatch,
)
from paybroker.core.security import verify_payment_signature
from paybroker.services.provider import PaymentProvider

logger = logging.getLogger(__name__)

CURRENCY = "INR"
MIN_AMOUNT = 1


def to_minor_units(amount) -> int:
    """Rupees to paise, rounded to the nearest paisa."""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _is_valid_amount(amount: Any) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        return False
    if isinstance(amount, float) and not math.isfinite(amount):
        return False
    return amount >= MIN_AMOUNT


class PaymentService:
    def __init__(self, provider: PaymentProvider, settings: Settings):
        self.provider = provider
        self.key_secret = settings.RAZORPAY_KEY_SECRET

    def create_order(self, amount) -> Dict[str, Any]:
        if not _is_valid_amount(amount):
            raise InvalidInput("Invalid amount")

        options = {
            "amount": to_minor_units(amount),
            "currency": CURRENCY,
            "receipt": f"receipt_{int(time.time() * 1000)}",
        }

        try:
            order = self.provider.create_order(options)
        except ProviderError as e:
            logger.error(f"Order creation error: {e}")
            raise ProviderError("Failed to create order") from e

        logger.info(f"Order created: {order['id']} for amount {amount}")
        return {
            "order_id": order["id"],
            "amount": order.get("amount", options["amount"]),
            "currency": order.get("currency", CURRENCY),
        }

    def verify_payment(self, payment_id: str, order_id: str, signature: str, amount) -> str:
        """
        Verify a checkout response and cross-check it against Razorpay.

        The signature is checked first; the payment is only fetched when it
        matches. Returns the success message.
        """
        if not verify_payment_signature(order_id, payment_id, signature, self.key_secret):
            logger.warning(f"Signature mismatch for payment: {payment_id}")
            raise SignatureMismatch("Invalid signature")

        if not _is_valid_amount(amount):
            logger.warning(f"Invalid claimed amount for payment: {payment_id}")
            raise AmountOrStatusMismatch()

        try:
            payment = self.provider.fetch_payment(payment_id)
        except ProviderError as e:
            logger.error(f"Payment verification error: {e}")
            raise ProviderError("Verification failed") from e

        status = payment.get("status")
        recorded = payment.get("amount")
        if status != "captured" or recorded != to_minor_units(amount):
            logger.warning(
                f"Payment {payment_id} rejected: status={status} amount={recorded} claimed={to_minor_units(amount)}"
            )
            raise AmountOrStatusMismatch()

        logger.info(f"Payment verified: {payment_id}")
        return "Payment verified successfully"
