import logging
from typing import Any, Dict, Optional

import razorpay

from paybroker.core.config import Settings
from paybroker.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class PaymentProvider:
    """Operations the broker needs from the payment gateway."""

    def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:  # pragma: no cover
        raise NotImplementedError

    def fetch_payment(self, payment_id: str) -> Dict[str, Any]:  # pragma: no cover
        raise NotImplementedError


class RazorpayProvider(PaymentProvider):
    def __init__(self, key_id: str, key_secret: str, timeout: float = 10.0, client: Optional[razorpay.Client] = None):
        self.timeout = timeout
        if client is not None:
            self.client = client
        elif key_id and key_secret:
            self.client = razorpay.Client(auth=(key_id, key_secret))
        else:
            self.client = None
            logger.warning("Razorpay keys not set. Payment operations will fail.")

    @classmethod
    def from_settings(cls, settings: Settings) -> "RazorpayProvider":
        return cls(
            settings.RAZORPAY_KEY_ID,
            settings.RAZORPAY_KEY_SECRET,
            timeout=settings.PROVIDER_TIMEOUT,
        )

    def _require_client(self) -> razorpay.Client:
        if not self.client:
            raise ProviderError("Razorpay client not initialized")
        return self.client

    def create_order(self, options: Dict[str, Any]) -> Dict[str, Any]:
        client = self._require_client()
        try:
            order = client.order.create(data=options, timeout=self.timeout)
        except Exception as e:
            logger.error(f"Error creating Razorpay order: {e}")
            raise ProviderError(f"Order creation failed: {e}") from e

        if not isinstance(order, dict) or "id" not in order:
            logger.error(f"Unexpected order response from Razorpay: {type(order).__name__}")
            raise ProviderError("Unexpected order response")
        return order

    def fetch_payment(self, payment_id: str) -> Dict[str, Any]:
        client = self._require_client()
        try:
            payment = client.payment.fetch(payment_id, timeout=self.timeout)
        except Exception as e:
            logger.error(f"Error fetching Razorpay payment {payment_id}: {e}")
            raise ProviderError(f"Payment fetch failed: {e}") from e

        if not isinstance(payment, dict):
            logger.error(f"Unexpected payment response from Razorpay: {type(payment).__name__}")
            raise ProviderError("Unexpected payment response")
        return payment
