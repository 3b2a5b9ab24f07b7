import json
import logging
from typing import Any, Callable, Dict, Optional

from paybroker.core.config import Settings
from paybroker.core.exceptions import InvalidInput, InvalidWebhookSignature
from paybroker.core.security import verify_webhook_signature

logger = logging.getLogger(__name__)


class WebhookService:
    def __init__(self, settings: Settings):
        self.webhook_secret = settings.RAZORPAY_WEBHOOK_SECRET
        self.handlers: Dict[str, Callable[[Dict[str, Any]], None]] = {
            "payment.captured": self._on_payment_captured,
        }

    def process(self, body: bytes, signature: Optional[str]) -> str:
        """
        Validate and dispatch a Razorpay webhook.

        Nothing in the body is looked at before the signature passes.
        Unknown events are accepted and ignored. Returns the event name.
        """
        if not verify_webhook_signature(body, signature, self.webhook_secret):
            logger.warning("Rejected webhook with invalid signature")
            raise InvalidWebhookSignature()

        try:
            event = json.loads(body)
        except (UnicodeDecodeError, ValueError) as e:
            logger.error(f"Webhook body is not valid JSON: {e}")
            raise InvalidInput("Invalid webhook payload") from e
        if not isinstance(event, dict):
            raise InvalidInput("Invalid webhook payload")

        name = event.get("event")
        handler = self.handlers.get(name)
        if handler is None:
            logger.debug(f"Ignoring webhook event: {name}")
        else:
            handler(event)
        return name

    def _on_payment_captured(self, event: Dict[str, Any]) -> None:
        payment_id = _payment_id(event.get("payload"))
        if payment_id is None:
            logger.warning("payment.captured webhook without a payment id")
            return
        logger.info(f"Webhook: Payment {payment_id} captured")


def _payment_id(payload: Any) -> Optional[str]:
    # Razorpay nests the payment under "entity"; accept the flat form as well.
    if not isinstance(payload, dict):
        return None
    payment = payload.get("payment")
    if not isinstance(payment, dict):
        return None
    entity = payment.get("entity")
    if isinstance(entity, dict) and entity.get("id"):
        return entity["id"]
    return payment.get("id")
