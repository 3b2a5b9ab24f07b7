from typing import Optional


class PaymentError(Exception):
    """Base error for the payment flow.

    `message` is safe to show to the client. Diagnostic detail belongs in
    the server log, never in the message.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidInput(PaymentError):
    status_code = 400
    message = "Invalid request payload"


class ProviderError(PaymentError):
    status_code = 500
    message = "Payment provider request failed"


class SignatureMismatch(PaymentError):
    status_code = 400
    message = "Invalid signature"


class AmountOrStatusMismatch(PaymentError):
    status_code = 400
    message = "Payment not captured or amount mismatch"


class InvalidWebhookSignature(PaymentError):
    status_code = 400
    message = "Invalid webhook signature"
