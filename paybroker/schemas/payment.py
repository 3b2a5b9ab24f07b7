from typing import Optional
from pydantic import BaseModel, Field

# Amounts are strict: JSON true or "100" is rejected rather than coerced.

class OrderCreateRequest(BaseModel):
    # Rupees. Range is checked by the service so the client gets "Invalid amount".
    amount: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)

class OrderResponse(BaseModel):
    success: bool = True
    order_id: str
    amount: int  # paise
    currency: str

class PaymentVerificationRequest(BaseModel):
    razorpay_payment_id: str
    razorpay_order_id: str
    razorpay_signature: str
    amount: float = Field(strict=True, allow_inf_nan=False)
