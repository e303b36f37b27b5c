"""Pydantic models for payments."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .entity import Entity


class Payment(Entity):
    order_id: Optional[str] = Field(None, alias="orderId", examples=["order-1"])
    user_id: str = Field(..., alias="userId", examples=["user-1"])
    amount: float = Field(..., examples=[599.99])
    currency: str = Field(..., examples=["SAR"])
    status: str = Field(..., examples=["completed"])
    refunded_at: Optional[datetime] = Field(None, alias="refundedAt")
    refund_reason: Optional[str] = Field(None, alias="refundReason")


class PaymentActionRequest(BaseModel):
    """Body of ``POST /payments``.  The only action is ``refund``, which needs a reason."""

    payment_id: str = Field(..., alias="paymentId", examples=["payment-1"])
    action: str = Field(..., examples=["refund"])
    reason: Optional[str] = Field(None, examples=["Item returned"])

    model_config = {
        "populate_by_name": True,
    }
