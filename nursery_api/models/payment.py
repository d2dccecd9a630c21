"""Payment models for the storefront API"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class PaymentIntentRequest(BaseModel):
    """Request to start a card payment, amount in major units (dollars)"""
    price: float = Field(
        validation_alias=AliasChoices("price", "amount"),
        allow_inf_nan=False,
    )


class PaymentIntentResponse(BaseModel):
    clientSecret: str


class PaymentRecord(BaseModel):
    """
    A completed payment as reported by the client.

    payer is the stable identifier payments are grouped on (an email
    address in practice). Any further fields are stored as metadata.
    """
    model_config = ConfigDict(extra="allow")

    payer: str = Field(min_length=1)
    amount: float = Field(allow_inf_nan=False)
    name: Optional[str] = None
    date: Optional[datetime] = None


class PayerSummary(BaseModel):
    """Aggregated payments for one payer"""
    payer: Optional[str] = None
    totalAmount: float
    paymentCount: int
    lastPaymentDate: Optional[str] = None
