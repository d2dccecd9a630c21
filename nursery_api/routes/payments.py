"""Payment API routes"""

from typing import Optional
from fastapi import APIRouter, Depends
from pymongo.database import Database

from ..models.payment import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentRecord,
    PayerSummary,
)
from ..database.connection import PAYMENTS, get_database
from ..database.payments import PaymentDatabase
from ..services.payment_provider import PaymentProvider
from ..core.config import settings

router = APIRouter(tags=["Payments"])

# Created on first use so a missing key only matters to payment routes
payment_provider: Optional[PaymentProvider] = None


def get_payment_provider() -> PaymentProvider:
    """Get or create the payment provider"""
    global payment_provider
    if payment_provider is None:
        payment_provider = PaymentProvider(
            api_key=settings.stripe_secret_key,
            currency=settings.payment_currency,
        )
    return payment_provider


def get_payment_db(db: Database = Depends(get_database)) -> PaymentDatabase:
    return PaymentDatabase(db[PAYMENTS])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    request: PaymentIntentRequest,
    provider: PaymentProvider = Depends(get_payment_provider),
):
    """Start a card payment and hand the client secret back to the browser"""
    client_secret = provider.create_payment_intent(request.price)
    return PaymentIntentResponse(clientSecret=client_secret)


@router.post("/save-payment-info")
def save_payment_info(
    payment: PaymentRecord,
    payments: PaymentDatabase = Depends(get_payment_db),
):
    """Record a payment the client reports as completed"""
    return payments.save_payment(payment.model_dump(exclude_unset=True))


@router.get("/users-who-paid", response_model=list[PayerSummary])
def users_who_paid(payments: PaymentDatabase = Depends(get_payment_db)):
    """Payment totals grouped by payer"""
    return payments.payer_summary()
