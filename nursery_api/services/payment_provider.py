"""
Payment Provider Client

Thin wrapper around Stripe PaymentIntents. The storefront only creates
intents; confirmation happens client-side with the returned secret.
"""

import logging
from typing import Optional

import stripe

from ..core.errors import PaymentProviderError

logger = logging.getLogger(__name__)


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount (dollars) to minor units (cents)"""
    return int(round(amount * 100))


class PaymentProvider:
    """
    Client for creating Stripe payment intents.

    The API key is passed on every call instead of being set on the stripe
    module, so several providers can coexist in one process.
    """

    def __init__(self, api_key: Optional[str], currency: str = "usd"):
        self.api_key = api_key
        self.currency = currency.lower()

        if not api_key:
            logger.warning("No Stripe secret key configured - payment intents will fail")

    def create_payment_intent(self, amount: float) -> str:
        """
        Create a card payment intent.

        Args:
            amount: Amount to charge in major currency units

        Returns:
            The intent's client secret

        Raises:
            PaymentProviderError: If Stripe rejects or fails the request
        """
        amount_minor = to_minor_units(amount)
        logger.info(f"Creating payment intent: {amount_minor} {self.currency}")

        try:
            intent = stripe.PaymentIntent.create(
                amount=amount_minor,
                currency=self.currency,
                payment_method_types=["card"],
                api_key=self.api_key,
            )
        except stripe.StripeError as e:
            message = e.user_message or str(e)
            logger.error(f"Stripe error creating payment intent: {message}")
            raise PaymentProviderError(
                message,
                code=getattr(e, "code", None),
                original_error=e,
            ) from e

        logger.info(f"Payment intent {intent.id} created")
        return intent.client_secret
