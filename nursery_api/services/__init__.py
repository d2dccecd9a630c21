# Storefront Services

from .payment_provider import PaymentProvider, to_minor_units

__all__ = ["PaymentProvider", "to_minor_units"]
