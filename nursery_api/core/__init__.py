# Core modules

from .config import settings, get_settings, Settings
from .errors import StorefrontError, NotFoundError, StoreError, PaymentProviderError

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "StorefrontError",
    "NotFoundError",
    "StoreError",
    "PaymentProviderError",
]
