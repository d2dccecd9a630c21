# Storefront API Models

from .product import Pagination, ProductListResponse, ProductResponse, ClearCartResponse
from .category import CategoryListResponse, CategoryResponse
from .payment import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentRecord,
    PayerSummary,
)

__all__ = [
    "Pagination",
    "ProductListResponse",
    "ProductResponse",
    "ClearCartResponse",
    "CategoryListResponse",
    "CategoryResponse",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "PaymentRecord",
    "PayerSummary",
]
