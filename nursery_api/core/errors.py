"""Storefront error types"""

from typing import Optional


class StorefrontError(Exception):
    """Base exception for storefront errors"""
    pass


class NotFoundError(StorefrontError):
    """No document matched an identifier-scoped operation"""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.identifier = identifier


class StoreError(StorefrontError):
    """Document store connectivity or query failure"""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.original_error = original_error


class PaymentProviderError(StorefrontError):
    """Payment provider rejected or failed a request"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.code = code
        self.original_error = original_error
