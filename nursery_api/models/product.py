"""Product models for the storefront API"""

from pydantic import BaseModel
from typing import Any, Optional


class Pagination(BaseModel):
    """Pagination block of a product listing"""
    totalProducts: int
    totalPages: int
    currentPage: int
    pageSize: int


class ProductListResponse(BaseModel):
    """Response from product listing"""
    status: bool = True
    data: list[dict[str, Any]]
    pagination: Pagination


class ProductResponse(BaseModel):
    """Single product response"""
    status: bool = True
    data: Optional[dict[str, Any]] = None


class ClearCartResponse(BaseModel):
    message: str
    modifiedCount: int = 0
