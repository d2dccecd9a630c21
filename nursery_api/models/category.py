"""Category models for the storefront API"""

from pydantic import BaseModel
from typing import Any


class CategoryListResponse(BaseModel):
    """Categories with their product counts"""
    status: bool = True
    data: list[dict[str, Any]]


class CategoryResponse(BaseModel):
    status: bool = True
    data: dict[str, Any]
