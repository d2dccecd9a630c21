"""Product API routes"""

from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, Query
from pymongo.database import Database

from ..models.product import ProductListResponse, ProductResponse
from ..database.connection import PRODUCTS, get_database
from ..database.products import ProductDatabase
from ..database.query import ProductQuery, pagination_meta

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_db(db: Database = Depends(get_database)) -> ProductDatabase:
    return ProductDatabase(db[PRODUCTS])


@router.get("", response_model=ProductListResponse)
def list_products(
    category: Optional[str] = Query(None, description="Exact category name"),
    search: Optional[str] = Query(None, description="Case-insensitive title substring"),
    addedToCart: Optional[str] = Query(None, description="'true' or 'false'"),
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(10, ge=1, description="Page size"),
    sortBy: str = Query("name", description="Field to sort on"),
    sortOrder: str = Query("asc", description="'asc' or 'desc'"),
    products: ProductDatabase = Depends(get_product_db),
):
    """
    List products with optional filtering, pagination and sorting.

    totalProducts counts every product matching the filters, not just
    the returned page.
    """
    params = ProductQuery(
        category=category,
        search=search,
        added_to_cart=addedToCart,
        page=page,
        limit=limit,
        sort_by=sortBy,
        sort_order=sortOrder,
    )
    data, total = products.search_products(params)

    return {
        "status": True,
        "data": data,
        "pagination": pagination_meta(total, page, limit),
    }


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: str,
    products: ProductDatabase = Depends(get_product_db),
):
    """Get a product by ID"""
    return {"status": True, "data": products.get_product(product_id)}


@router.post("")
def create_product(
    product: dict[str, Any] = Body(...),
    products: ProductDatabase = Depends(get_product_db),
):
    """Add a new product; the body is stored as sent"""
    return products.create_product(product)


@router.put("/{product_id}")
def update_product(
    product_id: str,
    product: dict[str, Any] = Body(...),
    products: ProductDatabase = Depends(get_product_db),
):
    """Merge the submitted fields into a product (_id is ignored)"""
    return products.update_product(product_id, product)


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    products: ProductDatabase = Depends(get_product_db),
):
    """Delete a product by ID"""
    return products.delete_product(product_id)
