"""Category API routes"""

from typing import Any
from fastapi import APIRouter, Body, Depends
from pymongo.database import Database

from ..models.category import CategoryListResponse, CategoryResponse
from ..database.connection import CATEGORIES, PRODUCTS, get_database
from ..database.categories import CategoryDatabase

router = APIRouter(prefix="/categories", tags=["Categories"])


def get_category_db(db: Database = Depends(get_database)) -> CategoryDatabase:
    return CategoryDatabase(db[CATEGORIES], products_collection=PRODUCTS)


@router.get("", response_model=CategoryListResponse)
def list_categories(categories: CategoryDatabase = Depends(get_category_db)):
    """List all categories with their product count"""
    return {"status": True, "data": categories.list_categories()}


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    categories: CategoryDatabase = Depends(get_category_db),
):
    return {"status": True, "data": categories.get_category(category_id)}


@router.post("")
def create_category(
    category: dict[str, Any] = Body(...),
    categories: CategoryDatabase = Depends(get_category_db),
):
    """Add a new category"""
    return categories.create_category(category)


@router.put("/{category_id}")
def update_category(
    category_id: str,
    category: dict[str, Any] = Body(...),
    categories: CategoryDatabase = Depends(get_category_db),
):
    """Update a category by ID"""
    return categories.update_category(category_id, category)


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    categories: CategoryDatabase = Depends(get_category_db),
):
    """Delete a category by ID"""
    return categories.delete_category(category_id)
