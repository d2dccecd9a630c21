"""Category storage with product counts"""

import logging
from typing import Any, Optional

from pymongo.collection import Collection

from ..core.errors import NotFoundError
from .base import (
    delete_result,
    insert_result,
    parse_object_id,
    serialize_doc,
    store_errors,
    update_result,
)
from .connection import PRODUCTS

logger = logging.getLogger(__name__)


def product_count_pipeline(
    products_collection: str = PRODUCTS,
    match: Optional[dict[str, Any]] = None,
) -> list[dict[str, Any]]:
    """
    Aggregation joining categories to products by name.

    Each category comes back with a totalProducts field counting the
    products whose category equals the category name.
    """
    pipeline: list[dict[str, Any]] = []
    if match:
        pipeline.append({"$match": match})
    pipeline.extend([
        {
            "$lookup": {
                "from": products_collection,
                "localField": "name",
                "foreignField": "category",
                "as": "products",
            }
        },
        {"$addFields": {"totalProducts": {"$size": "$products"}}},
        {"$project": {"products": 0}},
    ])
    return pipeline


class CategoryDatabase:
    """MongoDB-backed category taxonomy"""

    def __init__(self, collection: Collection, products_collection: str = PRODUCTS):
        self.collection = collection
        self.products_collection = products_collection

    def list_categories(self) -> list[dict]:
        """All categories with their product counts, computed on every call"""
        pipeline = product_count_pipeline(self.products_collection)
        with store_errors("list categories"):
            categories = list(self.collection.aggregate(pipeline))
        return [serialize_doc(c) for c in categories]

    def get_category(self, category_id: str) -> dict:
        """Get a category by ID, with its product count"""
        oid = parse_object_id(category_id, "Category")
        pipeline = product_count_pipeline(self.products_collection, match={"_id": oid})
        with store_errors("fetch category"):
            found = list(self.collection.aggregate(pipeline))
        if not found:
            raise NotFoundError("Category", category_id)
        return serialize_doc(found[0])

    def create_category(self, category: dict[str, Any]) -> dict:
        document = dict(category)
        with store_errors("create category"):
            result = self.collection.insert_one(document)
        logger.info(f"Category {result.inserted_id} created: {document.get('name')}")
        return insert_result(result)

    def update_category(self, category_id: str, updates: dict[str, Any]) -> dict:
        """$set the submitted fields on a category"""
        oid = parse_object_id(category_id, "Category")
        fields = {k: v for k, v in updates.items() if k != "_id"}

        with store_errors("update category"):
            if not fields:
                if self.collection.count_documents({"_id": oid}, limit=1) == 0:
                    raise NotFoundError("Category", category_id)
                return {
                    "acknowledged": True,
                    "matchedCount": 1,
                    "modifiedCount": 0,
                    "upsertedId": None,
                }
            result = self.collection.update_one({"_id": oid}, {"$set": fields})

        if result.matched_count == 0:
            raise NotFoundError("Category", category_id)

        logger.info(f"Category {category_id} updated")
        return update_result(result)

    def delete_category(self, category_id: str) -> dict:
        oid = parse_object_id(category_id, "Category")
        with store_errors("delete category"):
            result = self.collection.delete_one({"_id": oid})

        if result.deleted_count == 0:
            raise NotFoundError("Category", category_id)

        logger.info(f"Category {category_id} deleted")
        return delete_result(result)
