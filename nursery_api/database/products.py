"""Product catalog storage"""

import logging
from typing import Any

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
from .query import ProductQuery, build_product_query

logger = logging.getLogger(__name__)


class ProductDatabase:
    """MongoDB-backed product catalog"""

    def __init__(self, collection: Collection):
        self.collection = collection

    def search_products(self, params: ProductQuery) -> tuple[list[dict], int]:
        """
        Find one page of products matching the filters.

        Returns:
            Tuple of (products on the requested page, total matching count)
        """
        query, options = build_product_query(params)

        with store_errors("list products"):
            # Counted over the whole filtered set, independent of the page
            total = self.collection.count_documents(query)
            cursor = self.collection.find(query, **options.to_find_kwargs())
            products = [serialize_doc(doc) for doc in cursor]

        return products, total

    def get_product(self, product_id: str) -> dict:
        """Get a product by ID"""
        oid = parse_object_id(product_id, "Product")
        with store_errors("fetch product"):
            product = self.collection.find_one({"_id": oid})
        if product is None:
            raise NotFoundError("Product", product_id)
        return serialize_doc(product)

    def create_product(self, product: dict[str, Any]) -> dict:
        """Insert a product exactly as submitted"""
        document = dict(product)
        with store_errors("create product"):
            result = self.collection.insert_one(document)
        logger.info(f"Product {result.inserted_id} created")
        return insert_result(result)

    def update_product(self, product_id: str, updates: dict[str, Any]) -> dict:
        """
        Merge the supplied fields into an existing product.

        Any _id in the body is dropped so the stored identifier never changes.
        """
        oid = parse_object_id(product_id, "Product")
        fields = {k: v for k, v in updates.items() if k != "_id"}

        with store_errors("update product"):
            if not fields:
                # Nothing to merge; MongoDB rejects an empty $set
                if self.collection.count_documents({"_id": oid}, limit=1) == 0:
                    raise NotFoundError("Product", product_id)
                return {
                    "acknowledged": True,
                    "matchedCount": 1,
                    "modifiedCount": 0,
                    "upsertedId": None,
                }
            result = self.collection.update_one({"_id": oid}, {"$set": fields})

        if result.matched_count == 0:
            raise NotFoundError("Product", product_id)

        logger.info(f"Product {product_id} updated: {sorted(fields)}")
        return update_result(result)

    def delete_product(self, product_id: str) -> dict:
        """Delete a product by ID"""
        oid = parse_object_id(product_id, "Product")
        with store_errors("delete product"):
            result = self.collection.delete_one({"_id": oid})

        if result.deleted_count == 0:
            raise NotFoundError("Product", product_id)

        logger.info(f"Product {product_id} deleted")
        return delete_result(result)

    def clear_cart(self) -> int:
        """
        Reset addedToCart on every product.

        This is a single update_many, not a transaction: a product update
        arriving at the same time may land before or after it.
        """
        with store_errors("clear cart"):
            result = self.collection.update_many({}, {"$set": {"addedToCart": False}})
        logger.info(f"Cart cleared: {result.modified_count} products reset")
        return result.modified_count
