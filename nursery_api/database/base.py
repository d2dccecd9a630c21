"""Shared helpers for the MongoDB-backed stores"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, Optional

from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from ..core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Translate driver failures raised inside the block into StoreError"""
    try:
        yield
    except (PyMongoError, InvalidDocument, OverflowError) as e:
        # OverflowError: integers beyond int64 cannot be BSON encoded
        logger.error(f"Store error while trying to {operation}: {e}")
        raise StoreError(f"Failed to {operation}", original_error=e) from e


def parse_object_id(value: str, resource: str) -> ObjectId:
    """
    Convert a path identifier to an ObjectId.

    A malformed identifier can never match a stored document, so it is
    reported the same way as a missing one.
    """
    if not ObjectId.is_valid(value):
        raise NotFoundError(resource, value)
    return ObjectId(value)


def serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def serialize_doc(doc: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Make a stored document JSON friendly (ObjectId -> hex, datetime -> ISO)"""
    if doc is None:
        return None
    return serialize_value(dict(doc))


def insert_result(result: InsertOneResult) -> dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }


def update_result(result: UpdateResult) -> dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": serialize_value(result.upserted_id),
    }


def delete_result(result: DeleteResult) -> dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
