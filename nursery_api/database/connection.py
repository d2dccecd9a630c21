"""MongoDB connection for the storefront"""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from ..core.config import Settings
from ..core.errors import StoreError

logger = logging.getLogger(__name__)

PRODUCTS = "products"
CATEGORIES = "categories"
PAYMENTS = "payments"


class MongoConnection:
    """
    Wraps a single MongoClient shared by every request.

    MongoClient is thread-safe and connects lazily, so creating it never
    blocks; use ping() to find out whether the server is reachable.
    """

    def __init__(self, uri: str, db_name: str, timeout_ms: int = 5000):
        self.client: MongoClient = MongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            server_api=ServerApi("1"),
        )
        self.db: Database = self.client[db_name]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(
            uri=settings.mongodb_uri,
            db_name=settings.mongodb_db_name,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    def ping(self) -> bool:
        """Check that the server answers, logging the failure if not"""
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        self.client.close()


# Set during application startup
mongo: Optional[MongoConnection] = None


def connect(settings: Settings) -> Optional[MongoConnection]:
    """
    Create the shared connection.

    A bad URI is logged rather than raised so the HTTP layer still starts;
    data requests then fail with a store error until it is fixed.
    """
    global mongo
    try:
        mongo = MongoConnection.from_settings(settings)
    except PyMongoError as e:
        logger.error(f"Could not create MongoDB client: {e}")
        mongo = None
        return None

    if mongo.ping():
        logger.info(f"Connected to MongoDB database '{settings.mongodb_db_name}'")
    else:
        logger.warning("MongoDB is unreachable - data requests will fail until it recovers")
    return mongo


def disconnect() -> None:
    global mongo
    if mongo is not None:
        mongo.close()
        mongo = None


def get_database() -> Database:
    """FastAPI dependency returning the storefront database"""
    if mongo is None:
        raise StoreError("Database connection is not available")
    return mongo.db
