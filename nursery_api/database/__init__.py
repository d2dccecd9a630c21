# Database modules

from .connection import MongoConnection, connect, disconnect, get_database
from .products import ProductDatabase
from .categories import CategoryDatabase
from .payments import PaymentDatabase

__all__ = [
    "MongoConnection",
    "connect",
    "disconnect",
    "get_database",
    "ProductDatabase",
    "CategoryDatabase",
    "PaymentDatabase",
]
