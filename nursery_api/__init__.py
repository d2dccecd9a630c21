"""Fatihas Floral Fantasy - online nursery storefront API"""

__version__ = "1.0.0"
