"""Catalog package: product model, built-in products and read-only catalog."""
from .models import Product
from .service import Catalog, load_catalog, get_catalog

__all__ = [
    "Product",
    "Catalog",
    "load_catalog",
    "get_catalog",
]
