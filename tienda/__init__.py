"""
Tienda Core Module

This package contains the storefront components:
- catalog: read-only product list
- cart: cart state engine, codec and storage backends
- services: money formatting and text escaping
- orders: order summary and messaging handoff
- routers: FastAPI presentation surface

Note: Imports are lazy so that importing the package does not touch
configuration or storage backends.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
