"""
Common Error Constants and Exceptions

User-facing messages live here so the web surface and the order flow
show the same wording.
"""

# Cart messages
ERROR_EMPTY_CART = (
    "El carrito está vacío. Por favor, añade algunos productos antes de comprar."
)
ERROR_POPUP_BLOCKED = (
    "Por favor, permite las ventanas emergentes para ver el resumen de tu pedido "
    "y enviar por WhatsApp."
)
CONFIRM_CLEAR_CART = "¿Estás seguro de que quieres vaciar el carrito?"
NOTICE_CART_CLEARED = "Carrito vaciado"
NOTICE_ITEM_ADDED = "{name} agregado"

# Catalog errors
ERROR_DUPLICATE_PRODUCT_ID = "Duplicate product id in catalog: {product_id}"

# Storage errors
ERROR_STORAGE_UNAVAILABLE = "Cart storage unavailable"


class TiendaError(Exception):
    """Base class for storefront errors."""


class EmptyCartError(TiendaError):
    """Checkout was requested on an empty cart."""

    def __init__(self, message: str = ERROR_EMPTY_CART):
        super().__init__(message)
        self.message = message


class CartStorageError(TiendaError):
    """A storage backend failed to read or write the cart slot."""


class CatalogError(TiendaError):
    """The configured catalog is invalid."""
