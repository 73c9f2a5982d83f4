"""Cart engine: the single owner of cart state."""
from typing import List, Optional

from tienda.catalog import Catalog
from tienda.errors import CartStorageError
from tienda.logging import clip_for_log, get_logger
from .codec import decode, encode
from .models import Cart, CartEntry
from .storage import CartStorage

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "tienda_cart"


class CartEngine:
    """
    Owns the cart and funnels every change through five operations.

    Contract:
    - add/increment/decrement/remove/clear are durable writes: when a call
      changes the cart, the encoded cart is written to storage before it
      returns.
    - Calls that change nothing (unknown id, absent entry) are silent no-ops
      and do not write.
    - Storage failures are logged; the in-memory cart stays authoritative.
    """

    def __init__(
        self,
        catalog: Catalog,
        storage: CartStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ):
        self.catalog = catalog
        self.storage = storage
        self.storage_key = storage_key
        self._cart = self._load()

    def _load(self) -> Cart:
        """Read the persisted slot once; anything unusable becomes an empty cart."""
        try:
            raw = self.storage.read(self.storage_key)
        except CartStorageError as e:
            logger.error(f"Failed to read cart, starting empty: {e}")
            return Cart()

        cart = decode(raw)
        unknown = [product_id for product_id in cart.entries if product_id not in self.catalog]
        if unknown:
            logger.warning(f"Dropping cart entries for products not in catalog: {unknown}")
            for product_id in unknown:
                del cart.entries[product_id]
        return cart

    def _persist(self) -> None:
        try:
            self.storage.write(self.storage_key, encode(self._cart))
        except CartStorageError as e:
            logger.error(f"Failed to persist cart: {e}")

    # ==================== MUTATIONS ====================

    def add(self, product_id: int) -> bool:
        """Add one unit of a catalog product; durable write. Unknown ids are ignored."""
        product = self.catalog.get(product_id)
        if product is None:
            logger.debug(f"Ignoring add for unknown product {product_id!r}")
            return False

        entry = self._cart.entries.get(product_id)
        if entry is None:
            # Snapshot of name/price taken now, never refreshed
            entry = CartEntry(id=product.id, name=product.name, price=product.price, quantity=1)
        else:
            entry = entry.with_quantity(entry.quantity + 1)
        self._cart.entries[product_id] = entry

        logger.debug(f"Added {clip_for_log(product.name)} (qty {entry.quantity})")
        self._persist()
        return True

    def increment(self, product_id: int) -> bool:
        """Increase an existing entry by one; durable write."""
        entry = self._cart.entries.get(product_id)
        if entry is None:
            logger.debug(f"Ignoring increment for absent entry {product_id!r}")
            return False

        self._cart.entries[product_id] = entry.with_quantity(entry.quantity + 1)
        self._persist()
        return True

    def decrement(self, product_id: int) -> bool:
        """Decrease an existing entry by one, removing it at zero; durable write."""
        entry = self._cart.entries.get(product_id)
        if entry is None:
            logger.debug(f"Ignoring decrement for absent entry {product_id!r}")
            return False

        quantity = entry.quantity - 1
        if quantity <= 0:
            del self._cart.entries[product_id]
        else:
            self._cart.entries[product_id] = entry.with_quantity(quantity)
        self._persist()
        return True

    def remove(self, product_id: int) -> bool:
        """Delete an entry regardless of quantity; durable write."""
        if product_id not in self._cart.entries:
            return False

        del self._cart.entries[product_id]
        self._persist()
        return True

    def clear(self) -> None:
        """Empty the cart; durable write. Confirmation belongs to the caller."""
        self._cart.entries.clear()
        self._persist()

    # ==================== QUERIES ====================

    def get(self, product_id: int) -> Optional[CartEntry]:
        return self._cart.get(product_id)

    def entries(self) -> List[CartEntry]:
        """Snapshot of entries in insertion order."""
        return self._cart.snapshot()

    def item_count(self) -> int:
        return self._cart.item_count

    def order_total(self) -> int:
        return self._cart.total

    def is_empty(self) -> bool:
        return self._cart.is_empty

    def snapshot(self) -> Cart:
        """Independent copy of the whole cart."""
        return self._cart.copy()


# Singleton instance
_cart_engine: Optional[CartEngine] = None


def get_cart_engine() -> CartEngine:
    """Get CartEngine singleton wired from settings."""
    global _cart_engine
    if _cart_engine is None:
        from tienda.catalog import get_catalog
        from tienda.config import get_settings
        from .storage import create_cart_storage

        settings = get_settings()
        _cart_engine = CartEngine(
            catalog=get_catalog(),
            storage=create_cart_storage(settings),
            storage_key=settings.cart_storage_key,
        )
    return _cart_engine
