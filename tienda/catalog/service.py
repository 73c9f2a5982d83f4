"""Read-only product catalog with the storefront's search and sort queries."""
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from pydantic import TypeAdapter, ValidationError

from tienda.errors import CatalogError, ERROR_DUPLICATE_PRODUCT_ID
from tienda.logging import get_logger
from .data import DEFAULT_PRODUCTS
from .models import Product

logger = get_logger(__name__)

SORT_PRICE_ASC = "price-asc"
SORT_PRICE_DESC = "price-desc"

_product_list = TypeAdapter(List[Product])


class Catalog:
    """
    Immutable, ordered list of products.

    Supplied once at startup; the cart engine only reads it to validate ids
    and to copy name/price into new cart entries.
    """

    def __init__(self, products: Iterable[Product]):
        self._products = tuple(products)
        self._by_id = {}
        for product in self._products:
            if product.id in self._by_id:
                raise CatalogError(ERROR_DUPLICATE_PRODUCT_ID.format(product_id=product.id))
            self._by_id[product.id] = product

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id) -> bool:
        return product_id in self._by_id

    def get(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def search(self, query: Optional[str]) -> List[Product]:
        """Products whose name or description contains query (case-insensitive)."""
        needle = (query or "").strip().lower()
        if not needle:
            return list(self._products)
        return [
            p for p in self._products
            if needle in p.name.lower() or needle in p.description.lower()
        ]

    def sorted(self, order: Optional[str], products: Optional[Iterable[Product]] = None) -> List[Product]:
        """Sort by price; unknown orders keep catalog order."""
        items = list(self._products if products is None else products)
        if order == SORT_PRICE_ASC:
            items.sort(key=lambda p: p.price)
        elif order == SORT_PRICE_DESC:
            items.sort(key=lambda p: p.price, reverse=True)
        return items


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """
    Build a catalog from a JSON product list, or the built-in products.

    Raises:
        CatalogError: file unreadable, invalid products or duplicate ids
    """
    if path is None:
        return Catalog(_product_list.validate_python(DEFAULT_PRODUCTS))

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        products = _product_list.validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e

    logger.info(f"Loaded {len(products)} products from {path}")
    return Catalog(products)


_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get Catalog singleton built from settings."""
    global _catalog
    if _catalog is None:
        from tienda.config import get_settings
        _catalog = load_catalog(get_settings().catalog_path)
    return _catalog
