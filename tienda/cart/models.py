"""Cart models with whole-unit integer pricing."""
from dataclasses import dataclass, field, replace
from typing import Dict, List


def _require_int(value, name: str) -> int:
    # bool is an int subclass; a persisted true/false is never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class CartEntry:
    """
    Single line in the cart.

    name and price are copied from the catalog when the entry is created and
    are never refreshed afterwards.
    """
    id: int
    name: str
    price: int
    quantity: int

    def __post_init__(self):
        _require_int(self.id, "id")
        _require_int(self.price, "price")
        _require_int(self.quantity, "quantity")
        if not isinstance(self.name, str):
            raise TypeError("name must be a string")
        if self.price < 0:
            raise ValueError("price must be non-negative")
        if self.quantity < 1:
            raise ValueError("quantity must be a positive integer")

    @property
    def subtotal(self) -> int:
        """Line subtotal: quantity * unit price."""
        return self.quantity * self.price

    def with_quantity(self, quantity: int) -> "CartEntry":
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict:
        """Convert to the persisted dictionary shape."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "qty": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartEntry":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            price=data["price"],
            quantity=data["qty"],
        )


@dataclass
class Cart:
    """Mapping of product id to cart entry, in insertion order."""
    entries: Dict[int, CartEntry] = field(default_factory=dict)

    def __post_init__(self):
        for key, entry in self.entries.items():
            if key != entry.id:
                raise ValueError(f"Cart key {key!r} does not match entry id {entry.id!r}")

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, product_id) -> bool:
        return product_id in self.entries

    def get(self, product_id: int):
        return self.entries.get(product_id)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def item_count(self) -> int:
        """Total number of units in cart."""
        return sum(entry.quantity for entry in self.entries.values())

    @property
    def total(self) -> int:
        """Order total: sum of line subtotals."""
        return sum(entry.subtotal for entry in self.entries.values())

    def snapshot(self) -> List[CartEntry]:
        """Entries as a list; entries are immutable so the list is a safe copy."""
        return list(self.entries.values())

    def copy(self) -> "Cart":
        return Cart(entries=dict(self.entries))

    def to_dict(self) -> dict:
        """Convert to dictionary keyed by the product id as a string."""
        return {str(product_id): entry.to_dict() for product_id, entry in self.entries.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "Cart":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError("cart must be a JSON object")
        entries = {}
        for key, value in data.items():
            if not isinstance(value, dict):
                raise TypeError("cart entry must be a JSON object")
            entry = CartEntry.from_dict(value)
            if str(entry.id) != key:
                raise ValueError(f"Cart key {key!r} does not match entry id {entry.id!r}")
            entries[entry.id] = entry
        return cls(entries=entries)
