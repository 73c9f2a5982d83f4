"""Cart package: models, codec, storage, and engine facade."""
from .models import CartEntry, Cart
from .codec import encode, decode
from .storage import CartStorage, MemoryCartStorage, FileCartStorage, RedisCartStorage, create_cart_storage
from .service import CartEngine, get_cart_engine

__all__ = [
    "CartEntry",
    "Cart",
    "encode",
    "decode",
    "CartStorage",
    "MemoryCartStorage",
    "FileCartStorage",
    "RedisCartStorage",
    "create_cart_storage",
    "CartEngine",
    "get_cart_engine",
]
