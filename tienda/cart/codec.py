"""Durable string form of a cart (JSON object keyed by product id)."""
import json
from typing import Optional

from tienda.logging import clip_for_log, get_logger
from .models import Cart

logger = get_logger(__name__)


def encode(cart: Cart) -> str:
    """Serialize a cart; the same cart always yields the same string."""
    return json.dumps(cart.to_dict(), ensure_ascii=False, separators=(",", ":"))


def decode(data: Optional[str]) -> Cart:
    """
    Parse a persisted cart.

    Absent or malformed input yields an empty cart; this never raises.
    """
    if not data:
        return Cart()

    try:
        return Cart.from_dict(json.loads(data))
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, RecursionError) as e:
        # RecursionError comes from deeply nested arrays or objects
        logger.warning(
            f"Corrupted cart data ({type(e).__name__}), starting with an empty cart: "
            f"{clip_for_log(data)}"
        )
        return Cart()
