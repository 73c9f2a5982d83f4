"""Checkout: turn the current cart into an order summary without changing it."""
from datetime import datetime
from typing import Optional

from tienda.cart import CartEngine
from tienda.config import Settings, get_settings
from tienda.errors import EmptyCartError
from tienda.logging import get_logger
from .summary import OrderSummary, build_order_summary

logger = get_logger(__name__)


def checkout(
    engine: CartEngine,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> OrderSummary:
    """
    Produce the order summary for the engine's cart.

    The cart is left as it is; sending the WhatsApp message is up to the user.

    Raises:
        EmptyCartError: the cart has no entries (checked before anything is built)
    """
    if engine.is_empty():
        logger.info("Checkout refused: cart is empty")
        raise EmptyCartError()

    settings = settings or get_settings()
    summary = build_order_summary(
        engine.entries(),
        engine.order_total(),
        shop_name=settings.shop_name,
        whatsapp_number=settings.whatsapp_number,
        currency_prefix=settings.currency_prefix,
        separator=settings.thousands_separator,
        now=now,
    )
    logger.info(f"Checkout summary built: {len(summary.lines)} lines, total {summary.total}")
    return summary
