"""
Cart API Router

JSON endpoints over the cart engine. Every mutation returns the full cart
so the client can re-render without a second request.

Response format:
- Raw integer amounts for calculations
- *_display fields formatted for the UI
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from tienda.cart import CartEngine, get_cart_engine
from tienda.config import Settings, get_settings
from tienda.errors import EmptyCartError, NOTICE_CART_CLEARED, NOTICE_ITEM_ADDED
from tienda.logging import get_logger
from tienda.orders import checkout
from tienda.services.money import format_money

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["cart"])


def format_cart_response(
    engine: CartEngine,
    settings: Settings,
    notice: Optional[str] = None,
) -> dict:
    """Build cart payload with raw and display amounts."""
    def money(amount: int) -> str:
        return format_money(amount, settings.currency_prefix, settings.thousands_separator)

    total = engine.order_total()
    return {
        "items": [
            {
                "id": entry.id,
                "name": entry.name,
                "quantity": entry.quantity,
                "price": entry.price,
                "price_display": money(entry.price),
                "subtotal": entry.subtotal,
                "subtotal_display": money(entry.subtotal),
            }
            for entry in engine.entries()
        ],
        "item_count": engine.item_count(),
        "total": total,
        "total_display": money(total),
        "notice": notice,
    }


@router.get("/products")
async def list_products(
    q: Optional[str] = None,
    sort: Optional[str] = None,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Catalog filtered by q and ordered by sort (price-asc / price-desc)."""
    catalog = engine.catalog
    products = catalog.sorted(sort, catalog.search(q))
    return [
        {
            "id": p.id,
            "name": p.name,
            "description": p.description,
            "price": p.price,
            "price_display": format_money(p.price, settings.currency_prefix, settings.thousands_separator),
        }
        for p in products
    ]


@router.get("/cart")
async def get_cart(
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Current cart."""
    return format_cart_response(engine, settings)


@router.post("/cart/clear")
async def clear_cart(
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Empty the cart. The client is expected to confirm with the user first."""
    engine.clear()
    return format_cart_response(engine, settings, notice=NOTICE_CART_CLEARED)


@router.post("/cart/{product_id}/add")
async def add_to_cart(
    product_id: int,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Add one unit. Unknown products leave the cart untouched."""
    notice = None
    if engine.add(product_id):
        notice = NOTICE_ITEM_ADDED.format(name=engine.get(product_id).name)
    return format_cart_response(engine, settings, notice=notice)


@router.post("/cart/{product_id}/increment")
async def increment_cart_item(
    product_id: int,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    engine.increment(product_id)
    return format_cart_response(engine, settings)


@router.post("/cart/{product_id}/decrement")
async def decrement_cart_item(
    product_id: int,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Remove one unit; the line disappears at zero."""
    engine.decrement(product_id)
    return format_cart_response(engine, settings)


@router.delete("/cart/{product_id}")
async def remove_cart_item(
    product_id: int,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    engine.remove(product_id)
    return format_cart_response(engine, settings)


@router.post("/checkout")
async def checkout_cart(
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Order summary and WhatsApp link for the current cart."""
    try:
        summary = checkout(engine, settings)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return summary.to_dict()
