"""
Storefront Pages Router

Server-rendered storefront. Forms post to /cart/... and are redirected back
to the page (303), so every mutation is followed by a fresh render.
"""
from enum import Enum
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from tienda.cart import CartEngine, get_cart_engine
from tienda.config import Settings, get_settings
from tienda.errors import EmptyCartError
from tienda.orders import checkout
from tienda.services.text import escape_text
from .render import render_storefront

router = APIRouter(tags=["pages"])


class CartOperation(str, Enum):
    add = "add"
    increment = "increment"
    decrement = "decrement"
    remove = "remove"


def _back_to_store() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/", response_class=HTMLResponse)
async def storefront(
    q: Optional[str] = None,
    sort: Optional[str] = None,
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    return HTMLResponse(render_storefront(engine, settings, query=q, sort=sort))


@router.post("/cart/clear")
async def clear_cart_form(engine: CartEngine = Depends(get_cart_engine)):
    engine.clear()
    return _back_to_store()


@router.post("/cart/{product_id}/{operation}")
async def cart_form(
    product_id: int,
    operation: CartOperation,
    engine: CartEngine = Depends(get_cart_engine),
):
    getattr(engine, operation.value)(product_id)
    return _back_to_store()


@router.get("/checkout", response_class=HTMLResponse)
async def checkout_page(
    engine: CartEngine = Depends(get_cart_engine),
    settings: Settings = Depends(get_settings),
):
    """Order summary document opened in a new window by the storefront."""
    try:
        summary = checkout(engine, settings)
    except EmptyCartError as e:
        return HTMLResponse(
            f'<!doctype html><html><head><meta charset="utf-8"></head>'
            f"<body><p>{escape_text(e.message)}</p></body></html>",
            status_code=400,
        )
    return HTMLResponse(summary.document)
