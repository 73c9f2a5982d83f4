"""Server-side HTML fragments for the storefront page."""
import json
from typing import Iterable, Optional

from tienda.cart import CartEngine
from tienda.catalog import Product
from tienda.catalog.service import SORT_PRICE_ASC, SORT_PRICE_DESC
from tienda.config import Settings
from tienda.errors import CONFIRM_CLEAR_CART, ERROR_POPUP_BLOCKED
from tienda.services.money import format_money
from tienda.services.text import escape_text

SORT_OPTIONS = (
    ("", "Destacados"),
    (SORT_PRICE_ASC, "Precio: menor a mayor"),
    (SORT_PRICE_DESC, "Precio: mayor a menor"),
)

_CHECKOUT_SCRIPT = """
<script>
document.getElementById('checkoutBtn').addEventListener('click', async () => {
  // Must open before the first await to count as part of the click
  const summaryWindow = window.open('', '_blank');
  const res = await fetch('/api/checkout', {method: 'POST'});
  const data = await res.json();
  if (!res.ok) {
    if (summaryWindow) summaryWindow.close();
    alert(data.detail);
    return;
  }
  if (summaryWindow) {
    summaryWindow.location.href = '/checkout';
  } else {
    alert(%(popup_message)s);
    window.location.href = data.whatsapp_url;
  }
});
</script>
"""


def _money(amount: int, settings: Settings) -> str:
    return format_money(amount, settings.currency_prefix, settings.thousands_separator)


def _confirm_attr() -> str:
    return escape_text(f"return confirm({json.dumps(CONFIRM_CLEAR_CART)})")


def render_products(products: Iterable[Product], settings: Settings) -> str:
    cards = []
    for p in products:
        name = escape_text(p.name)
        cards.append(
            '<article class="card">'
            '<div class="thumb" aria-hidden="true">🎁</div>'
            f'<div class="name">{name}</div>'
            f'<div class="small">{escape_text(p.description)}</div>'
            '<div class="meta">'
            f'<div class="price">{_money(p.price, settings)}</div>'
            f'<form method="post" action="/cart/{p.id}/add">'
            f'<button class="add" aria-label="Añadir {name} al carrito">Añadir</button>'
            "</form></div></article>"
        )
    return f'<section id="productGrid">{"".join(cards)}</section>'


def render_cart(engine: CartEngine, settings: Settings) -> str:
    rows = []
    for entry in engine.entries():
        name = escape_text(entry.name)
        rows.append(
            '<div class="cart-item">'
            f'<div><div class="item-name">{name}</div>'
            f'<div class="small">{entry.quantity} x {_money(entry.price, settings)}</div></div>'
            '<div class="qty">'
            f'<form method="post" action="/cart/{entry.id}/decrement">'
            f'<button aria-label="Disminuir cantidad de {name}">-</button></form>'
            f'<div class="small">{entry.quantity}</div>'
            f'<form method="post" action="/cart/{entry.id}/increment">'
            f'<button aria-label="Aumentar cantidad de {name}">+</button></form>'
            "</div>"
            f'<form method="post" action="/cart/{entry.id}/remove">'
            f'<button aria-label="Eliminar {name} del carrito">Eliminar</button></form>'
            "</div>"
        )
    return (
        '<aside id="cartPanel">'
        f'<div id="cartList">{"".join(rows)}</div>'
        f'<div>Total: <span id="total">{_money(engine.order_total(), settings)}</span></div>'
        f'<form method="post" action="/cart/clear" onsubmit="{_confirm_attr()}">'
        '<button id="emptyBtn">Vaciar carrito</button></form>'
        '<button id="checkoutBtn">Comprar</button>'
        "</aside>"
    )


def render_storefront(
    engine: CartEngine,
    settings: Settings,
    query: Optional[str] = None,
    sort: Optional[str] = None,
) -> str:
    """Full page: header with cart badge, search/sort form, products, cart."""
    catalog = engine.catalog
    products = catalog.sorted(sort, catalog.search(query))
    options = "".join(
        f'<option value="{value}"{" selected" if value == (sort or "") else ""}>{label}</option>'
        for value, label in SORT_OPTIONS
    )
    shop = escape_text(settings.shop_name)
    checkout_script = _CHECKOUT_SCRIPT % {"popup_message": json.dumps(ERROR_POPUP_BLOCKED)}
    return (
        '<!doctype html><html lang="es"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width,initial-scale=1">'
        f"<title>{shop}</title></head><body>"
        f"<header><h1>{shop}</h1>"
        f'<span>Carrito: <span id="cartCount">{engine.item_count()}</span></span>'
        f'<form method="post" action="/cart/clear" onsubmit="{_confirm_attr()}">'
        '<button id="clearBtn">Vaciar</button></form></header>'
        '<form method="get" action="/">'
        f'<input id="search" name="q" value="{escape_text(query or "")}" placeholder="Buscar">'
        f'<select id="sort" name="sort">{options}</select>'
        "<button>Filtrar</button></form>"
        f"{render_products(products, settings)}"
        f"{render_cart(engine, settings)}"
        f"{checkout_script}"
        "</body></html>"
    )
