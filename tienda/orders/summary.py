"""
Order summary: printable HTML table plus a pre-filled WhatsApp message.

Both outputs are built from a cart snapshot and never touch cart state.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Iterable, List, Optional
from urllib.parse import quote

from tienda.cart.models import CartEntry
from tienda.errors import EmptyCartError
from tienda.services.money import format_money
from tienda.services.text import escape_text

WHATSAPP_BASE_URL = "https://wa.me/"

# Characters encodeURIComponent leaves untouched besides letters, digits and -_.~
_URI_COMPONENT_SAFE = "!*'()"

_MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


@dataclass(frozen=True)
class SummaryLine:
    name: str
    quantity: int
    unit_price: int

    @property
    def subtotal(self) -> int:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class OrderSummary:
    """Everything the checkout hands off: table data, document and message link."""
    shop_name: str
    lines: List[SummaryLine]
    total: int
    created_at: datetime
    currency_prefix: str = "$"
    separator: str = "."
    whatsapp_number: str = ""
    document: str = field(default="", repr=False)
    message: str = field(default="", repr=False)

    @property
    def whatsapp_url(self) -> str:
        return f"{WHATSAPP_BASE_URL}{self.whatsapp_number}?text={self.message}"

    def money(self, amount: int) -> str:
        return format_money(amount, self.currency_prefix, self.separator)

    def to_dict(self) -> dict:
        return {
            "shop_name": self.shop_name,
            "created_at": self.created_at.isoformat(),
            "lines": [
                {
                    "name": line.name,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                    "unit_price_display": self.money(line.unit_price),
                    "subtotal": line.subtotal,
                    "subtotal_display": self.money(line.subtotal),
                }
                for line in self.lines
            ],
            "total": self.total,
            "total_display": self.money(self.total),
            "whatsapp_url": self.whatsapp_url,
        }


def format_date_es(moment: datetime) -> str:
    """Long Spanish date, e.g. "24 de diciembre de 2025, 18:30:05"."""
    return (
        f"{moment.day} de {_MONTHS_ES[moment.month - 1]} de {moment.year}, "
        f"{moment:%H:%M:%S}"
    )


def render_summary_document(summary: OrderSummary) -> str:
    """Standalone HTML page with the order table and the WhatsApp button."""
    rows = "".join(
        f"<tr><td>{escape_text(line.name)}</td><td>{line.quantity}</td>"
        f"<td>{summary.money(line.unit_price)}</td><td>{summary.money(line.subtotal)}</td></tr>"
        for line in summary.lines
    )
    shop = escape_text(summary.shop_name)
    return (
        '<!doctype html><html><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width,initial-scale=1">'
        "<title>Resumen de pedido</title></head>"
        '<body class="checkout-summary">'
        f"<h1>Resumen de pedido - {shop}</h1>"
        f'<p class="small">Fecha: {escape_text(format_date_es(summary.created_at))}</p>'
        "<table><thead><tr><th>Producto</th><th>Cantidad</th>"
        "<th>Precio Unitario</th><th>Subtotal</th></tr></thead>"
        f"<tbody>{rows}</tbody>"
        f'<tfoot><tr><td colspan="3">Total</td><td>{summary.money(summary.total)}</td></tr></tfoot>'
        "</table>"
        "<p>Gracias por su compra. Para enviar este pedido por WhatsApp haga clic en el botón abajo.</p>"
        f'<p><a id="wa-link" href="{escape_text(summary.whatsapp_url)}" target="_blank" class="button">'
        "Enviar pedido por WhatsApp</a></p>"
        '<p><button id="close-summary-window" class="button" onclick="window.close()">'
        "Cerrar Resumen</button></p>"
        "</body></html>"
    )


def compose_message(summary: OrderSummary) -> str:
    """Plain-text WhatsApp message (before percent-encoding)."""
    parts = [
        f"¡Hola! Me gustaría hacer un pedido de la {summary.shop_name}:",
        "",
        "*Resumen del Pedido:*",
    ]
    parts.extend(
        f"{line.quantity} x {line.name} - {summary.money(line.subtotal)}"
        for line in summary.lines
    )
    parts.extend([
        "",
        f"*Total:* {summary.money(summary.total)}",
        "",
        "Por favor, confírmame la disponibilidad y los detalles de entrega. ¡Gracias!",
    ])
    return "\n".join(parts)


def encode_message(text: str) -> str:
    """Percent-encode a message the way encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_order_summary(
    entries: Iterable[CartEntry],
    total: int,
    *,
    shop_name: str,
    whatsapp_number: str,
    currency_prefix: str = "$",
    separator: str = ".",
    now: Optional[datetime] = None,
) -> OrderSummary:
    """
    Build the order summary for a cart snapshot.

    Raises:
        EmptyCartError: entries is empty; nothing is produced
    """
    lines = [
        SummaryLine(name=entry.name, quantity=entry.quantity, unit_price=entry.price)
        for entry in entries
    ]
    if not lines:
        raise EmptyCartError()

    summary = OrderSummary(
        shop_name=shop_name,
        lines=lines,
        total=total,
        created_at=now or datetime.now(),
        currency_prefix=currency_prefix,
        separator=separator,
        whatsapp_number=whatsapp_number,
    )
    message = encode_message(compose_message(summary))
    summary = replace(summary, message=message)
    return replace(summary, document=render_summary_document(summary))
