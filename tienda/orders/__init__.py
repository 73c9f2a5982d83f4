"""Order summary and messaging handoff."""
from .summary import OrderSummary, SummaryLine, build_order_summary
from .service import checkout

__all__ = [
    "OrderSummary",
    "SummaryLine",
    "build_order_summary",
    "checkout",
]
