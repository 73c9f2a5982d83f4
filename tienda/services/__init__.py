"""Formatting helpers shared by the cart, the order summary and the web surface."""
from .money import format_money
from .text import escape_text

__all__ = ["format_money", "escape_text"]
