"""
Money Utilities - whole-unit currency formatting.

The storefront currency has no minor unit: every amount is an int and is
rendered without decimals.
"""
from typing import Optional

DEFAULT_PREFIX = "$"
DEFAULT_SEPARATOR = "."


def format_money(
    amount: int,
    prefix: Optional[str] = None,
    separator: Optional[str] = None,
) -> str:
    """
    Format a whole-unit amount with a currency prefix and thousands groups.

    Digits are grouped in threes counted from the least-significant digit.

    Args:
        amount: Amount in whole currency units
        prefix: Currency prefix (default "$")
        separator: Group separator (default ".")

    Returns:
        Formatted string, e.g. 12000 -> "$12.000"
    """
    prefix = DEFAULT_PREFIX if prefix is None else prefix
    separator = DEFAULT_SEPARATOR if separator is None else separator

    value = int(amount)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,}".replace(",", separator)
    return f"{sign}{prefix}{grouped}"
