"""Markup escaping for catalog and user-supplied text."""

_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape_text(value) -> str:
    """Map & < > " ' to their entity forms; every other character is kept."""
    return str(value).translate(_ESCAPES)
