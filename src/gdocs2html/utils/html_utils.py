#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Any, Iterable


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``&``, ``<`` and ``>`` in text content when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=False)


def escape_attribute(value: str, *, enabled: bool = True) -> str:
    """Escape a value for use inside a double-quoted attribute when enabled."""
    if not enabled:
        return value
    return _html_escape(value, quote=True)


def format_number(value: Any) -> str:
    """Format a number the way a JavaScript template literal would.

    Integral floats drop their fractional part, so ``9.0`` becomes ``9``.

    Examples
    --------
        >>> format_number(36 / 4)
        '9'
        >>> format_number(4.5)
        '4.5'

    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def style_attribute(declarations: Iterable[str]) -> str:
    """Build a leading-space ``style`` attribute, or an empty string when there is nothing to declare."""
    joined = ";".join(declarations)
    return f' style="{joined}"' if joined else ""


def class_attribute(css_class: str) -> str:
    """Build a leading-space ``class`` attribute, or an empty string for an empty class."""
    return f' class="{escape_attribute(css_class)}"' if css_class else ""
