#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/utils/__init__.py
"""Utility modules for the gdocs2html package."""

from gdocs2html.utils.html_utils import (
    class_attribute,
    escape_attribute,
    escape_html,
    format_number,
    style_attribute,
)

__all__ = [
    "class_attribute",
    "escape_attribute",
    "escape_html",
    "format_number",
    "style_attribute",
]
