#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from gdocs2html.constants import (
    DEFAULT_BASE_FONT_SIZE,
    DEFAULT_BASE_FONT_WEIGHT,
    DEFAULT_HTML_ESCAPE_HTML,
    DEFAULT_TABLE_CLASS,
    DEFAULT_TABLE_WRAPPER_CLASS,
    DEFAULT_TEXT_INDENT_RATIO,
)
from gdocs2html.options.base import BaseRendererOptions


# src/gdocs2html/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a Docs AST to an HTML fragment.

    Parameters
    ----------
    text_indent_ratio : float, default 4
        Divisor applied to paragraph ``indentStart`` values. 1 maps the source
        indentation as stored; larger values shrink it for confined widths.
    base_font_size : str, default "10pt"
        Font size that needs no inline declaration.
    base_font_weight : str, default "400"
        Font weight that needs no inline declaration.
    table_wrapper_class : str, default ""
        CSS class for the ``<div>`` around every table. Empty omits the attribute.
    table_class : str, default ""
        CSS class for every ``<table>``. Empty omits the attribute.
    escape_html : bool, default True
        Escape HTML special characters in run text and link URLs.

    """

    text_indent_ratio: float = field(
        default=DEFAULT_TEXT_INDENT_RATIO,
        metadata={"help": "Divisor for paragraph indentation (higher means less indent)"},
    )
    base_font_size: str = field(
        default=DEFAULT_BASE_FONT_SIZE,
        metadata={"help": "Font size rendered without an inline font-size declaration"},
    )
    base_font_weight: str = field(
        default=DEFAULT_BASE_FONT_WEIGHT,
        metadata={"help": "Font weight rendered without an inline font-weight declaration"},
    )
    table_wrapper_class: str = field(
        default=DEFAULT_TABLE_WRAPPER_CLASS,
        metadata={"help": "CSS class for the div wrapping each table"},
    )
    table_class: str = field(
        default=DEFAULT_TABLE_CLASS,
        metadata={"help": "CSS class for each table element"},
    )
    escape_html: bool = field(
        default=DEFAULT_HTML_ESCAPE_HTML,
        metadata={"help": "Escape HTML special characters in text content"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``text_indent_ratio`` is not a positive finite number.

        """
        if not math.isfinite(self.text_indent_ratio) or self.text_indent_ratio <= 0:
            raise ValueError(f"text_indent_ratio must be a positive finite number, got {self.text_indent_ratio}")
