#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/renderers/html_styles.py
"""Style lookup tables and CSS helpers for the HTML renderer.

Text formatting flags map to wrapping rules through a fixed table; paragraph,
run and cell-border styles resolve to lists of inline CSS declarations that the
caller joins with ``;``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

from gdocs2html.ast.nodes import ParagraphStyle, RgbColor, TableCellStyle, TextStyle
from gdocs2html.constants import (
    ALIGNMENT_CSS,
    DEFAULT_BASE_FONT_SIZE,
    DEFAULT_BASE_FONT_WEIGHT,
    DEFAULT_COLOR,
    DEFAULT_TEXT_INDENT_RATIO,
    HEADING_FONT_SIZE,
)
from gdocs2html.utils.html_utils import escape_attribute, format_number

FormatRule = Callable[[str, TextStyle, bool], str]


def _bold(text: str, text_style: TextStyle, escape: bool) -> str:
    return f"<strong>{text}</strong> "


def _underline(text: str, text_style: TextStyle, escape: bool) -> str:
    return f"<u>{text}</u> "


def _italic(text: str, text_style: TextStyle, escape: bool) -> str:
    return f"<i>{text}</i> "


def _link(text: str, text_style: TextStyle, escape: bool) -> str:
    url = text_style.link_url
    # Bookmark and heading links carry no URL
    if url is None:
        return text
    return f' <a href="{escape_attribute(url, enabled=escape)}">{text}</a> '


def _font_size(text: str, text_style: TextStyle, escape: bool) -> str:
    size = text_style.font_size
    if size is not None and size.magnitude == HEADING_FONT_SIZE:
        return f"<h2>{text}</h2>"
    return text


FORMAT_STYLES: Mapping[str, FormatRule] = MappingProxyType(
    {
        "bold": _bold,
        "underline": _underline,
        "italic": _italic,
        "link": _link,
        "fontSize": _font_size,
    }
)


def apply_text_formats(text: str, text_style: TextStyle, escape: bool = True) -> str:
    """Wrap text once per recognized, truthy style flag.

    Flags are applied in the order they appear on the style record, so the
    first flag listed ends up innermost.

    Parameters
    ----------
    text : str
        Already normalized run text
    text_style : TextStyle
        Style record of the run
    escape : bool, default True
        Escape link URLs

    Returns
    -------
    str
        Wrapped text

    """
    for key in text_style.keys():
        rule = FORMAT_STYLES.get(key)
        if rule is not None and text_style.get(key):
            text = rule(text, text_style, escape)
    return text


def get_run_style(
    text_style: TextStyle,
    base_font_size: str = DEFAULT_BASE_FONT_SIZE,
    base_font_weight: str = DEFAULT_BASE_FONT_WEIGHT,
) -> list[str]:
    """Return font declarations for a run that differ from the baseline."""
    styles = []
    size = text_style.font_size
    if size is not None and size.magnitude is not None:
        font_size = f"{format_number(size.magnitude)}{size.css_unit}"
        if font_size != base_font_size:
            styles.append(f"font-size: {font_size}")
    weight = text_style.font_weight
    if weight and format_number(weight) != base_font_weight:
        styles.append(f"font-weight: {format_number(weight)}")
    return styles


def get_node_style(
    paragraph_style: Optional[ParagraphStyle], indent_ratio: float = DEFAULT_TEXT_INDENT_RATIO
) -> list[str]:
    """Return indentation and alignment declarations for a paragraph.

    Parameters
    ----------
    paragraph_style : ParagraphStyle or None
        Style to resolve; None yields no declarations
    indent_ratio : float, default 4
        1 maps the indentation as stored; larger values shrink it

    Returns
    -------
    list of str
        CSS declarations without trailing semicolons

    """
    styles: list[str] = []
    if paragraph_style is None:
        return styles

    indent = paragraph_style.indent_start
    if indent is not None:
        # An omitted magnitude means zero
        magnitude = indent.magnitude or 0
        styles.append(f"text-indent: -{format_number(magnitude / indent_ratio)}{indent.css_unit}")
        styles.append(f"padding-left: {format_number(magnitude / (indent_ratio / 2))}{indent.css_unit}")

    alignment = ALIGNMENT_CSS.get(paragraph_style.alignment or "")
    if alignment:
        styles.append(f"text-align: {alignment}")
    return styles


def get_color(color: Optional[RgbColor]) -> str:
    """Translate an RGB color into a CSS color, ``#000`` when absent."""
    if color is None:
        return DEFAULT_COLOR
    return f"rgb({format_number(color.red)}, {format_number(color.green)}, {format_number(color.blue)})"


def get_border_style(cell_style: TableCellStyle) -> list[str]:
    """Return width, color and style declarations for each border on a cell."""
    styles = []
    for position, border in cell_style.borders.items():
        width = f"{format_number(border.width.magnitude or 0)}{border.width.css_unit}"
        styles.append(f"border-{position}-width: {width}")
        styles.append(f"border-{position}-color: {get_color(border.color)}")
        styles.append(f"border-{position}-style: solid")
    return styles
