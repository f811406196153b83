#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the gdocs2html parser and renderer."""

from gdocs2html.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from gdocs2html.options.gdocs import GdocsParserOptions
from gdocs2html.options.html import HtmlRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "GdocsParserOptions",
    "HtmlRendererOptions",
]
