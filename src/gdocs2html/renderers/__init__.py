#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning the Docs AST into output formats."""

from gdocs2html.renderers.base import BaseRenderer
from gdocs2html.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer"]
