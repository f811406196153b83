#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning source payloads into the Docs AST."""

from gdocs2html.parsers.base import BaseParser
from gdocs2html.parsers.gdocs import GdocsParser

__all__ = ["BaseParser", "GdocsParser"]
