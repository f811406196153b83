#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/parsers/base.py
"""Base class for document parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gdocs2html.ast import Document
from gdocs2html.exceptions import InvalidOptionsError
from gdocs2html.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for parsers producing a Docs AST.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Any) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : Any
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the document structure

        Raises
        ------
        InputError
            If the input cannot be loaded
        ParsingError
            If the input does not describe a valid document

        """
        raise NotImplementedError
