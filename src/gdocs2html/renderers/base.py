#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/renderers/base.py
"""Base class for AST renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import TextIOBase
from pathlib import Path
from typing import IO, Union

from gdocs2html.ast import Document
from gdocs2html.exceptions import InvalidOptionsError
from gdocs2html.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Subclasses implement ``render_to_string``; ``render`` writes that string
    to a path or stream.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        raise NotImplementedError

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            File path, or a binary or text stream. Text is written as UTF-8.

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text to a file path or an open stream.

        Raises
        ------
        TypeError
            If output is neither a path nor a writable stream

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, TextIOBase) or getattr(output, "encoding", None) is not None:
            output.write(text)  # type: ignore[arg-type]
        elif hasattr(output, "write"):
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")
