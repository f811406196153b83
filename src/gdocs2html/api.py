#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/api.py
"""Public conversion functions.

``to_ast`` parses a Docs API payload, ``to_html`` parses and renders it in one
call. Individual option fields may be passed as keyword arguments; each is
routed to the parser or renderer options class that declares it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from gdocs2html.ast import Document
from gdocs2html.exceptions import ValidationError
from gdocs2html.options.base import BaseParserOptions, BaseRendererOptions
from gdocs2html.options.gdocs import GdocsParserOptions
from gdocs2html.options.html import HtmlRendererOptions
from gdocs2html.parsers.gdocs import GdocsParser
from gdocs2html.renderers.html import HtmlRenderer
from gdocs2html.utils.inputs import DocumentSource

logger = logging.getLogger(__name__)


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Route keyword overrides to parser or renderer options by field name.

    Raises
    ------
    ValidationError
        If a keyword matches no option field

    """
    parser_fields = GdocsParserOptions.field_names()
    renderer_fields = HtmlRendererOptions.field_names()
    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in parser_fields:
            parser_kwargs[key] = value
        elif key in renderer_fields:
            renderer_kwargs[key] = value
        else:
            raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)
    return parser_kwargs, renderer_kwargs


def _merge_options(options: Optional[Any], options_class: type, overrides: dict[str, Any]) -> Any:
    if options is None:
        return options_class(**overrides) if overrides else None
    return options.create_updated(**overrides) if overrides else options


def to_ast(
    source: DocumentSource,
    *,
    parser_options: Optional[BaseParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Parse a Google Docs API document into an AST.

    Parameters
    ----------
    source : Mapping, str, Path, bytes, IO[bytes] or IO[str]
        Decoded ``documents.get`` response, JSON text or bytes, path to a
        saved response, or a stream
    parser_options : GdocsParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        AST Document node

    Raises
    ------
    InputError
        If the source cannot be loaded
    ParsingError
        If the payload is not a valid document

    Examples
    --------
        >>> from gdocs2html import to_ast
        >>> doc = to_ast("document.json", strict=False)

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    if renderer_kwargs:
        raise ValidationError(
            f"Renderer options are not accepted by to_ast: {', '.join(sorted(renderer_kwargs))}",
            parameter_name="kwargs",
        )
    parser = GdocsParser(_merge_options(parser_options, GdocsParserOptions, parser_kwargs))
    return parser.parse(source)


def to_html(
    source: Union[DocumentSource, Document],
    *,
    parser_options: Optional[BaseParserOptions] = None,
    renderer_options: Optional[BaseRendererOptions] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    **kwargs: Any,
) -> str:
    """Convert a Google Docs API document to an HTML fragment.

    Parameters
    ----------
    source : Mapping, str, Path, bytes, IO[bytes], IO[str] or Document
        Document payload in any form accepted by ``to_ast``, or an already
        parsed Document
    parser_options : GdocsParserOptions, optional
        Pre-configured parser options
    renderer_options : HtmlRendererOptions, optional
        Pre-configured renderer options
    output : str, Path, IO[bytes] or IO[str], optional
        Also write the fragment to this path or stream
    kwargs : Any
        Individual parser or renderer options, e.g. ``text_indent_ratio=2``

    Returns
    -------
    str
        HTML fragment

    Raises
    ------
    ValidationError
        If parser options are given together with an already parsed Document
    InputError
        If the source cannot be loaded
    ParsingError
        If the payload is not a valid document
    RenderingError
        If rendering fails

    Examples
    --------
        >>> from gdocs2html import to_html
        >>> html = to_html(service.documents().get(documentId=doc_id).execute())
        >>> html = to_html("document.json", table_class="doc-table")

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)

    if isinstance(source, Document):
        if parser_options is not None or parser_kwargs:
            raise ValidationError(
                "Parser options have no effect on an already parsed Document",
                parameter_name="parser_options",
                parameter_value=parser_options or parser_kwargs,
            )
        doc = source
    else:
        parser = GdocsParser(_merge_options(parser_options, GdocsParserOptions, parser_kwargs))
        doc = parser.parse(source)

    renderer = HtmlRenderer(_merge_options(renderer_options, HtmlRendererOptions, renderer_kwargs))
    html = renderer.render_to_string(doc)
    if output is not None:
        renderer.write_text_output(html, output)
        logger.debug("Wrote %d characters of HTML", len(html))
    return html
