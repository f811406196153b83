"""gdocs2html - convert Google Docs API documents to HTML fragments.

gdocs2html takes the structured document returned by the Google Docs API
(``documents.get``) and produces an HTML fragment styled with inline ``style``
attributes, ready to be embedded in an existing page.

The conversion runs in two stages:

1. ``GdocsParser`` turns the API payload into a typed AST (``gdocs2html.ast``),
   checking the structure it relies on.
2. ``HtmlRenderer`` walks the AST once and emits HTML, reconstructing list
   containers from a precomputed boundary map.

Examples
--------
Convert a document fetched with the Docs API client:

    >>> from gdocs2html import to_html
    >>> payload = service.documents().get(documentId=doc_id).execute()
    >>> html = to_html(payload)

Convert a saved response with custom table classes:

    >>> html = to_html("document.json", table_wrapper_class="table-wrap", table_class="table")

Work with the AST directly:

    >>> from gdocs2html import to_ast
    >>> from gdocs2html.renderers import HtmlRenderer
    >>> doc = to_ast("document.json")
    >>> html = HtmlRenderer().render_to_string(doc)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from gdocs2html.api import to_ast, to_html
from gdocs2html.exceptions import (
    Gdocs2HtmlError,
    InputError,
    InvalidOptionsError,
    MalformedDocumentError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from gdocs2html.options import GdocsParserOptions, HtmlRendererOptions

__version__ = "0.1.0"

__all__ = [
    "Gdocs2HtmlError",
    "GdocsParserOptions",
    "HtmlRendererOptions",
    "InputError",
    "InvalidOptionsError",
    "MalformedDocumentError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
    "__version__",
    "to_ast",
    "to_html",
]
