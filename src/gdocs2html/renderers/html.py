#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/renderers/html.py
"""HTML rendering from the Docs AST.

This module provides the HtmlRenderer class which turns a parsed Google Docs
document into a flat HTML fragment. Presentation uses inline ``style``
attributes only, so the fragment can be dropped into an existing page.

List containers are not part of the Docs model. They are reconstructed in a
pre-pass (see ``gdocs2html.ast.lists``) and interleaved while the body is
walked once, in order.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from gdocs2html.ast.lists import build_list_boundaries
from gdocs2html.ast.nodes import (
    Document,
    Paragraph,
    SectionBreak,
    Table,
    TableCell,
    TableColumn,
    TableRow,
    TextRun,
)
from gdocs2html.ast.visitors import NodeVisitor
from gdocs2html.constants import LINE_BREAK_TAG, TABLE_INLINE_STYLE, TRIM_CHARACTERS, WIDTH_TYPE_FIXED
from gdocs2html.exceptions import Gdocs2HtmlError, RenderingError
from gdocs2html.options.html import HtmlRendererOptions
from gdocs2html.renderers.base import BaseRenderer
from gdocs2html.renderers.html_styles import apply_text_formats, get_border_style, get_node_style, get_run_style
from gdocs2html.utils.html_utils import class_attribute, escape_html, format_number, style_attribute

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\r\n|\n|\r")


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a Docs AST to an HTML fragment.

    Every visit method returns the HTML for its node. A renderer keeps no state
    between calls, so one instance can convert any number of documents.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from gdocs2html.ast import Document, Paragraph, TextRun
        >>> from gdocs2html.renderers.html import HtmlRenderer
        >>> doc = Document(children=[Paragraph(elements=[TextRun(content="Hello\\n")], start_index=1)])
        >>> HtmlRenderer().render_to_string(doc)
        '<p>Hello</p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an HTML fragment.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        MalformedDocumentError
            If list structure cannot be reconstructed
        RenderingError
            If rendering fails for any other reason

        """
        try:
            return doc.accept(self)
        except Gdocs2HtmlError:
            raise
        except Exception as e:
            raise RenderingError(
                f"Failed to render document: {e}", rendering_stage="html_rendering", original_error=e
            ) from e

    # ------------------------------------------------------------------
    # Document and blocks
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render all body nodes, opening and closing lists around list items."""
        boundaries = build_list_boundaries(node.children, node.lists)
        parts = []
        for child in node.children:
            parts.append(boundaries.opening_at(child.start_index))
            parts.append(child.accept(self) or "")
            parts.append(boundaries.closing_at(child.start_index))
        logger.debug(
            "Rendered %d body nodes (%d lists opened)", len(node.children), len(boundaries.open_tags)
        )
        return "".join(parts)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a body paragraph as ``<p>``, or ``<li>`` when it carries a bullet."""
        return self._render_paragraph(node, "li" if node.bullet is not None else "p")

    def visit_section_break(self, node: SectionBreak) -> str:
        """Section breaks have no HTML representation."""
        return ""

    def _render_paragraph(self, node: Paragraph, block_element: str) -> str:
        # A lone run renders as block content, several runs as inline spans
        run_wrapper = "div" if len(node.elements) == 1 else "span"
        styles = get_node_style(node.style, self.options.text_indent_ratio)
        content = "".join(self._render_element(element, run_wrapper) for element in node.elements)
        return f"<{block_element}{style_attribute(styles)}>{content}</{block_element}>"

    def _render_element(self, element: object, run_wrapper: str) -> str:
        if isinstance(element, TextRun):
            return self.render_text_run(element, run_wrapper) or ""
        return ""

    # ------------------------------------------------------------------
    # Text runs
    # ------------------------------------------------------------------

    def visit_text_run(self, node: TextRun) -> Optional[str]:
        """Render a text run with the default ``p`` wrapper."""
        return self.render_text_run(node)

    def render_text_run(self, node: TextRun, wrapper_element: Optional[str] = "p") -> Optional[str]:
        """Render one text run.

        Parameters
        ----------
        node : TextRun
            Run to render
        wrapper_element : str or None, default "p"
            Element that carries inline font declarations. None (or an empty
            string) returns the normalized text without any formatting.

        Returns
        -------
        str or None
            None when the run is empty after removing line breaks and
            surrounding whitespace, otherwise the rendered HTML

        """
        content = _NEWLINES.sub("", node.content)
        content = escape_html(content, enabled=self.options.escape_html)
        content = content.replace("\v", LINE_BREAK_TAG).strip(TRIM_CHARACTERS)

        if not content:
            return None

        if not wrapper_element:
            return content

        content = apply_text_formats(content, node.text_style, escape=self.options.escape_html)
        styles = get_run_style(node.text_style, self.options.base_font_size, self.options.base_font_weight)
        if styles:
            return f"<{wrapper_element}{style_attribute(styles)}>{content}</{wrapper_element}>"
        return content

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def visit_table(self, node: Table) -> str:
        """Render a table inside its wrapper ``<div>``."""
        head = self._render_table_head(node.columns)
        body = "".join(row.accept(self) for row in node.rows)
        return (
            f"<div{class_attribute(self.options.table_wrapper_class)}>"
            f'<table style="{TABLE_INLINE_STYLE}"{class_attribute(self.options.table_class)}>'
            f"{head}<tbody>{body}</tbody>"
            "</table></div>"
        )

    def _render_table_head(self, columns: list[TableColumn]) -> str:
        cells = []
        for column in columns:
            if column.width_type == WIDTH_TYPE_FIXED and column.width is not None:
                width = f"{format_number(column.width.magnitude or 0)}{column.width.css_unit}"
                cells.append(f'<th width="{width}"></th>')
            else:
                cells.append("<th></th>")
        return f"<thead><tr>{''.join(cells)}</tr></thead>"

    def visit_table_row(self, node: TableRow) -> str:
        """Render a row, skipping cells covered by a preceding colspan."""
        cells = []
        covered = 0
        for cell in node.cells:
            if covered > 0:
                covered -= 1
                continue
            if cell.style.column_span > 1:
                covered = cell.style.column_span - 1
            cells.append(cell.accept(self))
        return f"<tr>{''.join(cells)}</tr>"

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a cell with its span attributes and border styles."""
        props = []
        if node.style.row_span > 1:
            props.append(f'rowspan="{node.style.row_span}"')
        if node.style.column_span > 1:
            props.append(f'colspan="{node.style.column_span}"')
        styles = get_border_style(node.style)
        if styles:
            props.append(f'style="{";".join(styles)}"')

        content = "".join(
            self._render_paragraph(line, "div") if isinstance(line, Paragraph) else "" for line in node.content
        )
        if props:
            return f"<td {' '.join(props)}>{content}</td>"
        return f"<td>{content}</td>"
