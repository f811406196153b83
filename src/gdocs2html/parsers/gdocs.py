#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/parsers/gdocs.py
"""Google Docs API payload to AST converter.

This module turns the JSON document returned by ``documents.get`` into the
typed node tree in ``gdocs2html.ast``. The payload is checked while it is
walked: in strict mode a missing required structure raises
MalformedDocumentError naming its location, in lenient mode the parser logs a
warning and substitutes a default.

Protobuf JSON omits zero-valued fields, so absent offsets, magnitudes, color
components and nesting levels read as 0.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from gdocs2html.ast.nodes import (
    BlockNode,
    Bullet,
    CellBorder,
    Dimension,
    Document,
    InlineNode,
    ListDefinition,
    NestingLevel,
    Node,
    Paragraph,
    ParagraphStyle,
    RgbColor,
    SectionBreak,
    Table,
    TableCell,
    TableCellStyle,
    TableColumn,
    TableRow,
    TextRun,
    TextStyle,
    UnsupportedBlock,
    UnsupportedInline,
)
from gdocs2html.constants import BODY_NODE_KINDS, CELL_BORDER_KEYS
from gdocs2html.exceptions import Gdocs2HtmlError, MalformedDocumentError, ParsingError
from gdocs2html.options.gdocs import GdocsParserOptions
from gdocs2html.parsers.base import BaseParser
from gdocs2html.utils.inputs import DocumentSource, load_document_payload

logger = logging.getLogger(__name__)

# Keys shared by every structural element; never a variant tag
_POSITION_KEYS = frozenset({"startIndex", "endIndex", "paragraphStyle"})


def _variant_kind(node: Mapping[str, Any]) -> str:
    return next((key for key in node if key not in _POSITION_KEYS), "")


def _dimension(value: Optional[Mapping[str, Any]]) -> Dimension:
    value = value or {}
    return Dimension(magnitude=value.get("magnitude"), unit=value.get("unit", ""))


def _rgb_color(optional_color: Optional[Mapping[str, Any]]) -> Optional[RgbColor]:
    """Read ``{"color": {"rgbColor": {...}}}``; None unless components are present."""
    color = (optional_color or {}).get("color") or {}
    rgb = color.get("rgbColor")
    if not rgb:
        return None
    return RgbColor(red=rgb.get("red", 0), green=rgb.get("green", 0), blue=rgb.get("blue", 0))


def _paragraph_style(value: Optional[Mapping[str, Any]]) -> Optional[ParagraphStyle]:
    if value is None:
        return None
    indent = value.get("indentStart")
    return ParagraphStyle(
        indent_start=_dimension(indent) if indent is not None else None,
        alignment=value.get("alignment"),
    )


class GdocsParser(BaseParser):
    """Convert Google Docs API documents to AST Document objects.

    Parameters
    ----------
    options : GdocsParserOptions or None
        Parser options

    Examples
    --------
    Parse a document fetched with the Docs API client:

        >>> from gdocs2html.parsers.gdocs import GdocsParser
        >>> payload = service.documents().get(documentId=doc_id).execute()
        >>> doc = GdocsParser().parse(payload)

    Parse a saved JSON response:

        >>> doc = GdocsParser().parse("document.json")

    """

    def __init__(self, options: GdocsParserOptions | None = None):
        """Initialize the Docs parser."""
        BaseParser._validate_options_type(options, GdocsParserOptions, "gdocs")
        options = options or GdocsParserOptions()
        super().__init__(options)
        self.options: GdocsParserOptions = options

    def parse(self, input_data: DocumentSource) -> Document:
        """Parse a Docs API payload into a Document.

        Parameters
        ----------
        input_data : Mapping, str, Path, bytes, IO[bytes] or IO[str]
            Decoded payload, JSON text or bytes, JSON file path, or stream

        Returns
        -------
        Document
            AST Document node

        Raises
        ------
        InputError
            If the input cannot be loaded
        MalformedDocumentError
            If the payload violates the schema (strict mode)
        ParsingError
            If parsing fails for any other reason

        """
        payload = load_document_payload(input_data)
        try:
            doc = self._parse_document(payload)
        except Gdocs2HtmlError:
            raise
        except Exception as e:
            raise ParsingError(
                f"Failed to parse Docs document: {e}", parsing_stage="gdocs_parsing", original_error=e
            ) from e

        logger.debug(
            "Parsed document %r: %d body nodes, %d lists", doc.title, len(doc.children), len(doc.lists)
        )
        return doc

    # ------------------------------------------------------------------
    # Schema checks
    # ------------------------------------------------------------------

    def _violation(self, message: str, path: str) -> None:
        """Raise in strict mode, otherwise log and let the caller fall back."""
        if self.options.strict:
            raise MalformedDocumentError(message, path=path)
        logger.warning("%s (at %s); using defaults", message, path)

    def _sequence(self, value: Any, path: str) -> Sequence[Any]:
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return value
        self._violation(f"Expected a list, got {type(value).__name__}", path)
        return []

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def _parse_document(self, payload: Mapping[str, Any]) -> Document:
        body, lists_payload, body_path = self._select_body(payload)
        lists = self._parse_lists(lists_payload or {})

        if isinstance(body, Mapping):
            content = body.get("content", [])
            body_path = f"{body_path}.content"
        else:
            content = body
        children = []
        for index, node in enumerate(self._sequence(content, body_path)):
            block = self._parse_block(node, f"{body_path}[{index}]", lists)
            if block is not None:
                children.append(block)

        return Document(
            children=children,
            lists=lists,
            title=payload.get("title"),
            document_id=payload.get("documentId"),
        )

    def _select_body(self, payload: Mapping[str, Any]) -> tuple[Any, Optional[Mapping[str, Any]], str]:
        """Locate the body and lists, falling back to the first tab of tabbed responses."""
        if "body" in payload:
            return payload["body"], payload.get("lists"), "body"
        tabs = payload.get("tabs")
        if tabs:
            document_tab = tabs[0].get("documentTab") or {}
            logger.debug("Reading body from the first of %d tabs", len(tabs))
            return document_tab.get("body", []), document_tab.get("lists"), "tabs[0].documentTab.body"
        self._violation("Document has no body", "document")
        return [], None, "body"

    def _parse_lists(self, lists_payload: Mapping[str, Any]) -> dict[str, ListDefinition]:
        lists = {}
        for list_id, definition in lists_payload.items():
            path = f"lists.{list_id}.listProperties.nestingLevels"
            levels = ((definition or {}).get("listProperties") or {}).get("nestingLevels")
            if levels is None:
                self._violation(f"List '{list_id}' has no nesting levels", path)
                # Unordered root and sublevel
                levels = [{}, {}]
            lists[list_id] = ListDefinition(
                list_id=list_id,
                nesting_levels=tuple(
                    NestingLevel(glyph_type=(level or {}).get("glyphType")) for level in self._sequence(levels, path)
                ),
            )
        return lists

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _parse_block(self, node: Any, path: str, lists: Mapping[str, ListDefinition]) -> Optional[BlockNode]:
        if not isinstance(node, Mapping):
            self._violation(f"Expected a structural element, got {type(node).__name__}", path)
            return None

        start_index = node.get("startIndex", 0)
        for kind in BODY_NODE_KINDS:
            value = node.get(kind)
            if value is None:
                continue
            if kind == "paragraph":
                return self._parse_paragraph(
                    value, node.get("paragraphStyle"), start_index, f"{path}.paragraph", lists
                )
            if kind == "table":
                return self._parse_table(value, start_index, f"{path}.table", lists)
            return SectionBreak(start_index=start_index)

        kind = _variant_kind(node)
        logger.debug("Skipping unsupported structural element '%s' at %s", kind, path)
        return UnsupportedBlock(kind=kind, start_index=start_index)

    def _parse_paragraph(
        self,
        paragraph: Mapping[str, Any],
        style: Optional[Mapping[str, Any]],
        start_index: int,
        path: str,
        lists: Mapping[str, ListDefinition],
    ) -> Paragraph:
        elements = self._sequence(paragraph.get("elements"), f"{path}.elements")
        return Paragraph(
            elements=[self._parse_element(element, f"{path}.elements[{i}]") for i, element in enumerate(elements)],
            bullet=self._parse_bullet(paragraph.get("bullet"), f"{path}.bullet", lists),
            style=_paragraph_style(style),
            start_index=start_index,
        )

    def _parse_element(self, element: Any, path: str) -> InlineNode:
        if not isinstance(element, Mapping):
            self._violation(f"Expected a paragraph element, got {type(element).__name__}", path)
            return UnsupportedInline()
        text_run = element.get("textRun")
        if text_run is None:
            return UnsupportedInline(kind=_variant_kind(element))
        return TextRun(
            content=text_run.get("content") or "",
            text_style=TextStyle(properties=dict(text_run.get("textStyle") or {})),
        )

    def _parse_bullet(
        self, bullet: Optional[Mapping[str, Any]], path: str, lists: Mapping[str, ListDefinition]
    ) -> Optional[Bullet]:
        if bullet is None:
            return None
        list_id = bullet.get("listId")
        if list_id is None:
            self._violation("Bullet has no listId", path)
            list_id = ""
        elif list_id not in lists:
            self._violation(f"Bullet references undefined list '{list_id}'", f"{path}.listId")
        return Bullet(list_id=list_id, nesting_level=bullet.get("nestingLevel") or 0)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _parse_table(
        self, table: Mapping[str, Any], start_index: int, path: str, lists: Mapping[str, ListDefinition]
    ) -> Table:
        column_properties = (table.get("tableStyle") or {}).get("tableColumnProperties") or []
        columns = [
            TableColumn(
                width=_dimension(column.get("width")) if column.get("width") is not None else None,
                width_type=column.get("widthType"),
            )
            for column in column_properties
        ]
        rows = [
            self._parse_row(row, f"{path}.tableRows[{i}]", lists)
            for i, row in enumerate(self._sequence(table.get("tableRows"), f"{path}.tableRows"))
        ]
        return Table(columns=columns, rows=rows, start_index=start_index)

    def _parse_row(self, row: Mapping[str, Any], path: str, lists: Mapping[str, ListDefinition]) -> TableRow:
        cells = self._sequence(row.get("tableCells"), f"{path}.tableCells")
        return TableRow(
            cells=[self._parse_cell(cell, f"{path}.tableCells[{i}]", lists) for i, cell in enumerate(cells)]
        )

    def _parse_cell(self, cell: Mapping[str, Any], path: str, lists: Mapping[str, ListDefinition]) -> TableCell:
        style = cell.get("tableCellStyle")
        if style is None:
            self._violation("Table cell has no tableCellStyle", path)
            style = {}

        borders = {}
        for position, key in CELL_BORDER_KEYS.items():
            border = style.get(key)
            if border is not None:
                borders[position] = CellBorder(
                    width=_dimension(border.get("width")), color=_rgb_color(border.get("color"))
                )
        cell_style = TableCellStyle(
            row_span=style.get("rowSpan", 1),
            column_span=style.get("columnSpan", 1),
            borders=borders,
        )

        content: list[Node] = []
        for i, line in enumerate(self._sequence(cell.get("content", []), f"{path}.content")):
            paragraph = line.get("paragraph") if isinstance(line, Mapping) else None
            if paragraph is None:
                # Nested tables and other elements inside cells are not rendered
                content.append(UnsupportedBlock(kind=_variant_kind(line) if isinstance(line, Mapping) else ""))
                continue
            content.append(
                self._parse_paragraph(
                    paragraph,
                    paragraph.get("paragraphStyle"),
                    line.get("startIndex", 0),
                    f"{path}.content[{i}].paragraph",
                    lists,
                )
            )
        return TableCell(content=content, style=cell_style)
