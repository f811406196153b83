#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/ast/nodes.py
"""AST node classes for Google Docs document representation.

This module defines the node hierarchy the parser builds from a Docs API
payload. Each node mirrors one structural element of the API response and
supports the visitor pattern for rendering.

Node Hierarchy
--------------
Block-level nodes (members of ``Document.children`` and ``TableCell.content``):
    - Paragraph, Table, SectionBreak, UnsupportedBlock

Inline nodes (members of ``Paragraph.elements``):
    - TextRun, UnsupportedInline

Table structure:
    - TableRow, TableCell

Value objects (no visitor support):
    - Dimension, RgbColor, TextStyle, ParagraphStyle, Bullet
    - CellBorder, TableCellStyle, TableColumn, NestingLevel, ListDefinition

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from gdocs2html.constants import ORDERED_GLYPH_TYPE


class Node(ABC):
    """Base class for all AST nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Value objects
# ============================================================================


@dataclass(frozen=True)
class Dimension:
    """A magnitude with a unit, e.g. ``18 PT``.

    Parameters
    ----------
    magnitude : float or None, default = None
        Numeric value; the API omits it when it is zero
    unit : str, default = ""
        Unit name as sent by the API (``PT``)

    """

    magnitude: Optional[float] = None
    unit: str = ""

    @property
    def css_unit(self) -> str:
        """Unit lower-cased for CSS."""
        return self.unit.lower()


@dataclass(frozen=True)
class RgbColor:
    """RGB color components exactly as the API sends them (usually 0..1)."""

    red: float = 0
    green: float = 0
    blue: float = 0


@dataclass
class TextStyle:
    """Style record of a text run.

    Keeps the raw ``textStyle`` mapping so the order in which the API listed
    the style flags is preserved; formatting is applied in that order.

    Parameters
    ----------
    properties : dict, default = empty dict
        Style flag name to value, only for explicitly set flags

    """

    properties: dict[str, Any] = field(default_factory=dict)

    def keys(self) -> list[str]:
        """Return style flag names in their original order."""
        return list(self.properties)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw value of a style flag."""
        return self.properties.get(key, default)

    @property
    def font_size(self) -> Optional[Dimension]:
        """Font size of the run, if set."""
        value = self.properties.get("fontSize")
        if not value:
            return None
        return Dimension(magnitude=value.get("magnitude"), unit=value.get("unit", ""))

    @property
    def font_weight(self) -> Any:
        """Weight of the run's weighted font family, if set."""
        family = self.properties.get("weightedFontFamily") or {}
        return family.get("weight")

    @property
    def link_url(self) -> Optional[str]:
        """Target URL of the run's link, if any."""
        link = self.properties.get("link") or {}
        return link.get("url")


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph-level layout attributes.

    Parameters
    ----------
    indent_start : Dimension or None, default = None
        Start-side indentation
    alignment : str or None, default = None
        ``START``, ``CENTER``, ``END`` or ``JUSTIFIED``

    """

    indent_start: Optional[Dimension] = None
    alignment: Optional[str] = None


@dataclass(frozen=True)
class Bullet:
    """List membership of a paragraph."""

    list_id: str
    nesting_level: int = 0

    @property
    def is_root(self) -> bool:
        """Whether the paragraph sits at the root level of its list."""
        return not self.nesting_level


@dataclass(frozen=True)
class NestingLevel:
    """One level of a list definition."""

    glyph_type: Optional[str] = None

    @property
    def list_tag(self) -> str:
        """HTML list element used for this level."""
        return "ol" if self.glyph_type == ORDERED_GLYPH_TYPE else "ul"


@dataclass(frozen=True)
class ListDefinition:
    """A list declared in the document's ``lists`` mapping.

    Parameters
    ----------
    list_id : str
        Identifier referenced by ``Bullet.list_id``
    nesting_levels : tuple of NestingLevel
        Index 0 is the root level, index 1 the first sublevel

    """

    list_id: str
    nesting_levels: tuple[NestingLevel, ...] = ()


@dataclass(frozen=True)
class CellBorder:
    """One border of a table cell."""

    width: Dimension = field(default_factory=Dimension)
    color: Optional[RgbColor] = None


@dataclass(frozen=True)
class TableCellStyle:
    """Span and border attributes of a table cell.

    Parameters
    ----------
    row_span : int, default = 1
        Number of rows the cell covers
    column_span : int, default = 1
        Number of columns the cell covers
    borders : dict, default = empty dict
        Border position (``top``/``bottom``) to CellBorder, only for borders present

    """

    row_span: int = 1
    column_span: int = 1
    borders: dict[str, CellBorder] = field(default_factory=dict)


@dataclass(frozen=True)
class TableColumn:
    """Column definition from ``tableStyle.tableColumnProperties``."""

    width: Optional[Dimension] = None
    width_type: Optional[str] = None


# ============================================================================
# Inline nodes
# ============================================================================


@dataclass
class TextRun(Node):
    """A span of text sharing one style.

    Parameters
    ----------
    content : str
        Raw text, may contain newlines and vertical tabs
    text_style : TextStyle, default = empty style
        Style flags applied to the run

    """

    content: str = ""
    text_style: TextStyle = field(default_factory=TextStyle)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text run."""
        return visitor.visit_text_run(self)


@dataclass
class UnsupportedInline(Node):
    """A paragraph element of a kind the renderer does not handle.

    Parameters
    ----------
    kind : str
        API key of the element, e.g. ``inlineObjectElement``

    """

    kind: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this element."""
        return visitor.visit_unsupported_inline(self)


InlineNode = Union[TextRun, UnsupportedInline]


# ============================================================================
# Block-level nodes
# ============================================================================


@dataclass
class Paragraph(Node):
    """A paragraph of inline elements.

    Parameters
    ----------
    elements : list of InlineNode, default = empty list
        Inline content in document order
    bullet : Bullet or None, default = None
        List membership, when the paragraph is a list item
    style : ParagraphStyle or None, default = None
        Paragraph layout attributes
    start_index : int, default = 0
        Document offset of the paragraph

    """

    elements: list[InlineNode] = field(default_factory=list)
    bullet: Optional[Bullet] = None
    style: Optional[ParagraphStyle] = None
    start_index: int = 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class TableCell(Node):
    """A table cell holding block content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Paragraphs and other structural elements inside the cell
    style : TableCellStyle, default = TableCellStyle()
        Span and border attributes

    """

    content: list[Node] = field(default_factory=list)
    style: TableCellStyle = field(default_factory=TableCellStyle)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """A row of table cells."""

    cells: list[TableCell] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this row."""
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """A table with column definitions and rows.

    Parameters
    ----------
    columns : list of TableColumn, default = empty list
        Column width definitions, rendered as the table head
    rows : list of TableRow, default = empty list
        Table body rows
    start_index : int, default = 0
        Document offset of the table

    """

    columns: list[TableColumn] = field(default_factory=list)
    rows: list[TableRow] = field(default_factory=list)
    start_index: int = 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class SectionBreak(Node):
    """A section break; carries no visible content."""

    start_index: int = 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this section break."""
        return visitor.visit_section_break(self)


@dataclass
class UnsupportedBlock(Node):
    """A structural element of a kind the renderer does not handle.

    Parameters
    ----------
    kind : str
        API key of the element (``tableOfContents``) or empty when unknown
    start_index : int, default = 0
        Document offset of the element

    """

    kind: str = ""
    start_index: int = 0

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this element."""
        return visitor.visit_unsupported_block(self)


BlockNode = Union[Paragraph, Table, SectionBreak, UnsupportedBlock]


@dataclass
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : list of BlockNode, default = empty list
        Body nodes in document order
    lists : dict, default = empty dict
        List id to ListDefinition, in the order the API listed them
    title : str or None, default = None
        Document title
    document_id : str or None, default = None
        Docs API document identifier

    """

    children: list[BlockNode] = field(default_factory=list)
    lists: dict[str, ListDefinition] = field(default_factory=dict)
    title: Optional[str] = None
    document_id: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)
