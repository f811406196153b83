#  Copyright (c) 2025 Tom Villani, Ph.D.
"""AST for Google Docs documents.

The parser builds these nodes from a Docs API payload; renderers traverse
them with a NodeVisitor.
"""

from gdocs2html.ast.lists import ListBoundaryMap, build_list_boundaries
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
from gdocs2html.ast.visitors import NodeVisitor

__all__ = [
    "BlockNode",
    "Bullet",
    "CellBorder",
    "Dimension",
    "Document",
    "InlineNode",
    "ListBoundaryMap",
    "ListDefinition",
    "NestingLevel",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "ParagraphStyle",
    "RgbColor",
    "SectionBreak",
    "Table",
    "TableCell",
    "TableCellStyle",
    "TableColumn",
    "TableRow",
    "TextRun",
    "TextStyle",
    "UnsupportedBlock",
    "UnsupportedInline",
    "build_list_boundaries",
]
