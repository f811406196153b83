#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdocs2html/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers subclass NodeVisitor and implement one visit_* method per node
type. Nodes dispatch to those methods through ``accept``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gdocs2html.ast.nodes import (
    Document,
    Paragraph,
    SectionBreak,
    Table,
    TableCell,
    TableRow,
    TextRun,
    UnsupportedBlock,
    UnsupportedInline,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Examples
    --------
    Counting text runs:

        >>> class RunCounter(NodeVisitor):
        ...     def visit_document(self, node):
        ...         return sum(child.accept(self) for child in node.children)
        ...     def visit_paragraph(self, node):
        ...         return sum(element.accept(self) for element in node.elements)
        ...     def visit_text_run(self, node):
        ...         return 1
        ...     ...

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_text_run(self, node: TextRun) -> Any:
        """Visit a TextRun node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_section_break(self, node: SectionBreak) -> Any:
        """Visit a SectionBreak node."""
        pass

    def visit_unsupported_block(self, node: UnsupportedBlock) -> Any:
        """Visit a structural element of an unhandled kind.

        Returns None by default, so unknown elements contribute nothing.
        """
        return None

    def visit_unsupported_inline(self, node: UnsupportedInline) -> Any:
        """Visit a paragraph element of an unhandled kind.

        Returns None by default, so unknown elements contribute nothing.
        """
        return None
