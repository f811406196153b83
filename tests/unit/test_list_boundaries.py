#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_list_boundaries.py
"""Unit tests for list boundary reconstruction."""

import logging

import pytest

from gdocs2html.ast import (
    Bullet,
    ListBoundaryMap,
    ListDefinition,
    NestingLevel,
    Paragraph,
    Table,
    TextRun,
    build_list_boundaries,
)
from gdocs2html.exceptions import MalformedDocumentError


def _item(start_index, list_id="kix.a", level=0):
    return Paragraph(
        elements=[TextRun(content=f"item {start_index}\n")],
        bullet=Bullet(list_id=list_id, nesting_level=level),
        start_index=start_index,
    )


def _definition(list_id="kix.a", *glyph_types):
    return ListDefinition(list_id=list_id, nesting_levels=tuple(NestingLevel(glyph) for glyph in glyph_types))


@pytest.mark.unit
class TestListBoundaryMap:
    """Tests for the position-indexed tag table."""

    def test_empty_positions(self):
        boundaries = ListBoundaryMap()
        assert boundaries.opening_at(5) == ""
        assert boundaries.closing_at(5) == ""

    def test_mark(self):
        boundaries = ListBoundaryMap()
        boundaries.mark([_item(1), _item(4), _item(9)], "ol")
        assert boundaries.open_tags == {1: "<ol>"}
        assert boundaries.close_tags == {9: "</ol>"}

    def test_mark_single_entry(self):
        boundaries = ListBoundaryMap()
        boundaries.mark([_item(3)], "ul")
        assert boundaries.opening_at(3) == "<ul>"
        assert boundaries.closing_at(3) == "</ul>"


@pytest.mark.unit
class TestBuildListBoundaries:
    """Tests for the pre-pass over the document body."""

    def test_no_lists(self):
        children = [Paragraph(elements=[TextRun(content="a\n")], start_index=1)]
        boundaries = build_list_boundaries(children, {})
        assert boundaries.open_tags == {}
        assert boundaries.close_tags == {}

    def test_upper_alpha_list_is_ordered(self):
        children = [_item(1), _item(5), _item(9)]
        boundaries = build_list_boundaries(children, {"kix.a": _definition("kix.a", "UPPER_ALPHA")})
        assert boundaries.open_tags == {1: "<ol>"}
        assert boundaries.close_tags == {9: "</ol>"}

    @pytest.mark.parametrize("glyph_type", ["DECIMAL", "GLYPH_TYPE_UNSPECIFIED", None])
    def test_other_glyph_types_are_unordered(self, glyph_type):
        boundaries = build_list_boundaries([_item(1)], {"kix.a": _definition("kix.a", glyph_type)})
        assert boundaries.open_tags == {1: "<ul>"}

    def test_sublevel_group(self):
        children = [_item(1), _item(5, level=1), _item(9, level=1), _item(14)]
        boundaries = build_list_boundaries(children, {"kix.a": _definition("kix.a", "UPPER_ALPHA", None)})
        assert boundaries.open_tags == {1: "<ol>", 5: "<ul>"}
        assert boundaries.close_tags == {14: "</ol>", 9: "</ul>"}

    def test_non_list_nodes_are_ignored(self):
        children = [
            Paragraph(elements=[TextRun(content="intro\n")], start_index=1),
            _item(7),
            Table(start_index=12),
            _item(20),
        ]
        boundaries = build_list_boundaries(children, {"kix.a": _definition("kix.a", None)})
        assert boundaries.open_tags == {7: "<ul>"}
        assert boundaries.close_tags == {20: "</ul>"}

    def test_lists_use_their_own_tags(self):
        children = [_item(1, "kix.a"), _item(5, "kix.b"), _item(9, "kix.b")]
        lists = {"kix.a": _definition("kix.a", "UPPER_ALPHA"), "kix.b": _definition("kix.b", "DECIMAL")}
        boundaries = build_list_boundaries(children, lists)
        assert boundaries.open_tags == {1: "<ol>", 5: "<ul>"}
        assert boundaries.close_tags == {1: "</ol>", 9: "</ul>"}

    def test_unused_definitions_are_skipped(self):
        lists = {"kix.unused": _definition("kix.unused", "UPPER_ALPHA"), "kix.a": _definition("kix.a", None)}
        boundaries = build_list_boundaries([_item(2)], lists)
        assert boundaries.open_tags == {2: "<ul>"}

    def test_undefined_list_gets_no_tags(self):
        boundaries = build_list_boundaries([_item(2, "kix.missing")], {})
        assert boundaries.open_tags == {}
        assert boundaries.close_tags == {}

    def test_list_without_root_entries(self):
        children = [_item(1, level=1), _item(4, level=1)]
        with pytest.raises(MalformedDocumentError) as exc_info:
            build_list_boundaries(children, {"kix.a": _definition("kix.a", None, None)})
        assert exc_info.value.path == "lists.kix.a"

    def test_sublevel_without_level_definition(self):
        children = [_item(1), _item(4, level=1)]
        with pytest.raises(MalformedDocumentError) as exc_info:
            build_list_boundaries(children, {"kix.a": _definition("kix.a", None)})
        assert exc_info.value.path == "lists.kix.a.listProperties.nestingLevels"

    def test_deeper_nesting_collapses_to_sublevel(self, caplog):
        children = [_item(1), _item(4, level=1), _item(8, level=2), _item(12)]
        with caplog.at_level(logging.WARNING, logger="gdocs2html.ast.lists"):
            boundaries = build_list_boundaries(children, {"kix.a": _definition("kix.a", None, "UPPER_ALPHA")})
        assert boundaries.open_tags == {1: "<ul>", 4: "<ol>"}
        assert boundaries.close_tags == {12: "</ul>", 8: "</ol>"}
        assert "nesting level 2" in caplog.text
