#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/parsers/test_gdocs_parser.py
"""Unit tests for GdocsParser.

Tests cover:
- Building AST nodes from Docs API payloads
- Body selection for plain and tabbed responses
- Strict schema checks and lenient fallbacks
- Wrapping of unexpected failures

"""

import copy
import logging

import pytest

from gdocs2html.ast import (
    Bullet,
    CellBorder,
    Dimension,
    Document,
    Paragraph,
    ParagraphStyle,
    RgbColor,
    SectionBreak,
    Table,
    TableColumn,
    TextRun,
    UnsupportedBlock,
    UnsupportedInline,
)
from gdocs2html.exceptions import InvalidOptionsError, MalformedDocumentError, ParsingError
from gdocs2html.options import GdocsParserOptions, HtmlRendererOptions
from gdocs2html.parsers.gdocs import GdocsParser


def _doc(*content, lists=None):
    payload = {"documentId": "doc-1", "title": "Test", "body": {"content": list(content)}}
    if lists is not None:
        payload["lists"] = lists
    return payload


def _para(text, start_index=1, **paragraph_fields):
    return {
        "startIndex": start_index,
        "paragraph": {"elements": [{"textRun": {"content": text, "textStyle": {}}}], **paragraph_fields},
    }


def _table_cell(text="x", style=None):
    cell = {"content": [{"startIndex": 2, "paragraph": {"elements": [{"textRun": {"content": text}}]}}]}
    if style is not None:
        cell["tableCellStyle"] = style
    return cell


def _table(*rows, start_index=1):
    return {"startIndex": start_index, "table": {"tableRows": [{"tableCells": list(cells)} for cells in rows]}}


LENIENT = GdocsParserOptions(strict=False)


@pytest.mark.unit
class TestParserSetup:
    """Tests for parser construction."""

    def test_default_options_are_strict(self):
        assert GdocsParser().options.strict is True

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            GdocsParser(HtmlRendererOptions())  # type: ignore[arg-type]
        assert exc_info.value.expected_type is GdocsParserOptions


@pytest.mark.unit
class TestDocumentStructure:
    """Tests for document-level parsing."""

    def test_metadata(self, minimal_payload):
        doc = GdocsParser().parse(minimal_payload)
        assert isinstance(doc, Document)
        assert doc.title == "Minimal"
        assert doc.document_id == "doc-minimal"

    def test_paragraph(self, minimal_payload):
        doc = GdocsParser().parse(minimal_payload)
        assert doc.children == [Paragraph(elements=[TextRun(content="Hello\n")], start_index=1)]

    def test_body_as_list(self):
        doc = GdocsParser().parse({"body": [_para("a\n", start_index=4)]})
        assert [child.start_index for child in doc.children] == [4]

    def test_missing_start_index_reads_as_zero(self):
        doc = GdocsParser().parse(_doc({"endIndex": 1, "sectionBreak": {}}))
        assert doc.children == [SectionBreak(start_index=0)]

    def test_paragraph_key_takes_precedence(self):
        node = {
            "startIndex": 1,
            "table": {"tableRows": []},
            "paragraph": {"elements": [{"textRun": {"content": "x\n"}}]},
        }
        doc = GdocsParser().parse(_doc(node))
        assert doc.children == [Paragraph(elements=[TextRun(content="x\n")], start_index=1)]

    def test_unsupported_block(self):
        doc = GdocsParser().parse(_doc({"startIndex": 3, "endIndex": 9, "tableOfContents": {"content": []}}))
        assert doc.children == [UnsupportedBlock(kind="tableOfContents", start_index=3)]

    def test_node_level_paragraph_style(self):
        node = _para("x\n")
        node["paragraphStyle"] = {"alignment": "END", "indentStart": {"magnitude": 18, "unit": "PT"}}
        doc = GdocsParser().parse(_doc(node))
        assert doc.children[0].style == ParagraphStyle(indent_start=Dimension(18, "PT"), alignment="END")

    def test_inner_paragraph_style_is_not_used_in_body(self):
        doc = GdocsParser().parse(_doc(_para("x\n", paragraphStyle={"alignment": "CENTER"})))
        assert doc.children[0].style is None

    def test_text_style_order_preserved(self):
        node = {
            "startIndex": 1,
            "paragraph": {
                "elements": [{"textRun": {"content": "x", "textStyle": {"underline": True, "bold": True}}}]
            },
        }
        run = GdocsParser().parse(_doc(node)).children[0].elements[0]
        assert run.text_style.keys() == ["underline", "bold"]

    def test_unsupported_inline(self):
        node = {"startIndex": 1, "paragraph": {"elements": [{"startIndex": 1, "inlineObjectElement": {}}]}}
        paragraph = GdocsParser().parse(_doc(node)).children[0]
        assert paragraph.elements == [UnsupportedInline(kind="inlineObjectElement")]

    def test_lists_and_bullets(self, load_document):
        doc = GdocsParser().parse(load_document("lists"))
        assert list(doc.lists) == ["kix.alpha", "kix.dots", "kix.unused"]
        assert doc.lists["kix.alpha"].nesting_levels[0].list_tag == "ol"
        assert doc.lists["kix.alpha"].nesting_levels[1].list_tag == "ul"
        assert doc.children[1].bullet == Bullet(list_id="kix.alpha", nesting_level=1)
        assert doc.children[3].bullet is None


@pytest.mark.unit
class TestTabbedDocuments:
    """Tests for responses fetched with ``includeTabsContent``."""

    def test_first_tab_is_used(self, load_document):
        doc = GdocsParser().parse(load_document("tabbed"))
        assert len(doc.children) == 2
        assert doc.children[1].elements[0].content == "First tab\n"
        assert list(doc.lists) == ["kix.tab"]

    def test_body_takes_precedence(self, load_document):
        payload = load_document("tabbed")
        payload["body"] = {"content": []}
        assert GdocsParser().parse(payload).children == []


@pytest.mark.unit
class TestTables:
    """Tests for table parsing."""

    def test_columns(self, load_document):
        table = GdocsParser().parse(load_document("table")).children[0]
        assert isinstance(table, Table)
        assert table.columns[0] == TableColumn(width=Dimension(120, "PT"), width_type="FIXED_WIDTH")
        assert table.columns[1] == TableColumn(width=None, width_type="EVENLY_DISTRIBUTED")

    def test_spans(self, load_document):
        table = GdocsParser().parse(load_document("table")).children[0]
        assert table.rows[0].cells[0].style.column_span == 3
        assert table.rows[0].cells[0].style.row_span == 1

    def test_borders(self, load_document):
        cell = GdocsParser().parse(load_document("table")).children[0].rows[1].cells[0]
        assert list(cell.style.borders) == ["top", "bottom"]
        assert cell.style.borders["top"] == CellBorder(width=Dimension(1, "PT"), color=RgbColor(red=1))
        assert cell.style.borders["bottom"].color is None

    def test_empty_rgb_color_reads_as_missing(self):
        style = {"borderTop": {"width": {"magnitude": 1, "unit": "PT"}, "color": {"color": {"rgbColor": {}}}}}
        doc = GdocsParser().parse(_doc(_table([_table_cell(style=style)])))
        assert doc.children[0].rows[0].cells[0].style.borders["top"].color is None

    def test_cell_paragraphs_use_inner_style(self):
        cell = _table_cell()
        cell["tableCellStyle"] = {}
        cell["content"][0]["paragraph"]["paragraphStyle"] = {"alignment": "CENTER"}
        doc = GdocsParser().parse(_doc(_table([cell])))
        assert doc.children[0].rows[0].cells[0].content[0].style == ParagraphStyle(alignment="CENTER")

    def test_nested_table_in_cell_is_unsupported(self):
        cell = {"tableCellStyle": {}, "content": [{"startIndex": 2, "table": {"tableRows": []}}]}
        doc = GdocsParser().parse(_doc(_table([cell])))
        assert doc.children[0].rows[0].cells[0].content == [UnsupportedBlock(kind="table")]


@pytest.mark.unit
class TestStrictMode:
    """Tests for schema violations in strict mode."""

    def test_missing_body(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse({"title": "No body"})
        assert exc_info.value.path == "document"

    def test_cell_without_style(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc(_table([_table_cell()])))
        assert exc_info.value.path == "body.content[0].table.tableRows[0].tableCells[0]"
        assert "tableCellStyle" in str(exc_info.value)

    def test_table_without_rows(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc({"startIndex": 1, "table": {"rows": 0}}))
        assert exc_info.value.path == "body.content[0].table.tableRows"

    def test_elements_not_a_list(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc({"startIndex": 1, "paragraph": {"elements": "text"}}))
        assert exc_info.value.path == "body.content[0].paragraph.elements"

    def test_bullet_without_list_id(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc(_para("x", bullet={"nestingLevel": 0})))
        assert exc_info.value.path == "body.content[0].paragraph.bullet"

    def test_bullet_with_undefined_list(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc(_para("x", bullet={"listId": "kix.nope"})))
        assert exc_info.value.path == "body.content[0].paragraph.bullet.listId"

    def test_list_without_nesting_levels(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc(lists={"kix.a": {"listProperties": {}}}))
        assert exc_info.value.path == "lists.kix.a.listProperties.nestingLevels"

    def test_non_mapping_body_node(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            GdocsParser().parse(_doc("not a node"))
        assert exc_info.value.path == "body.content[0]"

    def test_malformed_error_is_a_parsing_error(self):
        with pytest.raises(ParsingError) as exc_info:
            GdocsParser().parse({"title": "No body"})
        assert exc_info.value.parsing_stage == "schema_validation"

    def test_unexpected_failure_is_wrapped(self):
        with pytest.raises(ParsingError) as exc_info:
            GdocsParser().parse(_doc({"startIndex": 1, "paragraph": "not a mapping"}))
        assert not isinstance(exc_info.value, MalformedDocumentError)
        assert exc_info.value.parsing_stage == "gdocs_parsing"
        assert isinstance(exc_info.value.original_error, AttributeError)


@pytest.mark.unit
class TestLenientMode:
    """Tests for fallbacks when strict mode is off."""

    def test_missing_body(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gdocs2html.parsers.gdocs"):
            doc = GdocsParser(LENIENT).parse({"title": "No body"})
        assert doc.children == []
        assert "Document has no body" in caplog.text

    def test_cell_without_style_uses_defaults(self, caplog):
        with caplog.at_level(logging.WARNING, logger="gdocs2html.parsers.gdocs"):
            doc = GdocsParser(LENIENT).parse(_doc(_table([_table_cell("a")])))
        cell = doc.children[0].rows[0].cells[0]
        assert cell.style.column_span == 1
        assert cell.style.borders == {}
        assert "tableCellStyle" in caplog.text

    def test_undefined_list_keeps_bullet(self):
        doc = GdocsParser(LENIENT).parse(_doc(_para("x", bullet={"listId": "kix.nope"})))
        assert doc.children[0].bullet == Bullet(list_id="kix.nope")

    def test_list_without_levels_gets_unordered_levels(self):
        doc = GdocsParser(LENIENT).parse(_doc(lists={"kix.a": {}}))
        assert [level.list_tag for level in doc.lists["kix.a"].nesting_levels] == ["ul", "ul"]

    def test_non_mapping_nodes_are_skipped(self):
        doc = GdocsParser(LENIENT).parse(_doc(42, _para("kept\n", start_index=3)))
        assert [child.start_index for child in doc.children] == [3]

    def test_payload_not_modified(self, load_document):
        payload = load_document("table")
        original = copy.deepcopy(payload)
        GdocsParser(LENIENT).parse(payload)
        assert payload == original
