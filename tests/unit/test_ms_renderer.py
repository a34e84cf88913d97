#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ms_renderer.py
"""Unit tests for the ms renderer.

Tests cover:
- Headings, paragraphs and block quotes
- Front matter title blocks
- Ordered, unordered and nested lists
- Tables
- Inline formatting, code and raw HTML
- Fail-fast handling of unknown kinds and malformed input
- Output targets and configuration options

"""

import io
import logging
import threading

import pytest

from md2troff.ast import (
    Node,
    NodeKind,
    block_quote,
    code_block,
    code_span,
    document,
    emphasis,
    heading,
    html_block,
    html_span,
    image,
    link,
    list_item,
    list_node,
    paragraph,
    strong,
    table,
    text,
)
from md2troff.exceptions import (
    FrontMatterError,
    InvalidOptionsError,
    RenderingError,
    TableLayoutError,
    UnknownNodeKindError,
)
from md2troff.options import MarkdownParserOptions, MsRendererOptions
from md2troff.renderers.ms import MsRenderer

TITLE_BLOCK = (
    ".HTML T\n"
    ".TL \n T\n"
    ".AU\n.I Name\n.I Email\n.AI Affiliation\n"
    ".ND Feb 22, 2020\n"
    ".AB \n A\n.AE\n"
    ".PP\n"
)


def render(doc: Node, options: MsRendererOptions | None = None) -> str:
    return MsRenderer(options).render_to_string(doc)


@pytest.mark.unit
class TestBasicRendering:
    """Tests for block-level rendering."""

    def test_empty_document(self) -> None:
        assert render(document()) == ".SG\n"

    def test_heading_and_paragraph(self) -> None:
        doc = document(heading(1, text("Intro")), paragraph(text("Hello")))
        assert render(doc) == ".SH\nIntro\n\nHello\n.SG\n"

    def test_all_heading_levels_use_section_heading(self) -> None:
        doc = document(*(heading(level, text(f"H{level}")) for level in range(1, 7)))
        assert render(doc).count(".SH\n") == 6

    def test_text_is_left_trimmed_of_spaces(self) -> None:
        assert render(document(paragraph(text("   indented  ")))) == "\nindented  \n.SG\n"

    def test_block_quote(self) -> None:
        assert render(document(block_quote(paragraph(text("q"))))) == "\n\nq\n\n.SG\n"

    def test_code_block(self) -> None:
        assert render(document(code_block("  x = 1\n"))) == ".P1\nx = 1\n.P2\n.SG\n"

    def test_html_block(self) -> None:
        assert render(document(html_block("<div>"))) == ".HTML <div>\n.SG\n"

    def test_no_title_block_without_front_matter(self) -> None:
        output = render(document(heading(1, text("A")), paragraph(text("b"))))
        assert ".TL" not in output
        assert ".HTML" not in output
        assert output.endswith(".SG\n")

    def test_preamble(self) -> None:
        options = MsRendererOptions(preamble=".nr PS 12\n")
        assert render(document(paragraph(text("x"))), options) == ".nr PS 12\n\nx\n.SG\n"


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline formatting."""

    def test_code_span(self) -> None:
        doc = document(paragraph(text("use "), code_span("x"), text(" now")))
        assert render(doc) == "\nuse \n.B x\n.R\nnow\n.SG\n"

    def test_emphasis(self) -> None:
        assert render(document(paragraph(emphasis(text("it"))))) == "\n.I\nit\n.R\n\n.SG\n"

    def test_strong(self) -> None:
        assert render(document(paragraph(strong(text("bf"))))) == "\n.B\nbf\n.R\n\n.SG\n"

    def test_styles_are_closed_inside_list_items(self) -> None:
        doc = document(
            list_node(
                list_item(paragraph(emphasis(text("a")), strong(emphasis(text("b"))))),
                list_item(paragraph(strong(text("c")))),
            )
        )
        output = render(doc)

        opened = output.count(".I\n") + output.count(".B\n")
        assert opened == 4
        assert output.count("\n.R\n") == opened

    def test_html_span_emits_nothing(self) -> None:
        assert render(document(paragraph(text("a"), html_span("<b>"), text("c")))) == "\nac\n.SG\n"

    def test_link_renders_its_text_only(self) -> None:
        assert render(document(paragraph(link("http://example.com", text("site"))))) == "\nsite\n.SG\n"

    def test_image_is_skipped(self) -> None:
        assert render(document(paragraph(image("pic.png", text("alt"))))) == "\n\n.SG\n"


@pytest.mark.unit
class TestFrontMatter:
    """Tests for title blocks read from front matter."""

    def test_title_block_sequence(self) -> None:
        payload = (
            "title: T\n"
            "authors:\n"
            "- name: Name\n"
            "  email: Email\n"
            "  affiliation: Affiliation\n"
            "date: Feb 22, 2020\n"
            "abstract: A\n"
        )
        doc = document(heading(1, text(payload), is_titleblock=True))
        assert render(doc) == TITLE_BLOCK + ".SG\n"

    def test_front_matter_fixture(self, front_matter_document) -> None:
        assert render(front_matter_document) == TITLE_BLOCK + ".SG\n"

    def test_title_block_comes_first(self, front_matter) -> None:
        doc = document(
            heading(1, text(front_matter), is_titleblock=True),
            heading(1, text("Intro")),
            paragraph(text("Body")),
        )
        assert render(doc) == TITLE_BLOCK + ".SH\nIntro\n\nBody\n.SG\n"

    def test_flag_does_not_leak_into_following_headings(self, front_matter) -> None:
        doc = document(heading(1, text(front_matter), is_titleblock=True), heading(2, text("title: not front matter")))
        assert render(doc).endswith(".SH\ntitle: not front matter\n.SG\n")

    def test_invalid_payload_is_fatal(self) -> None:
        doc = document(heading(1, text("title: [broken"), is_titleblock=True), paragraph(text("never")))
        with pytest.raises(FrontMatterError):
            render(doc)

    def test_heading_without_payload_is_fatal(self) -> None:
        with pytest.raises(FrontMatterError, match="no metadata"):
            render(document(heading(1, is_titleblock=True)))

    def test_second_front_matter_heading_is_ignored(self, front_matter, caplog) -> None:
        doc = document(
            heading(1, text(front_matter), is_titleblock=True),
            heading(1, text("title: Other"), is_titleblock=True),
        )
        with caplog.at_level(logging.WARNING, logger="md2troff.renderers.ms"):
            output = render(doc)

        assert output == TITLE_BLOCK + ".SG\n"
        assert "Ignoring additional front matter" in caplog.text

    def test_missing_date_suppresses_date(self) -> None:
        doc = document(heading(1, text("title: T\n"), is_titleblock=True))
        assert render(doc) == ".HTML T\n.TL \n T\n.ND\n.PP\n.SG\n"

    def test_sniffing_is_off_by_default(self) -> None:
        doc = document(heading(1, text("title: T")))
        assert render(doc) == ".SH\ntitle: T\n.SG\n"

    def test_sniffing_detects_unflagged_front_matter(self) -> None:
        doc = document(heading(1, text("title: T")))
        output = render(doc, MsRendererOptions(sniff_front_matter=True))
        assert output == ".HTML T\n.TL \n T\n.ND\n.PP\n.SG\n"

    def test_sniffing_ignores_other_levels(self) -> None:
        doc = document(heading(2, text("title: T")))
        assert render(doc, MsRendererOptions(sniff_front_matter=True)) == ".SH\ntitle: T\n.SG\n"


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_unordered_bullet_is_kept(self) -> None:
        doc = document(list_node(list_item(paragraph(text("a"))), list_item(paragraph(text("b"))), bullet_char="-"))
        assert render(doc) == ".IP -\n\na\n.IP -\n\nb\n.RE\n.SG\n"

    @pytest.mark.parametrize("bullet", ["*", "+", "-"])
    def test_bullet_characters(self, bullet) -> None:
        doc = document(list_node(list_item(paragraph(text("a"))), bullet_char=bullet))
        assert f".IP {bullet}\n" in render(doc)

    def test_ordered_list(self) -> None:
        doc = document(list_node(list_item(paragraph(text("a"))), list_item(paragraph(text("b"))), ordered=True))
        assert render(doc) == ".IP 1.\n\na\n.IP 2.\n\nb\n.RE\n.SG\n"

    def test_nested_ordered_labels(self) -> None:
        doc = document(
            list_node(
                list_item(
                    paragraph(text("one")),
                    list_node(list_item(paragraph(text("sub"))), ordered=True),
                ),
                list_item(paragraph(text("two"))),
                ordered=True,
            )
        )
        assert render(doc) == ".IP 1.\n\none\n.RS\n.IP 1.1.\n\nsub\n.RE\n.IP 2.\n\ntwo\n.RE\n.SG\n"

    def test_second_sub_list_counts_from_one(self) -> None:
        inner = lambda: list_node(list_item(paragraph(text("x"))), list_item(paragraph(text("y"))), ordered=True)  # noqa: E731
        doc = document(list_node(list_item(inner()), list_item(inner()), ordered=True))
        output = render(doc)

        labels = [line[4:] for line in output.splitlines() if line.startswith(".IP ")]
        assert labels == ["1.", "1.1.", "1.2.", "2.", "2.1.", "2.2."]

    def test_depth_stack_is_empty_after_render(self) -> None:
        doc = document(
            list_node(list_item(list_node(list_item(list_node(list_item(paragraph(text("deep")))))))),
            paragraph(text("after")),
        )
        renderer = MsRenderer()
        output = renderer.render_to_string(doc)

        assert renderer.list_depth == []
        assert output.count(".RS\n") == 2
        assert output.count(".RE\n") == 3
        assert output.endswith("\nafter\n.SG\n")

    def test_item_outside_list_is_an_error(self) -> None:
        with pytest.raises(RenderingError, match="outside of a list"):
            render(document(list_item(paragraph(text("x")))))


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def test_table_layout(self) -> None:
        doc = document(table(header=[["Name", "Age", "Country"]], rows=[["Alice", "30", "USA"], ["Bob", "4", "UK"]]))
        assert render(doc) == (
            ".DS\n"
            ".TS H\n"
            "Name     Age    Country    \n"
            ".TH\n"
            "Alice    30     USA        \n"
            "Bob      4      UK         \n"
            ".TE\n"
            ".DE\n"
            ".SG\n"
        )

    def test_columns_have_uniform_width(self) -> None:
        doc = document(table(header=[["Name", "Age", "Country"]], rows=[["Alice", "30", "USA"], ["Bob", "4", "UK"]]))
        output = render(doc)

        rows = [line for line in output.splitlines() if not line.startswith(".")]
        assert len({len(row) for row in rows}) == 1
        assert rows[0].index("Age") - len("Name") >= 4

    def test_text_inside_table_goes_to_the_buffer(self) -> None:
        doc = document(paragraph(text("before")), table(header=[["h"]], rows=[["c"]]), paragraph(text("after")))
        output = render(doc)
        assert output == "\nbefore\n.DS\n.TS H\nh    \n.TH\nc    \n.TE\n.DE\n\nafter\n.SG\n"

    def test_styles_inside_cells_are_closed(self) -> None:
        cell = Node(NodeKind.TABLE_CELL, children=[emphasis(text("x"))])
        row = Node(NodeKind.TABLE_ROW, children=[cell])
        doc = document(Node(NodeKind.TABLE, children=[Node(NodeKind.TABLE_HEAD, children=[row])]))
        output = render(doc)

        assert output.count(".I\n") == 1
        assert output.count("\n.R\n") == 1

    def test_table_text_passes_through_escape_hook(self, monkeypatch) -> None:
        from md2troff import macros

        escaped = []
        headings = []
        real_esc, real_heading = macros.esc, macros.table_heading

        def recording_esc(w, p):
            escaped.append(p)
            real_esc(w, p)

        def recording_heading(w):
            headings.append(True)
            real_heading(w)

        monkeypatch.setattr(macros, "esc", recording_esc)
        monkeypatch.setattr(macros, "table_heading", recording_heading)

        output = render(document(table(header=[["h"]], rows=[["c"]])))

        assert escaped == [b"h    ", b"c    \n"]
        assert headings == [True]
        assert ".TH\n" in output

    def test_empty_table_is_fatal(self) -> None:
        with pytest.raises(TableLayoutError):
            render(document(table()))

    def test_nested_table_is_an_error(self) -> None:
        inner = table(header=[["a"]])
        cell = Node(NodeKind.TABLE_CELL, children=[inner])
        outer = Node(NodeKind.TABLE, children=[Node(NodeKind.TABLE_BODY, children=[Node(NodeKind.TABLE_ROW, children=[cell])])])
        with pytest.raises(RenderingError, match="nested"):
            render(document(outer))

    def test_row_outside_table_is_an_error(self) -> None:
        with pytest.raises(RenderingError, match="outside of a table"):
            render(document(Node(NodeKind.TABLE_ROW)))


@pytest.mark.unit
class TestFailFast:
    """Tests for unknown node kinds."""

    def test_kind_without_behavior(self) -> None:
        doc = document(paragraph(text("a")), Node(NodeKind.THEMATIC_BREAK), paragraph(text("b")))
        with pytest.raises(UnknownNodeKindError, match="thematic-break") as exc_info:
            render(doc)
        assert exc_info.value.kind is NodeKind.THEMATIC_BREAK

    def test_kind_outside_enumeration(self) -> None:
        with pytest.raises(UnknownNodeKindError, match="bogus"):
            render(document(Node(kind="bogus")))  # type: ignore[arg-type]

    def test_unknown_kind_is_a_rendering_error(self) -> None:
        with pytest.raises(RenderingError):
            render(document(Node(NodeKind.LINE_BREAK)))


@pytest.mark.unit
class TestRendererBehavior:
    """Tests for renderer state, options and output targets."""

    def test_rejects_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            MsRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_preamble_must_be_text(self) -> None:
        with pytest.raises(TypeError):
            MsRendererOptions(preamble=b".nr PS 12\n")  # type: ignore[arg-type]

    def test_renderer_is_reusable(self, front_matter_document) -> None:
        renderer = MsRenderer()
        first = renderer.render_to_bytes(front_matter_document)
        second = renderer.render_to_bytes(front_matter_document)
        assert first == second

    def test_state_is_reset_after_failure(self) -> None:
        renderer = MsRenderer()
        with pytest.raises(TableLayoutError):
            renderer.render_to_bytes(document(list_node(list_item(table()))))
        assert renderer.render_to_string(document(paragraph(text("ok")))) == "\nok\n.SG\n"

    def test_independent_renderers_in_threads(self) -> None:
        docs = [
            document(list_node(*(list_item(paragraph(text(str(i)))) for i in range(n)), ordered=True))
            for n in range(1, 9)
        ]
        expected = [render(doc) for doc in docs]
        results: dict[int, str] = {}

        def worker(index: int) -> None:
            results[index] = MsRenderer().render_to_string(docs[index])

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(len(docs))]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert [results[i] for i in range(len(docs))] == expected

    def test_render_to_path(self, tmp_path) -> None:
        target = tmp_path / "out.ms"
        MsRenderer().render(document(paragraph(text("x"))), target)
        assert target.read_bytes() == b"\nx\n.SG\n"

    def test_render_to_text_stream(self) -> None:
        stream = io.StringIO()
        MsRenderer().render(document(paragraph(text("x"))), stream)
        assert stream.getvalue() == "\nx\n.SG\n"

    def test_render_to_binary_stream(self) -> None:
        stream = io.BytesIO()
        MsRenderer().render(document(paragraph(text("é"))), stream)
        assert stream.getvalue() == "\né\n.SG\n".encode("utf-8")

    def test_unsupported_output(self) -> None:
        with pytest.raises(TypeError):
            MsRenderer().render(document(), 42)  # type: ignore[arg-type]
