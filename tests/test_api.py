"""Tests for the public parse API and the simple block types."""

from __future__ import annotations

import pytest

from orgtree import (
    DEFAULT_OPTIONS,
    Document,
    Drawer,
    Header,
    HorizontalRule,
    LineStream,
    Paragraph,
    ParseConfig,
    Parser,
    Preformatted,
    Text,
    TodoItem,
    UnclosedConstructError,
    parse,
)
from orgtree.nodes import Bold, InlineContainer


class TestParse:
    """parse() entry point."""

    def test_returns_document(self) -> None:
        doc = parse("text")
        assert isinstance(doc, Document)
        assert isinstance(doc.children, tuple)

    def test_empty_document(self) -> None:
        doc = parse("")
        assert doc.children == ()
        assert doc.title is None

    def test_accepts_line_stream(self) -> None:
        doc = parse(LineStream("* Head"))
        assert isinstance(doc.children[0], Header)

    def test_parse_stream_classmethod(self) -> None:
        doc = Parser.parse_stream("#+TITLE: Notes")
        assert doc.title == "Notes"

    def test_default_options(self) -> None:
        assert parse("x").options == dict(DEFAULT_OPTIONS)

    def test_caller_options_override_defaults(self) -> None:
        options = parse("x", {"toc": False, "custom": 1}).options
        assert options["toc"] is False
        assert options["num"] is True
        assert options["custom"] == 1

    def test_caller_options_are_not_mutated(self) -> None:
        options = {"toc": True}
        parse("#+OPTIONS: toc:nil", options)
        assert options == {"toc": True}

    def test_nodes_carry_line_numbers(self) -> None:
        doc = parse("first\n\n* Second")
        assert doc.children[0].lineno == 1
        assert doc.children[1].lineno == 3


class TestDocument:
    """Document values are immutable and hashable."""

    def test_options_are_read_only(self) -> None:
        doc = parse("x")
        with pytest.raises(TypeError):
            doc.options["toc"] = False  # type: ignore[index]
        assert doc.options["toc"] is True

    def test_directive_values_are_read_only(self) -> None:
        doc = parse("#+STARTUP: overview")
        with pytest.raises(TypeError):
            doc.directive_values["startup:"] = "fold"  # type: ignore[index]
        assert doc.directive_values == {"startup:": "overview"}

    def test_hashable(self) -> None:
        source = "#+TITLE: Notes\n#+OPTIONS: toc:nil\n* a"
        assert hash(parse(source)) == hash(parse(source))
        assert len({parse(source), parse(source)}) == 1

    def test_constructor_copies_mappings(self) -> None:
        options = {"toc": True}
        values = {"startup:": "overview"}
        doc = Document(directive_values=values, options=options)
        options["toc"] = False
        values.clear()
        assert doc.options == {"toc": True}
        assert doc.directive_values == {"startup:": "overview"}


class TestHeaders:
    """Headers and TODO items."""

    def test_depth_and_tags(self) -> None:
        header = parse("** Foo :a:b:").children[0]
        assert type(header) is Header
        assert header.depth == 2
        assert header.tags == ("a", "b")
        assert header.children == (Text(value="Foo"),)

    def test_header_text_is_inline_parsed(self) -> None:
        header = parse("* Hello *world*").children[0]
        assert header.children == (
            InlineContainer(children=(Text(value="Hello "), Bold(children=(Text(value="world"),)))),
        )

    def test_todo_item(self) -> None:
        item = parse("* TODO [#A] Write docs :work:").children[0]
        assert isinstance(item, TodoItem)
        assert item.keyword == "TODO"
        assert item.priority == "A"
        assert item.depth == 1
        assert item.tags == ("work",)
        assert item.children == (Text(value="Write docs"),)

    def test_done_is_a_default_keyword(self) -> None:
        item = parse("** DONE Ship it").children[0]
        assert isinstance(item, TodoItem)
        assert item.keyword == "DONE"

    def test_unknown_keyword_is_plain_header(self) -> None:
        header = parse("* WAIT [#B] for review").children[0]
        assert type(header) is Header
        assert header.children == (Text(value="WAIT [#B] for review"),)

    def test_configured_keywords(self) -> None:
        config = ParseConfig(todo_keywords=frozenset({"WAIT"}))
        item = parse("* WAIT for review", config=config).children[0]
        assert isinstance(item, TodoItem)
        assert item.keyword == "WAIT"
        assert type(parse("* TODO x", config=config).children[0]) is Header

    def test_todo_item_is_a_header(self) -> None:
        assert isinstance(parse("* TODO x").children[0], Header)

    def test_header_lines_are_never_paragraphs(self) -> None:
        doc = parse("text\n* Head\nmore")
        assert [type(node) for node in doc.children] == [Paragraph, Header, Paragraph]


class TestParagraphs:
    """Paragraph grouping."""

    def test_consecutive_lines_join(self) -> None:
        doc = parse("line one\nline two")
        assert doc.children == (Paragraph(children=(Text(value="line one\nline two"),)),)

    def test_blank_line_separates(self) -> None:
        doc = parse("a\n\nb")
        assert doc.children == (
            Paragraph(children=(Text(value="a"),)),
            Paragraph(children=(Text(value="b"),)),
        )

    def test_deeper_lines_continue(self) -> None:
        doc = parse("a\n  b")
        assert doc.children == (Paragraph(children=(Text(value="a\nb"),)),)

    def test_shallower_line_starts_new_paragraph(self) -> None:
        doc = parse("  a\nb")
        assert len(doc.children) == 2

    def test_leading_and_trailing_blanks(self) -> None:
        doc = parse("\n\ntext\n\n")
        assert doc.children == (Paragraph(children=(Text(value="text"),)),)


class TestPreformatted:
    """``: text`` runs are verbatim."""

    def test_run_is_joined(self) -> None:
        doc = parse(": one\n:  two\nafter")
        assert doc.children[0] == Preformatted(children=(Text(value="one\n two"),))
        assert doc.children[1] == Paragraph(children=(Text(value="after"),))

    def test_no_inline_parsing(self) -> None:
        doc = parse(": *not bold*")
        assert doc.children == (Preformatted(children=(Text(value="*not bold*"),)),)

    def test_shallower_line_ends_run(self) -> None:
        doc = parse("  : a\n: b")
        assert doc.children == (
            Preformatted(children=(Text(value="a"),)),
            Preformatted(children=(Text(value="b"),)),
        )


class TestLeafBlocks:
    """Rules and comments."""

    def test_horizontal_rule(self) -> None:
        doc = parse("a\n-----\nb")
        assert doc.children[1] == HorizontalRule()
        assert len(doc.children) == 3

    def test_comments_are_dropped(self) -> None:
        doc = parse("# hidden\ntext\n  # also hidden")
        assert doc.children == (Paragraph(children=(Text(value="text"),)),)


class TestDrawers:
    """``:NAME: ... :END:`` regions."""

    def test_drawer(self) -> None:
        doc = parse("* Head\n:PROPERTIES:\n:ID: 42\n:END:\nafter")
        drawer = doc.children[1]
        assert drawer == Drawer(
            name="PROPERTIES",
            children=(Paragraph(children=(Text(value=":ID: 42"),)),),
        )
        assert doc.children[2] == Paragraph(children=(Text(value="after"),))

    def test_empty_drawer(self) -> None:
        assert parse(":LOGBOOK:\n:END:").children == (Drawer(name="LOGBOOK"),)

    def test_unclosed_drawer(self) -> None:
        with pytest.raises(UnclosedConstructError) as exc_info:
            parse(":PROPERTIES:\n:ID: 42")
        assert exc_info.value.name == "PROPERTIES"
        assert exc_info.value.lineno == 2
