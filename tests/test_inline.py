"""Tests for inline emphasis and link parsing."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from orgtree import (
    Bold,
    Code,
    Dashed,
    InlineContainer,
    Italic,
    Link,
    Paragraph,
    ParseConfig,
    Text,
    Underline,
    parse,
)
from orgtree.parsing.inline import parse_emphasis, parse_links


def text(value: str) -> Text:
    return Text(value=value)


class TestEmphasis:
    """Marker recognition and node kinds."""

    @pytest.mark.parametrize(
        ("source", "node_cls"),
        [
            ("*x*", Bold),
            ("/x/", Italic),
            ("_x_", Underline),
            ("+x+", Dashed),
        ],
    )
    def test_markers(self, source: str, node_cls: type) -> None:
        assert parse_emphasis(source) == node_cls(children=(text("x"),))

    def test_plain_text(self) -> None:
        assert parse_emphasis("plain") == text("plain")

    def test_empty_text(self) -> None:
        assert parse_emphasis("") == text("")

    def test_span_between_text(self) -> None:
        assert parse_emphasis("a *b* c") == InlineContainer(
            children=(text("a "), Bold(children=(text("b"),)), text(" c"))
        )

    def test_adjacent_spans(self) -> None:
        assert parse_emphasis("*a* *b*") == InlineContainer(
            children=(
                Bold(children=(text("a"),)),
                text(" "),
                Bold(children=(text("b"),)),
            )
        )

    def test_nested_emphasis(self) -> None:
        assert parse_emphasis("*bold /italic/ bold*") == Bold(
            children=(text("bold "), Italic(children=(text("italic"),)), text(" bold"))
        )

    def test_parentheses_and_punctuation(self) -> None:
        assert parse_emphasis("(*a*)") == InlineContainer(
            children=(text("("), Bold(children=(text("a"),)), text(")"))
        )
        assert parse_emphasis("*a*, b") == InlineContainer(
            children=(Bold(children=(text("a"),)), text(", b"))
        )

    def test_body_may_span_lines(self) -> None:
        assert parse_emphasis("*multi\nline*") == Bold(children=(text("multi\nline"),))

    @pytest.mark.parametrize(
        "source",
        [
            "a*b*",  # no whitespace before the opening marker
            "*a*b",  # word character after the closing marker
            "* x*",  # body starts with whitespace
            "*x *",  # body ends with whitespace
            "**",  # empty body
        ],
    )
    def test_not_emphasis(self, source: str) -> None:
        assert parse_emphasis(source) == text(source)


class TestCode:
    """Code and verbatim bodies are literal."""

    def test_code(self) -> None:
        assert parse_emphasis("=*not bold*=") == Code(children=(text("*not bold*"),))

    def test_verbatim(self) -> None:
        assert parse_emphasis("~[[x]]~") == Code(children=(text("[[x]]"),))


class TestLinks:
    """Bracket links with and without titles."""

    def test_bare_link(self) -> None:
        assert parse_emphasis("[[file.org]]") == Link(
            target="file.org", children=(text("file.org"),)
        )

    def test_titled_link(self) -> None:
        assert parse_emphasis("[[http://example.com][Example]]") == Link(
            target="http://example.com", children=(text("Example"),)
        )

    def test_links_between_text(self) -> None:
        assert parse_emphasis("see [[a]] and [[b][B]]") == InlineContainer(
            children=(
                text("see "),
                Link(target="a", children=(text("a"),)),
                text(" and "),
                Link(target="b", children=(text("B"),)),
            )
        )

    def test_title_is_emphasis_parsed(self) -> None:
        assert parse_emphasis("[[a][x /y/ z]] tail") == InlineContainer(
            children=(
                Link(
                    target="a",
                    children=(
                        InlineContainer(
                            children=(text("x "), Italic(children=(text("y"),)), text(" z"))
                        ),
                    ),
                ),
                text(" tail"),
            )
        )

    def test_link_inside_emphasis(self) -> None:
        assert parse_emphasis("*see [[a]]*") == Bold(
            children=(text("see "), Link(target="a", children=(text("a"),)))
        )

    def test_emphasis_cutting_through_link_is_ignored(self) -> None:
        assert parse_emphasis("*a [[b* c]]") == InlineContainer(
            children=(text("*a "), Link(target="b* c", children=(text("b* c"),)))
        )

    def test_parse_links_skips_empty_text(self) -> None:
        assert parse_links("[[a]][[b]]") == [
            Link(target="a", children=(text("a"),)),
            Link(target="b", children=(text("b"),)),
        ]


class TestDepthLimit:
    """Text nested deeper than the limit is kept literally."""

    def test_explicit_limit(self) -> None:
        assert parse_emphasis("*a /b/*", max_depth=1) == Bold(children=(text("a /b/"),))

    def test_limit_from_config(self) -> None:
        doc = parse("x *a*", config=ParseConfig(max_inline_depth=0))
        assert doc.children == (Paragraph(children=(text("x *a*"),)),)

    def test_deep_nesting_within_default_limit(self) -> None:
        source = "*a /b _c +d+ c_ b/ a*"
        node = parse_emphasis(source)
        assert isinstance(node, Bold)
        italic = node.children[1]
        assert isinstance(italic, Italic)
        assert isinstance(italic.children[1], Underline)


class TestReentrancy:
    """Inline parsing keeps no shared state."""

    def test_concurrent_calls_match_sequential(self) -> None:
        sources = [f"line {i} *b{i}* /i{i}/ [[t{i}][T {i}]]" for i in range(200)]
        expected = [parse_emphasis(s) for s in sources]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(parse_emphasis, sources))
        assert results == expected

    def test_inline_parse_during_paragraph(self) -> None:
        doc = parse("one *two*\nthree /four/")
        paragraph = doc.children[0]
        assert paragraph.children[0] == InlineContainer(
            children=(
                text("one "),
                Bold(children=(text("two"),)),
                text("\nthree "),
                Italic(children=(text("four"),)),
            )
        )
