"""Tests for list and definition list parsing."""

from __future__ import annotations

from orgtree import (
    Bold,
    DefinitionList,
    DefinitionListElement,
    Header,
    List,
    ListElement,
    Paragraph,
    Text,
    parse,
)


def text(value: str) -> Text:
    return Text(value=value)


class TestPlainLists:
    """Siblings, ordering and nesting."""

    def test_siblings_share_one_list(self) -> None:
        doc = parse("- a\n- b\n- c")
        assert doc.children == (
            List(
                ordered=False,
                children=(
                    ListElement(children=(text("a"),)),
                    ListElement(children=(text("b"),)),
                    ListElement(children=(text("c"),)),
                ),
            ),
        )

    def test_ordered(self) -> None:
        lst = parse("1. a\n2) b").children[0]
        assert isinstance(lst, List)
        assert lst.ordered is True
        assert len(lst.children) == 2

    def test_first_element_decides_ordering(self) -> None:
        lst = parse("- a\n1. b").children[0]
        assert isinstance(lst, List)
        assert lst.ordered is False
        assert len(lst.children) == 2

    def test_indented_star_bullets(self) -> None:
        lst = parse(" * a\n * b").children[0]
        assert isinstance(lst, List)
        assert len(lst.children) == 2

    def test_nested_list(self) -> None:
        doc = parse("- a\n  - b\n- c")
        assert doc.children == (
            List(
                children=(
                    ListElement(
                        children=(
                            text("a"),
                            List(children=(ListElement(children=(text("b"),)),)),
                        )
                    ),
                    ListElement(children=(text("c"),)),
                )
            ),
        )

    def test_continuation_paragraph(self) -> None:
        element = parse("- a\n  more text\n- b").children[0].children[0]
        assert element == ListElement(
            children=(text("a"), Paragraph(children=(text("more text"),)))
        )

    def test_header_ends_list(self) -> None:
        doc = parse("- a\n* Head")
        assert isinstance(doc.children[0], List)
        assert isinstance(doc.children[1], Header)

    def test_element_text_is_inline_parsed(self) -> None:
        element = parse("- [[http://x.org]]").children[0].children[0]
        assert element.children[0].target == "http://x.org"


class TestBlankLines:
    """A blank line is pushed back only when no list item follows it."""

    def test_blank_between_items_keeps_one_list(self) -> None:
        doc = parse("- a\n\n- b")
        assert len(doc.children) == 1
        assert len(doc.children[0].children) == 2

    def test_blank_before_outdented_text_ends_list(self) -> None:
        doc = parse("- a\n\nparagraph")
        assert doc.children == (
            List(children=(ListElement(children=(text("a"),)),)),
            Paragraph(children=(text("paragraph"),)),
        )

    def test_blank_before_nested_paragraph(self) -> None:
        doc = parse("- a\n\n  nested para\n- b")
        assert doc.children == (
            List(
                children=(
                    ListElement(children=(text("a"), Paragraph(children=(text("nested para"),)))),
                    ListElement(children=(text("b"),)),
                )
            ),
        )

    def test_blank_before_nested_list_is_discarded(self) -> None:
        doc = parse("- a\n\n  - b")
        outer = doc.children[0]
        assert len(doc.children) == 1
        assert outer.children[0].children[1] == List(
            children=(ListElement(children=(text("b"),)),)
        )


class TestCheckboxes:
    """Checkbox states on list elements."""

    def test_states(self) -> None:
        lst = parse("- [X] done\n- [ ] todo\n- [-] partial\n- plain").children[0]
        assert [element.checkbox for element in lst.children] == [
            "checked",
            "unchecked",
            "partial",
            None,
        ]
        assert lst.children[0].children == (text("done"),)

    def test_lowercase_x_is_text(self) -> None:
        element = parse("- [x] item").children[0].children[0]
        assert element.checkbox is None
        assert element.children == (text("[x] item"),)


class TestDefinitionLists:
    """Lists whose first element reads ``term :: definition``."""

    def test_definition_list(self) -> None:
        doc = parse("- term :: def\n- other :: thing")
        assert doc.children == (
            DefinitionList(
                children=(
                    DefinitionListElement(term=(text("term"),), children=(text("def"),)),
                    DefinitionListElement(term=(text("other"),), children=(text("thing"),)),
                )
            ),
        )

    def test_first_element_has_term(self) -> None:
        dlist = parse("- [X] term :: def").children[0]
        element = dlist.children[0]
        assert isinstance(element, DefinitionListElement)
        assert element.term == (text("term"),)
        assert element.checkbox == "checked"

    def test_plain_element_gets_placeholder_term(self) -> None:
        dlist = parse("- term :: def\n- plain").children[0]
        assert dlist.children[1] == DefinitionListElement(
            term=(text("???"),), children=(text("plain"),)
        )

    def test_empty_term_gets_placeholder(self) -> None:
        element = parse("- :: def").children[0].children[0]
        assert element.term == (text("???"),)

    def test_plain_first_element_never_becomes_definition_list(self) -> None:
        lst = parse("- plain\n- term :: def").children[0]
        assert type(lst) is List
        assert lst.children[1] == ListElement(children=(text("term :: def"),))

    def test_term_is_inline_parsed(self) -> None:
        element = parse("- *bold* :: def").children[0].children[0]
        assert element.term == (Bold(children=(text("bold"),)),)
