"""List parsing for the orgtree parser.

Handles plain lists (``-``, ``+``, `` *``, ``1.``, ``1)``) and definition
lists (``- term :: definition``), including nesting by indentation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgtree.nodes import (
    Checkbox,
    DefinitionList,
    DefinitionListElement,
    List,
    ListElement,
    Node,
)
from orgtree.tokens import LineToken, TokenType

if TYPE_CHECKING:
    from orgtree.parsing.token_nav import StopPredicate

UNKNOWN_TERM = "???"

CHECKBOX_STATES: dict[str, Checkbox] = {
    " ": "unchecked",
    "X": "checked",
    "-": "partial",
}


class ListParsingMixin:
    """Mixin for list parsing.

    Required Host Methods:
        - _peek() -> LineToken | None
        - _advance() -> LineToken | None
        - _push_back(token) -> None
        - _skip_blank() -> LineToken | None
        - _parse_element(stop) -> Block | None
        - _parse_inline(text) -> Node

    """

    def _parse_list(self, stop: StopPredicate | None = None) -> List | DefinitionList:
        """Parse a list starting at the next token.

        The first element decides whether this is a definition list; the
        list takes every following list item at exactly its indentation.
        """
        root = self._peek()
        assert root is not None and root.is_list_item
        is_definition = root.type is TokenType.DEFINITION_ITEM

        elements: list[Node] = []
        while (token := self._peek()) is not None:
            if not token.is_list_item or token.indentation != root.indentation:
                break
            if stop is not None and stop(token):
                break
            elements.append(self._parse_list_element(root.indentation, is_definition, stop))

        if is_definition:
            return DefinitionList(children=tuple(elements), lineno=root.lineno)
        return List(children=tuple(elements), lineno=root.lineno, ordered=root.ordered)

    def _parse_list_element(
        self,
        root_indentation: int,
        is_definition: bool,
        stop: StopPredicate | None,
    ) -> ListElement | DefinitionListElement:
        """Parse one list element and the deeper-indented content after it.

        Blank lines are consumed; the last one is pushed back when the line
        after it is not a list item, so that it can end a nested paragraph.
        """
        token = self._advance()
        assert token is not None

        if is_definition:
            # Elements without a term of their own get a placeholder term.
            term = token.term if token.type is TokenType.DEFINITION_ITEM else None
            text = self._parse_inline(token.content)
            return DefinitionListElement(
                children=(text, *self._parse_element_body(root_indentation, stop)),
                lineno=token.lineno,
                term=(self._parse_inline(term or UNKNOWN_TERM),),
                checkbox=_checkbox_state(token),
            )

        if token.type is TokenType.DEFINITION_ITEM:
            assert token.alternate is not None
            token = token.alternate

        text = self._parse_inline(token.content)
        return ListElement(
            children=(text, *self._parse_element_body(root_indentation, stop)),
            lineno=token.lineno,
            checkbox=_checkbox_state(token),
        )

    def _parse_element_body(
        self, root_indentation: int, stop: StopPredicate | None
    ) -> list[Node]:
        children: list[Node] = []
        while self._peek() is not None:
            blank = self._skip_blank()
            following = self._peek()
            if following is None:
                break
            if blank is not None and not following.is_list_item:
                self._push_back(blank)
            if following.indentation <= root_indentation:
                break
            if stop is not None and stop(following):
                break

            element = self._parse_element(stop)
            if element is not None:
                children.append(element)
        return children


def _checkbox_state(token: LineToken) -> Checkbox | None:
    return CHECKBOX_STATES.get(token.checkbox) if token.checkbox else None
