"""Core block parsing for the orgtree parser.

Provides element dispatch and the simple blocks (headers, TODO items,
paragraphs, preformatted runs, horizontal rules, blank lines, comments).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from orgtree.errors import UnmatchedEndError
from orgtree.nodes import (
    Block,
    Header,
    HorizontalRule,
    Paragraph,
    Preformatted,
    Text,
    TodoItem,
)
from orgtree.tokens import LineToken, TokenType
from orgtree.utils.logger import get_logger

if TYPE_CHECKING:
    from orgtree.config import ParseConfig
    from orgtree.nodes import Node
    from orgtree.parsing.token_nav import StopPredicate

logger = get_logger(__name__)


class BlockParsingCoreMixin:
    """Element dispatch and simple block parsing.

    Required Host Attributes:
        - _lexer: Lexer
        - _source_file: str | None
        - _config: ParseConfig

    Required Host Methods:
        - _peek() -> LineToken | None
        - _advance() -> LineToken | None
        - _skip_blank() -> LineToken | None
        - _error(message, token) -> ParseError
        - _parse_inline(text) -> Node
        - _parse_list(stop) -> Block
        - _parse_table() -> Table
        - _parse_block_directive() -> Directive
        - _parse_directive_line() -> Directive
        - _parse_drawer() -> Drawer

    """

    _config: ParseConfig
    _source_file: str | None

    def _parse_element(self, stop: StopPredicate | None = None) -> Block | None:
        """Parse the next element, whatever its kind.

        Args:
            stop: Predicate identifying the token that closes the enclosing
                construct. Callers check it before calling; it is handed on
                to constructs that parse nested elements.

        Returns:
            The parsed block, or None when the consumed lines produce no
            node (comments, trailing blank lines).
        """
        token = self._peek()
        if token is None:
            return None

        match token.type:
            case TokenType.HEADER:
                return self._parse_header()

            case TokenType.TODO:
                return self._parse_todo()

            case TokenType.PREFORMATTED:
                return self._parse_preformatted()

            case TokenType.LIST_ITEM | TokenType.DEFINITION_ITEM:
                return self._parse_list(stop)

            case TokenType.TABLE_ROW | TokenType.TABLE_SEPARATOR:
                return self._parse_table()

            case TokenType.BLOCK_BEGIN | TokenType.DYNAMIC_BEGIN:
                return self._parse_block_directive()

            case TokenType.DIRECTIVE:
                return self._parse_directive_line()

            case TokenType.DRAWER_BEGIN:
                return self._parse_drawer()

            case TokenType.HORIZONTAL_RULE:
                self._advance()
                return HorizontalRule(lineno=token.lineno)

            case TokenType.COMMENT:
                self._advance()
                logger.debug("Dropped comment at line %d", token.lineno)
                return None

            case TokenType.BLANK:
                return self._parse_after_blank(stop)

            case TokenType.LINE:
                return self._parse_paragraph()

            case TokenType.BLOCK_END | TokenType.DYNAMIC_END | TokenType.DRAWER_END:
                raise UnmatchedEndError(token.name or "", token.lineno, self._source_file)

            case _:
                raise self._error(f"Unhandled token: {token.type.name}", token)

    def _parse_header(self) -> Header:
        token = self._advance()
        assert token is not None
        return self._header_from_token(token)

    def _parse_todo(self) -> Header:
        """Parse a TODO-shaped line.

        The line becomes a TodoItem only when its keyword is configured;
        otherwise the header reading of the same line is used.
        """
        token = self._advance()
        assert token is not None and token.alternate is not None

        if token.keyword not in self._config.todo_keywords:
            return self._header_from_token(token.alternate)

        return TodoItem(
            children=(self._parse_inline(token.content),),
            lineno=token.lineno,
            depth=token.depth,
            tags=token.tags,
            keyword=token.keyword or "",
            priority=token.priority,
        )

    def _header_from_token(self, token: LineToken) -> Header:
        return Header(
            children=(self._parse_inline(token.content),),
            lineno=token.lineno,
            depth=token.depth,
            tags=token.tags,
        )

    def _parse_preformatted(self) -> Preformatted:
        """Parse a run of preformatted lines.

        Consumes preformatted lines indented at least as deep as the first.
        The joined text is kept verbatim.
        """
        first = self._peek()
        assert first is not None

        lines: list[str] = []
        while (token := self._peek()) is not None:
            if token.type is not TokenType.PREFORMATTED or token.indentation < first.indentation:
                break
            self._advance()
            lines.append(token.content)

        return Preformatted(children=(Text(value="\n".join(lines)),), lineno=first.lineno)

    def _parse_paragraph(self) -> Paragraph:
        """Parse consecutive text lines into one paragraph.

        Lines indented less than the first line end the paragraph.
        """
        first = self._peek()
        assert first is not None

        lines: list[str] = []
        while (token := self._peek()) is not None:
            if token.type is not TokenType.LINE or token.indentation < first.indentation:
                break
            self._advance()
            lines.append(token.content)

        return Paragraph(children=(self._parse_inline("\n".join(lines)),), lineno=first.lineno)

    def _parse_after_blank(self, stop: StopPredicate | None) -> Block | None:
        """Skip blank lines and parse what follows them."""
        self._skip_blank()
        token = self._peek()
        if token is None or (stop is not None and stop(token)):
            return None
        if token.type is TokenType.LINE:
            return self._parse_paragraph()
        return self._parse_element(stop)

    def _parse_children(self, stop: StopPredicate) -> tuple[Node, ...]:
        """Parse elements until ``stop`` matches the next token.

        Returns:
            The parsed children; the stop token is left unconsumed. At end
            of input the children parsed so far are returned and the caller
            decides whether that is an error.
        """
        children: list[Node] = []
        while (token := self._peek()) is not None and not stop(token):
            element = self._parse_element(stop)
            if element is not None:
                children.append(element)
        return tuple(children)
