"""Token navigation utilities for the orgtree parser.

Provides the mixin that wraps the Lexer's lookahead and pushback and builds
located errors.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TYPE_CHECKING

from orgtree.errors import ParseError
from orgtree.tokens import LineToken, TokenType

if TYPE_CHECKING:
    from orgtree.lexer import Lexer

type StopPredicate = Callable[[LineToken], bool]


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _lexer: Lexer
        - _source_file: str | None

    """

    _lexer: Lexer
    _source_file: str | None

    def _at_end(self) -> bool:
        """Check if the token stream is exhausted."""
        return not self._lexer.has_next()

    def _peek(self) -> LineToken | None:
        """Return the next token without consuming it."""
        return self._lexer.peek_token()

    def _advance(self) -> LineToken | None:
        """Consume and return the next token."""
        return self._lexer.next_token()

    def _push_back(self, token: LineToken) -> None:
        """Un-consume a token; it is returned by the next peek."""
        self._lexer.push_token(token)

    def _skip_blank(self) -> LineToken | None:
        """Consume consecutive blank lines.

        Returns:
            The last blank token skipped, or None if the next token was not
            blank.
        """
        blank = None
        while (token := self._peek()) is not None and token.type is TokenType.BLANK:
            blank = self._advance()
        return blank

    def _expect(self, types: Collection[TokenType], what: str) -> LineToken:
        """Consume the next token, which must be one of ``types``."""
        token = self._peek()
        if token is None or token.type not in types:
            raise self._error(f"Expected {what}", token)
        self._advance()
        return token

    def _error(self, message: str, token: LineToken | None = None) -> ParseError:
        """Build a ParseError located at ``token`` or at the current line."""
        lineno = token.lineno if token is not None else self._lexer.lineno
        return ParseError(message, lineno, self._source_file)
