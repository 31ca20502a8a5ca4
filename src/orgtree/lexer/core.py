"""Line-classifying lexer with one-token lookahead and pushback.

Pulls physical lines from a LineStream and classifies each one against an
ordered list of categories, most specific first. The first match wins and
the LINE catch-all guarantees that classification never fails.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from orgtree.config import get_parse_config
from orgtree.lexer.classifiers import (
    DirectiveClassifierMixin,
    DrawerClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    TableClassifierMixin,
    TextClassifierMixin,
)
from orgtree.stream import LineStream
from orgtree.tokens import LineToken


class Lexer(
    HeadingClassifierMixin,
    ListClassifierMixin,
    DrawerClassifierMixin,
    DirectiveClassifierMixin,
    TableClassifierMixin,
    TextClassifierMixin,
):
    """Line classifier over a LineStream.

    Usage:
        >>> lexer = Lexer("* (draft) Notes\\n\\nWorld")
        >>> for token in lexer.tokenize():
        ...     print(token)
        LineToken(HEADER, '(draft) Notes', line 1)
        LineToken(BLANK, '', line 2)
        LineToken(LINE, 'World', line 3)

    Lookahead:
        ``peek_token()`` classifies the next line without consuming it.
        ``push_token()`` returns a consumed token to the front of the stream;
        pushed tokens come back in LIFO order before any unread line.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_stream",
        "_peeked",
        "_pushed",
        "_lineno",
        "_tab_width",
        "_line_offset",
    )

    def __init__(
        self,
        source: str | LineStream,
        tab_width: int | None = None,
        line_offset: int = 0,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Document text or an already constructed LineStream
            tab_width: Tab expansion width for indentation; defaults to the
                active ParseConfig
            line_offset: Added to every line number; used when the source
                is an excerpt of a larger document
        """
        self._stream = LineStream(source) if isinstance(source, str) else source
        self._peeked: LineToken | None = None
        self._pushed: list[LineToken] = []
        self._lineno = line_offset
        self._line_offset = line_offset
        self._tab_width = tab_width if tab_width is not None else get_parse_config().tab_width

    @property
    def lineno(self) -> int:
        """Line number of the most recently consumed token (the offset before any)."""
        return self._lineno

    def classify(self, line: str, lineno: int) -> LineToken:
        """Classify a single line.

        Pure function of ``line``, ``lineno`` and the tab width: the same line
        always produces an equal token.
        """
        return (
            self._try_classify_heading(line, lineno)
            or self._try_classify_list_item(line, lineno)
            or self._try_classify_drawer(line, lineno)
            or self._try_classify_directive(line, lineno)
            or self._try_classify_preformatted(line, lineno)
            or self._try_classify_blank(line, lineno)
            or self._try_classify_horizontal_rule(line, lineno)
            or self._try_classify_table(line, lineno)
            or self._try_classify_comment(line, lineno)
            or self._classify_line(line, lineno)
        )

    def has_next(self) -> bool:
        """Whether another token remains."""
        return self.peek_token() is not None

    def peek_token(self) -> LineToken | None:
        """Return the next token without consuming it, or None at end."""
        if self._pushed:
            return self._pushed[-1]
        if self._peeked is None:
            line = self._stream.next_line()
            if line is None:
                return None
            self._peeked = self.classify(line, self._stream.lineno + self._line_offset)
        return self._peeked

    def next_token(self) -> LineToken | None:
        """Consume and return the next token, or None at end."""
        token = self.peek_token()
        if token is None:
            return None
        if self._pushed:
            self._pushed.pop()
        else:
            self._peeked = None
        self._lineno = token.lineno
        return token

    def push_token(self, token: LineToken) -> None:
        """Return a consumed token to the front of the stream."""
        self._pushed.append(token)

    def next_raw_line(self) -> str | None:
        """Consume the next line without interpreting it.

        Used for verbatim block bodies. Returns the original text of a
        pending or pushed-back token if there is one.
        """
        token = self.next_token()
        return token.raw if token is not None else None

    def tokenize(self) -> Iterator[LineToken]:
        """Consume the remaining lines as tokens.

        Yields:
            LineToken objects one at a time
        """
        while (token := self.next_token()) is not None:
            yield token

    def _measure_indent(self, whitespace: str) -> int:
        """Width of leading whitespace.

        With no tab width every whitespace character is one column;
        otherwise tabs expand to the next multiple of the tab width.
        """
        if self._tab_width:
            return len(whitespace.expandtabs(self._tab_width))
        return len(whitespace)
