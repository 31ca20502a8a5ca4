"""Recursive descent parser producing the document tree.

Consumes classified line tokens from the Lexer and builds typed nodes.
Produces immutable (frozen) dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token lookahead, pushback, located errors
- `InlineParsingMixin`: Inline content (emphasis, links)
- `BlockParsingMixin`: Block-level content (headers, lists, tables, blocks)

Thread Safety:
- Parser produces immutable trees (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share trees across threads

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from orgtree.config import ParseConfig, get_parse_config, resolve_options
from orgtree.lexer import Lexer
from orgtree.nodes import Document, Node
from orgtree.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from orgtree.stream import LineStream
from orgtree.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for outline documents.

    Usage:
        >>> doc = Parser("* Hello\\n\\nWorld").parse()
        >>> doc.children[0]
        Header(children=(Text(children=(), lineno=None, value='Hello'),), lineno=1, depth=1, tags=())

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting tree is immutable and thread-safe.

    Options:
        ``options`` seeds the document options (``toc``, ``num``, ``^``,
        ``multilineCell`` and any caller keys). ``#+OPTIONS:`` lines update
        them while parsing; the final mapping is copied onto the Document.

    """

    __slots__ = (
        "_lexer",
        "_source_file",
        "_options",
        # Document scalars set by one-shot directives
        "_title",
        "_author",
        "_email",
        "_directive_values",
    )

    def __init__(
        self,
        source: str | LineStream,
        options: Mapping[str, Any] | None = None,
        source_file: str | None = None,
        *,
        line_offset: int = 0,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Document text or an already constructed LineStream
            options: Document options; merged over the defaults
            source_file: Optional source file path for error messages
            line_offset: Line number of the line before ``source`` in the
                enclosing document; node and error line numbers are shifted
                by it

        """
        self._lexer = Lexer(source, line_offset=line_offset)
        self._source_file = source_file
        self._options = resolve_options(options)
        self._title: str | None = None
        self._author: str | None = None
        self._email: str | None = None
        self._directive_values: dict[str, str] = {}

    @classmethod
    def parse_stream(
        cls,
        source: str | LineStream,
        options: Mapping[str, Any] | None = None,
    ) -> Document:
        """Parse ``source`` in one call.

        Example:
            >>> Parser.parse_stream("#+TITLE: Notes").title
            'Notes'
        """
        return cls(source, options).parse()

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> Document:
        """Parse the whole source into a Document.

        Raises:
            ParseError: The source contains a construct the parser cannot
                build a tree from. No partial document is returned.

        Thread Safety:
            Returns an immutable tree (frozen dataclasses).
        """
        logger.debug("Parsing %s", self._source_file or "<string>")

        children: list[Node] = []
        while not self._at_end():
            element = self._parse_element()
            if element is not None:
                children.append(element)

        logger.debug(
            "Parsed %s: %d top-level nodes",
            self._source_file or "<string>",
            len(children),
        )
        return Document(
            children=tuple(children),
            title=self._title,
            author=self._author,
            email=self._email,
            directive_values=self._directive_values,
            options=self._options,
        )

    def _parse_nested_content(self, content: str, lineno: int) -> tuple[Node, ...]:
        """Parse ``content`` as a separate document and return its blocks.

        ``lineno`` is the document line on which ``content`` starts; nodes
        and errors of the sub-document are numbered from there.

        Used for table cells. The sub-parser starts from the current options
        and inherits configuration via ContextVar. Directives inside the
        content only affect the sub-document.
        """
        sub_parser = Parser(
            content, self._options, self._source_file, line_offset=lineno - 1
        )
        return sub_parser.parse().children
