"""Directive, block and drawer parsing for the orgtree parser.

Handles ``#+BEGIN_NAME ... #+END_NAME`` blocks, ``#+BEGIN: NAME ... #+END:``
dynamic blocks, one-shot ``#+NAME: value`` directives and
``:NAME: ... :END:`` drawers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from orgtree.errors import UnclosedConstructError
from orgtree.nodes import Directive, Drawer, Text
from orgtree.tokens import LineToken, TokenType
from orgtree.utils.logger import get_logger

if TYPE_CHECKING:
    from orgtree.lexer import Lexer
    from orgtree.nodes import Node
    from orgtree.parsing.token_nav import StopPredicate

logger = get_logger(__name__)

# Blocks whose body is kept as raw text.
VERBATIM_BLOCKS = frozenset({"src", "example", "html"})

# One-shot names reserved for block delimiters.
_INVALID_ONE_SHOT = frozenset({"begin:", "end:"})


def decode_lisp_value(value: str | None) -> Any:
    """Decode an ``#+OPTIONS:`` value.

    ``t`` is True, ``nil`` is False, a run of digits is an int; anything
    else is returned unchanged.

    Example:
        >>> decode_lisp_value("nil"), decode_lisp_value("3"), decode_lisp_value("{}")
        (False, 3, '{}')
    """
    if value == "t":
        return True
    if value == "nil":
        return False
    if value is not None and value.isascii() and value.isdigit():
        return int(value)
    return value


def split_parameters(params: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split directive parameters into (arguments, options).

    Options are the tokens starting with ``-``; order is preserved in both.
    """
    tokens = params.split()
    arguments = tuple(token for token in tokens if not token.startswith("-"))
    options = tuple(token for token in tokens if token.startswith("-"))
    return arguments, options


class DirectiveParsingMixin:
    """Mixin for directive, block and drawer parsing.

    Required Host Attributes:
        - _lexer: Lexer
        - _source_file: str | None
        - _options: dict[str, Any]
        - _title, _author, _email: str | None
        - _directive_values: dict[str, str]

    Required Host Methods:
        - _peek() -> LineToken | None
        - _advance() -> LineToken | None
        - _error(message, token) -> ParseError
        - _parse_children(stop) -> tuple[Node, ...]

    """

    _lexer: Lexer
    _source_file: str | None
    _options: dict[str, Any]
    _title: str | None
    _author: str | None
    _email: str | None
    _directive_values: dict[str, str]

    def _parse_block_directive(self) -> Directive:
        """Parse a block or dynamic block up to its end line.

        Blocks close on the end line with the same (case-insensitive) name;
        dynamic blocks close on ``#+END:``. Verbatim blocks keep their body
        as one Text child; other blocks hold parsed elements.

        Raises:
            UnclosedConstructError: Input ended before the end line.
        """
        begin = self._advance()
        assert begin is not None
        dynamic = begin.type is TokenType.DYNAMIC_BEGIN
        name = (begin.name or "").lower()
        arguments, options = split_parameters(begin.params)

        construct = "dynamic block" if dynamic else "block"
        stop = _is_dynamic_end if dynamic else _block_end_named(name)

        children: tuple[Node, ...]
        if not dynamic and name in VERBATIM_BLOCKS:
            children = (self._collect_verbatim(stop),)
        else:
            children = self._parse_children(stop)

        if self._advance() is None:
            raise UnclosedConstructError(
                construct, begin.name or "", self._lexer.lineno, self._source_file
            )

        return Directive(
            children=children,
            lineno=begin.lineno,
            name=name,
            arguments=arguments,
            options=options,
            raw_value=begin.params,
            dynamic=dynamic,
        )

    def _collect_verbatim(self, stop: StopPredicate) -> Text:
        """Consume raw lines until ``stop`` matches; the end line is left."""
        lines: list[str] = []
        while (token := self._peek()) is not None and not stop(token):
            line = self._lexer.next_raw_line()
            assert line is not None
            lines.append(line)
        return Text(value="\n".join(lines))

    def _parse_directive_line(self) -> Directive:
        """Parse a one-shot ``#+NAME: value`` directive and apply it.

        Raises:
            ParseError: The line has no recognizable directive form, or the
                name is reserved for block delimiters.
        """
        token = self._advance()
        assert token is not None
        if token.name is None:
            word = token.content.split(maxsplit=1)[0] if token.content else ""
            raise self._error(f"Invalid directive {word.lower()}".rstrip(), token)

        name = f"{token.name.lower()}:"
        if name in _INVALID_ONE_SHOT:
            raise self._error(f"Invalid directive {name}", token)

        arguments, options = split_parameters(token.params)
        node = Directive(
            lineno=token.lineno,
            name=name,
            arguments=arguments,
            options=options,
            raw_value=token.params,
        )
        self._interpret_directive(node)
        return node

    def _interpret_directive(self, node: Directive) -> None:
        match node.name:
            case "options:":
                for pair in node.arguments:
                    key, sep, value = pair.partition(":")
                    self._options[key] = decode_lisp_value(value if sep else None)
                logger.debug("Options updated at line %s: %s", node.lineno, node.raw_value)
            case "title:":
                self._title = node.raw_value
            case "author:":
                self._author = node.raw_value
            case "email:":
                self._email = node.raw_value
            case _:
                self._directive_values[node.name] = node.raw_value
                logger.debug("Stored directive %r at line %s", node.name, node.lineno)

    def _parse_drawer(self) -> Drawer:
        """Parse a drawer up to its ``:END:`` line.

        Raises:
            UnclosedConstructError: Input ended before ``:END:``.
        """
        begin = self._advance()
        assert begin is not None
        children = self._parse_children(_is_drawer_end)

        if self._advance() is None:
            raise UnclosedConstructError(
                "drawer", begin.name or "", self._lexer.lineno, self._source_file
            )

        return Drawer(children=children, lineno=begin.lineno, name=begin.name or "")


def _is_drawer_end(token: LineToken) -> bool:
    return token.type is TokenType.DRAWER_END


def _is_dynamic_end(token: LineToken) -> bool:
    return token.type is TokenType.DYNAMIC_END


def _block_end_named(name: str) -> StopPredicate:
    """Stop predicate for the end line of the block called ``name``."""

    def is_end(token: LineToken) -> bool:
        return token.type is TokenType.BLOCK_END and (token.name or "").lower() == name

    return is_end
