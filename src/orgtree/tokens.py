"""LineToken and TokenType definitions for the orgtree lexer.

The lexer classifies every physical line into exactly one LineToken which
the parser consumes. A token carries the line's category, its captures and,
for the two ambiguous grammars, an alternate interpretation of the same line.

Thread Safety:
LineToken is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Line categories, listed in classification precedence order.

    The lexer tries each category top to bottom and keeps the first match;
    LINE always matches.

    """

    # Outline
    TODO = auto()  # ** TODO [#A] Title :tag:
    HEADER = auto()  # ** Title :tag:

    # Lists
    DEFINITION_ITEM = auto()  # - term :: definition
    LIST_ITEM = auto()  # - item, + item, " * item", 1. item, 1) item

    # Drawers
    DRAWER_BEGIN = auto()  # :PROPERTIES:
    DRAWER_END = auto()  # :END:

    # Directives and blocks
    BLOCK_BEGIN = auto()  # #+BEGIN_SRC python
    BLOCK_END = auto()  # #+END_SRC
    DYNAMIC_BEGIN = auto()  # #+BEGIN: clocktable :maxlevel 2
    DYNAMIC_END = auto()  # #+END:
    DIRECTIVE = auto()  # #+TITLE: value

    # Leaf lines
    PREFORMATTED = auto()  # : verbatim line
    BLANK = auto()
    HORIZONTAL_RULE = auto()  # -----
    TABLE_SEPARATOR = auto()  # |---+---|
    TABLE_ROW = auto()  # | a | b |
    COMMENT = auto()  # # comment
    LINE = auto()  # anything else


LIST_ITEM_TYPES = frozenset({TokenType.LIST_ITEM, TokenType.DEFINITION_ITEM})
TABLE_TYPES = frozenset({TokenType.TABLE_ROW, TokenType.TABLE_SEPARATOR})
END_TYPES = frozenset({TokenType.BLOCK_END, TokenType.DYNAMIC_END, TokenType.DRAWER_END})


@dataclass(frozen=True, slots=True)
class LineToken:
    """One classified source line.

    Attributes:
        type: Line category
        lineno: Source line number (1-indexed)
        raw: The full original line
        indentation: Width of the leading whitespace
        content: Line text without indentation and category decorations
        depth: Header/TODO depth (number of leading ``*``)
        tags: Header/TODO tags in source order
        keyword: TODO keyword (first word after the stars)
        priority: TODO priority letter, uppercased
        bullet: List bullet (``-``, ``+``, ``*``, ``1.``, ``1)``)
        ordered: Whether the list bullet is numbered
        checkbox: Checkbox state character (`` ``, ``X``, ``-``) or None
        term: Definition list term
        name: Drawer, block, dynamic block or directive name as written
        params: Parameter text following a block or directive name
        alternate: The same line under its second reading. TODO tokens carry
            their HEADER reading, DEFINITION_ITEM tokens their LIST_ITEM
            reading.

    """

    type: TokenType
    lineno: int
    raw: str
    indentation: int = 0
    content: str = ""
    depth: int = 0
    tags: tuple[str, ...] = ()
    keyword: str | None = None
    priority: str | None = None
    bullet: str | None = None
    ordered: bool = False
    checkbox: str | None = None
    term: str | None = None
    name: str | None = None
    params: str = ""
    alternate: LineToken | None = field(default=None, repr=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.content
        if len(val) > 20:
            val = val[:17] + "..."
        return f"LineToken({self.type.name}, {val!r}, line {self.lineno})"

    @property
    def is_list_item(self) -> bool:
        return self.type in LIST_ITEM_TYPES

    @property
    def is_table_element(self) -> bool:
        return self.type in TABLE_TYPES

    @property
    def is_end(self) -> bool:
        """Whether this line closes a block, dynamic block or drawer."""
        return self.type in END_TYPES
