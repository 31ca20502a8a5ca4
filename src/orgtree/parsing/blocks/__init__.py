"""Block parsing subsystem for the orgtree parser.

Provides mixins for parsing block-level content:
- Headers and TODO items
- Paragraphs and preformatted runs
- Lists and definition lists
- Tables
- Blocks, dynamic blocks, one-shot directives and drawers

Architecture:
Block parsing is split into logical modules:
- core: Element dispatch and simple blocks
- list: List parsing with nesting by indentation
- table: Table parsing
- directive: Directive, block and drawer parsing

"""

from orgtree.parsing.blocks.core import BlockParsingCoreMixin
from orgtree.parsing.blocks.directive import DirectiveParsingMixin
from orgtree.parsing.blocks.list import ListParsingMixin
from orgtree.parsing.blocks.table import TableParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    ListParsingMixin,
    TableParsingMixin,
    DirectiveParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _lexer: Lexer
        - _source_file: str | None
        - _options: dict[str, Any]
        - _title, _author, _email: str | None
        - _directive_values: dict[str, str]

    Required Host Methods:
        - _peek() / _advance() / _push_back() / _skip_blank() / _expect()
        - _error(message, token) -> ParseError
        - _parse_inline(text) -> Node
        - _parse_nested_content(text) -> tuple[Node, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "DirectiveParsingMixin",
    "ListParsingMixin",
    "TableParsingMixin",
]
