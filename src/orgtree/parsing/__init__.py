"""Parsing subsystem for the orgtree parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Line token lookahead and pushback
- `InlineParsingMixin`: Inline content (emphasis, links)
- `BlockParsingMixin`: Block-level content (headers, lists, tables, blocks)

Example:
    >>> from orgtree.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from orgtree.parsing.blocks import BlockParsingMixin
from orgtree.parsing.inline import InlineParsingMixin
from orgtree.parsing.token_nav import StopPredicate, TokenNavigationMixin

__all__ = [
    "BlockParsingMixin",
    "InlineParsingMixin",
    "StopPredicate",
    "TokenNavigationMixin",
]
