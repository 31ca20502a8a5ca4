"""Inline parsing subsystem for orgtree.

Provides the emphasis and link passes and the mixin that plugs them into
the Parser:
- Emphasis (*bold*, /italic/, _underline_, =code=, ~verbatim~, +strike+)
- Links ([[target]], [[target][title]])

"""

from __future__ import annotations

from orgtree.nodes import Node
from orgtree.parsing.inline.core import (
    EMPHASIS_PATTERN,
    LINK_PATTERN,
    MARKER_NODES,
    emphasis_fragments,
    parse_emphasis,
    parse_links,
)


class InlineParsingMixin:
    """Inline parsing for the Parser.

    Free text of headers, paragraphs and list elements goes through
    ``_parse_inline``; verbatim text bypasses it.

    """

    def _parse_inline(self, text: str) -> Node:
        """Parse one text run into a single inline node."""
        return parse_emphasis(text)


__all__ = [
    "EMPHASIS_PATTERN",
    "LINK_PATTERN",
    "MARKER_NODES",
    "InlineParsingMixin",
    "emphasis_fragments",
    "parse_emphasis",
    "parse_links",
]
