"""List item and definition list item classifier mixin."""

from __future__ import annotations

import re

from orgtree.tokens import LineToken, TokenType

# A "*" bullet needs whitespace before it; that whitespace is part of the
# indentation group. At column 0 a "*" line is a header.
_BULLET = r"([-+]|(?<=\s)\*|\d+[.)])"
_CHECKBOX = r"\[([ X-])\]"

LIST_ITEM_PATTERN = re.compile(
    r"^(\s*)" + _BULLET + r"(?:\s+(?:" + _CHECKBOX + r")?\s*(.*)|)$"
)
DEFINITION_ITEM_PATTERN = re.compile(
    r"^(\s*)" + _BULLET + r"(?:\s+" + _CHECKBOX + r")?(?:\s+(.*?))?\s+::\s+(.*)$"
)


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _measure_indent(self, whitespace: str) -> int:
        """Measure leading whitespace width. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_list_item(self, line: str, lineno: int) -> LineToken | None:
        """Try to classify line as a list item or definition list item.

        Bullets are ``-``, ``+``, an indented ``*``, or ``N.`` / ``N)``. An
        optional checkbox ``[ ]``, ``[X]`` or ``[-]`` follows the bullet; any
        other bracket text stays in the content.

        A list item whose text reads ``term :: definition`` is emitted as
        DEFINITION_ITEM carrying its plain LIST_ITEM reading in ``alternate``.

        Returns:
            LineToken if the line is a list item, None otherwise.
        """
        match = LIST_ITEM_PATTERN.match(line)
        if match is None:
            return None

        indent_ws, bullet, checkbox, content = match.groups()
        indentation = self._measure_indent(indent_ws)
        ordered = bullet[0].isdigit()

        item = LineToken(
            type=TokenType.LIST_ITEM,
            lineno=lineno,
            raw=line,
            indentation=indentation,
            content=content or "",
            bullet=bullet,
            ordered=ordered,
            checkbox=checkbox,
        )

        definition = DEFINITION_ITEM_PATTERN.match(line)
        if definition is None:
            return item

        return LineToken(
            type=TokenType.DEFINITION_ITEM,
            lineno=lineno,
            raw=line,
            indentation=indentation,
            content=definition.group(5),
            bullet=bullet,
            ordered=ordered,
            checkbox=definition.group(3),
            term=definition.group(4) or "",
            alternate=item,
        )
