"""Table row and separator classifier mixin."""

from __future__ import annotations

import re

from orgtree.tokens import LineToken, TokenType

TABLE_SEPARATOR_PATTERN = re.compile(r"^(\s*)\|[-+|:]*-[-+|:]*\s*$")
TABLE_ROW_PATTERN = re.compile(r"^(\s*)\|(.*?)\|?\s*$")


class TableClassifierMixin:
    """Mixin providing table line classification."""

    def _measure_indent(self, whitespace: str) -> int:
        """Measure leading whitespace width. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_table(self, line: str, lineno: int) -> LineToken | None:
        """Try to classify line as a table separator or table row.

        A row's content is the text between the leading ``|`` and the
        optional trailing ``|``; the parser splits it into cells.
        """
        if "|" not in line:
            return None

        match = TABLE_SEPARATOR_PATTERN.match(line)
        if match:
            return LineToken(
                type=TokenType.TABLE_SEPARATOR,
                lineno=lineno,
                raw=line,
                indentation=self._measure_indent(match.group(1)),
            )

        match = TABLE_ROW_PATTERN.match(line)
        if match:
            return LineToken(
                type=TokenType.TABLE_ROW,
                lineno=lineno,
                raw=line,
                indentation=self._measure_indent(match.group(1)),
                content=match.group(2),
            )
        return None
