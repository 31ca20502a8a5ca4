"""Drawer classifier mixin."""

from __future__ import annotations

import re

from orgtree.tokens import LineToken, TokenType

DRAWER_BEGIN_PATTERN = re.compile(r"^(\s*):(?!END:\s*$)([\w-]*):\s*$")
DRAWER_END_PATTERN = re.compile(r"^(\s*):END:\s*$")


class DrawerClassifierMixin:
    """Mixin providing drawer boundary classification."""

    def _measure_indent(self, whitespace: str) -> int:
        """Measure leading whitespace width. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_drawer(self, line: str, lineno: int) -> LineToken | None:
        """Try to classify line as ``:NAME:`` or ``:END:``.

        The END marker is case-sensitive: ``:end:`` opens a drawer named
        ``end``.
        """
        if ":" not in line:
            return None

        match = DRAWER_END_PATTERN.match(line)
        if match:
            return LineToken(
                type=TokenType.DRAWER_END,
                lineno=lineno,
                raw=line,
                indentation=self._measure_indent(match.group(1)),
                name="END",
            )

        match = DRAWER_BEGIN_PATTERN.match(line)
        if match:
            return LineToken(
                type=TokenType.DRAWER_BEGIN,
                lineno=lineno,
                raw=line,
                indentation=self._measure_indent(match.group(1)),
                name=match.group(2),
            )
        return None
