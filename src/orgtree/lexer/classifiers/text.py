"""Classifiers for single-line leaves: preformatted, blank, rule, comment, line."""

from __future__ import annotations

import re

from orgtree.tokens import LineToken, TokenType

# Exactly one space after the colon is markup; further spaces are content.
PREFORMATTED_PATTERN = re.compile(r"^(\s*):(?: (.*))?$")
BLANK_PATTERN = re.compile(r"^\s*$")
HORIZONTAL_RULE_PATTERN = re.compile(r"^(\s*)-{5,}\s*$")
COMMENT_PATTERN = re.compile(r"^(\s*)#(?!\+)(.*)$")
LINE_PATTERN = re.compile(r"^(\s*)(.*)$", re.DOTALL)


class TextClassifierMixin:
    """Mixin providing leaf line classification, ending in the LINE catch-all."""

    def _measure_indent(self, whitespace: str) -> int:
        """Measure leading whitespace width. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_preformatted(self, line: str, lineno: int) -> LineToken | None:
        match = PREFORMATTED_PATTERN.match(line)
        if match is None:
            return None
        return LineToken(
            type=TokenType.PREFORMATTED,
            lineno=lineno,
            raw=line,
            indentation=self._measure_indent(match.group(1)),
            content=match.group(2) or "",
        )

    def _try_classify_blank(self, line: str, lineno: int) -> LineToken | None:
        if BLANK_PATTERN.match(line) is None:
            return None
        return LineToken(type=TokenType.BLANK, lineno=lineno, raw=line)

    def _try_classify_horizontal_rule(self, line: str, lineno: int) -> LineToken | None:
        match = HORIZONTAL_RULE_PATTERN.match(line)
        if match is None:
            return None
        return LineToken(
            type=TokenType.HORIZONTAL_RULE,
            lineno=lineno,
            raw=line,
            indentation=self._measure_indent(match.group(1)),
        )

    def _try_classify_comment(self, line: str, lineno: int) -> LineToken | None:
        match = COMMENT_PATTERN.match(line)
        if match is None:
            return None
        return LineToken(
            type=TokenType.COMMENT,
            lineno=lineno,
            raw=line,
            indentation=self._measure_indent(match.group(1)),
            content=match.group(2),
        )

    def _classify_line(self, line: str, lineno: int) -> LineToken:
        """Catch-all: every line matches, capturing indentation and the rest."""
        match = LINE_PATTERN.match(line)
        assert match is not None
        return LineToken(
            type=TokenType.LINE,
            lineno=lineno,
            raw=line,
            indentation=self._measure_indent(match.group(1)),
            content=match.group(2),
        )
