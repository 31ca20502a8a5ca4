"""Block, dynamic block and directive classifier mixin."""

from __future__ import annotations

import re

from orgtree.tokens import LineToken, TokenType

BLOCK_BEGIN_PATTERN = re.compile(r"^(\s*)#\+BEGIN_(\S+)(?:\s+(.*))?$", re.IGNORECASE)
BLOCK_END_PATTERN = re.compile(r"^(\s*)#\+END_(\S+)\s*$", re.IGNORECASE)
DYNAMIC_BEGIN_PATTERN = re.compile(r"^(\s*)#\+BEGIN:\s+(\S+)(?:\s+(.*))?$", re.IGNORECASE)
DYNAMIC_END_PATTERN = re.compile(r"^(\s*)#\+END:\s*$", re.IGNORECASE)
DIRECTIVE_PATTERN = re.compile(r"^(\s*)#\+(\S+?):(?:\s+(.*))?$")
# Any other "#+" line; the parser rejects it as an invalid directive.
MALFORMED_DIRECTIVE_PATTERN = re.compile(r"^(\s*)#\+(.*)$")

# Most specific first; a BEGIN_ line is also a well-formed generic directive.
_DIRECTIVE_FORMS = (
    (TokenType.BLOCK_BEGIN, BLOCK_BEGIN_PATTERN),
    (TokenType.BLOCK_END, BLOCK_END_PATTERN),
    (TokenType.DYNAMIC_BEGIN, DYNAMIC_BEGIN_PATTERN),
    (TokenType.DYNAMIC_END, DYNAMIC_END_PATTERN),
    (TokenType.DIRECTIVE, DIRECTIVE_PATTERN),
)


class DirectiveClassifierMixin:
    """Mixin providing ``#+`` line classification."""

    def _measure_indent(self, whitespace: str) -> int:
        """Measure leading whitespace width. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_directive(self, line: str, lineno: int) -> LineToken | None:
        """Try to classify line as a block boundary or a directive.

        The lexer only reports block names; matching a BEGIN with its END is
        the parser's job. ``content`` holds ``name`` plus parameters so the
        parser can split arguments from options.

        A ``#+`` line matching none of the forms is still a DIRECTIVE, with
        ``name`` None, so that it fails in the parser instead of reading as
        text.

        Returns:
            LineToken if the line is a ``#+`` form, None otherwise.
        """
        if "#+" not in line:
            return None

        for token_type, pattern in _DIRECTIVE_FORMS:
            match = pattern.match(line)
            if match is None:
                continue

            groups = match.groups()
            name = groups[1] if len(groups) > 1 else None
            params = (groups[2] or "").rstrip() if len(groups) > 2 else ""
            content = " ".join(part for part in (name, params) if part)
            return LineToken(
                type=token_type,
                lineno=lineno,
                raw=line,
                indentation=self._measure_indent(groups[0]),
                content=content,
                name=name,
                params=params,
            )

        match = MALFORMED_DIRECTIVE_PATTERN.match(line)
        if match is None:
            return None
        return LineToken(
            type=TokenType.DIRECTIVE,
            lineno=lineno,
            raw=line,
            indentation=self._measure_indent(match.group(1)),
            content=match.group(2).strip(),
        )
