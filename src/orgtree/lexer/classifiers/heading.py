"""Header and TODO item classifier mixin."""

from __future__ import annotations

import re

from orgtree.tokens import LineToken, TokenType

# Optional trailing ":tag:tag:" group. Content never swallows a tags-only
# remainder, so "** :a:b:" has empty content and tags ("a", "b").
_TAGS = r"(?:\s+(:[\w@#%:]*:))?\s*$"
_CONTENT = r"(?:\s+(?!:[\w@#%:]*:\s*$)(.*?))?"

HEADER_PATTERN = re.compile(r"^(\*+)" + _CONTENT + _TAGS)
TODO_PATTERN = re.compile(r"^(\*+)\s+(\w+)(?:\s+\[#([ABCabc])\])?" + _CONTENT + _TAGS)


def split_tags(tags: str | None) -> tuple[str, ...]:
    """Split ``:a:b:`` into ``("a", "b")``, keeping order and duplicates."""
    if not tags:
        return ()
    return tuple(tag for tag in tags.split(":") if tag)


class HeadingClassifierMixin:
    """Mixin providing header and TODO item classification."""

    def _try_classify_heading(self, line: str, lineno: int) -> LineToken | None:
        """Try to classify line as a TODO item or a header.

        Headers start at column 0 with one or more ``*`` followed by
        whitespace or end of line. A header whose first word could be a TODO
        keyword is emitted as TODO carrying its HEADER reading in
        ``alternate``; whether the word really is a keyword is decided by the
        parser.

        Returns:
            LineToken if the line is a header, None otherwise.
        """
        if not line.startswith("*"):
            return None

        match = HEADER_PATTERN.match(line)
        if match is None:
            return None

        header = LineToken(
            type=TokenType.HEADER,
            lineno=lineno,
            raw=line,
            content=match.group(2) or "",
            depth=len(match.group(1)),
            tags=split_tags(match.group(3)),
        )

        todo = TODO_PATTERN.match(line)
        if todo is None:
            return header

        priority = todo.group(3)
        return LineToken(
            type=TokenType.TODO,
            lineno=lineno,
            raw=line,
            content=todo.group(4) or "",
            depth=len(todo.group(1)),
            tags=split_tags(todo.group(5)),
            keyword=todo.group(2),
            priority=priority.upper() if priority else None,
            alternate=header,
        )
