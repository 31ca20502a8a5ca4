"""Line stream over an in-memory document.

Splits source text on ``\\n`` / ``\\r\\n`` and hands out one physical line at
a time. The stream never performs I/O; callers read files themselves.

Thread Safety:
LineStream instances are single-use. Create one per source string.

"""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r?\n")


class LineStream:
    """Cursor over the physical lines of a string.

    ``lineno`` is the 0-based index of the next line to be returned, which is
    also the 1-based number of the line returned last.

    Usage:
        >>> stream = LineStream("a\\nb")
        >>> stream.next_line()
        'a'
        >>> stream.peek_line()
        'b'
        >>> stream.lineno
        1

    """

    __slots__ = ("_lines", "_total", "lineno")

    def __init__(self, source: str) -> None:
        self._lines = _LINE_BREAK.split(source)
        self._total = len(self._lines)
        self.lineno = 0

    def has_next(self) -> bool:
        """Whether another line remains."""
        return self.lineno < self._total

    def peek_line(self) -> str | None:
        """Return the next line without advancing, or None at end of stream."""
        return self._lines[self.lineno] if self.has_next() else None

    def next_line(self) -> str | None:
        """Return the next line and advance, or None at end of stream."""
        if not self.has_next():
            return None
        line = self._lines[self.lineno]
        self.lineno += 1
        return line

    def __len__(self) -> int:
        return self._total
