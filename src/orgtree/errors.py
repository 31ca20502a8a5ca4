"""Exception classes for orgtree.

Provides standardized exceptions for error handling throughout orgtree.
"""

from __future__ import annotations


class OrgTreeError(Exception):
    """Base exception for all orgtree errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(OrgTreeError):
    """Error during document parsing.

    Raised when the parser encounters input it cannot build a tree from:
    unclosed blocks and drawers, unmatched end lines, malformed directives.
    Parsing never recovers from a ParseError; the whole document fails.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where the error was detected (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnclosedConstructError(ParseError):
    """A block, dynamic block or drawer reached end of input without its end line."""

    def __init__(
        self,
        construct: str,
        name: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.construct = construct
        self.name = name
        super().__init__(f"Unclosed {construct} {name!r}", lineno, source_file)


class UnmatchedEndError(ParseError):
    """An end line appeared with no matching open construct."""

    def __init__(
        self,
        name: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.name = name
        super().__init__(f"Unmatched 'end' directive for {name!r}", lineno, source_file)
