"""ContextVar-based parse configuration for orgtree.

Two kinds of settings steer a parse:

- ``ParseConfig``: how the lexer and parser behave (tab handling, which
  header keywords count as TODO keywords, inline recursion limit). Frozen,
  read from a ContextVar so sub-parsers inherit it for free.
- Document options: the ``toc``/``num``/``^``/``multilineCell`` mapping that
  documents may change themselves through ``#+OPTIONS:`` lines. These are
  per-parse state and live on the Parser; the resolved mapping is copied onto
  the resulting Document.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from orgtree.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(tab_width=8)):
        doc = Parser(source).parse()

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

DEFAULT_OPTIONS: Mapping[str, Any] = {
    "toc": True,
    "num": True,
    "^": "{}",
    "multilineCell": False,
}

DEFAULT_TODO_KEYWORDS: frozenset[str] = frozenset({"TODO", "DONE"})


def resolve_options(options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge caller options over the defaults.

    Unknown keys are kept as-is; the parser only interprets the default keys.

    Example:
        >>> resolve_options({"toc": False, "custom": 1})["toc"]
        False
    """
    resolved = dict(DEFAULT_OPTIONS)
    if options:
        resolved.update(options)
    return resolved


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        tab_width: Tab expansion width used when measuring indentation.
            ``None`` counts every whitespace character (tabs included) as
            one column.
        todo_keywords: Header keywords that turn a header into a TODO item.
        max_inline_depth: Maximum nesting of emphasis and link titles. Text
            nested deeper is kept literally.

    """

    tab_width: int | None = None
    todo_keywords: frozenset[str] = DEFAULT_TODO_KEYWORDS
    max_inline_depth: int = 32

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. ``todo_keywords`` may be any iterable of str.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tab_width": 4,
            ...     "todo_keywords": ["TODO", "WAIT", "DONE"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tab_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "todo_keywords" in filtered:
            filtered["todo_keywords"] = frozenset(filtered["todo_keywords"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "orgtree_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(tab_width=8)):
        ...     get_parse_config().tab_width
        8

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_OPTIONS",
    "DEFAULT_TODO_KEYWORDS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "resolve_options",
    "set_parse_config",
]
