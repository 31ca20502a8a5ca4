"""
orgtree — Outline markup parser producing typed, immutable trees

Parses org-style documents (headers, TODO items, lists, tables, blocks,
drawers, preformatted text, inline emphasis and links) into frozen
dataclass nodes.

Quick Start:
    >>> from orgtree import parse
    >>> doc = parse("#+TITLE: Notes\\n* TODO [#A] Write docs :work:")
    >>> doc.title
    'Notes'
    >>> doc.children[1].keyword, doc.children[1].priority
    ('TODO', 'A')

Custom TODO keywords:
    >>> from orgtree import ParseConfig, parse
    >>> config = ParseConfig(todo_keywords=frozenset({"TODO", "WAIT", "DONE"}))
    >>> parse("* WAIT for review", config=config).children[0].keyword
    'WAIT'

"""

from collections.abc import Mapping
from typing import Any

from orgtree.config import (
    DEFAULT_OPTIONS,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from orgtree.errors import (
    OrgTreeError,
    ParseError,
    UnclosedConstructError,
    UnmatchedEndError,
)
from orgtree.lexer import Lexer
from orgtree.nodes import (
    Block,
    Bold,
    Code,
    Dashed,
    DefinitionList,
    DefinitionListElement,
    Directive,
    Document,
    Drawer,
    Header,
    HorizontalRule,
    Inline,
    InlineContainer,
    Italic,
    Link,
    List,
    ListElement,
    Node,
    Paragraph,
    Preformatted,
    Table,
    TableCell,
    TableRow,
    Text,
    TodoItem,
    Underline,
)
from orgtree.parser import Parser
from orgtree.serialization import from_dict, from_json, to_dict, to_json
from orgtree.stream import LineStream
from orgtree.tokens import LineToken, TokenType
from orgtree.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(
    source: str | LineStream,
    options: Mapping[str, Any] | None = None,
    *,
    config: ParseConfig | None = None,
    source_file: str | None = None,
) -> Document:
    """Parse outline markup into a Document.

    Args:
        source: Document text or an already constructed LineStream
        options: Document options merged over ``DEFAULT_OPTIONS``
        config: Parse configuration for this call; defaults to the config
            active in the current context
        source_file: Optional source file path for error messages

    Returns:
        Document root node

    Raises:
        ParseError: The document is malformed (unclosed block, unmatched
            end line, invalid directive). No partial document is returned.

    Example:
        >>> doc = parse("- a\\n- b\\n- c")
        >>> len(doc.children[0].children)
        3
    """
    if config is None:
        return Parser(source, options, source_file).parse()
    with parse_config_context(config):
        return Parser(source, options, source_file).parse()


__all__ = [
    # Main API
    "parse",
    "Parser",
    "Lexer",
    "LineStream",
    # Configuration
    "DEFAULT_OPTIONS",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "OrgTreeError",
    "ParseError",
    "UnclosedConstructError",
    "UnmatchedEndError",
    # Tokens
    "LineToken",
    "TokenType",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Header",
    "TodoItem",
    "Paragraph",
    "Preformatted",
    "List",
    "DefinitionList",
    "ListElement",
    "DefinitionListElement",
    "Table",
    "TableRow",
    "TableCell",
    "Directive",
    "Drawer",
    "HorizontalRule",
    "Text",
    "Link",
    "InlineContainer",
    "Bold",
    "Italic",
    "Underline",
    "Code",
    "Dashed",
    # Serialization and traversal
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "BaseVisitor",
    "transform",
    "__version__",
]
