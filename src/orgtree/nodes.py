"""Typed document tree nodes for orgtree.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Every node owns a ``children`` tuple (empty for leaves, never None) and an
optional source ``lineno`` that is excluded from equality.

Node Hierarchy:
Node (base)
├── Block
│   ├── Header
│   │   └── TodoItem
│   ├── Paragraph
│   ├── Preformatted
│   ├── List
│   ├── DefinitionList
│   ├── ListElement
│   ├── DefinitionListElement
│   ├── Table
│   ├── TableRow
│   ├── TableCell
│   ├── Directive
│   ├── Drawer
│   └── HorizontalRule
└── Inline
    ├── Text
    ├── Link
    ├── InlineContainer
    ├── Bold
    ├── Italic
    ├── Underline
    ├── Code
    └── Dashed

Document is the root; next to its children it carries the document scalars
and the resolved parse options.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

type Checkbox = Literal["unchecked", "checked", "partial"]

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""

    children: tuple[Node, ...] = ()
    lineno: int | None = field(default=None, compare=False)


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text. The only inline leaf."""

    value: str = ""


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Link.

    Markup: [[target]] or [[target][title]]

    Children are the parsed title, or a Text holding the target when the
    link has no title.

    """

    target: str = ""


@dataclass(frozen=True, slots=True)
class InlineContainer(Node):
    """Groups several inline fragments produced from one text run."""


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Markup: *text*"""


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Markup: /text/"""


@dataclass(frozen=True, slots=True)
class Underline(Node):
    """Markup: _text_"""


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code or verbatim.

    Markup: =text= or ~text~

    The body is kept literally; no markup inside is interpreted.

    """


@dataclass(frozen=True, slots=True)
class Dashed(Node):
    """Strike-through text.

    Markup: +text+

    """


type Inline = Text | Link | InlineContainer | Bold | Italic | Underline | Code | Dashed


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Node):
    """Outline header.

    Markup: ** Title :tag1:tag2:

    Attributes:
        depth: Number of leading stars (>= 1)
        tags: Tags in source order; duplicates are kept

    """

    depth: int = 1
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TodoItem(Header):
    """Header whose first word is a configured TODO keyword.

    Markup: ** TODO [#A] Title :tag:

    """

    keyword: str = ""
    priority: str | None = None


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Consecutive text lines joined with newlines."""


@dataclass(frozen=True, slots=True)
class Preformatted(Node):
    """Run of ``: text`` lines. Holds a single literal Text child."""


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list of ListElement children.

    Whether a list is ordered is decided by its first element's bullet.

    """

    ordered: bool = False


@dataclass(frozen=True, slots=True)
class DefinitionList(Node):
    """List whose first element reads ``term :: definition``."""


@dataclass(frozen=True, slots=True)
class ListElement(Node):
    """List element.

    The first child is the element's inline text; nested blocks follow.

    """

    checkbox: Checkbox | None = None


@dataclass(frozen=True, slots=True)
class DefinitionListElement(Node):
    """Definition list element.

    Children hold the definition text and nested blocks; ``term`` holds the
    parsed term.

    """

    term: tuple[Node, ...] = ()
    checkbox: Checkbox | None = None


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell. Children are the blocks of the cell parsed as a document."""

    is_header: bool = False


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table row of TableCell children."""


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Table of TableRow children.

    Markup:
        | a | b |
        |---+---|
        | 1 | 2 |

    When the table contains a separator line, the cells of the first row
    are header cells.

    """


@dataclass(frozen=True, slots=True)
class Directive(Node):
    """Block or one-shot directive.

    Markup: #+BEGIN_NAME args -opts ... #+END_NAME, #+BEGIN: NAME ... #+END:,
    or #+NAME: value

    Attributes:
        name: Lowercased name. One-shot directives keep their trailing
            colon (``title:``), blocks do not (``src``).
        arguments: Parameter tokens not starting with ``-``
        options: Parameter tokens starting with ``-``
        raw_value: Parameter text as written
        dynamic: Whether this is a ``#+BEGIN:`` dynamic block

    """

    name: str = ""
    arguments: tuple[str, ...] = ()
    options: tuple[str, ...] = ()
    raw_value: str = ""
    dynamic: bool = False


@dataclass(frozen=True, slots=True)
class Drawer(Node):
    """Drawer.

    Markup: :NAME: ... :END:

    """

    name: str = ""


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Markup: -----"""


type Block = (
    Header
    | TodoItem
    | Paragraph
    | Preformatted
    | List
    | DefinitionList
    | ListElement
    | DefinitionListElement
    | Table
    | TableRow
    | TableCell
    | Directive
    | Drawer
    | HorizontalRule
)


# =============================================================================
# Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Attributes:
        title: Value of the ``#+TITLE:`` directive
        author: Value of the ``#+AUTHOR:`` directive
        email: Value of the ``#+EMAIL:`` directive
        directive_values: Other one-shot directives, name to raw value;
            the last occurrence wins
        options: Parse options after ``#+OPTIONS:`` lines were applied

    Both mappings are copied into read-only views on construction and are
    left out of the hash.

    """

    title: str | None = None
    author: str | None = None
    email: str | None = None
    directive_values: Mapping[str, str] = field(default_factory=dict, hash=False)
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "directive_values", MappingProxyType(dict(self.directive_values)))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
