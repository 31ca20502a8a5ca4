"""Tree Visitor and Transformer for orgtree.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example — collect all TODO items:

    class TodoCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.todos: list[TodoItem] = []

        def visit_todo_item(self, node: TodoItem) -> None:
            self.todos.append(node)

    collector = TodoCollector()
    collector.visit(doc)

Example — demote every header:

    def demote(node: Node) -> Node:
        if isinstance(node, Header):
            return dataclasses.replace(node, depth=node.depth + 1)
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure — safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from orgtree.nodes import (
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


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call; for definition list
    elements the term is walked before the children.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_header(self, node: Header) -> T:
        return self.visit_default(node)

    def visit_todo_item(self, node: TodoItem) -> T:
        """TODO items are headers; the default delegates to ``visit_header``."""
        return self.visit_header(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_preformatted(self, node: Preformatted) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_definition_list(self, node: DefinitionList) -> T:
        return self.visit_default(node)

    def visit_list_element(self, node: ListElement) -> T:
        return self.visit_default(node)

    def visit_definition_list_element(self, node: DefinitionListElement) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_table_row(self, node: TableRow) -> T:
        return self.visit_default(node)

    def visit_table_cell(self, node: TableCell) -> T:
        return self.visit_default(node)

    def visit_directive(self, node: Directive) -> T:
        return self.visit_default(node)

    def visit_drawer(self, node: Drawer) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_inline_container(self, node: InlineContainer) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_underline(self, node: Underline) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_dashed(self, node: Dashed) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case TodoItem():
                return self.visit_todo_item(node)
            case Header():
                return self.visit_header(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case Preformatted():
                return self.visit_preformatted(node)
            case List():
                return self.visit_list(node)
            case DefinitionList():
                return self.visit_definition_list(node)
            case ListElement():
                return self.visit_list_element(node)
            case DefinitionListElement():
                return self.visit_definition_list_element(node)
            case Table():
                return self.visit_table(node)
            case TableRow():
                return self.visit_table_row(node)
            case TableCell():
                return self.visit_table_cell(node)
            case Directive():
                return self.visit_directive(node)
            case Drawer():
                return self.visit_drawer(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Text():
                return self.visit_text(node)
            case Link():
                return self.visit_link(node)
            case InlineContainer():
                return self.visit_inline_container(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Underline():
                return self.visit_underline(node)
            case Code():
                return self.visit_code(node)
            case Dashed():
                return self.visit_dashed(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        if isinstance(node, DefinitionListElement):
            for term in node.term:
                self.visit(term)
        for child in node.children:
            self.visit(child)


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives nodes with already-transformed children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out None (removed) nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    changes: dict[str, tuple[Node, ...]] = {}

    new_children = _filtered(node.children)
    if new_children != node.children:
        changes["children"] = new_children

    if isinstance(node, DefinitionListElement):
        new_term = _filtered(node.term)
        if new_term != node.term:
            changes["term"] = new_term

    if changes:
        return dataclasses.replace(node, **changes)
    return node
