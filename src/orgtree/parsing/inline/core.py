"""Inline markup parsing: emphasis and links.

Two cooperating passes over one text run:

1. Emphasis pass: finds ``*bold*``, ``/italic/``, ``_underline_``,
   ``=code=``, ``~verbatim~`` and ``+strike+`` spans. Text between spans goes
   through the link pass; span bodies (except code) are parsed recursively.
2. Link pass: finds ``[[target]]`` and ``[[target][title]]``. Titles are run
   through the emphasis pass.

Both passes keep their scan position in locals, so they are re-entrant and
safe to call from any thread. Recursion depth is capped; text nested deeper
than the cap is kept literally.

"""

from __future__ import annotations

import re

from orgtree.config import get_parse_config
from orgtree.nodes import (
    Bold,
    Code,
    Dashed,
    InlineContainer,
    Italic,
    Link,
    Node,
    Text,
    Underline,
)

# Border characters an emphasis body may not start or end with.
_BORDER_FORBIDDEN = r""" \t\r\n,"'"""

EMPHASIS_PATTERN = re.compile(
    r"(?:^|(?<=[ \t\r\n('\"]))"  # pre: start of text, whitespace, ( ' "
    r"([*/_=~+])"  # marker
    rf"([^{_BORDER_FORBIDDEN}]|[^{_BORDER_FORBIDDEN}].*?[^{_BORDER_FORBIDDEN}])"  # body
    r"\1"
    r"(?=[- \t\r\n.,:!?;'\")]|$)",  # post, not consumed
    re.DOTALL,
)

LINK_PATTERN = re.compile(r"\[\[([^\]]*)\](?:\[([^\]]*)\])?\]")

MARKER_NODES: dict[str, type[Node]] = {
    "*": Bold,
    "/": Italic,
    "_": Underline,
    "=": Code,
    "~": Code,
    "+": Dashed,
}


def parse_emphasis(text: str, depth: int = 0, *, max_depth: int | None = None) -> Node:
    """Parse a text run into a single inline node.

    One resulting fragment is returned as-is; several are wrapped in an
    InlineContainer.

    Example:
        >>> parse_emphasis("plain")
        Text(children=(), lineno=None, value='plain')
        >>> type(parse_emphasis("a *b* c")).__name__
        'InlineContainer'
    """
    fragments = emphasis_fragments(text, depth, max_depth=max_depth)
    if len(fragments) == 1:
        return fragments[0]
    return InlineContainer(children=tuple(fragments))


def emphasis_fragments(text: str, depth: int = 0, *, max_depth: int | None = None) -> list[Node]:
    """Run the emphasis pass and return the flat list of fragments."""
    if max_depth is None:
        max_depth = get_parse_config().max_inline_depth
    if depth >= max_depth or not text:
        return [Text(value=text)]

    link_spans = [m.span() for m in LINK_PATTERN.finditer(text)]
    fragments: list[Node] = []
    pos = 0
    last = 0

    while (match := EMPHASIS_PATTERN.search(text, pos)) is not None:
        start, end = match.span()
        clash = _clashing_link(link_spans, start, end)
        if clash is not None:
            # Markers inside a link belong to the link; rescan past it.
            pos = clash[1] if start >= clash[0] else start + 1
            continue

        fragments.extend(parse_links(text[last:start], depth, max_depth=max_depth))
        fragments.append(_emphasize(match.group(1), match.group(2), depth, max_depth))
        last = pos = end

    fragments.extend(parse_links(text[last:], depth, max_depth=max_depth))
    return fragments or [Text(value=text)]


def parse_links(text: str, depth: int = 0, *, max_depth: int | None = None) -> list[Node]:
    """Run the link pass over text that contains no emphasis spans.

    Plain text between links becomes Text nodes; empty stretches produce
    nothing.
    """
    if max_depth is None:
        max_depth = get_parse_config().max_inline_depth

    fragments: list[Node] = []
    last = 0
    for match in LINK_PATTERN.finditer(text):
        if match.start() > last:
            fragments.append(Text(value=text[last : match.start()]))

        target, title = match.groups()
        if title:
            children: tuple[Node, ...] = (parse_emphasis(title, depth + 1, max_depth=max_depth),)
        else:
            children = (Text(value=target),)
        fragments.append(Link(target=target, children=children))
        last = match.end()

    if last < len(text):
        fragments.append(Text(value=text[last:]))
    return fragments


def _emphasize(marker: str, body: str, depth: int, max_depth: int) -> Node:
    node_cls = MARKER_NODES[marker]
    if node_cls is Code:
        return Code(children=(Text(value=body),))
    return node_cls(children=tuple(emphasis_fragments(body, depth + 1, max_depth=max_depth)))


def _clashing_link(
    spans: list[tuple[int, int]], start: int, end: int
) -> tuple[int, int] | None:
    """Return a link span that the emphasis match cuts through, if any.

    An emphasis span that fully contains a link is fine; its body is parsed
    recursively and the link is found there.
    """
    for span_start, span_end in spans:
        if span_start < end and start < span_end:
            if start <= span_start and span_end <= end:
                continue
            return span_start, span_end
    return None
