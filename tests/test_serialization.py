"""Tests for orgtree.serialization — tree JSON round-trip."""

import json

import pytest

from orgtree import parse
from orgtree.nodes import (
    Bold,
    DefinitionListElement,
    Document,
    Header,
    Link,
    Paragraph,
    Text,
    TodoItem,
)
from orgtree.serialization import from_dict, from_json, to_dict, to_json

SAMPLE = """\
#+TITLE: Sample
#+OPTIONS: toc:nil
#+STARTUP: overview
* TODO [#A] Write *docs* :work:
:PROPERTIES:
:ID: 42
:END:
- [X] term :: definition
- other
| h1 | h2 |
|----+----|
| [[x][X]] | =code= |
#+BEGIN_SRC python -n
print(1)
#+END_SRC
: preformatted
-----
"""


class TestToDict:
    """Node to dict conversion."""

    def test_type_discriminator(self) -> None:
        assert to_dict(Text(value="hi")) == {
            "_type": "Text",
            "children": [],
            "lineno": None,
            "value": "hi",
        }

    def test_nested_children_and_tags(self) -> None:
        header = Header(children=(Bold(children=(Text(value="b"),)),), depth=2, tags=("a", "b"))
        data = to_dict(header)
        assert data["tags"] == ["a", "b"]
        assert data["children"][0]["_type"] == "Bold"
        assert data["children"][0]["children"][0]["value"] == "b"

    def test_document_mappings(self) -> None:
        data = to_dict(parse("#+KEYWORDS: k\n#+OPTIONS: toc:nil"))
        assert data["directive_values"] == {"keywords:": "k"}
        assert data["options"]["toc"] is False
        assert type(data["options"]) is dict
        assert type(data["directive_values"]) is dict

    def test_definition_term(self) -> None:
        element = DefinitionListElement(term=(Text(value="t"),), checkbox="partial")
        data = to_dict(element)
        assert data["term"] == [to_dict(Text(value="t"))]
        assert data["checkbox"] == "partial"


class TestFromDict:
    """Dict to node reconstruction."""

    def test_round_trip_document(self) -> None:
        doc = parse(SAMPLE)
        assert from_dict(to_dict(doc)) == doc

    def test_subclass_preserved(self) -> None:
        todo = parse("* DONE x").children[0]
        restored = from_dict(to_dict(todo))
        assert type(restored) is TodoItem
        assert restored.keyword == "DONE"

    def test_line_numbers_preserved(self) -> None:
        doc = parse("a\n\n* b")
        restored = from_dict(to_dict(doc))
        assert [c.lineno for c in restored.children] == [1, 3]

    def test_missing_fields_use_defaults(self) -> None:
        assert from_dict({"_type": "Link", "target": "t"}) == Link(target="t")

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"children": []})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type: 'Heading'"):
            from_dict({"_type": "Heading"})


class TestJson:
    """JSON encoding of whole documents."""

    def test_round_trip(self) -> None:
        doc = parse(SAMPLE)
        assert from_json(to_json(doc)) == doc

    def test_deterministic(self) -> None:
        assert to_json(parse(SAMPLE)) == to_json(parse(SAMPLE))

    def test_sorted_keys(self) -> None:
        data = json.loads(to_json(parse("text")))
        assert list(data) == sorted(data)

    def test_indent(self) -> None:
        assert "\n  " in to_json(parse("text"), indent=2)

    def test_scalars_survive(self) -> None:
        restored = from_json(to_json(parse(SAMPLE)))
        assert restored.title == "Sample"
        assert restored.options["toc"] is False
        assert restored.directive_values == {"startup:": "overview"}

    def test_rejects_non_document(self) -> None:
        payload = json.dumps(to_dict(Paragraph(children=(Text(value="x"),))))
        with pytest.raises(ValueError, match="Expected Document, got Paragraph"):
            from_json(payload)

    def test_restored_tree_is_document(self) -> None:
        assert isinstance(from_json(to_json(parse(""))), Document)
