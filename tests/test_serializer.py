"""Tests for the literal fragments embedded into the graph page."""

from __future__ import annotations

import json
import re

from note_graph.analysis.graph_model import Category, Link, Node, NoteGraph
from note_graph.analysis.serializer import (
    category_fragment,
    link_fragment,
    node_fragment,
    quote,
    serialize_graph,
)

_KEY = re.compile(r"([{,]\s*)([a-z]+):")


def _as_json(fragment: str) -> dict:
    """Quote the bare object keys so the fragment can be checked with ``json.loads``."""

    return json.loads(_KEY.sub(r'\1"\2":', fragment))


def test_node_fragment_layout() -> None:
    node = Node(id="a/one.md", name="One", category=0, value="One\ntext")

    assert node_fragment(node) == '{ id: "a/one.md", name: "One", category: 0, value: "One\\ntext" }'


def test_link_and_category_fragments() -> None:
    assert link_fragment(Link("a/one.md", "two.md")) == '{ source: "a/one.md", target: "two.md" }'
    assert category_fragment(Category("a/", 0)) == '{ name: "a/" }'


def test_quotes_in_title_are_escaped() -> None:
    fragment = node_fragment(Node(id="q.md", name='Say "hi"', category=0))

    assert 'name: "Say \\"hi\\""' in fragment
    assert _as_json(fragment)["name"] == 'Say "hi"'


def test_backslashes_and_control_characters_are_escaped() -> None:
    value = "C:\\notes\\file\ttab\r\nnext"
    fragment = node_fragment(Node(id="w.md", name="", category=0, value=value))

    assert "\n" not in fragment
    assert "\r" not in fragment
    assert "\t" not in fragment
    assert _as_json(fragment)["value"] == value


def test_script_breaking_sequences_are_escaped() -> None:
    text = "</script><script>alert(1)</script> & more"
    literal = quote(text)

    assert "<" not in literal
    assert ">" not in literal
    assert "&" not in literal
    assert literal.startswith('"\\u003c/script\\u003e')
    assert json.loads(literal) == text


def test_line_and_paragraph_separators_are_escaped() -> None:
    text = "a" + chr(0x2028) + "b" + chr(0x2029) + "c"
    literal = quote(text)

    assert chr(0x2028) not in literal
    assert chr(0x2029) not in literal
    assert json.loads(literal) == text


def test_non_ascii_text_is_kept() -> None:
    assert quote("Café ☕") == '"Café ☕"'


def test_fields_with_quotes_everywhere_stay_well_formed() -> None:
    graph = NoteGraph(
        nodes=[Node(id='dir "x"/n.md', name='"', category=0, value='\\"')],
        links=[Link('dir "x"/n.md', 'other "q".md')],
        categories=[Category('dir "x"/', 0)],
    )
    serialized = serialize_graph(graph)

    node = _as_json(serialized.nodes[0])
    assert node == {"id": 'dir "x"/n.md', "name": '"', "category": 0, "value": '\\"'}
    assert _as_json(serialized.links[0]) == {"source": 'dir "x"/n.md', "target": 'other "q".md'}
    assert _as_json(serialized.categories[0]) == {"name": 'dir "x"/'}


def test_serialize_graph_preserves_order_and_is_deterministic() -> None:
    graph = NoteGraph(
        nodes=[Node("b.md", "B", 0), Node("a.md", "A", 1)],
        links=[Link("b.md", "a.md"), Link("a.md", "b.md")],
        categories=[Category("./", 0), Category("x/", 1)],
    )

    first = serialize_graph(graph)
    second = serialize_graph(graph)

    assert first == second
    assert [_as_json(fragment)["id"] for fragment in first.nodes] == ["b.md", "a.md"]
    assert [_as_json(fragment)["source"] for fragment in first.links] == ["b.md", "a.md"]
    assert len(first.categories) == 2
