"""Serialize a :class:`NoteGraph` into JavaScript object-literal fragments."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List

from note_graph.analysis.graph_model import Category, Link, Node, NoteGraph

# Characters that are legal inside a JSON string but unsafe inside an inline
# <script> block or a pre-ES2019 JavaScript string literal.
_SCRIPT_UNSAFE = {ord(char): "\\u%04x" % ord(char) for char in ("<", ">", "&", chr(0x2028), chr(0x2029))}


@dataclass(slots=True)
class SerializedGraph:
    nodes: List[str] = field(default_factory=list)
    links: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted string literal safe to embed in a script."""

    return json.dumps(text, ensure_ascii=False).translate(_SCRIPT_UNSAFE)


def node_fragment(node: Node) -> str:
    return "{ id: %s, name: %s, category: %d, value: %s }" % (
        quote(node.id),
        quote(node.name),
        node.category,
        quote(node.value),
    )


def link_fragment(link: Link) -> str:
    return "{ source: %s, target: %s }" % (quote(link.source_id), quote(link.target_id))


def category_fragment(category: Category) -> str:
    return "{ name: %s }" % quote(category.name)


def serialize_graph(graph: NoteGraph) -> SerializedGraph:
    """One fragment per node, link and category, in graph order."""

    return SerializedGraph(
        nodes=[node_fragment(node) for node in graph.nodes],
        links=[link_fragment(link) for link in graph.links],
        categories=[category_fragment(category) for category in graph.categories],
    )


__all__ = [
    "SerializedGraph",
    "category_fragment",
    "link_fragment",
    "node_fragment",
    "quote",
    "serialize_graph",
]
