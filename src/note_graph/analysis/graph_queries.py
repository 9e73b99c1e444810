"""Helpers for analysing the assembled note graph."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import networkx as nx

from note_graph.analysis.graph_model import Link, NoteGraph

NodeId = str


@dataclass
class NoteDegree:
    node: NodeId
    label: str
    in_degree: int
    out_degree: int

    @property
    def total(self) -> int:
        return self.in_degree + self.out_degree


@dataclass
class GraphSummary:
    node_count: int
    link_count: int
    category_count: int
    failure_count: int
    dangling: list[Link] = field(default_factory=list)
    orphans: list[NodeId] = field(default_factory=list)
    notes_per_category: dict[str, int] = field(default_factory=dict)


def _node_label(node: NodeId, data: dict[str, object]) -> str:
    """Best-effort user-facing label for a graph node."""

    label = data.get("name")
    if isinstance(label, str) and label:
        return label
    return node


def dangling_links(graph: NoteGraph) -> list[Link]:
    """Links whose target is not a note in the graph, in graph order."""

    known = graph.node_ids()
    return [link for link in graph.links if link.target_id not in known]


def orphan_notes(graph: NoteGraph) -> list[NodeId]:
    """Notes with neither outgoing nor incoming links."""

    linked: set[NodeId] = set()
    for link in graph.links:
        linked.add(link.source_id)
        linked.add(link.target_id)
    return [node.id for node in graph.nodes if node.id not in linked]


def notes_per_category(graph: NoteGraph) -> dict[str, int]:
    """Note counts keyed by category name, in category id order."""

    counts = Counter(node.category for node in graph.nodes)
    return {category.name: counts.get(category.id, 0) for category in graph.categories}


def top_linked_notes(graph: NoteGraph, *, top: int = 10, include_dangling: bool = False) -> list[NoteDegree]:
    """
    Rank notes by total degree (incoming + outgoing links).

    Repeated links count once per occurrence. Dangling targets are left out
    unless ``include_dangling`` is set.
    """

    nx_graph: nx.MultiDiGraph = graph.to_networkx()
    ranked: list[NoteDegree] = []
    for node, data in nx_graph.nodes(data=True):
        if data.get("dangling") and not include_dangling:
            continue
        ranked.append(
            NoteDegree(
                node=node,
                label=_node_label(node, data),
                in_degree=int(nx_graph.in_degree(node)),
                out_degree=int(nx_graph.out_degree(node)),
            )
        )
    ranked.sort(key=lambda entry: (-entry.total, entry.node))
    return ranked[:top]


def summarize(graph: NoteGraph) -> GraphSummary:
    return GraphSummary(
        node_count=len(graph.nodes),
        link_count=len(graph.links),
        category_count=len(graph.categories),
        failure_count=len(graph.failures),
        dangling=dangling_links(graph),
        orphans=orphan_notes(graph),
        notes_per_category=notes_per_category(graph),
    )


__all__ = [
    "GraphSummary",
    "NoteDegree",
    "dangling_links",
    "notes_per_category",
    "orphan_notes",
    "summarize",
    "top_linked_notes",
]
