"""Data model for the note graph: nodes, links and categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import networkx as nx


@dataclass
class Node:
    id: str
    name: str
    category: int
    value: str = ""
    links: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "value": self.value,
            "links": list(self.links),
        }


@dataclass(frozen=True)
class Link:
    source_id: str
    target_id: str

    def as_dict(self) -> dict:
        return {"source": self.source_id, "target": self.target_id}


@dataclass(frozen=True)
class Category:
    name: str
    id: int

    def as_dict(self) -> dict:
        return {"name": self.name, "id": self.id}


@dataclass(frozen=True)
class DocumentFailure:
    """A note that could not be read or parsed; it contributes nothing to the graph."""

    path: str
    stage: str
    reason: str


@dataclass
class NoteGraph:
    nodes: List[Node] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    failures: List[DocumentFailure] = field(default_factory=list)

    def node_ids(self) -> set[str]:
        return {node.id for node in self.nodes}

    def category_names(self) -> dict[int, str]:
        return {category.id: category.name for category in self.categories}

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Convert into a networkx multigraph.

        Repeated links between the same pair of notes stay distinct edges, and
        dangling targets are added as placeholder nodes flagged ``dangling``.
        """

        names = self.category_names()
        graph = nx.MultiDiGraph(name="note_graph")
        for node in self.nodes:
            graph.add_node(
                node.id,
                name=node.name,
                category=node.category,
                category_name=names.get(node.category),
                value=node.value,
                dangling=False,
            )
        for link in self.links:
            if link.target_id not in graph:
                graph.add_node(link.target_id, name=None, category=None, category_name=None, value=None, dangling=True)
            graph.add_edge(link.source_id, link.target_id)

        graph.graph["categories"] = [category.name for category in self.categories]
        graph.graph["node_count"] = len(self.nodes)
        graph.graph["link_count"] = len(self.links)
        return graph


__all__ = ["Category", "DocumentFailure", "Link", "Node", "NoteGraph"]
