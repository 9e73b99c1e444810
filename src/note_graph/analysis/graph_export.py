"""Utilities for persisting the note graph as JSON or GraphML."""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx

from note_graph.analysis.graph_model import NoteGraph
from note_graph.errors import OutputError

EXPORT_FORMATS = ("json", "graphml")


def graph_payload(graph: NoteGraph, *, name: str = "note_graph") -> dict:
    """Plain-data view of the graph, suitable for ``json.dump``."""

    return {
        "graph": name,
        "node_count": len(graph.nodes),
        "link_count": len(graph.links),
        "categories": [category.as_dict() for category in graph.categories],
        "nodes": [node.as_dict() for node in graph.nodes],
        "links": [link.as_dict() for link in graph.links],
        "failures": [
            {"path": failure.path, "stage": failure.stage, "reason": failure.reason} for failure in graph.failures
        ],
    }


def _sanitize_for_graphml(graph: nx.MultiDiGraph) -> nx.MultiDiGraph:
    """Drop null attributes and flatten the category list; GraphML has neither."""

    copy = graph.copy()
    copy.graph["categories"] = ",".join(copy.graph.get("categories", []))
    for _, data in copy.nodes(data=True):
        for key in [key for key, value in data.items() if value is None]:
            del data[key]
    return copy


def export_graph(graph: NoteGraph, destination: Path, *, format: str = "json") -> Path:
    """Write ``graph`` to ``destination`` in the requested format."""

    destination = Path(destination)
    fmt = format.lower()
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported format: {format}")

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "json":
            with destination.open("w", encoding="utf-8") as handle:
                json.dump(graph_payload(graph, name=destination.stem), handle, indent=2, ensure_ascii=False)
        else:
            nx.write_graphml(_sanitize_for_graphml(graph.to_networkx()), destination)
    except OSError as exc:
        raise OutputError(f"Failed to write {destination}: {exc}") from exc
    return destination


__all__ = ["EXPORT_FORMATS", "export_graph", "graph_payload"]
