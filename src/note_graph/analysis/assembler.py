"""Fold per-note extraction results into a single :class:`NoteGraph`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Union

from note_graph.analysis.categories import CategoryAssigner
from note_graph.analysis.graph_model import DocumentFailure, Link, Node, NoteGraph
from note_graph.config import DEFAULT_EXTENSION

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ExtractedDocument:
    path: str
    title: str
    body: str
    grouping_key: str
    links: List[str] = field(default_factory=list)


DocumentResult = Union[ExtractedDocument, DocumentFailure]


def resolve_target(raw_target: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Turn a raw wikilink target into a node id; no filesystem lookup happens."""

    return f"{raw_target}{extension}"


def assemble_graph(
    documents: Iterable[DocumentResult],
    *,
    extension: str = DEFAULT_EXTENSION,
    assigner: CategoryAssigner | None = None,
) -> NoteGraph:
    """
    Build the graph from ``documents`` in iteration order.

    Failed documents are logged and recorded on the graph; they get no node,
    no links and no category. Category ids come from ``assigner`` (a fresh one
    per call unless supplied), so they follow the order in which grouping keys
    first appear among the successfully extracted documents.
    """

    assigner = assigner if assigner is not None else CategoryAssigner()
    graph = NoteGraph()
    seen: set[str] = set()

    for document in documents:
        if isinstance(document, DocumentFailure):
            LOGGER.warning("Skipping %s (%s failure): %s", document.path, document.stage, document.reason)
            graph.failures.append(document)
            continue

        if not document.path:
            raise ValueError("Document path must not be empty.")
        if document.path in seen:
            raise ValueError(f"Duplicate note id: {document.path}")
        seen.add(document.path)

        node = Node(
            id=document.path,
            name=document.title,
            category=assigner.assign(document.grouping_key),
            value=document.body,
            links=list(document.links),
        )
        graph.nodes.append(node)
        for raw_target in node.links:
            graph.links.append(Link(source_id=node.id, target_id=resolve_target(raw_target, extension)))

    graph.categories = assigner.categories()
    LOGGER.debug(
        "Assembled %d nodes, %d links, %d categories (%d failures)",
        len(graph.nodes),
        len(graph.links),
        len(graph.categories),
        len(graph.failures),
    )
    return graph


__all__ = ["DocumentResult", "ExtractedDocument", "assemble_graph", "resolve_target"]
