"""High-level orchestration for building the note graph page."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from markdown_it import MarkdownIt

from note_graph.analysis.assembler import DocumentResult, ExtractedDocument, assemble_graph
from note_graph.analysis.extractor import extract_document
from note_graph.analysis.graph_model import DocumentFailure, NoteGraph
from note_graph.analysis.serializer import SerializedGraph, serialize_graph
from note_graph.config import GraphConfig
from note_graph.io.markdown import create_parser
from note_graph.io.note_source import discover_notes, grouping_key, note_id, read_note
from note_graph.render.html import write_html

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildResult:
    graph: NoteGraph
    serialized: SerializedGraph
    note_count: int
    output: Path | None = None

    @property
    def failure_count(self) -> int:
        return len(self.graph.failures)


def load_document(path: Path, root: Path, parser: MarkdownIt | None = None) -> DocumentResult:
    """Read, parse and extract a single note. Failures are returned, not raised."""

    identifier = note_id(path, root)
    try:
        source = read_note(path)
    except OSError as exc:
        return DocumentFailure(path=identifier, stage="read", reason=str(exc))

    try:
        content = extract_document(source, parser)
    except Exception as exc:  # any parser error only skips this note
        return DocumentFailure(path=identifier, stage="parse", reason=f"{type(exc).__name__}: {exc}")

    return ExtractedDocument(
        path=identifier,
        title=content.title,
        body=content.body,
        grouping_key=grouping_key(identifier),
        links=content.links,
    )


def collect_documents(
    paths: Iterable[Path],
    root: Path,
    *,
    workers: int = 1,
    parser: Optional[MarkdownIt] = None,
) -> List[DocumentResult]:
    """
    Extract every note in ``paths``, optionally on a bounded thread pool.

    Results come back in the order of ``paths`` regardless of ``workers``;
    category assignment happens later, in that order, so ids do not depend on
    thread scheduling.
    """

    paths = list(paths)
    parser = parser or create_parser()
    if workers <= 1 or len(paths) <= 1:
        return [load_document(path, root, parser) for path in paths]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda path: load_document(path, root, parser), paths))


def build_graph(config: GraphConfig) -> NoteGraph:
    """Discover, extract and assemble the notes described by ``config``."""

    paths = discover_notes(config.root, extension=config.extension, skip_hidden=config.skip_hidden)
    LOGGER.info("Found %d notes under %s", len(paths), config.root)
    documents = collect_documents(paths, config.root, workers=config.workers)
    return assemble_graph(documents, extension=config.extension)


def build_note_graph(config: GraphConfig, *, write: bool = True) -> BuildResult:
    """
    Entry point for the full run: build the graph, serialize it and write the page.

    Nothing is written when the vault contains no notes. Errors writing the
    page surface as :class:`~note_graph.errors.OutputError`.
    """

    graph = build_graph(config)
    serialized = serialize_graph(graph)
    note_count = len(graph.nodes) + len(graph.failures)
    result = BuildResult(graph=graph, serialized=serialized, note_count=note_count)

    if note_count == 0:
        LOGGER.info("No notes found under %s; nothing to write.", config.root)
        return result

    if write:
        result.output = write_html(serialized, config.output, title=config.title)
    return result


__all__ = ["BuildResult", "build_graph", "build_note_graph", "collect_documents", "load_document"]
