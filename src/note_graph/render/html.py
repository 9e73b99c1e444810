"""Render serialized graph fragments into the interactive ECharts page."""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from note_graph.analysis.serializer import SerializedGraph
from note_graph.config import DEFAULT_TITLE
from note_graph.errors import OutputError

LOGGER = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
GRAPH_TEMPLATE = "graph.html.j2"
ECHARTS_URL = "https://cdn.jsdelivr.net/npm/echarts@5/dist/echarts.min.js"
FRAGMENT_SEPARATOR = ", "


def _environment() -> jinja2.Environment:
    # Fragments arrive already escaped for the script context; the few
    # free-text values that land in HTML are escaped explicitly in the template.
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
    )


def render_html(
    serialized: SerializedGraph,
    *,
    title: str = DEFAULT_TITLE,
    echarts_url: str = ECHARTS_URL,
    symbol_size: int = 8,
) -> str:
    """Splice the node, link and category fragments into the page template."""

    template = _environment().get_template(GRAPH_TEMPLATE)
    return template.render(
        title=title,
        echarts_url=echarts_url,
        symbol_size=symbol_size,
        nodes=FRAGMENT_SEPARATOR.join(serialized.nodes),
        links=FRAGMENT_SEPARATOR.join(serialized.links),
        categories=FRAGMENT_SEPARATOR.join(serialized.categories),
    )


def write_html(serialized: SerializedGraph, output_path: Path, *, title: str = DEFAULT_TITLE) -> Path:
    """Render and write the page, raising :class:`OutputError` when the file cannot be written."""

    output_path = Path(output_path)
    document = render_html(serialized, title=title)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Failed to write graph page {output_path}: {exc}") from exc
    LOGGER.info("Graph page written to %s", output_path)
    return output_path


__all__ = ["ECHARTS_URL", "render_html", "write_html"]
