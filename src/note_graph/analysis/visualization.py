"""Static visualization helpers for note graphs."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

import matplotlib.pyplot as plt
import networkx as nx

from note_graph.analysis.graph_model import NoteGraph
from note_graph.errors import OutputError

DANGLING_COLOUR = "#6e6a86"


def _subset_graph(graph: nx.MultiDiGraph, max_nodes: int | None) -> nx.MultiDiGraph:
    if max_nodes is None or graph.number_of_nodes() <= max_nodes:
        return graph

    degrees = sorted(graph.degree, key=lambda item: (-item[1], item[0]))
    keep = {node for node, _ in degrees[:max_nodes]}
    return graph.subgraph(keep).copy()


def _category_colors(graph: NoteGraph) -> dict[str, tuple]:
    """Palette slot per category id, so colours follow discovery order like the page legend."""

    palette = plt.get_cmap("tab20")
    return {category.name: palette(category.id % palette.N) for category in graph.categories}


def plot_note_graph(
    graph: NoteGraph,
    output_path: Path,
    *,
    max_nodes: int | None = 200,
    layout: str = "spring",
    show_labels: bool = False,
    include_dangling: bool = False,
    title: str | None = None,
) -> Path:
    """
    Render a note graph to ``output_path`` using matplotlib.

    Nodes are coloured by category. Dangling link targets are hidden unless
    ``include_dangling`` is set, in which case they are drawn in grey.
    """

    output_path = Path(output_path)

    nx_graph = graph.to_networkx()
    if not include_dangling:
        nx_graph.remove_nodes_from([node for node, data in nx_graph.nodes(data=True) if data.get("dangling")])
    nx_graph = _subset_graph(nx_graph, max_nodes)
    if nx_graph.number_of_nodes() == 0:
        raise ValueError("Graph contains no nodes to visualize.")

    colors = _category_colors(graph)
    node_colours = [colors.get(data.get("category_name"), DANGLING_COLOUR) for _, data in nx_graph.nodes(data=True)]
    node_sizes = [50 + nx_graph.degree(node) * 5 for node in nx_graph.nodes()]

    if layout == "kamada-kawai":
        positions = nx.kamada_kawai_layout(nx_graph)
    elif layout == "spring":
        positions = nx.spring_layout(nx_graph, seed=42, iterations=100)
    else:
        raise ValueError(f"Unsupported layout: {layout}")

    if title is None:
        summary = Counter(data.get("category_name") or "dangling" for _, data in nx_graph.nodes(data=True))
        title = ", ".join(f"{name}: {count} notes" for name, count in summary.items())

    plt.figure(figsize=(12, 12))
    try:
        nx.draw_networkx_edges(nx_graph, positions, alpha=0.3, width=0.5, arrows=False)
        nx.draw_networkx_nodes(nx_graph, positions, node_color=node_colours, node_size=node_sizes, alpha=0.9)

        if show_labels and nx_graph.number_of_nodes() <= 150:
            labels = {node: data.get("name") or node for node, data in nx_graph.nodes(data=True)}
            nx.draw_networkx_labels(nx_graph, positions, labels=labels, font_size=7)

        plt.title(title)
        plt.axis("off")
        plt.tight_layout()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=200)
    except OSError as exc:
        raise OutputError(f"Failed to write {output_path}: {exc}") from exc
    finally:
        plt.close()
    return output_path


__all__ = ["plot_note_graph"]
