"""Command line entry points for the project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from note_graph import __version__
from note_graph.analysis.graph_export import EXPORT_FORMATS, export_graph
from note_graph.analysis.graph_model import NoteGraph
from note_graph.analysis.graph_queries import summarize, top_linked_notes
from note_graph.analysis.visualization import plot_note_graph
from note_graph.config import DEFAULT_EXTENSION, DEFAULT_OUTPUT, DEFAULT_TITLE, GraphConfig
from note_graph.errors import NoteGraphError
from note_graph.pipelines.build_note_graph import build_graph, build_note_graph


def _config_from_options(root: Path, **options) -> GraphConfig:
    candidate = root.expanduser()
    if not candidate.is_dir():
        raise typer.BadParameter(f"Vault root not found: {candidate}")
    try:
        return GraphConfig.from_root(candidate, **options)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _report_failures(graph: NoteGraph, limit: int = 10) -> None:
    if not graph.failures:
        return
    typer.secho(f"Skipped {len(graph.failures)} notes:", fg=typer.colors.YELLOW)
    for failure in graph.failures[:limit]:
        typer.echo(f"  - {failure.path} [{failure.stage}] {failure.reason}")
    if len(graph.failures) > limit:
        typer.echo(f"  ... ({len(graph.failures) - limit} more)")


def _fail(exc: NoteGraphError) -> None:
    typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


app = typer.Typer(help="Build an interactive graph from a folder of Markdown notes.")


@app.callback()
def main(
    display_version: bool = typer.Option(False, "--version", "-V", help="Show version and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print the package version when requested and configure logging."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if display_version:
        typer.echo(__version__)
        raise typer.Exit()


@app.command("build")
def build(
    root: Path = typer.Argument(Path("."), help="Vault directory to scan for notes."),
    output: Path = typer.Option(DEFAULT_OUTPUT, "--output", "-o", help="Destination HTML page."),
    extension: str = typer.Option(DEFAULT_EXTENSION, help="File extension identifying notes."),
    workers: int = typer.Option(1, min=1, help="Number of threads used to read and parse notes."),
    title: str = typer.Option(DEFAULT_TITLE, help="Title of the generated page."),
) -> None:
    """Scan a vault and write the interactive graph page."""

    config = _config_from_options(root, extension=extension, output=output, workers=workers, title=title)
    try:
        result = build_note_graph(config)
    except NoteGraphError as exc:
        _fail(exc)
        return

    if result.note_count == 0:
        typer.echo(f"No {config.extension} notes found under {config.root}.")
        return

    graph = result.graph
    typer.echo(f"Notes: {len(graph.nodes)}  Links: {len(graph.links)}  Categories: {len(graph.categories)}")
    _report_failures(graph)
    typer.secho(f"Graph written to {result.output}", fg=typer.colors.GREEN)


@app.command("export")
def export(
    root: Path = typer.Argument(Path("."), help="Vault directory to scan for notes."),
    output: Path = typer.Option(..., "--output", "-o", help="Destination file for the graph data."),
    export_format: str = typer.Option("json", "--format", "-f", help="Output format: json or graphml."),
    extension: str = typer.Option(DEFAULT_EXTENSION, help="File extension identifying notes."),
    workers: int = typer.Option(1, min=1, help="Number of threads used to read and parse notes."),
) -> None:
    """Write the assembled graph as JSON or GraphML."""

    fmt = export_format.lower()
    if fmt not in EXPORT_FORMATS:
        raise typer.BadParameter(f"Unsupported format: {export_format}")

    config = _config_from_options(root, extension=extension, workers=workers)
    graph = build_graph(config)
    try:
        destination = export_graph(graph, output.expanduser(), format=fmt)
    except NoteGraphError as exc:
        _fail(exc)
        return

    _report_failures(graph)
    typer.echo(f"Graph data written to {destination}")


@app.command("visualize")
def visualize(
    root: Path = typer.Argument(Path("."), help="Vault directory to scan for notes."),
    output: Path = typer.Option(Path("graph.png"), "--output", "-o", help="Destination PNG."),
    extension: str = typer.Option(DEFAULT_EXTENSION, help="File extension identifying notes."),
    max_nodes: Optional[int] = typer.Option(200, help="Limit the number of nodes drawn for readability."),
    layout: str = typer.Option("spring", help="Layout algorithm: spring or kamada-kawai."),
    show_labels: bool = typer.Option(False, help="Render note titles (best for <=150 nodes)."),
    include_dangling: bool = typer.Option(False, help="Draw link targets that have no note."),
) -> None:
    """Render a static PNG preview of the note graph."""

    config = _config_from_options(root, extension=extension)
    graph = build_graph(config)
    try:
        png_path = plot_note_graph(
            graph,
            output.expanduser(),
            max_nodes=max_nodes,
            layout=layout,
            show_labels=show_labels,
            include_dangling=include_dangling,
        )
    except NoteGraphError as exc:
        _fail(exc)
        return
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo(f"Notes: {len(graph.nodes)}  Links: {len(graph.links)}")
    typer.echo(f"Visualization saved to {png_path}")


@app.command("stats")
def stats(
    root: Path = typer.Argument(Path("."), help="Vault directory to scan for notes."),
    extension: str = typer.Option(DEFAULT_EXTENSION, help="File extension identifying notes."),
    top: int = typer.Option(10, help="Number of sample entries to print for each section."),
) -> None:
    """Summarise the vault: categories, dangling links, orphans and hubs."""

    config = _config_from_options(root, extension=extension)
    graph = build_graph(config)
    summary = summarize(graph)

    typer.echo(f"Notes: {summary.node_count}  Links: {summary.link_count}  Categories: {summary.category_count}")
    for name, count in summary.notes_per_category.items():
        typer.echo(f"  {name}: {count}")

    typer.echo(f"Dangling links: {len(summary.dangling)}")
    for link in summary.dangling[:top]:
        typer.echo(f"  - {link.source_id} -> {link.target_id}")

    typer.echo(f"Orphan notes: {len(summary.orphans)}")
    for node in summary.orphans[:top]:
        typer.echo(f"  - {node}")

    hubs = top_linked_notes(graph, top=top)
    if hubs:
        typer.echo("Most linked notes:")
        for entry in hubs:
            typer.echo(f"  - {entry.label} ({entry.node}) in={entry.in_degree} out={entry.out_degree}")

    _report_failures(graph, limit=top)


def run() -> None:
    """Entry point used by ``python -m note_graph.cli``."""

    app()


if __name__ == "__main__":
    run()
