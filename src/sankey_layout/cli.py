"""CLI for sankey-layout."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from sankey_layout import __version__
from sankey_layout.export import graph_to_dict
from sankey_layout.layout import Alignment, LayoutConfig, compute_layout
from sankey_layout.layout.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    ITERATIONS,
    NODE_PADDING,
    NODE_THICKNESS,
)
from sankey_layout.parser import SankeyGraph, load_graph
from sankey_layout.parser.model import NodeId
from sankey_layout.render import LabelPosition, render_svg
from sankey_layout.themes import THEMES


def layout_options(func):
    """Attach the options shared by every command that runs a layout."""
    options = [
        click.option("--width", type=float, default=CANVAS_WIDTH,
                     help=f"Layout width (default: {CANVAS_WIDTH:g})"),
        click.option("--height", type=float, default=CANVAS_HEIGHT,
                     help=f"Layout height (default: {CANVAS_HEIGHT:g})"),
        click.option("--node-thickness", type=float, default=NODE_THICKNESS,
                     help=f"Node thickness (default: {NODE_THICKNESS:g})"),
        click.option("--node-padding", type=float, default=NODE_PADDING,
                     help=f"Vertical gap between nodes (default: {NODE_PADDING:g})"),
        click.option("--iterations", type=int, default=ITERATIONS,
                     help=f"Relaxation iterations (default: {ITERATIONS})"),
        click.option("--align", "alignment",
                     type=click.Choice([a.value for a in Alignment]),
                     default=Alignment.JUSTIFY.value,
                     help="Node alignment (default: justify)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_and_layout(input_file: Path, **layout_kwargs) -> SankeyGraph:
    try:
        graph = load_graph(input_file)
        compute_layout(graph, LayoutConfig(**layout_kwargs))
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    return graph


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """sankey-layout: Lay out and render Sankey diagrams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--label-position", type=click.Choice([p.value for p in LabelPosition]),
              default=LabelPosition.AUTO.value, help="Label placement (default: auto)")
@click.option("--select", "selected", default=None,
              help="Highlight a node and its links")
@layout_options
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    label_position: str,
    selected: str | None,
    **layout_kwargs,
) -> None:
    """Render a Sankey definition to SVG."""
    graph = _load_and_layout(input_file, **layout_kwargs)

    svg = render_svg(
        graph,
        THEMES[theme],
        selected_node=_resolve_selection(graph, selected),
        label_position=label_position,
    )

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(graph.nodes)} nodes, "
               f"{len(graph.links)} links -> {output}")


def _resolve_selection(graph: SankeyGraph, selected: str | None) -> NodeId | None:
    """Map a --select value onto a node id; JSON ids may be integers."""
    if selected is None:
        return None
    for node in graph.nodes:
        if str(node.id) == selected:
            return node.id
    raise click.ClickException(f"Unknown node for --select: {selected!r}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output JSON file path. Defaults to stdout")
@layout_options
def layout(input_file: Path, output: Path | None, **layout_kwargs) -> None:
    """Compute the layout and write node/link coordinates as JSON."""
    graph = _load_and_layout(input_file, **layout_kwargs)
    text = json.dumps(graph_to_dict(graph), indent=2)
    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n")
        click.echo(f"Wrote layout for {len(graph.nodes)} nodes -> {output}", err=True)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a Sankey definition by laying it out with default options."""
    try:
        graph = load_graph(input_file)
        compute_layout(graph)
    except ValueError as e:
        click.echo(f"Validation error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.links)} links, "
               f"{len(graph.columns())} columns")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a Sankey definition."""
    graph = _load_and_layout(input_file)

    click.echo(f"Title: {graph.title or '(none)'}")
    click.echo(f"Nodes: {len(graph.nodes)}")
    click.echo(f"Links: {len(graph.links)}")
    click.echo(f"Total flow: {graph.total_value():g}")
    columns = graph.columns()
    click.echo(f"Columns: {len(columns)}")
    for i, column in enumerate(columns):
        names = ", ".join(node.display_label for node in column)
        click.echo(f"  [{i}] {names}")
