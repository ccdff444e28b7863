"""CLI for mind-layout."""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path

import click

from mind_layout import __version__
from mind_layout.ids import CounterIds
from mind_layout.layout import LayoutConfig, compute_layout, place_child
from mind_layout.layout.constants import DEFAULT_DENSITY, DENSITY_FACTORS
from mind_layout.layout.hierarchy import build_hierarchy, diagnose_hierarchy
from mind_layout.parser import MindGraph, dump_project, parse_project
from mind_layout.render import render_svg, render_tree
from mind_layout.themes import THEMES


def _read_project(path: Path) -> MindGraph:
    try:
        return parse_project(path.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _load_config(density: str, config_path: Path | None) -> LayoutConfig:
    config = LayoutConfig.for_density(density)
    if config_path is None:
        return config
    try:
        overrides = json.loads(config_path.read_text())
        if not isinstance(overrides, dict):
            raise ValueError("layout config must be a JSON object")
        return config.with_overrides(overrides)
    except ValueError as e:
        click.echo(f"Config error: {e}", err=True)
        raise SystemExit(1)


_density_option = click.option(
    "--density", type=click.Choice(list(DENSITY_FACTORS)), default=DEFAULT_DENSITY,
    help=f"Spacing preset (default: {DEFAULT_DENSITY})",
)
_config_option = click.option(
    "--config", "config_path", type=click.Path(exists=True, path_type=Path), default=None,
    help="JSON file overriding individual layout parameters",
)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """mind-layout: Radial layout for mind map projects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output project file. Defaults to rewriting the input")
@_density_option
@_config_option
def layout(
    input_file: Path,
    output: Path | None,
    density: str,
    config_path: Path | None,
) -> None:
    """Rearrange every node of a project radially around its root."""
    graph = _read_project(input_file)
    config = _load_config(density, config_path)

    result = compute_layout(graph, config)
    if result is graph and graph.nodes:
        click.echo("Cannot lay out: the hierarchy is not a single rooted tree "
                   "(run 'validate' for details)", err=True)
        raise SystemExit(1)

    output = output or input_file
    output.write_text(dump_project(result))
    click.echo(f"Laid out {len(result.nodes)} nodes ({density}) -> {output}")


@cli.command("add-child")
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("parent_id")
@click.option("--label", default="", help="Label of the new node")
@click.option("--type", "node_type", default=None,
              help="Type of the new node (default: derived from the parent)")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output project file. Defaults to rewriting the input")
@_density_option
def add_child(
    input_file: Path,
    parent_id: str,
    label: str,
    node_type: str | None,
    output: Path | None,
    density: str,
) -> None:
    """Add one child under PARENT_ID without moving existing nodes."""
    graph = _read_project(input_file)
    config = LayoutConfig.for_density(density)

    placement = place_child(
        graph, parent_id, CounterIds(taken=graph.nodes), label=label,
        node_type=node_type, config=config,
    )
    if placement is None:
        click.echo(f"Unknown parent node '{parent_id}'", err=True)
        raise SystemExit(1)
    if not placement.clear:
        click.echo("Warning: no overlap-free spot found; consider running "
                   "'layout' to rearrange the project", err=True)

    output = output or input_file
    output.write_text(dump_project(placement.added_to(graph)))
    node = placement.node
    click.echo(f"Added {node.type} '{node.id}' at ({node.x:.0f}, {node.y:.0f}) -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--relayout/--no-relayout", default=False,
              help="Run a full layout before rendering instead of using stored positions")
@_density_option
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    relayout: bool,
    density: str,
) -> None:
    """Render a preview SVG of a project's layout."""
    graph = _read_project(input_file)
    if relayout:
        graph = compute_layout(graph, LayoutConfig.for_density(density))

    svg = render_svg(graph, THEMES[theme])

    if output is None:
        output = input_file.with_suffix(".svg")
    output.write_text(svg)
    click.echo(f"Rendered {len(graph.nodes)} nodes, {len(graph.edges)} edges -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--color/--no-color", default=True, help="Colorize output")
def tree(input_file: Path, color: bool) -> None:
    """Print a project's hierarchy as a tree."""
    graph = _read_project(input_file)
    click.echo(render_tree(graph, color=color), nl=False, color=color)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Check that a project's hierarchy is a single rooted tree."""
    graph = _read_project(input_file)
    errors = diagnose_hierarchy(graph)

    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(graph.nodes)} nodes, "
               f"{len(graph.hierarchy_edges())} hierarchy edges, "
               f"{len(graph.edges) - len(graph.hierarchy_edges())} other edges")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a project."""
    graph = _read_project(input_file)

    click.echo(f"Project: {graph.name or '(none)'} [{graph.id or '-'}]")
    click.echo(f"Nodes: {len(graph.nodes)}")
    for node_type, count in sorted(Counter(n.type for n in graph.nodes.values()).items()):
        click.echo(f"  {node_type}: {count}")
    click.echo(f"Edges: {len(graph.edges)}")
    for kind, count in sorted(Counter(e.kind or '(none)' for e in graph.edges).items()):
        click.echo(f"  {kind}: {count}")

    hierarchy = build_hierarchy(graph)
    if hierarchy is None:
        click.echo("Root: (not a single rooted tree)")
        return
    root = graph.nodes[hierarchy.root]
    click.echo(f"Root: {root.label or root.id}")
    click.echo(f"Root branches: {len(hierarchy.kids(hierarchy.root))}")
    click.echo(f"Depth: {max(hierarchy.depth.values())}")
