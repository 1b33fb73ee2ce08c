"""CLI entry point for wavegraph."""

import json
import logging
import os
from pathlib import Path as FilePath
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.tree import Tree

from wavegraph.config import DEFAULT_GRAPH_FILE, GRAPH_FILE_ENV, LOG_LEVEL_ENV
from wavegraph.core.exceptions import LoadError
from wavegraph.core.graph import (
    Graph,
    Path,
    WaveTree,
    generate_wave,
    load_from_file,
    minimum_weight_paths,
    paths_by_hops,
    shortest_paths,
)

app = typer.Typer(
    name="wavegraph",
    help="Connectivity and path queries over an edge-list graph.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

GraphFile = Annotated[
    FilePath,
    typer.Option("--file", "-f", envvar=GRAPH_FILE_ENV, help="Edge-list file to load"),
]
Directed = Annotated[bool, typer.Option("--directed", help="Treat edges as one-way")]
Unweighted = Annotated[bool, typer.Option("--unweighted", help="Ignore edge weights")]
OutputJson = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Connectivity and path queries over an edge-list graph."""
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        err_console.print(f"[red]Unknown log level in {LOG_LEVEL_ENV}: {level}[/red]")
        raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_graph(file: FilePath, directed: bool, unweighted: bool) -> Graph:
    """Load the graph or exit with an error message."""
    try:
        return load_from_file(file, directed=directed, weighted=not unweighted)
    except LoadError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


def format_path(path: Path) -> str:
    """Vertices joined by dashes, 1-based."""
    return "-".join(str(v + 1) for v in path.vertices)


def path_to_dict(path: Path) -> dict[str, Any]:
    return {"vertices": [v + 1 for v in path.vertices], "weight": path.weight}


@app.command()
def matrix(
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
) -> None:
    """Show the adjacency matrix."""
    graph = get_graph(file, directed, unweighted)
    console.print(graph.render_matrix(), highlight=False)


@app.command()
def components(
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
    output_json: OutputJson = False,
) -> None:
    """List the connected components."""
    graph = get_graph(file, directed, unweighted)
    partition = graph.connected_components()

    if output_json:
        result = [
            {"id": component_id, "vertices": [v + 1 for v in members]}
            for component_id, members in partition.members.iterate()
        ]
        print(json.dumps(result))
        return

    for count, (component_id, members) in enumerate(partition.members.iterate(), start=1):
        vertices = " ".join(str(v + 1) for v in members)
        console.print(f"Component {count} ([dim]{component_id}[/]): [cyan]{vertices}[/]")


@app.command()
def reachable(
    v: Annotated[int, typer.Argument(help="First vertex (1-based)")],
    w: Annotated[int, typer.Argument(help="Second vertex (1-based)")],
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
    output_json: OutputJson = False,
) -> None:
    """Check whether two vertices are connected."""
    graph = get_graph(file, directed, unweighted)
    result = graph.reachable(v - 1, w - 1)

    if output_json:
        print(json.dumps({"from": v, "to": w, "reachable": result}))
    else:
        answer = "[green]yes[/]" if result else "[red]no[/]"
        console.print(f"v{v}~v{w}: {answer}")


@app.command()
def shortest(
    v: Annotated[int, typer.Argument(help="Start vertex (1-based)")],
    w: Annotated[int, typer.Argument(help="End vertex (1-based)")],
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
    output_json: OutputJson = False,
) -> None:
    """Show every fewest-edges path between two vertices."""
    graph = get_graph(file, directed, unweighted)
    paths = shortest_paths(graph, v - 1, w - 1)

    if output_json:
        print(json.dumps([path_to_dict(p) for p in paths]))
        return

    if not paths:
        console.print(f"No path from [cyan]{v}[/] to [cyan]{w}[/]")
        return

    console.print("Possible paths:")
    for count, path in enumerate(paths, start=1):
        console.print(f"  ({count}) [cyan]{format_path(path)}[/]", highlight=False)


@app.command()
def hops(
    v: Annotated[int, typer.Argument(help="Start vertex (1-based)")],
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
    output_json: OutputJson = False,
) -> None:
    """Show the vertices k edges away from a vertex, for every k."""
    graph = get_graph(file, directed, unweighted)
    grouped = paths_by_hops(graph, v - 1)

    if output_json:
        print(json.dumps({str(k): [path_to_dict(p) for p in paths] for k, paths in grouped.items()}))
        return

    for k, paths in grouped.items():
        console.print(f"\n [bold]{k}[/] hop{'s' if k != 1 else ''} away:")
        console.print("  " + ", ".join(format_path(p) for p in paths), highlight=False)


@app.command()
def weakest(
    v: Annotated[int, typer.Argument(help="Start vertex (1-based)")],
    w: Annotated[int | None, typer.Argument(help="End vertex (1-based), all if omitted")] = None,
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
    output_json: OutputJson = False,
) -> None:
    """Show minimum-weight paths from a vertex."""
    graph = get_graph(file, directed, unweighted)
    sink = w - 1 if w is not None else None
    result = minimum_weight_paths(graph, v - 1, sink)

    if sink is not None:
        path = result.get(sink)
        paths = [path] if path is not None else []
    else:
        paths = [path for _, path in sorted(result.iterate(), key=lambda item: item[0])]

    if output_json:
        print(json.dumps([path_to_dict(p) for p in paths]))
        return

    if not paths:
        console.print(f"No path from [cyan]{v}[/]")
        return

    for path in paths:
        start, end = path.vertices.first, path.vertices.last
        label = f" {start + 1:2d} to {end + 1:2d}:  " if sink is None else " "
        console.print(f"{label}[cyan]{format_path(path)}[/]: {path.weight}", highlight=False)


@app.command()
def wave(
    v: Annotated[int, typer.Argument(help="Start vertex (1-based)")],
    sink: Annotated[int | None, typer.Option("--sink", "-s", help="Stop at this vertex")] = None,
    duplicate: Annotated[
        bool, typer.Option("--duplicate", "-d", help="One branch per discovering parent")
    ] = False,
    plain: Annotated[bool, typer.Option("--plain", help="Indented text, no tree glyphs")] = False,
    file: GraphFile = DEFAULT_GRAPH_FILE,
    directed: Directed = False,
    unweighted: Unweighted = False,
    output_json: OutputJson = False,
) -> None:
    """Show the breadth-first wave tree from a vertex."""
    graph = get_graph(file, directed, unweighted)
    tree = generate_wave(graph, v - 1, sink - 1 if sink is not None else None, duplicate)

    if tree is None:
        console.print(f"Vertex [cyan]{v}[/] is not in the graph")
        raise typer.Exit(1)

    if output_json:

        def node_to_dict(handle: int) -> dict[str, Any]:
            node = tree.node(handle)
            return {
                "vertex": node.vertex + 1,
                "depth": node.depth,
                "subwaves": [node_to_dict(h) for h in node.subwaves],
            }

        print(json.dumps(node_to_dict(WaveTree.ROOT)))
        return

    if plain:
        print(tree.render())
        return

    def build(branch: Tree, handle: int) -> None:
        for child in tree.children(handle):
            build(branch.add(f"[cyan]{child.vertex + 1}[/]"), child.handle)

    root = Tree(f"[bold yellow]{tree.source + 1}[/]")
    build(root, WaveTree.ROOT)
    console.print(root)
    console.print(f"\n[dim]Nodes: {len(tree)}[/]")


if __name__ == "__main__":
    app()
