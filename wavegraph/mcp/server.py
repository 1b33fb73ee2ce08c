"""MCP server implementation for wavegraph."""

from __future__ import annotations

import json
import os
from pathlib import Path as FilePath
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from wavegraph.config import DEFAULT_GRAPH_FILE, GRAPH_FILE_ENV
from wavegraph.core.exceptions import WaveGraphError
from wavegraph.core.graph import (
    Graph,
    Path,
    load_from_file,
    minimum_weight_paths,
    paths_by_hops,
    shortest_paths,
)

server = Server("wavegraph")

_FILE_PROPERTY = {
    "type": "string",
    "description": f"Edge-list file to load (default: ${GRAPH_FILE_ENV} or {DEFAULT_GRAPH_FILE})",
}
_DIRECTED_PROPERTY = {
    "type": "boolean",
    "description": "Treat edges as one-way (default: false)",
    "default": False,
}
_VERTEX_DESCRIPTION = "Vertex number, 1-based as in the edge-list file"


def _get_graph(arguments: dict[str, Any]) -> Graph:
    """Load the graph named by the tool arguments or the environment."""
    file = arguments.get("file") or os.environ.get(GRAPH_FILE_ENV) or DEFAULT_GRAPH_FILE
    return load_from_file(
        FilePath(file),
        directed=arguments.get("directed", False),
        weighted=not arguments.get("unweighted", False),
    )


def _path_to_dict(path: Path) -> dict[str, Any]:
    """Convert a Path to a JSON-serializable dict."""
    return {"vertices": [v + 1 for v in path.vertices], "weight": path.weight}


def _vertex_schema(description: str) -> dict[str, Any]:
    return {"type": "integer", "minimum": 1, "description": f"{description}. {_VERTEX_DESCRIPTION}"}


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="wavegraph_components",
            description="List the connected components of the graph with their member vertices.",
            inputSchema={
                "type": "object",
                "properties": {"file": _FILE_PROPERTY, "directed": _DIRECTED_PROPERTY},
            },
        ),
        Tool(
            name="wavegraph_reachable",
            description="Check whether two vertices belong to the same connected component.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": _FILE_PROPERTY,
                    "directed": _DIRECTED_PROPERTY,
                    "from": _vertex_schema("First vertex"),
                    "to": _vertex_schema("Second vertex"),
                },
                "required": ["from", "to"],
            },
        ),
        Tool(
            name="wavegraph_shortest_paths",
            description=(
                "Find every path with the fewest edges between two vertices. "
                "Returns an empty list when the vertices are not connected."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "file": _FILE_PROPERTY,
                    "directed": _DIRECTED_PROPERTY,
                    "from": _vertex_schema("Start vertex"),
                    "to": _vertex_schema("End vertex"),
                },
                "required": ["from", "to"],
            },
        ),
        Tool(
            name="wavegraph_minimum_weight_paths",
            description=(
                "Find minimum-weight paths from a vertex, to one target vertex "
                "or to every reachable vertex when no target is given."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "file": _FILE_PROPERTY,
                    "directed": _DIRECTED_PROPERTY,
                    "from": _vertex_schema("Start vertex"),
                    "to": _vertex_schema("End vertex (optional)"),
                    "unweighted": {
                        "type": "boolean",
                        "description": "Count every edge as weight 1 (default: false)",
                        "default": False,
                    },
                },
                "required": ["from"],
            },
        ),
        Tool(
            name="wavegraph_hops",
            description="Group the vertices around a vertex by how many edges away they are.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file": _FILE_PROPERTY,
                    "directed": _DIRECTED_PROPERTY,
                    "from": _vertex_schema("Start vertex"),
                },
                "required": ["from"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "wavegraph_components":
            result = _handle_components(arguments)
        elif name == "wavegraph_reachable":
            result = _handle_reachable(arguments, arguments["from"], arguments["to"])
        elif name == "wavegraph_shortest_paths":
            result = _handle_shortest_paths(arguments, arguments["from"], arguments["to"])
        elif name == "wavegraph_minimum_weight_paths":
            result = _handle_minimum_weight_paths(arguments, arguments["from"], arguments.get("to"))
        elif name == "wavegraph_hops":
            result = _handle_hops(arguments, arguments["from"])
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except WaveGraphError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e), "type": type(e).__name__}))]


def _handle_components(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle wavegraph_components tool."""
    partition = _get_graph(arguments).connected_components()
    return {"components": [[v + 1 for v in group] for group in partition.groups()]}


def _handle_reachable(arguments: dict[str, Any], v: int, w: int) -> dict[str, Any]:
    """Handle wavegraph_reachable tool."""
    graph = _get_graph(arguments)
    return {"from": v, "to": w, "reachable": graph.reachable(v - 1, w - 1)}


def _handle_shortest_paths(arguments: dict[str, Any], v: int, w: int) -> dict[str, Any]:
    """Handle wavegraph_shortest_paths tool."""
    graph = _get_graph(arguments)
    return {"paths": [_path_to_dict(p) for p in shortest_paths(graph, v - 1, w - 1)]}


def _handle_minimum_weight_paths(arguments: dict[str, Any], v: int, w: int | None) -> dict[str, Any]:
    """Handle wavegraph_minimum_weight_paths tool."""
    graph = _get_graph(arguments)
    sink = w - 1 if w is not None else None
    result = minimum_weight_paths(graph, v - 1, sink)

    if sink is not None:
        path = result.get(sink)
        return {"paths": [_path_to_dict(path)] if path is not None else []}
    return {"paths": [_path_to_dict(p) for _, p in sorted(result.iterate(), key=lambda e: e[0])]}


def _handle_hops(arguments: dict[str, Any], v: int) -> dict[str, Any]:
    """Handle wavegraph_hops tool."""
    grouped = paths_by_hops(_get_graph(arguments), v - 1)
    return {"hops": {str(k): [_path_to_dict(p) for p in paths] for k, paths in grouped.items()}}


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
