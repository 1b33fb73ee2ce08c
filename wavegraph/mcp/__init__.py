"""
MCP server for wavegraph.

Exposes graph connectivity and path tools to LLMs via the Model Context Protocol.

Tools:
    - wavegraph_components: List connected components
    - wavegraph_reachable: Check whether two vertices are connected
    - wavegraph_shortest_paths: Every fewest-edges path between two vertices
    - wavegraph_minimum_weight_paths: Minimum-weight paths from a vertex
    - wavegraph_hops: Vertices grouped by edge distance

Usage:
    Install: pip install wavegraph
    Run: wavegraph-mcp
"""

import asyncio

from wavegraph.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
