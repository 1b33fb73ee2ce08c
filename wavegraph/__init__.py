"""
wavegraph: Connectivity and path queries over small dense graphs.

wavegraph keeps a graph as an adjacency matrix and lets you:
- Resolve connected components and reachability
- Enumerate every shortest path between two vertices
- Find minimum-weight paths from a vertex

Usage:
    from wavegraph.core.graph import load_from_file, shortest_paths

    graph = load_from_file(Path("Panas.in"))
    for path in shortest_paths(graph, 0, 3):
        print(path)
"""

__version__ = "0.1.0"
