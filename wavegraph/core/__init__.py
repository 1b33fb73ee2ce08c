"""
Core module: containers, exceptions, and the graph engine.

Containers (containers/):
    - HashMap: Chained hash table for sparse vertex -> data indexing
    - VertexSequence: Growable vertex list used to build paths

Exceptions (exceptions.py):
    - WaveGraphError: Base exception for all wavegraph errors
    - LoadError: Edge-list file could not be read
    - IteratorInvalidatedError: HashMap mutated during iteration

Graph (graph/):
    - Graph: Adjacency matrix, mutation, components, reachability
    - Wave generation and path algorithms
"""

from wavegraph.core.containers import HashMap, VertexSequence
from wavegraph.core.exceptions import (
    IteratorInvalidatedError,
    LoadError,
    WaveGraphError,
)
from wavegraph.core.graph import ComponentPartition, Graph, Path, WaveTree

__all__ = [
    # Containers
    "HashMap",
    "VertexSequence",
    # Exceptions
    "WaveGraphError",
    "LoadError",
    "IteratorInvalidatedError",
    # Graph
    "Graph",
    "ComponentPartition",
    "Path",
    "WaveTree",
]
