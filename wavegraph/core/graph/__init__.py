"""
Graph data structures and algorithms.

This module provides in-memory graph operations over a fixed vertex set:

Data Structures:
    - Graph: Dense adjacency matrix with a cached component partition
    - WaveTree: Breadth-first exploration tree with arena-held nodes
    - Path: A vertex sequence and its accumulated weight
    - ComponentPartition: Vertex -> component id plus id -> members

Algorithms:
    - analysis: Connected components by relabelling
    - traversal: Wave generation, wave-to-path flattening, hop grouping
    - pathfinding: All shortest paths, label-correcting minimum weight

Loading:
    - load_from_file(): Read a 1-based edge-list file
    - load_from_lines(): Same format from an iterable of lines
"""

from wavegraph.core.graph.base import Graph
from wavegraph.core.graph.loader import load_from_file, load_from_lines
from wavegraph.core.graph.models import ComponentPartition, Path, WaveNode, WaveTree
from wavegraph.core.graph.pathfinding import minimum_weight_paths, shortest_paths
from wavegraph.core.graph.traversal import generate_wave, paths_by_hops, wave_to_paths

__all__ = [
    "Graph",
    "ComponentPartition",
    "Path",
    "WaveNode",
    "WaveTree",
    "generate_wave",
    "wave_to_paths",
    "paths_by_hops",
    "shortest_paths",
    "minimum_weight_paths",
    "load_from_file",
    "load_from_lines",
]
