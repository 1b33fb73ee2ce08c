"""Load a Graph from an edge-list file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from wavegraph.core.exceptions import LoadError
from wavegraph.core.graph.base import Graph

logger = logging.getLogger(__name__)


def load_from_file(path: Path, directed: bool = False, weighted: bool = True) -> Graph:
    """Load a graph from an edge-list file.

    Format: a header ``"<vertex_count> <edge_count>"`` followed by
    ``edge_count`` lines of ``"<i> <j> <weight>"`` with 1-based vertices.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read {path}: {e}") from e

    logger.info("Loading graph file: %s", path)
    return load_from_lines(text.splitlines(), directed=directed, weighted=weighted)


def load_from_lines(lines: Iterable[str], directed: bool = False, weighted: bool = True) -> Graph:
    """Load a graph from edge-list lines. Blank lines are skipped."""
    records = ((lineno, line.split()) for lineno, line in enumerate(lines, start=1))
    records = ((lineno, fields) for lineno, fields in records if fields)

    header = next(records, None)
    if header is None:
        raise LoadError("Empty edge list: missing '<vertex_count> <edge_count>' header")
    lineno, fields = header
    vertex_count, edge_count = _parse_ints(fields, 2, lineno)
    if vertex_count < 0 or edge_count < 0:
        raise LoadError(f"Line {lineno}: counts must be non-negative")

    graph = Graph(vertex_count, directed=directed, weighted=weighted)

    loaded = 0
    for lineno, fields in records:
        if loaded == edge_count:
            break
        vi, wj, weight = _parse_ints(fields, 3, lineno)
        if not (1 <= vi <= vertex_count and 1 <= wj <= vertex_count):
            logger.warning("Line %d: edge %d-%d is outside 1..%d, skipped", lineno, vi, wj, vertex_count)
        else:
            graph.add_weighted_edge(vi - 1, wj - 1, weight)
        loaded += 1

    if loaded < edge_count:
        raise LoadError(f"Expected {edge_count} edges, found {loaded}")

    logger.debug("Loaded %r with %d edge lines", graph, loaded)
    return graph


def _parse_ints(fields: list[str], count: int, lineno: int) -> list[int]:
    if len(fields) != count:
        raise LoadError(f"Line {lineno}: expected {count} integers, got {len(fields)}")
    try:
        return [int(f) for f in fields]
    except ValueError as e:
        raise LoadError(f"Line {lineno}: {e}") from e
