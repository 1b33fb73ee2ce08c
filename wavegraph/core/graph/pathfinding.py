"""Path finding algorithms: wave shortest paths, label-correcting minimum weight."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from wavegraph.core.containers import HashMap
from wavegraph.core.graph.models import Path
from wavegraph.core.graph.traversal import generate_wave, wave_to_paths

if TYPE_CHECKING:
    from wavegraph.core.graph.base import Graph

logger = logging.getLogger(__name__)


def shortest_paths(graph: Graph, source: int, sink: int) -> list[Path]:
    """Every fewest-edges path from source to sink, in discovery order.

    Empty if either vertex is out of range or sink is not reachable.
    """
    if not graph.reachable(source, sink):
        return []
    if source == sink:
        return [Path.of([source], weight=0)]

    tree = generate_wave(graph, source, sink, duplicate=True)
    if tree is None:
        return []

    return [path for path in wave_to_paths(tree) if path.sink == sink]


def minimum_weight_paths(graph: Graph, source: int, sink: int | None = None) -> HashMap[Path]:
    """Minimum-weight paths from source, keyed by end vertex.

    Label-correcting relaxation over a FIFO work queue: a vertex is queued
    again every time a strictly lighter path to it is found. Weights must be
    non-negative. The sink, when given, must be reachable and is never
    expanded. The trivial path to source is left out.
    """
    result: HashMap[Path] = HashMap()
    if not graph.contains(source):
        return result
    if sink is not None and not graph.reachable(source, sink):
        return result

    best: list[Path | None] = [None] * graph.num_vertices
    best[source] = Path.of([source], weight=0)

    queue: deque[int] = deque([source])
    relaxations = 0

    while queue:
        i = queue.popleft()
        if i == sink:
            continue

        i_path = best[i]
        if i_path is None:
            continue

        for j, weight in graph.neighbors(i):
            absorbed = i_path.weight + weight
            j_path = best[j]
            if j_path is not None and j_path.weight <= absorbed:
                continue

            best[j] = i_path.extended(j, weight)
            queue.append(j)
            relaxations += 1

    for vertex, path in enumerate(best):
        if path is None or vertex == source:
            continue
        result.put(vertex, path)

    logger.debug(
        "Relaxation from %d (sink=%s): %d relaxations, %d paths",
        source,
        sink,
        relaxations,
        len(result),
    )
    return result
