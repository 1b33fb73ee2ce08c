"""Breadth-first wave generation and wave-to-path flattening."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from wavegraph.core.containers import HashMap, VertexSequence
from wavegraph.core.graph.models import Path, WaveTree

if TYPE_CHECKING:
    from wavegraph.core.graph.base import Graph

logger = logging.getLogger(__name__)


def generate_wave(
    graph: Graph,
    source: int,
    sink: int | None = None,
    duplicate: bool = False,
) -> WaveTree | None:
    """Record a breadth-first exploration from source as a wave tree.

    In duplicate mode the whole frontier is expanded before its discoveries
    are marked visited, so every frontier vertex adjacent to an unvisited
    vertex gets its own branch to it. Otherwise each dequeued vertex marks
    its discoveries at once and a vertex has exactly one branch.

    Once sink is discovered nothing else is enqueued; vertices already in
    the queue still expand.

    Returns None if source is out of range.
    """
    if not graph.contains(source):
        return None

    tree = WaveTree(source)
    visited = [False] * graph.num_vertices
    visited[source] = True

    # vertex -> handles of its wave nodes in the frontier being expanded
    wave_track: HashMap[list[int]] = HashMap()
    wave_track.put(source, [WaveTree.ROOT])

    queue: deque[int] = deque([source])
    found = False

    while queue:
        batch = len(queue) if duplicate else 1
        discovered: HashMap[list[int]] = HashMap()

        for _ in range(batch):
            i = queue.popleft()
            visited[i] = True
            handles = wave_track.delete(i) or []

            for j, _ in graph.neighbors(i):
                if visited[j]:
                    continue

                claimed = discovered.get(j)
                if claimed is None:
                    claimed = []
                    discovered.put(j, claimed)
                    first_claim = True
                else:
                    first_claim = False

                for handle in handles:
                    child = tree.add(handle, j)
                    if child not in claimed:
                        claimed.append(child)

                found |= j == sink
                if first_claim and not found:
                    queue.append(j)

        for j, claimed in discovered.iterate():
            visited[j] = True
            wave_track.put(j, claimed)

    logger.debug(
        "Wave from %d (sink=%s, duplicate=%s): %d nodes", source, sink, duplicate, len(tree)
    )
    return tree


def wave_to_paths(tree: WaveTree) -> list[Path]:
    """Flatten a wave tree into one path per non-root node, in pre-order.

    Each path runs from the root to the node and weighs its edge count.
    """
    paths: list[Path] = []
    model = VertexSequence()
    stack = [WaveTree.ROOT]

    while stack:
        node = tree.node(stack.pop())
        model.truncate(node.depth)
        model.append(node.vertex)

        if not node.is_root:
            paths.append(Path(vertices=model.clone(), weight=node.depth))

        stack.extend(reversed(node.subwaves))

    return paths


def paths_by_hops(graph: Graph, source: int) -> dict[int, list[Path]]:
    """Group the single-branch wave paths from source by edge count.

    Keys run over ``1 .. component size - 1``; hop counts with no vertex
    are left out.
    """
    tree = generate_wave(graph, source)
    if tree is None:
        return {}

    partition = graph.connected_components()
    members = partition.members_of(partition.labels[source])
    max_hops = len(members) - 1 if members is not None else 0

    grouped: dict[int, list[Path]] = {}
    for path in wave_to_paths(tree):
        if path.num_edges <= max_hops:
            grouped.setdefault(path.num_edges, []).append(path)
    return dict(sorted(grouped.items()))
