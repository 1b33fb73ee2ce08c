"""Graph analysis: connected components by relabelling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wavegraph.core.containers import HashMap, VertexSequence
from wavegraph.core.graph.models import ComponentPartition

if TYPE_CHECKING:
    from wavegraph.core.graph.base import Graph

UNASSIGNED = 0


def compute_components(graph: Graph) -> ComponentPartition:
    """Partition the vertices into connected components. O(V^2) on the matrix.

    Vertices are scanned in index order. An unassigned vertex v opens
    component ``v + 1`` and the rows of v and of every vertex it absorbs are
    scanned. A neighbour already in another component relabels the whole
    current component to the neighbour's id (union by relabelling), which
    only happens for directed graphs, where the result is the weak partition.
    """
    n = graph.num_vertices
    labels = [UNASSIGNED] * n
    remaining = n
    live = n

    for v in range(n):
        if remaining == 0:
            break
        if labels[v] != UNASSIGNED:
            continue

        component_id = v + 1
        labels[v] = component_id
        remaining -= 1
        pending = [v]

        while pending:
            u = pending.pop()
            for j, _ in graph.neighbors(u):
                if labels[j] == component_id:
                    continue

                live -= 1
                if labels[j] == UNASSIGNED:
                    labels[j] = component_id
                    remaining -= 1
                    pending.append(j)
                    continue

                old_id, component_id = component_id, labels[j]
                for k in range(n):
                    if labels[k] == old_id:
                        labels[k] = component_id

    members: HashMap[VertexSequence] = HashMap(capacity=live)
    for v, component_id in enumerate(labels):
        seq = members.get(component_id)
        if seq is None:
            seq = VertexSequence()
            members.put(component_id, seq)
        seq.append(v)

    return ComponentPartition(labels=tuple(labels), members=members)
