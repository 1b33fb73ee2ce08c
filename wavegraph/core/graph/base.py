"""Core Graph class with dense adjacency-matrix representation."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from wavegraph.config import NO_EDGE_UNWEIGHTED, NO_EDGE_WEIGHTED, UNWEIGHTED_EDGE
from wavegraph.core.graph.analysis import compute_components
from wavegraph.core.graph.models import ComponentPartition

logger = logging.getLogger(__name__)


class Graph:
    """Graph over the fixed vertex set ``0 .. n-1``.

    Edges live in an ``n x n`` matrix; a sentinel weight (``no_edge``) marks
    missing edges. Undirected graphs keep the matrix symmetric.

    The connected-component partition is computed on demand and cached until
    the next add/remove mutation.
    """

    __slots__ = ("_directed", "_weighted", "_matrix", "_components")

    def __init__(self, vertex_count: int, directed: bool = False, weighted: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")
        self._directed = directed
        self._weighted = weighted
        no_edge = self.no_edge
        self._matrix: list[list[int]] = [[no_edge] * vertex_count for _ in range(vertex_count)]
        self._components: ComponentPartition | None = None

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def no_edge(self) -> int:
        """Sentinel weight meaning "no edge"."""
        return NO_EDGE_WEIGHTED if self._weighted else NO_EDGE_UNWEIGHTED

    @property
    def num_vertices(self) -> int:
        return len(self._matrix)

    @property
    def num_edges(self) -> int:
        no_edge = self.no_edge
        total = sum(w != no_edge for row in self._matrix for w in row)
        if self._directed:
            return total
        loops = sum(self._matrix[v][v] != no_edge for v in range(len(self._matrix)))
        return (total + loops) // 2

    @property
    def is_clean(self) -> bool:
        """True while a computed component partition is cached."""
        return self._components is not None

    def contains(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._matrix)

    def add_edge(self, i: int, j: int) -> None:
        """Link i and j with weight 1."""
        self.add_weighted_edge(i, j, UNWEIGHTED_EDGE)

    def add_weighted_edge(self, i: int, j: int, weight: int) -> None:
        """Link i and j. Out-of-range vertices are ignored.

        Unweighted graphs store any nonzero weight as 1. Writing the weight
        an edge already has leaves the component cache alone.
        """
        if not (self.contains(i) and self.contains(j)):
            return
        if not self._weighted and weight != 0:
            weight = UNWEIGHTED_EDGE
        if self._matrix[i][j] == weight:
            return

        self._invalidate_cache()
        self._matrix[i][j] = weight
        if not self._directed:
            self._matrix[j][i] = weight

    def has_edge(self, i: int, j: int) -> bool:
        if not (self.contains(i) and self.contains(j)):
            return False
        return self._matrix[i][j] != self.no_edge

    def get_weight(self, i: int, j: int) -> int:
        """Weight of (i, j), or the sentinel when there is no such edge."""
        if not (self.contains(i) and self.contains(j)):
            return self.no_edge
        return self._matrix[i][j]

    def remove_edge(self, i: int, j: int) -> None:
        if not (self.contains(i) and self.contains(j)):
            return

        self._invalidate_cache()
        no_edge = self.no_edge
        self._matrix[i][j] = no_edge
        if not self._directed:
            self._matrix[j][i] = no_edge

    def degree_out(self, vertex: int) -> int:
        """Number of edges leaving vertex. O(n)."""
        if not self.contains(vertex):
            return 0
        no_edge = self.no_edge
        return sum(w != no_edge for w in self._matrix[vertex])

    def degree_in(self, vertex: int) -> int:
        """Number of edges entering vertex. O(n)."""
        if not self.contains(vertex):
            return 0
        no_edge = self.no_edge
        return sum(row[vertex] != no_edge for row in self._matrix)

    def neighbors(self, vertex: int) -> Iterator[tuple[int, int]]:
        """Yield (neighbor, weight) for edges leaving vertex, in index order."""
        if not self.contains(vertex):
            return
        no_edge = self.no_edge
        for j, weight in enumerate(self._matrix[vertex]):
            if weight != no_edge:
                yield j, weight

    def connected_components(self) -> ComponentPartition:
        """Component partition, computed once per clean state."""
        if self._components is None:
            self._components = compute_components(self)
            logger.debug("Computed %d components for %r", len(self._components), self)
        return self._components

    def reachable(self, u: int, v: int) -> bool:
        """True if u and v share a component. Out-of-range is False."""
        if not (self.contains(u) and self.contains(v)):
            return False
        return self.connected_components().same_component(u, v)

    def render_matrix(self) -> str:
        """Adjacency matrix as text, one parenthesized row per vertex."""
        no_edge = self.no_edge
        rows = []
        for row in self._matrix:
            cells = ("  -" if w == no_edge else f"{w:3d}" for w in row)
            rows.append(f"({','.join(cells)})")
        return "\n".join(rows)

    def _invalidate_cache(self) -> None:
        if self._components is not None:
            logger.debug("Discarding cached components for %r", self)
        self._components = None

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={self.num_vertices}, directed={self._directed}, "
            f"weighted={self._weighted})"
        )
