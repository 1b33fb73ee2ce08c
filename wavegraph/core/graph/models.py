"""Data models for graph operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from wavegraph.core.containers import HashMap, VertexSequence


@dataclass
class WaveNode:
    """A node of a wave tree.

    ``parent`` and ``subwaves`` are handles into the owning WaveTree.
    """

    handle: int
    vertex: int
    depth: int
    parent: int | None
    subwaves: list[int] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None


class WaveTree:
    """Rooted tree recorded by a breadth-first wave from a source vertex.

    Nodes are stored in an arena and addressed by integer handles; the root
    is handle 0. A vertex appears at most once among the children of a node.
    """

    __slots__ = ("_nodes",)

    ROOT = 0

    def __init__(self, source: int) -> None:
        self._nodes: list[WaveNode] = [WaveNode(handle=self.ROOT, vertex=source, depth=0, parent=None)]

    @property
    def root(self) -> WaveNode:
        return self._nodes[self.ROOT]

    @property
    def source(self) -> int:
        return self._nodes[self.ROOT].vertex

    def node(self, handle: int) -> WaveNode:
        return self._nodes[handle]

    def add(self, parent: int, vertex: int) -> int:
        """Add vertex as a subwave of parent. Returns the subwave handle.

        Adding a vertex the parent already has returns the existing handle.
        """
        existing = self.get(parent, vertex)
        if existing is not None:
            return existing

        parent_node = self._nodes[parent]
        handle = len(self._nodes)
        self._nodes.append(
            WaveNode(handle=handle, vertex=vertex, depth=parent_node.depth + 1, parent=parent)
        )
        parent_node.subwaves.append(handle)
        return handle

    def get(self, parent: int, vertex: int) -> int | None:
        """Handle of parent's subwave for vertex, or None."""
        for handle in self._nodes[parent].subwaves:
            if self._nodes[handle].vertex == vertex:
                return handle
        return None

    def children(self, handle: int) -> list[WaveNode]:
        return [self._nodes[h] for h in self._nodes[handle].subwaves]

    def trace(self, handle: int) -> list[int]:
        """Vertices from the root down to the node."""
        vertices: list[int] = []
        current: int | None = handle
        while current is not None:
            node = self._nodes[current]
            vertices.append(node.vertex)
            current = node.parent
        vertices.reverse()
        return vertices

    def at_depth(self, depth: int) -> list[WaveNode]:
        return [n for n in self if n.depth == depth]

    def to_paths(self) -> list[Path]:
        """Every root-to-node trace except the root itself. See wave_to_paths."""
        from wavegraph.core.graph.traversal import wave_to_paths

        return wave_to_paths(self)

    def render(self) -> str:
        """One line per node, indented by depth, vertices 1-based."""
        return "\n".join(f"{' ' * node.depth}{node.vertex + 1}" for node in self)

    def __iter__(self) -> Iterator[WaveNode]:
        """Pre-order traversal."""
        stack = [self.ROOT]
        while stack:
            node = self._nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.subwaves))

    def __len__(self) -> int:
        """Total nodes in the tree."""
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"WaveTree(source={self.source}, nodes={len(self)})"


@dataclass
class Path:
    """A vertex sequence with its accumulated weight."""

    vertices: VertexSequence
    weight: int = 0

    @classmethod
    def of(cls, vertices: list[int], weight: int = 0) -> Path:
        return cls(vertices=VertexSequence.from_list(vertices), weight=weight)

    @property
    def source(self) -> int | None:
        return self.vertices.first

    @property
    def sink(self) -> int | None:
        return self.vertices.last

    @property
    def num_edges(self) -> int:
        return max(len(self.vertices) - 1, 0)

    def extended(self, vertex: int, weight: int) -> Path:
        """Independent copy with vertex appended and weight added."""
        vertices = self.vertices.clone()
        vertices.append(vertex)
        return Path(vertices=vertices, weight=self.weight + weight)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __repr__(self) -> str:
        names = " -> ".join(str(v) for v in self.vertices)
        return f"Path({names}, weight={self.weight})"


@dataclass(frozen=True)
class ComponentPartition:
    """Connected components of a graph.

    ``labels[v]`` is the component id of vertex v; ``members`` maps each id
    to its vertices in index order.
    """

    labels: tuple[int, ...]
    members: HashMap[VertexSequence]

    def component_of(self, vertex: int) -> int | None:
        if 0 <= vertex < len(self.labels):
            return self.labels[vertex]
        return None

    def members_of(self, component_id: int) -> VertexSequence | None:
        return self.members.get(component_id)

    def same_component(self, u: int, v: int) -> bool:
        cu = self.component_of(u)
        return cu is not None and cu == self.component_of(v)

    def groups(self) -> list[list[int]]:
        """Member lists ordered by their lowest vertex."""
        return sorted((seq.to_list() for seq in self.members.values()), key=lambda g: g[0])

    def __len__(self) -> int:
        """Number of components."""
        return len(self.members)
