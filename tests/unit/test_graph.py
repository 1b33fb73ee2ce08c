"""Unit tests for the graph engine and its algorithms."""

import pytest

from wavegraph.config import NO_EDGE_WEIGHTED
from wavegraph.core.graph import (
    Graph,
    generate_wave,
    minimum_weight_paths,
    paths_by_hops,
    shortest_paths,
    wave_to_paths,
)
from wavegraph.core.graph.models import Path, WaveTree


def make_graph(n: int, edges: list[tuple[int, int, int]], **kwargs: bool) -> Graph:
    """Create a graph from (i, j, weight) triples."""
    graph = Graph(n, **kwargs)
    for i, j, w in edges:
        graph.add_weighted_edge(i, j, w)
    return graph


def vertex_lists(paths: list[Path]) -> list[list[int]]:
    return [p.vertices.to_list() for p in paths]


@pytest.fixture
def triangle_tail() -> Graph:
    """Create 0-1, 1-2, 0-2, 2-3 (unweighted, undirected)."""
    return make_graph(4, [(0, 1, 1), (1, 2, 1), (0, 2, 1), (2, 3, 1)])


@pytest.fixture
def diamond() -> Graph:
    """Create a diamond: 0-1, 0-2, 1-3, 2-3, plus a tail 3-4."""
    return make_graph(5, [(0, 1, 1), (0, 2, 1), (1, 3, 1), (2, 3, 1), (3, 4, 1)])


@pytest.fixture
def weighted_graph() -> Graph:
    """Create a weighted graph where the direct edge is heavier than a detour."""
    return make_graph(
        5,
        [(0, 1, 10), (0, 2, 3), (2, 1, 4), (1, 3, 2), (2, 3, 8)],
        weighted=True,
    )


@pytest.fixture
def two_islands() -> Graph:
    """Create two components: {0, 1, 2} and {3, 4}."""
    return make_graph(5, [(0, 1, 1), (1, 2, 1), (3, 4, 1)])


class TestGraphEdges:
    """Tests for mutation and matrix reads."""

    def test_new_graph_has_no_edges(self) -> None:
        graph = Graph(3)
        assert graph.num_vertices == 3
        assert graph.num_edges == 0
        assert not graph.has_edge(0, 1)

    def test_undirected_edge_is_symmetric(self) -> None:
        graph = Graph(3, weighted=True)
        graph.add_weighted_edge(0, 2, 7)
        assert graph.get_weight(0, 2) == 7
        assert graph.get_weight(2, 0) == 7
        assert graph.num_edges == 1

    def test_unweighted_normalizes_weight(self) -> None:
        graph = Graph(2)
        graph.add_weighted_edge(0, 1, 9)
        assert graph.get_weight(0, 1) == 1
        assert graph.get_weight(1, 0) == 1

    def test_unweighted_zero_weight_is_no_edge(self) -> None:
        graph = Graph(2)
        graph.add_weighted_edge(0, 1, 0)
        assert not graph.has_edge(0, 1)

    def test_weighted_zero_weight_is_an_edge(self) -> None:
        graph = Graph(2, weighted=True)
        graph.add_weighted_edge(0, 1, 0)
        assert graph.has_edge(0, 1)
        assert graph.get_weight(0, 1) == 0

    def test_directed_edge_is_one_way(self) -> None:
        graph = Graph(2, directed=True)
        graph.add_edge(0, 1)
        assert graph.has_edge(0, 1)
        assert not graph.has_edge(1, 0)

    def test_remove_edge(self, triangle_tail: Graph) -> None:
        triangle_tail.remove_edge(2, 3)
        assert not triangle_tail.has_edge(2, 3)
        assert not triangle_tail.has_edge(3, 2)

    def test_sentinels(self) -> None:
        assert Graph(1, weighted=True).no_edge == NO_EDGE_WEIGHTED
        assert Graph(1).no_edge == 0

    def test_out_of_range_is_ignored(self) -> None:
        graph = Graph(2, weighted=True)
        graph.add_weighted_edge(0, 5, 3)
        graph.add_weighted_edge(-1, 0, 3)
        graph.remove_edge(0, 9)
        assert graph.num_edges == 0
        assert not graph.has_edge(0, 5)
        assert graph.get_weight(0, 5) == NO_EDGE_WEIGHTED
        assert graph.get_weight(-1, 0) == NO_EDGE_WEIGHTED

    def test_degrees(self, triangle_tail: Graph) -> None:
        assert triangle_tail.degree_out(2) == 3
        assert triangle_tail.degree_in(2) == 3
        assert triangle_tail.degree_out(3) == 1
        assert triangle_tail.degree_out(10) == 0
        assert triangle_tail.degree_in(-1) == 0

    def test_directed_degrees(self) -> None:
        graph = make_graph(3, [(0, 1, 1), (0, 2, 1)], directed=True)
        assert graph.degree_out(0) == 2
        assert graph.degree_in(0) == 0
        assert graph.degree_in(2) == 1

    def test_neighbors_in_index_order(self, weighted_graph: Graph) -> None:
        assert list(weighted_graph.neighbors(1)) == [(0, 10), (2, 4), (3, 2)]
        assert list(weighted_graph.neighbors(4)) == []
        assert list(weighted_graph.neighbors(99)) == []

    def test_negative_vertex_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            Graph(-1)

    def test_render_matrix(self) -> None:
        graph = make_graph(3, [(0, 1, 5), (1, 2, 12)], weighted=True)
        assert graph.render_matrix() == (
            "(  -,  5,  -)\n"
            "(  5,  -, 12)\n"
            "(  -, 12,  -)"
        )


class TestComponentCache:
    """Tests for component resolution and cache invalidation."""

    def test_partition(self, two_islands: Graph) -> None:
        partition = two_islands.connected_components()
        assert len(partition) == 2
        assert partition.groups() == [[0, 1, 2], [3, 4]]
        assert partition.labels == (1, 1, 1, 4, 4)

    def test_isolated_vertices_are_components(self) -> None:
        partition = Graph(3).connected_components()
        assert partition.groups() == [[0], [1], [2]]

    def test_members_of(self, two_islands: Graph) -> None:
        partition = two_islands.connected_components()
        members = partition.members_of(partition.labels[4])
        assert members is not None
        assert members.to_list() == [3, 4]

    def test_cache_hit_returns_same_object(self, two_islands: Graph) -> None:
        first = two_islands.connected_components()
        assert two_islands.is_clean
        assert two_islands.connected_components() is first

    def test_mutation_invalidates(self, two_islands: Graph) -> None:
        first = two_islands.connected_components()
        two_islands.add_edge(2, 3)
        assert not two_islands.is_clean
        second = two_islands.connected_components()
        assert second is not first
        assert second.groups() == [[0, 1, 2, 3, 4]]

    def test_remove_invalidates(self, two_islands: Graph) -> None:
        two_islands.connected_components()
        two_islands.remove_edge(3, 4)
        assert two_islands.connected_components().groups() == [[0, 1, 2], [3], [4]]

    def test_same_weight_keeps_cache(self, two_islands: Graph) -> None:
        first = two_islands.connected_components()
        two_islands.add_edge(0, 1)
        assert two_islands.connected_components() is first

    def test_out_of_range_add_keeps_cache(self, two_islands: Graph) -> None:
        first = two_islands.connected_components()
        two_islands.add_edge(0, 17)
        assert two_islands.connected_components() is first

    def test_edges_between_absorbed_vertices(self) -> None:
        """1 and 3 are only reached through absorbed vertices."""
        graph = make_graph(4, [(0, 1, 1), (2, 3, 1), (1, 3, 1)])
        assert graph.connected_components().groups() == [[0, 1, 2, 3]]

    def test_directed_components_are_weak(self) -> None:
        graph = make_graph(4, [(2, 0, 1), (3, 1, 1), (3, 2, 1)], directed=True)
        partition = graph.connected_components()
        assert partition.groups() == [[0, 1, 2, 3]]
        assert len(set(partition.labels)) == 1

    def test_empty_graph(self) -> None:
        partition = Graph(0).connected_components()
        assert len(partition) == 0
        assert partition.labels == ()


class TestReachability:
    """Tests for reachable()."""

    def test_same_component(self, two_islands: Graph) -> None:
        assert two_islands.reachable(0, 2)
        assert two_islands.reachable(3, 4)

    def test_different_components(self, two_islands: Graph) -> None:
        assert not two_islands.reachable(0, 4)

    def test_symmetric(self, two_islands: Graph) -> None:
        for u in range(5):
            for v in range(5):
                assert two_islands.reachable(u, v) == two_islands.reachable(v, u)

    def test_out_of_range(self, two_islands: Graph) -> None:
        assert not two_islands.reachable(0, 5)
        assert not two_islands.reachable(-1, 0)

    def test_disconnected_pair(self) -> None:
        assert not Graph(2).reachable(0, 1)

    def test_partition_same_component(self, two_islands: Graph) -> None:
        partition = two_islands.connected_components()
        assert partition.same_component(0, 2)
        assert not partition.same_component(2, 3)
        assert not partition.same_component(4, 5)
        assert not partition.same_component(-1, 0)


class TestWave:
    """Tests for wave generation and flattening."""

    def test_out_of_range_source(self, diamond: Graph) -> None:
        assert generate_wave(diamond, 9) is None

    def test_single_branch_mode(self, diamond: Graph) -> None:
        tree = generate_wave(diamond, 0)
        assert tree is not None
        assert [(n.vertex, n.depth) for n in tree] == [(0, 0), (1, 1), (3, 2), (4, 3), (2, 1)]
        assert len(tree) == 5

    def test_duplicate_mode_branches_per_parent(self, diamond: Graph) -> None:
        tree = generate_wave(diamond, 0, sink=3, duplicate=True)
        assert tree is not None
        depth_two = tree.at_depth(2)
        assert [n.vertex for n in depth_two] == [3, 3]
        assert {tree.node(n.parent).vertex for n in depth_two if n.parent is not None} == {1, 2}

    def test_duplicate_mode_expands_every_branch(self, diamond: Graph) -> None:
        tree = generate_wave(diamond, 0, duplicate=True)
        assert tree is not None
        traces = sorted(tree.trace(n.handle) for n in tree.at_depth(3))
        assert traces == [[0, 1, 3, 4], [0, 2, 3, 4]]

    def test_no_duplicate_children(self) -> None:
        tree = WaveTree(0)
        first = tree.add(WaveTree.ROOT, 1)
        assert tree.add(WaveTree.ROOT, 1) == first
        assert len(tree.root.subwaves) == 1

    def test_sink_stops_enqueueing(self) -> None:
        graph = make_graph(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1)])
        tree = generate_wave(graph, 0, sink=1)
        assert tree is not None
        assert max(n.depth for n in tree) == 1

    def test_wave_to_paths_drops_root(self, diamond: Graph) -> None:
        tree = generate_wave(diamond, 0)
        assert tree is not None
        paths = wave_to_paths(tree)
        assert vertex_lists(paths) == [[0, 1], [0, 1, 3], [0, 1, 3, 4], [0, 2]]
        assert [p.weight for p in paths] == [1, 2, 3, 1]

    def test_paths_are_independent_of_tree(self, diamond: Graph) -> None:
        tree = generate_wave(diamond, 0)
        assert tree is not None
        paths = tree.to_paths()
        paths[0].vertices.append(99)
        assert tree.to_paths()[0].vertices == [0, 1]

    def test_render(self) -> None:
        graph = make_graph(3, [(0, 1, 1), (1, 2, 1)])
        tree = generate_wave(graph, 0)
        assert tree is not None
        assert tree.render() == "1\n 2\n  3"

    def test_isolated_source(self) -> None:
        tree = generate_wave(Graph(3), 1)
        assert tree is not None
        assert len(tree) == 1
        assert wave_to_paths(tree) == []


class TestShortestPaths:
    """Tests for shortest_paths()."""

    def test_single_shortest(self, triangle_tail: Graph) -> None:
        paths = shortest_paths(triangle_tail, 0, 3)
        assert vertex_lists(paths) == [[0, 2, 3]]
        assert paths[0].weight == 2

    def test_all_equal_paths(self, diamond: Graph) -> None:
        paths = shortest_paths(diamond, 0, 4)
        assert sorted(vertex_lists(paths)) == [[0, 1, 3, 4], [0, 2, 3, 4]]

    def test_length_is_edges_plus_one(self, diamond: Graph) -> None:
        for path in shortest_paths(diamond, 0, 3):
            assert len(path) == 3
            assert path.num_edges == 2

    def test_same_vertex(self, diamond: Graph) -> None:
        paths = shortest_paths(diamond, 2, 2)
        assert vertex_lists(paths) == [[2]]
        assert paths[0].weight == 0

    def test_unreachable(self) -> None:
        assert shortest_paths(Graph(2), 0, 1) == []

    def test_out_of_range(self, diamond: Graph) -> None:
        assert shortest_paths(diamond, 0, 8) == []

    def test_directed_without_route(self) -> None:
        graph = make_graph(2, [(1, 0, 1)], directed=True)
        assert shortest_paths(graph, 0, 1) == []
        assert vertex_lists(shortest_paths(graph, 1, 0)) == [[1, 0]]


class TestMinimumWeightPaths:
    """Tests for minimum_weight_paths()."""

    def test_all_destinations_unweighted(self, triangle_tail: Graph) -> None:
        result = minimum_weight_paths(triangle_tail, 0)
        weights = {v: p.weight for v, p in result.iterate()}
        assert weights == {1: 1, 2: 1, 3: 2}
        assert not result.has(0)

    def test_detour_beats_direct_edge(self, weighted_graph: Graph) -> None:
        result = minimum_weight_paths(weighted_graph, 0)
        to_one = result.get(1)
        to_three = result.get(3)
        assert to_one is not None and to_three is not None
        assert to_one.vertices == [0, 2, 1]
        assert to_one.weight == 7
        assert to_three.vertices == [0, 2, 1, 3]
        assert to_three.weight == 9

    def test_unreachable_vertices_left_out(self, weighted_graph: Graph) -> None:
        result = minimum_weight_paths(weighted_graph, 0)
        assert not result.has(4)
        assert len(result) == 3

    def test_with_sink(self, weighted_graph: Graph) -> None:
        result = minimum_weight_paths(weighted_graph, 0, 3)
        path = result.get(3)
        assert path is not None
        assert path.weight == 9

    def test_unreachable_sink(self, weighted_graph: Graph) -> None:
        assert len(minimum_weight_paths(weighted_graph, 0, 4)) == 0

    def test_out_of_range_source(self, weighted_graph: Graph) -> None:
        assert len(minimum_weight_paths(weighted_graph, 10)) == 0

    def test_source_is_sink(self, weighted_graph: Graph) -> None:
        assert len(minimum_weight_paths(weighted_graph, 2, 2)) == 0


class TestHops:
    """Tests for paths_by_hops()."""

    def test_grouping(self, diamond: Graph) -> None:
        grouped = paths_by_hops(diamond, 0)
        assert list(grouped) == [1, 2, 3]
        assert vertex_lists(grouped[1]) == [[0, 1], [0, 2]]
        assert vertex_lists(grouped[2]) == [[0, 1, 3]]
        assert vertex_lists(grouped[3]) == [[0, 1, 3, 4]]

    def test_isolated_vertex(self) -> None:
        assert paths_by_hops(Graph(2), 0) == {}

    def test_out_of_range(self, diamond: Graph) -> None:
        assert paths_by_hops(diamond, 5) == {}
