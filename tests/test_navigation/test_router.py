"""Tests for route search (pure functions, no mocking needed)."""

from collections import deque

import pytest

from src.navigation.graph_store import GraphStore
from src.navigation.router import (
    ROUTING_MODES,
    find_path,
    find_weighted_path,
    reconstruct_path,
    route_distance,
)


def reference_hop_count(store: GraphStore, start: str, end: str):
    """Independent BFS that only counts hops (no path bookkeeping)."""
    depth = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == end:
            return depth[node]
        for _, neighbor in store.neighbors(node):
            if neighbor not in depth:
                depth[neighbor] = depth[node] + 1
                queue.append(neighbor)
    return None


def is_walk(store: GraphStore, route: list[str]) -> bool:
    """Every consecutive pair must be a stored edge."""
    return all(
        any(n == b for _, n in store.neighbors(a))
        for a, b in zip(route, route[1:])
    )


class TestFindPath:
    """Tests for breadth-first find_path."""

    def test_same_start_and_end(self, floor_store):
        """Start equal to end returns just that node."""
        assert find_path(floor_store, "207", "207") == ["207"]

    def test_reflexive_for_every_node(self, floor_store):
        """Every node in the graph routes to itself in zero hops."""
        for node_id in floor_store.graph:
            assert find_path(floor_store, node_id, node_id) == [node_id]

    def test_unknown_start_equal_to_end(self, floor_store):
        """A node missing from the graph still routes to itself."""
        assert "nowhere" not in floor_store
        assert find_path(floor_store, "nowhere", "nowhere") == ["nowhere"]

    def test_route_207_to_215(self, floor_store):
        """Route is a valid walk of minimum hop count."""
        route = find_path(floor_store, "207", "215")

        assert route is not None
        assert route[0] == "207"
        assert route[-1] == "215"
        assert is_walk(floor_store, route)
        assert len(route) - 1 == reference_hop_count(floor_store, "207", "215")

    def test_route_207_to_215_goes_west(self, floor_store):
        """The 9-hop corridor via k-5 beats the 10-hop route via k-4."""
        assert find_path(floor_store, "207", "215") == [
            "207", "k-207", "k-206", "k-205", "k-204",
            "k-203", "k-5", "k-wc2", "k-215", "215",
        ]

    def test_unknown_destination(self, floor_store):
        """A destination not in the graph yields no route."""
        assert find_path(floor_store, "223", "wc9999") is None

    def test_unknown_start(self, floor_store):
        """An unknown start acts as an isolated node."""
        assert find_path(floor_store, "999", "207") is None

    def test_empty_start(self, floor_store):
        """Empty start token degrades to no route, not an error."""
        assert find_path(floor_store, "", "207") is None

    def test_disconnected_destination(self):
        """Destination in another component yields no route."""
        store = GraphStore.from_tables({"a": [(1.0, "b")], "b": [(1.0, "a")], "c": []})
        assert find_path(store, "a", "c") is None

    def test_asymmetric_edges_are_followed_one_way(self):
        """Search follows edges as stored, even without a reverse edge."""
        store = GraphStore.from_tables({"a": [(1.0, "b")], "b": []})
        assert find_path(store, "a", "b") == ["a", "b"]
        assert find_path(store, "b", "a") is None

    def test_dangling_neighbor_is_a_dead_end(self):
        """A neighbor that is not a graph key can be reached but not expanded."""
        store = GraphStore.from_tables({"a": [(1.0, "ghost")]})
        assert find_path(store, "a", "ghost") == ["a", "ghost"]

    def test_weights_ignored(self, small_store):
        """Fewest hops wins even when the edge is expensive."""
        assert find_path(small_store, "A", "D") == ["A", "B", "D"]

    def test_tie_break_follows_adjacency_order(self):
        """Among equal-length routes, the first neighbor listed wins."""
        first = GraphStore.from_tables({
            "s": [(1.0, "x"), (1.0, "y")],
            "x": [(1.0, "t")],
            "y": [(1.0, "t")],
        })
        second = GraphStore.from_tables({
            "s": [(1.0, "y"), (1.0, "x")],
            "x": [(1.0, "t")],
            "y": [(1.0, "t")],
        })
        assert find_path(first, "s", "t") == ["s", "x", "t"]
        assert find_path(second, "s", "t") == ["s", "y", "t"]

    def test_deterministic(self, floor_store):
        """Repeated queries return the identical route."""
        first = find_path(floor_store, "223", "208")
        for _ in range(5):
            assert find_path(floor_store, "223", "208") == first

    @pytest.mark.parametrize("start,end", [
        ("201", "229"),
        ("223", "208"),
        ("wc1", "wc2"),
        ("214", "217"),
        ("k-3", "211"),
    ])
    def test_minimum_hops_across_floor(self, floor_store, start, end):
        """Routes across the floor match the reference hop count."""
        route = find_path(floor_store, start, end)
        assert route is not None
        assert is_walk(floor_store, route)
        assert len(route) - 1 == reference_hop_count(floor_store, start, end)

    def test_returns_fresh_list(self, floor_store):
        """Callers own the returned route."""
        route = find_path(floor_store, "207", "206")
        route.append("junk")
        assert find_path(floor_store, "207", "206")[-1] == "206"


class TestFindWeightedPath:
    """Tests for Dijkstra-based find_weighted_path."""

    def test_prefers_lower_total_weight(self, small_store):
        """The three cheap hops beat the two-hop expensive route."""
        assert find_weighted_path(small_store, "A", "D") == ["A", "C", "E", "D"]

    def test_same_start_and_end(self, floor_store):
        assert find_weighted_path(floor_store, "207", "207") == ["207"]

    def test_unknown_start_equal_to_end(self, floor_store):
        assert find_weighted_path(floor_store, "nowhere", "nowhere") == ["nowhere"]

    def test_unknown_destination(self, floor_store):
        assert find_weighted_path(floor_store, "223", "wc9999") is None

    def test_route_207_to_215(self, floor_store):
        """West corridor (12.4) is shorter than the east one (12.7)."""
        route = find_weighted_path(floor_store, "207", "215")
        assert route == find_path(floor_store, "207", "215")
        assert route_distance(floor_store, route) == pytest.approx(12.4)

    def test_tie_break_follows_adjacency_order(self):
        """Equal-cost routes resolve to the first discovered."""
        store = GraphStore.from_tables({
            "s": [(1.0, "y"), (1.0, "x")],
            "x": [(1.0, "t")],
            "y": [(1.0, "t")],
        })
        assert find_weighted_path(store, "s", "t") == ["s", "y", "t"]


class TestReconstructPath:
    """Tests for reconstruct_path."""

    def test_single_node(self):
        assert reconstruct_path({"a": None}, "a") == ["a"]

    def test_chain(self):
        predecessors = {"a": None, "b": "a", "c": "b"}
        assert reconstruct_path(predecessors, "c") == ["a", "b", "c"]


class TestRouteDistance:
    """Tests for route_distance."""

    def test_single_node_is_zero(self, floor_store):
        assert route_distance(floor_store, ["207"]) == 0.0

    def test_sums_stored_weights(self, small_store):
        assert route_distance(small_store, ["A", "B", "D"]) == pytest.approx(11.0)

    def test_parallel_edges_use_lightest(self):
        """With two edges to the same neighbor, the cheaper one counts."""
        store = GraphStore.from_tables({"a": [(5.0, "b"), (2.0, "b")], "b": []})
        assert find_weighted_path(store, "a", "b") == ["a", "b"]
        assert route_distance(store, ["a", "b"]) == pytest.approx(2.0)

    def test_missing_edge_raises(self, small_store):
        with pytest.raises(ValueError, match="No edge"):
            route_distance(small_store, ["A", "D"])


class TestRoutingModes:
    """Tests for the routing mode table."""

    def test_modes(self):
        assert ROUTING_MODES["hops"] is find_path
        assert ROUTING_MODES["distance"] is find_weighted_path
