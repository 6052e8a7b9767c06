"""Read-only store for the navigation graph and floor-plan coordinates."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional

from src.navigation import floor_data

logger = logging.getLogger(__name__)

# Corridor and junction nodes carry this prefix; everything else is a room
WAYPOINT_PREFIX = "k-"

Edge = tuple[float, str]
Point = tuple[int, int]


@dataclass(frozen=True)
class GraphStore:
    """
    Immutable adjacency and coordinate tables.

    Built once at startup and shared by every query. Lookups of unknown
    nodes never raise: they return an empty neighbor list or None.
    """

    graph: Mapping[str, tuple[Edge, ...]]
    coordinates: Mapping[str, Point]

    @classmethod
    def from_tables(
        cls,
        graph: Mapping[str, Any],
        coordinates: Optional[Mapping[str, Any]] = None,
    ) -> "GraphStore":
        """
        Validate raw tables and freeze them into a store.

        Args:
            graph: Mapping of node id to a list of (weight, neighbor_id) pairs
            coordinates: Mapping of node id to an (x, y) integer pair

        Returns:
            GraphStore over read-only copies of the tables

        Raises:
            ValueError: If a node's edges are not a list, an edge is not a
                (weight, neighbor) pair, a weight is not a non-negative
                number, or a coordinate is not an integer pair
        """
        frozen_graph: dict[str, tuple[Edge, ...]] = {}
        for node_id, edges in graph.items():
            if not isinstance(edges, (list, tuple)):
                raise ValueError(f"Edges of {node_id!r} must be a list of (weight, neighbor) pairs, got {edges!r}")
            frozen_graph[str(node_id)] = tuple(_validate_edge(node_id, edge) for edge in edges)

        frozen_coordinates: dict[str, Point] = {}
        for node_id, point in (coordinates or {}).items():
            frozen_coordinates[str(node_id)] = _validate_point(node_id, point)

        # Dangling neighbors are allowed; the search treats them as dead ends
        for node_id, edges in frozen_graph.items():
            for _, neighbor_id in edges:
                if neighbor_id not in frozen_graph:
                    logger.warning(f"Edge {node_id} -> {neighbor_id} points to an unknown node")

        logger.debug(
            f"Built graph store: {len(frozen_graph)} nodes, "
            f"{sum(len(e) for e in frozen_graph.values())} edges, "
            f"{len(frozen_coordinates)} coordinates"
        )

        return cls(
            graph=MappingProxyType(frozen_graph),
            coordinates=MappingProxyType(frozen_coordinates),
        )

    def neighbors(self, node_id: str) -> tuple[Edge, ...]:
        """Return (weight, neighbor_id) pairs in stored order, empty if unknown."""
        return self.graph.get(node_id, ())

    def coordinates_of(self, node_id: str) -> Optional[Point]:
        """Return the floor-plan (x, y) of a node, or None if unmapped."""
        return self.coordinates.get(node_id)

    def rooms(self) -> list[str]:
        """All room ids in the graph (waypoints excluded), sorted."""
        return sorted(node_id for node_id in self.graph if is_room(node_id))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.graph

    def __len__(self) -> int:
        return len(self.graph)


def is_room(node_id: str) -> bool:
    """
    Tell rooms apart from corridor waypoints.

    Example:
        >>> is_room("207")
        True
        >>> is_room("k-207")
        False
    """
    return not node_id.startswith(WAYPOINT_PREFIX)


def default_store() -> GraphStore:
    """Build the store from the built-in second floor tables."""
    return GraphStore.from_tables(floor_data.NAVIGATION_GRAPH, floor_data.COORDINATES)


def _validate_edge(node_id: str, edge: Any) -> Edge:
    if not isinstance(edge, (list, tuple)) or len(edge) != 2:
        raise ValueError(f"Edge of {node_id!r} must be a (weight, neighbor) pair, got {edge!r}")

    weight, neighbor_id = edge
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValueError(f"Edge weight {node_id!r} -> {neighbor_id!r} is not a number: {weight!r}")
    if not weight >= 0:
        raise ValueError(f"Edge weight {node_id!r} -> {neighbor_id!r} must be non-negative, got {weight}")

    return (float(weight), str(neighbor_id))


def _validate_point(node_id: str, point: Any) -> Point:
    if (
        not isinstance(point, (list, tuple))
        or len(point) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) for v in point)
    ):
        raise ValueError(f"Coordinates of {node_id!r} must be an (x, y) integer pair, got {point!r}")
    return (point[0], point[1])
