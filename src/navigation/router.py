"""Shortest-path search over the indoor navigation graph."""

import heapq
import itertools
import logging
from collections import deque
from typing import Optional

from src.navigation.graph_store import GraphStore

logger = logging.getLogger(__name__)


def find_path(graph: GraphStore, start: str, end: str) -> Optional[list[str]]:
    """
    Find a route with the fewest edges using breadth-first search.

    Every edge counts as one hop; stored weights are ignored. Neighbors are
    expanded in stored order, so among equally short routes the first one
    discovered wins and repeated queries return the same route.

    Args:
        graph: Navigation graph store
        start: Node id of the current location
        end: Node id of the destination

    Returns:
        Node ids from start to end inclusive, or None if end is unreachable.
        Unknown nodes are treated as having no neighbors.

    Example:
        >>> find_path(store, "207", "207")
        ['207']
    """
    queue: deque[str] = deque([start])
    visited: set[str] = {start}
    predecessors: dict[str, Optional[str]] = {start: None}

    while queue:
        current = queue.popleft()

        if current == end:
            return reconstruct_path(predecessors, end)

        for _, neighbor_id in graph.neighbors(current):
            if neighbor_id in visited:
                continue
            visited.add(neighbor_id)
            predecessors[neighbor_id] = current
            queue.append(neighbor_id)

    logger.debug(f"No route from {start!r} to {end!r} ({len(visited)} nodes explored)")
    return None


def find_weighted_path(graph: GraphStore, start: str, end: str) -> Optional[list[str]]:
    """
    Find the route with the smallest total edge weight (Dijkstra).

    Same contract as find_path. Ties between equal-cost routes go to the one
    discovered first in adjacency order.
    """
    counter = itertools.count()
    frontier: list[tuple[float, int, str]] = [(0.0, next(counter), start)]
    distances: dict[str, float] = {start: 0.0}
    predecessors: dict[str, Optional[str]] = {start: None}
    settled: set[str] = set()

    while frontier:
        distance, _, current = heapq.heappop(frontier)
        if current in settled:
            continue
        settled.add(current)

        if current == end:
            return reconstruct_path(predecessors, end)

        for weight, neighbor_id in graph.neighbors(current):
            if neighbor_id in settled:
                continue
            candidate = distance + weight
            if neighbor_id not in distances or candidate < distances[neighbor_id]:
                distances[neighbor_id] = candidate
                predecessors[neighbor_id] = current
                heapq.heappush(frontier, (candidate, next(counter), neighbor_id))

    logger.debug(f"No weighted route from {start!r} to {end!r}")
    return None


def reconstruct_path(predecessors: dict[str, Optional[str]], end: str) -> list[str]:
    """Walk the predecessor chain back from end and return it start-first."""
    path: list[str] = []
    current: Optional[str] = end

    while current is not None:
        path.append(current)
        current = predecessors[current]

    path.reverse()
    return path


def route_distance(graph: GraphStore, route: list[str]) -> float:
    """
    Sum the stored weights along a route.

    Uses the lightest matching edge for each consecutive pair, the one a
    weighted search would take.

    Raises:
        ValueError: If two consecutive nodes are not connected by an edge
    """
    total = 0.0
    for from_id, to_id in zip(route, route[1:]):
        weight = min((w for w, n in graph.neighbors(from_id) if n == to_id), default=None)
        if weight is None:
            raise ValueError(f"No edge from {from_id!r} to {to_id!r}")
        total += weight
    return total


# Routing mode name -> search function
ROUTING_MODES = {
    "hops": find_path,
    "distance": find_weighted_path,
}
