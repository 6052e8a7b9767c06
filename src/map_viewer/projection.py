"""Coordinate transforms from floor-plan pixels to screen space."""

import logging
from dataclasses import dataclass, fields
from typing import Any

import numpy as np

from src.navigation.graph_store import GraphStore

logger = logging.getLogger(__name__)

Segment = tuple[tuple[float, float], tuple[float, float]]


@dataclass(frozen=True)
class ProjectionSettings:
    """Offset and scale that place floor-plan coordinates on screen, plus line style."""

    offset_x: float = 720.0
    offset_y: float = 155.0
    scale_x: float = 0.73
    scale_y: float = 0.72
    color: str = "red"
    stroke_width: float = 5.0

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> "ProjectionSettings":
        """Build settings from a config dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning(f"Ignoring unknown projection settings: {', '.join(unknown)}")
        return cls(**{k: v for k, v in values.items() if k in known})


def project_route(
    route: list[str],
    graph: GraphStore,
    settings: ProjectionSettings,
) -> np.ndarray:
    """
    Convert a route to screen-space points.

    Each waypoint with a coordinate entry becomes
    (offset_x + scale_x * x, offset_y + scale_y * y). Waypoints without
    coordinates are skipped, so the drawn line jumps over them.

    Args:
        route: Node ids from start to end
        graph: Store holding the coordinate table
        settings: Projection offsets and scales

    Returns:
        Nx2 numpy array of (x, y) screen positions, in route order
    """
    coords: list[tuple[int, int]] = []
    for node_id in route:
        point = graph.coordinates_of(node_id)
        if point is None:
            logger.debug(f"No coordinates for {node_id}, skipping")
            continue
        coords.append(point)

    if not coords:
        return np.empty((0, 2), dtype=float)

    offset = np.array([settings.offset_x, settings.offset_y], dtype=float)
    scale = np.array([settings.scale_x, settings.scale_y], dtype=float)
    return offset + scale * np.asarray(coords, dtype=float)


def route_segments(points: np.ndarray) -> list[Segment]:
    """
    Connect consecutive points into line segments.

    Returns:
        List of (start, end) tuples; empty if fewer than two points
    """
    segments: list[Segment] = []

    for start, end in zip(points[:-1], points[1:]):
        segments.append(((float(start[0]), float(start[1])), (float(end[0]), float(end[1]))))

    return segments
