"""Indoor Route Viewer - draws computed routes over the floor plan."""

from src.map_viewer.projection import ProjectionSettings, project_route, route_segments
from src.map_viewer.viewer import create_figure, RoomMarker

__all__ = [
    "ProjectionSettings",
    "project_route",
    "route_segments",
    "create_figure",
    "RoomMarker",
]
