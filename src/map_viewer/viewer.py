"""Plotly-based route visualization over a floor plan."""

import base64
import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Optional

import numpy as np
import plotly.graph_objects as go

from src.map_viewer.projection import ProjectionSettings, project_route, route_segments
from src.navigation.graph_store import GraphStore

logger = logging.getLogger(__name__)

# Screen area the projection targets (pixels)
DEFAULT_CANVAS_SIZE = (2400, 1080)


@dataclass
class RoomMarker:
    """Projected room position for display."""

    room_id: str
    position: tuple[float, float]


def extract_room_markers(
    graph: GraphStore,
    settings: ProjectionSettings,
) -> list[RoomMarker]:
    """
    Project every room that has coordinates.

    Args:
        graph: Store with the coordinate table
        settings: Projection settings

    Returns:
        List of RoomMarker, sorted by room id
    """
    markers: list[RoomMarker] = []

    for room_id in graph.rooms():
        points = project_route([room_id], graph, settings)
        if len(points) == 0:
            continue
        markers.append(RoomMarker(room_id=room_id, position=(float(points[0, 0]), float(points[0, 1]))))

    return markers


def create_figure(
    route: list[str],
    graph: GraphStore,
    settings: Optional[ProjectionSettings] = None,
    title: str = "Route",
    floor_plan: Optional[str] = None,
    canvas_size: tuple[int, int] = DEFAULT_CANVAS_SIZE,
    show_rooms: bool = False,
) -> go.Figure:
    """
    Create a 2D Plotly figure with the route drawn over the floor plan.

    Args:
        route: Node ids from start to end (may be empty)
        graph: Store with the coordinate table
        settings: Projection settings (defaults used if None)
        title: Figure title
        floor_plan: Path or URL of the floor-plan image, stretched over the canvas
        canvas_size: (width, height) of the screen area in pixels
        show_rooms: Whether to mark and label every room

    Returns:
        Plotly Figure object ready for display
    """
    settings = settings or ProjectionSettings()
    width, height = canvas_size

    fig = go.Figure()

    # Rooms first (so the route is drawn on top)
    if show_rooms:
        markers = extract_room_markers(graph, settings)
        if markers:
            _add_rooms_to_figure(fig, markers)

    points = project_route(route, graph, settings)
    segments = route_segments(points)
    if segments:
        _add_route_to_figure(fig, segments, settings)
        drawn = [node_id for node_id in route if graph.coordinates_of(node_id) is not None]
        _add_endpoints_to_figure(fig, drawn, points)
    else:
        logger.info("Route has fewer than two drawable points, nothing to draw")

    if floor_plan:
        fig.add_layout_image(
            dict(
                source=_image_source(floor_plan),
                xref="x",
                yref="y",
                x=0,
                y=0,
                sizex=width,
                sizey=height,
                xanchor="left",
                yanchor="top",
                sizing="stretch",
                layer="below",
            )
        )

    # Screen coordinates: origin top-left, y grows downward
    fig.update_layout(
        title=title,
        xaxis=dict(range=[0, width], showgrid=False, zeroline=False, visible=False),
        yaxis=dict(
            range=[height, 0],
            showgrid=False,
            zeroline=False,
            visible=False,
            scaleanchor="x",
        ),
        showlegend=True,
        legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01),
        margin=dict(l=0, r=0, t=60, b=0),
        plot_bgcolor="white",
    )

    return fig


def _add_route_to_figure(
    fig: go.Figure,
    segments: list[tuple[tuple[float, float], tuple[float, float]]],
    settings: ProjectionSettings,
) -> None:
    """Add the route as line segments."""
    # None separators keep each segment a separate straight line
    x: list[float | None] = []
    y: list[float | None] = []

    for start, end in segments:
        x.extend([start[0], end[0], None])
        y.extend([start[1], end[1], None])

    fig.add_trace(
        go.Scatter(
            x=x,
            y=y,
            mode="lines",
            line=dict(color=settings.color, width=settings.stroke_width),
            hoverinfo="skip",
            name="Route",
        )
    )


def _add_endpoints_to_figure(fig: go.Figure, drawn: list[str], points: np.ndarray) -> None:
    """Mark the first and last drawn waypoints."""
    fig.add_trace(
        go.Scatter(
            x=[points[0, 0], points[-1, 0]],
            y=[points[0, 1], points[-1, 1]],
            mode="markers+text",
            marker=dict(size=14, color=["rgb(50, 205, 50)", "rgb(65, 105, 225)"]),
            text=[drawn[0], drawn[-1]],
            textposition="top center",
            textfont=dict(size=14, color="black"),
            hovertext=[f"<b>Start</b><br>{drawn[0]}", f"<b>Destination</b><br>{drawn[-1]}"],
            hoverinfo="text",
            name="Start / Destination",
        )
    )


def _add_rooms_to_figure(fig: go.Figure, markers: list[RoomMarker]) -> None:
    """Add room markers with labels."""
    fig.add_trace(
        go.Scatter(
            x=[m.position[0] for m in markers],
            y=[m.position[1] for m in markers],
            mode="markers+text",
            marker=dict(size=6, color="rgb(150, 150, 150)", opacity=0.9),
            text=[m.room_id for m in markers],
            textposition="bottom center",
            textfont=dict(size=10),
            hovertext=[
                f"<b>{m.room_id}</b><br>Position: ({m.position[0]:.1f}, {m.position[1]:.1f})"
                for m in markers
            ],
            hoverinfo="text",
            name="Rooms",
        )
    )


def _image_source(floor_plan: str) -> str:
    """Inline local images as a data URI; pass URLs through."""
    if not os.path.exists(floor_plan):
        return floor_plan

    mime_type = mimetypes.guess_type(floor_plan)[0] or "image/png"
    with open(floor_plan, "rb") as image_file:
        encoded = base64.b64encode(image_file.read()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def show_figure(fig: go.Figure) -> None:
    """Display figure in browser."""
    fig.show()


def export_html(fig: go.Figure, output_path: str) -> None:
    """Export figure as standalone HTML file."""
    fig.write_html(output_path, include_plotlyjs=True, full_html=True)


def figure_to_html(fig: go.Figure) -> str:
    """Render figure as a standalone HTML document string."""
    return fig.to_html(include_plotlyjs="cdn", full_html=True)
