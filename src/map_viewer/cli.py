"""Command-line interface for the indoor route viewer."""

import argparse
import logging
import sys

from src.logging_config import setup_logging
from src.map_viewer.projection import ProjectionSettings
from src.map_viewer.viewer import create_figure, export_html, show_figure
from src.navigation.loader import load_default_floor, load_floor
from src.navigation.router import ROUTING_MODES, route_distance


def main() -> None:
    """Main entry point for route viewer CLI."""
    parser = argparse.ArgumentParser(
        description="Indoor Route Viewer - shortest path between rooms drawn over the floor plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Route from room 207 to room 215, open in browser
  python -m src.map_viewer --from 207 --to 215

  # Start from a scanned NFC tag instead of a room number
  python -m src.map_viewer --tag 297851516128 --to 223

  # Draw over the floor plan and label all rooms
  python -m src.map_viewer --from 207 --to 223 --floor-plan plan.png --show-rooms

  # Shortest by stored distance instead of fewest hops, export to HTML
  python -m src.map_viewer --from 207 --to 215 --weighted --export route.html
        """,
    )

    start_group = parser.add_mutually_exclusive_group(required=True)
    start_group.add_argument(
        "--from",
        dest="start",
        type=str,
        metavar="ROOM",
        help="Start room id",
    )
    start_group.add_argument(
        "--tag",
        type=str,
        metavar="TAG_ID",
        help="NFC tag id of the start room",
    )
    parser.add_argument(
        "--to",
        dest="end",
        type=str,
        required=True,
        metavar="ROOM",
        help="Destination room id",
    )
    parser.add_argument(
        "--data",
        type=str,
        metavar="FILE",
        help="Floor data JSON file (default: built-in second floor)",
    )
    parser.add_argument(
        "--floor-plan",
        type=str,
        metavar="IMAGE",
        help="Floor-plan image (path or URL) to draw the route over",
    )
    parser.add_argument(
        "--weighted",
        action="store_true",
        help="Minimise total edge distance instead of the number of hops",
    )
    parser.add_argument(
        "--show-rooms",
        action="store_true",
        help="Mark and label every room",
    )
    parser.add_argument(
        "--export",
        type=str,
        metavar="FILE",
        help="Export to HTML file instead of opening browser",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Custom title for the visualization",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Setup logging
    setup_logging()
    if args.verbose:
        logging.getLogger("src.navigation").setLevel(logging.DEBUG)
        logging.getLogger("src.map_viewer").setLevel(logging.DEBUG)

    logger = logging.getLogger(__name__)

    # Load floor
    try:
        if args.data:
            logger.info(f"Loading floor data from {args.data}")
            floor = load_floor(args.data)
        else:
            floor = load_default_floor()
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Resolve start room
    start = args.start
    if args.tag is not None:
        start = floor.tags.on_tag_read(args.tag)
        if start is None:
            print(f"Error: unrecognized tag {args.tag}", file=sys.stderr)
            sys.exit(1)

    # Search
    mode = "distance" if args.weighted else "hops"
    route = ROUTING_MODES[mode](floor.store, start, args.end)
    if route is None:
        print(f"No route from {start} to {args.end}", file=sys.stderr)
        sys.exit(1)

    distance = route_distance(floor.store, route)
    logger.info(f"Route {start} -> {args.end}: {len(route) - 1} hops, distance {distance:.1f}")
    print(" -> ".join(route))

    # Create figure
    settings = ProjectionSettings.from_dict(floor.projection)
    title = args.title or f"Route {start} → {args.end}"
    fig = create_figure(
        route,
        floor.store,
        settings=settings,
        title=title,
        floor_plan=args.floor_plan,
        show_rooms=args.show_rooms,
    )

    # Display or export
    if args.export:
        logger.info(f"Exporting to {args.export}")
        export_html(fig, args.export)
        print(f"Exported to {args.export}")
    else:
        logger.info("Opening in browser")
        show_figure(fig)


if __name__ == "__main__":
    main()
