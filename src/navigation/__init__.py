"""Indoor navigation core - graph store, tag lookup and route search."""

from src.navigation.graph_store import GraphStore, default_store, is_room
from src.navigation.loader import FloorData, load_default_floor, load_floor
from src.navigation.router import ROUTING_MODES, find_path, find_weighted_path, route_distance
from src.navigation.tags import TagLookup, tag_id_from_bytes

__all__ = [
    "GraphStore",
    "default_store",
    "is_room",
    "FloorData",
    "load_default_floor",
    "load_floor",
    "ROUTING_MODES",
    "find_path",
    "find_weighted_path",
    "route_distance",
    "TagLookup",
    "tag_id_from_bytes",
]
