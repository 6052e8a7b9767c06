"""Load floor tables from JSON files."""

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.navigation import floor_data
from src.navigation.graph_store import GraphStore, default_store
from src.navigation.tags import TagLookup, default_tags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloorData:
    """Container for everything needed to route and draw on one floor."""

    store: GraphStore
    tags: TagLookup
    projection: Mapping[str, Any] = field(default_factory=dict)  # ProjectionSettings fields

    def __post_init__(self) -> None:
        object.__setattr__(self, "projection", MappingProxyType(dict(self.projection)))


def load_floor(path: str) -> FloorData:
    """
    Load a floor from a JSON file.

    The file holds a "graph" object (node -> [[weight, neighbor], ...]) and
    optionally "coordinates" (node -> [x, y]), "tags" (tag id -> room) and
    "projection" (ProjectionSettings fields).

    Args:
        path: Path to the JSON file

    Returns:
        FloorData with validated, read-only tables

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be parsed or the tables are invalid
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Floor data file not found: {path}")

    with open(path, "r", encoding="utf-8") as floor_file:
        try:
            raw = json.load(floor_file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse floor data file: {e}") from e

    if not isinstance(raw, dict) or not isinstance(raw.get("graph"), dict):
        raise ValueError(f"Floor data file {path} has no 'graph' object")

    for key in ("coordinates", "tags", "projection"):
        if raw.get(key) is not None and not isinstance(raw[key], dict):
            raise ValueError(f"Floor data file {path}: '{key}' must be an object")

    store = GraphStore.from_tables(raw["graph"], raw.get("coordinates") or {})
    tags = TagLookup.from_table(raw.get("tags") or {})
    projection = raw.get("projection") or {}

    unknown_rooms = [room for room in tags.rooms_by_tag.values() if room not in store]
    for room in unknown_rooms:
        logger.warning(f"Tag table references room {room!r} which is not in the graph")

    logger.info(
        f"Loaded floor: {len(store)} nodes, {len(store.coordinates)} coordinates, "
        f"{len(tags.rooms_by_tag)} tags"
    )

    return FloorData(store=store, tags=tags, projection=projection)


def load_default_floor() -> FloorData:
    """Return the built-in second floor."""
    return FloorData(
        store=default_store(),
        tags=default_tags(),
        projection=floor_data.PROJECTION,
    )
