"""Map NFC tag reads to room ids."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from src.navigation import floor_data

logger = logging.getLogger(__name__)


def tag_id_from_bytes(raw_id: Iterable[int]) -> str:
    """
    Convert raw tag id bytes to the lookup key used by the tag table.

    Each byte is written as its unsigned decimal value and the values are
    concatenated without separators. Signed bytes are accepted.

    Example:
        >>> tag_id_from_bytes(bytes([29, 78, 51, 51, 61, 28]))
        '297851516128'
        >>> tag_id_from_bytes([-1, 0])
        '2550'
    """
    return "".join(str(byte & 0xFF) for byte in raw_id)


@dataclass(frozen=True)
class TagLookup:
    """Read-only tag id -> room id table."""

    rooms_by_tag: Mapping[str, str]

    @classmethod
    def from_table(cls, table: Mapping[str, str]) -> "TagLookup":
        return cls(MappingProxyType({str(k): str(v) for k, v in table.items()}))

    def on_tag_read(self, tag_id: str) -> Optional[str]:
        """
        Resolve a tag read to the room it is mounted in.

        Returns:
            The room id, or None if the tag is not registered
        """
        room_id = self.rooms_by_tag.get(tag_id)
        if room_id is None:
            logger.info(f"Unrecognized tag: {tag_id}")
        else:
            logger.debug(f"Tag {tag_id} -> room {room_id}")
        return room_id


def default_tags() -> TagLookup:
    return TagLookup.from_table(floor_data.TAG_TO_ROOM)
