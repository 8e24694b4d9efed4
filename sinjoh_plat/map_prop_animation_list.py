"""Map prop animation list files, as found in the ``bm_anime_list.narc`` archive."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

FLAG_DEFERRED_LOADING_MASK = 0x01
FLAG_DEFERRED_ADD_TO_RENDER_OBJECT_MASK = 0x02
MAX_MAP_PROP_ANIMATIONS = 4
INVALID_MAP_PROP_ANIMATION_ID = 0xFFFFFFFF


class MapPropAnimationListError(Exception):
    """Base class for map prop animation list errors."""


class MapPropAnimationListReadError(MapPropAnimationListError):
    """The buffer ended before the animation list was fully read."""

    def __init__(self) -> None:
        super().__init__("an error has occurred while reading the buffer")


class MapPropAnimationListSeekError(MapPropAnimationListError):
    """Seeking in the buffer moved to an invalid position."""

    def __init__(self) -> None:
        super().__init__("a seek error has occurred while seeking in the buffer")


class _Reader:
    """Sequential little-endian reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def skip(self, count: int) -> None:
        target = self._pos + count
        if target < 0:
            raise MapPropAnimationListSeekError()
        # Skipping past the end is allowed; the next read will fail.
        self._pos = target

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(
                f"needed {size} bytes at offset {self._pos}, "
                f"{max(len(self._data) - self._pos, 0)} available"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u32(self) -> int:
        return struct.unpack("<I", self.take(4))[0]


@dataclass
class MapPropAnimationList:
    """Animations attached to a map prop model, with their loading flags."""

    map_prop_animation_ids: list[int] = field(default_factory=list)
    deferred_loading: bool = False
    deferred_add_to_render_object: bool = False
    is_bicycle_slope: bool = False

    @classmethod
    def parse_bytes(cls, data: bytes) -> MapPropAnimationList:
        """Parse an animation list from its binary form."""
        reader = _Reader(data)
        try:
            # Skip the "has animations" byte.
            reader.skip(1)
            raw_flags = reader.u8()
            is_bicycle_slope = reader.u8() != 0
            # Skip the padding byte.
            reader.skip(1)

            animation_ids = []
            for _ in range(MAX_MAP_PROP_ANIMATIONS):
                animation_id = reader.u32()
                if animation_id == INVALID_MAP_PROP_ANIMATION_ID:
                    break
                animation_ids.append(animation_id)
        except EOFError as exc:
            raise MapPropAnimationListReadError() from exc

        return cls(
            map_prop_animation_ids=animation_ids,
            deferred_loading=bool(raw_flags & FLAG_DEFERRED_LOADING_MASK),
            deferred_add_to_render_object=bool(
                raw_flags & FLAG_DEFERRED_ADD_TO_RENDER_OBJECT_MASK
            ),
            is_bicycle_slope=is_bicycle_slope,
        )