"""Map matrix files, as found in the ``map_matrix.narc`` archive."""

from __future__ import annotations

import struct
from dataclasses import dataclass


class MapMatrixError(Exception):
    """Base class for map matrix errors."""


class MapMatrixReadError(MapMatrixError):
    """The buffer ended before the map matrix was fully read."""

    def __init__(self) -> None:
        super().__init__("an error has occurred while reading the buffer")


class ModelNamePrefixConversionError(MapMatrixError):
    """The model name prefix is not valid UTF-8."""

    def __init__(self) -> None:
        super().__init__("unable to convert the model name prefix into a string")


class MapIndexTooBigError(MapMatrixError):
    """A map index is greater than or equal to the number of maps in the matrix."""

    def __init__(self, index: int, map_count: int) -> None:
        super().__init__(
            "map index is greater or equal than map count "
            f"(map index is {index}, map count is {map_count})"
        )
        self.index = index
        self.map_count = map_count


class _Reader:
    """Sequential little-endian reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise EOFError(
                f"needed {size} bytes at offset {self._pos}, "
                f"{len(self._data) - self._pos} available"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def u8(self) -> int:
        return self.take(1)[0]

    def u8_list(self, count: int) -> list[int]:
        return list(self.take(count))

    def u16_list(self, count: int) -> list[int]:
        return list(struct.unpack(f"<{count}H", self.take(2 * count)))


@dataclass
class MapMatrix:
    """A map matrix: a grid of maps with their headers, altitudes and land data.

    All grids are stored in row-major order.
    """

    height: int
    width: int
    model_name_prefix: str
    map_header_ids: list[int] | None
    altitudes: list[int] | None
    land_data_ids: list[int]

    @classmethod
    def parse_bytes(cls, data: bytes) -> MapMatrix:
        """Parse a map matrix from its binary form."""
        reader = _Reader(data)
        try:
            height = reader.u8()
            width = reader.u8()
            matrix_size = height * width

            has_map_header_ids = reader.u8() != 0
            has_altitudes = reader.u8() != 0

            prefix_length = reader.u8()
            raw_prefix = reader.take(prefix_length)
            try:
                model_name_prefix = raw_prefix.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ModelNamePrefixConversionError() from exc

            map_header_ids = reader.u16_list(matrix_size) if has_map_header_ids else None
            altitudes = reader.u8_list(matrix_size) if has_altitudes else None
            land_data_ids = reader.u16_list(matrix_size)
        except EOFError as exc:
            raise MapMatrixReadError() from exc

        return cls(
            height=height,
            width=width,
            model_name_prefix=model_name_prefix,
            map_header_ids=map_header_ids,
            altitudes=altitudes,
            land_data_ids=land_data_ids,
        )

    def map_index_to_coords(self, index: int) -> tuple[int, int]:
        """Turn a map index into ``(x, y)`` coordinates within the matrix."""
        if index < 0:
            raise ValueError(f"map index must not be negative, got {index}")
        map_count = self.width * self.height
        if index >= map_count:
            raise MapIndexTooBigError(index, map_count)
        y, x = divmod(index, self.width)
        return x, y