"""Map prop material and shape lists, as found in ``build_model_matshp.dat``."""

from __future__ import annotations

import struct
from dataclasses import dataclass


class MapPropMaterialShapesError(Exception):
    """The material and shapes data could not be read."""


@dataclass(frozen=True)
class MapPropMaterialShapesLocator:
    """Where a map prop's IDs are found in the file's ID list."""

    ids_count: int
    ids_index: int


@dataclass(frozen=True)
class MapPropMaterialShapesIDs:
    """A material ID and the shape (mesh) ID it applies to."""

    material_id: int
    shape_id: int


class _Reader:
    """Sequential little-endian reader over a byte buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def u16_pairs(self, count: int) -> list[tuple[int, int]]:
        size = 4 * count
        end = self._pos + size
        if end > len(self._data):
            raise MapPropMaterialShapesError(
                "an error has occurred while reading the buffer "
                f"(needed {size} bytes at offset {self._pos}, "
                f"{len(self._data) - self._pos} available)"
            )
        values = struct.unpack(f"<{2 * count}H", self._data[self._pos:end])
        self._pos = end
        return list(zip(values[0::2], values[1::2]))


@dataclass
class MapPropMaterialShapes:
    """The material and shape IDs associated with one map prop."""

    ids_index: int
    ids: list[MapPropMaterialShapesIDs]

    @classmethod
    def parse_bytes(cls, data: bytes) -> list[MapPropMaterialShapes | None]:
        """Parse every entry; props without any IDs are given as ``None``."""
        reader = _Reader(data)
        ((locators_count, ids_count),) = reader.u16_pairs(1)

        locators = [
            MapPropMaterialShapesLocator(ids_count=count, ids_index=index)
            for count, index in reader.u16_pairs(locators_count)
        ]
        ids = [
            MapPropMaterialShapesIDs(material_id=material, shape_id=shape)
            for material, shape in reader.u16_pairs(ids_count)
        ]

        return [cls._from_locator(locator, ids) for locator in locators]

    @classmethod
    def _from_locator(
        cls, locator: MapPropMaterialShapesLocator, ids: list[MapPropMaterialShapesIDs]
    ) -> MapPropMaterialShapes | None:
        if locator.ids_count == 0:
            return None
        end = locator.ids_index + locator.ids_count
        if end > len(ids):
            raise MapPropMaterialShapesError(
                f"locator range {locator.ids_index}..{end} is outside "
                f"the ID list of length {len(ids)}"
            )
        return cls(ids_index=locator.ids_index, ids=ids[locator.ids_index:end])