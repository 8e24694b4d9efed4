import struct

import pytest

from sinjoh_plat.map_prop_material_shapes import (
    MapPropMaterialShapes,
    MapPropMaterialShapesError,
    MapPropMaterialShapesIDs,
)


def _build(locators, ids):
    out = struct.pack("<HH", len(locators), len(ids))
    for count, index in locators:
        out += struct.pack("<HH", count, index)
    for material, shape in ids:
        out += struct.pack("<HH", material, shape)
    return out


def test_parse_locators_and_ids():
    ids = [(10, 20), (11, 21), (12, 22)]
    result = MapPropMaterialShapes.parse_bytes(_build([(2, 0), (0, 0), (1, 2)], ids))
    assert result == [
        MapPropMaterialShapes(
            ids_index=0,
            ids=[MapPropMaterialShapesIDs(10, 20), MapPropMaterialShapesIDs(11, 21)],
        ),
        None,
        MapPropMaterialShapes(ids_index=2, ids=[MapPropMaterialShapesIDs(12, 22)]),
    ]


def test_overlapping_locators_share_ids():
    ids = [(1, 2), (3, 4)]
    result = MapPropMaterialShapes.parse_bytes(_build([(2, 0), (1, 1)], ids))
    assert result[0].ids[1] == result[1].ids[0]
    assert result[1].ids_index == 1


def test_result_length_matches_locator_count():
    locators = [(0, 0)] * 5 + [(1, 0)]
    result = MapPropMaterialShapes.parse_bytes(_build(locators, [(7, 8)]))
    assert len(result) == len(locators)
    assert result[:5] == [None] * 5
    assert result[5].ids == [MapPropMaterialShapesIDs(material_id=7, shape_id=8)]


def test_empty_file():
    assert MapPropMaterialShapes.parse_bytes(_build([], [])) == []


def test_truncated_header():
    with pytest.raises(MapPropMaterialShapesError):
        MapPropMaterialShapes.parse_bytes(b"\x01\x00")


def test_truncated_ids():
    data = _build([(2, 0)], [(1, 2), (3, 4)])
    with pytest.raises(MapPropMaterialShapesError):
        MapPropMaterialShapes.parse_bytes(data[:-2])


def test_locator_out_of_range():
    with pytest.raises(MapPropMaterialShapesError):
        MapPropMaterialShapes.parse_bytes(_build([(2, 1)], [(1, 2), (3, 4)]))


def test_ids_are_immutable():
    result = MapPropMaterialShapes.parse_bytes(_build([(1, 0)], [(5, 6)]))
    with pytest.raises(AttributeError):
        result[0].ids[0].material_id = 9
    assert result[0].ids[0].material_id == 5