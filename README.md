# sinjoh_plat

Parsers and data structures for three map-related file formats of Pokémon
Platinum. The library uses only the standard library.

## Supported formats

| Module                                 | Files                           | Entry point                         |
|----------------------------------------|---------------------------------|-------------------------------------|
| `sinjoh_plat.map_matrix`               | members of `map_matrix.narc`    | `MapMatrix.parse_bytes`             |
| `sinjoh_plat.map_prop_animation_list`  | members of `bm_anime_list.narc` | `MapPropAnimationList.parse_bytes`  |
| `sinjoh_plat.map_prop_material_shapes` | `build_model_matshp.dat`        | `MapPropMaterialShapes.parse_bytes` |

Each `parse_bytes` class method takes a bytes-like object that holds the raw
file contents. All values are read as little-endian.

## Installation

```
pip install .
```

## Usage

### Map matrices

```python
from sinjoh_plat.map_matrix import MapMatrix, MapIndexTooBigError

matrix = MapMatrix.parse_bytes(raw)
print(matrix.width, matrix.height, matrix.model_name_prefix)
print(matrix.land_data_ids)   # row-major list of land_data.narc indexes
print(matrix.map_header_ids)  # None when the section is absent
print(matrix.altitudes)       # None when the section is absent

x, y = matrix.map_index_to_coords(5)
```

`map_index_to_coords` returns `(x, y)` for a row-major index. It raises
`MapIndexTooBigError` (with `index` and `map_count` attributes) when the index
is not below `width * height`, and `ValueError` when the index is negative.

### Map prop animation lists

```python
from sinjoh_plat.map_prop_animation_list import MapPropAnimationList

anim = MapPropAnimationList.parse_bytes(raw)
print(anim.map_prop_animation_ids)  # up to 4 bm_anime.narc indexes
print(anim.deferred_loading, anim.deferred_add_to_render_object)
print(anim.is_bicycle_slope)
```

The animation ID list stops at the first `0xFFFFFFFF` entry
(`INVALID_MAP_PROP_ANIMATION_ID`) or after `MAX_MAP_PROP_ANIMATIONS` (4)
entries. The flag masks are exposed as `FLAG_DEFERRED_LOADING_MASK` and
`FLAG_DEFERRED_ADD_TO_RENDER_OBJECT_MASK`.

### Map prop materials and shapes

```python
from sinjoh_plat.map_prop_material_shapes import MapPropMaterialShapes

entries = MapPropMaterialShapes.parse_bytes(raw)
for prop_id, entry in enumerate(entries):
    if entry is None:
        continue
    for ids in entry.ids:
        print(prop_id, ids.material_id, ids.shape_id)
```

The list has one element per map prop. An element is `None` when that prop
has no material or shape IDs. Each entry keeps `ids_index`, the position of
its first IDs in the file's ID list, and `ids`, a list of
`MapPropMaterialShapesIDs`. The module also defines
`MapPropMaterialShapesLocator`, the `(ids_count, ids_index)` pair read for
each prop.

## Errors

- `sinjoh_plat.map_matrix`: the base is `MapMatrixError`. Truncated input
  raises `MapMatrixReadError`; a model name prefix that is not valid UTF-8
  raises `ModelNamePrefixConversionError`; an out-of-range map index raises
  `MapIndexTooBigError`.
- `sinjoh_plat.map_prop_animation_list`: the base is
  `MapPropAnimationListError`. Truncated input raises
  `MapPropAnimationListReadError`. `MapPropAnimationListSeekError` is
  defined for seeks to a negative position.
- `sinjoh_plat.map_prop_material_shapes`: `MapPropMaterialShapesError` is
  raised both for truncated input and for a locator whose range lies outside
  the ID list.

## Scope

The package parses file contents that are already in memory. It does not
open or unpack NARC archives or ROM images, and it does not write these
formats back out.

## Running the tests

```
pip install .[test]
pytest
```