"""Parsers for Pokémon Platinum map matrix, map prop animation list and map prop material/shape files."""

__version__ = "0.1.0"
__all__ = ["map_matrix", "map_prop_animation_list", "map_prop_material_shapes"]