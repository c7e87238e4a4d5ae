from .tile import Tile, build_tile
from .terrain_field import TerrainField, generate_height_grids
from .driver import TerrainDriver

__all__ = ["Tile", "build_tile", "TerrainField", "generate_height_grids", "TerrainDriver"]
