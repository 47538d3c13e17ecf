# tile_pixels.py - Pixel coordinates on the Web Mercator tile raster

from typing import Tuple

from mercator_tiles import Tile, fraction_to_lonlat, lonlat_to_fraction, lonlat_to_tile, to_tile_index
from tile_config import TILE_SIZE


def lonlat_to_pixel(lon: float, lat: float, zoom: int, tile_size: int = TILE_SIZE) -> Tuple[float, float]:
    """
    Convert latitude and longitude to global pixel coordinates at a zoom level.
    The raster is tile_size * 2**zoom pixels wide and high, origin at the north-west corner.
    """
    world_size = tile_size * 2.0 ** zoom
    fx, fy = lonlat_to_fraction(lon, lat)
    return fx * world_size, fy * world_size


def pixel_to_lonlat(px: float, py: float, zoom: int, tile_size: int = TILE_SIZE) -> Tuple[float, float]:
    """
    Convert global pixel coordinates back to longitude and latitude.
    """
    world_size = tile_size * 2.0 ** zoom
    return fraction_to_lonlat(px / world_size, py / world_size)


def pixel_in_tile(lon: float, lat: float, zoom: int, tile_size: int = TILE_SIZE) -> Tuple[Tile, Tuple[int, int]]:
    """
    Locate lon/lat on the tile raster.

    Returns ((xtile, ytile), (col, row)) where col/row is the pixel offset
    inside the tile, kept within [0, tile_size - 1].
    """
    xtile, ytile = lonlat_to_tile(lon, lat, zoom)
    px, py = lonlat_to_pixel(lon, lat, zoom, tile_size)

    # Float rounding can put a point on a tile edge one pixel outside its tile
    col = min(max(to_tile_index(px) - xtile * tile_size, 0), tile_size - 1)
    row = min(max(to_tile_index(py) - ytile * tile_size, 0), tile_size - 1)
    return (xtile, ytile), (col, row)
