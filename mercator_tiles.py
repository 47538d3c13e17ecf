# mercator_tiles.py - Web Mercator (slippy map) tile conversions
#
# See https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames
#
# None of these functions check their input. Out-of-range coordinates, zoom
# levels or tile indices still produce a (meaningless) numeric result.

import math
from typing import Tuple

from tile_config import MAX_TILE_INDEX

Tile = Tuple[int, int]


def to_tile_index(value: float) -> int:
    """
    Convert a fractional grid position to a tile index.

    Truncates toward zero and saturates to [0, MAX_TILE_INDEX], the same as an
    unsigned 32-bit cast: NaN and anything below zero give 0, anything above
    the ceiling (including +inf) gives MAX_TILE_INDEX.
    """
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= MAX_TILE_INDEX:
        return MAX_TILE_INDEX
    return int(value)


def _log(value: float) -> float:
    # math.log raises where IEEE log returns -inf / NaN
    if value > 0.0:
        return math.log(value)
    if value == 0.0:
        return -math.inf
    return math.nan


def _tan_plus_sec(lat_rad: float) -> float:
    if not math.isfinite(lat_rad):
        return math.nan
    return math.tan(lat_rad) + 1.0 / math.cos(lat_rad)


def _gudermannian(value: float) -> float:
    try:
        return math.atan(math.sinh(value))
    except OverflowError:
        return math.copysign(math.pi / 2.0, value)


def lonlat_to_fraction(lon_deg: float, lat_deg: float) -> Tuple[float, float]:
    """Project lon/lat onto the unit square, (0, 0) being the north-west corner of the world."""
    lat_rad = math.radians(lat_deg)
    fx = (lon_deg + 180.0) / 360.0
    fy = (1.0 - _log(_tan_plus_sec(lat_rad)) / math.pi) / 2.0
    return (fx, fy)


def fraction_to_lonlat(fx: float, fy: float) -> Tuple[float, float]:
    """Inverse of lonlat_to_fraction"""
    lon_deg = fx * 360.0 - 180.0
    lat_deg = math.degrees(_gudermannian(math.pi * (1.0 - 2.0 * fy)))
    return (lon_deg, lat_deg)


def lonlat_to_tile(lon_deg: float, lat_deg: float, zoom: int) -> Tile:
    """
    Convert lon/lat coordinates to the Web Mercator tile containing them.

    Args:
        lon_deg: longitude (W-E) in degrees.
        lat_deg: latitude (N-S) in degrees.
        zoom: zoom level, the grid has 2**zoom x 2**zoom tiles.

    Returns:
        (xtile, ytile). Grid positions are converted with to_tile_index, so
        degenerate input (e.g. latitude +/-90) never raises.
    """
    n = 2.0 ** zoom
    fx, fy = lonlat_to_fraction(lon_deg, lat_deg)
    xtile = to_tile_index(fx * n)
    ytile = to_tile_index(fy * n)
    return (xtile, ytile)


def tile_to_lonlat(xtile: int, ytile: int, zoom: int) -> Tuple[float, float]:
    """Convert tile numbers to the lon/lat of the tile's top-left (north-west) corner"""
    n = 2.0 ** zoom
    return fraction_to_lonlat(xtile / n, ytile / n)


def zoom_in(x: int, y: int) -> Tuple[Tile, Tile, Tile, Tile]:
    """
    Split a tile into the 4 tiles covering it at the next zoom level.

    +--------+--------+
    | x1, y1 | x2, y1 |
    +--------+--------+
    | x1, y2 | x2, y2 |
    +--------+--------+

    Returns (north-west, north-east, south-west, south-east).
    """
    x1, y1 = 2 * x, 2 * y
    x2, y2 = x1 + 1, y1 + 1
    return ((x1, y1), (x2, y1), (x1, y2), (x2, y2))


def zoom_out(x: int, y: int) -> Tile:
    """
    Merge a tile into its parent at the previous zoom level.

    Also computed at zoom 0, where there is no parent: (0, 0) maps to itself.
    """
    return (x // 2, y // 2)
