# tile_pyramid.py - Navigating the tile pyramid across zoom levels

from dataclasses import dataclass
from typing import Iterator, Tuple

from mercator_tiles import Tile, fraction_to_lonlat, lonlat_to_tile, tile_to_lonlat, zoom_out
from tile_config import MAX_LATITUDE


@dataclass(frozen=True)
class TileBounds:
    """Geographic extent of a tile, in degrees."""

    west: float
    south: float
    east: float
    north: float


def parent_tile(x: int, y: int) -> Tuple[Tile, Tuple[int, int]]:
    """
    Calculates the parent tile coordinates and the quadrant of the child.
    Returns ((parent_x, parent_y), (quadrant_x, quadrant_y)).
    Quadrant is (0,0) for top-left, (1,0) for top-right, etc.
    """
    return (zoom_out(x, y), (x % 2, y % 2))


def ancestor(x: int, y: int, zoom: int, target_zoom: int) -> Tile:
    """Return the tile at target_zoom that contains tile (x, y) at zoom."""
    if target_zoom < 0 or target_zoom > zoom:
        raise ValueError(f"Target zoom {target_zoom} is not in [0, {zoom}]")
    shift = zoom - target_zoom
    return (x >> shift, y >> shift)


def descendants(x: int, y: int, zoom: int, target_zoom: int) -> Iterator[Tile]:
    """
    Lazily yield every tile at target_zoom covered by tile (x, y) at zoom.

    Tiles come row by row, north to south and west to east within a row.
    A target_zoom equal to zoom yields the tile itself.
    """
    if target_zoom < zoom:
        raise ValueError(f"Target zoom {target_zoom} is below the tile's zoom {zoom}")
    side = 1 << (target_zoom - zoom)
    x0, y0 = x * side, y * side
    for row in range(y0, y0 + side):
        for col in range(x0, x0 + side):
            yield (col, row)


def tile_bounds(x: int, y: int, zoom: int) -> TileBounds:
    west, north = tile_to_lonlat(x, y, zoom)
    east, south = tile_to_lonlat(x + 1, y + 1, zoom)
    return TileBounds(west=west, south=south, east=east, north=north)


def tile_center(x: int, y: int, zoom: int) -> Tuple[float, float]:
    """Lon/lat of the tile's center in projected space (not the midpoint of its latitudes)."""
    n = 2.0 ** zoom
    return fraction_to_lonlat((x + 0.5) / n, (y + 0.5) / n)


def tiles_in_bbox(west: float, south: float, east: float, north: float, zoom: int) -> Iterator[Tile]:
    """
    Lazily yield the tiles at zoom that cover a lon/lat bounding box.

    Corners on or beyond the edge of the world are kept inside the grid, so
    a box reaching lon 180 or lat -90 does not yield tiles past the last
    column or row.
    """
    if west > east or south > north:
        raise ValueError(f"Invalid bounding box: ({west}, {south}, {east}, {north})")
    last = (1 << zoom) - 1
    # Beyond MAX_LATITUDE the projection diverges and rows would saturate to 0
    north = min(north, MAX_LATITUDE)
    south = max(south, -MAX_LATITUDE)
    x0, y0 = lonlat_to_tile(west, north, zoom)
    x1, y1 = lonlat_to_tile(east, south, zoom)
    x0, y0 = min(x0, last), min(y0, last)
    x1, y1 = min(x1, last), min(y1, last)
    for row in range(y0, y1 + 1):
        for col in range(x0, x1 + 1):
            yield (col, row)
