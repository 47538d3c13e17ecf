# tile_ground.py - Ground distances on the WGS-84 ellipsoid

import math
from typing import Tuple

from geopy.distance import geodesic

from tile_pyramid import tile_bounds, tile_center


def _parallel_length(lat: float, west: float, east: float) -> float:
    # A geodesic leaves the parallel, so walk it in steps of at most one degree
    steps = max(1, math.ceil(abs(east - west)))
    step = (east - west) / steps
    return sum(
        geodesic((lat, west + i * step), (lat, west + (i + 1) * step)).meters
        for i in range(steps)
    )


def tile_ground_size(x: int, y: int, zoom: int) -> Tuple[float, float]:
    """
    Approximate ground size of a tile in meters.

    Width is measured along the parallel through the tile's center, height
    along its western meridian.
    """
    bounds = tile_bounds(x, y, zoom)
    _, center_lat = tile_center(x, y, zoom)
    width_m = _parallel_length(center_lat, bounds.west, bounds.east)
    height_m = geodesic((bounds.north, bounds.west), (bounds.south, bounds.west)).meters
    return width_m, height_m
