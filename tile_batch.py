# tile_batch.py - Vectorised tile conversions for arrays of points

import logging
from typing import Tuple

import numpy as np

from tile_config import MAX_TILE_INDEX

logger = logging.getLogger(__name__)


def to_tile_indices(values) -> np.ndarray:
    """Array version of mercator_tiles.to_tile_index, returning uint32 indices."""
    values = np.asarray(values, dtype=np.float64)
    nonfinite = int(np.count_nonzero(~np.isfinite(values)))
    if nonfinite:
        logger.debug("Saturating %d non-finite grid positions out of %d", nonfinite, values.size)
    cleaned = np.nan_to_num(values, nan=0.0, posinf=float(MAX_TILE_INDEX), neginf=0.0)
    return np.trunc(np.clip(cleaned, 0.0, float(MAX_TILE_INDEX))).astype(np.uint32)


def lonlat_to_tiles(lons, lats, zoom: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert arrays of lon/lat (degrees) to tile numbers at a zoom level.

    lons and lats broadcast against each other like any numpy operands. As
    with the scalar conversion nothing is validated: degenerate latitudes
    yield NaN/inf grid positions, which are saturated rather than reported.
    """
    lons = np.asarray(lons, dtype=np.float64)
    lats = np.asarray(lats, dtype=np.float64)
    n = 2.0 ** zoom
    with np.errstate(all="ignore"):
        lat_rad = np.radians(lats)
        xf = (lons + 180.0) / 360.0 * n
        yf = (1.0 - np.log(np.tan(lat_rad) + 1.0 / np.cos(lat_rad)) / np.pi) / 2.0 * n
    xf, yf = np.broadcast_arrays(xf, yf)
    return to_tile_indices(xf), to_tile_indices(yf)


def tiles_to_lonlats(xtiles, ytiles, zoom: int) -> Tuple[np.ndarray, np.ndarray]:
    """Convert arrays of tile numbers to the lon/lat of each tile's north-west corner."""
    xtiles = np.asarray(xtiles, dtype=np.float64)
    ytiles = np.asarray(ytiles, dtype=np.float64)
    n = 2.0 ** zoom
    with np.errstate(over="ignore"):
        lons = xtiles / n * 360.0 - 180.0
        lats = np.degrees(np.arctan(np.sinh(np.pi * (1.0 - 2.0 * ytiles / n))))
    lons, lats = np.broadcast_arrays(lons, lats)
    return lons, lats
