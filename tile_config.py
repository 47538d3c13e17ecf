# tile_config.py - Constants shared by the tile modules

# Edge length of a raster tile in pixels
TILE_SIZE = 256

# Latitude of the northern edge of tile (0, 0), i.e. the limit of the projection
MAX_LATITUDE = 85.0511287798066

# Tile indices are unsigned 32-bit values; conversions saturate at this ceiling
MAX_TILE_INDEX = 2 ** 32 - 1
