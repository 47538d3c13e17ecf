import pytest

from tile_config import MAX_LATITUDE
from tile_pixels import lonlat_to_pixel, pixel_in_tile, pixel_to_lonlat
from tile_pyramid import tile_center


def test_origin_is_the_center_of_the_world_raster():
    assert lonlat_to_pixel(0.0, 0.0, 0) == pytest.approx((128.0, 128.0))
    assert lonlat_to_pixel(0.0, 0.0, 2) == pytest.approx((512.0, 512.0))


def test_north_west_corner_is_pixel_zero():
    px, py = lonlat_to_pixel(-180.0, MAX_LATITUDE, 5)
    assert px == pytest.approx(0.0)
    assert py == pytest.approx(0.0, abs=1e-6)


def test_custom_tile_size():
    assert lonlat_to_pixel(0.0, 0.0, 1, tile_size=512) == pytest.approx((512.0, 512.0))


@pytest.mark.parametrize(("lon", "lat", "zoom"), [(12.3, 45.4, 13), (-73.9857, 40.7484, 7), (0.0, 0.0, 0)])
def test_pixel_to_lonlat_inverts_lonlat_to_pixel(lon, lat, zoom):
    px, py = lonlat_to_pixel(lon, lat, zoom)
    assert pixel_to_lonlat(px, py, zoom) == pytest.approx((lon, lat))


def test_pixel_in_tile_at_tile_corner():
    assert pixel_in_tile(0.0, 0.0, 1) == ((1, 1), (0, 0))


@pytest.mark.parametrize(("x", "y", "zoom"), [(4376, 2932, 13), (0, 0, 0), (3, 1, 2)])
def test_pixel_in_tile_at_tile_center(x, y, zoom):
    lon, lat = tile_center(x, y, zoom)
    tile, (col, row) = pixel_in_tile(lon, lat, zoom)
    assert tile == (x, y)
    assert col in (127, 128)
    assert row in (127, 128)
