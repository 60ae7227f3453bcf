"""Tests for texture lookups and image texture loading."""

import math

import numpy as np
import pytest
from PIL import Image

from core.uv import UV
from core.vector import Vector3
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, ImageTexture, SolidTexture, round_half_away
from materials.texture_loader import create_image_material, load_texture

ORIGIN = Vector3(0, 0, 0)
EVEN = Vector3(1, 1, 1)
ODD = Vector3(0, 0, 0)


def small_raster():
    # Two rows, three columns; each pixel's red channel encodes its position.
    return np.array([
        [[10, 0, 0], [11, 0, 0], [12, 0, 0]],
        [[20, 0, 0], [21, 0, 0], [22, 0, 0]],
    ], dtype=np.uint8)


def red_at(texture, u, v):
    return round(texture.value(UV(u, v), ORIGIN).x * 255)


@pytest.mark.parametrize("x, expected", [
    (0.0, 0), (0.4, 0), (0.5, 1), (-0.5, -1), (1.4, 1),
    (2.5, 3), (-2.5, -3), (-1.6, -2),
])
def test_round_half_away(x, expected):
    assert round_half_away(x) == expected


@pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
def test_round_half_away_non_finite(x):
    assert round_half_away(x) == 0


def test_solid_texture_ignores_coordinates():
    color = Vector3(0.2, 0.4, 0.6)
    tex = SolidTexture(color)
    assert tex.value(UV(0, 0), ORIGIN) == color
    assert tex.value(UV(-7, 3.5), Vector3(1, 2, 3)) == color


class TestCheckerTexture:
    def test_cell_parity(self):
        tex = CheckerTexture(EVEN, ODD)
        assert tex.value(UV(0.4, 0.4), ORIGIN) is EVEN
        assert tex.value(UV(1.2, 0.9), ORIGIN) is EVEN
        assert tex.value(UV(1.2, 0.1), ORIGIN) is ODD

    def test_halfway_rounds_away_from_zero(self):
        tex = CheckerTexture(EVEN, ODD)
        assert tex.value(UV(0.5, 0.0), ORIGIN) is ODD
        assert tex.value(UV(-0.5, 0.0), ORIGIN) is ODD
        assert tex.value(UV(2.5, 0.0), ORIGIN) is ODD

    def test_scale_shrinks_cells(self):
        tex = CheckerTexture(EVEN, ODD, scale=10.0)
        assert tex.value(UV(0.0, 0.0), ORIGIN) is EVEN
        assert tex.value(UV(0.1, 0.0), ORIGIN) is ODD
        assert tex.value(UV(0.2, 0.0), ORIGIN) is EVEN

    def test_overflowing_coordinate_picks_cell_zero(self):
        tex = CheckerTexture(EVEN, ODD, scale=4.0)
        assert tex.value(UV(1e308, 0.0), ORIGIN) is EVEN
        assert tex.value(UV(-1e308, 1.0), ORIGIN) is EVEN


class TestImageTexture:
    def test_integer_raster_normalized(self):
        tex = ImageTexture(small_raster())
        assert tex.width == 3
        assert tex.height == 2
        assert tex.data.max() <= 1.0

    def test_float_raster_used_as_is(self):
        raster = np.full((1, 1, 3), 0.25)
        assert ImageTexture(raster).value(UV(0, 0), ORIGIN) == Vector3(0.25, 0.25, 0.25)

    def test_v_zero_is_bottom_row(self):
        tex = ImageTexture(small_raster())
        assert red_at(tex, 0.0, 0.0) == 20
        assert red_at(tex, 1.0, 0.0) == 22
        assert red_at(tex, 0.0, 1.0) == 10
        assert red_at(tex, 1.0, 1.0) == 12

    def test_nearest_pixel(self):
        tex = ImageTexture(small_raster())
        assert red_at(tex, 0.5, 0.0) == 21
        assert red_at(tex, 0.3, 0.9) == 11

    def test_coordinates_wrap(self):
        tex = ImageTexture(small_raster())
        assert red_at(tex, 1.5, 0.0) == 20     # column 3 wraps to 0
        assert red_at(tex, -0.5, 0.0) == 22    # column -1 wraps to 2
        assert red_at(tex, 0.0, 2.0) == 20     # row 2 wraps to 0

    @pytest.mark.parametrize("shape", [(4, 4), (2, 2, 4), (0, 3, 3)])
    def test_rejects_non_rgb_shapes(self, shape):
        with pytest.raises(ValueError):
            ImageTexture(np.zeros(shape, dtype=np.uint8))


class TestTextureLoader:
    def write_png(self, path):
        img = Image.new('RGB', (3, 2))
        for x in range(3):
            img.putpixel((x, 0), (10 + x, 0, 0))
            img.putpixel((x, 1), (20 + x, 0, 0))
        img.save(path)
        return str(path)

    def test_loads_png_with_top_row_first(self, tmp_path):
        tex = load_texture(self.write_png(tmp_path / "tex.png"))
        assert (tex.height, tex.width) == (2, 3)
        assert red_at(tex, 0.0, 1.0) == 10
        assert red_at(tex, 1.0, 0.0) == 22

    def test_converts_grayscale_to_rgb(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.new('L', (2, 2), color=51).save(path)
        tex = load_texture(str(path))
        assert tex.value(UV(0, 0), ORIGIN) == Vector3(0.2, 0.2, 0.2)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "nope.png"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(ValueError):
            load_texture(str(path))

    def test_create_image_material(self, tmp_path):
        path = self.write_png(tmp_path / "tex.png")
        matte = create_image_material(path, Lambertian)
        assert isinstance(matte.texture, ImageTexture)
        shiny = create_image_material(path, Metal, fuzz=0.3)
        assert shiny.fuzz == 0.3
