# materials/textures.py
import math
import numpy as np
from core.vector import Vector3
from core.uv import UV

def round_half_away(x: float) -> int:
    """
    Rounds to the nearest integer, halves away from zero (unlike round()).
    Non-finite input, as produced by grazing hits far out on a plane, gives 0.
    """
    if not math.isfinite(x):
        return 0
    return int(math.copysign(math.floor(abs(x) + 0.5), x))

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, point: Vector3) -> Vector3:
        """Sample the texture at given UV coordinates and world-space point."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, uv: UV, point: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A checker pattern in texture space. The cell of (u, v) is found by
    rounding u * scale and v * scale; even parity picks `even`.
    """
    def __init__(self, even: Vector3, odd: Vector3, scale: float = 1.0):
        self.even = even
        self.odd = odd
        self.scale = scale

    def value(self, uv: UV, point: Vector3) -> Vector3:
        ix = round_half_away(uv.u * self.scale)
        iy = round_half_away(uv.v * self.scale)
        return self.even if (ix + iy) % 2 == 0 else self.odd

class ImageTexture(Texture):
    """
    A texture backed by a decoded RGB raster of shape (height, width, 3).

    Integer rasters are taken as 0-255, float rasters as 0-1. Lookups pick
    the nearest pixel, wrap coordinates outside [0, 1], and flip v so that
    v = 0 is the bottom row of the image.
    """
    def __init__(self, raster):
        data = np.asarray(raster)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Expected an RGB raster of shape (height, width, 3), got {data.shape}")
        if np.issubdtype(data.dtype, np.integer):
            data = data.astype(np.float64) / 255.0
        else:
            data = data.astype(np.float64)
        self.data = data
        self.height, self.width = data.shape[0], data.shape[1]

    def value(self, uv: UV, point: Vector3) -> Vector3:
        px = round_half_away(uv.u * (self.width - 1)) % self.width
        py = round_half_away(uv.v * (self.height - 1)) % self.height

        color = self.data[self.height - 1 - py, px]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))
