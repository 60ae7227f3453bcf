# materials/material.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.uv import UV
from geometry.hittable import HitRecord
from materials.textures import Texture, SolidTexture

BLACK = Vector3(0.0, 0.0, 0.0)

def as_texture(color: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(color, Vector3):
        return SolidTexture(color)
    return color

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable and shared by every primitive that uses them,
    so scatter() draws its randomness from the sampler it is given.
    """
    def __init__(self, texture: Union[Vector3, Texture, None] = None):
        self.texture = as_texture(texture) if texture is not None else None

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the path ends here.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Vector3:
        """Radiance emitted by the surface itself; black unless overridden."""
        return BLACK

    def get_texture_color(self, uv: UV, point: Vector3) -> Vector3:
        """
        Get the color from the texture at the given UV coordinates and point.
        If no texture is set, returns black.
        """
        if self.texture is None:
            return BLACK
        return self.texture.value(uv, point)
