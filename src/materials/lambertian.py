# materials/lambertian.py
from typing import Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture

class Lambertian(Material):
    """
    Diffuse material; the albedo may be a solid color or any texture.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Vector3, Ray]:
        # Normal plus a random unit vector gives a cosine-weighted direction.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.length() < 1e-8:
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction.normalize())
        attenuation = self.get_texture_color(rec.uv, rec.p)
        return attenuation, scattered
