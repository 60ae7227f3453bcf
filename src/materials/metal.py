# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture

class Metal(Material):
    """
    Mirror-like material. With the default fuzz of 0 the reflection is
    perfectly specular and consumes no randomness.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        super().__init__(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        attenuation = self.get_texture_color(rec.uv, rec.p)
        if self.fuzz == 0.0:
            return attenuation, Ray(rec.p, reflected)

        direction = reflected + random_in_unit_sphere(rng) * self.fuzz
        if direction.dot(rec.normal) > 0:
            return attenuation, Ray(rec.p, direction.normalize())
        return None  # Absorb the ray if fuzz pushed it below the surface
