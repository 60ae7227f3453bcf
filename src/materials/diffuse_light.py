# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.uv import UV
from geometry.hittable import HitRecord
from materials.material import Material
from materials.textures import Texture

class DiffuseLight(Material):
    """
    Emissive material. It never scatters, so a path that reaches it ends
    with the emitted radiance; a texture can pattern the emission.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Vector3, Ray]]:
        return None

    def emitted(self, uv: UV, p: Vector3) -> Vector3:
        """Radiance leaving the surface at `uv`; textured lights vary across it."""
        return self.get_texture_color(uv, p)
