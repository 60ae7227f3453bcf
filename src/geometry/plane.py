# geometry/plane.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval
from core.uv import UV
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

class Plane(Hittable):
    """
    An infinite plane through `point`, spanned by two basis vectors.

    The normal is the unit cross product of the bases. Texture coordinates
    are the projections of the hit offset (from `point`) onto each basis,
    so a checker texture tiles the plane in basis units.
    """
    def __init__(self, xbasis: Vector3, ybasis: Vector3, point: Vector3, material):
        self.xbasis = xbasis
        self.ybasis = ybasis
        self.point = point
        self.material = material
        self.normal = xbasis.cross(ybasis).normalize()
        self.box = AABB.UNIVERSE

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        denom = ray.direction.dot(self.normal)
        # Parallel rays never meet the plane.
        if denom == 0:
            return None
        t = (self.point - ray.origin).dot(self.normal) / denom
        if not math.isfinite(t) or not interval.surrounds(t):
            return None

        p = ray.at(t)
        offset = p - self.point
        uv = UV(self.xbasis.dot(offset), self.ybasis.dot(offset))
        rec = HitRecord(p, self.normal, t, uv, self.material)
        rec.set_front_face(ray)
        return rec

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self) -> str:
        return f"Plane(point={self.point!r}, normal={self.normal!r})"
