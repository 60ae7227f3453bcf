# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval
from core.uv import UV
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

def sphere_uv(p: Vector3) -> UV:
    """
    Maps a point on the unit sphere to texture coordinates.
    u runs around the Y axis starting at -X, v from the south pole (0)
    to the north pole (1).
    """
    y = max(-1.0, min(1.0, -p.y))
    theta = math.acos(y)
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        if radius < 0:
            raise ValueError(f"Sphere radius must not be negative, got {radius}")
        self.radius = radius
        self.material = material
        offset = Vector3(self.radius, self.radius, self.radius)
        self.box = AABB.from_points(center - offset, center + offset)

    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        if a == 0 or self.radius == 0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not interval.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not interval.surrounds(root):
                return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        rec = HitRecord(p, outward_normal, root, sphere_uv(outward_normal), self.material)
        rec.set_front_face(ray)
        return rec

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
