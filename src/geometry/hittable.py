# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV

class HitRecord:
    """
    Records details of a ray-object intersection. Lives only for the
    duration of one query; the material is shared, never copied.
    """
    __slots__ = ("p", "normal", "t", "uv", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, uv: UV = None, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit outward surface normal
        self.t = t              # Ray parameter at intersection
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.front_face = True
        self.material = material

    def set_front_face(self, ray: Ray):
        """
        Records which side of the surface the ray arrived from. The stored
        normal keeps pointing outward either way.
        """
        self.front_face = ray.direction.dot(self.normal) < 0

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    hit() returns the record with the smallest valid t inside the interval,
    or None. bounding_box() returns a box computed once at construction.
    """
    def hit(self, ray: Ray, interval: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
