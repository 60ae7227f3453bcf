# core/aabb.py
import math
from core.interval import Interval
from core.vector import Vector3

# Minimum slab thickness; flat primitives are padded up to it.
PAD_DELTA = 1e-5

class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval, y: Interval, z: Interval):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def from_points(a: Vector3, b: Vector3) -> "AABB":
        """Box spanned by two corners given in any order."""
        return AABB(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def axis_interval(self, axis: int) -> Interval:
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        return self.x

    def hit(self, ray, interval: Interval) -> bool:
        # Slab method: shrink [t_min, t_max] by each axis' entry/exit params.
        t_min = interval.min
        t_max = interval.max
        for axis in range(3):
            slab = self.axis_interval(axis)
            d = ray.direction[axis]
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            orig = ray.origin[axis]
            t0 = (slab.min - orig) * invD
            t1 = (slab.max - orig) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def pad(self) -> "AABB":
        """Returns a copy with every axis at least PAD_DELTA thick."""
        def padded(i: Interval) -> Interval:
            return i if i.size() >= PAD_DELTA else i.expand(PAD_DELTA)
        return AABB(padded(self.x), padded(self.y), padded(self.z))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z)
        )

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
AABB.UNIVERSE = AABB(Interval.UNIVERSE, Interval.UNIVERSE, Interval.UNIVERSE)
