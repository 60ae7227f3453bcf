# core/interval.py
import math

# Lower bound for secondary rays, keeps a surface from re-hitting itself.
RAY_EPSILON = 1e-6

class Interval:
    """
    A scalar range [min, max]. Used to clip the ray parameter during
    intersection queries and as the per-axis extent of an AABB.

    An interval with min > max is empty; Interval.EMPTY is the canonical
    one and serves as the seed when accumulating a union.
    """
    __slots__ = ("min", "max")

    def __init__(self, minimum: float, maximum: float):
        self.min = minimum
        self.max = maximum

    @staticmethod
    def for_ray() -> "Interval":
        return Interval(RAY_EPSILON, math.inf)

    @staticmethod
    def union(a: "Interval", b: "Interval") -> "Interval":
        return Interval(min(a.min, b.min), max(a.max, b.max))

    def size(self) -> float:
        return self.max - self.min

    def surrounds(self, x: float) -> bool:
        # Open test: roots exactly on the bounds are rejected.
        return self.min < x < self.max

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def expand(self, delta: float) -> "Interval":
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
