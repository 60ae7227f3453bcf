# core/uv.py
class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __add__(self, other: "UV") -> "UV":
        return UV(self.u + other.u, self.v + other.v)

    def __sub__(self, other: "UV") -> "UV":
        return UV(self.u - other.u, self.v - other.v)

    def __mul__(self, t: float) -> "UV":
        return UV(self.u * t, self.v * t)

    def __truediv__(self, t: float) -> "UV":
        return UV(self.u / t, self.v / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    @staticmethod
    def blend(uv_a: "UV", uv_b: "UV", uv_c: "UV",
              wa: float, wb: float, wc: float) -> "UV":
        """Weighted sum of three coordinates (barycentric interpolation)."""
        return UV(
            uv_a.u * wa + uv_b.u * wb + uv_c.u * wc,
            uv_a.v * wa + uv_b.v * wb + uv_c.v * wc
        )

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
