# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.diffuse_light import DiffuseLight
from materials.textures import CheckerTexture

class ColorPresets:
    """Linear RGB colors used by the demo scenes."""
    WHITE = Vector3(1.0, 1.0, 1.0)
    BLACK = Vector3(0.0, 0.0, 0.0)
    RED = Vector3(0.65, 0.05, 0.05)
    GREEN = Vector3(0.12, 0.45, 0.15)
    BLUE = Vector3(0.1, 0.2, 0.7)
    PEACH = Vector3(0.49, 0.35, 0.3255)
    LAVENDER = Vector3(0.54, 0.44, 0.60)
    SKY = Vector3(0.5, 0.7, 1.0)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)

class MetalPresets:
    """Tinted metals. Only brushed steel is fuzzy; the rest are perfect mirrors."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 215.0 / 255.0, 0.0))

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8))

    @staticmethod
    def brushed_steel() -> Metal:
        return Metal(Vector3(0.7, 0.7, 0.72), fuzz=0.3)

class LightPresets:
    """Emitters by color temperature. Intensity scales the emitted radiance, so values above 1 are normal."""
    TINTS = {
        'warm': Vector3(1.0, 0.95, 0.9),
        'cool': Vector3(0.9, 0.95, 1.0),
        'daylight': Vector3(1.0, 1.0, 1.0),
    }

    @classmethod
    def emitter(cls, tint: str, intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(cls.TINTS[tint] * intensity)

    @classmethod
    def warm_light(cls, intensity: float = 1.0) -> DiffuseLight:
        return cls.emitter('warm', intensity)

    @classmethod
    def cool_light(cls, intensity: float = 1.0) -> DiffuseLight:
        return cls.emitter('cool', intensity)

    @classmethod
    def daylight(cls, intensity: float = 1.0) -> DiffuseLight:
        return cls.emitter('daylight', intensity)

class TexturePresets:
    @staticmethod
    def checkerboard(even: Vector3 = None, odd: Vector3 = None, scale: float = 1.0) -> CheckerTexture:
        """Light/dark grey checker unless colors are given."""
        even = even if even is not None else Vector3(0.8, 0.8, 0.8)
        odd = odd if odd is not None else Vector3(0.2, 0.2, 0.2)
        return CheckerTexture(even, odd, scale)
