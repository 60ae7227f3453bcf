# renderer/tone_mapping.py
import math
from typing import Tuple
import numpy as np
from core.vector import Vector3

def channel_to_byte(value: float) -> int:
    """Scale a linear channel to 0-255, saturating instead of wrapping."""
    if not math.isfinite(value):
        return 0
    return int(min(255.0, max(0.0, value * 255.0)))

def to_rgb8(color: Vector3) -> Tuple[int, int, int]:
    """
    Convert averaged linear radiance to an 8-bit RGB triple by
    clamp(color * 255, 0, 255). Values above 1.0 saturate at 255.
    """
    return channel_to_byte(color.x), channel_to_byte(color.y), channel_to_byte(color.z)

def framebuffer_to_array(buffer: bytes, width: int, height: int) -> np.ndarray:
    """
    View a flat row-major RGB byte buffer as a (height, width, 3) uint8 array.
    """
    expected = width * height * 3
    if len(buffer) != expected:
        raise ValueError(f"Framebuffer holds {len(buffer)} bytes, expected {expected}")
    return np.frombuffer(buffer, dtype=np.uint8).reshape(height, width, 3)
