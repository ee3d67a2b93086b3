# renderer/pixels.py
import math
import numpy as np
from core.vector import Color

def create_buffer(width: int, height: int) -> np.ndarray:
    """
    Allocates a zeroed row-major RGBA8 buffer of shape (height, width, 4).
    """
    return np.zeros((height, width, 4), dtype=np.uint8)

def quantize(value: float, gamma: float = 1.0) -> int:
    """
    Gamma-corrects one linear channel and maps it to a byte.
    Values above 1 are not clamped; the result wraps modulo 256.
    """
    if gamma != 1:
        value = value ** (1 / gamma)
    return math.floor(255.999 * value) & 0xFF

def write_pixel(buffer: np.ndarray, x: int, y: int, color: Color, gamma: float = 1.0):
    """
    Writes color at (x, y) with alpha 255. Writes outside the buffer are dropped.
    """
    height, width = buffer.shape[:2]
    if x >= width or y >= height:
        return
    buffer[y, x] = (quantize(color.x, gamma),
                    quantize(color.y, gamma),
                    quantize(color.z, gamma),
                    255)

def read_pixel(buffer: np.ndarray, x: int, y: int) -> Color:
    """Reads back an already-written pixel as a color in [0, 1)."""
    r, g, b = buffer[y, x, :3]
    return Color(int(r) / 256, int(g) / 256, int(b) / 256)

def color_diff(c1: Color, c2: Color) -> float:
    """Sum of absolute per-channel differences."""
    return abs(c1.x - c2.x) + abs(c1.y - c2.y) + abs(c1.z - c2.z)
