# materials/presets.py
from core.vector import Color
from materials.smooth import Smooth
from materials.metal import Metal
from materials.dielectric import Dielectric

class ColorPresets:
    """Common color presets for materials."""

    WHITE = Color(1.0, 1.0, 1.0)
    GRAY = Color(0.5, 0.5, 0.5)

    GROUND = Color(0.8, 0.8, 0.0)
    RED_CLAY = Color(0.7, 0.3, 0.3)
    GOLD = Color(0.8, 0.6, 0.2)

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def rough_gold() -> Metal:
        return Metal(ColorPresets.GOLD, fuzz=1.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(ColorPresets.WHITE, 1.5)

def matte(color: Color) -> Smooth:
    """Create a diffuse material with the given color."""
    return Smooth(color)
