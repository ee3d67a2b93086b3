# materials/metal.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, MaterialType

class Metal(Material):
    """
    Specular reflector; fuzz > 0 jitters the mirrored direction.
    """
    type = MaterialType.METAL

    def __init__(self, color: Color, fuzz: float = 0.0):
        super().__init__(color)
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord, rng, options) -> Optional[Tuple[Ray, Color]]:
        direction = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            direction = direction + random_in_unit_sphere(rng) * self.fuzz

        if direction.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it points into the surface

        return Ray(rec.p, direction), self.color

    def __repr__(self) -> str:
        return f"Metal({self.color!r}, fuzz={self.fuzz})"
