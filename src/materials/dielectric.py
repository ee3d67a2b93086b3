# materials/dielectric.py
import math
from typing import Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract, reflectance
from geometry.hittable import HitRecord
from materials.material import Material, MaterialType

class Dielectric(Material):
    """
    Transmissive material that reflects or refracts following Snell's law,
    choosing between the two with Schlick's reflectance.
    """
    type = MaterialType.DIELECTRIC

    def __init__(self, color: Color, refraction_index: float):
        super().__init__(color)
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng, options) -> Tuple[Ray, Color]:
        # Entering the medium from outside, or leaving it
        refraction_ratio = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min((-unit_direction).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, cos_theta, rec.normal, refraction_ratio)

        return Ray(rec.p, direction), self.color

    def __repr__(self) -> str:
        return f"Dielectric({self.color!r}, {self.refraction_index})"
