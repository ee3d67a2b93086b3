# materials/smooth.py
from typing import Tuple
from core.ray import Ray
from core.vector import Color
from core.utils import random_in_unit_sphere, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, MaterialType

class Smooth(Material):
    """
    Lambertian-like diffuse material.
    """
    type = MaterialType.SMOOTH

    def scatter(self, ray_in: Ray, rec: HitRecord, rng, options) -> Tuple[Ray, Color]:
        # Perturb the normal by a point on the unit sphere (true Lambertian)
        # or inside the unit ball (the cheaper approximation).
        if options.use_true_lambertian:
            perturbation = random_unit_vector(rng)
        else:
            perturbation = random_in_unit_sphere(rng)
        scatter_direction = rec.normal + perturbation

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Ray(rec.p, scatter_direction), self.color

    def __repr__(self) -> str:
        return f"Smooth({self.color!r})"
