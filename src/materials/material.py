# materials/material.py
from enum import Enum
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from geometry.hittable import HitRecord

class MaterialType(Enum):
    SMOOTH = 0
    METAL = 1
    DIELECTRIC = 2

class Material:
    """
    Base of the closed material family. Smooth, Metal and Dielectric are the
    complete set, one per MaterialType member.

    Each subclass carries its MaterialType tag and a flat attenuation color,
    and implements scatter().
    """
    type: MaterialType = None

    def __init__(self, color: Color):
        self.color = color

    def scatter(self, ray_in: Ray, rec: HitRecord, rng, options) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
