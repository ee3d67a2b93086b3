# core/utils.py
import math
from core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside the unit ball, drawn from rng by rejection.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.length_squared() < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))

def refract(unit_direction: Vector3, cos_theta: float, n: Vector3, ratio: float) -> Vector3:
    """
    Refracts a unit direction through a surface with normal n, where ratio is
    eta_incident / eta_transmitted and cos_theta = dot(-unit_direction, n).
    """
    r_out_perp = (unit_direction + n * cos_theta) * ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def reflectance(cosine: float, ratio: float) -> float:
    # Schlick's approximation.
    r0 = (1.0 - ratio) / (1.0 + ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
