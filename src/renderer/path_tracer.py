# renderer/path_tracer.py
import math
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable
from renderer.options import RenderOptions

# Lower bound for secondary rays, keeps a bounce from re-hitting its own origin.
SHADOW_EPSILON = 0.001

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

def sky_color(ray: Ray) -> Color:
    """Vertical white-to-blue gradient returned for rays that hit nothing."""
    unit_direction = ray.direction.normalize()
    tt = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - tt) + SKY_BLUE * tt

def trace_color(options: RenderOptions, world: Hittable, ray: Ray,
                t_min: float, t_max: float, depth: int, rng) -> Color:
    """
    Estimates the light arriving along ray.

    depth counts the bounces left. The primary ray is traced with
    depth == options.max_depth and fans out into diffuse_rays_probes samples;
    every deeper bounce uses diffuse_second_rays_probes. A hit with one bounce
    or less left returns black instead of estimating the remaining light.
    """
    rec = world.hit(ray, t_min, t_max)
    if rec is None:
        return sky_color(ray)

    if depth <= 1:
        return BLACK

    probes = options.diffuse_rays_probes if depth == options.max_depth else options.diffuse_second_rays_probes
    if probes == 0:
        return BLACK

    material = rec.material
    r = g = b = 0.0
    for _ in range(probes):
        scattered = material.scatter(ray, rec, rng, options)
        # Absorbed probes add nothing but still count in the average.
        if scattered is None:
            continue
        new_ray, attenuation = scattered
        traced = trace_color(options, world, new_ray, SHADOW_EPSILON, math.inf, depth - 1, rng)
        r += traced.x * attenuation.x
        g += traced.y * attenuation.y
        b += traced.z * attenuation.z

    return Color(r / probes, g / probes, b / probes)
