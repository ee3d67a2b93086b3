import math

import pytest

from core.ray import Ray
from core.utils import random_in_unit_sphere
from core.vector import Color, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.smooth import Smooth

RED = Smooth(Color(1, 0, 0))
BLUE = Smooth(Color(0, 0, 1))


def test_sphere_front_hit():
    sphere = Sphere(Vector3(0, 0, -3), 1, RED)
    rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0, math.inf)
    assert rec.t == pytest.approx(2)
    assert rec.p == Vector3(0, 0, -2)
    assert rec.normal == Vector3(0, 0, 1)
    assert rec.front_face
    assert rec.material is RED


def test_roots_are_symmetric_about_center_distance():
    sphere = Sphere(Vector3(0, 0, -3), 1, RED)
    # Direction of length 2 halves every parameter value.
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -2))
    near = sphere.hit(ray, 0, math.inf)
    far = sphere.hit(ray, near.t + 1e-9, math.inf)
    assert near.t == pytest.approx(1.5 - 0.5)
    assert far.t == pytest.approx(1.5 + 0.5)


def test_far_root_is_a_back_face():
    sphere = Sphere(Vector3(0, 0, -3), 1, RED)
    rec = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 2.5, math.inf)
    assert rec.t == pytest.approx(4)
    assert not rec.front_face
    assert rec.normal == Vector3(0, 0, 1)


def test_miss_and_out_of_interval():
    sphere = Sphere(Vector3(0, 0, -3), 1, RED)
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)), 0, math.inf) is None
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0, 1.5) is None
    assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 4.5, math.inf) is None


def test_negative_radius_inverts_the_outward_normal():
    sphere = Sphere(Vector3(0, 0, -3), -1, RED)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
    rec = sphere.hit(ray, 0, math.inf)
    assert rec.t == pytest.approx(2)
    assert not rec.front_face
    assert rec.normal == Vector3(0, 0, 1)
    assert ray.direction.dot(rec.normal) <= 0


@pytest.mark.parametrize("radius", [0.5, -0.5, 2.0])
def test_normals_are_unit_and_face_the_ray(rng, radius):
    sphere = Sphere(Vector3(0.3, -0.2, -2), radius, RED)
    hits = 0
    for _ in range(300):
        origin = random_in_unit_sphere(rng) * 4
        target = sphere.center + random_in_unit_sphere(rng) * abs(radius)
        ray = Ray(origin, (target - origin) * 3)
        rec = sphere.hit(ray, 0.001, math.inf)
        if rec is None:
            continue
        hits += 1
        assert rec.normal.length() == pytest.approx(1.0)
        assert ray.direction.dot(rec.normal) <= 0
    assert hits > 0


def test_world_returns_nearest_hit_regardless_of_order():
    near = Sphere(Vector3(0, 0, -2), 0.5, RED)
    far = Sphere(Vector3(0, 0, -5), 0.5, BLUE)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
    for world in (HittableList([near, far]), HittableList([far, near])):
        rec = world.hit(ray, 0, math.inf)
        assert rec.material is RED
        assert rec.t == pytest.approx(1.5)


def test_world_tie_goes_to_first_object():
    first = Sphere(Vector3(0, 0, -2), 0.5, RED)
    second = Sphere(Vector3(0, 0, -2), 0.5, BLUE)
    rec = HittableList([first, second]).hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0, math.inf)
    assert rec.material is RED


def test_empty_world_misses():
    world = HittableList()
    assert len(world) == 0
    assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0, math.inf) is None


def test_world_tie_keeps_first_of_several_equal_hits():
    green = Smooth(Color(0, 1, 0))
    spheres = [Sphere(Vector3(0, 0, -2), 0.5, m) for m in (green, RED, BLUE)]
    rec = HittableList(spheres).hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), 0, math.inf)
    assert rec.material is green
    assert rec.t == pytest.approx(1.5)
