"""Pytest configuration and shared fixtures."""

import random

import pytest

from core.vector import Color, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.smooth import Smooth
from renderer.options import RenderOptions


class ScriptedRandom:
    """Stands in for random.Random, replaying fixed values."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def uniform(self, a, b):
        return a + (b - a) * self.values.pop(0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def gray():
    return Color(0.5, 0.5, 0.5)


@pytest.fixture
def simple_scene(gray):
    return HittableList([
        Sphere(Vector3(0, 0, -1), 0.5, Smooth(gray)),
        Sphere(Vector3(0, -100.5, -1), 100, Smooth(gray)),
    ])


@pytest.fixture
def small_options():
    return RenderOptions(width=8, height=6, max_depth=3, diffuse_rays_probes=2)
