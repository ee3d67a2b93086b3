# scenes.py
from core.vector import Color, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, matte
from materials.smooth import Smooth

def default_world() -> HittableList:
    """
    Ground, a diffuse sphere in the middle, a hollow glass sphere on the left
    and a rough gold sphere on the right.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.6, -1.0), 100, matte(ColorPresets.GROUND)))
    world.add(Sphere(Vector3(0.0, -0.1, -1.0), 0.5, matte(ColorPresets.RED_CLAY)))
    # The negative radius flips the normals, making the inner wall of the shell.
    world.add(Sphere(Vector3(-1.0, -0.1, -1.3), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-1.0, -0.1, -1.3), -0.4, DielectricPresets.glass()))
    world.add(Sphere(Vector3(1.0, -0.1, -1.0), 0.5, MetalPresets.rough_gold()))
    return world

def simple_world(color: Color = ColorPresets.GRAY) -> HittableList:
    """One diffuse sphere resting on a large diffuse ground sphere."""
    return HittableList([
        Sphere(Vector3(0, 0, -1), 0.5, Smooth(color)),
        Sphere(Vector3(0, -100.5, -1), 100, Smooth(color)),
    ])

SCENES = {
    "default": default_world,
    "simple": simple_world,
}
