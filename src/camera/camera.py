# camera/camera.py
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Fixed pinhole camera looking down -z from the origin.

    Pixel coordinates map to the viewport as u = x / width and
    v = 1 - y / height, so row 0 is the top of the image.
    """
    def __init__(self, width: int, height: int,
                 viewport_height: float = 2.0, focal_length: float = 1.0,
                 position: Vector3 = None):
        self.width = width
        self.height = height
        self.aspect_ratio = width / height
        self.viewport_height = viewport_height
        self.viewport_width = self.aspect_ratio * viewport_height
        self.focal_length = focal_length
        self.position = position if position is not None else Vector3(0, 0, 0)
        self.update_camera()

    def update_camera(self):
        """Updates the viewport vectors from the current geometry."""
        self.horizontal = Vector3(self.viewport_width, 0, 0)
        self.vertical = Vector3(0, self.viewport_height, 0)
        self.lower_left_corner = self.position - Vector3(self.viewport_width / 2,
                                                         self.viewport_height / 2,
                                                         self.focal_length)

    def get_ray(self, x: float, y: float) -> Ray:
        """Generates the primary ray through pixel coordinates (x, y)."""
        u = x / self.width
        v = 1 - y / self.height
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.position)
        return Ray(self.position, direction)
