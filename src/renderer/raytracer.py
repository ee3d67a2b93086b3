# renderer/raytracer.py
import logging
import math
import random
import time
from dataclasses import dataclass
import numpy as np
from camera.camera import Camera
from core.vector import Color
from geometry.hittable import Hittable
from renderer.options import RenderOptions
from renderer.path_tracer import trace_color
from renderer.pixels import color_diff, read_pixel, write_pixel
from scenes import default_world

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = Color(1.0, 0.0, 0.0)

@dataclass
class RenderStats:
    """Counters from the last adaptive pass, for logs only."""
    width: int = 0
    height: int = 0
    blocks: int = 0
    refined: int = 0
    elapsed: float = 0.0

    @property
    def ratio(self) -> float:
        return self.refined / self.blocks if self.blocks else 0.0

    @property
    def total_samples(self) -> int:
        # One sample per flat block, plus four more per refined block.
        return self.blocks - self.refined + self.refined * 4

    def summary(self) -> str:
        return (f"renderResolution={self.width}x{self.height} "
                f"basePixelsCount={self.blocks} needDetails={self.refined} "
                f"needDetailsRatio={self.ratio * 100:.2f}% totalPixels={self.total_samples}")

class Renderer:
    """
    Adaptive block renderer.

    The image is walked in 2x2 blocks, top to bottom and left to right. Each
    block gets one sample at its center. When that sample differs from the
    already written pixels above and to the left by more than diff_threshold,
    the four corners are sampled separately and blended towards their mean by
    avg_mixer; otherwise the center sample fills the whole block. The order
    matters: the comparison reads pixels written by earlier blocks.
    """
    def __init__(self, options: RenderOptions, world: Hittable, rng=None):
        self.options = options
        self.world = world
        self.rng = rng if rng is not None else random.Random()
        self.camera = Camera(options.width, options.height)
        self.stats = RenderStats(options.width, options.height)

    def color_at(self, x: float, y: float) -> Color:
        ray = self.camera.get_ray(x, y)
        return trace_color(self.options, self.world, ray, 0.0, math.inf,
                           self.options.max_depth, self.rng)

    def neighbor_diff(self, buffer: np.ndarray, x: int, y: int, color: Color) -> float:
        width = self.options.width
        diff = 0.0
        if y > 0 and x + 1 < width:
            diff += color_diff(color, read_pixel(buffer, x + 1, y - 1))
        if x > 0:
            diff += color_diff(color, read_pixel(buffer, x - 1, y))
        return diff

    def render_block(self, buffer: np.ndarray, x: int, y: int) -> bool:
        """Fills the block at (x, y) and returns True if it was refined."""
        options = self.options
        center = self.color_at(x + 0.5, y + 0.5)

        if self.neighbor_diff(buffer, x, y, center) > options.diff_threshold:
            corners = [self.color_at(x, y), self.color_at(x + 1, y),
                       self.color_at(x, y + 1), self.color_at(x + 1, y + 1)]
            average = (corners[0] + corners[1] + corners[2] + corners[3]) * 0.25
            colors = [c.lerp(average, options.avg_mixer) for c in corners]
            refined = True
        else:
            colors = [center] * 4
            refined = False

        self.fill_block(buffer, x, y, colors)
        return refined

    def fill_block(self, buffer: np.ndarray, x: int, y: int, colors):
        gamma = self.options.gamma
        write_pixel(buffer, x, y, colors[0], gamma)
        write_pixel(buffer, x + 1, y, colors[1], gamma)
        write_pixel(buffer, x, y + 1, colors[2], gamma)
        write_pixel(buffer, x + 1, y + 1, colors[3], gamma)

    def render(self, buffer: np.ndarray) -> None:
        options = self.options
        width, height = options.width, options.height
        if buffer.shape != (height, width, 4):
            raise ValueError(f"buffer shape {buffer.shape} does not match {width}x{height} RGBA")

        self.stats = RenderStats(width, height)
        highlighted = []
        start = time.perf_counter()

        for y in range(0, height, 2):
            for x in range(0, width, 2):
                self.stats.blocks += 1
                if self.render_block(buffer, x, y):
                    self.stats.refined += 1
                    if options.highlight_diff:
                        highlighted.append((x, y))

        # The overlay goes on after the pass so it never feeds the comparisons.
        for x, y in highlighted:
            self.fill_block(buffer, x, y, [HIGHLIGHT_COLOR] * 4)

        self.stats.elapsed = time.perf_counter() - start
        logger.info(self.stats.summary())
        logger.debug("Frame rendered in %.3fs", self.stats.elapsed)

def render(buffer: np.ndarray, options: RenderOptions, world: Hittable = None, rng=None) -> None:
    """
    Renders world into buffer in place. Uses the default scene when world is None.
    """
    if world is None:
        world = default_world()
    Renderer(options, world, rng).render(buffer)
