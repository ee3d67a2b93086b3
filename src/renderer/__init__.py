from renderer.options import DEFAULT_OPTIONS, MAX_DEPTH_LIMIT, RenderOptions
from renderer.pixels import create_buffer
from renderer.raytracer import Renderer, RenderStats, render

__all__ = ["DEFAULT_OPTIONS", "MAX_DEPTH_LIMIT", "RenderOptions", "create_buffer",
           "Renderer", "RenderStats", "render"]
