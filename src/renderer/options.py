# renderer/options.py
import dataclasses
import math
from dataclasses import dataclass

# Recursion in trace_color is one Python frame per bounce.
MAX_DEPTH_LIMIT = 500

@dataclass
class RenderOptions:
    """
    Parameters for one frame. The host edits these and re-renders.
    """
    width: int
    height: int
    avg_mixer: float = 0.45
    diff_threshold: float = 0.25
    highlight_diff: bool = False
    zoom: float = 1.0
    gamma: float = 1.0
    max_depth: int = 10
    use_true_lambertian: bool = False
    diffuse_rays_probes: int = 10
    diffuse_second_rays_probes: int = 1

    def replace(self, **changes) -> "RenderOptions":
        return dataclasses.replace(self, **changes)

    def scaled_size(self, base_width: int, base_height: int):
        """
        Render resolution for a display of base size at the current zoom.
        Both sides are rounded down to an even number of pixels.
        """
        width = math.floor(base_width / 2 / self.zoom) * 2
        height = math.floor(base_height / 2 / self.zoom) * 2
        return width, height

    def validate(self) -> "RenderOptions":
        """
        Raises ValueError naming the first field outside its allowed range.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"width and height must be positive, got {self.width}x{self.height}")
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")
        if self.diff_threshold < 0:
            raise ValueError(f"diff_threshold must be >= 0, got {self.diff_threshold}")
        if not 0 <= self.avg_mixer <= 1:
            raise ValueError(f"avg_mixer must be in [0, 1], got {self.avg_mixer}")
        if self.gamma <= 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")
        if not 0 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must be in [0, {MAX_DEPTH_LIMIT}], got {self.max_depth}")
        if self.diffuse_rays_probes < 0:
            raise ValueError(f"diffuse_rays_probes must be >= 0, got {self.diffuse_rays_probes}")
        if self.diffuse_second_rays_probes < 0:
            raise ValueError(f"diffuse_second_rays_probes must be >= 0, got {self.diffuse_second_rays_probes}")
        return self


DEFAULT_OPTIONS = RenderOptions(width=800, height=600)
