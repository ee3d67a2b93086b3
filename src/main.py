# main.py
import argparse
import logging
import os
import random
import sys
import time
import pygame
from PIL import Image
from renderer.options import DEFAULT_OPTIONS, RenderOptions
from renderer.pixels import create_buffer
from renderer.raytracer import Renderer
from scenes import SCENES

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("main")

def setup_logging(level: str = None) -> None:
    if level is None:
        level = os.getenv("RT_LOG_LEVEL", "INFO")
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)

def save_image(buffer, path: str) -> None:
    Image.fromarray(buffer, "RGBA").save(path)
    logger.info("Saved %s", path)

class Application:
    """
    Interactive viewer. Every key that changes an option triggers a full
    re-render, and the buffer is scaled up to the window.
    """
    def __init__(self, options: RenderOptions, world, seed=None, output: str = "render.png"):
        pygame.init()
        self.window_width = options.width
        self.window_height = options.height
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Adaptive Ray Tracer")

        self.options = options
        self.world = world
        self.seed = seed
        self.output = output
        self.buffer = None

        # key -> (option field, change)
        self.key_map = {
            pygame.K_LEFTBRACKET: ("avg_mixer", -0.05),
            pygame.K_RIGHTBRACKET: ("avg_mixer", 0.05),
            pygame.K_MINUS: ("diff_threshold", -0.05),
            pygame.K_EQUALS: ("diff_threshold", 0.05),
            pygame.K_z: ("zoom", -0.5),
            pygame.K_x: ("zoom", 0.5),
            pygame.K_d: ("max_depth", -1),
            pygame.K_f: ("max_depth", 1),
            pygame.K_o: ("diffuse_rays_probes", -1),
            pygame.K_p: ("diffuse_rays_probes", 1),
            pygame.K_k: ("diffuse_second_rays_probes", -1),
            pygame.K_l: ("diffuse_second_rays_probes", 1),
        }
        self.toggle_map = {
            pygame.K_h: "highlight_diff",
            pygame.K_t: "use_true_lambertian",
        }

    def render_options(self) -> RenderOptions:
        width, height = self.options.scaled_size(self.window_width, self.window_height)
        return self.options.replace(width=width, height=height)

    def handle_key(self, key) -> bool:
        """Applies a key to the options. Returns True if they changed."""
        if key in self.key_map:
            field, step = self.key_map[key]
            value = getattr(self.options, field) + step
            if field == "zoom":
                value = max(value, 0.5)
            elif field == "avg_mixer":
                value = min(max(value, 0.0), 1.0)
            else:
                value = max(value, 0)
            candidate = self.options.replace(**{field: value})
        elif key in self.toggle_map:
            field = self.toggle_map[key]
            candidate = self.options.replace(**{field: not getattr(self.options, field)})
        elif key == pygame.K_g:
            candidate = self.options.replace(gamma=2.0 if self.options.gamma == 1 else 1.0)
        else:
            return False

        try:
            width, height = candidate.scaled_size(self.window_width, self.window_height)
            candidate.replace(width=width, height=height).validate()
        except ValueError as e:
            logger.warning("Ignoring change: %s", e)
            return False
        self.options = candidate
        logger.info("Options changed: %s", self.options)
        return True

    def redraw(self):
        options = self.render_options()
        self.buffer = create_buffer(options.width, options.height)
        rng = random.Random(self.seed) if self.seed is not None else None

        start = time.perf_counter()
        Renderer(options, self.world, rng).render(self.buffer)
        logger.info("renderTime %.2fs", time.perf_counter() - start)

        surface = pygame.image.frombuffer(self.buffer.tobytes(), (options.width, options.height), "RGBA")
        if (options.width, options.height) != (self.window_width, self.window_height):
            surface = pygame.transform.scale(surface, (self.window_width, self.window_height))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self):
        try:
            self.redraw()
            running = True
            while running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_s:
                        save_image(self.buffer, self.output)
                    elif self.handle_key(event.key):
                        self.redraw()
        finally:
            pygame.quit()

def build_parser() -> argparse.ArgumentParser:
    defaults = DEFAULT_OPTIONS
    parser = argparse.ArgumentParser(description="Adaptive stochastic ray tracer for sphere scenes.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--avg-mixer", type=float, default=defaults.avg_mixer)
    parser.add_argument("--diff-threshold", type=float, default=defaults.diff_threshold)
    parser.add_argument("--highlight-diff", action="store_true")
    parser.add_argument("--zoom", type=float, default=defaults.zoom)
    parser.add_argument("--gamma", type=float, default=defaults.gamma)
    parser.add_argument("--max-depth", type=int, default=defaults.max_depth)
    parser.add_argument("--true-lambertian", action="store_true")
    parser.add_argument("--probes", type=int, default=defaults.diffuse_rays_probes)
    parser.add_argument("--second-probes", type=int, default=defaults.diffuse_second_rays_probes)
    parser.add_argument("--scene", choices=sorted(SCENES), default="default")
    parser.add_argument("--seed", type=int, default=os.getenv("RT_SEED"))
    parser.add_argument("--output", default="render.png")
    parser.add_argument("--interactive", action="store_true", help="open a pygame window")
    parser.add_argument("--log-level", default=None)
    return parser

def options_from_args(args) -> RenderOptions:
    return RenderOptions(
        width=args.width,
        height=args.height,
        avg_mixer=args.avg_mixer,
        diff_threshold=args.diff_threshold,
        highlight_diff=args.highlight_diff,
        zoom=args.zoom,
        gamma=args.gamma,
        max_depth=args.max_depth,
        use_true_lambertian=args.true_lambertian,
        diffuse_rays_probes=args.probes,
        diffuse_second_rays_probes=args.second_probes,
    )

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        options = options_from_args(args).validate()
        if not args.interactive:
            width, height = options.scaled_size(options.width, options.height)
            options = options.replace(width=width, height=height).validate()
    except ValueError as e:
        logger.error("Invalid options: %s", e)
        return 2

    seed = int(args.seed) if args.seed is not None else None
    world = SCENES[args.scene]()

    if args.interactive:
        Application(options, world, seed, args.output).run()
        return 0

    buffer = create_buffer(options.width, options.height)
    rng = random.Random(seed) if seed is not None else None
    Renderer(options, world, rng).render(buffer)
    save_image(buffer, args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
