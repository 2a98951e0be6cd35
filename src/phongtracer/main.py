# main.py
import argparse
import logging
import sys
from typing import List, Optional
import numpy as np
from phongtracer.renderer.canvas import Canvas
from phongtracer.renderer.config import SCENES, RenderConfig
from phongtracer.renderer.render import render_sphere


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="phongtracer",
        description="Render a Phong shaded sphere and write it as an image."
    )
    parser.add_argument("--size", type=int, default=100, help="Width and height of the canvas in pixels.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="translated",
                        help="Transformation and color preset of the sphere.")
    parser.add_argument("--light", type=float, nargs=3, metavar=("X", "Y", "Z"), default=(-10.0, 10.0, -10.0),
                        help="Position of the point light.")
    parser.add_argument("--intensity", type=float, nargs=3, metavar=("R", "G", "B"), default=(1.0, 1.0, 1.0),
                        help="Color of the point light.")
    parser.add_argument("-o", "--output", default="sphere.ppm",
                        help="Output file. .ppm is written as plain PPM, other suffixes via Pillow.")
    parser.add_argument("--show", action="store_true", help="Display the result in a pygame window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        size=args.size,
        scene=args.scene,
        light_position=tuple(args.light),
        light_intensity=tuple(args.intensity),
        output=args.output,
        show=args.show,
    )


def render_scene(config: RenderConfig) -> Canvas:
    canvas = Canvas(config.size, config.size)
    return render_sphere(canvas, config.build_sphere(), config.build_light())


def show_canvas(canvas: Canvas, title: str = "phongtracer"):
    """Opens a window with the canvas until it's closed or ESC is pressed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3)
        frame = np.clip(canvas.to_array(), 0.0, 1.0).transpose(1, 0, 2)
        frame_surface = pygame.surfarray.make_surface(frame * 255)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(frame_surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
        print(f"Rendering scene '{config.scene}' at {config.size}x{config.size}")
        print(f"Light at {config.light_position} with intensity {config.light_intensity}")
        canvas = render_scene(config)
        canvas.save(config.output)
        print(f"Saved image to {config.output}")
    except (ValueError, OSError) as e:
        # GeometryError and PPMFormatError are ValueErrors as well.
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if config.show:
        show_canvas(canvas, title=f"phongtracer - {config.scene}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
