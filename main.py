#!/usr/bin/env python3

import argparse
import asyncio
import logging
import os
import sys

import pygame

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from config.display_constants import (
    DEFAULT_SPEED, DEFAULT_SURFACE_ID, TICKS_PER_SECOND,
    WINDOW_CAPTION, WINDOW_HEIGHT, WINDOW_WIDTH
)
from config.render_config import RenderConfig
from core.tesseract_renderer import TesseractRenderer
from rendering.frame_renderer import FrameRenderer
from rendering.surface import PygameSurface
from systems.async_pygame import PygameFrameScheduler
from systems.surface_registry import SurfaceRegistry

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rotating tesseract")
    parser.add_argument("--speed", type=float, default=DEFAULT_SPEED, help="Animation speed multiplier (0-10)")
    parser.add_argument("--fps", type=int, default=TICKS_PER_SECOND, help="Frames per second")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument("--pixel-ratio", type=float, default=1.0,
                        help="Render at this multiple of the window size and scale down")
    parser.add_argument("--config", type=str, help="JSON file with render configuration")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


async def main(args: argparse.Namespace, config: RenderConfig) -> None:
    window = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_CAPTION)
    surface = PygameSurface(window, pixel_ratio=args.pixel_ratio)

    registry = SurfaceRegistry()
    registry.register(DEFAULT_SURFACE_ID, surface)
    scheduler = PygameFrameScheduler(fps=args.fps)
    renderer = TesseractRenderer(scheduler, registry, FrameRenderer(config),
                                 on_diagnostic=logger.warning)
    renderer.set_speed(args.speed)

    quit_requested = False

    def should_continue() -> bool:
        nonlocal quit_requested
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
        return not quit_requested

    def after_frame() -> None:
        surface.present()
        pygame.display.flip()

    renderer.start(DEFAULT_SURFACE_ID)
    try:
        await scheduler.run(should_continue, after_frame)
    finally:
        renderer.stop()
        registry.unregister(DEFAULT_SURFACE_ID)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    config = RenderConfig.from_args(args)
    logger.info(f"Using {config}")

    pygame.init()
    try:
        asyncio.run(main(args, config))
    except Exception as e:
        logger.exception(e)
        pygame.quit()
        sys.exit(1)
    pygame.quit()
