"""asyncio frame loop for pygame."""
import asyncio
import logging
from typing import Callable, Optional

import pygame

from config.display_constants import TICKS_PER_SECOND
from systems.frame_scheduler import QueuedFrameScheduler
from systems.time_provider import SystemTimeProvider, TimeProvider

logger = logging.getLogger(__name__)


class Clock:
    def __init__(self, time_func: Callable[[], int] = pygame.time.get_ticks) -> None:
        self.time_func = time_func
        self.last_tick = time_func() or 0

    async def tick(self, fps: int = 0) -> None:
        if fps <= 0:
            await asyncio.sleep(0)
            return

        end_time = (1.0 / fps) * 1000
        current = self.time_func()
        time_diff = current - self.last_tick
        delay = max(0, (end_time - time_diff) / 1000)

        self.last_tick = current
        await asyncio.sleep(delay)


class PygameFrameScheduler(QueuedFrameScheduler):
    """Fires queued frame callbacks at a fixed rate from an asyncio task."""

    def __init__(self, fps: int = TICKS_PER_SECOND, time_provider: Optional[TimeProvider] = None) -> None:
        super().__init__()
        self.fps = fps
        self.time_provider = time_provider or SystemTimeProvider()
        self.clock = Clock(self.time_provider.get_ticks)
        self.frame_count = 0

    async def run(self, should_continue: Callable[[], bool],
                  after_frame: Optional[Callable[[], None]] = None) -> None:
        """Run frames until ``should_continue()`` returns False.

        ``after_frame`` is called once per frame after the callbacks, e.g. to
        flip the display.
        """
        logger.info(f"Frame loop starting at {self.fps} fps")
        while should_continue():
            self.run_pending(self.time_provider.get_ticks())
            if after_frame is not None:
                after_frame()
            self.frame_count += 1
            await self.clock.tick(self.fps)
        logger.info(f"Frame loop stopped after {self.frame_count} frames")
