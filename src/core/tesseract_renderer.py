"""start/stop/set_speed control of an animated tesseract."""
import logging
from typing import Callable, Optional

from animation.clock import AnimationClock, ClockState
from config.display_constants import DEFAULT_SPEED
from rendering.frame_renderer import FrameRenderer
from rendering.surface import DrawingSurface
from systems.frame_scheduler import FrameScheduler
from systems.surface_registry import SurfaceRegistry

logger = logging.getLogger(__name__)


class TesseractRenderer:
    """Owns one animation: its surface binding, clock, speed and frame loop.

    None of the public methods raise on bad input. Problems are logged at
    DEBUG and passed to ``on_diagnostic`` when one is given.
    """

    def __init__(self, scheduler: FrameScheduler, registry: SurfaceRegistry,
                 frame_renderer: Optional[FrameRenderer] = None,
                 on_diagnostic: Optional[Callable[[str], None]] = None,
                 speed: float = DEFAULT_SPEED) -> None:
        self.scheduler = scheduler
        self.registry = registry
        self.frame_renderer = frame_renderer or FrameRenderer()
        self.on_diagnostic = on_diagnostic
        self.clock = AnimationClock(speed=speed)
        self.surface: Optional[DrawingSurface] = None
        self._frame_handle: Optional[int] = None

    @property
    def speed(self) -> float:
        return self.clock.speed

    @property
    def phase(self) -> float:
        return self.clock.phase

    @property
    def is_running(self) -> bool:
        return self._frame_handle is not None

    def start(self, surface_id: str) -> None:
        surface = self.registry.resolve(surface_id)
        if surface is None:
            self._diagnose(f"start ignored: no surface registered as {surface_id!r}")
            return
        if not isinstance(surface, DrawingSurface):
            self._diagnose(f"start ignored: surface {surface_id!r} cannot draw ({type(surface).__name__})")
            return

        self._cancel_frame()
        self.surface = surface
        self.clock.start()
        self._frame_handle = self.scheduler.request_frame(self._on_frame)
        logger.info(f"Started on surface {surface_id!r} at speed {self.speed}")

    def stop(self) -> None:
        if self.surface is None and self._frame_handle is None:
            return
        self._cancel_frame()
        self.surface = None
        self.clock.stop()
        logger.info("Stopped")

    def set_speed(self, value) -> None:
        if not self.clock.set_speed(value):
            self._diagnose(f"set_speed ignored: {value!r} is not a finite number")

    def _on_frame(self, timestamp_ms: float) -> None:
        if self.surface is None or self.clock.state is not ClockState.RUNNING:
            return
        self._frame_handle = None
        self.clock.advance(timestamp_ms)
        self.frame_renderer.render(self.surface, self.clock.phase)
        self._frame_handle = self.scheduler.request_frame(self._on_frame)

    def _cancel_frame(self) -> None:
        if self._frame_handle is not None:
            self.scheduler.cancel_frame(self._frame_handle)
            self._frame_handle = None

    def _diagnose(self, message: str) -> None:
        logger.debug(message)
        if self.on_diagnostic is not None:
            self.on_diagnostic(message)
