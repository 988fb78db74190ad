"""Frame-rate independent animation time."""
import logging
import math
from enum import Enum
from typing import Optional

from config.display_constants import DEFAULT_SPEED, MAX_FRAME_DELTA_S, MAX_SPEED, MIN_SPEED

logger = logging.getLogger(__name__)


class ClockState(Enum):
    UNSTARTED = "unstarted"
    RUNNING = "running"
    STOPPED = "stopped"


class AnimationClock:
    """Advances a phase scalar from wall-clock frame timestamps.

    Each tick adds ``min(elapsed, max_delta_s) * speed`` to the phase, so a
    long pause (a hidden window, a debugger stop) costs at most one
    ``max_delta_s`` step. The first tick after ``start()`` only records the
    baseline timestamp.
    """

    def __init__(self, speed: float = DEFAULT_SPEED, max_delta_s: float = MAX_FRAME_DELTA_S) -> None:
        self.state = ClockState.UNSTARTED
        self.phase = 0.0
        self.max_delta_s = max_delta_s
        self.last_timestamp_ms: Optional[float] = None
        self._speed = DEFAULT_SPEED
        self.set_speed(speed)

    @property
    def speed(self) -> float:
        return self._speed

    def set_speed(self, value) -> bool:
        """Store ``value`` clamped to the speed range.

        Returns False, leaving the speed unchanged, when value is not a finite number.
        """
        if value is None or isinstance(value, bool):
            return False
        try:
            v = float(value)
        except (TypeError, ValueError, OverflowError):
            return False
        if not math.isfinite(v):
            return False
        self._speed = max(MIN_SPEED, min(MAX_SPEED, v))
        return True

    def start(self) -> None:
        self.phase = 0.0
        self.last_timestamp_ms = None
        self.state = ClockState.RUNNING

    def stop(self) -> None:
        self.phase = 0.0
        self.last_timestamp_ms = None
        self.state = ClockState.STOPPED

    def advance(self, timestamp_ms: float) -> float:
        """Advance the phase to ``timestamp_ms`` and return the delta applied in seconds."""
        if self.state is not ClockState.RUNNING:
            return 0.0
        if self.last_timestamp_ms is None:
            self.last_timestamp_ms = timestamp_ms
            return 0.0
        delta_s = (timestamp_ms - self.last_timestamp_ms) / 1000.0
        self.last_timestamp_ms = timestamp_ms
        if delta_s > self.max_delta_s:
            logger.debug(f"Clamping frame delta {delta_s:.3f}s to {self.max_delta_s}s")
            delta_s = self.max_delta_s
        # Timestamps that run backwards never rewind the phase.
        delta_s = max(0.0, delta_s)
        self.phase += delta_s * self._speed
        return delta_s
