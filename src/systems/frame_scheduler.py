"""Per-frame callback scheduling."""
import itertools
from abc import ABC, abstractmethod
from typing import Callable, Dict

FrameCallback = Callable[[float], None]


class FrameScheduler(ABC):
    """Runs callbacks once, on the next frame, with that frame's timestamp in ms."""

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> int:
        """Queue ``callback`` for the next frame and return a handle for cancelling it."""
        pass

    @abstractmethod
    def cancel_frame(self, handle: int) -> None:
        """Drop a queued callback. Unknown or already-run handles are ignored."""
        pass


class QueuedFrameScheduler(FrameScheduler):
    """Holds pending callbacks until ``run_pending`` is called with a frame timestamp."""

    def __init__(self) -> None:
        self._pending: Dict[int, FrameCallback] = {}
        self._handles = itertools.count(1)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = next(self._handles)
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def run_pending(self, now_ms: float) -> int:
        """Run callbacks queued before this call.

        Callbacks requested while running wait for the next frame. A callback
        cancelled by an earlier one in the same frame does not run.

        Returns:
            Number of callbacks run
        """
        ran = 0
        for handle in list(self._pending):
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback(now_ms)
            ran += 1
        return ran
