"""Time provider abstraction for testability."""
from abc import ABC, abstractmethod
import pygame


class TimeProvider(ABC):
    """Abstract source of frame timestamps."""

    @abstractmethod
    def get_ticks(self) -> int:
        """Get current time in milliseconds.

        Returns:
            Milliseconds since initialization
        """
        pass

    def get_seconds(self) -> float:
        """Get current time in seconds."""
        return self.get_ticks() / 1000.0


class SystemTimeProvider(TimeProvider):
    """Production time provider using the pygame clock."""

    def get_ticks(self) -> int:
        return pygame.time.get_ticks()


class MockTimeProvider(TimeProvider):
    """Test time provider with controllable time."""

    def __init__(self, initial_ms: int = 0):
        self._current_ms = initial_ms

    def get_ticks(self) -> int:
        return self._current_ms

    def advance(self, ms: int) -> None:
        """Advance time by specified milliseconds."""
        self._current_ms += ms

    def set_time(self, ms: int) -> None:
        """Set absolute time in milliseconds."""
        self._current_ms = ms
