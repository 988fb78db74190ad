"""Drawable surface abstraction and its pygame implementation."""
from abc import ABC, abstractmethod
from typing import Tuple

import pygame
from pygame import Color

Point = Tuple[float, float]


class DrawingSurface(ABC):
    """Everything the frame renderer needs from a drawable target."""

    @abstractmethod
    def get_size(self) -> Tuple[int, int]:
        """Current size in device pixels."""
        pass

    @abstractmethod
    def resize_to_display_size(self) -> None:
        """Match the backing store to the displayed size."""
        pass

    @abstractmethod
    def clear(self, color: Color) -> None:
        pass

    @abstractmethod
    def draw_line(self, start: Point, end: Point, width: float, color: Color) -> None:
        pass

    @abstractmethod
    def draw_disc(self, center: Point, radius: float, color: Color) -> None:
        pass


class PygameSurface(DrawingSurface):
    """Draws onto a pygame surface, usually the display.

    With a pixel ratio above 1 frames are drawn to a larger backing store and
    scaled onto the target by ``present()``. pygame's primitives ignore alpha
    on an opaque surface, so translucent colors are blended over the last
    clear color before drawing.
    """

    def __init__(self, target: pygame.Surface, pixel_ratio: float = 1.0) -> None:
        self.target = target
        self.pixel_ratio = max(1.0, pixel_ratio)
        self.surface = target
        self._tracks_display = target is pygame.display.get_surface()
        self._background = Color(0, 0, 0)
        self.resize_to_display_size()

    def get_size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def resize_to_display_size(self) -> None:
        if self._tracks_display:
            display = pygame.display.get_surface()
            if display is not None:
                self.target = display
        if self.pixel_ratio == 1.0:
            self.surface = self.target
            return
        size = (max(1, int(self.target.get_width() * self.pixel_ratio)),
                max(1, int(self.target.get_height() * self.pixel_ratio)))
        if self.surface is self.target or self.surface.get_size() != size:
            self.surface = pygame.Surface(size)

    def present(self) -> None:
        """Copy the backing store onto the target when they differ."""
        if self.surface is not self.target:
            pygame.transform.smoothscale(self.surface, self.target.get_size(), self.target)

    def clear(self, color: Color) -> None:
        self._background = Color(color)
        self.surface.fill(self._background)

    def draw_line(self, start: Point, end: Point, width: float, color: Color) -> None:
        color = self._opaque(color)
        pygame.draw.line(self.surface, color, start, end, max(1, round(width)))
        # Round caps; flat ends leave notches where thick edges meet.
        if width > 2:
            pygame.draw.circle(self.surface, color, start, width / 2)
            pygame.draw.circle(self.surface, color, end, width / 2)

    def draw_disc(self, center: Point, radius: float, color: Color) -> None:
        pygame.draw.circle(self.surface, self._opaque(color), center, radius)

    def _opaque(self, color: Color) -> Color:
        color = Color(color)
        if color.a == 255:
            return color
        blended = self._background.lerp(color, color.a / 255)
        blended.a = 255
        return blended
