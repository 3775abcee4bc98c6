from __future__ import annotations

from typing import Protocol

import pygame

from arbor.display.color import Color
from arbor.geometry import Vector2

BLACK = Color(r=0, g=0, b=0)


class Canvas(Protocol):
    """The drawing primitives the demos are allowed to use."""

    def begin_path(self) -> None: ...

    def set_stroke_color(self, color: Color) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def move_to(self, point: Vector2) -> None: ...

    def line_to(self, point: Vector2) -> None: ...

    def stroke(self) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...


class SurfaceCanvas:
    """Canvas-style path API on top of a pygame surface."""

    def __init__(self, surface: pygame.Surface, background: Color = BLACK) -> None:
        self.surface = surface
        self.background = background
        self._stroke_color = Color(r=255, g=255, b=255)
        self._line_width = 1.0
        self._path: list[tuple[float, float]] = []

    def begin_path(self) -> None:
        self._path = []

    def set_stroke_color(self, color: Color) -> None:
        self._stroke_color = color

    def set_line_width(self, width: float) -> None:
        self._line_width = width

    def move_to(self, point: Vector2) -> None:
        # pygame has no sub-paths; a move starts a fresh polyline
        self._path = [tuple(point)]

    def line_to(self, point: Vector2) -> None:
        self._path.append(tuple(point))

    def stroke(self) -> None:
        if len(self._path) < 2:
            return
        pygame.draw.lines(
            self.surface,
            self._stroke_color.tuple(),
            False,
            self._path,
            max(1, round(self._line_width)),
        )

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.surface.fill(self.background.tuple(), pygame.Rect(x, y, width, height))

    def clear(self) -> None:
        width, height = self.surface.get_size()
        self.clear_rect(0, 0, width, height)
