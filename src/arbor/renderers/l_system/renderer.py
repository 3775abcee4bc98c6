from __future__ import annotations

import pygame

from arbor.geometry import Vector2, radians
from arbor.renderers import StatefulBaseRenderer
from arbor.renderers.canvas import SurfaceCanvas
from arbor.renderers.l_system.provider import LSystemStateProvider
from arbor.renderers.l_system.state import LSystemState
from arbor.renderers.l_system.turtle import Turtle
from arbor.utilities.env import Configuration

# Upward in a y-down surface
INITIAL_HEADING = radians(270)
BOTTOM_MARGIN_FRACTION = 0.08


def turtle_origin(window_size: tuple[int, int]) -> Vector2:
    width, height = window_size
    return Vector2(x=width / 2, y=height * (1 - BOTTOM_MARGIN_FRACTION))


class LSystem(StatefulBaseRenderer[LSystemState]):
    def __init__(
        self,
        builder: LSystemStateProvider,
        distance: float | None = None,
        angle: float | None = None,
    ) -> None:
        super().__init__(builder=builder)
        self.distance = (
            distance if distance is not None else Configuration.l_system_distance()
        )
        self.angle = (
            angle
            if angle is not None
            else radians(Configuration.l_system_angle_degrees())
        )

    def real_process(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
    ) -> None:
        turtle = Turtle(
            canvas=SurfaceCanvas(window),
            position=turtle_origin(window.get_size()),
            heading=INITIAL_HEADING,
        )
        turtle.render(self.state.sentence, self.distance, self.angle)
