from __future__ import annotations

import math
from dataclasses import dataclass, field

from arbor.display.color import Color
from arbor.geometry import Vector2
from arbor.renderers.canvas import Canvas

DEFAULT_DISTANCE = 10.0
DEFAULT_ANGLE = math.pi / 6

DRAW = "F"
MOVE = "G"
ROTATE_POSITIVE = "+"
ROTATE_NEGATIVE = "-"
PUSH = "["
POP = "]"


@dataclass(frozen=True)
class SavedCursor:
    position: Vector2
    heading: float


@dataclass
class Turtle:
    """Cursor that walks a sentence and draws it onto a canvas.

    State survives between :meth:`render` calls; build a new turtle for a
    fresh pass.
    """

    canvas: Canvas
    position: Vector2 = field(default_factory=Vector2)
    heading: float = 0.0
    stack: list[SavedCursor] = field(default_factory=list)
    color: Color = field(default_factory=Color.l_system_green)

    def rotate(self, angle: float) -> None:
        self.heading += angle

    def forward(self, distance: float) -> None:
        self.position = self.position + self._step(distance)

    def draw(self, distance: float) -> None:
        start = self.position
        end = start + self._step(distance)
        self.canvas.begin_path()
        self.canvas.set_stroke_color(self.color)
        self.canvas.move_to(start)
        self.canvas.line_to(end)
        self.canvas.stroke()

    def push(self) -> None:
        self.stack.append(SavedCursor(position=self.position, heading=self.heading))

    def pop(self) -> None:
        if not self.stack:
            return
        saved = self.stack.pop()
        self.position = saved.position
        self.heading = saved.heading

    def render(
        self,
        sentence: str,
        distance: float = DEFAULT_DISTANCE,
        angle: float = DEFAULT_ANGLE,
    ) -> None:
        for symbol in sentence:
            if symbol == DRAW:
                self.draw(distance)
                self.forward(distance)
            elif symbol == MOVE:
                self.forward(distance)
            elif symbol == ROTATE_POSITIVE:
                self.rotate(angle)
            elif symbol == ROTATE_NEGATIVE:
                self.rotate(-angle)
            elif symbol == PUSH:
                self.push()
            elif symbol == POP:
                self.pop()

    def _step(self, distance: float) -> Vector2:
        return Vector2.from_radians(self.heading).scale(distance)
