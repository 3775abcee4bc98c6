from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


@dataclass(slots=True, frozen=True)
class Vector2:
    """Immutable point or direction in world space (pixels, y grows downward)."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_radians(cls, angle: float) -> "Vector2":
        return cls(x=math.cos(angle), y=math.sin(angle))

    @staticmethod
    def sum(*vectors: "Vector2") -> "Vector2":
        x = 0.0
        y = 0.0
        for vector in vectors:
            x += vector.x
            y += vector.y
        return Vector2(x=x, y=y)

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(x=self.x * scalar, y=self.y * scalar)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(x=self.x + other.x, y=self.y + other.y)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
