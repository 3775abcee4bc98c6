from __future__ import annotations

from dataclasses import dataclass, field

from arbor.geometry import Vector2, radians

# Straight up in a y-down surface
DEFAULT_ROTATION = radians(270)


@dataclass
class Branch:
    id: int
    root: Vector2 = field(default_factory=Vector2)
    width: float = 1.0
    length: float = 1.0
    rotation: float = DEFAULT_ROTATION
    parent: int | None = None
    children: list[int] = field(default_factory=list)
    generation: int = 0
    alive: bool = True

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def end_point(self, zoom: float = 1.0) -> Vector2:
        return self.end_from(self.root, zoom)

    def end_from(self, start: Vector2, zoom: float = 1.0) -> Vector2:
        heading = Vector2.from_radians(self.rotation).scale(self.length * (1 / zoom))
        return Vector2.sum(start, heading)
