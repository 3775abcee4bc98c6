from dataclasses import dataclass
from typing import Iterator

import pygame


@dataclass(slots=True, frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for variant in self.tuple():
            assert variant >= 0 and variant <= 255, (
                f"Expected all color values to be between 0 and 255. Found {self.tuple()}"
            )

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Build a colour from a pygame colour name or ``#rrggbb`` string."""
        try:
            parsed = pygame.Color(value)
        except ValueError as exc:
            raise ValueError(f"Unknown color {value!r}") from exc
        return cls(r=parsed.r, g=parsed.g, b=parsed.b)

    @staticmethod
    def l_system_green() -> "Color":
        return Color(r=0, g=200, b=0)

    def tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tuple())

    def __getitem__(self, index: int) -> int:
        return self.tuple()[index]
