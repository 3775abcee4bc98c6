from __future__ import annotations

from dataclasses import dataclass, field

from arbor.display.color import Color
from arbor.utilities.env import Configuration


@dataclass(frozen=True)
class TreeConfig:
    """Fixed tuning for one growth session.

    Widths and lengths are in pixels at zoom level 1, angles in degrees and
    chances are per-tick probabilities.
    """

    branch_max_width: float = 1000.0
    branch_max_length: float = 10000.0
    branching_min_width: float = 20.0
    branch_color: Color = field(default_factory=lambda: Color(r=255, g=255, b=255))
    dead_branch_color: Color = field(
        default_factory=lambda: Color(r=190, g=190, b=190)
    )
    children_per_branching: int = 2
    branch_angle_degrees: float = 22.5
    angle_jitter: float = 1.0
    angle_jitter_max: float = 45.0
    angle_jitter_step: float = 1.0
    death_chance: float = 0.0001
    detach_chance: float = 0.00001
    branch_chance: float = 0.05
    growth_step: float = 10.0
    width_step: float = 1.0

    def __post_init__(self) -> None:
        for name in (
            "branch_max_width",
            "branch_max_length",
            "branching_min_width",
            "angle_jitter",
            "angle_jitter_max",
            "angle_jitter_step",
            "growth_step",
            "width_step",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        for name in ("death_chance", "detach_chance", "branch_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        if self.children_per_branching < 1:
            raise ValueError("children_per_branching must be at least 1")

    @classmethod
    def from_configuration(cls) -> "TreeConfig":
        return cls(
            branch_max_width=float(Configuration.tree_branch_max_width()),
            branch_max_length=float(Configuration.tree_branch_max_length()),
            branching_min_width=float(Configuration.tree_branching_min_width()),
            branch_color=Color.parse(Configuration.tree_branch_color()),
            dead_branch_color=Color.parse(Configuration.tree_dead_branch_color()),
            angle_jitter=Configuration.tree_angle_jitter(),
            angle_jitter_max=Configuration.tree_angle_jitter_max(),
            angle_jitter_step=Configuration.tree_angle_jitter_step(),
        )

    def clamp_jitter(self, value: float) -> float:
        return min(self.angle_jitter_max, max(0.0, value))
