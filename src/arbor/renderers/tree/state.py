from dataclasses import dataclass

from arbor.geometry import Vector2
from arbor.renderers.tree.forest import Forest


@dataclass(frozen=True)
class TreeState:
    """Per-frame snapshot of the growth demo.

    ``forest`` is mutated in place by ticks; every other field changes only
    by producing a new state.
    """

    forest: Forest
    root_point: Vector2
    autoplay: bool = False
    zoom: int = 1
    angle_jitter: float = 1.0
    ticks: int = 0
    resets: int = 0
