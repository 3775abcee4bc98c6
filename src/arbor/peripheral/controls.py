from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Control(StrEnum):
    PLAY = "play"
    STOP = "stop"
    TOGGLE_AUTOPLAY = "toggle_autoplay"
    STEP = "step"
    RESET = "reset"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    SET_ANGLE_JITTER = "set_angle_jitter"
    JITTER_UP = "jitter_up"
    JITTER_DOWN = "jitter_down"


@dataclass(frozen=True)
class ControlEvent:
    control: Control
    value: float | None = None

    @classmethod
    def angle_jitter(cls, value: float) -> "ControlEvent":
        return cls(control=Control.SET_ANGLE_JITTER, value=float(value))
