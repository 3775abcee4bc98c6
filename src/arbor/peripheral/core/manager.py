from functools import cached_property
from typing import Any

import reactivex
from reactivex.subject import Subject
from reactivex.subject.behaviorsubject import BehaviorSubject

from arbor.peripheral.controls import ControlEvent


class PeripheralManager:
    """Shared frame and input streams the state providers build on.

    ``game_tick``, ``window`` and ``clock`` replay their latest value to late
    subscribers and start out as ``None``; ``controls`` is hot and only
    delivers events emitted after subscription.
    """

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def window(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def clock(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def controls(self) -> reactivex.Subject[ControlEvent]:
        return Subject()

    def send(self, event: ControlEvent) -> None:
        self.controls.on_next(event)
