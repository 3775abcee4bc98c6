from __future__ import annotations

from dataclasses import replace
from typing import Callable

import reactivex
from pygame.time import Clock
from reactivex import operators as ops

from arbor.peripheral.controls import Control, ControlEvent
from arbor.peripheral.core.manager import PeripheralManager
from arbor.peripheral.core.providers import ObservableProvider
from arbor.renderers.l_system.grammar import LSystemEngine
from arbor.renderers.l_system.state import LSystemState
from arbor.utilities.env import Configuration
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

StateOp = Callable[[LSystemState], LSystemState]


class LSystemStateProvider(ObservableProvider[LSystemState]):
    def __init__(
        self,
        peripheral_manager: PeripheralManager,
        engine: LSystemEngine | None = None,
        update_interval_ms: float | None = None,
        max_generation: int | None = None,
    ) -> None:
        self._peripheral_manager = peripheral_manager
        self._engine = engine or LSystemEngine()
        self._update_interval_ms = (
            update_interval_ms
            if update_interval_ms is not None
            else Configuration.l_system_update_interval_ms()
        )
        self._max_generation = (
            max_generation
            if max_generation is not None
            else Configuration.l_system_max_generation()
        )

    @property
    def engine(self) -> LSystemEngine:
        return self._engine

    def initial_state(self) -> LSystemState:
        return self._snapshot(LSystemState())

    def advance_state(self, state: LSystemState, *, dt_ms: float) -> LSystemState:
        if not state.autoplay:
            return state

        accumulated = state.time_since_last_update_ms + dt_ms
        while accumulated >= self._update_interval_ms:
            if not self._can_advance():
                logger.info(
                    "Autoplay stopped at generation %s", self._max_generation
                )
                accumulated = 0.0
                break
            self._engine.advance()
            accumulated -= self._update_interval_ms

        return self._snapshot(replace(state, time_since_last_update_ms=accumulated))

    def step_state(self, state: LSystemState) -> LSystemState:
        if not self._can_advance():
            logger.info(
                "Refusing to advance past generation %s", self._max_generation
            )
            return state
        self._engine.advance()
        return self._snapshot(state)

    def reset_state(self, state: LSystemState) -> LSystemState:
        self._engine = self._engine.restarted()
        return self._snapshot(replace(state, time_since_last_update_ms=0.0))

    def apply_control(self, state: LSystemState, event: ControlEvent) -> LSystemState:
        match event.control:
            case Control.PLAY:
                return replace(state, autoplay=True)
            case Control.STOP:
                return replace(state, autoplay=False)
            case Control.TOGGLE_AUTOPLAY:
                return replace(state, autoplay=not state.autoplay)
            case Control.STEP:
                return self.step_state(state)
            case Control.RESET:
                return self.reset_state(state)
            case _:
                return state

    def observable(self) -> reactivex.Observable[LSystemState]:
        clocks = self._peripheral_manager.clock.pipe(
            ops.filter(lambda clock: clock is not None),
            ops.share(),
        )

        def op_from_clock(clock: Clock) -> StateOp:
            dt_ms = float(clock.get_time())
            return lambda state: self.advance_state(state, dt_ms=dt_ms)

        def op_from_control(event: ControlEvent) -> StateOp:
            return lambda state: self.apply_control(state, event)

        operations: reactivex.Observable[StateOp] = reactivex.merge(
            self._peripheral_manager.game_tick.pipe(
                ops.filter(lambda tick: tick is not None),
                ops.with_latest_from(clocks),
                ops.map(lambda latest: op_from_clock(latest[1])),
            ),
            self._peripheral_manager.controls.pipe(
                ops.map(op_from_control),
            ),
        )

        initial_state = self.initial_state()
        return operations.pipe(
            ops.scan(lambda acc, op: op(acc), seed=initial_state),
            ops.start_with(initial_state),
            ops.share(),
        )

    def _can_advance(self) -> bool:
        return self._engine.generation < self._max_generation

    def _snapshot(self, state: LSystemState) -> LSystemState:
        return replace(
            state,
            sentence=self._engine.sentence,
            generation=self._engine.generation,
        )
