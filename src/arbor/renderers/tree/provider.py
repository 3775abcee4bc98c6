from __future__ import annotations

import random
from dataclasses import replace
from typing import Callable

import reactivex
from reactivex import operators as ops

from arbor.geometry import Vector2
from arbor.peripheral.controls import Control, ControlEvent
from arbor.peripheral.core.manager import PeripheralManager
from arbor.peripheral.core.providers import ObservableProvider
from arbor.renderers.tree.config import TreeConfig
from arbor.renderers.tree.forest import Forest, UpdateOutcome
from arbor.renderers.tree.state import TreeState
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

StateOp = Callable[[TreeState], TreeState]


def root_point_for(window_size: tuple[int, int]) -> Vector2:
    width, height = window_size
    return Vector2(x=width / 2, y=float(height))


class TreeStateProvider(ObservableProvider[TreeState]):
    """Folds frame ticks and controls into growth states.

    Each reset seeds a new forest from the same generator, so a seeded
    provider replays the same sequence of trees.
    """

    def __init__(
        self,
        peripheral_manager: PeripheralManager,
        config: TreeConfig | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._peripheral_manager = peripheral_manager
        self._config = config or TreeConfig()

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def config(self) -> TreeConfig:
        return self._config

    def seed_forest(self, root_point: Vector2) -> Forest:
        return Forest.seeded(self._config, root_point, rng=self.rng)

    def initial_state(self, window_size: tuple[int, int]) -> TreeState:
        root_point = root_point_for(window_size)
        return TreeState(
            forest=self.seed_forest(root_point),
            root_point=root_point,
            angle_jitter=self._config.clamp_jitter(self._config.angle_jitter),
        )

    def tick_state(self, state: TreeState) -> TreeState:
        if not state.autoplay:
            return state
        return self.step_state(state)

    def step_state(self, state: TreeState) -> TreeState:
        outcome = state.forest.update(angle_jitter=state.angle_jitter)
        if outcome is UpdateOutcome.RESET:
            logger.info("Root branch died after %s ticks; reseeding", state.ticks)
            return self.reset_state(state)
        return replace(state, ticks=state.ticks + 1)

    def reset_state(self, state: TreeState) -> TreeState:
        return replace(
            state,
            forest=self.seed_forest(state.root_point),
            ticks=0,
            resets=state.resets + 1,
        )

    def apply_control(self, state: TreeState, event: ControlEvent) -> TreeState:
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
            case Control.ZOOM_IN:
                return self._zoom(state, max(1, state.zoom - 1))
            case Control.ZOOM_OUT:
                return self._zoom(state, state.zoom + 1)
            case Control.SET_ANGLE_JITTER:
                if event.value is None:
                    return state
                return self._jitter(state, event.value)
            case Control.JITTER_UP:
                return self._jitter(
                    state, state.angle_jitter + self._config.angle_jitter_step
                )
            case Control.JITTER_DOWN:
                return self._jitter(
                    state, state.angle_jitter - self._config.angle_jitter_step
                )
            case _:
                return state

    def observable(self) -> reactivex.Observable[TreeState]:
        def op_from_tick(_: object) -> StateOp:
            return self.tick_state

        def op_from_control(event: ControlEvent) -> StateOp:
            return lambda state: self.apply_control(state, event)

        window_sizes: reactivex.Observable[tuple[int, int]] = (
            self._peripheral_manager.window.pipe(
                ops.filter(lambda window: window is not None),
                ops.map(lambda window: window.get_size()),
                ops.distinct_until_changed(),
                ops.share(),
            )
        )

        initial_state: reactivex.Observable[TreeState] = window_sizes.pipe(
            ops.take(1),
            ops.map(self.initial_state),
        )

        operations: reactivex.Observable[StateOp] = reactivex.merge(
            self._peripheral_manager.game_tick.pipe(
                ops.filter(lambda tick: tick is not None),
                ops.map(op_from_tick),
            ),
            self._peripheral_manager.controls.pipe(
                ops.map(op_from_control),
            ),
        )

        return initial_state.pipe(
            ops.flat_map(
                lambda first_state: operations.pipe(
                    ops.scan(lambda acc, op: op(acc), seed=first_state),
                    ops.start_with(first_state),
                )
            ),
            ops.share(),
        )

    def _zoom(self, state: TreeState, zoom: int) -> TreeState:
        logger.debug("zoom level %s", zoom)
        return replace(state, zoom=zoom)

    def _jitter(self, state: TreeState, value: float) -> TreeState:
        jitter = self._config.clamp_jitter(value)
        logger.debug("angle jitter %s", jitter)
        return replace(state, angle_jitter=jitter)
