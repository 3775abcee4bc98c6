import random

import pygame
import pytest

from arbor.peripheral.controls import Control, ControlEvent
from arbor.peripheral.core.manager import PeripheralManager
from arbor.renderers.tree import Tree, TreeConfig, TreeStateProvider
from arbor.runtime.event_pump import EventPump
from arbor.runtime.game_loop import DisplaySettings, GameLoop

SETTINGS = DisplaySettings(window_size=(64, 64), max_fps=0)


class _CountdownPump:
    """Event pump stub that keeps the loop running for a fixed number of frames."""

    def __init__(self, frames: int) -> None:
        self.frames = frames

    def pump(self, running: bool) -> bool:
        if self.frames <= 0:
            return False
        self.frames -= 1
        return running


def _loop(manager: PeripheralManager, event_pump=None) -> GameLoop:
    config = TreeConfig(death_chance=0.0, detach_chance=0.0)
    renderer = Tree(builder=TreeStateProvider(manager, config, rng=random.Random(0)))
    return GameLoop(
        renderer=renderer,
        peripheral_manager=manager,
        event_pump=event_pump or EventPump(manager),
        settings=SETTINGS,
    )


class TestGameLoopBehavior:
    """Cover core GameLoop invariants so frames only run against a live display."""

    def test_one_loop_requires_initialized_screen(
        self, manager: PeripheralManager
    ) -> None:
        loop = _loop(manager)

        with pytest.raises(RuntimeError, match="screen is not initialized"):
            loop._one_loop()

    def test_initialize_renderer_requires_surfaces(
        self, manager: PeripheralManager
    ) -> None:
        loop = _loop(manager)

        with pytest.raises(RuntimeError, match="failed to initialize display surfaces"):
            loop.initialize_renderer()

    def test_set_screen_and_clock_publish_to_manager(
        self, manager: PeripheralManager
    ) -> None:
        """The window and clock become visible to providers as soon as they are set."""
        loop = _loop(manager)
        screen = pygame.Surface(SETTINGS.window_size)
        clock = pygame.time.Clock()

        loop.set_screen(screen)
        loop.set_clock(clock)

        assert manager.window.value is screen
        assert manager.clock.value is clock

    def test_one_loop_ticks_before_painting(self, manager: PeripheralManager) -> None:
        """Each frame delivers one tick, so autoplay advances the forest per frame."""
        loop = _loop(manager)
        loop.set_screen(pygame.Surface(SETTINGS.window_size))
        loop.set_clock(pygame.time.Clock())
        loop.initialize_renderer()
        manager.send(ControlEvent(Control.PLAY))

        loop._one_loop()
        loop._one_loop()

        assert loop.renderer.state.ticks == 2
        assert manager.game_tick.value == 1

    def test_one_loop_clears_previous_frame(self, manager: PeripheralManager) -> None:
        loop = _loop(manager)
        screen = pygame.Surface(SETTINGS.window_size)
        screen.fill((255, 0, 0))
        loop.set_screen(screen)
        loop.set_clock(pygame.time.Clock())
        loop.initialize_renderer()

        loop._one_loop()

        assert tuple(screen.get_at((0, 0)))[:3] == (0, 0, 0)

    def test_start_runs_until_pump_stops(self, manager: PeripheralManager) -> None:
        """start() opens the window, runs frames and tears down when asked to quit."""
        loop = _loop(manager, event_pump=_CountdownPump(frames=3))

        loop.start()

        assert loop.running is False
        assert manager.game_tick.value == 2
