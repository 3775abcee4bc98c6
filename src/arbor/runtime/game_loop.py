from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any

import pygame

from arbor.peripheral.core.manager import PeripheralManager
from arbor.renderers import StatefulBaseRenderer
from arbor.renderers.canvas import SurfaceCanvas
from arbor.runtime.event_pump import EventPump
from arbor.utilities.env import Configuration
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DisplaySettings:
    window_size: tuple[int, int]
    max_fps: int
    caption: str = "arbor"

    @classmethod
    def from_configuration(cls, caption: str = "arbor") -> "DisplaySettings":
        return cls(
            window_size=Configuration.window_size(),
            max_fps=Configuration.max_fps(),
            caption=caption,
        )


class GameLoop:
    """Frame driver: tick the state providers, then clear and repaint.

    Ticks are delivered synchronously through ``PeripheralManager.game_tick``,
    so every state update for a frame lands before that frame is rendered.
    """

    def __init__(
        self,
        renderer: StatefulBaseRenderer[Any],
        peripheral_manager: PeripheralManager,
        event_pump: EventPump,
        settings: DisplaySettings,
    ) -> None:
        self.renderer = renderer
        self.peripheral_manager = peripheral_manager
        self.event_pump = event_pump
        self.settings = settings
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.running = False
        self._frames = itertools.count()

    def start(self) -> None:
        logger.info("Starting GameLoop")
        self._initialize()
        self.running = True
        logger.info("Entering main loop.")
        try:
            self._run_main_loop()
        finally:
            self.renderer.reset()
            pygame.quit()

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.peripheral_manager.window.on_next(screen)

    def set_clock(self, clock: pygame.time.Clock) -> None:
        self.clock = clock
        self.peripheral_manager.clock.on_next(clock)

    def initialize_renderer(self) -> None:
        if self.screen is None or self.clock is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")
        self.renderer.initialize(self.screen, self.clock, self.peripheral_manager)

    def _initialize(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode(self.settings.window_size)
        pygame.display.set_caption(self.settings.caption)
        self.set_screen(screen)
        self.set_clock(pygame.time.Clock())
        self.initialize_renderer()

    def _one_loop(self) -> None:
        if self.screen is None or self.clock is None:
            raise RuntimeError("GameLoop screen is not initialized")
        self.peripheral_manager.game_tick.on_next(next(self._frames))
        SurfaceCanvas(self.screen).clear()
        self.renderer._internal_process(
            self.screen, self.clock, self.peripheral_manager
        )

    def _run_main_loop(self) -> None:
        if self.clock is None:
            raise RuntimeError("GameLoop failed to initialize display clock")
        clock = self.clock
        while self.running:
            self.running = self.event_pump.pump(self.running)
            if not self.running:
                break
            self._one_loop()
            pygame.display.flip()
            clock.tick(self.settings.max_fps)
