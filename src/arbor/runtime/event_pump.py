from __future__ import annotations

import pygame

from arbor.peripheral.controls import Control, ControlEvent
from arbor.peripheral.core.manager import PeripheralManager
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

KEY_CONTROLS: dict[int, Control] = {
    pygame.K_SPACE: Control.TOGGLE_AUTOPLAY,
    pygame.K_p: Control.PLAY,
    pygame.K_s: Control.STOP,
    pygame.K_r: Control.RESET,
    pygame.K_n: Control.STEP,
    pygame.K_RIGHT: Control.STEP,
    pygame.K_EQUALS: Control.ZOOM_IN,
    pygame.K_PLUS: Control.ZOOM_IN,
    pygame.K_KP_PLUS: Control.ZOOM_IN,
    pygame.K_MINUS: Control.ZOOM_OUT,
    pygame.K_KP_MINUS: Control.ZOOM_OUT,
    pygame.K_UP: Control.JITTER_UP,
    pygame.K_DOWN: Control.JITTER_DOWN,
}


class EventPump:
    """Process pygame events and forward them as control events."""

    def __init__(self, peripheral_manager: PeripheralManager) -> None:
        self._peripheral_manager = peripheral_manager

    def pump(self, running: bool) -> bool:
        for event in pygame.event.get():
            running = self.handle(event, running)
        return running

    def handle(self, event: pygame.event.Event, running: bool) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            control = KEY_CONTROLS.get(event.key)
            if control is not None:
                self._send(ControlEvent(control=control))
        elif event.type == pygame.MOUSEWHEEL:
            if event.y > 0:
                self._send(ControlEvent(control=Control.ZOOM_IN))
            elif event.y < 0:
                self._send(ControlEvent(control=Control.ZOOM_OUT))
        return running

    def _send(self, event: ControlEvent) -> None:
        logger.debug("control %s", event.control)
        self._peripheral_manager.send(event)
