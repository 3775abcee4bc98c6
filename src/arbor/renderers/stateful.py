from __future__ import annotations

from typing import Generic

import pygame
from reactivex.disposable import Disposable

from arbor.peripheral.core.manager import PeripheralManager
from arbor.peripheral.core.providers import ObservableProvider
from arbor.renderers.atomic import AtomicBaseRenderer, StateT
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


class StatefulBaseRenderer(AtomicBaseRenderer[StateT], Generic[StateT]):
    """Renderer whose state follows a provider's observable."""

    def __init__(
        self,
        builder: ObservableProvider[StateT],
        *args,
        **kwargs,
    ) -> None:
        self.builder = builder
        self._subscription: Disposable | None = None
        super().__init__(*args, **kwargs)

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        peripheral_manager: PeripheralManager,
    ) -> None:
        logger.info("Subscribing %s to its state provider", self.name)
        self._subscription = self.builder.observable().subscribe(
            on_next=self.set_state
        )
        if self.warmup:
            self.process(window, clock, peripheral_manager)
        self.initialized = True

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        super().reset()
