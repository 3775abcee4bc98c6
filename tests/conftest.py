import os
import random
import tempfile
from collections import deque

# Loggers attach their file handlers at import time.
os.environ.setdefault("ARBOR_LOG_DIR", tempfile.mkdtemp(prefix="arbor-logs-"))

import pygame  # noqa: E402
import pytest  # noqa: E402
from helpers.canvas import RecordingCanvas  # noqa: E402
from hypothesis import HealthCheck, settings  # noqa: E402

from arbor.peripheral.core.manager import PeripheralManager  # noqa: E402
from arbor.renderers.tree.config import TreeConfig  # noqa: E402

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class _StubClock:
    def __init__(self, *times: int, default: int = 0) -> None:
        self._times: deque[int] = deque(times)
        self._default = default

    def get_time(self) -> int:
        if self._times:
            return self._times.popleft()
        return self._default


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture()
def manager() -> PeripheralManager:
    return PeripheralManager()


@pytest.fixture()
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def immortal_config() -> TreeConfig:
    """Tree tuning where nothing dies, falls off or branches."""

    return TreeConfig(death_chance=0.0, detach_chance=0.0, branch_chance=0.0)


@pytest.fixture()
def stub_clock_factory():
    def _factory(*times: int, **kwargs) -> _StubClock:
        return _StubClock(*times, **kwargs)

    return _factory
