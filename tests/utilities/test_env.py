"""Tests for :mod:`arbor.utilities.env`."""

from __future__ import annotations

import pytest

from arbor.display.color import Color
from arbor.renderers.tree import TreeConfig
from arbor.utilities.env import Configuration

ENV_VARS = (
    "ARBOR_WINDOW_WIDTH",
    "ARBOR_WINDOW_HEIGHT",
    "ARBOR_MAX_FPS",
    "ARBOR_DEBUG",
    "ARBOR_TREE_BRANCH_MAX_WIDTH",
    "ARBOR_TREE_BRANCH_MAX_LENGTH",
    "ARBOR_TREE_BRANCHING_MIN_WIDTH",
    "ARBOR_TREE_BRANCH_COLOR",
    "ARBOR_TREE_DEAD_BRANCH_COLOR",
    "ARBOR_TREE_ANGLE_JITTER",
    "ARBOR_TREE_ANGLE_JITTER_MAX",
    "ARBOR_TREE_ANGLE_JITTER_STEP",
    "ARBOR_LSYSTEM_DISTANCE",
    "ARBOR_LSYSTEM_ANGLE_DEGREES",
    "ARBOR_LSYSTEM_MAX_GENERATION",
    "ARBOR_LSYSTEM_UPDATE_INTERVAL_MS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDisplayConfiguration:
    """Group display settings so the window comes up the same on every machine."""

    def test_defaults(self) -> None:
        assert Configuration.window_size() == (1000, 1000)
        assert Configuration.max_fps() == 60
        assert Configuration.is_debug_mode() is False

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARBOR_WINDOW_WIDTH", "640")
        monkeypatch.setenv("ARBOR_WINDOW_HEIGHT", "480")
        monkeypatch.setenv("ARBOR_MAX_FPS", "30")
        monkeypatch.setenv("ARBOR_DEBUG", "yes")

        assert Configuration.window_size() == (640, 480)
        assert Configuration.max_fps() == 30
        assert Configuration.is_debug_mode() is True

    def test_zero_width_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARBOR_WINDOW_WIDTH", "0")

        with pytest.raises(ValueError):
            Configuration.window_size()


class TestTreeConfiguration:
    """Tree tuning read from the environment feeds straight into TreeConfig."""

    def test_defaults_match_tree_config(self) -> None:
        """With no overrides the environment yields the stock tuning."""
        config = TreeConfig.from_configuration()

        assert config.branch_max_width == 1000
        assert config.branch_max_length == 10000
        assert config.branching_min_width == 20
        assert config.branch_color == Color(r=255, g=255, b=255)
        assert config.dead_branch_color == Color(r=190, g=190, b=190)
        assert config.angle_jitter == 1.0
        assert config.angle_jitter_max == 45.0

    def test_overrides_reach_tree_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARBOR_TREE_BRANCHING_MIN_WIDTH", "5")
        monkeypatch.setenv("ARBOR_TREE_BRANCH_COLOR", "#ff8800")
        monkeypatch.setenv("ARBOR_TREE_ANGLE_JITTER", "12.5")

        config = TreeConfig.from_configuration()

        assert config.branching_min_width == 5
        assert config.branch_color == Color(r=255, g=136, b=0)
        assert config.angle_jitter == 12.5

    def test_jitter_above_maximum_is_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ARBOR_TREE_ANGLE_JITTER_MAX", "10")
        monkeypatch.setenv("ARBOR_TREE_ANGLE_JITTER", "20")

        with pytest.raises(ValueError, match="at most 10"):
            Configuration.tree_angle_jitter()

    def test_unknown_color_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARBOR_TREE_BRANCH_COLOR", "not-a-colour")

        with pytest.raises(ValueError, match="Unknown color"):
            TreeConfig.from_configuration()


class TestLSystemConfiguration:
    def test_defaults(self) -> None:
        assert Configuration.l_system_distance() == 10.0
        assert Configuration.l_system_angle_degrees() == 30.0
        assert Configuration.l_system_max_generation() == 5
        assert Configuration.l_system_update_interval_ms() == 1000.0

    def test_negative_generation_cap_is_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ARBOR_LSYSTEM_MAX_GENERATION", "-1")

        with pytest.raises(ValueError):
            Configuration.l_system_max_generation()
