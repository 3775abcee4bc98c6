from __future__ import annotations

from typing import Any, Mapping

from lagom import Singleton

from arbor import Demo
from arbor.peripheral.core.manager import PeripheralManager
from arbor.renderers.l_system import LSystem, LSystemStateProvider
from arbor.renderers.tree import Tree, TreeConfig, TreeStateProvider
from arbor.runtime.container import RuntimeContainer
from arbor.runtime.event_pump import EventPump
from arbor.runtime.game_loop import DisplaySettings, GameLoop
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


def _build_tree_config(_: RuntimeContainer) -> TreeConfig:
    return TreeConfig.from_configuration()


def _build_tree_state_provider(resolver: RuntimeContainer) -> TreeStateProvider:
    return TreeStateProvider(
        peripheral_manager=resolver[PeripheralManager],
        config=resolver[TreeConfig],
    )


def _build_l_system_state_provider(
    resolver: RuntimeContainer,
) -> LSystemStateProvider:
    return LSystemStateProvider(peripheral_manager=resolver[PeripheralManager])


def _build_tree(resolver: RuntimeContainer) -> Tree:
    return Tree(builder=resolver[TreeStateProvider])


def _build_l_system(resolver: RuntimeContainer) -> LSystem:
    return LSystem(builder=resolver[LSystemStateProvider])


def _build_event_pump(resolver: RuntimeContainer) -> EventPump:
    return EventPump(resolver[PeripheralManager])


def _build_game_loop(resolver: RuntimeContainer) -> GameLoop:
    demo = resolver[Demo]
    renderer = resolver[Tree] if demo is Demo.TREE else resolver[LSystem]
    return GameLoop(
        renderer=renderer,
        peripheral_manager=resolver[PeripheralManager],
        event_pump=resolver[EventPump],
        settings=resolver[DisplaySettings],
    )


def build_runtime_container(
    demo: Demo,
    settings: DisplaySettings | None = None,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = RuntimeContainer()
    logger.debug(
        "Configuring Lagom runtime container for %s with overrides=%s.",
        demo,
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, Demo, demo)
    _bind(
        container,
        overrides,
        DisplaySettings,
        settings or DisplaySettings.from_configuration(caption=f"arbor: {demo}"),
    )
    _bind(container, overrides, PeripheralManager, Singleton(PeripheralManager))
    _bind(container, overrides, TreeConfig, Singleton(_build_tree_config))
    _bind(
        container, overrides, TreeStateProvider, Singleton(_build_tree_state_provider)
    )
    _bind(
        container,
        overrides,
        LSystemStateProvider,
        Singleton(_build_l_system_state_provider),
    )
    _bind(container, overrides, Tree, Singleton(_build_tree))
    _bind(container, overrides, LSystem, Singleton(_build_l_system))
    _bind(container, overrides, EventPump, Singleton(_build_event_pump))
    _bind(container, overrides, GameLoop, Singleton(_build_game_loop))
    return container


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
