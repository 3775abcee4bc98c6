from typing import Annotated

import typer

from arbor import Demo
from arbor.runtime.container import build_runtime_container
from arbor.runtime.game_loop import DisplaySettings, GameLoop
from arbor.utilities.env import Configuration
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    demo: Annotated[Demo, typer.Argument(help="Which demo to run")] = Demo.TREE,
    width: int | None = typer.Option(
        None, "--width", min=1, help="Window width in pixels"
    ),
    height: int | None = typer.Option(
        None, "--height", min=1, help="Window height in pixels"
    ),
    max_fps: int | None = typer.Option(
        None, "--max-fps", min=0, help="Frame rate cap, 0 for uncapped"
    ),
) -> None:
    default_width, default_height = Configuration.window_size()
    settings = DisplaySettings(
        window_size=(width or default_width, height or default_height),
        max_fps=max_fps if max_fps is not None else Configuration.max_fps(),
        caption=f"arbor: {demo}",
    )
    logger.info("Running %s demo at %sx%s", demo, *settings.window_size)
    resolver = build_runtime_container(demo=demo, settings=settings)
    loop = resolver.resolve(GameLoop)
    loop.start()
