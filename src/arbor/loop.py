import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from arbor.cli.commands.generations import generations_command
from arbor.cli.commands.run import run_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="generations")(generations_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
