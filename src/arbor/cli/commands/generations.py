import typer

from arbor.renderers.l_system.grammar import GenerationLog, LSystemEngine


def generations_command(
    count: int = typer.Option(
        3, "--count", min=0, max=8, help="Number of rewrite passes to apply"
    ),
) -> None:
    """Print each L-system generation, newest first."""
    generation_log = GenerationLog()
    engine = LSystemEngine(generation_log=generation_log)
    for _ in range(count):
        engine.advance()
    for line in generation_log.entries:
        typer.echo(line)
