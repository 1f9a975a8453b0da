"""CLI entrypoint for yabai-cycle-spaces."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import typer

from ui.cli import commands

PROG_NAME = "yabai-cycle-spaces"

app = typer.Typer(help="A command line to switch spaces in yabai", add_completion=False)


def _version() -> str:
    try:
        return version(PROG_NAME)
    except PackageNotFoundError:
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {_version()}")
        raise typer.Exit()


@app.command()
def cycle_cmd(
    next_space: bool = typer.Option(False, "--next", "-n", help="Focus the next space."),
    prev_space: bool = typer.Option(False, "--prev", "-p", help="Focus the previous space."),
    cycle_to: int | None = typer.Option(
        None, "--cycle-to", metavar="INDEX", min=0, help="Focus the space at a zero-based index."
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print targets without focusing."),
    config: Path | None = typer.Option(
        None, "--config", dir_okay=False, help="Path to a YAML config file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version_flag: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Switch every display to the next, previous, or a given space."""
    move = commands.select_move(next_space, prev_space, cycle_to)
    commands.cycle(move, config_path=config, dry_run=dry_run, verbose=verbose)


def main() -> None:
    """Console script entrypoint."""
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
