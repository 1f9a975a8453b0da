"""Typer command handlers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import typer

from core.cycle import cycle_spaces
from core.errors import YabaiCycleError
from core.orchestrator import Orchestrator, RuntimeBundle
from planner.space_resolver import SpaceMove

logger = logging.getLogger("ycs.cli")


def _runtime(config_path: Path | None = None) -> RuntimeBundle:
    return Orchestrator(config_path=config_path).build()


def _configure_logging(config: dict[str, Any], verbose: bool) -> None:
    level = "DEBUG" if verbose else str(config["logging"]["level"])
    logging.basicConfig(
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # no-op once root has handlers; the level still applies to our loggers.
    logging.getLogger("ycs").setLevel(level)


def select_move(next_space: bool, prev_space: bool, cycle_to: int | None) -> SpaceMove | None:
    """Map the mutually exclusive flags to a move, or None when none is set."""
    chosen = [next_space, prev_space, cycle_to is not None]
    if sum(chosen) > 1:
        raise typer.BadParameter("--next, --prev and --cycle-to are mutually exclusive.")
    if next_space:
        return SpaceMove.next()
    if prev_space:
        return SpaceMove.previous()
    if cycle_to is not None:
        return SpaceMove.to(cycle_to)
    return None


def cycle(
    move: SpaceMove | None,
    config_path: Path | None = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> None:
    """Apply one move to every display and report the spaces focused."""
    if move is None:
        return

    try:
        bundle = _runtime(config_path)
        _configure_logging(bundle.config, verbose)
        logger.debug("Applying %s (underflow=%s, dry_run=%s)", move, bundle.underflow, dry_run)
        targets = cycle_spaces(
            bundle.controller, move, underflow=bundle.underflow, dry_run=dry_run
        )
    except YabaiCycleError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for target in targets:
        typer.echo(f"display {target.display}: space {target.space_index + 1}")
