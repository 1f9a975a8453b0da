"""Query, resolve and apply one space move."""

from __future__ import annotations

import logging

from os_controller.base_controller import SpaceController
from planner.space_resolver import FocusTarget, SpaceMove, resolve_targets
from world_model.space_state import build_snapshot

logger = logging.getLogger("ycs.cycle")


def cycle_spaces(
    controller: SpaceController,
    move: SpaceMove,
    underflow: str = "wrap",
    dry_run: bool = False,
) -> list[FocusTarget]:
    """Move every display by `move` and return the targets chosen.

    Focus changes already applied are kept if a later one fails.
    """
    snapshot = build_snapshot(controller.query_spaces())
    logger.debug("Snapshot: %s", snapshot)

    targets = resolve_targets(snapshot, move, underflow=underflow)
    for target in targets:
        logger.info("selected space: %d", target.space_index)
        if not dry_run:
            controller.focus_space(target.display, target.space_index)
    return targets
