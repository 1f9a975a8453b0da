"""Turn a requested move into one focus target per display."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import InvalidMoveError, YabaiConfigError
from world_model.space_state import SpaceSnapshot

UNDERFLOW_POLICIES = ("wrap", "clamp", "reject")


@dataclass(frozen=True)
class SpaceMove:
    """Requested move: next, previous, or a fixed position."""

    kind: str
    index: int | None = None

    @classmethod
    def next(cls) -> SpaceMove:
        return cls("next")

    @classmethod
    def previous(cls) -> SpaceMove:
        return cls("previous")

    @classmethod
    def to(cls, index: int) -> SpaceMove:
        if index < 0:
            raise InvalidMoveError(f"Space index must be non-negative, got {index}.")
        return cls("index", index)


@dataclass(frozen=True)
class FocusTarget:
    """Zero-based absolute yabai space index to focus on a display."""

    display: int
    space_index: int


def current_position(snapshot: SpaceSnapshot) -> int:
    """Position of the focused display's visible space in its space list."""
    display = snapshot.focused_display
    try:
        visible = snapshot.display_visible[display]
        spaces = snapshot.display_spaces[display]
    except KeyError as exc:
        raise YabaiConfigError(f"Focused display {display} is missing from the layout.") from exc

    matches = [position for position, space in enumerate(spaces) if space == visible]
    if len(matches) != 1:
        raise YabaiConfigError(
            f"Visible space {visible} appears {len(matches)} times on display {display}."
        )
    return matches[0]


def step_position(position: int, move: SpaceMove, underflow: str = "wrap") -> int:
    """Apply a move to a position.

    The result may be out of range for a display; callers reduce it modulo
    each display's space count. Under "wrap", previous from 0 yields -1 so
    every display lands on its last space.
    """
    if underflow not in UNDERFLOW_POLICIES:
        raise InvalidMoveError(f"Unknown underflow policy: {underflow!r}.")

    if move.kind == "next":
        return position + 1
    if move.kind == "previous":
        if position > 0 or underflow == "wrap":
            return position - 1
        if underflow == "clamp":
            return 0
        raise InvalidMoveError("Already on the first space.")
    if move.kind == "index" and move.index is not None:
        return move.index
    raise InvalidMoveError(f"Unsupported move: {move!r}.")


def display_offset(snapshot: SpaceSnapshot, display: int) -> int:
    """Number of spaces on all displays ordered before `display`."""
    return sum(
        len(spaces) for other, spaces in snapshot.display_spaces.items() if other < display
    )


def resolve_targets(
    snapshot: SpaceSnapshot, move: SpaceMove, underflow: str = "wrap"
) -> list[FocusTarget]:
    """Compute the space to focus on every display.

    The same relative position is applied to every display. The focused
    display comes last so input focus ends where it started.
    """
    new_position = step_position(current_position(snapshot), move, underflow)

    order = sorted(
        snapshot.display_spaces,
        key=lambda display: (display == snapshot.focused_display, display),
    )
    targets: list[FocusTarget] = []
    for display in order:
        spaces = snapshot.display_spaces[display]
        if not spaces:
            raise YabaiConfigError(f"Display {display} has no spaces.")
        local = new_position % len(spaces)
        targets.append(FocusTarget(display, display_offset(snapshot, display) + local))
    return targets
