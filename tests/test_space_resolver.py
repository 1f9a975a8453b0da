"""Tests for computing focus targets from a snapshot."""

from __future__ import annotations

import pytest

from core.errors import InvalidMoveError, YabaiConfigError
from planner.space_resolver import (
    FocusTarget,
    SpaceMove,
    current_position,
    display_offset,
    resolve_targets,
    step_position,
)
from world_model.space_state import SpaceSnapshot


def _single(visible: int = 20) -> SpaceSnapshot:
    return SpaceSnapshot(
        display_spaces={1: [10, 20, 30]},
        display_visible={1: visible},
        focused_display=1,
    )


def _dual() -> SpaceSnapshot:
    return SpaceSnapshot(
        display_spaces={1: [1, 2], 2: [3, 4, 5]},
        display_visible={1: 1, 2: 3},
        focused_display=1,
    )


def test_next_moves_one_space_forward() -> None:
    assert resolve_targets(_single(), SpaceMove.next()) == [FocusTarget(1, 2)]


def test_previous_moves_one_space_back() -> None:
    assert resolve_targets(_single(), SpaceMove.previous()) == [FocusTarget(1, 0)]


def test_next_on_last_space_wraps_to_first() -> None:
    assert resolve_targets(_single(visible=30), SpaceMove.next()) == [FocusTarget(1, 0)]


def test_explicit_index_ignores_current_space() -> None:
    for visible in (10, 20, 30):
        assert resolve_targets(_single(visible), SpaceMove.to(2)) == [FocusTarget(1, 2)]


def test_explicit_index_is_reduced_modulo_space_count() -> None:
    assert resolve_targets(_single(), SpaceMove.to(4)) == [FocusTarget(1, 1)]


def test_negative_explicit_index_is_rejected() -> None:
    with pytest.raises(InvalidMoveError):
        SpaceMove.to(-1)


def test_previous_at_first_space_wraps_by_default() -> None:
    assert step_position(0, SpaceMove.previous()) == -1
    assert resolve_targets(_single(visible=10), SpaceMove.previous()) == [FocusTarget(1, 2)]


def test_previous_at_first_space_clamps() -> None:
    targets = resolve_targets(_single(visible=10), SpaceMove.previous(), underflow="clamp")
    assert targets == [FocusTarget(1, 0)]


def test_previous_at_first_space_rejects() -> None:
    with pytest.raises(InvalidMoveError, match="first space"):
        resolve_targets(_single(visible=10), SpaceMove.previous(), underflow="reject")


def test_policy_only_matters_at_first_space() -> None:
    for policy in ("wrap", "clamp", "reject"):
        assert step_position(2, SpaceMove.previous(), policy) == 1


def test_unknown_policy_is_rejected() -> None:
    with pytest.raises(InvalidMoveError, match="policy"):
        step_position(1, SpaceMove.next(), "bounce")


def test_current_position_requires_a_single_match() -> None:
    missing = SpaceSnapshot({1: [10, 20]}, {1: 99}, 1)
    duplicated = SpaceSnapshot({1: [10, 20, 10]}, {1: 10}, 1)

    with pytest.raises(YabaiConfigError):
        current_position(missing)
    with pytest.raises(YabaiConfigError):
        current_position(duplicated)


def test_current_position_requires_known_focused_display() -> None:
    snapshot = SpaceSnapshot({1: [10]}, {1: 10}, 2)
    with pytest.raises(YabaiConfigError, match="missing"):
        current_position(snapshot)


def test_display_offset_counts_lower_displays() -> None:
    snapshot = _dual()
    assert display_offset(snapshot, 1) == 0
    assert display_offset(snapshot, 2) == 2


def test_two_displays_move_together_and_focused_display_goes_last() -> None:
    targets = resolve_targets(_dual(), SpaceMove.next())

    # display 2: offset 2 + (1 % 3); display 1: offset 0 + (1 % 2)
    assert targets == [FocusTarget(2, 3), FocusTarget(1, 1)]


def test_two_displays_previous_wraps_each_display_to_its_last_space() -> None:
    targets = resolve_targets(_dual(), SpaceMove.previous())
    assert targets == [FocusTarget(2, 4), FocusTarget(1, 1)]


def test_display_without_spaces_is_a_config_error() -> None:
    snapshot = SpaceSnapshot({1: [10], 2: []}, {1: 10}, 1)
    with pytest.raises(YabaiConfigError, match="no spaces"):
        resolve_targets(snapshot, SpaceMove.next())
