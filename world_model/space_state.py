"""Space records decoded from yabai and the per-run layout snapshot."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import groupby

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter, ValidationError

from core.errors import YabaiConfigError, YabaiParseError


class SpaceRecord(BaseModel):
    """One entry of `yabai -m query --spaces`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: NonNegativeInt
    display: NonNegativeInt
    has_focus: bool = Field(alias="has-focus")
    is_visible: bool = Field(alias="is-visible")


_RECORDS = TypeAdapter(list[SpaceRecord])


@dataclass(frozen=True)
class SpaceSnapshot:
    """Space layout of every display, as seen at query time."""

    display_spaces: dict[int, list[int]]
    display_visible: dict[int, int]
    focused_display: int


def parse_space_records(raw: str) -> list[SpaceRecord]:
    """Decode yabai's JSON space list."""
    try:
        return _RECORDS.validate_json(raw)
    except ValidationError as exc:
        raise YabaiParseError(f"Parsing yabai output failed: {exc}") from exc


def build_snapshot(records: Iterable[SpaceRecord]) -> SpaceSnapshot:
    """Group records by display and check the focus/visibility invariants.

    yabai lists spaces display by display, so each display's records must
    form one contiguous run. A display that reappears later is treated as a
    broken layout rather than merged.
    """
    records = list(records)

    focused = [record for record in records if record.has_focus]
    if len(focused) != 1:
        raise YabaiConfigError(f"Expected exactly one focused space, found {len(focused)}.")

    display_spaces: dict[int, list[int]] = {}
    display_visible: dict[int, int] = {}
    for display, group in groupby(records, key=lambda record: record.display):
        if display in display_spaces:
            raise YabaiConfigError(f"Spaces of display {display} are not contiguous.")
        spaces = list(group)
        visible = [space for space in spaces if space.is_visible]
        if len(visible) != 1:
            raise YabaiConfigError(
                f"Expected exactly one visible space on display {display}, found {len(visible)}."
            )
        display_spaces[display] = [space.id for space in spaces]
        display_visible[display] = visible[0].id

    return SpaceSnapshot(
        display_spaces=display_spaces,
        display_visible=display_visible,
        focused_display=focused[0].display,
    )
