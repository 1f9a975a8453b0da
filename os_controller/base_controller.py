"""Base interface for space controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from world_model.space_state import SpaceRecord


class SpaceController(ABC):
    """Abstract window-manager space interface."""

    @abstractmethod
    def query_spaces(self) -> list[SpaceRecord]:
        """Return every space across all displays, in window-manager order."""

    @abstractmethod
    def focus_space(self, display: int, space_index: int) -> None:
        """Focus the space at a zero-based absolute index."""
