"""Error taxonomy for yabai-cycle-spaces."""

from __future__ import annotations


class YabaiCycleError(Exception):
    """Base class for every terminal error of one invocation."""


class YabaiExecutionError(YabaiCycleError):
    """yabai could not be started or exited with a failure status."""


class YabaiParseError(YabaiCycleError):
    """yabai output did not decode into space records."""


class YabaiConfigError(YabaiCycleError):
    """yabai reported an inconsistent space layout."""


class InvalidMoveError(YabaiCycleError):
    """The requested move cannot be applied to the current layout."""


class SettingsError(YabaiCycleError, ValueError):
    """The configuration file is unreadable or malformed."""
