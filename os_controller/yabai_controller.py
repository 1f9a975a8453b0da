"""Space controller backed by the yabai CLI."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from core.errors import YabaiExecutionError
from executor.command_executor import CommandRunner, run_command
from os_controller.base_controller import SpaceController
from world_model.space_state import SpaceRecord, parse_space_records


class YabaiController(SpaceController):
    """Talks to yabai through `yabai -m ...` subprocess calls."""

    def __init__(self, executable: str = "yabai", runner: CommandRunner = run_command) -> None:
        self.executable = executable
        self.runner = runner
        self.logger = logging.getLogger("ycs.yabai")

    def _run(self, *args: str) -> str:
        command: Sequence[str] = [self.executable, "-m", *args]
        self.logger.debug("Running %s", " ".join(command))
        try:
            code, stdout, stderr = self.runner(command)
        except OSError as exc:
            raise YabaiExecutionError(f"yabai executable failed: {exc}") from exc
        if code != 0:
            detail = stderr.strip() or "no output"
            raise YabaiExecutionError(
                f"yabai {' '.join(args)} exited with status {code}: {detail}"
            )
        return stdout

    def query_spaces(self) -> list[SpaceRecord]:
        return parse_space_records(self._run("query", "--spaces"))

    def focus_space(self, display: int, space_index: int) -> None:
        self.logger.debug("Focusing space %d for display %d", space_index + 1, display)
        self._run("space", "--focus", str(space_index + 1))
