"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.runtime_config import load_effective_config
from os_controller.base_controller import SpaceController
from os_controller.yabai_controller import YabaiController


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    controller: SpaceController
    underflow: str


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.config_path)
        controller = YabaiController(executable=str(config["yabai"]["executable"]))
        return RuntimeBundle(
            config=config,
            controller=controller,
            underflow=str(config["cycle"]["previous_underflow"]),
        )
