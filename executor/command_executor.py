"""Command execution wrapper."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence

CommandRunner = Callable[[Sequence[str]], tuple[int, str, str]]


def run_command(command: Sequence[str]) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr).

    Output bytes that are not valid UTF-8 are replaced, not rejected.
    """
    proc = subprocess.run(
        list(command),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    return proc.returncode, proc.stdout, proc.stderr
