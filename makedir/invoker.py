"""Running external initializers (``git init``, ``npm init -y`` ...).

The processor only sees the :class:`CommandInvoker` protocol, so tests can
pass a recorder instead of spawning real tools.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from .exceptions import ActionExecutionError

log = logging.getLogger(__name__)


class CommandOutput(BaseModel):
    """Captured output of a successful command."""

    args: list[str]
    stdout: str = ""
    stderr: str = ""


class CommandInvoker(Protocol):
    def invoke(self, cwd: Path, command: Sequence[str]) -> CommandOutput:
        """Run *command* inside *cwd*, raising ActionExecutionError on failure."""
        ...


class SubprocessInvoker:
    """Run commands synchronously with :func:`subprocess.run`.

    No shell is involved, the environment is inherited unchanged and no
    timeout is applied.
    """

    def invoke(self, cwd: Path, command: Sequence[str]) -> CommandOutput:
        args = list(command)
        log.debug("Running %s in %s", args, cwd)
        try:
            result = subprocess.run(args, cwd = cwd, capture_output = True, text = True, )
        except OSError as exc:
            raise ActionExecutionError(f"Error running: {' '.join(args)} in {cwd}: {exc}") from exc

        if result.returncode != 0:
            log.debug("%s exited with %d", args[0], result.returncode)
            raise ActionExecutionError(
                    f"Failed to execute: {' '.join(args)} in {cwd} (exit code {result.returncode})",
                    stderr = result.stderr, )
        return CommandOutput(args = args, stdout = result.stdout, stderr = result.stderr)
