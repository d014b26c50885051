"""Shared fixtures for the makedir test-suite."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from makedir.exceptions import ActionExecutionError
from makedir.invoker import CommandOutput


class RecordingInvoker:
    """Stand-in for :class:`makedir.invoker.SubprocessInvoker` that never spawns anything.

    Commands whose program name is listed in ``failing`` raise
    :class:`ActionExecutionError` with a fake stderr text.
    """

    def __init__(self, failing: Sequence[str] = ()):
        self.calls: list[tuple[Path, list[str]]] = []
        self.failing = set(failing)

    def invoke(self, cwd: Path, command: Sequence[str]) -> CommandOutput:
        args = list(command)
        self.calls.append((Path(cwd), args))
        if args[0] in self.failing:
            raise ActionExecutionError(f"Failed to execute: {' '.join(args)} in {cwd}", stderr = f"{args[0]}: boom\n")
        return CommandOutput(args = args)


@pytest.fixture(autouse = True)
def isolated_settings(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings lookup at a file that does not exist."""
    missing = tmp_path_factory.mktemp("settings") / "config.json"
    monkeypatch.setenv("MAKEDIR_CONFIG", str(missing))
    monkeypatch.delenv("MAKEDIR_LOG_LEVEL", raising = False)
    return missing


@pytest.fixture
def invoker() -> RecordingInvoker:
    return RecordingInvoker()


@pytest.fixture
def failing_git_invoker() -> RecordingInvoker:
    """An invoker on which every ``git`` command fails."""
    return RecordingInvoker(failing = ("git",))
