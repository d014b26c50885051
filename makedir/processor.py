"""Apply an :class:`~makedir.models.InvocationPlan` to the filesystem.

Targets are handled one after another in command-line order, and the
actions of a target one after another in flag order.  A failure is local:

* a target that cannot be created skips its own remaining steps only;
* a failed ``chmod`` or action is reported and the next step still runs.

Each failure prints exactly one diagnostic line.  Nothing here changes the
process exit code.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .actions import Action, build_command, DEFAULT_COMMANDS, resolve_action
from .exceptions import (ActionExecutionError, DirectoryCreationError, FileWriteError, PermissionApplyError,
                         UnknownFlag, )
from .file_generator import write_file
from .invoker import CommandInvoker, SubprocessInvoker
from .models import ActionResult, DirectoryOutcome, InvocationPlan
from .reporting import Reporter
from .templates import TEMPLATE_FILES

log = logging.getLogger(__name__)

Handler = Callable[[Action, Path, str], str]


class DirectoryProcessor:
    """Create every target of a plan and run its actions.

    Parameters
    ----------
    reporter:
        Where diagnostics are printed.
    invoker:
        Runs the external initializers; defaults to :class:`SubprocessInvoker`.
    commands:
        Per-action overrides of :data:`makedir.actions.DEFAULT_COMMANDS`.
    """

    def __init__(
            self, reporter: Reporter | None = None, invoker: CommandInvoker | None = None,
            commands: dict[Action, tuple[str, ...]] | None = None, ):
        self.reporter = reporter or Reporter()
        self.invoker = invoker or SubprocessInvoker()
        self.commands = dict(commands or {})
        self._handlers: dict[Action, Handler] = {}
        for action in DEFAULT_COMMANDS:
            self._handlers[action] = self._run_command
        for action in TEMPLATE_FILES:
            self._handlers[action] = self._write_template

    def process(self, plan: InvocationPlan) -> list[DirectoryOutcome]:
        """Return one outcome per target, in the same order as ``plan.targets``."""
        return [self.process_target(plan, target) for target in plan.targets]

    def process_target(self, plan: InvocationPlan, target: str) -> DirectoryOutcome:
        log.debug("Processing target %s", target)
        outcome = DirectoryOutcome(path = target)
        path = Path(target)

        try:
            outcome.created = self._ensure_directory(path, target, plan.verbose)
        except DirectoryCreationError as exc:
            self.reporter.error(f"Failed to create directory {target}:", str(exc))
            outcome.error = str(exc)
            return outcome

        if plan.permission is not None:
            try:
                self._apply_permission(path, target, plan.permission)
                outcome.permission_applied = True
                if plan.verbose:
                    self.reporter.success(f"Set permissions {plan.permission:o} on {target}")
            except PermissionApplyError as exc:
                self.reporter.error(f"Failed to set permissions {plan.permission:o} on {target}:", str(exc))

        for flag in plan.actions:
            outcome.action_results.append(self._dispatch(flag, path, target, plan.verbose))
        return outcome

    # ------------------------------------------------------------------
    # Filesystem steps
    # ------------------------------------------------------------------

    def _ensure_directory(self, path: Path, target: str, verbose: bool) -> bool:
        """Create *path* with its ancestors; return ``False`` if it already existed."""
        try:
            if path.is_dir():
                if verbose:
                    self.reporter.notice("Directory already exists:", target)
                return False
            if path.exists() or path.is_symlink():
                raise DirectoryCreationError("path exists and is not a directory")
            path.mkdir(parents = True, exist_ok = True)
        except OSError as exc:
            raise DirectoryCreationError(str(exc)) from exc

        if verbose:
            self.reporter.notice("Creating directory:", _display_path(path, target))
        return True

    def _apply_permission(self, path: Path, target: str, mode: int) -> None:
        log.debug("chmod %o %s", mode, target)
        try:
            os.chmod(path, mode)
        except OSError as exc:
            raise PermissionApplyError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Action dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, flag: str, path: Path, target: str, verbose: bool) -> ActionResult:
        action = resolve_action(flag)
        try:
            if action is None or action not in self._handlers:
                raise UnknownFlag(flag)
            message = self._handlers[action](action, path, target)
        except UnknownFlag as exc:
            self.reporter.error("Unknown flag:", flag)
            return ActionResult(flag = flag, ok = False, message = str(exc))
        except ActionExecutionError as exc:
            self.reporter.error(str(exc), exc.stderr.strip())
            return ActionResult(flag = flag, action = action, ok = False, message = str(exc))
        except (FileWriteError, OSError) as exc:
            self.reporter.error(str(exc))
            return ActionResult(flag = flag, action = action, ok = False, message = str(exc))

        if verbose:
            self.reporter.success(message)
        return ActionResult(flag = flag, action = action, ok = True, message = message)

    def _run_command(self, action: Action, path: Path, target: str) -> str:
        command = build_command(action, target, self.commands)
        self.invoker.invoke(path, command)
        return f"Successfully executed: {' '.join(command)} in {target}"

    def _write_template(self, action: Action, path: Path, target: str) -> str:
        filename, content = TEMPLATE_FILES[action]
        write_file(path / filename, content)
        return f"Successfully created {filename} in {target}."


def _display_path(path: Path, target: str) -> str:
    """Absolute form of *path*, or the literal *target* if it cannot be resolved."""
    try:
        return str(path.resolve(strict = True))
    except (OSError, RuntimeError):
        return target
