"""Canonical scaffolding actions and the spellings that select them.

The classifier keeps action flags exactly as typed; they are looked up in
:data:`ACTION_ALIASES` only at dispatch time so that an unknown flag is
reported once per occurrence instead of aborting argument parsing.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Action(str, Enum):
    """A named scaffolding operation executed against one target."""

    GIT = "git"
    README = "readme"
    LICENSE = "license"
    DOCKER = "docker"
    GO = "go"
    CARGO = "cargo"
    NPM = "npm"
    BUN = "bun"
    YARN = "yarn"
    PNPM = "pnpm"
    DENO = "deno"


ACTION_ALIASES: dict[str, Action] = {"--git": Action.GIT, "-g": Action.GIT, "--readme": Action.README,
        "-r": Action.README, "--license": Action.LICENSE, "-l": Action.LICENSE, "--docker": Action.DOCKER,
        "-do": Action.DOCKER, "--go": Action.GO, "-go": Action.GO, "--cargo": Action.CARGO, "-c": Action.CARGO,
        "--npm": Action.NPM, "-n": Action.NPM, "--bun": Action.BUN, "-b": Action.BUN, "--yarn": Action.YARN,
        "-y": Action.YARN, "--pnpm": Action.PNPM, "-p": Action.PNPM, "--deno": Action.DENO, "-d": Action.DENO, }

# Actions that spawn an external initializer inside the target.  ``go`` is
# completed with the module name at dispatch time.
DEFAULT_COMMANDS: dict[Action, tuple[str, ...]] = {Action.GIT: ("git", "init"), Action.GO: ("go", "mod", "init"),
        Action.CARGO: ("cargo", "init"), Action.NPM: ("npm", "init", "-y"), Action.BUN: ("bun", "init", "-y"),
        Action.YARN: ("yarn", "init", "-y"), Action.PNPM: ("pnpm", "init"), }


def resolve_action(flag: str) -> Action | None:
    """Return the canonical action for *flag*, or ``None`` if it is unknown."""
    return ACTION_ALIASES.get(flag)


def is_command_action(action: Action) -> bool:
    return action in DEFAULT_COMMANDS


def build_command(
        action: Action, target: str | Path, commands: dict[Action, tuple[str, ...]] | None = None, ) -> list[str]:
    """Return the argv used to run *action* inside *target*.

    ``commands`` overrides :data:`DEFAULT_COMMANDS` per action.  The Go
    initializer is parameterized by the target directory's own name.
    """
    table = {**DEFAULT_COMMANDS, **(commands or {})}
    if action not in table:
        raise KeyError(f"{action.value} does not run an external command")
    argv = list(table[action])
    if action is Action.GO:
        argv.append(module_name(target))
    return argv


def module_name(target: str | Path) -> str:
    """Name of the target directory, resolving ``.`` and ``..`` when needed."""
    path = Path(target)
    if path.name in ("", ".."):
        path = path.resolve()
    return path.name
