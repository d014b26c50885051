"""Data objects passed between the classifier, the processor and the CLI."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .actions import Action
from .exceptions import InvalidPermissionFormat


class InvocationPlan(BaseModel):
    """Structured view of one command line, built once and never mutated.

    ``actions`` holds the flags exactly as typed, duplicates included; they
    are resolved to :class:`~makedir.actions.Action` values at dispatch time.
    ``permission`` is ``None`` when the directory modes must be left alone.
    """

    model_config = ConfigDict(frozen = True, arbitrary_types_allowed = True)

    targets: tuple[str, ...] = ()
    actions: tuple[str, ...] = ()
    permission: int | None = None
    verbose: bool = False
    show_help: bool = False
    warnings: tuple[InvalidPermissionFormat, ...] = ()


class ActionResult(BaseModel):
    """Result of a single action flag against one target."""

    flag: str
    action: Action | None = None
    ok: bool
    message: str = ""


class DirectoryOutcome(BaseModel):
    """What happened to one target directory."""

    path: str
    created: bool = False
    permission_applied: bool = False
    error: str | None = Field(
            default = None, description = "Set when the target failed and its remaining steps were skipped.", )
    action_results: list[ActionResult] = Field(default_factory = list)

    @property
    def ok(self) -> bool:
        return self.error is None and all(r.ok for r in self.action_results)
