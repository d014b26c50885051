"""Top‑level package for *makedir*."""

from __future__ import annotations

from .actions import Action, resolve_action
from .classifier import classify, classify_token
from .exceptions import (ActionExecutionError, ConfigError, DirectoryCreationError, FileWriteError,
                         InvalidPermissionFormat, MakedirError, NoTargetsError, PermissionApplyError, UnknownFlag,
                         UsageError, )
from .models import ActionResult, DirectoryOutcome, InvocationPlan
from .processor import DirectoryProcessor

__version__ = "0.1.0"

__all__ = ["Action", "resolve_action", "classify", "classify_token", "InvocationPlan", "ActionResult",
        "DirectoryOutcome", "DirectoryProcessor", "MakedirError", "UsageError", "NoTargetsError", "ConfigError",
        "InvalidPermissionFormat", "DirectoryCreationError", "PermissionApplyError", "ActionExecutionError",
        "FileWriteError", "UnknownFlag", ]
