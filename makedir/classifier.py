"""Turn the raw command line into an :class:`~makedir.models.InvocationPlan`.

Each token falls into exactly one kind, decided by looking at its first
one or two characters:

* ``-`` followed by a digit is a permission (``-755``);
* ``--verbose``/``-v`` and ``--help``/``-h`` are switches;
* ``--`` ends flag parsing, every later token is a target path;
* any other ``-`` token is an action flag, kept verbatim;
* everything else is a target path.

Classification never touches the filesystem and never rejects an action
flag; unknown flags are reported later, per occurrence, by the processor.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .exceptions import InvalidPermissionFormat, NoTargetsError, UsageError
from .models import InvocationPlan

log = logging.getLogger(__name__)

FLAG_PREFIX = "-"
END_OF_FLAGS = "--"
VERBOSE_FLAGS = frozenset({"--verbose", "-v"})
HELP_FLAGS = frozenset({"--help", "-h"})

# Setuid, setgid and sticky bits plus the nine permission bits.
MAX_MODE = 0o7777

_OCTAL_RE = re.compile(r"[0-7]+")


class TokenKind(str, Enum):
    PATH = "path"
    PERMISSION = "permission"
    VERBOSE = "verbose"
    HELP = "help"
    SEPARATOR = "separator"
    ACTION = "action"


class Token(BaseModel):
    """A classified command-line token.

    For ``PERMISSION`` tokens exactly one of ``mode`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen = True, arbitrary_types_allowed = True)

    kind: TokenKind
    text: str
    mode: int | None = None
    error: InvalidPermissionFormat | None = None


def parse_permission(token: str) -> int:
    """Parse a ``-<octal>`` token into a mode.

    Raises
    ------
    InvalidPermissionFormat
        If the digits are not all in ``0-7`` or the value does not fit in
        ``0o7777``.
    """
    digits = token[len(FLAG_PREFIX):]
    if not _OCTAL_RE.fullmatch(digits):
        raise InvalidPermissionFormat(token, "digits must be 0-7")
    mode = int(digits, 8)
    if mode > MAX_MODE:
        raise InvalidPermissionFormat(token, f"exceeds {MAX_MODE:o}")
    return mode


def is_permission_token(token: str) -> bool:
    return (len(token) > len(FLAG_PREFIX) and token.startswith(FLAG_PREFIX) and token[len(FLAG_PREFIX)].isdecimal())


def classify_token(token: str) -> Token:
    """Classify a single token as it would be seen before any ``--``."""
    if token == END_OF_FLAGS:
        return Token(kind = TokenKind.SEPARATOR, text = token)
    if is_permission_token(token):
        try:
            return Token(kind = TokenKind.PERMISSION, text = token, mode = parse_permission(token))
        except InvalidPermissionFormat as exc:
            return Token(kind = TokenKind.PERMISSION, text = token, error = exc)
    if token in VERBOSE_FLAGS:
        return Token(kind = TokenKind.VERBOSE, text = token)
    if token in HELP_FLAGS:
        return Token(kind = TokenKind.HELP, text = token)
    if token.startswith(FLAG_PREFIX):
        return Token(kind = TokenKind.ACTION, text = token)
    return Token(kind = TokenKind.PATH, text = token)


def classify(tokens: Sequence[str]) -> InvocationPlan:
    """Build the invocation plan for *tokens* (program name excluded).

    An invalid permission token is recorded in ``plan.warnings`` and the
    last valid permission seen so far is kept.

    Raises
    ------
    UsageError
        If *tokens* is empty.
    NoTargetsError
        If no token is a target path and help was not requested.
    """
    if not tokens:
        raise UsageError("No arguments supplied.")

    targets: list[str] = []
    actions: list[str] = []
    warnings: list[InvalidPermissionFormat] = []
    permission: int | None = None
    verbose = False
    show_help = False
    flags_ended = False

    for raw in tokens:
        if flags_ended:
            targets.append(raw)
            continue

        token = classify_token(raw)
        if token.kind is TokenKind.SEPARATOR:
            flags_ended = True
        elif token.kind is TokenKind.PERMISSION:
            if token.error is not None:
                log.debug("Ignoring %s: %s", raw, token.error.reason)
                warnings.append(token.error)
            else:
                permission = token.mode
        elif token.kind is TokenKind.VERBOSE:
            verbose = True
        elif token.kind is TokenKind.HELP:
            show_help = True
        elif token.kind is TokenKind.ACTION:
            actions.append(raw)
        else:
            targets.append(raw)

    if not targets and not show_help:
        raise NoTargetsError("No directories provided.")

    plan = InvocationPlan(
            targets = tuple(targets), actions = tuple(actions), permission = permission, verbose = verbose,
            show_help = show_help, warnings = tuple(warnings), )
    log.debug(
            "Classified %d token(s): targets=%s actions=%s permission=%s", len(tokens), plan.targets, plan.actions,
            None if permission is None else oct(permission), )
    return plan
