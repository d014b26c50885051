"""Custom exception hierarchy for the makedir package.

Every error raised by the package derives from :class:`MakedirError` so
that callers can catch a single exception type.  Only :class:`UsageError`
(and its subclass :class:`NoTargetsError`) ever reaches the CLI exit code;
everything else is caught per target or per action by
:class:`makedir.processor.DirectoryProcessor` and turned into a diagnostic.
"""


class MakedirError(RuntimeError):
    """Base exception for all makedir related errors."""


class UsageError(MakedirError):
    """Raised when no arguments at all were supplied."""


class NoTargetsError(UsageError):
    """Raised when arguments were supplied but none of them is a directory."""


class ConfigError(MakedirError):
    """Raised when the settings file exists but cannot be used."""


class InvalidPermissionFormat(MakedirError):
    """A ``-<digits>`` token whose remainder is not a valid octal mode."""

    def __init__(self, token: str, reason: str = "not an octal mode"):
        super().__init__(f"Invalid permission format: {token} ({reason})")
        self.token = token
        self.reason = reason


class DirectoryCreationError(MakedirError):
    """Raised when a target directory cannot be created."""


class PermissionApplyError(MakedirError):
    """Raised when the requested mode cannot be set on a target."""


class ActionExecutionError(MakedirError):
    """Raised when an external initializer fails to spawn or exits non-zero."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class FileWriteError(MakedirError):
    """Raised when a template file cannot be written."""


class UnknownFlag(MakedirError):
    """Raised when an action flag matches none of the known spellings."""

    def __init__(self, flag: str):
        super().__init__(f"Unknown flag: {flag}")
        self.flag = flag
