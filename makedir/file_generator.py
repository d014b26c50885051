"""Low‑level file‑system helper used by the template actions.

Writes are atomic: the content goes to a uniquely named temporary file in
the same directory, which then replaces the target, so an interrupted run
never leaves a half-written README or LICENSE behind.  Only the target
itself is overwritten.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path

from .exceptions import FileWriteError

__all__ = ["write_file", ]


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "w")`` would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_file(target: Path | str, content: str, *, encoding: str = "utf-8", ) -> Path:
    """Write *content* to *target* atomically and return its absolute path.

    Parameters
    ----------
    target:
        Destination file path.  Its parent directory must already exist.
    content:
        Text to write.
    encoding:
        Text encoding – defaults to ``"utf-8"``.

    Raises
    ------
    FileWriteError
        If the temporary file cannot be written or moved into place.  The
        temporary file is removed when possible.
    """

    target = Path(target).expanduser().absolute()
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
                mode = "w", encoding = encoding, dir = target.parent, prefix = f".{target.name}.", suffix = ".tmp",
                delete = False, ) as fp:
            tmp_name = fp.name
            fp.write(content)
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, target)
        return target
    except OSError as exc:
        if tmp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
        raise FileWriteError(f"Failed to write file {target!s}: {exc}") from exc
