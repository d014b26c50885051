# tests/test_file_generator.py
"""
Unit tests for the low‑level file helper in ``makedir.file_generator``.
"""

from pathlib import Path

import pytest

from makedir.exceptions import FileWriteError
from makedir.file_generator import write_file


@pytest.fixture
def tmp_file(tmp_path: Path) -> Path:
    """Return a fresh, non‑existent file inside the temporary directory."""
    return tmp_path / "LICENSE"


def test_write_text_file(tmp_file: Path) -> None:
    """Writing a simple text file should succeed and contain the same content."""
    result = write_file(content = "content", target = tmp_file)
    assert tmp_file.read_text() == "content"
    assert result.is_absolute()


def test_write_text_file_overwrite(tmp_file: Path) -> None:
    """Overwriting an existing file should replace its contents."""
    write_file(tmp_file, "first")
    write_file(tmp_file, "second")
    assert tmp_file.read_text() == "second"


def test_no_temporary_file_left_behind(tmp_path: Path) -> None:
    write_file(tmp_path / "deno.json", "{}")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["deno.json"]


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileWriteError):
        write_file(tmp_path / "missing" / "README.md", "# Project Title")


def test_unrelated_tmp_file_is_preserved(tmp_path: Path) -> None:
    """A user's own ``README.md.tmp`` is neither overwritten nor renamed."""
    own = tmp_path / "README.md.tmp"
    own.write_text("mine")
    write_file(tmp_path / "README.md", "# Project Title")
    assert own.read_text() == "mine"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["README.md", "README.md.tmp"]


def test_failed_cleanup_still_raises_write_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Both the rename and the cleanup fail with raw OS errors."""

    def refuse(*args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("makedir.file_generator.os.replace", refuse)
    monkeypatch.setattr("makedir.file_generator.os.unlink", refuse)
    with pytest.raises(FileWriteError):
        write_file(tmp_path / "README.md", "# Project Title")
