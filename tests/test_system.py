"""Tests for the OS-backed collaborators and result types."""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

import pytest

from f9_path import PathEngine, WindowsGrammar
from f9_path.interfaces import SystemCallError, SystemResult
from f9_path.system import OsPathSystem, SeededRandomSource, SystemClock
from tests.fakes import FakeClock

if TYPE_CHECKING:
    from pathlib import Path

# ruff: noqa: S101, PLR2004  # pytest assertions and magic numbers are ok in tests


class TestSystemResult:
    """Tests for SystemResult helpers."""

    def test_success_unpacks(self) -> None:
        """A result unpacks into value and error."""
        value, error = SystemResult.success("/x")
        assert (value, error) == ("/x", None)

    def test_failure(self) -> None:
        """A failure carries code and message and raises on unwrap."""
        result = SystemResult.failure(13, "Permission denied")
        assert not result.ok
        with pytest.raises(SystemCallError, match="Permission denied") as exc_info:
            result.unwrap()
        assert exc_info.value.code == 13

    def test_from_os_error(self) -> None:
        """The file name is prefixed to the OS message."""
        exc = FileNotFoundError(errno.ENOENT, "No such file or directory", "/missing")
        result = SystemResult.from_os_error(exc)
        assert result.error.code == errno.ENOENT
        assert result.error.message == "/missing: No such file or directory"


class TestOsPathSystem:
    """Tests for OsPathSystem."""

    def test_getcwd(self) -> None:
        """The process working directory is reported."""
        assert OsPathSystem().getcwd() == SystemResult.success(os.getcwd())

    def test_full_path_name_absolute(self) -> None:
        """Absolute Windows paths resolve without a current directory."""
        result = OsPathSystem().full_path_name("C:\\a\\..\\b\\.\\c")
        assert result == SystemResult.success("C:\\b\\c")

    @pytest.mark.parametrize("path", ["x\\y", "D:x", "\\x"])
    def test_full_path_name_relative_off_windows(
        self,
        monkeypatch: pytest.MonkeyPatch,
        path: str,
    ) -> None:
        """Without a Windows host, relative forms fail with ENOSYS."""
        monkeypatch.setattr("f9_path.system._WINDOWS_HOST", False)
        result = OsPathSystem().full_path_name(path)
        assert not result.ok
        assert result.error.code == errno.ENOSYS
        assert path in result.error.message

    def test_full_path_name_unc_off_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """UNC paths are fully qualified and still resolve."""
        monkeypatch.setattr("f9_path.system._WINDOWS_HOST", False)
        result = OsPathSystem().full_path_name("\\\\srv\\share\\a\\..\\b")
        assert result == SystemResult.success("\\\\srv\\share\\b")

    def test_engine_full_path_relative_off_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The engine reports the failure instead of a relative answer."""
        monkeypatch.setattr("f9_path.system._WINDOWS_HOST", False)
        result = PathEngine(WindowsGrammar(), system=OsPathSystem()).full_path("x\\y")
        assert not result.ok
        assert result.error.code == errno.ENOSYS

    def test_realpath_existing(self, tmp_path: Path) -> None:
        """An existing path resolves."""
        target = tmp_path / "file.txt"
        target.write_text("data")
        result = OsPathSystem().realpath(str(target))
        assert result.ok
        assert os.path.samefile(result.value, target)

    def test_realpath_missing(self, tmp_path: Path) -> None:
        """A missing path yields ENOENT instead of raising."""
        result = OsPathSystem().realpath(str(tmp_path / "missing"))
        assert not result.ok
        assert result.error.code == errno.ENOENT


class TestClockAndRandom:
    """Tests for SystemClock and SeededRandomSource."""

    def test_clock_is_monotonic(self) -> None:
        """Readings never go backwards."""
        clock = SystemClock()
        first = clock.monotonic_ns()
        assert clock.monotonic_ns() >= first

    def test_seed_from_clock(self) -> None:
        """The seed is the clock reading at construction."""
        assert SeededRandomSource(FakeClock(123)).seed == 123

    def test_explicit_seed_wins(self) -> None:
        """An explicit seed ignores the clock."""
        assert SeededRandomSource(FakeClock(123), seed=5).seed == 5

    def test_reproducible(self) -> None:
        """Equal seeds give equal sequences."""
        first = SeededRandomSource(seed=42)
        second = SeededRandomSource(seed=42)
        draws = [first.randbelow(62) for _ in range(20)]
        assert draws == [second.randbelow(62) for _ in range(20)]
        assert all(0 <= draw < 62 for draw in draws)
