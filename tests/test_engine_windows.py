"""Tests for PathEngine over the Windows grammar."""

from __future__ import annotations

import pytest

from f9_path import InvalidPathError, PathEngine, SystemResult, WindowsGrammar
from tests.fakes import FakeClock, FakePathSystem, FakeRandomSource

# ruff: noqa: S101, PLR2004  # pytest assertions and magic numbers are ok in tests


@pytest.fixture
def system() -> FakePathSystem:
    """Return a fake OS collaborator."""
    return FakePathSystem("C:\\Users\\me")


@pytest.fixture
def engine(system: FakePathSystem) -> PathEngine:
    """Return a Windows engine with deterministic collaborators."""
    return PathEngine(
        WindowsGrammar(),
        system=system,
        clock=FakeClock(),
        random_source=FakeRandomSource(),
    )


class TestConstants:
    """Separator constants."""

    def test_constants(self, engine: PathEngine) -> None:
        """Windows separators."""
        assert (engine.DIRSEP, engine.ALTDIRSEP, engine.PATHSEP) == ("\\", "/", ";")


class TestRoots:
    """root, set_root and qualification predicates."""

    @pytest.mark.parametrize(
        ("path", "root"),
        [
            ("C:\\foo", "C:\\"),
            ("C:foo", "C:"),
            ("\\foo", "\\"),
            ("\\\\server\\share\\x", "\\\\server\\share\\"),
            ("\\\\?\\C:\\x", "\\\\?\\C:\\"),
            ("\\\\?\\UNC\\server\\share\\x", "\\\\?\\UNC\\server\\share\\"),
            ("foo", None),
        ],
    )
    def test_root(self, engine: PathEngine, path: str, root: str | None) -> None:
        """Every root form is recognised."""
        assert engine.root(path) == root

    def test_verbatim_components(self, engine: PathEngine) -> None:
        """The verbatim flag is exposed through components()."""
        assert engine.components("\\\\?\\C:\\x").verbatim
        assert not engine.components("C:\\x").verbatim

    def test_set_root(self, engine: PathEngine) -> None:
        """Roots are swapped, with a separator added when needed."""
        assert engine.set_root("C:\\data\\x", "D:\\") == "D:\\data\\x"
        assert engine.set_root("C:\\data\\x", "D:") == "D:\\data\\x"
        assert engine.set_root("data\\x", "\\\\srv\\share\\") == "\\\\srv\\share\\data\\x"
        assert engine.set_root("C:\\data\\x", "") == "data\\x"

    def test_set_root_validates_root(self, engine: PathEngine) -> None:
        """The new root is validated like a path."""
        with pytest.raises(InvalidPathError, match="'root'"):
            engine.set_root("C:\\x", "D|")

    def test_fully_qualified(self, engine: PathEngine) -> None:
        """'C:foo' is rooted but depends on the drive's current directory."""
        assert not engine.is_fully_qualified("C:foo")
        assert engine.is_fully_qualified("C:\\foo")
        assert engine.is_rooted("C:foo")
        assert engine.is_absolute("\\\\server\\share")


class TestNames:
    """File names and parents in Windows paths."""

    def test_parent_and_file_name(self, engine: PathEngine) -> None:
        """Both separators split the path."""
        assert engine.parent("C:\\data/report.txt") == "C:\\data"
        assert engine.file_name("C:\\data/report.txt") == "report.txt"
        assert engine.parent("C:\\report.txt") == "C:\\"

    def test_root_only(self, engine: PathEngine) -> None:
        """A root-only path has no parent and splits to itself."""
        assert engine.parent("\\\\server\\share\\") is None
        assert engine.split("C:\\") == ("C:\\", None)

    def test_drive_relative_file_name(self, engine: PathEngine) -> None:
        """A new name goes straight after a drive-relative root."""
        assert engine.set_file_name("C:old.txt", "new.txt") == "C:new.txt"
        assert engine.set_file_stem("C:\\a\\old.txt", "new") == "C:\\a\\new.txt"

    def test_set_parent_uses_backslash(self, engine: PathEngine) -> None:
        """The primary separator joins parent and file name."""
        assert engine.set_parent("x/report.txt", "D:\\out") == "D:\\out\\report.txt"

    def test_combine(self, engine: PathEngine) -> None:
        """A drive root restarts the path."""
        assert engine.combine("a", "C:\\b", "c") == "C:\\b\\c"


class TestValidity:
    """Validity predicates and argument validation."""

    def test_file_name_chars(self, engine: PathEngine) -> None:
        """Reserved characters are rejected in names only."""
        assert engine.is_valid_path("C:\\dir\\name.txt")
        assert engine.is_valid_file_name("name.txt")
        assert not engine.is_valid_file_name("na?me")
        assert not engine.is_valid_path("a|b")

    def test_root_rejects_pipe(self, engine: PathEngine) -> None:
        """Invalid characters raise before any parsing."""
        with pytest.raises(InvalidPathError, match="invalid path"):
            engine.root("a|b")


class TestSeparators:
    """Separator predicates."""

    def test_is_separator_respects_verbatim(self, engine: PathEngine) -> None:
        """'/' is not a separator inside a verbatim path."""
        assert engine.is_separator("C:/x", 3)
        assert not engine.is_separator("\\\\?\\C:/x", 7)

    def test_trim_root(self, engine: PathEngine) -> None:
        """A drive root keeps its separator."""
        assert engine.trim_ending_separator("C:\\") == "C:\\"
        assert engine.trim_ending_separator("C:\\a\\") == "C:\\a"
        assert engine.trim_ending_separator("\\\\srv\\share\\") == "\\\\srv\\share\\"


class TestMatchingAndNormalize:
    """Component matching and normalization."""

    def test_starts_with(self, engine: PathEngine) -> None:
        """Drive letter case and separator kind are ignored."""
        assert engine.starts_with("C:\\Data\\Report.txt", "c:/data")
        assert not engine.starts_with("C:\\Data\\Report.txt", "D:\\data")

    def test_ends_with(self, engine: PathEngine) -> None:
        """Suffixes match across separator kinds."""
        assert engine.ends_with("C:\\Data\\Report.txt", "data/REPORT.TXT")

    def test_verbatim_dot_is_a_component(self, engine: PathEngine) -> None:
        """Verbatim tokenization keeps '.'."""
        assert list(engine.tokenize("\\\\?\\C:\\a\\.\\b/c")) == ["a", ".", "b/c"]

    def test_normalize(self, engine: PathEngine) -> None:
        """Slashes convert and runs collapse; verbatim paths are untouched."""
        assert engine.normalize("C:/a//b") == "C:\\a\\b"
        assert engine.normalize("\\\\?\\C:/a//b") == "\\\\?\\C:/a//b"


class TestFullPath:
    """Delegated full-path resolution and base handling."""

    def test_delegates(self, engine: PathEngine, system: FakePathSystem) -> None:
        """The OS receives the path unchanged."""
        assert engine.full_path("a\\..\\b").ok
        assert system.calls == [("full_path_name", "a\\..\\b")]

    def test_verbatim_unchanged(self, engine: PathEngine, system: FakePathSystem) -> None:
        """Verbatim paths never reach the OS."""
        path = "\\\\?\\C:\\a\\..\\b"
        assert engine.full_path(path).value == path
        assert system.calls == []

    @pytest.mark.parametrize(
        ("path", "base", "resolved"),
        [
            ("x\\y", "D:\\work", "D:\\work\\x\\y"),
            ("\\x", "D:\\work", "D:\\x"),
            ("C:x", "c:\\work", "c:\\work\\x"),
            ("C:x", "D:\\work", "C:\\x"),
            ("E:\\abs", "D:\\work", "E:\\abs"),
            ("", "\\\\srv\\share", "\\\\srv\\share"),
        ],
    )
    def test_base(
        self,
        engine: PathEngine,
        system: FakePathSystem,
        path: str,
        base: str,
        resolved: str,
    ) -> None:
        """Relative forms are anchored to the base before resolution."""
        assert engine.full_path(path, base=base).ok
        assert system.calls == [("full_path_name", resolved)]

    def test_base_must_be_fully_qualified(self, engine: PathEngine) -> None:
        """A drive-relative base is rejected."""
        with pytest.raises(InvalidPathError, match="not fully qualified"):
            engine.full_path("x", base="C:work")

    def test_failure(self, engine: PathEngine, system: FakePathSystem) -> None:
        """OS failures are returned."""
        system.full_path_failure = SystemResult.failure(206, "The filename or extension is too long")
        value, error = engine.full_path("C:\\x")
        assert value is None
        assert error.as_dict() == {"code": 206, "message": "The filename or extension is too long"}


class TestCanonicalize:
    """canonicalize."""

    def test_nul_is_rejected(self, engine: PathEngine, system: FakePathSystem) -> None:
        """A NUL character is an invalid argument and never reaches the OS."""
        with pytest.raises(InvalidPathError, match="invalid path"):
            engine.canonicalize("C:\\a\0b")
        assert system.calls == []
