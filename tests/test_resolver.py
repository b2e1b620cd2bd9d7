"""Tests for dot-segment collapsing and base joining."""

import pytest

from f9_path.posix import PosixGrammar
from f9_path.resolver import collapse_dot_segments, join_with_base
from f9_path.windows import WindowsGrammar

# ruff: noqa: S101  # pytest assertions are ok in tests

POSIX = PosixGrammar()
WINDOWS = WindowsGrammar()


class TestCollapseDotSegments:
    """Manual '.' and '..' resolution of rooted paths."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/", "/"),
            ("/a/b", "/a/b"),
            ("/a/./b", "/a/b"),
            ("/a/b/..", "/a"),
            ("/a/b/../c", "/a/c"),
            ("/srv/app/../data/./file.txt", "/srv/data/file.txt"),
            ("/a//b", "/a/b"),
            ("/a/.", "/a"),
            ("/.", "/"),
            ("/..", "/"),
            ("/../..", "/"),
            ("/../a", "/a"),
            ("/a/../..", "/"),
            ("/.hidden/..x", "/.hidden/..x"),
        ],
    )
    def test_posix(self, path: str, expected: str) -> None:
        """Dot segments collapse without climbing above the root."""
        assert collapse_dot_segments(POSIX, path, 1) == expected

    def test_rooted_normalized_dot_free_path_is_unchanged(self) -> None:
        """A clean absolute path resolves to itself."""
        path = "/usr/local/lib/python3"
        assert collapse_dot_segments(POSIX, path, 1) == path

    def test_windows_drive_root(self) -> None:
        """The drive root is kept when everything is rewound."""
        assert collapse_dot_segments(WINDOWS, "C:\\a\\..\\..", 3) == "C:\\"
        assert collapse_dot_segments(WINDOWS, "C:\\a\\.\\b", 3) == "C:\\a\\b"


class TestJoinWithBase:
    """Anchoring relative paths to an explicit base."""

    def test_empty_path_is_base(self) -> None:
        """An empty path resolves to the base itself."""
        assert join_with_base(POSIX, "", "/srv") == "/srv"

    def test_relative_path_appended(self) -> None:
        """A relative path goes after a separator."""
        assert join_with_base(POSIX, "a/b", "/srv") == "/srv/a/b"
        assert join_with_base(POSIX, "a", "/srv/") == "/srv/a"

    def test_root_relative_uses_base_root(self) -> None:
        """'\\x' lands on the root of the base."""
        assert join_with_base(WINDOWS, "\\x", "D:\\work") == "D:\\x"
        assert join_with_base(WINDOWS, "\\x", "\\\\srv\\share\\dir") == "\\\\srv\\share\\x"

    def test_drive_relative_same_drive(self) -> None:
        """'C:x' is appended to a base on the same drive."""
        assert join_with_base(WINDOWS, "C:x", "c:\\work") == "c:\\work\\x"

    def test_drive_relative_other_drive(self) -> None:
        """'C:x' lands on the root of its own drive otherwise."""
        assert join_with_base(WINDOWS, "C:x", "D:\\work") == "C:\\x"
