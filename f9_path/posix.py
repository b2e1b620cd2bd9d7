"""POSIX implementation of PathGrammar.

POSIX paths have a single separator (``/``), no drive letters and at most a
one-character root. They are resolved entirely in-process: a relative path is
anchored to the current directory reported by the system collaborator and
its ``.``/``..`` segments are collapsed by :func:`collapse_dot_segments`.

Example:

    >>> from f9_path.posix import PosixGrammar
    >>> grammar = PosixGrammar()
    >>> grammar.root_length("/usr/lib")
    (1, False)
    >>> grammar.normalize("a//b///c")
    'a/b/c'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .interfaces import PathGrammar, SystemResult
from .resolver import collapse_dot_segments

if TYPE_CHECKING:
    from .interfaces import PathSystem


class PosixGrammar(PathGrammar):
    """Path grammar of Linux, macOS and other POSIX systems."""

    name = "posix"
    DIRSEP = "/"
    ALTDIRSEP = "/"
    PATHSEP = ":"

    def is_separator(self, char: str, verbatim: bool = False) -> bool:
        """Return True for ``/``."""
        return char == "/"

    def root_length(self, path: str) -> tuple[int, bool]:
        """Return ``(1, False)`` for paths starting with ``/``, else ``(0, False)``."""
        return (1 if path[:1] == "/" else 0), False

    def is_verbatim(self, path: str) -> bool:
        """Return False; POSIX has no verbatim form."""
        return False

    def is_absolute(self, path: str) -> bool:
        """Return True if ``path`` starts with ``/``."""
        return self.root_length(path)[0] == 1

    def is_fully_qualified(self, path: str) -> bool:
        """Return True if ``path`` is rooted."""
        return self.is_rooted(path)

    def is_valid_path_char(self, char: str) -> bool:
        """Return True for anything but NUL."""
        return char != "\0"

    def is_valid_file_name_char(self, char: str) -> bool:
        """Return True for anything but NUL and ``/``."""
        return char not in ("\0", "/")

    def is_normalized(self, path: str) -> bool:
        """Return True if ``path`` holds no run of consecutive separators."""
        return "//" not in path

    def normalize(self, path: str) -> str:
        """Collapse each run of ``/`` into one."""
        if self.is_normalized(path):
            return path

        out: list[str] = []
        previous_sep = False
        for char in path:
            if char != "/":
                previous_sep = False
                out.append(char)
            elif not previous_sep:
                previous_sep = True
                out.append(char)
        return "".join(out)

    def full_path(self, path: str, system: PathSystem) -> SystemResult:
        """Anchor ``path`` to the current directory and collapse dot segments."""
        if not self.is_rooted(path):
            cwd = system.getcwd()
            if not cwd.ok:
                return cwd
            path = f"{cwd.value}{self.DIRSEP}{path}" if path else cwd.value

        root_len, _ = self.root_length(path)
        return SystemResult.success(collapse_dot_segments(self, path, root_len))
