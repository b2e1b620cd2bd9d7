"""Windows implementation of PathGrammar.

Windows paths accept ``\\`` as the primary and ``/`` as the alternate
separator and come in several root forms:

    ============================  ================================
    ``C:``                        drive-relative
    ``C:\\``                      drive-absolute
    ``\\``                        root of the current drive
    ``\\\\server\\share\\``       UNC share
    ``\\\\.\\device\\``           device path
    ``\\\\.\\UNC\\server\\share\\``   device UNC path
    ``\\\\?\\C:\\``               verbatim (long-path) path
    ``\\\\?\\UNC\\server\\share\\``   verbatim UNC path
    ============================  ================================

Verbatim paths are taken literally: only ``\\`` separates components and
``.``/``..`` carry no meaning. Full-path resolution of anything else is left
to the operating system, since 8.3 short names, substituted drives and
reparse points cannot be derived from the string alone.

Reference:
    https://learn.microsoft.com/en-us/dotnet/standard/io/file-path-formats

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .interfaces import PathGrammar, SystemResult

if TYPE_CHECKING:
    from .interfaces import PathSystem

VERBATIM_PREFIX = "\\\\?\\"
DEVICE_PREFIX = "\\\\.\\"
DEVICE_PREFIX_LEN = 4
UNC_MARKER = "UNC\\"
DEVICE_UNC_PREFIX_LEN = 8
UNC_PREFIX_LEN = 2

_INVALID_FILE_NAME_CHARS = frozenset('"*/:<>?\\|')


def _is_drive_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


class WindowsGrammar(PathGrammar):
    """Path grammar of Windows (Win32 file namespace)."""

    name = "windows"
    DIRSEP = "\\"
    ALTDIRSEP = "/"
    PATHSEP = ";"

    def is_separator(self, char: str, verbatim: bool = False) -> bool:
        """Return True for ``\\``, and for ``/`` unless ``verbatim``."""
        return char == "\\" or (not verbatim and char == "/")

    def is_verbatim(self, path: str) -> bool:
        """Return True if ``path`` starts with ``\\\\?\\``."""
        return path.startswith(VERBATIM_PREFIX)

    def is_device(self, path: str) -> bool:
        """Return True if ``path`` starts with ``\\\\.\\``."""
        return path.startswith(DEVICE_PREFIX)

    def is_unc(self, path: str) -> bool:
        """Return True if ``path`` starts with two separators."""
        return len(path) >= UNC_PREFIX_LEN and self.is_separator(path[0]) and self.is_separator(path[1])

    def root_length(self, path: str) -> tuple[int, bool]:
        """Return the root length and verbatim flag of ``path``.

        Args:
            path: Path to classify.

        Returns:
            Tuple of ``(root_length, verbatim)``. When the separator closing a
            UNC or device root is missing the whole string is the root.

        """
        path_len = len(path)

        if path_len > 1 and path[1] == ":" and _is_drive_letter(path[0]):
            if path_len > 2 and self.is_separator(path[2]):
                return 3, False
            return 2, False

        verbatim = self.is_verbatim(path)
        if verbatim or self.is_device(path):
            if path.startswith(UNC_MARKER, DEVICE_PREFIX_LEN):
                return self._skip_separators(path, DEVICE_UNC_PREFIX_LEN, 2, verbatim), verbatim
            return self._skip_separators(path, DEVICE_PREFIX_LEN, 1, verbatim), verbatim

        if self.is_unc(path):
            return self._skip_separators(path, UNC_PREFIX_LEN, 2, False), False

        return (1 if path_len and self.is_separator(path[0]) else 0), False

    def _skip_separators(self, path: str, start: int, count: int, verbatim: bool) -> int:
        """Return the offset just past the ``count``-th separator at or after ``start``."""
        for index in range(start, len(path)):
            if self.is_separator(path[index], verbatim):
                count -= 1
                if count == 0:
                    return index + 1
        return len(path)

    def is_absolute(self, path: str) -> bool:
        """Return True for UNC paths and drive-absolute paths."""
        if self.is_unc(path):
            return True
        return (
            len(path) > 2
            and path[1] == ":"
            and _is_drive_letter(path[0])
            and self.is_separator(path[2])
        )

    def is_fully_qualified(self, path: str) -> bool:
        """Return True if ``path`` does not depend on a current directory.

        ``C:\\x``, ``\\\\server\\share`` and ``\\\\?\\...`` are fully qualified;
        ``C:x`` and ``\\x`` are rooted but still resolve against the current
        directory of a drive.
        """
        if len(path) < 2:
            return False
        if path[1] == ":" and _is_drive_letter(path[0]):
            return len(path) > 2 and self.is_separator(path[2])
        return self.is_separator(path[0]) and (path[1] == "?" or self.is_separator(path[1]))

    def is_valid_path_char(self, char: str) -> bool:
        """Return True for printable characters other than ``|``."""
        return ord(char) > 31 and char != "|"

    def is_valid_file_name_char(self, char: str) -> bool:
        """Return True for printable characters that are not reserved."""
        # https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-fscc/2917da5c-253c-4c0e-aaf6-9dddc37d2e6e
        return ord(char) > 31 and char not in _INVALID_FILE_NAME_CHARS

    def is_normalized(self, path: str) -> bool:
        """Return True if ``path`` has no ``/`` and no doubled separator.

        A leading pair of separators belongs to a UNC or device prefix and is
        allowed. Verbatim paths are always normalized.
        """
        if not path or self.is_verbatim(path):
            return True
        for index, char in enumerate(path):
            if char == "/":
                return False
            if char == "\\" and index > 1 and path[index - 1] == "\\":
                return False
        return True

    def normalize(self, path: str) -> str:
        """Convert ``/`` to ``\\`` and collapse separator runs.

        The first two characters of a UNC or device prefix are kept as a
        pair so the path keeps its root kind.
        """
        if self.is_normalized(path):
            return path

        out: list[str] = []
        index = 0
        if self.is_separator(path[0]):
            out.append(self.DIRSEP)
            index = 1

        previous_sep = False
        for char in path[index:]:
            if not self.is_separator(char):
                out.append(char)
                previous_sep = False
            elif not previous_sep:
                out.append(self.DIRSEP)
                previous_sep = True
        return "".join(out)

    def full_path(self, path: str, system: PathSystem) -> SystemResult:
        """Return verbatim paths as-is and hand the rest to the OS."""
        if self.is_verbatim(path):
            return SystemResult.success(path)
        return system.full_path_name(path)
