"""Operating-system collaborators used by the path engine.

The engine never calls the OS directly. It asks a :class:`PathSystem` for the
current directory and for OS-level resolution, a :class:`Clock` for time and
a :class:`RandomSource` for random names. The implementations here bind those
capabilities to the running process; tests substitute deterministic doubles.
"""

from __future__ import annotations

import errno
import ntpath
import os
import random
import time
from typing import TYPE_CHECKING

from .interfaces import SystemResult
from .windows import WindowsGrammar

if TYPE_CHECKING:
    from .interfaces import Clock

_WINDOWS_HOST = os.name == "nt"


class OsPathSystem:
    """PathSystem backed by the ``os`` module of the running interpreter."""

    def getcwd(self) -> SystemResult:
        """Return the process current directory."""
        try:
            return SystemResult.success(os.getcwd())
        except OSError as exc:
            return SystemResult.from_os_error(exc)

    def full_path_name(self, path: str) -> SystemResult:
        """Resolve a Windows path the way ``GetFullPathNameW`` does.

        On Windows hosts ``ntpath.abspath`` calls ``GetFullPathNameW``. Other
        hosts have no per-drive current directory, so only fully qualified
        paths are resolved there; anything else fails with ``ENOSYS``.
        """
        if not _WINDOWS_HOST and not WindowsGrammar().is_fully_qualified(path):
            return SystemResult.failure(
                errno.ENOSYS,
                f"{path}: relative Windows paths need a Windows host to resolve",
            )
        try:
            return SystemResult.success(ntpath.abspath(path))
        except OSError as exc:
            return SystemResult.from_os_error(exc)

    def realpath(self, path: str) -> SystemResult:
        """Return the canonical path of an existing file or directory."""
        try:
            return SystemResult.success(os.path.realpath(path, strict=True))
        except OSError as exc:
            return SystemResult.from_os_error(exc)

    def __repr__(self) -> str:
        """Return a short description."""
        return "OsPathSystem()"


class SystemClock:
    """Clock reading the interpreter's monotonic timer."""

    def monotonic_ns(self) -> int:
        """Return ``time.monotonic_ns()``."""
        return time.monotonic_ns()


class SeededRandomSource:
    """Non-cryptographic random source seeded once from a clock.

    The seed is captured when the source is created, never from a hidden
    module-level baseline.
    """

    def __init__(self, clock: Clock | None = None, *, seed: int | None = None) -> None:
        """Initialise the generator.

        Args:
            clock: Clock whose monotonic reading seeds the generator when no
                explicit ``seed`` is given.
            seed: Explicit seed; takes precedence over ``clock``.

        """
        if seed is None:
            seed = (clock or SystemClock()).monotonic_ns()
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        """Return a random integer in ``range(n)``."""
        return self._random.randrange(n)
