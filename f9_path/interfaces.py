"""Core interfaces and data structures for path grammar implementations."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple, Protocol, Union

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_RANDOM_TEMPLATE = "rndXXXXXXXX"
MAX_PATH_LENGTH = 2**31 - 1


class PathError(RuntimeError):
    """Base exception for path operations."""

    def __init__(
        self,
        message: str,
        *,
        path: object | None = None,
    ) -> None:
        """Initialise the base error with an optional offending path."""
        detail = message if path is None else ": ".join((message, repr(path)))
        super().__init__(detail)
        self.message = message
        self.path = path


class InvalidPathError(PathError):
    """Raised when an argument is rejected before any path logic runs."""

    def __init__(
        self,
        message: str,
        *,
        path: object | None = None,
        argument: str | None = None,
    ) -> None:
        """Initialise an argument error, optionally naming the argument."""
        if argument is not None:
            message = f"bad argument '{argument}' ({message})"
        super().__init__(message, path=path)
        self.argument = argument

    @classmethod
    def not_a_string(cls, value: object, *, argument: str | None = None) -> InvalidPathError:
        """Return an error for a value that is not a path string."""
        return cls(
            f"string expected, got {type(value).__name__}",
            path=value,
            argument=argument,
        )

    @classmethod
    def empty_path(cls, path: str, *, argument: str | None = None) -> InvalidPathError:
        """Return an error for an empty or all-space path."""
        return cls("empty path", path=path, argument=argument)

    @classmethod
    def path_too_long(cls, path: str, *, argument: str | None = None) -> InvalidPathError:
        """Return an error for a path exceeding the configured maximum length."""
        return cls("path too long", path=path, argument=argument)

    @classmethod
    def invalid_characters(
        cls,
        path: str,
        *,
        argument: str | None = None,
    ) -> InvalidPathError:
        """Return an error for a path holding characters the grammar rejects."""
        return cls("invalid path", path=path, argument=argument)

    @classmethod
    def not_fully_qualified(
        cls,
        path: str,
        *,
        argument: str | None = None,
    ) -> InvalidPathError:
        """Return an error for a base path that depends on ambient state."""
        return cls("path is not fully qualified", path=path, argument=argument)

    @classmethod
    def invalid_template(
        cls,
        template: str,
        *,
        argument: str | None = None,
    ) -> InvalidPathError:
        """Return an error for a random-name template without any ``X``."""
        return cls("invalid template", path=template, argument=argument)

    @classmethod
    def invalid_index(cls, index: object, *, argument: str | None = None) -> InvalidPathError:
        """Return an error for a character position that is not an integer."""
        return cls(
            f"integer expected, got {type(index).__name__}",
            path=index,
            argument=argument,
        )


class SystemCallError(PathError):
    """Raised when a failed operating-system result is unwrapped."""

    def __init__(self, failure: SystemFailure, *, path: object | None = None) -> None:
        """Create an error from the failure reported by the system collaborator."""
        super().__init__(failure.message, path=path)
        self.code = failure.code


@dataclass(frozen=True)
class PathComponents:
    """Offsets splitting a path into root, parent, file name and extension.

    All offsets index into the original string. ``ext_offset`` is ``0`` when
    the file name has no extension, otherwise it points one past the dot.
    """

    root_len: int
    dir_len: int
    file_offset: int
    ext_offset: int
    verbatim: bool

    def as_dict(self) -> dict:
        """Return a JSON-serialisable representation."""
        return {
            "root_len": self.root_len,
            "dir_len": self.dir_len,
            "file_offset": self.file_offset,
            "ext_offset": self.ext_offset,
            "verbatim": self.verbatim,
        }


@dataclass(frozen=True)
class SystemFailure:
    """Error code and message reported by an operating-system call."""

    code: int | None
    message: str

    def as_dict(self) -> dict:
        """Return a JSON-serialisable representation."""
        return {"code": self.code, "message": self.message}


class SystemResult(NamedTuple):
    """Outcome of an OS-delegated operation.

    Unpacks as a ``(value, error)`` pair so callers can branch on the error
    without exception handling:

        >>> value, error = engine.canonicalize("missing")
        >>> if error is not None:
        ...     print(error.code, error.message)

    """

    value: str | None
    error: SystemFailure | None = None

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: str) -> SystemResult:
        """Return a successful result wrapping ``value``."""
        return cls(value, None)

    @classmethod
    def failure(cls, code: int | None, message: str) -> SystemResult:
        """Return a failed result carrying an error code and message."""
        return cls(None, SystemFailure(code, message))

    @classmethod
    def from_os_error(cls, exc: OSError) -> SystemResult:
        """Return a failed result describing ``exc``."""
        message = exc.strerror or str(exc) or "unknown error"
        if exc.filename is not None:
            message = f"{exc.filename}: {message}"
        return cls.failure(exc.errno, message)

    def unwrap(self) -> str:
        """Return the value or raise :class:`SystemCallError` on failure."""
        if self.error is not None:
            raise SystemCallError(self.error)
        return self.value  # type: ignore[return-value]


class Clock(Protocol):
    """Source of monotonic time."""

    def monotonic_ns(self) -> int:
        """Return a monotonic timestamp in nanoseconds."""
        ...


class RandomSource(Protocol):
    """Non-cryptographic source of random integers."""

    def randbelow(self, n: int) -> int:
        """Return a random integer in ``range(n)``."""
        ...


class PathSystem(Protocol):
    """Operating-system primitives the engine delegates to.

    Every method reports failure by returning a failed :class:`SystemResult`
    instead of raising.
    """

    def getcwd(self) -> SystemResult:
        """Return the current working directory."""
        ...

    def full_path_name(self, path: str) -> SystemResult:
        """Return the absolute form of ``path`` as computed by the OS."""
        ...

    def realpath(self, path: str) -> SystemResult:
        """Return the canonical form of an existing ``path``."""
        ...


class PathGrammar(ABC):
    """Separator, root and normalization rules of one path syntax.

    Implementations are stateless. The rest of the package receives a grammar
    as a value so both syntaxes can be exercised from a single process.
    """

    name: str
    DIRSEP: str
    ALTDIRSEP: str
    PATHSEP: str

    @abstractmethod
    def is_separator(self, char: str, verbatim: bool = False) -> bool:
        """Return True if ``char`` separates directories."""

    @abstractmethod
    def root_length(self, path: str) -> tuple[int, bool]:
        """Return the length of the root prefix and whether it is verbatim.

        Args:
            path: Path to classify.

        Returns:
            Tuple of ``(root_length, verbatim)``.

        """

    @abstractmethod
    def is_verbatim(self, path: str) -> bool:
        """Return True if ``path`` uses the verbatim long-path prefix."""

    @abstractmethod
    def is_absolute(self, path: str) -> bool:
        """Return True if ``path`` starts at a filesystem root."""

    @abstractmethod
    def is_fully_qualified(self, path: str) -> bool:
        """Return True if resolving ``path`` needs no ambient state."""

    @abstractmethod
    def is_valid_path_char(self, char: str) -> bool:
        """Return True if ``char`` may appear anywhere in a path."""

    @abstractmethod
    def is_valid_file_name_char(self, char: str) -> bool:
        """Return True if ``char`` may appear in a single file name."""

    @abstractmethod
    def is_normalized(self, path: str) -> bool:
        """Return True if :meth:`normalize` would leave ``path`` unchanged."""

    @abstractmethod
    def normalize(self, path: str) -> str:
        """Canonicalise separators without resolving ``.`` or ``..``."""

    @abstractmethod
    def full_path(self, path: str, system: PathSystem) -> SystemResult:
        """Resolve ``path`` to an absolute path.

        Args:
            path: Path to resolve, possibly relative.
            system: Collaborator used for the current directory or for
                OS-level resolution.

        Returns:
            The resolved path, or the failure reported by ``system``.

        """

    def is_rooted(self, path: str) -> bool:
        """Return True if ``path`` has a root prefix."""
        return self.root_length(path)[0] > 0

    def __repr__(self) -> str:
        """Return the grammar name."""
        return f"{type(self).__name__}()"
