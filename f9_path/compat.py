"""Exception translation for standard Python compatibility.

This module translates f9_path exceptions into builtin exception types and
turns failed :class:`SystemResult` values into raised ``OSError``, making the
engine usable by code written against ``os.path``-style error handling.
"""

from __future__ import annotations

import functools
from contextlib import contextmanager
from typing import TYPE_CHECKING, TypeVar

from f9_path.interfaces import (
    InvalidPathError,
    PathError,
    SystemCallError,
    SystemResult,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from f9_path.engine import PathEngine

T = TypeVar("T")


def translate_path_exception(exc: PathError) -> Exception:
    """Convert a PathError to a builtin exception.

    Maps:
    - InvalidPathError (wrong argument type) → TypeError
    - InvalidPathError (other) → ValueError
    - SystemCallError → OSError carrying the OS error code
    - PathError → OSError

    Args:
        exc: The PathError to translate.

    Returns:
        A builtin exception instance.

    """
    message = str(exc)

    if isinstance(exc, InvalidPathError):
        if "expected, got" in exc.message:
            return TypeError(message)
        return ValueError(message)

    if isinstance(exc, SystemCallError):
        # OSError(errno, strerror) picks the matching subclass, for example
        # FileNotFoundError for ENOENT.
        if exc.code is not None:
            return OSError(exc.code, exc.message)
        return OSError(message)

    return OSError(message)


@contextmanager
def translate_exceptions() -> Iterator[None]:
    """Context manager for exception translation.

    Example:
        ```python
        with translate_exceptions():
            engine.full_path("data", base="relative")  # Raises ValueError
        ```

    Yields:
        None

    Raises:
        TypeError, ValueError, OSError: Any PathError translated.

    """
    try:
        yield
    except PathError as exc:
        raise translate_path_exception(exc) from exc


def translate_method(method: Callable[..., T]) -> Callable[..., T]:
    """Decorator translating exceptions and unwrapping system results.

    A method returning a :class:`SystemResult` returns its value instead, and
    a failed result raises ``OSError``.

    Args:
        method: The method to wrap.

    Returns:
        The wrapped method.

    """

    @functools.wraps(method)
    def wrapper(*args: object, **kwargs: object) -> T:
        with translate_exceptions():
            result = method(*args, **kwargs)
            if isinstance(result, SystemResult):
                return result.unwrap()  # type: ignore[return-value]
            return result

    return wrapper


class CompatiblePathEngine:
    """Wrapper engine raising builtin exceptions.

    Example:
        ```python
        from f9_path import CompatiblePathEngine, resolve_engine

        engine = CompatiblePathEngine(resolve_engine("posix"))

        try:
            engine.canonicalize("/does/not/exist")
        except FileNotFoundError:
            print("Path not found!")

        try:
            engine.random_file_name("tmp")
        except ValueError:
            print("Template needs an X")
        ```

    Attributes:
        _engine: The wrapped PathEngine instance.

    """

    def __init__(self, engine: PathEngine) -> None:
        """Initialize the compatible wrapper.

        Args:
            engine: The PathEngine instance to wrap.

        """
        self._engine = engine

    def __getattr__(self, name: str) -> object:
        """Delegate attribute access to the wrapped engine.

        Callable attributes are wrapped with :func:`translate_method`.

        Raises:
            AttributeError: If the attribute doesn't exist on the engine.

        """
        attr = getattr(self._engine, name)
        if callable(attr):
            return translate_method(attr)
        return attr

    def __repr__(self) -> str:
        """Return string representation of the wrapper."""
        return f"CompatiblePathEngine({self._engine!r})"
