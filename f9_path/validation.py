"""Argument validation for path operations.

The engine runs every caller-supplied value through these helpers before any
grammar logic executes, so the core functions only ever see well-formed
input. Each helper either returns the accepted value or raises
:class:`InvalidPathError` naming the offending argument.

Example:
    >>> from f9_path.windows import WindowsGrammar
    >>> check_path(WindowsGrammar(), "C:\\\\data", argument="path")
    'C:\\\\data'
    >>> check_path(WindowsGrammar(), "a|b", argument="path")
    Traceback (most recent call last):
    ...
    f9_path.interfaces.InvalidPathError: bad argument 'path' (invalid path): 'a|b'

"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from .interfaces import MAX_PATH_LENGTH, InvalidPathError
from .utils import is_blank, is_valid_template

if TYPE_CHECKING:
    from .interfaces import PathGrammar


def check_string(value: Any, *, argument: str) -> str:
    """Validate that ``value`` is a string or a string path-like object.

    Args:
        value: Value to validate.
        argument: Argument name used in error messages.

    Returns:
        The value as ``str``.

    Raises:
        InvalidPathError: If ``value`` is not a string.

    """
    if isinstance(value, str):
        return value
    if isinstance(value, os.PathLike):
        fspath = os.fspath(value)
        if isinstance(fspath, str):
            return fspath
    raise InvalidPathError.not_a_string(value, argument=argument)


def is_valid_path(grammar: PathGrammar, path: str) -> bool:
    """Return True if every character of ``path`` is allowed by ``grammar``."""
    return all(grammar.is_valid_path_char(char) for char in path)


def is_valid_file_name(grammar: PathGrammar, name: str) -> bool:
    """Return True if every character of ``name`` is allowed in a file name."""
    return all(grammar.is_valid_file_name_char(char) for char in name)


def check_path(
    grammar: PathGrammar,
    value: Any,
    *,
    argument: str,
    max_length: int = MAX_PATH_LENGTH,
) -> str:
    """Validate a required path argument.

    Empty paths are accepted; operations decide what an empty path means.

    Args:
        grammar: Grammar defining the valid characters.
        value: Value to validate.
        argument: Argument name used in error messages.
        max_length: Longest accepted path.

    Returns:
        The validated path.

    Raises:
        InvalidPathError: If the value is not a string, is too long or holds
            characters the grammar rejects.

    """
    path = check_string(value, argument=argument)
    if len(path) > max_length:
        raise InvalidPathError.path_too_long(path, argument=argument)
    if not is_valid_path(grammar, path):
        raise InvalidPathError.invalid_characters(path, argument=argument)
    return path


def check_optional_path(
    grammar: PathGrammar,
    value: Any,
    *,
    argument: str,
    max_length: int = MAX_PATH_LENGTH,
) -> str | None:
    """Validate an optional path argument.

    Unlike :func:`check_path`, a supplied value must not be blank.

    Returns:
        The validated path, or None when ``value`` is None.

    Raises:
        InvalidPathError: If the value is not a string, is too long, is blank
            or holds characters the grammar rejects.

    """
    if value is None:
        return None
    path = check_string(value, argument=argument)
    if len(path) > max_length:
        raise InvalidPathError.path_too_long(path, argument=argument)
    if is_blank(path):
        raise InvalidPathError.empty_path(path, argument=argument)
    if not is_valid_path(grammar, path):
        raise InvalidPathError.invalid_characters(path, argument=argument)
    return path


def check_optional_string(value: Any, *, argument: str) -> str | None:
    """Validate an optional string argument, returning None when absent."""
    if value is None:
        return None
    return check_string(value, argument=argument)


def validate_fully_qualified(grammar: PathGrammar, path: str, *, argument: str) -> None:
    """Validate that ``path`` resolves without any ambient current directory.

    Raises:
        InvalidPathError: If ``path`` is not fully qualified.

    """
    if not grammar.is_fully_qualified(path):
        raise InvalidPathError.not_fully_qualified(path, argument=argument)


def check_template(value: Any, *, argument: str) -> str:
    """Validate a random file name template.

    Raises:
        InvalidPathError: If the value is not a string or has no ``X``.

    """
    template = check_string(value, argument=argument)
    if not is_valid_template(template):
        raise InvalidPathError.invalid_template(template, argument=argument)
    return template


def check_index(value: Any, *, argument: str) -> int:
    """Validate a character position.

    Raises:
        InvalidPathError: If the value is not an integer.

    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPathError.invalid_index(value, argument=argument)
    return value
