"""Shared helper functions for path operations.

This module holds the small, grammar-independent pieces used by the engine
and the validation layer.

Key utilities:
- Blank path detection
- Lua-style character position normalization
- Random file name generation from ``X`` templates

Example usage:
    >>> from f9_path.utils import normalize_index
    >>> normalize_index(-1, 5)
    5

    >>> from f9_path.utils import fill_template
    >>> fill_template("tmpXX", random_source)
    'tmp4k'
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .interfaces import RandomSource

FILE_NAME_CHARS = string.ascii_lowercase + string.ascii_uppercase + string.digits
TEMPLATE_PLACEHOLDER = "X"


def is_blank(path: str) -> bool:
    """Return True if ``path`` is empty or made only of spaces.

    Only the space character counts; tabs and newlines are regular
    characters in a path.
    """
    return path.strip(" ") == ""


def normalize_index(index: int, length: int) -> int:
    """Convert a 1-based, possibly negative, position to a 1-based position.

    Positive values are returned unchanged. Negative values count from the
    end (``-1`` is the last character). ``0`` and values before the start
    clamp to ``1``.

    Args:
        index: Position as given by the caller.
        length: Length of the string being indexed.

    Returns:
        A position ``>= 1``; it can exceed ``length`` when ``index`` does.

    """
    if index > 0:
        return index
    if index == 0 or index < -length:
        return 1
    return length + index + 1


def is_valid_template(template: str) -> bool:
    """Return True if ``template`` holds at least one placeholder."""
    return TEMPLATE_PLACEHOLDER in template


def fill_template(template: str, random_source: RandomSource) -> str:
    """Replace every ``X`` in ``template`` with a random letter or digit.

    Args:
        template: File name template; callers validate it first.
        random_source: Source of randomness.

    Returns:
        The template with each placeholder substituted.

    """
    count = len(FILE_NAME_CHARS)
    return "".join(
        FILE_NAME_CHARS[random_source.randbelow(count)] if char == TEMPLATE_PLACEHOLDER else char
        for char in template
    )
