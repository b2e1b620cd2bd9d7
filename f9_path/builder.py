"""Joining of path fragments."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .interfaces import PathGrammar


def combine(grammar: PathGrammar, *fragments: str) -> str:
    """Join ``fragments`` with the grammar's separator.

    A rooted fragment discards everything accumulated before it, so
    ``combine(g, "x", "/y", "z")`` is ``"/y/z"``. Once a verbatim fragment
    has started the result, later rooted fragments are appended instead.
    Empty fragments are ignored.

    Args:
        grammar: Grammar supplying separator and root rules.
        *fragments: Path fragments, left to right.

    Returns:
        The combined path, or ``""`` when every fragment is empty.

    """
    window: list[tuple[str, bool]] = []
    has_verbatim_root = False

    for fragment in fragments:
        if not fragment:
            continue

        root_len, verbatim = grammar.root_length(fragment)
        if root_len > 0 and not has_verbatim_root:
            window = []
            has_verbatim_root = verbatim

        ends_with_sep = grammar.is_separator(fragment[-1], verbatim)
        window.append((fragment, ends_with_sep))

    parts: list[str] = []
    last = len(window) - 1
    for index, (fragment, ends_with_sep) in enumerate(window):
        parts.append(fragment)
        if index != last and not ends_with_sep:
            parts.append(grammar.DIRSEP)
    return "".join(parts)
