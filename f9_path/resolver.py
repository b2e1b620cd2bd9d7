"""Full-path resolution helpers.

``collapse_dot_segments`` is the manual resolver used by the POSIX grammar:
it walks a rooted path once, collapsing separator runs, dropping ``.``
segments and rewinding on ``..`` without ever climbing above the root.

``join_with_base`` prepares a relative path for resolution against an
explicit base directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .interfaces import PathGrammar


def collapse_dot_segments(grammar: PathGrammar, path: str, root_len: int) -> str:
    """Resolve ``.`` and ``..`` segments of a rooted path.

    Args:
        grammar: Grammar supplying the separator rules.
        path: Rooted path to resolve.
        root_len: Length of the root prefix of ``path``; must be positive.

    Returns:
        The resolved path. The root is preserved and ``..`` never rewinds
        past it.

    Example:

        >>> collapse_dot_segments(PosixGrammar(), "/a/./b/../c", 1)
        '/a/c'
        >>> collapse_dot_segments(PosixGrammar(), "/../..", 1)
        '/'

    """
    is_sep = grammar.is_separator
    path_len = len(path)

    # The root's own trailing separator is tracked apart from the output so
    # that a rewind stops in front of it.
    skip = root_len - 1 if is_sep(path[root_len - 1]) else root_len
    out = list(path[:skip])

    i = skip
    while i < path_len:
        char = path[i]
        if is_sep(char) and i + 1 < path_len:
            nxt = path[i + 1]
            if is_sep(nxt):
                i += 1
                continue

            # "/." followed by a separator or the end
            if nxt == "." and (i + 2 == path_len or is_sep(path[i + 2])):
                i += 2
                continue

            # "/.." followed by a separator or the end
            if (
                nxt == "."
                and i + 2 < path_len
                and path[i + 2] == "."
                and (i + 3 == path_len or is_sep(path[i + 3]))
            ):
                rewind = skip
                for j in range(len(out) - 1, root_len - 1, -1):
                    if is_sep(out[j]):
                        rewind = j
                        break
                del out[max(rewind, skip):]
                i += 3
                continue

        out.append(char)
        i += 1

    if skip != root_len and len(out) < root_len:
        out.append(path[root_len - 1])

    return "".join(out)


def join_with_base(grammar: PathGrammar, path: str, base: str) -> str:
    """Combine a not fully qualified ``path`` with a fully qualified ``base``.

    Root-relative (``\\x``) and drive-relative (``C:x``) Windows paths are
    anchored the way the OS would anchor them against ``base``: the former to
    the root of ``base``, the latter to ``base`` when the drives match and to
    the root of their own drive otherwise. Any other path is appended to
    ``base`` after a separator.

    Args:
        grammar: Grammar supplying separator and root rules.
        path: Relative path; may be empty.
        base: Fully qualified base directory.

    Returns:
        A path ready to be handed to :meth:`PathGrammar.full_path`.

    """
    if not path:
        return base

    sep = grammar.DIRSEP
    root_len, _ = grammar.root_length(path)

    if root_len == 1 and grammar.is_separator(path[0]):
        base_root_len, _ = grammar.root_length(base)
        base_root = base[:base_root_len]
        rest = path[1:]
        if base_root and grammar.is_separator(base_root[-1]):
            return base_root + rest
        return base_root + sep + rest

    if root_len == 2 and path[1] == ":":
        rest = path[2:]
        if base[:2].lower() == path[:2].lower():
            return _append(grammar, base, rest)
        return path[:2] + sep + rest

    return _append(grammar, base, path)


def _append(grammar: PathGrammar, head: str, tail: str) -> str:
    if not tail:
        return head
    if grammar.is_separator(head[-1], grammar.is_verbatim(head)):
        return head + tail
    return head + grammar.DIRSEP + tail
