"""One-pass decomposition of a path into root, parent, file name and extension."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .interfaces import PathComponents

if TYPE_CHECKING:
    from .interfaces import PathGrammar

_EMPTY = PathComponents(root_len=0, dir_len=0, file_offset=0, ext_offset=0, verbatim=False)


def split_path(grammar: PathGrammar, path: str) -> PathComponents:
    """Compute the component offsets of ``path``.

    Args:
        grammar: Grammar used to classify the root and separators.
        path: Path to split.

    Returns:
        PathComponents for ``path``. For ``"/usr/lib.so/x.tar.gz"`` on POSIX
        this is ``root_len=1, dir_len=11, file_offset=12, ext_offset=18``.

    """
    path_len = len(path)
    if path_len == 0:
        return _EMPTY

    root_len, verbatim = grammar.root_length(path)
    is_sep = grammar.is_separator

    file_offset = root_len
    for index in range(path_len - 1, root_len, -1):
        if is_sep(path[index], verbatim):
            file_offset = index + 1
            break

    dir_len = file_offset
    while dir_len > root_len and is_sep(path[dir_len - 1], verbatim):
        dir_len -= 1

    # A dot at the first or second character of the file name never starts
    # an extension.
    ext_offset = 0
    for index in range(path_len - 1, file_offset + 1, -1):
        if path[index] == ".":
            ext_offset = index + 1
            break

    return PathComponents(
        root_len=root_len,
        dir_len=dir_len,
        file_offset=file_offset,
        ext_offset=ext_offset,
        verbatim=verbatim,
    )
