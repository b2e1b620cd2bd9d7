"""Component-wise, ASCII case-insensitive prefix and suffix matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tokenizer import PathTokenizer

if TYPE_CHECKING:
    from .interfaces import PathGrammar

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def compare_paths(path: str, other: str) -> int:
    """Compare two path fragments for equality.

    Fragments of different length are never equal and are ordered by length
    alone, without looking at their content. Fragments of equal length are
    compared with ASCII case folding.

    Args:
        path: First fragment.
        other: Second fragment.

    Returns:
        ``0`` when equal, otherwise ``-1`` or ``1``.

    """
    if len(path) != len(other):
        return 1 if len(path) > len(other) else -1
    folded = path.translate(_ASCII_LOWER)
    other_folded = other.translate(_ASCII_LOWER)
    if folded == other_folded:
        return 0
    return 1 if folded > other_folded else -1


def _same_root(grammar: PathGrammar, root: str, other: str) -> bool:
    # "c:/" and "C:\" name the same root
    return compare_paths(grammar.normalize(root), grammar.normalize(other)) == 0


def starts_with(grammar: PathGrammar, path: str, prefix: str) -> bool:
    """Return True if the leading components of ``path`` match ``prefix``.

    Roots must match after separator normalization, so ``c:/`` and ``C:\\``
    are the same root. ``"/a/bc"`` does not start with ``"/a/b"``.
    """
    if not path or not prefix:
        return len(path) == len(prefix)

    path_root_len, path_verbatim = grammar.root_length(path)
    prefix_root_len, prefix_verbatim = grammar.root_length(prefix)
    if not _same_root(grammar, path[:path_root_len], prefix[:prefix_root_len]):
        return False

    path_tokens = PathTokenizer(grammar, path[path_root_len:], path_verbatim)
    prefix_tokens = PathTokenizer(grammar, prefix[prefix_root_len:], prefix_verbatim)
    while True:
        path_token = path_tokens.next()
        prefix_token = prefix_tokens.next()
        if prefix_token is None:
            return True
        if path_token is None:
            return False
        if compare_paths(path_token, prefix_token) != 0:
            return False


def ends_with(grammar: PathGrammar, path: str, suffix: str) -> bool:
    """Return True if the trailing components of ``path`` match ``suffix``.

    A relative suffix may match anywhere at the tail; a rooted suffix has to
    match the root of ``path`` and cover all of its components. Roots are
    compared after separator normalization, so ``c:/`` matches ``C:\\``.
    """
    if not path or not suffix:
        return not suffix

    path_root_len, path_verbatim = grammar.root_length(path)
    suffix_root_len, suffix_verbatim = grammar.root_length(suffix)
    anchored = suffix_root_len > 0
    if anchored and not _same_root(grammar, path[:path_root_len], suffix[:suffix_root_len]):
        return False

    path_tokens = PathTokenizer(grammar, path[path_root_len:], path_verbatim)
    suffix_tokens = PathTokenizer(grammar, suffix[suffix_root_len:], suffix_verbatim)
    while True:
        path_token = path_tokens.next_back()
        suffix_token = suffix_tokens.next_back()
        if suffix_token is None:
            return not anchored or path_token is None
        if path_token is None:
            return False
        if compare_paths(path_token, suffix_token) != 0:
            return False
