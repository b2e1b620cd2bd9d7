"""Component tokenizer over a root-stripped path.

A tokenizer is a single-pass cursor: both ``next`` and ``next_back`` shrink
the same window, so consuming from the front and the back never yields a
component twice. Build a new tokenizer to scan again.

Example:

    >>> from f9_path.posix import PosixGrammar
    >>> tokens = PathTokenizer(PosixGrammar(), "./a/./b/")
    >>> list(tokens)
    ['a', 'b']
    >>> list(PathTokenizer(PosixGrammar(), "./a/./b/").reversed_tokens())
    ['b', 'a']

"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .interfaces import PathGrammar


class PathTokenizer:
    """Yield the components of a path from the front or from the back.

    Empty segments are never produced. Outside verbatim mode a ``.`` segment
    is a no-op and is skipped as well.
    """

    def __init__(self, grammar: PathGrammar, path: str, verbatim: bool = False) -> None:
        """Initialise the tokenizer over ``path``.

        Args:
            grammar: Grammar supplying the separator rules.
            path: Path with its root already removed.
            verbatim: Take every segment literally, ``.`` included.

        """
        self._is_sep = grammar.is_separator
        self._path = path
        self.verbatim = verbatim

        start, end = 0, len(path)
        while start < end and self._is_sep(path[start], verbatim):
            start += 1
        while end > start and self._is_sep(path[end - 1], verbatim):
            end -= 1
        self._start = start
        self._end = end

    @property
    def remaining(self) -> str:
        """The part of the path that has not been consumed yet."""
        return self._path[self._start:self._end]

    def next(self) -> str | None:
        """Consume and return the next component from the front."""
        path, end, verbatim = self._path, self._end, self.verbatim
        pos = self._start
        token = None
        while True:
            while pos < end and self._is_sep(path[pos], verbatim):
                pos += 1
            if pos == end:
                break

            begin = pos
            while pos < end and not self._is_sep(path[pos], verbatim):
                pos += 1

            if verbatim or path[begin:pos] != ".":
                token = path[begin:pos]
                break
        self._start = pos
        return token

    def next_back(self) -> str | None:
        """Consume and return the next component from the back."""
        path, start, verbatim = self._path, self._start, self.verbatim
        pos = self._end
        token = None
        while True:
            while pos > start and self._is_sep(path[pos - 1], verbatim):
                pos -= 1
            if pos == start:
                break

            finish = pos
            while pos > start and not self._is_sep(path[pos - 1], verbatim):
                pos -= 1

            if verbatim or path[pos:finish] != ".":
                token = path[pos:finish]
                break
        self._end = pos
        return token

    def __iter__(self) -> Iterator[str]:
        """Consume the remaining components from the front."""
        token = self.next()
        while token is not None:
            yield token
            token = self.next()

    def reversed_tokens(self) -> Iterator[str]:
        """Consume the remaining components from the back."""
        token = self.next_back()
        while token is not None:
            yield token
            token = self.next_back()
