"""Path engine: the public operations over one path grammar.

A :class:`PathEngine` binds a :class:`PathGrammar` to the collaborators it
needs (system, clock, random source) and exposes every path operation. All
operations except :meth:`PathEngine.full_path` and
:meth:`PathEngine.canonicalize` are pure string computations; those two
delegate to the system collaborator and report OS failures as a
:class:`SystemResult` instead of raising.

Arguments are validated before any grammar logic runs. Invalid arguments
raise :class:`InvalidPathError`.

Example:

    >>> from f9_path import PathEngine, WindowsGrammar
    >>> engine = PathEngine(WindowsGrammar())
    >>> engine.root("C:\\\\data\\\\report.txt")
    'C:\\\\'
    >>> engine.set_extension("C:\\\\data\\\\report.txt", "csv")
    'C:\\\\data\\\\report.csv'
    >>> engine.starts_with("C:\\\\Data\\\\Report.txt", "c:/data")
    True

    >>> value, error = engine.full_path("report.txt")
    >>> if error is not None:
    ...     print(error.message)

See Also:
    - factory.resolve_engine: Build an engine from a grammar name
    - compat.CompatiblePathEngine: Builtin exceptions instead of results

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from . import builder, matching, resolver
from .interfaces import DEFAULT_RANDOM_TEMPLATE, MAX_PATH_LENGTH, SystemResult
from .splitter import split_path
from .system import OsPathSystem, SeededRandomSource, SystemClock
from .tokenizer import PathTokenizer
from .utils import fill_template, is_blank, normalize_index
from .validation import (
    check_index,
    check_optional_path,
    check_optional_string,
    check_path,
    check_string,
    check_template,
    is_valid_file_name,
    is_valid_path,
    validate_fully_qualified,
)

if TYPE_CHECKING:
    from .interfaces import Clock, PathComponents, PathGrammar, PathSystem, RandomSource


class PathEngine:
    """Path operations for a single grammar."""

    def __init__(
        self,
        grammar: PathGrammar,
        *,
        system: PathSystem | None = None,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
        random_template: str = DEFAULT_RANDOM_TEMPLATE,
        max_path_length: int = MAX_PATH_LENGTH,
    ) -> None:
        """Initialise the engine.

        Args:
            grammar: Path syntax the engine operates on.
            system: OS collaborator; defaults to :class:`OsPathSystem`.
            clock: Monotonic clock; defaults to :class:`SystemClock`.
            random_source: Random source for :meth:`random_file_name`;
                defaults to a generator seeded from ``clock``.
            random_template: Template used when :meth:`random_file_name` is
                called without one.
            max_path_length: Longest path accepted by validated arguments.

        """
        self.grammar = grammar
        self.system = system or OsPathSystem()
        self.clock = clock or SystemClock()
        self.random_source = random_source or SeededRandomSource(self.clock)
        self.random_template = check_template(random_template, argument="random_template")
        self.max_path_length = max_path_length

    @property
    def DIRSEP(self) -> str:  # noqa: N802
        """Primary directory separator."""
        return self.grammar.DIRSEP

    @property
    def ALTDIRSEP(self) -> str:  # noqa: N802
        """Alternate directory separator."""
        return self.grammar.ALTDIRSEP

    @property
    def PATHSEP(self) -> str:  # noqa: N802
        """Separator between entries of a path list such as ``PATH``."""
        return self.grammar.PATHSEP

    def _check_path(self, value: Any, argument: str) -> str:
        return check_path(self.grammar, value, argument=argument, max_length=self.max_path_length)

    def components(self, path: Any) -> PathComponents:
        """Return the root/parent/file/extension offsets of ``path``."""
        path = check_string(path, argument="path")
        return split_path(self.grammar, path)

    def tokenize(self, path: Any) -> PathTokenizer:
        """Return a tokenizer over the components following the root of ``path``."""
        path = check_string(path, argument="path")
        root_len, verbatim = self.grammar.root_length(path)
        return PathTokenizer(self.grammar, path[root_len:], verbatim)

    def extension(self, path: Any) -> str | None:
        """Return the extension of ``path`` without its dot, or None."""
        path = check_string(path, argument="path")
        ext_offset = split_path(self.grammar, path).ext_offset
        if ext_offset == 0 or ext_offset == len(path):
            return None
        return path[ext_offset:]

    def has_extension(self, path: Any) -> bool:
        """Return True if the file name of ``path`` has an extension."""
        path = check_string(path, argument="path")
        return split_path(self.grammar, path).ext_offset != 0

    def set_extension(self, path: Any, ext: Any = None) -> str:
        """Change or remove the extension of ``path``.

        Args:
            path: Path to modify.
            ext: New extension, with or without a leading dot. None or an
                empty string removes the extension.

        Returns:
            The modified path. Paths without a file name are returned as-is.

        """
        path = check_string(path, argument="path")
        ext = check_optional_string(ext, argument="ext")
        if not path:
            return path

        components = split_path(self.grammar, path)
        if components.file_offset == len(path):
            return path

        stem_len = components.ext_offset - 1 if components.ext_offset else len(path)
        if ext and ext[0] == ".":
            ext = ext[1:]
        if not ext:
            return path[:stem_len]
        return f"{path[:stem_len]}.{ext}"

    def root(self, path: Any) -> str | None:
        """Return the root of ``path``, or None if it has none."""
        path = self._check_path(path, "path")
        if not path:
            return path
        root_len, _ = self.grammar.root_length(path)
        if root_len == 0:
            return None
        return path[:root_len]

    def set_root(self, path: Any, root: Any = None) -> str:
        """Replace the root of ``path``.

        Args:
            path: Path to modify.
            root: New root. None or an empty string removes the root.

        Returns:
            The modified path.

        """
        path = self._check_path(path, "path")
        root = check_optional_string(root, argument="root")
        if root is not None:
            root = self._check_path(root, "root")

        root_len, _ = self.grammar.root_length(path)
        if root_len == len(path):
            return root or ""

        rest = path[root_len:]
        if not root:
            return rest
        if self.grammar.is_separator(root[-1], self.grammar.is_verbatim(root)):
            return root + rest
        return root + self.grammar.DIRSEP + rest

    def parent(self, path: Any) -> str | None:
        """Return the directory part of ``path``.

        Returns:
            The parent directory, or None for root-only paths and for paths
            without a directory part.

        """
        path = check_string(path, argument="path")
        components = split_path(self.grammar, path)
        if components.root_len == len(path) or components.dir_len == 0:
            return None
        return path[:components.dir_len]

    def set_parent(self, path: Any, parent: Any) -> str:
        """Replace the directory part of ``path`` with ``parent``."""
        path = check_string(path, argument="path")
        parent = check_string(parent, argument="parent")

        file_offset = split_path(self.grammar, path).file_offset
        if file_offset == len(path):
            return parent
        file_name = path[file_offset:]
        if not parent:
            return file_name
        if self.grammar.is_separator(parent[-1], self.grammar.is_verbatim(parent)):
            return parent + file_name
        return parent + self.grammar.DIRSEP + file_name

    def file_name(self, path: Any) -> str | None:
        """Return the file name of ``path``, or None if it ends at a separator."""
        path = check_string(path, argument="path")
        file_offset = split_path(self.grammar, path).file_offset
        if file_offset == len(path):
            return None
        return path[file_offset:]

    def set_file_name(self, path: Any, file_name: Any) -> str:
        """Replace the file name of ``path``; an empty name removes it."""
        path = check_string(path, argument="path")
        file_name = check_string(file_name, argument="file_name")

        components = split_path(self.grammar, path)
        if components.file_offset == 0:
            return file_name
        head = path[:components.file_offset]
        if not file_name:
            return head
        return head + self._joiner(path, components) + file_name

    def file_stem(self, path: Any) -> str | None:
        """Return the file name of ``path`` without its extension."""
        path = check_string(path, argument="path")
        components = split_path(self.grammar, path)
        if components.file_offset == len(path):
            return None
        end = components.ext_offset - 1 if components.ext_offset else len(path)
        return path[components.file_offset:end]

    def set_file_stem(self, path: Any, file_stem: Any) -> str:
        """Replace the file stem of ``path``, keeping its extension."""
        path = check_string(path, argument="path")
        file_stem = check_string(file_stem, argument="file_stem")

        components = split_path(self.grammar, path)
        ext = path[components.ext_offset - 1:] if components.ext_offset else ""
        if components.file_offset == 0:
            return file_stem + ext
        head = path[:components.file_offset]
        return head + self._joiner(path, components) + file_stem + ext

    def _joiner(self, path: str, components: PathComponents) -> str:
        """Return the separator needed in front of a new file name."""
        file_offset = components.file_offset
        if file_offset <= components.root_len:
            return ""
        if self.grammar.is_separator(path[file_offset - 1], components.verbatim):
            return ""
        return self.grammar.DIRSEP

    def combine(self, *fragments: Any) -> str:
        """Join path fragments; a rooted fragment restarts the result."""
        checked = [
            check_string(fragment, argument=f"fragment #{index}")
            for index, fragment in enumerate(fragments, start=1)
        ]
        return builder.combine(self.grammar, *checked)

    def split(self, path: Any) -> tuple[str | None, str | None]:
        """Break ``path`` into its directory part and file name.

        Returns:
            ``(directory, file_name)``. For a root-only path this is
            ``(path, None)``; either element is None when that part is
            missing.

        """
        path = check_string(path, argument="path")
        if not path:
            return None, None
        components = split_path(self.grammar, path)
        head = path[:components.dir_len] or None
        if components.file_offset == len(path):
            return head, None
        return head, path[components.file_offset:]

    def is_rooted(self, path: Any) -> bool:
        """Return True if ``path`` has a root."""
        return self.grammar.is_rooted(check_string(path, argument="path"))

    def is_absolute(self, path: Any) -> bool:
        """Return True if ``path`` starts at a filesystem root."""
        return self.grammar.is_absolute(check_string(path, argument="path"))

    def is_fully_qualified(self, path: Any) -> bool:
        """Return True if ``path`` does not depend on a current directory."""
        return self.grammar.is_fully_qualified(check_string(path, argument="path"))

    def is_empty(self, path: Any) -> bool:
        """Return True if ``path`` is empty or made only of spaces."""
        return is_blank(check_string(path, argument="path"))

    def is_valid_path(self, path: Any) -> bool:
        """Return True if ``path`` holds only characters valid in a path."""
        return is_valid_path(self.grammar, check_string(path, argument="path"))

    def is_valid_file_name(self, path: Any) -> bool:
        """Return True if ``path`` holds only characters valid in a file name."""
        return is_valid_file_name(self.grammar, check_string(path, argument="path"))

    def is_separator(self, path: Any, index: Any) -> bool:
        """Return True if the character at ``index`` is a directory separator.

        Args:
            path: Path to inspect.
            index: 1-based position; negative values count from the end.

        """
        path = check_string(path, argument="path")
        index = normalize_index(check_index(index, argument="index"), len(path))
        if not path or index > len(path):
            return False
        return self.grammar.is_separator(path[index - 1], self.grammar.is_verbatim(path))

    def ends_with_separator(self, path: Any) -> bool:
        """Return True if ``path`` ends with a directory separator."""
        path = check_string(path, argument="path")
        if not path:
            return False
        return self.grammar.is_separator(path[-1], self.grammar.is_verbatim(path))

    def trim_ending_separator(self, path: Any) -> str:
        """Remove one trailing separator unless ``path`` is only a root."""
        path = check_string(path, argument="path")
        if not path:
            return path
        root_len, verbatim = self.grammar.root_length(path)
        if root_len == len(path) or not self.grammar.is_separator(path[-1], verbatim):
            return path
        return path[:-1]

    def starts_with(self, path: Any, prefix: Any) -> bool:
        """Return True if ``path`` begins with the components of ``prefix``.

        Matching is component-wise and ASCII case-insensitive.
        """
        path = check_string(path, argument="path")
        prefix = check_string(prefix, argument="prefix")
        return matching.starts_with(self.grammar, path, prefix)

    def ends_with(self, path: Any, suffix: Any) -> bool:
        """Return True if ``path`` ends with the components of ``suffix``.

        Matching is component-wise and ASCII case-insensitive.
        """
        path = check_string(path, argument="path")
        suffix = check_string(suffix, argument="suffix")
        return matching.ends_with(self.grammar, path, suffix)

    def random_file_name(self, template: Any = None) -> str:
        """Return a file name built from ``template``.

        Every ``X`` in the template is replaced with a random ASCII letter
        or digit.

        Raises:
            InvalidPathError: If the template contains no ``X``.

        """
        if template is None:
            template = self.random_template
        template = check_template(template, argument="template")
        return fill_template(template, self.random_source)

    def normalize(self, path: Any) -> str:
        """Canonicalise the separators of ``path``.

        ``.`` and ``..`` are left alone; verbatim paths are returned as-is.
        """
        path = check_string(path, argument="path")
        return self.grammar.normalize(path)

    def full_path(self, path: Any, base: Any = None) -> SystemResult:
        """Return the absolute form of ``path``.

        Args:
            path: Path to resolve.
            base: Fully qualified directory to resolve ``path`` against
                instead of the current directory.

        Returns:
            SystemResult holding the absolute path or the OS failure.

        Raises:
            InvalidPathError: If ``path`` or ``base`` is invalid, or ``base``
                is not fully qualified.

        """
        path = self._check_path(path, "path")
        base = check_optional_path(
            self.grammar,
            base,
            argument="base",
            max_length=self.max_path_length,
        )
        if base is not None:
            validate_fully_qualified(self.grammar, base, argument="base")
            if not self.grammar.is_fully_qualified(path):
                path = resolver.join_with_base(self.grammar, path, base)

        result = self.grammar.full_path(path, self.system)
        if not result.ok:
            logger.debug("full_path failed for {!r}: {}", path, result.error.message)
        return result

    def canonicalize(self, path: Any) -> SystemResult:
        """Return the canonical path of an existing file as reported by the OS."""
        path = self._check_path(path, "path")
        if not path:
            return SystemResult.success(path)
        result = self.system.realpath(path)
        if not result.ok:
            logger.debug("canonicalize failed for {!r}: {}", path, result.error.message)
        return result

    def __repr__(self) -> str:
        """Return a short description of the engine."""
        return f"PathEngine({self.grammar!r})"
