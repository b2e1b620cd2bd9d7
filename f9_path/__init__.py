"""Path-string manipulation for POSIX and Windows path grammars.

This package parses, decomposes, normalizes, compares and recombines path
strings without touching the filesystem. Both grammars are available in
every process, so Windows paths can be handled on Linux and vice versa.

Core Components:
    - PathGrammar: Abstract separator/root rules of one path syntax
    - PosixGrammar: ``/`` separated paths
    - WindowsGrammar: drive letters, UNC shares, device and verbatim paths
    - PathEngine: Validated path operations over one grammar
    - CompatiblePathEngine: PathEngine raising builtin exceptions

Quick Start:

    >>> from f9_path import resolve_engine
    >>> posix = resolve_engine("posix")
    >>> posix.combine("x", "/y", "z")
    '/y/z'
    >>> posix.full_path("/srv/app/../data/./file.txt").value
    '/srv/data/file.txt'

    >>> windows = resolve_engine("windows")
    >>> windows.root("\\\\\\\\?\\\\C:\\\\x")
    '\\\\\\\\?\\\\C:\\\\'
    >>> windows.is_fully_qualified("C:foo")
    False

Exception Handling:

    >>> from f9_path import InvalidPathError
    >>> try:
    ...     posix.full_path("a", base="relative/base")
    ... except InvalidPathError:
    ...     print("base must be fully qualified")

Supported Operations:
    - extension() / has_extension() / set_extension()
    - root() / set_root()
    - parent() / set_parent()
    - file_name() / set_file_name() / file_stem() / set_file_stem()
    - combine() / split()
    - is_rooted() / is_absolute() / is_fully_qualified() / is_empty()
    - is_valid_path() / is_valid_file_name() / is_separator()
    - starts_with() / ends_with()
    - trim_ending_separator() / ends_with_separator()
    - normalize() / full_path() / canonicalize()
    - random_file_name()

"""

from loguru import logger

from .compat import CompatiblePathEngine
from .config import LoggingConfig, PathConfig
from .engine import PathEngine
from .factory import (
    EngineFactory,
    engine_from_config,
    native_grammar_name,
    register_grammar,
    resolve_engine,
)
from .interfaces import (
    DEFAULT_RANDOM_TEMPLATE,
    Clock,
    InvalidPathError,
    PathComponents,
    PathError,
    PathGrammar,
    PathLike,
    PathSystem,
    RandomSource,
    SystemCallError,
    SystemFailure,
    SystemResult,
)
from .log import configure_logging
from .posix import PosixGrammar
from .system import OsPathSystem, SeededRandomSource, SystemClock
from .tokenizer import PathTokenizer
from .windows import WindowsGrammar

logger.disable(__name__)

__all__ = [
    "DEFAULT_RANDOM_TEMPLATE",
    "Clock",
    "CompatiblePathEngine",
    "EngineFactory",
    "InvalidPathError",
    "LoggingConfig",
    "OsPathSystem",
    "PathComponents",
    "PathConfig",
    "PathEngine",
    "PathError",
    "PathGrammar",
    "PathLike",
    "PathSystem",
    "PathTokenizer",
    "PosixGrammar",
    "RandomSource",
    "SeededRandomSource",
    "SystemCallError",
    "SystemClock",
    "SystemFailure",
    "SystemResult",
    "WindowsGrammar",
    "configure_logging",
    "engine_from_config",
    "native_grammar_name",
    "register_grammar",
    "resolve_engine",
]
