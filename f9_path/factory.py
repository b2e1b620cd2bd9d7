"""Engine factory for grammar selection and engine instantiation.

This module builds :class:`PathEngine` instances from grammar spec strings
or from a :class:`PathConfig`. The grammar is chosen once, when the engine is
created; the engine never looks at the host platform again.

Supported grammar names:
    - posix - PosixGrammar
    - windows - WindowsGrammar
    - native - the grammar of the running host

A spec string is a grammar name optionally followed by query options:

    - template - default template for random_file_name
    - max_length - longest accepted path argument

Example:
    >>> from f9_path.factory import resolve_engine
    >>> engine = resolve_engine("windows")
    >>> engine = resolve_engine("posix?template=tmpXXXXXX&max_length=4096")
    >>> engine = resolve_engine()  # native grammar, settings from F9_PATH_*

"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import parse_qs

from loguru import logger

from .config import PathConfig
from .engine import PathEngine
from .posix import PosixGrammar
from .windows import WindowsGrammar

if TYPE_CHECKING:
    from .interfaces import PathGrammar

NATIVE = "native"


def native_grammar_name() -> str:
    """Return the grammar name matching the running host."""
    return "windows" if os.name == "nt" else "posix"


class EngineFactory:
    """Factory for creating engines from grammar spec strings."""

    def __init__(self) -> None:
        """Initialize the factory with the built-in grammars."""
        self._grammars: dict[str, Callable[[], PathGrammar]] = {
            "posix": PosixGrammar,
            "windows": WindowsGrammar,
        }

    def parse_spec(self, spec: str) -> tuple[str, dict[str, str]]:
        """Parse a spec string into grammar name and options.

        Args:
            spec: Spec string such as ``"windows?template=tmpXXXX"``

        Returns:
            Tuple of (name, params) where params is a dict of query options

        Raises:
            ValueError: If the grammar name is missing

        """
        name, _, query = spec.partition("?")
        name = name.strip().lower()
        if not name:
            msg = f"Invalid grammar spec: missing grammar name in '{spec}'"
            raise ValueError(msg)

        params: dict[str, str] = {}
        if query:
            params = {key: values[0] for key, values in parse_qs(query).items()}
        return name, params

    def grammar(self, name: str) -> PathGrammar:
        """Return a new grammar instance for ``name``.

        Raises:
            ValueError: If the grammar name is unknown

        """
        if name == NATIVE:
            name = native_grammar_name()
        if name not in self._grammars:
            supported = ", ".join(sorted([*self._grammars, NATIVE]))
            msg = f"Unsupported grammar: '{name}'. Supported grammars: {supported}"
            raise ValueError(msg)
        return self._grammars[name]()

    def resolve(self, spec: str, **collaborators: Any) -> PathEngine:
        """Create an engine from a spec string.

        Args:
            spec: Grammar spec string
            **collaborators: ``system``, ``clock`` and ``random_source``
                forwarded to :class:`PathEngine`

        Returns:
            PathEngine instance

        Raises:
            ValueError: If the spec, its grammar or max_length is invalid
            InvalidPathError: If the template option has no ``X``

        """
        name, params = self.parse_spec(spec)
        grammar = self.grammar(name)

        options: dict[str, Any] = {}
        if "template" in params:
            options["random_template"] = params["template"]
        if "max_length" in params:
            try:
                options["max_path_length"] = int(params["max_length"])
            except ValueError as exc:
                msg = f"Invalid max_length in grammar spec: '{params['max_length']}'"
                raise ValueError(msg) from exc

        logger.debug("Resolved grammar spec {!r} to {}", spec, grammar.name)
        return PathEngine(grammar, **options, **collaborators)

    def from_config(self, config: PathConfig, **collaborators: Any) -> PathEngine:
        """Create an engine from a :class:`PathConfig`."""
        grammar = self.grammar(config.grammar)
        logger.debug("Configured grammar {} from settings", grammar.name)
        return PathEngine(
            grammar,
            random_template=config.random_template,
            max_path_length=config.max_path_length,
            **collaborators,
        )

    def register(self, name: str, grammar_factory: Callable[[], PathGrammar]) -> None:
        """Register a custom grammar under ``name``.

        Args:
            name: Grammar name (e.g., "vms")
            grammar_factory: Callable returning a PathGrammar

        """
        if not callable(grammar_factory):
            msg = "grammar_factory must be callable"
            raise TypeError(msg)
        name = name.lower()
        if name == NATIVE:
            msg = f"'{NATIVE}' is reserved for the host grammar"
            raise ValueError(msg)
        self._grammars[name] = grammar_factory


# Global default factory instance
_default_factory = EngineFactory()


def resolve_engine(spec: str | None = None, **collaborators: Any) -> PathEngine:
    """Build an engine from a spec string, or from the environment when omitted.

    Args:
        spec: Grammar spec string; None reads :class:`PathConfig` from the
            ``F9_PATH_*`` environment variables
        **collaborators: ``system``, ``clock`` and ``random_source``

    Returns:
        PathEngine instance

    Example:
        >>> engine = resolve_engine("windows")
        >>> engine.root("\\\\\\\\server\\\\share\\\\file")
        '\\\\\\\\server\\\\share\\\\'

    """
    if spec is None:
        return _default_factory.from_config(PathConfig(), **collaborators)
    return _default_factory.resolve(spec, **collaborators)


def engine_from_config(config: PathConfig, **collaborators: Any) -> PathEngine:
    """Build an engine from an explicit configuration object."""
    return _default_factory.from_config(config, **collaborators)


def register_grammar(name: str, grammar_factory: Callable[[], PathGrammar]) -> None:
    """Register a custom grammar with the default factory.

    Example:
        >>> class UrlPathGrammar(PosixGrammar):
        ...     name = "url"
        >>> register_grammar("url", UrlPathGrammar)
        >>> engine = resolve_engine("url")

    """
    _default_factory.register(name, grammar_factory)
