"""Pydantic configuration models for f9_path.

Settings are read from the environment with the ``F9_PATH_`` prefix; nested
fields use ``__`` (``F9_PATH_LOGGING__LEVEL=DEBUG``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from .interfaces import DEFAULT_RANDOM_TEMPLATE, MAX_PATH_LENGTH
from .utils import TEMPLATE_PLACEHOLDER

GrammarName = Literal["native", "posix", "windows"]


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None


class PathConfig(BaseSettings):
    """Root configuration for path engines."""

    grammar: GrammarName = "native"
    random_template: str = DEFAULT_RANDOM_TEMPLATE
    max_path_length: int = Field(default=MAX_PATH_LENGTH, ge=1, le=MAX_PATH_LENGTH)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "F9_PATH_",
        "env_nested_delimiter": "__",
    }

    @field_validator("random_template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Require at least one placeholder character."""
        if TEMPLATE_PLACEHOLDER not in v:
            raise ValueError("random_template must contain at least one 'X'")
        return v
