"""Loader configuration model.

Validates the `loader` section of settings.yaml:

    loader:
      extension: py
      separator: "."
      legacy_separator: "_"
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

from .identifiers import DEFAULT_LEGACY_SEPARATOR
from .identifiers import DEFAULT_SEPARATOR

DEFAULT_EXTENSION = "py"


class ConfigError(Exception):
    """Raised when loader configuration is invalid."""


class LoaderConfig(BaseModel):
    """Naming and file conventions used by the resolver."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    extension: str = Field(default=DEFAULT_EXTENSION, description="Source file extension, without leading dot")
    separator: str = Field(default=DEFAULT_SEPARATOR, description="Hierarchy separator in identifiers")
    legacy_separator: str | None = Field(
        default=DEFAULT_LEGACY_SEPARATOR,
        description="Separator of the legacy flat naming convention (empty disables it)",
    )

    @field_validator("extension")
    @classmethod
    def _strip_extension_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("extension must not be empty")
        return value

    @field_validator("separator")
    @classmethod
    def _single_character_separator(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError(f"separator must be a single non-whitespace character, got {value!r}")
        return value

    @field_validator("legacy_separator")
    @classmethod
    def _optional_legacy_separator(cls, value: str | None) -> str | None:
        if not value:
            return None
        if len(value) != 1 or value.isspace():
            raise ValueError(f"legacy_separator must be a single non-whitespace character, got {value!r}")
        return value

    @model_validator(mode="after")
    def _distinct_separators(self) -> "LoaderConfig":
        if self.legacy_separator == self.separator:
            raise ValueError("separator and legacy_separator must differ")
        return self


def parse_loader_config(data: dict[str, Any] | None) -> LoaderConfig:
    """Build LoaderConfig from a settings section.

    Raises:
        ConfigError: Section is not a mapping or fails validation
    """
    if data is None:
        return LoaderConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"'loader' settings must be a mapping, got {type(data).__name__}")
    try:
        return LoaderConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid 'loader' settings:\n{e}") from e
