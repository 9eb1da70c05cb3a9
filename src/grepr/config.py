"""TOML configuration with Pydantic validation, and the per-run search options."""

import codecs
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError
from .formatter import HighlightMode
from .utils import fatal

DEFAULT_CONFIG_PATH = Path("~/.config/grepr/config.toml")


class ColorMode(StrEnum):
    """When to emit ANSI styles."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def enabled(self, is_terminal: bool) -> bool:
        """Resolve the mode against whether stdout is a terminal."""
        if self is ColorMode.AUTO:
            return is_terminal
        return self is ColorMode.ALWAYS


def _check_encoding(value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise ValueError(f"unknown encoding: {value}") from e
    return value


class GreprConfig(BaseModel):
    """Defaults read from ``config.toml``; command-line flags take precedence."""

    model_config = ConfigDict(extra="forbid")

    color: ColorMode = ColorMode.AUTO
    highlight: HighlightMode = HighlightMode.OFFSETS
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        """Reject encodings Python does not know."""
        return _check_encoding(value)

    @classmethod
    def load(cls, path: Path) -> Self:
        """Load and validate config from a TOML file, raising ConfigError."""
        try:
            with path.expanduser().open("rb") as f:
                data = tomllib.load(f)
            return cls(**data)
        except ValidationError as e:
            errors = []
            for err in e.errors():
                field = ".".join(str(part) for part in err["loc"])
                errors.append(f"  {field}: {err['msg']}")
            raise ConfigError("config validation errors", errors) from e
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"can't load config: {e}") from e

    @classmethod
    def load_or_exit(cls, path: Path) -> Self:
        """Load and validate config. Print error and exit(1) on failure."""
        try:
            return cls.load(path)
        except ConfigError as e:
            fatal("\n".join([str(e), *e.errors]))

    @classmethod
    def discover(cls, path: Path | None = None) -> Self:
        """Load ``path`` if given, else the default file if it exists, else defaults."""
        if path is not None:
            return cls.load_or_exit(path)
        if DEFAULT_CONFIG_PATH.expanduser().is_file():
            return cls.load_or_exit(DEFAULT_CONFIG_PATH)
        return cls()


class SearchOptions(BaseModel):
    """Everything a run needs besides the pattern and the sources; built once per process."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_case: bool = False
    invert: bool = False
    count: bool = False
    recursive: bool = False
    color: ColorMode = ColorMode.AUTO
    highlight: HighlightMode = HighlightMode.OFFSETS
    encoding: str = "utf-8"
    json_mode: bool = False

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        """Reject encodings Python does not know."""
        return _check_encoding(value)
