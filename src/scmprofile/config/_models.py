# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the Pydantic models for scmprofile settings: the
``[git]`` section consumed by the command gateway and root resolver, and
the ``[logging]`` section consumed by the logger factories.
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scmprofile.config._discovery import get_user_config_path
from scmprofile.config._loader import deep_merge, parse_env_vars, read_toml_file
from scmprofile.exceptions import ConfigLoadError


class LogLevel(StrEnum):
    """Log level threshold values."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file (empty writes to stderr).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class GitSettings(BaseModel):
    """Git invocation settings.

    Attributes:
        executable: Name or path of the git binary.
        metadata_dir: Name of the repository metadata directory.
        env: Extra environment variables for every git invocation.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    executable: str = Field(default="git", min_length=1)
    metadata_dir: str = Field(default=".git", min_length=1)
    env: dict[str, str] = Field(default_factory=dict)


class Config(BaseModel):
    """Top-level scmprofile configuration.

    Use the factory methods rather than the constructor when reading
    configuration from files or the environment.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    git: GitSettings = Field(default_factory=GitSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, source: Path | None = None) -> Self:
        """Validate a configuration dictionary.

        Raises:
            ConfigLoadError: If the data fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid configuration: {e}"
            raise ConfigLoadError(msg, path=source) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a single TOML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed or validated.
        """
        return cls.from_dict(read_toml_file(path), source=path)

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        *,
        include_user: bool = True,
        include_env: bool = True,
        environ: dict[str, str] | None = None,
    ) -> Self:
        """Load configuration from all sources.

        Precedence, lowest to highest: defaults, the user config file,
        an explicit config file, ``SCMPROFILE_*`` environment variables.

        Args:
            config_path: Explicit config file. Must exist when given.
            include_user: Whether to read the platform user config file.
            include_env: Whether to apply environment overrides.
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            FileNotFoundError: If `config_path` is given but missing.
            ConfigLoadError: If any source cannot be parsed or validated.
        """
        data: dict[str, Any] = {}

        if include_user:
            user_path = get_user_config_path()
            if user_path.is_file():
                data = deep_merge(data, read_toml_file(user_path))

        if config_path is not None:
            if not config_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise FileNotFoundError(msg)
            data = deep_merge(data, read_toml_file(config_path))

        if include_env:
            data = deep_merge(data, parse_env_vars(environ=environ))

        return cls.from_dict(data, source=config_path)
