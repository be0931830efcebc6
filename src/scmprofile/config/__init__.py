"""scmprofile configuration.

Example:
    >>> from scmprofile.config import Config
    >>> config = Config.load(include_user=False, include_env=False)
    >>> config.git.executable
    'git'
"""

from scmprofile.exceptions import ConfigError, ConfigLoadError

from ._discovery import get_user_config_path
from ._loader import deep_merge, parse_env_vars, read_toml_file, set_nested_key
from ._models import Config, GitSettings, LogFormat, LoggingConfig, LogLevel

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "GitSettings",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "deep_merge",
    "get_user_config_path",
    "parse_env_vars",
    "read_toml_file",
    "set_nested_key",
]
