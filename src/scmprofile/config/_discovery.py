"""Config path discovery utilities."""

from pathlib import Path

import platformdirs


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/scmprofile/config.toml``
    - macOS: ``~/Library/Application Support/scmprofile/config.toml``
    - Windows: ``%APPDATA%\scmprofile\config.toml``

    The path is returned regardless of whether the file exists.

    Returns:
        Path to the user config file for the current platform.
    """
    config_dir = platformdirs.user_config_path("scmprofile")
    return config_dir / "config.toml"
