# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Reading and layering of scmprofile configuration sources.

Each source (a TOML file or the ``SCMPROFILE_*`` environment) is turned into
a plain nested dictionary. Sources are then layered with deep_merge before
the result is validated by the pydantic models.
"""

import copy
import json
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path  # noqa: TC003
from typing import Any

from scmprofile.exceptions import ConfigLoadError

ENV_PREFIX: str = "SCMPROFILE_"

# SCMPROFILE_GIT__EXECUTABLE -> git.executable
_ENV_NESTING_SEPARATOR: str = "__"

type ConfigData = dict[str, Any]  # pyright: ignore[reportExplicitAny]


def read_toml_file(path: Path) -> ConfigData:
    """Parse one TOML config file.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ConfigLoadError: If the file is not valid TOML. Line and column are
            filled in when the interpreter reports them.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def deep_merge(base: ConfigData, override: ConfigData) -> ConfigData:
    """Layer `override` on top of `base`.

    Tables present on both sides are merged key by key; any other value in
    `override` (including lists) replaces the one in `base`. The result
    shares no mutable state with either argument.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_env_vars(
    prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> ConfigData:
    """Collect config overrides from environment variables.

    ``SCMPROFILE_LOGGING__LEVEL=debug`` becomes
    ``{"logging": {"level": "debug"}}``. Variables without the prefix, or
    with nothing after it, are skipped.

    Args:
        prefix: Variable name prefix.
        environ: Mapping to read instead of ``os.environ``.
    """
    source = os.environ if environ is None else environ
    result: ConfigData = {}

    for name, raw in source.items():
        if not name.startswith(prefix) or name == prefix:
            continue
        key_path = name.removeprefix(prefix).lower().split(_ENV_NESTING_SEPARATOR)
        set_nested_key(result, ".".join(key_path), parse_string_value(raw))

    return result


def parse_string_value(value: str) -> Any:  # pyright: ignore[reportExplicitAny]
    """Coerce an environment string into a config value.

    ``true``/``false`` become booleans, whole numbers become ints, and
    JSON arrays or objects are decoded (``SCMPROFILE_GIT__ENV`` is a table).
    Anything else stays a string.
    """
    if value.lower() in {"true", "false"}:
        return value.lower() == "true"
    if value.removeprefix("-").isdecimal():
        return int(value)
    if value[:1] + value[-1:] in {"[]", "{}"}:
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def set_nested_key(
    d: ConfigData,
    key_path: str,
    value: Any,  # pyright: ignore[reportExplicitAny]
) -> None:
    """Store `value` under a dotted `key_path`, creating tables on the way.

    A non-table value sitting on the path is replaced by a table.
    """
    *tables, leaf = key_path.split(".")
    node = d
    for table in tables:
        child = node.get(table)
        if not isinstance(child, dict):
            child = node[table] = {}
        node = child
    node[leaf] = value
