"""TOML loading for the taskboard config directory.

The directory holds ``default.toml`` (storage backend and key, audit
actor label and defaults, logging options) plus optional per-environment
overlays such as ``test.toml``. Both files are optional: a missing file
leaves the Settings model defaults in place.
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "TASKBOARD_CONFIG_DIR"
ENVIRONMENT_ENV = "TASKBOARD_ENV"
DEFAULT_ENVIRONMENT = "development"
# How far up from the working directory to look for config/
_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the directory holding default.toml and the environment overlays.

    TASKBOARD_CONFIG_DIR wins when set and must exist. Otherwise the
    nearest ``config/`` at or above the working directory is used, so the
    board can be started from a subdirectory of the project.

    Raises:
        FileNotFoundError: If TASKBOARD_CONFIG_DIR names a missing directory
    """
    configured = os.environ.get(CONFIG_DIR_ENV)
    if configured:
        path = Path(configured)
        if not path.exists():
            raise FileNotFoundError(f"Config directory not found: {configured}")
        return path

    current = Path.cwd()
    for _ in range(_SEARCH_DEPTH):
        candidate = current / "config"
        if candidate.exists():
            return candidate
        current = current.parent

    return Path("config")


def get_environment() -> str:
    """Name of the overlay file to apply, from TASKBOARD_ENV."""
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def load_toml(file_path: Path) -> dict[str, Any]:
    """Read one config file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay one config table on another.

    Sections such as ``[storage]`` merge key by key, so an overlay that
    only sets ``backend`` keeps the base ``path`` and ``key``. Neither
    input is modified.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config() -> dict[str, Any]:
    """Build the raw settings table: default.toml overlaid by {TASKBOARD_ENV}.toml."""
    config_dir = get_config_dir()

    config: dict[str, Any] = {}
    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = load_toml(default_path)

    env_path = config_dir / f"{get_environment()}.toml"
    if env_path.exists():
        config = deep_merge(config, load_toml(env_path))

    return config
