import logging
import os
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import cast

import platformdirs
from packaging.version import Version

from bulbosc.const import DEFAULT_CONFIG_FILE, LOG_LEVELS

PACKAGE_KEY = "bulbosc"

try:
    VERSION = Version(version(PACKAGE_KEY))
except PackageNotFoundError:
    VERSION = Version("0.0.0")

CONFIG_FILE_NAMES = (DEFAULT_CONFIG_FILE, "settings.yml", "bulbosc.toml")
"""File names searched for, in order, when no config file is given explicitly."""


def get_log_level() -> LOG_LEVELS:
    log_level = (
        os.getenv("BULBOSC__LOG_LEVEL") or os.getenv("BULBOSC_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    ).upper()
    if log_level not in list(LOG_LEVELS.__args__):
        logging.getLogger(__name__).warning("Log level %r is not valid, defaulting to INFO", log_level)
        log_level = "INFO"
    return cast("LOG_LEVELS", log_level)


def default_config_dir() -> Path:
    """Return the first found config directory based on environment variables or defaults.

    Will return the first of:
    - BULBOSC__CONFIG_DIR environment variable
    - BULBOSC_CONFIG_DIR environment variable
    - /config (for docker)
    - platformdirs user config path

    """

    if env := os.getenv("BULBOSC__CONFIG_DIR", os.getenv("BULBOSC_CONFIG_DIR")):
        return Path(env)
    docker = Path("/config")
    if docker.exists():
        return docker
    return platformdirs.user_config_path("bulbosc", version=f"v{VERSION.major}")


def filter_paths_to_unique_existing(value: Sequence[str | Path | None] | str | Path | None) -> list[Path]:
    """Filter the provided paths to only include unique existing paths, keeping their order.

    Args:
        value: File paths as strings or Path objects.

    Returns:
        Existing file paths as resolved Path objects.
    """
    value = [value] if isinstance(value, str | Path | None) else value

    paths: list[Path] = []
    for v in value:
        if not v:
            continue
        path = Path(v).resolve()
        if path.exists() and path not in paths:
            paths.append(path)

    return paths


def find_config_file(config_file: str | Path | None = None) -> Path | None:
    """Locate the settings file to load.

    Will return the first of:
    - the explicitly provided path (which must exist)
    - BULBOSC__CONFIG_FILE environment variable (which must exist)
    - settings.yaml, settings.yml or bulbosc.toml in the working directory
    - the same names in `default_config_dir()`

    Returns None if no file is found, in which case settings come only from the environment.

    Raises:
        FileNotFoundError: If an explicitly requested file does not exist.
    """
    explicit = config_file or os.getenv("BULBOSC__CONFIG_FILE") or os.getenv("BULBOSC_CONFIG_FILE")
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise FileNotFoundError(f"Couldn't open {path}: no such file")
        return path.resolve()

    candidates = [Path.cwd() / name for name in CONFIG_FILE_NAMES]
    candidates += [default_config_dir() / name for name in CONFIG_FILE_NAMES]

    found = filter_paths_to_unique_existing(candidates)
    return found[0] if found else None
