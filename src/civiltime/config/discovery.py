"""Config file discovery.

Lookup order:
  1. ``CIVILTIME_CONFIG`` env var (must point at an existing file)
  2. ``civiltime.toml`` in *start* or any parent directory
  3. ``$XDG_CONFIG_HOME/civiltime/civiltime.toml`` (``~/.config`` default)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "civiltime.toml"
CONFIG_ENV_VAR = "CIVILTIME_CONFIG"


def user_config_path() -> Path:
    """Per-user config location, following the XDG base directory layout."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "civiltime" / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    fallback = user_config_path()
    return fallback if fallback.is_file() else None
