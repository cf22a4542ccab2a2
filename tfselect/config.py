"""Read-only JSON config helpers.

Stores the UI theme, terraform binary, log level, and the legacy
empty-confirm behaviour. All access is defensive: malformed or missing
config falls back safely, and nothing is ever written back.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .runner import DEFAULT_TERRAFORM_BINARY

APP_NAME = "tfselect"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    theme: str | None = None
    no_color: bool = False
    terraform_binary: str = DEFAULT_TERRAFORM_BINARY
    log_level: str = DEFAULT_LOG_LEVEL
    auto_select_all: bool = False


def config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return config location, honouring ``TFSELECT_CONFIG``."""
    env = os.environ if environ is None else environ
    override = env.get("TFSELECT_CONFIG", "").strip()
    return Path(override).expanduser() if override else CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    target = config_path() if path is None else path
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _string_value(data: Mapping[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Merge config file values with environment overrides."""
    env = os.environ if environ is None else environ
    data = load_config(config_path(env))

    terraform_binary = (
        env.get("TFSELECT_TERRAFORM", "").strip()
        or _string_value(data, "terraform_binary")
        or DEFAULT_TERRAFORM_BINARY
    )
    log_level = (
        env.get("TFSELECT_LOG_LEVEL", "").strip()
        or _string_value(data, "log_level")
        or DEFAULT_LOG_LEVEL
    ).upper()
    auto_select_all = data.get("auto_select_all")

    return Settings(
        theme=_string_value(data, "theme"),
        no_color=bool(env.get("NO_COLOR", "")),
        terraform_binary=terraform_binary,
        log_level=log_level,
        auto_select_all=auto_select_all if isinstance(auto_select_all, bool) else False,
    )
