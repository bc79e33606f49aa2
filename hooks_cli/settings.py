"""Settings for hooks-cli.

Resolution order (highest priority first):
1. Environment variables (HOOKS_DATA_DIR, HOOKS_CONTEXT, HOOKS_LOG_PATH, HOOKS_LOG_LEVEL)
2. User settings file (~/.hooks/settings.yaml)
3. Built-in defaults
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml

logger = logging.getLogger(__name__)

ContextMode = Literal["git", "global"]

_CONTEXT_MODES = ("git", "global")


def default_home() -> Path:
    return Path.home() / ".hooks"


@dataclass
class HooksSettings:
    """Effective settings for one invocation."""

    data_dir: Path
    context: ContextMode = "git"
    log_path: Path | None = None
    log_level: str = "WARNING"


def read_settings_file(path: Path) -> dict[str, Any]:
    """Read a YAML settings file.

    Args:
        path: Path to settings file

    Returns:
        Settings dict, empty if the file is missing or unreadable
    """
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read settings from {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings at {path}: expected a mapping")
        return {}
    return data


def load_settings(settings_file: Path | None = None) -> HooksSettings:
    """Build effective settings from environment, settings file and defaults.

    Args:
        settings_file: Settings file to read. Defaults to ~/.hooks/settings.yaml
    """
    home = default_home()
    file_data = read_settings_file(settings_file or home / "settings.yaml")

    data_dir = os.getenv("HOOKS_DATA_DIR") or file_data.get("data_dir") or home / "data"
    # An empty HOOKS_LOG_PATH or "log_path: null" turns the log file off
    if "HOOKS_LOG_PATH" in os.environ:
        log_path = os.environ["HOOKS_LOG_PATH"] or None
    elif "log_path" in file_data:
        log_path = file_data["log_path"] or None
    else:
        log_path = home / "hooks.log.jsonl"
    log_level = os.getenv("HOOKS_LOG_LEVEL") or file_data.get("log_level") or "WARNING"

    context = os.getenv("HOOKS_CONTEXT") or file_data.get("context") or "git"
    if context not in _CONTEXT_MODES:
        logger.warning(f"Unknown context mode {context!r}, using 'git'")
        context = "git"

    return HooksSettings(
        data_dir=Path(data_dir).expanduser(),
        context=context,
        log_path=Path(log_path).expanduser() if log_path else None,
        log_level=str(log_level).upper(),
    )
