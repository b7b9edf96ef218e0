"""Configuration loading for nscratch."""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from . import notify
from .common import CONFIG_FILE, DEFAULT_WORKSPACE, STATE_FILE, WORKSPACE_ENV
from .notify import NOTIFY_LEVELS


@dataclass
class Settings:
    """Effective settings for one invocation."""

    workspace: str = DEFAULT_WORKSPACE
    animations: bool = False
    multi_monitor: bool = False
    notify: str = "all"
    state_file: Path = field(default_factory=lambda: STATE_FILE)


def load_settings(
    config_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build settings from defaults, the YAML config file and the environment."""
    if config_file is None:
        config_file = CONFIG_FILE
    if environ is None:
        environ = os.environ

    try:
        raw = _load_config_recursive(config_file, set())
    except ValueError as e:
        print(f"Config error: {e}", file=sys.stderr)
        notify.send(str(e), title="nscratch config error", urgency="critical")
        raw = {}

    settings = Settings()

    if workspace := raw.get("workspace"):
        settings.workspace = str(workspace)
    settings.animations = _flag(raw, "animations", settings.animations)
    settings.multi_monitor = _flag(raw, "multi_monitor", settings.multi_monitor)

    if level := raw.get("notify"):
        level = str(level).strip().lower()
        if level in NOTIFY_LEVELS:
            settings.notify = level
        else:
            print(f"Unknown notify level: {level}. Using 'all'", file=sys.stderr)

    if state_file := raw.get("state_file"):
        settings.state_file = Path(str(state_file)).expanduser()

    if workspace := environ.get(WORKSPACE_ENV):
        settings.workspace = workspace

    return settings


def _flag(raw: dict[str, Any], key: str, default: bool) -> bool:
    """Read a boolean key, keeping the default for anything but true/false."""
    value = raw.get(key, default)
    if isinstance(value, bool):
        return value
    print(f"Invalid {key} value: {value!r}. Expected true or false", file=sys.stderr)
    return default


def _load_config_recursive(config_path: Path, visited: set[Path]) -> dict[str, Any]:
    """Recursively load config with include support."""
    try:
        config_path = config_path.resolve()
    except (OSError, RuntimeError):
        return {}

    if config_path in visited:
        print(
            f"Warning: Circular include detected for {config_path}, skipping",
            file=sys.stderr,
        )
        return {}

    if not config_path.exists():
        return {}

    visited.add(config_path)

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)

        if not config:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"{config_path} must contain a mapping")

        result: dict[str, Any] = {}

        includes = config.pop("include", [])
        if includes:
            if not isinstance(includes, list):
                includes = [includes]
            for include_path_str in includes:
                include_path = config_path.parent / str(include_path_str)
                result.update(_load_config_recursive(include_path, visited))

        result.update(config)
        return result

    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse {config_path}: {e}") from e
    except OSError as e:
        print(f"Failed to read config from {config_path}: {e}", file=sys.stderr)
        return {}
