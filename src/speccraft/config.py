# src/speccraft/config.py
"""Configuration loading utilities for SpecCraft.

This module provides configuration loading that can be used by:
- CLI commands
- The MCP server
- External applications using SpecCraft as a library

It handles:
- Finding and loading speccraft.yaml config files
- Loading .env files for SPECCRAFT_* overrides
- Building Settings objects from multiple sources
- Creating the session store selected by configuration
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from speccraft.settings import Settings
    from speccraft.stores import SessionStore

# Default paths
DEFAULT_DATA_DIR = ".speccraft"
DEFAULT_STORE = "json"
CONFIG_FILES = ["speccraft.yaml", "speccraft.yml", ".speccraftrc"]
ENV_FILE = ".env"

STORE_FILES = {
    "json": "sessions.json",
    "sqlite": "sessions.db",
}


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Load environment variables from .env file if it exists.

    Args:
        env_path: Path to .env file (default: .env in current directory)
    """
    path = Path(env_path)
    if not path.exists():
        return

    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                # Don't override existing env vars
                if key not in os.environ:
                    os.environ[key] = value


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in current directory or parent directories.

    Args:
        start_dir: Directory to start searching from (default: cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir or Path.cwd()
    for _ in range(10):  # Limit search depth
        for config_name in CONFIG_FILES:
            config_path = current / config_name
            if config_path.exists():
                return config_path
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# Valid configuration keys for validation
VALID_ROOT_KEYS = {
    "data_dir",
    "store",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "max_follow_up_questions",
    "preview_chars",
    "specs_dir",
}


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Validate config and return warnings about unknown keys.

    Args:
        config: The loaded configuration dictionary
        config_path: Path to config file (for error messages)

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    unknown_root = set(config.keys()) - VALID_ROOT_KEYS
    if unknown_root:
        path_str = str(config_path) if config_path else "config"
        warnings.append(f"Unknown config keys in {path_str}: {', '.join(sorted(unknown_root))}")

    store = config.get("store")
    if store is not None and store not in STORE_FILES:
        warnings.append(f"Unknown store '{store}', expected one of: {', '.join(STORE_FILES)}")

    settings = config.get("settings", {})
    if isinstance(settings, dict):
        unknown_settings = set(settings.keys()) - VALID_SETTINGS_KEYS
        if unknown_settings:
            warnings.append(f"Unknown settings keys: {', '.join(sorted(unknown_settings))}")

    return warnings


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None:
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from SPECCRAFT_* environment variables.

    Returns values that were explicitly set (not defaults), to allow proper
    precedence: YAML settings are used unless overridden by env vars.

    Returns:
        Dictionary of setting name -> value for explicitly set env vars
    """
    result: dict[str, Any] = {}

    if (val := _safe_int(os.environ.get("SPECCRAFT_MAX_FOLLOW_UP_QUESTIONS"))) is not None:
        result["max_follow_up_questions"] = val
    if (val := _safe_int(os.environ.get("SPECCRAFT_PREVIEW_CHARS"))) is not None:
        result["preview_chars"] = val
    if os.environ.get("SPECCRAFT_SPECS_DIR"):
        result["specs_dir"] = os.environ["SPECCRAFT_SPECS_DIR"]

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the known keys of the ``settings:`` section."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: yaml_settings[key] for key in VALID_SETTINGS_KEYS if key in yaml_settings}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings object from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)

    Returns:
        Configured Settings instance
    """
    from speccraft.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    # Merge: env vars override YAML, which overrides defaults
    return Settings(**{**yaml_settings, **env_settings})


def resolve_data_dir(config: dict[str, Any], data_dir: str | None = None) -> str:
    return data_dir or config.get("data_dir") or DEFAULT_DATA_DIR


def get_store(
    data_dir: str | Path | None = None,
    config_path: str | Path | None = None,
) -> SessionStore:
    """Create the session store selected by configuration.

    Args:
        data_dir: Override data directory
        config_path: Override config file path

    Returns:
        A JSON or SQLite session store under the data directory

    Raises:
        ValueError: The configured store type is unknown.
    """
    from speccraft.stores import JSONSessionStore, SQLiteSessionStore

    config = load_config(config_path)
    effective_data_dir = resolve_data_dir(config, str(data_dir) if data_dir else None)
    store_type = config.get("store") or DEFAULT_STORE

    if store_type == "json":
        return JSONSessionStore(os.path.join(effective_data_dir, STORE_FILES["json"]))
    if store_type == "sqlite":
        return SQLiteSessionStore(os.path.join(effective_data_dir, STORE_FILES["sqlite"]))
    raise ValueError(f"Unknown store type: {store_type}")
