# src/speccraft/commands/config_cmd.py
"""Config command - display current configuration."""

from __future__ import annotations

from pathlib import Path

from speccraft.commands.base import ConfigResult, SettingInfo
from speccraft.config import (
    DEFAULT_STORE,
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    resolve_data_dir,
    validate_config,
)


def _get_setting_source(
    key: str,
    yaml_settings: dict,
    env_settings: dict,
) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def config(
    config_path: str | Path | None = None,
    data_dir: str | None = None,
) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path
        data_dir: Override data directory

    Returns:
        ConfigResult with all settings and their sources
    """
    found_config_path = Path(config_path) if config_path else find_config_file()
    cli_config = load_config(found_config_path)
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(cli_config)

    try:
        settings = build_settings(cli_config, env_settings)
    except ValueError as e:
        return ConfigResult(success=False, error=f"Invalid settings: {e}")

    result = ConfigResult(
        success=True,
        data_dir=resolve_data_dir(cli_config, data_dir),
        store=cli_config.get("store") or DEFAULT_STORE,
        config_path=str(found_config_path) if found_config_path else None,
        warnings=validate_config(cli_config, found_config_path),
    )

    for key, value in settings.model_dump().items():
        result.settings.append(
            SettingInfo(
                name=key,
                value=str(value),
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    return result
