"""Config loader for uxguard settings.

Search order: ./uxguard.toml -> platform config
Uses stdlib tomllib (Python 3.11+).
"""

from __future__ import annotations

import os
import platform
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from uxguard.config.settings import DisplayConfig, Settings, SourceConfig


def get_platform_config_path() -> Path:
    """Return the platform-specific config.toml path."""
    system = platform.system().lower()
    if system == "darwin":
        return Path.home() / "Library" / "Application Support" / "uxguard" / "config.toml"
    if system == "windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "uxguard" / "config.toml"
        return Path.home() / "AppData" / "Roaming" / "uxguard" / "config.toml"

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "uxguard" / "config.toml"
    return Path.home() / ".config" / "uxguard" / "config.toml"


def get_config_search_paths() -> list[Path]:
    """Return config search paths in priority order."""
    return [
        Path("./uxguard.toml"),
        get_platform_config_path(),
    ]


def _find_config_file() -> Path | None:
    for path in get_config_search_paths():
        if path.exists():
            return path
    return None


def _parse_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _build_source_config(data: Mapping[str, Any], *, base_dir: Path) -> SourceConfig:
    source_data = dict(data.get("source", {}))

    if "script" in source_data:
        script = Path(source_data["script"])
        # Resolve relative paths against the config file location
        if not script.is_absolute():
            script = base_dir / script
        source_data["script"] = script

    return SourceConfig.model_validate(source_data)


def merge_cli_overrides(settings: Settings, overrides: Mapping[str, Any]) -> Settings:
    """Apply CLI overrides to loaded settings. ``None`` values are ignored."""
    display_updates = {
        key: overrides[key]
        for key in ("max_text_length",)
        if overrides.get(key) is not None
    }
    source_updates = {
        key: overrides[key]
        for key in ("kind", "active_flags", "requires_optimization", "script", "interval")
        if overrides.get(key) is not None
    }

    if display_updates:
        settings.display = DisplayConfig.model_validate(
            {**settings.display.model_dump(), **display_updates}
        )
    if source_updates:
        settings.source = SourceConfig.model_validate(
            {**settings.source.model_dump(), **source_updates}
        )
    return settings


def load_settings(
    config_path: Path | None = None, *, cli_overrides: Mapping[str, Any] | None = None
) -> Settings:
    """Load settings from TOML file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.
        cli_overrides: Optional CLI overrides to apply after loading.

    Returns:
        Settings with loaded or default values.

    Raises:
        FileNotFoundError: If an explicit config_path is provided but does not exist.
        RuntimeError: If the config file is not valid TOML.
    """
    if config_path:
        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found at explicitly provided path: {config_path}. "
                "Ensure the file exists or omit the argument to use default search paths."
            )
        path: Path = config_path
    else:
        found_path = _find_config_file()
        if found_path is None:
            settings = Settings()
            if cli_overrides:
                settings = merge_cli_overrides(settings, cli_overrides)
            return settings
        path = found_path

    try:
        data = _parse_toml(path)
    except Exception as e:
        raise RuntimeError(f"Failed to parse configuration file at {path}: {e}") from e

    settings = Settings(
        display=DisplayConfig.model_validate(data.get("display", {})),
        source=_build_source_config(data, base_dir=path.parent),
    )
    if cli_overrides:
        settings = merge_cli_overrides(settings, cli_overrides)
    return settings
