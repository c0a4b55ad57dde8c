from uxguard.config.loader import (
    get_platform_config_path,
    load_settings,
)
from uxguard.config.settings import DisplayConfig, Settings, SourceConfig, SourceKind

__all__ = [
    "DisplayConfig",
    "Settings",
    "SourceConfig",
    "SourceKind",
    "get_platform_config_path",
    "load_settings",
]
