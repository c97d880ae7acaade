from __future__ import annotations

from .paths import (
    APP_NAME,
    CONFIG_FILENAME,
    default_config_path,
    default_data_dir,
    expand_path,
)
from .settings import (
    CONFIG_ENV_VAR,
    DiscoveryConfig,
    DumpSourceKind,
    RegistryConfig,
    Settings,
    dump_path_from_settings,
    get_settings,
    load_settings,
    registry_path_from_settings,
    render_settings_toml,
    resolve_config_path,
    write_settings,
)

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "DiscoveryConfig",
    "DumpSourceKind",
    "RegistryConfig",
    "Settings",
    "default_config_path",
    "default_data_dir",
    "dump_path_from_settings",
    "expand_path",
    "get_settings",
    "load_settings",
    "registry_path_from_settings",
    "render_settings_toml",
    "resolve_config_path",
    "write_settings",
]
