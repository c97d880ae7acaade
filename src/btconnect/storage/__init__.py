from __future__ import annotations

from .registry import (
    REGISTRY_FILE,
    RegistryStore,
    load_registry,
    render_registry_toml,
    save_registry,
    toml_string,
)

__all__ = [
    "REGISTRY_FILE",
    "RegistryStore",
    "load_registry",
    "render_registry_toml",
    "save_registry",
    "toml_string",
]
