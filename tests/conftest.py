from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from btconnect.config import (
    DiscoveryConfig,
    RegistryConfig,
    Settings,
    get_settings,
    write_settings,
)
from btconnect.storage import RegistryStore


@pytest.fixture(autouse=True)
def _isolate_settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BTCONNECT_CONFIG", raising=False)
    monkeypatch.delenv("LOGLEVEL", raising=False)
    # keep platformdirs defaults away from the real home directory
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    # wide rich tables so cell text is not wrapped
    monkeypatch.setenv("COLUMNS", "200")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def use_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Callable[[Settings], Path]:
    """Write settings to a config file and point BTCONNECT_CONFIG at it."""

    def _use(settings: Settings) -> Path:
        config_path = tmp_path / "config.toml"
        write_settings(settings, config_path)
        monkeypatch.setenv("BTCONNECT_CONFIG", str(config_path))
        get_settings.cache_clear()
        return config_path

    return _use


@pytest.fixture
def store(tmp_path: Path, use_settings) -> RegistryStore:
    registry_path = tmp_path / "data" / "registry.toml"
    use_settings(
        Settings(
            registry=RegistryConfig(path=str(registry_path)),
            discovery=DiscoveryConfig(source="sample"),
        )
    )
    return RegistryStore(registry_path)
