from __future__ import annotations

import pytest

from btconnect.cli.helpers import build_dump_source
from btconnect.config import (
    DiscoveryConfig,
    RegistryConfig,
    Settings,
    get_settings,
    load_settings,
    registry_path_from_settings,
    write_settings,
)
from btconnect.core import FileDumpSource, SampleDumpSource, SystemDumpSource


def test_settings_roundtrip(tmp_path):
    path = tmp_path / "config.toml"
    settings = Settings(
        registry=RegistryConfig(path=str(tmp_path / "registry.toml")),
        discovery=DiscoveryConfig(source="sample", command_timeout=3.5),
    )
    write_settings(settings, path)

    assert load_settings(path) == settings


def test_default_registry_path_ends_with_registry_file():
    assert registry_path_from_settings(Settings()).name == "registry.toml"


def test_invalid_source_is_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[discovery]\nsource = "bluez"\n')

    with pytest.raises(ValueError, match="Invalid config file"):
        load_settings(path)


def test_env_var_pointing_to_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("BTCONNECT_CONFIG", str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError):
        get_settings()


def test_file_source_requires_dump_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[discovery]\nsource = "file"\n')

    with pytest.raises(ValueError, match="dump_path is required"):
        load_settings(path)


def test_file_source_roundtrip_builds_file_dump_source(tmp_path):
    path = tmp_path / "config.toml"
    settings = Settings(
        discovery=DiscoveryConfig(source="file", dump_path=str(tmp_path / "dump.txt"))
    )
    write_settings(settings, path)

    loaded = load_settings(path)
    source = build_dump_source(loaded)

    assert loaded == settings
    assert isinstance(source, FileDumpSource)
    assert source.path == tmp_path / "dump.txt"


def test_sample_flag_overrides_configured_source():
    settings = Settings(discovery=DiscoveryConfig(source="system"))

    assert isinstance(build_dump_source(settings, sample=True), SampleDumpSource)
    assert isinstance(build_dump_source(settings), SystemDumpSource)


def test_with_registry_path(tmp_path):
    settings = Settings().with_registry_path(tmp_path / "r.toml")

    assert registry_path_from_settings(settings) == tmp_path / "r.toml"
