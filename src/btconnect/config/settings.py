from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, model_validator

from btconnect.storage import REGISTRY_FILE, toml_string

from .paths import default_config_path, default_data_dir, expand_path

CONFIG_ENV_VAR = "BTCONNECT_CONFIG"

DumpSourceKind = Literal["system", "sample", "file"]


class RegistryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_data_dir() / REGISTRY_FILE))


class DiscoveryConfig(BaseModel):
    """Where paired-device dumps are read from.

    ``system`` runs ``reg query``, ``sample`` uses the built-in dump and
    ``file`` reads a saved ``reg query`` output from ``dump_path``.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    source: DumpSourceKind = "system"
    command_timeout: float = Field(default=10.0, gt=0)
    dump_path: str | None = None

    @model_validator(mode="after")
    def _file_source_needs_path(self) -> DiscoveryConfig:
        if self.source == "file" and not self.dump_path:
            raise ValueError("discovery.dump_path is required when source = 'file'")
        return self


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)

    def with_registry_path(self, path: Path) -> Settings:
        return self.model_copy(update={"registry": RegistryConfig(path=str(path))})


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def registry_path_from_settings(settings: Settings) -> Path:
    return expand_path(settings.registry.path)


def dump_path_from_settings(settings: Settings) -> Path | None:
    if settings.discovery.dump_path is None:
        return None
    return expand_path(settings.discovery.dump_path)


def render_settings_toml(settings: Settings) -> str:
    discovery = settings.discovery
    lines = [
        "# btconnect configuration",
        "",
        "[registry]",
        f"path = {toml_string(settings.registry.path)}",
        "",
        "[discovery]",
        '# "system" (reg query), "sample" or "file" (needs dump_path)',
        f"source = {toml_string(discovery.source)}",
        f"command_timeout = {discovery.command_timeout}",
    ]
    if discovery.dump_path is not None:
        lines.append(f"dump_path = {toml_string(discovery.dump_path)}")

    lines.append("")
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings), encoding="utf-8")
