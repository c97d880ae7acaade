from __future__ import annotations

from pathlib import Path

import typer

from btconnect.config import (
    Settings,
    dump_path_from_settings,
    get_settings,
    load_settings,
    registry_path_from_settings,
    resolve_config_path,
)
from btconnect.core import (
    DumpSource,
    FileDumpSource,
    SampleDumpSource,
    SystemDumpSource,
    normalize_address,
)
from btconnect.errors import AddressValidationError, RegistryIOError, RegistryParseError
from btconnect.models import RegistryState
from btconnect.storage import RegistryStore


def load_settings_or_exit() -> Settings:
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def load_settings_file_or_exit(path: Path) -> Settings:
    try:
        return load_settings(path)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_store(settings: Settings, registry_path: Path | None = None) -> RegistryStore:
    path = registry_path or registry_path_from_settings(settings)
    return RegistryStore(path)


def load_state_or_exit(store: RegistryStore) -> RegistryState:
    try:
        return store.load()
    except (RegistryIOError, RegistryParseError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def save_state_or_exit(store: RegistryStore, state: RegistryState) -> None:
    try:
        store.save(state)
    except RegistryIOError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def normalize_address_or_exit(address: str) -> str:
    try:
        return normalize_address(address)
    except AddressValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def build_dump_source(settings: Settings, sample: bool = False) -> DumpSource:
    if sample or settings.discovery.source == "sample":
        return SampleDumpSource()
    dump_path = dump_path_from_settings(settings)
    if settings.discovery.source == "file" and dump_path is not None:
        return FileDumpSource(dump_path)
    return SystemDumpSource(command_timeout=settings.discovery.command_timeout)
