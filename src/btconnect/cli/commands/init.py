from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from btconnect.cli.helpers import (
    build_store,
    load_settings_file_or_exit,
    resolve_config_path_or_exit,
)
from btconnect.config import Settings, write_settings


def register(app: typer.Typer) -> None:
    @app.command()
    def init(
        registry_path: Annotated[
            Path | None,
            typer.Option("--registry", help="Custom registry file"),
        ] = None,
        force: Annotated[
            bool,
            typer.Option("--force", "-f", help="Overwrite config and registry"),
        ] = False,
    ) -> None:
        """Initialize btconnect configuration and registry."""
        console = Console()

        config_path, config_exists = resolve_config_path_or_exit(allow_missing=True)
        if config_exists and not force:
            settings = load_settings_file_or_exit(config_path)
            console.print(f"[dim]Config exists:[/dim] {config_path}")
            if registry_path is not None:
                console.print(
                    "[yellow]![/yellow] --registry is not saved to an existing "
                    "config, use --force to rewrite it"
                )
        else:
            settings = Settings()
            if registry_path is not None:
                settings = settings.with_registry_path(registry_path)
            write_settings(settings, config_path)
            action = "Overwrote" if config_exists else "Created"
            console.print(f"[green]✓[/green] {action} config: {config_path}")

        store = build_store(settings, registry_path=registry_path)
        if store.init(force=force):
            console.print(f"[green]✓[/green] Initialized registry: {store.path}")
        else:
            console.print(f"[dim]Registry exists:[/dim] {store.path}")
