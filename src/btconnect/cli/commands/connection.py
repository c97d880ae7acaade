from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Annotated

import typer
from rich.console import Console

from btconnect.cli.helpers import (
    build_store,
    load_settings_or_exit,
    load_state_or_exit,
    normalize_address_or_exit,
    save_state_or_exit,
)

logger = logging.getLogger(__name__)


def connect_device(
    address: Annotated[
        str | None,
        typer.Argument(help="Device address, defaults to the default device"),
    ] = None,
) -> None:
    """Connect to a device."""
    settings = load_settings_or_exit()
    store = build_store(settings)
    state = load_state_or_exit(store)
    console = Console()

    target = address or state.default_device
    if target is None:
        console.print(
            "[yellow]![/yellow] No address given and no default device set. "
            "Use 'btconnect set-default --address <MAC>'."
        )
        raise typer.Exit(1)

    canonical = normalize_address_or_exit(target)
    # Transport is not implemented; only the request is recorded.
    logger.info(
        "Connect requested for %s (timeout %ds)", canonical, state.connection_timeout
    )
    console.print(f"Connecting to {canonical}...")

    if state.mark_connected(canonical, datetime.now(timezone.utc).isoformat()):
        save_state_or_exit(store, state)


def disconnect_device(
    address: Annotated[
        str | None,
        typer.Argument(help="Device address, defaults to all devices"),
    ] = None,
) -> None:
    """Disconnect from a device."""
    console = Console()
    if address is None:
        logger.info("Disconnect requested for all devices")
        console.print("Disconnecting all devices...")
        return

    canonical = normalize_address_or_exit(address)
    logger.info("Disconnect requested for %s", canonical)
    console.print(f"Disconnecting {canonical}...")


def auto_connect() -> None:
    """Connect to the default device when auto connect is enabled."""
    settings = load_settings_or_exit()
    state = load_state_or_exit(build_store(settings))
    console = Console()

    if not state.auto_connect or state.default_device is None:
        console.print("Auto connect is off or no default device is set.")
        console.print("Run 'btconnect --help' for available commands.")
        return

    connect_device(state.default_device)


def register(app: typer.Typer) -> None:
    app.command("connect")(connect_device)
    app.command("disconnect")(disconnect_device)
