from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from btconnect.cli.helpers import (
    build_dump_source,
    build_store,
    load_settings_or_exit,
    load_state_or_exit,
    normalize_address_or_exit,
    save_state_or_exit,
)
from btconnect.core import classify_device, discover_devices
from btconnect.models import RegistryState

SampleOption = Annotated[
    bool, typer.Option("--sample", help="Use the built-in sample dump")
]
AddressOption = Annotated[
    str, typer.Option("--address", "-a", help="Device address (XX:XX:XX:XX:XX:XX)")
]


def _print_registered(console: Console, state: RegistryState) -> None:
    if not state.registered_devices:
        console.print("No registered devices.")
        console.print("Use 'btconnect register --address <MAC>' to add one.")
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="green")
    table.add_column("Type")
    table.add_column("Last Connected")
    table.add_column("Default")

    for device in state.registered_devices:
        table.add_row(
            device.name,
            device.address,
            device.device_type,
            device.last_connected or "",
            "*" if device.address == state.default_device else "",
        )

    console.print(table)


def list_devices(
    registered: Annotated[
        bool,
        typer.Option("--registered", "-r", help="Show registered devices only"),
    ] = False,
    sample: SampleOption = False,
) -> None:
    """List paired devices."""
    settings = load_settings_or_exit()
    store = build_store(settings)
    state = load_state_or_exit(store)
    console = Console()

    if registered:
        _print_registered(console, state)
        return

    devices = discover_devices(build_dump_source(settings, sample=sample))
    if not devices:
        console.print("No paired devices found.")
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="green")
    table.add_column("Type")
    table.add_column("Connected*")
    table.add_column("Reg")

    for device in devices:
        table.add_row(
            device.name,
            device.address,
            device.device_type.value,
            "yes" if device.is_connected else "no",
            "✓" if state.lookup(device.address) else "",
        )

    console.print(table)
    console.print(
        "[dim]* has a last-connected record, not necessarily connected now[/dim]"
    )


def register_device(
    address: AddressOption,
    name: Annotated[
        str | None, typer.Option("--name", "-n", help="Display name")
    ] = None,
    sample: SampleOption = False,
) -> None:
    """Register a device, or update an existing registration."""
    canonical = normalize_address_or_exit(address)
    settings = load_settings_or_exit()
    store = build_store(settings)
    state = load_state_or_exit(store)

    discovered = {
        device.address: device
        for device in discover_devices(build_dump_source(settings, sample=sample))
    }
    record = discovered.get(canonical)

    device_name = name or (record.name if record else f"Device-{canonical[:8]}")
    device_type = record.device_type if record else classify_device(device_name)

    state.register(device_name, canonical, device_type.value)
    save_state_or_exit(store, state)

    console = Console()
    console.print(
        f"[green]✓[/green] Registered '{device_name}' "
        f"({canonical}, {device_type.value})"
    )


def unregister_device(address: AddressOption) -> None:
    """Remove a device registration."""
    canonical = normalize_address_or_exit(address)
    settings = load_settings_or_exit()
    store = build_store(settings)
    state = load_state_or_exit(store)

    console = Console()
    if not state.unregister(canonical):
        console.print(f"[yellow]![/yellow] Device '{canonical}' is not registered")
        raise typer.Exit(1)

    save_state_or_exit(store, state)
    console.print(f"[green]✓[/green] Unregistered '{canonical}'")


def set_default_device(address: AddressOption) -> None:
    """Set the device used when no address is given."""
    canonical = normalize_address_or_exit(address)
    settings = load_settings_or_exit()
    store = build_store(settings)
    state = load_state_or_exit(store)

    console = Console()
    if state.lookup(canonical) is None:
        console.print(
            f"[yellow]![/yellow] '{canonical}' is not registered, setting it anyway"
        )

    state.set_default(canonical)
    save_state_or_exit(store, state)
    console.print(f"[green]✓[/green] Default device set to '{canonical}'")


def status() -> None:
    """Show registry location, preferences and registered devices."""
    settings = load_settings_or_exit()
    store = build_store(settings)
    state = load_state_or_exit(store)

    console = Console()
    source = str(store.path) if store.exists() else f"{store.path} (not created yet)"
    console.print(f"Registry: {source}")
    console.print(f"Default device: {state.default_device or '-'}")
    console.print(f"Auto connect: {'on' if state.auto_connect else 'off'}")
    console.print(f"Connection timeout: {state.connection_timeout}s")
    console.print()
    _print_registered(console, state)


def register(app: typer.Typer) -> None:
    app.command("list")(list_devices)
    app.command("register")(register_device)
    app.command("unregister")(unregister_device)
    app.command("set-default")(set_default_device)
    app.command("status")(status)
