from __future__ import annotations

from typing import Annotated

import click
import typer

from btconnect.utils.logging import setup_logging

from .commands import config as config_cmd
from .commands.connection import auto_connect
from .commands.connection import register as register_connection
from .commands.devices import register as register_devices
from .commands.init import register as register_init

app = typer.Typer(help="btconnect - Bluetooth device connection manager")

app.add_typer(config_cmd.app, name="config")

register_init(app)
register_devices(app)
register_connection(app)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level, overrides LOGLEVEL",
            click_type=click.Choice(
                ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
                case_sensitive=False,
            ),
        ),
    ] = None,
) -> None:
    """btconnect CLI."""
    setup_logging(log_level)

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"btconnect version {get_version('btconnect')}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        auto_connect()
