"""btconnect - manage paired Bluetooth devices and a small device registry."""

from __future__ import annotations

from importlib.metadata import version

from .config import Settings, get_settings
from .core import discover_devices, parse_dump
from .errors import (
    AddressValidationError,
    BtConnectError,
    DumpSourceError,
    RegistryIOError,
    RegistryParseError,
)
from .models import DeviceRecord, DeviceType, RegisteredDevice, RegistryState
from .storage import RegistryStore, load_registry, save_registry

__all__ = [
    "AddressValidationError",
    "BtConnectError",
    "DeviceRecord",
    "DeviceType",
    "DumpSourceError",
    "RegisteredDevice",
    "RegistryIOError",
    "RegistryParseError",
    "RegistryState",
    "RegistryStore",
    "Settings",
    "__version__",
    "discover_devices",
    "get_settings",
    "load_registry",
    "parse_dump",
    "save_registry",
]

__version__ = version("btconnect")
