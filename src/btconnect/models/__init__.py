"""Data models for btconnect."""

from btconnect.models.device import DeviceRecord, DeviceType
from btconnect.models.registry import (
    DEFAULT_CONNECTION_TIMEOUT,
    RegisteredDevice,
    RegistryState,
)

__all__ = [
    "DEFAULT_CONNECTION_TIMEOUT",
    "DeviceRecord",
    "DeviceType",
    "RegisteredDevice",
    "RegistryState",
]
