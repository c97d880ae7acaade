"""Persisted device registry models."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_CONNECTION_TIMEOUT = 30


class RegisteredDevice(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    address: str
    device_type: str
    last_connected: str | None = None


class RegistryState(BaseModel):
    """Registered devices plus connection preferences.

    Entries are keyed by address. ``default_device`` is stored as given and
    is not required to point at a registered device.
    """

    model_config = {"extra": "forbid"}

    registered_devices: list[RegisteredDevice] = Field(default_factory=list)
    default_device: str | None = None
    auto_connect: bool = False
    connection_timeout: int = Field(default=DEFAULT_CONNECTION_TIMEOUT, ge=0)

    def register(self, name: str, address: str, device_type: str) -> None:
        """Add a device, or update name and type of an existing one in place."""
        existing = self.lookup(address)
        if existing is not None:
            existing.name = name
            existing.device_type = device_type
            return
        self.registered_devices.append(
            RegisteredDevice(name=name, address=address, device_type=device_type)
        )

    def unregister(self, address: str) -> bool:
        """Remove a device. Returns True if existed."""
        remaining = [d for d in self.registered_devices if d.address != address]
        removed = len(remaining) != len(self.registered_devices)
        self.registered_devices = remaining
        return removed

    def lookup(self, address: str) -> RegisteredDevice | None:
        for device in self.registered_devices:
            if device.address == address:
                return device
        return None

    def set_default(self, address: str | None) -> None:
        self.default_device = address

    def mark_connected(self, address: str, timestamp: str) -> bool:
        """Record a connection time. Returns False for unregistered addresses."""
        device = self.lookup(address)
        if device is None:
            return False
        device.last_connected = timestamp
        return True
