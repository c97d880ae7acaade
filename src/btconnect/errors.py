from __future__ import annotations


class BtConnectError(Exception):
    """Base class for btconnect errors."""


class RegistryIOError(BtConnectError, OSError):
    """Registry file could not be read or written."""


class RegistryParseError(BtConnectError, ValueError):
    """Registry file is not a valid registry document."""


class AddressValidationError(BtConnectError, ValueError):
    """Bluetooth address is not six colon-separated hex octets."""


class DumpSourceError(BtConnectError, OSError):
    """Device dump could not be obtained."""
