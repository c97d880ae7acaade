from __future__ import annotations

from .classifier import classify_device
from .discovery import discover_devices
from .mac import address_from_flat_key, is_valid_address, normalize_address
from .parser import parse_dump
from .sources import DumpSource, FileDumpSource, SampleDumpSource, SystemDumpSource

__all__ = [
    "DumpSource",
    "FileDumpSource",
    "SampleDumpSource",
    "SystemDumpSource",
    "address_from_flat_key",
    "classify_device",
    "discover_devices",
    "is_valid_address",
    "normalize_address",
    "parse_dump",
]
