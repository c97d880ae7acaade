"""Parse ``reg query`` dumps of the BTHPORT device key into device records.

Expected shape, one block per paired device::

    HKEY_LOCAL_MACHINE\\SYSTEM\\...\\BTHPORT\\Parameters\\Devices\\a0b1c2d3e4f5
        FriendlyName    REG_SZ    WH-1000XM4 Headphones
        LastConnected    REG_BINARY    0A1B2C...

The trailing key segment is the device address without separators.
Blocks with an unusable key are dropped; parsing never fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from btconnect.core.classifier import classify_device
from btconnect.core.mac import address_from_flat_key
from btconnect.models import DeviceRecord

logger = logging.getLogger(__name__)

BLOCK_PREFIX = "HKEY_LOCAL_MACHINE\\"
DEVICES_SEGMENT = "\\Devices\\"
FRIENDLY_NAME_MARKER = "FriendlyName"
STRING_VALUE_MARKER = "REG_SZ"
LAST_CONNECTED_MARKER = "LastConnected"
FALLBACK_NAME_PREFIX = "Device-"


def _is_block_line(line: str) -> bool:
    return line.startswith(BLOCK_PREFIX) and DEVICES_SEGMENT in line


def _friendly_name(line: str) -> str | None:
    if FRIENDLY_NAME_MARKER not in line or STRING_VALUE_MARKER not in line:
        return None
    value = line.split(STRING_VALUE_MARKER, 1)[1].strip()
    return value or None


@dataclass
class _PendingBlock:
    key: str
    name: str | None = None
    # Any LastConnected value counts as connected. This reports "has
    # connected before", not the live link state.
    connected: bool = False

    def to_record(self) -> DeviceRecord | None:
        address = address_from_flat_key(self.key)
        if address is None:
            logger.debug("Dropping block with malformed key %r", self.key)
            return None
        name = self.name or f"{FALLBACK_NAME_PREFIX}{address[:8]}"
        return DeviceRecord(
            name=name,
            address=address,
            is_connected=self.connected,
            device_type=classify_device(name),
        )


def parse_dump(raw_text: str) -> list[DeviceRecord]:
    devices: list[DeviceRecord] = []
    block: _PendingBlock | None = None

    def flush() -> None:
        if block is None:
            return
        record = block.to_record()
        if record is not None:
            devices.append(record)

    for raw_line in raw_text.splitlines():
        line = raw_line.strip()
        if _is_block_line(line):
            flush()
            block = _PendingBlock(key=line.rsplit("\\", 1)[-1])
            continue
        if block is None:
            continue

        name = _friendly_name(line)
        if name is not None:
            block.name = name
        elif LAST_CONNECTED_MARKER in line:
            block.connected = True

    flush()
    logger.debug("Parsed %d devices from dump", len(devices))
    return devices
