from __future__ import annotations

import logging

from btconnect.core.parser import parse_dump
from btconnect.core.sources import DumpSource
from btconnect.errors import DumpSourceError
from btconnect.models import DeviceRecord

logger = logging.getLogger(__name__)


def discover_devices(source: DumpSource) -> list[DeviceRecord]:
    """Read and parse a dump. Source failures give an empty list."""
    try:
        raw = source.read_dump()
    except DumpSourceError as exc:
        logger.warning("Device enumeration failed: %s", exc)
        return []

    devices = parse_dump(raw)
    logger.debug("Discovered %d paired devices", len(devices))
    return devices
