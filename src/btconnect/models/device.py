"""Device models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DeviceType(str, Enum):
    """Coarse device category derived from the device name."""

    PERIPHERAL = "Peripheral"
    AUDIO_VIDEO = "AudioVideo"
    PHONE = "Phone"
    UNKNOWN = "Unknown"


class DeviceRecord(BaseModel):
    """Paired device found in a registry dump."""

    model_config = {"extra": "forbid"}

    name: str
    address: str
    # "has a LastConnected value", not a live connection state
    is_connected: bool = False
    device_type: DeviceType = DeviceType.UNKNOWN
