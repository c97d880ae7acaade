from __future__ import annotations

from btconnect.models import DeviceType

# Checked in order, first match wins.
_KEYWORDS: tuple[tuple[DeviceType, tuple[str, ...]], ...] = (
    (DeviceType.PERIPHERAL, ("mouse", "keyboard")),
    (DeviceType.AUDIO_VIDEO, ("headphone", "speaker", "audio", "airpods")),
    (DeviceType.PHONE, ("phone", "mobile")),
)


def classify_device(name: str) -> DeviceType:
    lowered = name.lower()
    for device_type, keywords in _KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return device_type
    return DeviceType.UNKNOWN
