from __future__ import annotations

import pytest

from btconnect.core import classify_device
from btconnect.models import DeviceType


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Wireless Mouse", DeviceType.PERIPHERAL),
        ("Logitech MX KEYBOARD", DeviceType.PERIPHERAL),
        ("JBL Speaker", DeviceType.AUDIO_VIDEO),
        ("Kevin's AirPods Pro", DeviceType.AUDIO_VIDEO),
        ("Pixel Phone", DeviceType.PHONE),
        ("Mobile Hotspot", DeviceType.PHONE),
        ("Random Widget", DeviceType.UNKNOWN),
        ("", DeviceType.UNKNOWN),
    ],
)
def test_classify_device(name, expected):
    assert classify_device(name) is expected


def test_audio_wins_over_phone():
    assert classify_device("Phone Headphones") is DeviceType.AUDIO_VIDEO


def test_peripheral_wins_over_audio():
    assert classify_device("Keyboard with Speaker") is DeviceType.PERIPHERAL
