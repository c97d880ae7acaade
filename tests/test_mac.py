from __future__ import annotations

import pytest

from btconnect.core import address_from_flat_key, is_valid_address, normalize_address
from btconnect.errors import AddressValidationError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("AA:BB:CC:DD:EE:FF", True),
        ("aa:bb:cc:dd:ee:0f", True),
        ("AA:BB:CC:DD:EE", False),
        ("AA:BB:CC:DD:EE:FF:GG", False),
        ("AA-BB-CC-DD-EE-FF", False),
        ("GG:HH:II:JJ:KK:LL", False),
        ("A:BB:CC:DD:EE:FFF", False),
        ("", False),
    ],
)
def test_is_valid_address(value, expected):
    assert is_valid_address(value) is expected


def test_address_from_flat_key_canonicalizes():
    assert address_from_flat_key("a0b1c2d3e4f5") == "A0:B1:C2:D3:E4:F5"


@pytest.mark.parametrize("key", ["001a7dda7113", "FFFFFFFFFFFF", "0123456789ab"])
def test_address_from_flat_key_output_is_valid(key):
    address = address_from_flat_key(key)
    assert address is not None
    assert is_valid_address(address)


@pytest.mark.parametrize("key", ["", "a0b1c2d3e4", "a0b1c2d3e4f5a6", "CachedServices"])
def test_address_from_flat_key_rejects_wrong_length(key):
    assert address_from_flat_key(key) is None


def test_normalize_address():
    assert normalize_address(" aa:bb:cc:dd:ee:ff ") == "AA:BB:CC:DD:EE:FF"


def test_normalize_address_rejects_invalid():
    with pytest.raises(AddressValidationError, match="AA-BB"):
        normalize_address("AA-BB-CC-DD-EE-FF")
