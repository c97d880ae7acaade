from __future__ import annotations

import string

from btconnect.errors import AddressValidationError

OCTET_COUNT = 6
FLAT_KEY_LENGTH = OCTET_COUNT * 2


def is_valid_address(value: str) -> bool:
    """Return True for ``XX:XX:XX:XX:XX:XX`` hex addresses (any case)."""
    groups = value.split(":")
    if len(groups) != OCTET_COUNT:
        return False
    return all(
        len(group) == 2 and all(ch in string.hexdigits for ch in group)
        for group in groups
    )


def address_from_flat_key(key: str) -> str | None:
    """Convert a 12 character registry key such as ``a0b1c2d3e4f5`` to
    ``A0:B1:C2:D3:E4:F5``.

    Returns None when the key does not have exactly 12 characters.
    """
    if len(key) != FLAT_KEY_LENGTH:
        return None
    pairs = [key[i : i + 2] for i in range(0, FLAT_KEY_LENGTH, 2)]
    return ":".join(pair.upper() for pair in pairs)


def normalize_address(value: str) -> str:
    cleaned = value.strip()
    if not is_valid_address(cleaned):
        raise AddressValidationError(
            f"Invalid Bluetooth address: {value!r} (expected XX:XX:XX:XX:XX:XX)"
        )
    return cleaned.upper()
