"""Where device dumps come from."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from btconnect.errors import DumpSourceError

logger = logging.getLogger(__name__)

DEVICES_KEY = r"HKLM\SYSTEM\CurrentControlSet\Services\BTHPORT\Parameters\Devices"
DEFAULT_COMMAND_TIMEOUT = 10.0

SAMPLE_DUMP = r"""
HKEY_LOCAL_MACHINE\SYSTEM\CurrentControlSet\Services\BTHPORT\Parameters\Devices\001a7dda7113
    FriendlyName    REG_SZ    Logitech MX Keyboard
    LastConnected    REG_BINARY    A0C2F1D9E4D8DA01
    LastSeen    REG_BINARY    A0C2F1D9E4D8DA01

HKEY_LOCAL_MACHINE\SYSTEM\CurrentControlSet\Services\BTHPORT\Parameters\Devices\38184c2b9af0
    FriendlyName    REG_SZ    WH-1000XM4 Headphones
    LastSeen    REG_BINARY    10B5C3E2A1D8DA01

HKEY_LOCAL_MACHINE\SYSTEM\CurrentControlSet\Services\BTHPORT\Parameters\Devices\f0d7aa113c5e
    FriendlyName    REG_SZ    Pixel 8 Phone
    LastSeen    REG_BINARY    C0A1B2E2A1D8DA01
"""


class DumpSource(Protocol):
    """Anything that can produce a raw device dump."""

    def read_dump(self) -> str: ...


@dataclass
class SystemDumpSource:
    """Query the Windows registry with ``reg query``."""

    command_timeout: float = DEFAULT_COMMAND_TIMEOUT
    executable: str = "reg"

    def command(self) -> list[str]:
        return [self.executable, "query", DEVICES_KEY, "/s"]

    def read_dump(self) -> str:
        cmd = self.command()
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.command_timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise DumpSourceError(f"Could not run {self.executable}: {exc}") from exc

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit code {result.returncode}"
            raise DumpSourceError(f"Registry query failed: {detail}")
        return result.stdout


@dataclass
class SampleDumpSource:
    """Canned dump for development and tests."""

    text: str = SAMPLE_DUMP

    def read_dump(self) -> str:
        return self.text


@dataclass
class FileDumpSource:
    """Dump previously saved to a file (``reg query ... > dump.txt``)."""

    path: Path

    def read_dump(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise DumpSourceError(f"Could not read dump file: {self.path}") from exc
