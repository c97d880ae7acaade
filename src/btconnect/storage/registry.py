from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from btconnect.errors import RegistryIOError, RegistryParseError
from btconnect.models import RegisteredDevice, RegistryState

logger = logging.getLogger(__name__)

REGISTRY_FILE = "registry.toml"


def toml_string(value: str) -> str:
    # TOML basic strings take literal non-ASCII but not surrogate escapes or DEL.
    return json.dumps(value, ensure_ascii=False).replace("\x7f", "\\u007f")


def _toml_bool(value: bool) -> str:
    return "true" if value else "false"


def _render_device(device: RegisteredDevice) -> list[str]:
    lines = [
        "[[registered_devices]]",
        f"name = {toml_string(device.name)}",
        f"address = {toml_string(device.address)}",
        f"device_type = {toml_string(device.device_type)}",
    ]
    if device.last_connected is not None:
        lines.append(f"last_connected = {toml_string(device.last_connected)}")
    return lines


def render_registry_toml(state: RegistryState) -> str:
    lines = ["# btconnect device registry", ""]

    # Top-level keys must precede the [[registered_devices]] tables.
    if state.default_device is not None:
        lines.append(f"default_device = {toml_string(state.default_device)}")
    lines.append(f"auto_connect = {_toml_bool(state.auto_connect)}")
    lines.append(f"connection_timeout = {state.connection_timeout}")

    for device in state.registered_devices:
        lines.append("")
        lines.extend(_render_device(device))

    lines.append("")
    return "\n".join(lines)


def load_registry(path: Path) -> RegistryState:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise RegistryParseError(
            f"Invalid TOML in registry file: {path}\n{exc}"
        ) from exc
    except OSError as exc:
        raise RegistryIOError(f"Could not read registry file: {path}") from exc

    try:
        return RegistryState.model_validate(data or {})
    except ValidationError as exc:
        raise RegistryParseError(f"Invalid registry file: {path}\n{exc}") from exc


def save_registry(state: RegistryState, path: Path) -> None:
    """Write the registry.

    Plain overwrite, no locking: concurrent writers race and the last one wins.
    """
    content = render_registry_toml(state)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RegistryIOError(f"Could not write registry file: {path}") from exc
    logger.debug(
        "Saved %d registered devices to %s", len(state.registered_devices), path
    )


class RegistryStore:
    """Registry file at a fixed path.

    Usage:
        store = RegistryStore(path)
        state = store.load()  # defaults when the file does not exist yet
        state.register("Keyboard", "AA:BB:CC:DD:EE:FF", "Peripheral")
        store.save(state)
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> RegistryState:
        """Load the registry, first run gives an empty one."""
        if not self._path.exists():
            logger.debug("No registry at %s, using defaults", self._path)
            return RegistryState()
        return load_registry(self._path)

    def save(self, state: RegistryState) -> None:
        save_registry(state, self._path)

    def init(self, force: bool = False) -> bool:
        """Write an empty registry. Returns False if one exists and force is off."""
        if self._path.exists() and not force:
            return False
        self.save(RegistryState())
        return True
