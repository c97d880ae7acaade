from __future__ import annotations

import subprocess

import pytest

from btconnect.core import (
    FileDumpSource,
    SampleDumpSource,
    SystemDumpSource,
    discover_devices,
)
from btconnect.core import sources as sources_module
from btconnect.errors import DumpSourceError


def _fake_run(returncode: int, stdout: str = "", stderr: str = ""):
    calls: list[list[str]] = []

    def _run(cmd, capture_output, text, timeout):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)

    return _run, calls


def test_system_source_runs_reg_query(monkeypatch: pytest.MonkeyPatch):
    run, calls = _fake_run(0, stdout="dump text")
    monkeypatch.setattr(sources_module.subprocess, "run", run)

    assert SystemDumpSource().read_dump() == "dump text"
    assert calls[0][:2] == ["reg", "query"]
    assert calls[0][-1] == "/s"
    assert calls[0][2].endswith("BTHPORT\\Parameters\\Devices")


def test_system_source_reports_failed_command(monkeypatch: pytest.MonkeyPatch):
    run, _ = _fake_run(1, stderr="ERROR: access denied")
    monkeypatch.setattr(sources_module.subprocess, "run", run)

    with pytest.raises(DumpSourceError, match="access denied"):
        SystemDumpSource().read_dump()


def test_system_source_reports_missing_executable():
    source = SystemDumpSource(executable="btconnect-no-such-binary")

    with pytest.raises(DumpSourceError):
        source.read_dump()


def test_discover_devices_returns_empty_on_failure(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    run, _ = _fake_run(1)
    monkeypatch.setattr(sources_module.subprocess, "run", run)

    assert discover_devices(SystemDumpSource()) == []
    assert "Device enumeration failed" in caplog.text


def test_discover_devices_from_sample():
    devices = discover_devices(SampleDumpSource())

    assert len(devices) == 3


def test_file_source(tmp_path):
    path = tmp_path / "dump.txt"
    path.write_text(SampleDumpSource().read_dump())

    assert len(discover_devices(FileDumpSource(path))) == 3

    with pytest.raises(DumpSourceError):
        FileDumpSource(tmp_path / "missing.txt").read_dump()
