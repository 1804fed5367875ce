"""Shared fixtures for sysfetch tests."""

from unittest.mock import MagicMock

import pytest

from sysfetch.core.models import (
    CPUInfo,
    HostInfo,
    KernelInfo,
    MachineIdentity,
    MemoryInfo,
    PowerInfo,
    Readout,
    SessionInfo,
)
from sysfetch.readers.base import Reader
from sysfetch.readers.static_reader import StaticReader


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SYSFETCH_SHORTHAND", "SYSFETCH_LINES", "SYSFETCH_SEPARATOR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def readout() -> Readout:
    return Readout(
        uptime_seconds=93784.52,
        host=HostInfo(username="alice", hostname="workstation"),
        kernel=KernelInfo(name="Linux", release="6.1.0-18-amd64"),
        power=PowerInfo(battery_percentage="87", battery_charging="TRUE"),
        memory=MemoryInfo(used_kb=3412004, total_kb=16303720),
        cpu=CPUInfo(model="Intel(R) Core(TM) i7-8550U CPU @ 1.80GHz"),
        machine=MachineIdentity(
            vendor="LENOVO",
            family="ThinkPad T480",
            name="20L5CTO1WW",
            version="ThinkPad T480",
        ),
        session=SessionInfo(desktop_session="/usr/share/xsessions/gnome"),
    )


@pytest.fixture
def reader(readout) -> StaticReader:
    return StaticReader(readout)


@pytest.fixture
def mock_reader() -> MagicMock:
    return MagicMock(spec=Reader)
