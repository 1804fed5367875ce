"""
Data models for raw readout values.

These dataclasses hold the unformatted values a reader serves. A field
set to None was not captured.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, Union


@dataclass
class HostInfo:
    """Login and network identity."""

    username: Optional[str] = None
    hostname: Optional[str] = None

    def __post_init__(self):
        _check_text(self)


@dataclass
class KernelInfo:
    """Kernel name and release, e.g. Linux / 6.1.0."""

    name: Optional[str] = None
    release: Optional[str] = None

    def __post_init__(self):
        _check_text(self)


@dataclass
class PowerInfo:
    """Battery state."""

    battery_percentage: Optional[Union[str, int, float]] = None
    battery_charging: Optional[Union[bool, str]] = None


@dataclass
class MemoryInfo:
    """Memory usage in kilobytes."""

    used_kb: Optional[int] = None
    total_kb: Optional[int] = None


@dataclass
class CPUInfo:
    """Processor identification."""

    model: Optional[str] = None

    def __post_init__(self):
        _check_text(self)


@dataclass
class MachineIdentity:
    """
    Firmware-reported machine identification.

    Readers map their platform's fields onto these four: on Linux DMI
    sys_vendor, product_family, product_name and product_version; on
    NetBSD the system vendor, product and version.
    """

    vendor: str = ""
    family: str = ""
    name: str = ""
    version: str = ""

    def __post_init__(self):
        # An empty YAML key loads as None
        for f in fields(self):
            if getattr(self, f.name) is None:
                setattr(self, f.name, "")
        _check_text(self)


@dataclass
class SessionInfo:
    """Graphical session."""

    desktop_session: Optional[str] = None

    def __post_init__(self):
        _check_text(self)


@dataclass
class Readout:
    """A complete set of raw values captured from one machine."""

    uptime_seconds: Optional[Union[str, float]] = None
    host: HostInfo = field(default_factory=HostInfo)
    kernel: KernelInfo = field(default_factory=KernelInfo)
    power: PowerInfo = field(default_factory=PowerInfo)
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    cpu: CPUInfo = field(default_factory=CPUInfo)
    machine: Optional[MachineIdentity] = None
    session: SessionInfo = field(default_factory=SessionInfo)

    @classmethod
    def from_dict(cls, data: dict) -> "Readout":
        """Create a readout from a nested dictionary."""
        readout = cls()

        if "uptime_seconds" in data:
            readout.uptime_seconds = data["uptime_seconds"]

        if "host" in data:
            readout.host = HostInfo(**data["host"])

        if "kernel" in data:
            readout.kernel = KernelInfo(**data["kernel"])

        if "power" in data:
            readout.power = PowerInfo(**data["power"])

        if "memory" in data:
            readout.memory = MemoryInfo(**data["memory"])

        if "cpu" in data:
            readout.cpu = CPUInfo(**data["cpu"])

        if data.get("machine") is not None:
            readout.machine = MachineIdentity(**data["machine"])

        if "session" in data:
            readout.session = SessionInfo(**data["session"])

        return readout

    def to_dict(self) -> dict:
        """Convert readout to dictionary for serialization."""
        return {
            "uptime_seconds": self.uptime_seconds,
            "host": _as_dict(self.host),
            "kernel": _as_dict(self.kernel),
            "power": _as_dict(self.power),
            "memory": _as_dict(self.memory),
            "cpu": _as_dict(self.cpu),
            "machine": _as_dict(self.machine) if self.machine else None,
            "session": _as_dict(self.session),
        }


def _as_dict(obj) -> dict:
    return {f.name: getattr(obj, f.name) for f in fields(obj)}


def _check_text(obj):
    """Reject non-text values in text fields, e.g. an unquoted YAML 5.10."""
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f"{type(obj).__name__}.{f.name} must be text, got {value!r}; "
                f"quote it in the snapshot"
            )
