"""
Static Readout Reader.

Serves values from an already captured Readout, typically a YAML
snapshot taken on another machine or at another time.
"""

import logging
from pathlib import Path
from typing import Union

import yaml

from ..core.errors import MetricNotAvailable, ReadFailed
from ..core.models import MachineIdentity, Readout
from .base import Reader


logger = logging.getLogger(__name__)


class StaticReader(Reader):
    """
    Reader backed by a Readout.

    A field that was not captured raises MetricNotAvailable.
    """

    def __init__(self, readout: Readout):
        self.readout = readout

    @classmethod
    def from_yaml(cls, path: str) -> "StaticReader":
        """Load a readout snapshot from a YAML file."""
        snapshot_path = Path(path)
        if not snapshot_path.exists():
            raise ReadFailed(f"Readout file not found: {path}")

        try:
            with open(snapshot_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ReadFailed(f"Could not load readout {path}: {e}") from e

        if not isinstance(data, dict):
            raise ReadFailed(f"Readout {path} is not a mapping")

        try:
            readout = Readout.from_dict(data)
        except TypeError as e:
            raise ReadFailed(f"Malformed readout {path}: {e}") from e

        logger.debug(f"Loaded readout from {path}")
        return cls(readout)

    def to_yaml(self, path: str):
        """Save the readout to a YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.readout.to_dict(), f, default_flow_style=False)

    def _value(self, value, metric: str):
        if value is None:
            raise MetricNotAvailable(metric)
        return value

    def uptime(self) -> Union[str, float]:
        return self._value(self.readout.uptime_seconds, "uptime")

    def username(self) -> str:
        return self._value(self.readout.host.username, "username")

    def hostname(self) -> str:
        return self._value(self.readout.host.hostname, "hostname")

    def battery_percentage(self) -> Union[str, int, float]:
        return self._value(self.readout.power.battery_percentage, "battery_percentage")

    def battery_charging(self) -> Union[bool, str]:
        return self._value(self.readout.power.battery_charging, "battery_charging")

    def memory_used_kb(self) -> int:
        return self._value(self.readout.memory.used_kb, "memory_used_kb")

    def memory_total_kb(self) -> int:
        return self._value(self.readout.memory.total_kb, "memory_total_kb")

    def cpu_model(self) -> str:
        return self._value(self.readout.cpu.model, "cpu_model")

    def kernel_name(self) -> str:
        return self._value(self.readout.kernel.name, "kernel_name")

    def kernel_release(self) -> str:
        return self._value(self.readout.kernel.release, "kernel_release")

    def desktop_session_name(self) -> str:
        return self._value(self.readout.session.desktop_session, "desktop_session_name")

    def machine(self) -> MachineIdentity:
        return self._value(self.readout.machine, "machine")
