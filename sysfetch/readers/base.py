"""
Base reader interface.

A reader serves raw values for the formatter. Platform-specific
extraction lives in reader implementations.
"""

from typing import Union

from ..core.errors import MetricNotSupported
from ..core.models import MachineIdentity


class Reader:
    """
    Base class for all readers.

    Every accessor either returns a raw value or raises a ReadoutError.
    Accessors a subclass does not override raise MetricNotSupported.
    """

    def uptime(self) -> Union[str, float]:
        """Seconds since boot."""
        raise MetricNotSupported("uptime")

    def username(self) -> str:
        raise MetricNotSupported("username")

    def hostname(self) -> str:
        raise MetricNotSupported("hostname")

    def battery_percentage(self) -> Union[str, int, float]:
        raise MetricNotSupported("battery_percentage")

    def battery_charging(self) -> Union[bool, str]:
        """True-valued while the battery is charging."""
        raise MetricNotSupported("battery_charging")

    def memory_used_kb(self) -> int:
        raise MetricNotSupported("memory_used_kb")

    def memory_total_kb(self) -> int:
        raise MetricNotSupported("memory_total_kb")

    def cpu_model(self) -> str:
        raise MetricNotSupported("cpu_model")

    def kernel_name(self) -> str:
        raise MetricNotSupported("kernel_name")

    def kernel_release(self) -> str:
        raise MetricNotSupported("kernel_release")

    def desktop_session_name(self) -> str:
        raise MetricNotSupported("desktop_session_name")

    def machine(self) -> MachineIdentity:
        """Vendor, family, name and version of the machine."""
        raise MetricNotSupported("machine")
