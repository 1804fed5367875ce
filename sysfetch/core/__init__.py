"""Core module containing data models, errors and configuration."""

from .models import (
    HostInfo,
    KernelInfo,
    PowerInfo,
    MemoryInfo,
    CPUInfo,
    MachineIdentity,
    SessionInfo,
    Readout,
)
from .errors import ReadoutError, MetricNotAvailable, MetricNotSupported, ReadFailed
from .config import Config

__all__ = [
    "HostInfo",
    "KernelInfo",
    "PowerInfo",
    "MemoryInfo",
    "CPUInfo",
    "MachineIdentity",
    "SessionInfo",
    "Readout",
    "ReadoutError",
    "MetricNotAvailable",
    "MetricNotSupported",
    "ReadFailed",
    "Config",
]
