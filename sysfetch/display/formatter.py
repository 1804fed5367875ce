"""
Readout Formatter.

Turns raw reader values into display strings. Nothing here prints or
logs; failures are raised as ReadoutError subclasses for the caller to
handle.
"""

import math
from typing import Callable, Optional, Union

import psutil

from ..core.errors import MetricNotAvailable, ReadoutError
from ..core.models import MachineIdentity
from ..readers.base import Reader


SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * 60 * 60

# Versions at most this long are taken to be codes, not descriptions
MACHINE_VERSION_MAX_CODE_LEN = 15

BYTE_UNITS = "KMGTPE"

TRADEMARK_SYMBOLS = (
    ("(TM)", "™"),
    ("(R)", "®"),
)


def format_uptime(seconds: Union[str, float], shorthand: bool = False) -> str:
    """
    Humanize an uptime.

    Above one minute the uptime is split into days, hours and minutes,
    omitting zero components. At or below one minute only whole seconds
    are shown, and zero seconds gives an empty string.

    Args:
        seconds: Seconds since boot, as a number or a numeric string
        shorthand: "1d 2h 3m" instead of "1 day 2 hours 3 minutes"

    Returns:
        Formatted uptime without surrounding whitespace

    Raises:
        MetricNotAvailable: If seconds is not a non-negative number
    """
    try:
        uptime = float(seconds)
    except (TypeError, ValueError) as e:
        raise MetricNotAvailable(f"Uptime {seconds!r} is not a number") from e

    if not math.isfinite(uptime) or uptime < 0:
        raise MetricNotAvailable(f"Uptime {seconds!r} is not a valid duration")

    parts = []
    if uptime > SECONDS_PER_MINUTE:
        components = (
            (math.floor(uptime / SECONDS_PER_DAY), "d", "day"),
            (math.floor(uptime / SECONDS_PER_HOUR % 24), "h", "hour"),
            (math.floor(uptime / SECONDS_PER_MINUTE % 60), "m", "minute"),
        )
        for value, suffix, unit in components:
            if value == 0:
                continue
            if shorthand:
                parts.append(f"{value}{suffix}")
            elif value == 1:
                parts.append(f"{value} {unit}")
            else:
                parts.append(f"{value} {unit}s")
    else:
        up_seconds = math.floor(uptime % SECONDS_PER_MINUTE)
        if up_seconds != 0:
            parts.append(f"{up_seconds}s")

    return " ".join(parts).strip()


def _is_empty(value) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return value is None


def _is_true(value) -> bool:
    if isinstance(value, str):
        return value.strip().upper() == "TRUE"
    return bool(value)


def _percentage_text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def format_battery(percentage: Union[str, int, float], charging: Union[bool, str]) -> str:
    """
    Describe battery state.

    A full battery reads "Full" whatever the charging flag says.

    Raises:
        MetricNotAvailable: If either value is missing
    """
    if percentage is not None:
        percentage = _percentage_text(percentage)
    if _is_empty(percentage) or _is_empty(charging):
        raise MetricNotAvailable("Battery percentage or charging state is empty")

    if percentage == "100":
        return "Full"

    if _is_true(charging):
        return f"{percentage}% & Charging"
    return f"{percentage}% & Discharging"


def format_bytes(num_bytes: int) -> str:
    """
    Convert bytes to human-readable format using decimal units.

    Args:
        num_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "512 B", "1.5 GB")
    """
    if num_bytes < 1000:
        return f"{num_bytes} B"

    value = float(num_bytes)
    exponent = 0
    while value >= 1000 and exponent < len(BYTE_UNITS):
        value /= 1000
        exponent += 1

    return f"{value:.1f} {BYTE_UNITS[exponent - 1]}B"


def _kilobytes(value, metric: str) -> int:
    try:
        kilobytes = int(value)
    except (TypeError, ValueError) as e:
        raise MetricNotAvailable(f"{metric} {value!r} is not a number") from e
    if kilobytes < 0:
        raise MetricNotAvailable(f"{metric} {value!r} is negative")
    return kilobytes


def format_memory(used_kb: int, total_kb: int) -> str:
    """Format memory usage as "used/total". Used may exceed total."""
    used = _kilobytes(used_kb, "Used memory")
    total = _kilobytes(total_kb, "Total memory")
    return f"{format_bytes(used * 1000)}/{format_bytes(total * 1000)}"


def format_cpu(model: str, cores: int) -> str:
    """
    Format a CPU model and its logical core count.

    Trademark markers are replaced anywhere in the result, not only
    at word boundaries.
    """
    formatted = f"{model} ({cores})"
    for marker, symbol in TRADEMARK_SYMBOLS:
        formatted = formatted.replace(marker, symbol)
    return formatted


def format_machine(identity: MachineIdentity) -> str:
    """
    Pick the shortest non-redundant description of a machine.

    Returns the shared value when family, name and version agree, the
    vendor/family/name triple when the version is empty or short, and
    otherwise the version alone.
    """
    for value in (identity.vendor, identity.family, identity.name, identity.version):
        if not isinstance(value, str):
            raise MetricNotAvailable(f"Machine field {value!r} is not text")

    if identity.family == identity.name == identity.version:
        return identity.family

    if not identity.version or len(identity.version) <= MACHINE_VERSION_MAX_CODE_LEN:
        return f"{identity.vendor} {identity.family} {identity.name}"

    return identity.version


def ucfirst(text: str) -> str:
    """Upper-case the first character only."""
    return text[:1].upper() + text[1:]


def desktop_environment(session_name: str) -> str:
    """
    Name a desktop session, similar to how basename works.

    "/usr/share/xsessions/gnome" gives "Gnome"; a name without a "/"
    is used whole.
    """
    if not isinstance(session_name, str):
        raise MetricNotAvailable(f"Desktop session {session_name!r} is not text")

    return ucfirst(session_name.rsplit("/", 1)[-1])


def _logical_core_count() -> int:
    return psutil.cpu_count(logical=True) or 1


class Formatter:
    """
    Builds display strings from a Reader.

    Every call reads fresh values. host, battery, memory, cpu, uptime,
    machine and desktop_environment fail on the first failed read;
    kernel treats failed reads as empty strings.
    """

    def __init__(self, reader: Reader, core_count: Optional[Callable[[], int]] = None):
        self.reader = reader
        self._core_count = core_count or _logical_core_count

    def uptime(self, shorthand: bool = False) -> str:
        return format_uptime(self.reader.uptime(), shorthand)

    def host(self) -> str:
        """Return "user@hostname"."""
        username = self.reader.username()
        hostname = self.reader.hostname()

        return f"{username}@{hostname}"

    def battery(self) -> str:
        percentage = self.reader.battery_percentage()
        charging = self.reader.battery_charging()

        return format_battery(percentage, charging)

    def memory(self) -> str:
        total = self.reader.memory_total_kb()
        used = self.reader.memory_used_kb()

        return format_memory(used, total)

    def cpu(self) -> str:
        return format_cpu(self.reader.cpu_model(), self._core_count())

    def machine(self) -> str:
        return format_machine(self.reader.machine())

    def desktop_environment(self) -> str:
        return desktop_environment(self.reader.desktop_session_name())

    def kernel(self) -> str:
        """Return "name release", e.g. "Linux 6.1.0"."""
        os_type = self._coalesce(self.reader.kernel_name)
        os_release = self._coalesce(self.reader.kernel_release)

        if os_type and os_release:
            return f"{os_type} {os_release}"

        raise MetricNotAvailable("Kernel name or release is empty")

    @staticmethod
    def _coalesce(read: Callable[[], str]) -> str:
        try:
            return read() or ""
        except ReadoutError:
            return ""
