"""Display module for turning readouts into text."""

from .formatter import (
    Formatter,
    format_uptime,
    format_battery,
    format_bytes,
    format_memory,
    format_cpu,
    format_machine,
    desktop_environment,
)
from .fetch import collect_lines, render_lines

__all__ = [
    "Formatter",
    "format_uptime",
    "format_battery",
    "format_bytes",
    "format_memory",
    "format_cpu",
    "format_machine",
    "desktop_environment",
    "collect_lines",
    "render_lines",
]
