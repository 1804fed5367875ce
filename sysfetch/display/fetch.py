"""
Fetch line collection.

Evaluates the configured formatter lines and lays them out as
"Label: value" text.
"""

import logging
from typing import List, Tuple

from ..core.config import DisplayConfig
from ..core.errors import ReadoutError
from .formatter import Formatter


logger = logging.getLogger(__name__)


LINE_LABELS = {
    "host": "Host",
    "machine": "Machine",
    "kernel": "Kernel",
    "desktop": "Desktop",
    "uptime": "Uptime",
    "cpu": "CPU",
    "memory": "Memory",
    "battery": "Battery",
}


def _line_value(formatter: Formatter, key: str, display: DisplayConfig) -> str:
    if key == "host":
        return formatter.host()
    if key == "machine":
        return formatter.machine()
    if key == "kernel":
        return formatter.kernel()
    if key == "desktop":
        return formatter.desktop_environment()
    if key == "uptime":
        return formatter.uptime(display.shorthand)
    if key == "cpu":
        return formatter.cpu()
    if key == "memory":
        return formatter.memory()
    if key == "battery":
        return formatter.battery()
    raise KeyError(key)


def collect_lines(formatter: Formatter, display: DisplayConfig) -> List[Tuple[str, str]]:
    """
    Evaluate each configured line.

    Lines whose readout fails or comes out empty are left out.

    Returns:
        (label, value) pairs in configured order
    """
    lines = []

    for key in display.lines:
        if key not in LINE_LABELS:
            logger.warning(f"Unknown line {key!r}, skipping")
            continue

        try:
            value = _line_value(formatter, key, display)
        except ReadoutError as e:
            logger.debug(f"Omitting {key}: {type(e).__name__}: {e}")
            continue

        if not value:
            logger.debug(f"Omitting {key}: empty value")
            continue

        lines.append((LINE_LABELS[key], value))

    return lines


def render_lines(lines: List[Tuple[str, str]], separator: str = ": ") -> str:
    """Join (label, value) pairs with labels padded to the widest."""
    if not lines:
        return ""

    width = max(len(label) for label, _ in lines)
    return "\n".join(f"{label.ljust(width)}{separator}{value}" for label, value in lines)
