"""
Configuration management for sysfetch.

Loads configuration from YAML files and environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import yaml


DEFAULT_LINES = [
    "host",
    "machine",
    "kernel",
    "desktop",
    "uptime",
    "cpu",
    "memory",
    "battery",
]


@dataclass
class DisplayConfig:
    """Which lines to print and how."""

    shorthand: bool = True  # "1d 2h" rather than "1 day 2 hours"
    lines: List[str] = field(default_factory=lambda: list(DEFAULT_LINES))
    separator: str = ": "


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """Main configuration container."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(path)
        if not config_path.exists():
            config = cls()
            config._apply_env_overrides()
            return config

        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        config = cls()

        if "display" in data:
            config.display = DisplayConfig(**data["display"])

        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        # Override with environment variables
        config._apply_env_overrides()

        return config

    def _apply_env_overrides(self):
        """Apply environment variable overrides."""
        if os.getenv("SYSFETCH_SHORTHAND"):
            self.display.shorthand = os.getenv("SYSFETCH_SHORTHAND").lower() == "true"
        if os.getenv("SYSFETCH_LINES"):
            self.display.lines = [
                key.strip() for key in os.getenv("SYSFETCH_LINES").split(",") if key.strip()
            ]
        if os.getenv("SYSFETCH_SEPARATOR"):
            self.display.separator = os.getenv("SYSFETCH_SEPARATOR")

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.logging.level = os.getenv("LOG_LEVEL")

    def to_yaml(self, path: str):
        """Save configuration to YAML file."""
        data = {
            "display": {
                "shorthand": self.display.shorthand,
                "lines": self.display.lines,
                "separator": self.display.separator,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }

        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    # Check common locations
    candidates = [
        Path("config/sysfetch.yaml"),
        Path("sysfetch.yaml"),
        Path.home() / ".sysfetch" / "config.yaml",
        Path("/etc/sysfetch/config.yaml"),
    ]

    for path in candidates:
        if path.exists():
            return str(path)

    # Return the first candidate as default
    return str(candidates[0])
