"""
sysfetch - Main Entry Point.

Prints formatted system information from a captured readout.
"""

import argparse
import logging
import sys

from . import __version__
from .core.config import Config, get_default_config_path
from .core.errors import ReadoutError
from .display.fetch import collect_lines, render_lines
from .display.formatter import Formatter
from .readers.static_reader import StaticReader


logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Display system information from a readout snapshot"
    )

    parser.add_argument(
        "readout",
        nargs="?",
        help="Path to a YAML readout snapshot"
    )

    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to configuration file"
    )

    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "--shorthand",
        dest="shorthand",
        action="store_true",
        default=None,
        help="Compact uptime (1d 2h 3m)"
    )
    style.add_argument(
        "--long",
        dest="shorthand",
        action="store_false",
        help="Verbose uptime (1 day 2 hours 3 minutes)"
    )

    parser.add_argument(
        "--lines",
        default=None,
        help="Comma-separated lines to show (e.g. host,kernel,uptime)"
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information"
    )

    return parser, parser.parse_args(argv)


def setup_logging(config: Config):
    """Configure root logging from the config."""
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.WARNING),
        format=config.logging.format,
    )


def main(argv=None) -> int:
    """Main function."""
    parser, args = parse_arguments(argv)

    if args.version:
        print(f"sysfetch version {__version__}")
        return 0

    if not args.readout:
        parser.error("a readout snapshot is required")

    # Load config
    config_path = args.config or get_default_config_path()
    config = Config.from_yaml(config_path)
    setup_logging(config)
    logger.debug(f"Configuration loaded from: {config_path}")

    # Apply command line overrides
    if args.shorthand is not None:
        config.display.shorthand = args.shorthand
    if args.lines:
        config.display.lines = [key.strip() for key in args.lines.split(",") if key.strip()]

    try:
        reader = StaticReader.from_yaml(args.readout)
    except ReadoutError as e:
        logger.error(str(e))
        return 1

    formatter = Formatter(reader)
    lines = collect_lines(formatter, config.display)
    output = render_lines(lines, config.display.separator)
    if output:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
