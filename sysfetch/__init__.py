"""
sysfetch - system information display formatting.

Converts raw readout values into human-readable fetch lines.
"""

__version__ = "1.0.0"
