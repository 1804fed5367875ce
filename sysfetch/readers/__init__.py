"""Readers module for serving raw readout values."""

from .base import Reader
from .static_reader import StaticReader

__all__ = [
    "Reader",
    "StaticReader",
]
