"""
Readout error types.

Every failure to obtain or interpret a raw metric surfaces as a
ReadoutError subclass.
"""


class ReadoutError(Exception):
    """Base class for all readout failures."""


class MetricNotAvailable(ReadoutError):
    """The metric could not be obtained or its value is unusable."""


class MetricNotSupported(ReadoutError):
    """The reader does not implement the metric on this platform."""

    def __init__(self, metric: str):
        super().__init__(f"{metric} is not supported by this reader")
        self.metric = metric


class ReadFailed(ReadoutError):
    """The underlying read broke."""
