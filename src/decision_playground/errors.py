"""
Error types raised by the dataset generators and the heatmap renderer.

All errors are raised synchronously to the caller; nothing is retried
and no operation is rolled back on failure.
"""


class PlaygroundError(Exception):
    """Base class for all decision_playground errors."""


class ConfigurationError(PlaygroundError, ValueError):
    """A capability disabled by configuration was requested, or an
    unknown configuration key / dataset name was supplied."""


class DimensionError(PlaygroundError, ValueError):
    """A matrix argument has the wrong shape for the requested operation."""


class LifecycleError(PlaygroundError, RuntimeError):
    """A rendering operation was invoked before (or after) the surface
    lifecycle allows it."""
