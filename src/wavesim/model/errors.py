"""
Error types raised by the simulation core.
"""


class WaveSimError(ValueError):
    """Base class for all errors raised by the simulation core."""


class InvalidConfigurationError(WaveSimError):
    """Raised when a grid cannot be constructed with the requested configuration."""


class InvalidArgumentError(WaveSimError):
    """Raised when an operation is called with an out-of-range argument."""
