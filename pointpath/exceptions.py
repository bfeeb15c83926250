"""Custom exception types used across :mod:`pointpath`."""

from __future__ import annotations


class PointPathError(Exception):
    """Base class for all package-specific errors."""


class InputError(PointPathError, ValueError):
    """Raised for invalid user input such as malformed points or connections."""


class ConfigError(PointPathError, ValueError):
    """Raised for invalid configuration options."""


class DistanceOverflowError(PointPathError, OverflowError):
    """Raised when an accumulated distance falls below the 32-bit signed range.

    Only raised when the finder is configured with ``overflow="raise"``.
    """


__all__ = [
    "PointPathError",
    "InputError",
    "ConfigError",
    "DistanceOverflowError",
]
