"""Public package exports for :mod:`pointpath`."""

from __future__ import annotations

from .arith import INFINITY, checked_add
from .exceptions import ConfigError, DistanceOverflowError, InputError, PointPathError
from .finder import BaseFinder, FinderConfig, FinderMetrics
from .graph import Connection, Graph, Point
from .logger import Logger, NoopLogger, StdLogger
from .priority import PriorityPathFinder
from .relaxation import RelaxationPathFinder
from .strategies import STRATEGIES, distance, get_finder, shortest_distance

__version__ = "0.1.0"

__all__ = [
    "INFINITY",
    "checked_add",
    "Point",
    "Connection",
    "Graph",
    "BaseFinder",
    "FinderConfig",
    "FinderMetrics",
    "RelaxationPathFinder",
    "PriorityPathFinder",
    "STRATEGIES",
    "get_finder",
    "distance",
    "shortest_distance",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "PointPathError",
    "InputError",
    "ConfigError",
    "DistanceOverflowError",
]
