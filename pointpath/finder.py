"""Configuration, metrics and the shared finder interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

from .arith import OVERFLOW_POLICIES, Distance, as_optional
from .exceptions import ConfigError
from .graph import Graph, PointId
from .logger import Logger, NoopLogger


@dataclass(frozen=True)
class FinderConfig:
    """Configuration knobs shared by all finders.

    Attributes:
        overflow: What to do when an accumulated distance falls below the
            32-bit range. ``"saturate"`` turns it into the infinity sentinel;
            ``"raise"`` raises
            :class:`~pointpath.exceptions.DistanceOverflowError`. Sums above
            the range saturate under both policies.
        log_passes: Emit a ``debug`` event per relaxation pass.
    """

    overflow: str = "saturate"
    log_passes: bool = False

    def __post_init__(self) -> None:
        if self.overflow not in OVERFLOW_POLICIES:
            raise ConfigError(
                f"unknown overflow policy '{self.overflow}' "
                f"(expected one of {', '.join(OVERFLOW_POLICIES)})"
            )


@dataclass(frozen=True)
class FinderMetrics:
    """Counters and timing collected from the most recent query."""

    points: int
    connections: int
    strategy: str
    counters: Dict[str, int]
    wall_ms: float


class BaseFinder(ABC):
    """Common pieces shared between the relaxation and priority finders.

    Subclasses implement :meth:`distance` and call :meth:`_begin` first so
    counters and graph sizes describe the query in progress.
    """

    name = "base"
    _counter_names: tuple = ("edges_relaxed",)

    def __init__(self, config: Optional[FinderConfig] = None, logger: Logger | None = None) -> None:
        self.cfg = config or FinderConfig()
        self.logger = (logger or NoopLogger()).bind(strategy=self.name)
        self.counters: Dict[str, int] = {}
        self._points = 0
        self._connections = 0
        self._reset()

    def _reset(self) -> None:
        self.counters = {k: 0 for k in self._counter_names}

    def _begin(self, graph: Graph) -> None:
        self._reset()
        self._points = graph.point_count
        self._connections = graph.connection_count

    @abstractmethod
    def distance(self, graph: Graph, source_id: PointId, dest_id: PointId) -> Distance:
        """Return the distance, or ``INFINITY`` when unreachable or unknown."""

    def lookup(self, graph: Graph, source_id: PointId, dest_id: PointId) -> Optional[Distance]:
        """Like :meth:`distance` but returns ``None`` instead of the sentinel."""
        return as_optional(self.distance(graph, source_id, dest_id))

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters from the most recent query."""
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> FinderMetrics:
        """Return metrics for the most recent query.

        Args:
            wall_ms: Wall-clock time the caller measured around the query.
        """
        return FinderMetrics(
            points=self._points,
            connections=self._connections,
            strategy=self.name,
            counters=self.summary(),
            wall_ms=wall_ms,
        )


__all__ = ["FinderConfig", "FinderMetrics", "BaseFinder"]
