"""Strategy registry and module-level query helpers."""

from __future__ import annotations

from typing import Dict, Optional, Type

from .arith import Distance
from .exceptions import ConfigError
from .finder import BaseFinder, FinderConfig
from .graph import Graph, PointId
from .logger import Logger
from .priority import PriorityPathFinder
from .relaxation import RelaxationPathFinder

STRATEGIES: Dict[str, Type[BaseFinder]] = {
    "relaxation": RelaxationPathFinder,
    "priority": PriorityPathFinder,
}

ALIASES: Dict[str, str] = {
    "bellman-ford": "relaxation",
    "dijkstra": "priority",
}


def resolve(name: str) -> str:
    """Return the canonical strategy name for ``name`` or an alias."""
    key = ALIASES.get(name, name)
    if key not in STRATEGIES:
        known = sorted(set(STRATEGIES) | set(ALIASES))
        raise ConfigError(f"unknown strategy '{name}' (expected one of {', '.join(known)})")
    return key


def get_finder(
    name: str,
    config: Optional[FinderConfig] = None,
    logger: Logger | None = None,
) -> BaseFinder:
    """Instantiate the finder registered under ``name``."""
    return STRATEGIES[resolve(name)](config=config, logger=logger)


def distance(
    graph: Graph,
    source_id: PointId,
    dest_id: PointId,
    strategy: str = "priority",
    config: Optional[FinderConfig] = None,
) -> Distance:
    """Shortest distance from ``source_id`` to ``dest_id``, or ``INFINITY``."""
    return get_finder(strategy, config=config).distance(graph, source_id, dest_id)


def shortest_distance(
    graph: Graph,
    source_id: PointId,
    dest_id: PointId,
    strategy: str = "priority",
    config: Optional[FinderConfig] = None,
) -> Optional[Distance]:
    """Shortest distance, or ``None`` when unreachable or unknown."""
    return get_finder(strategy, config=config).lookup(graph, source_id, dest_id)


__all__ = ["STRATEGIES", "ALIASES", "resolve", "get_finder", "distance", "shortest_distance"]
