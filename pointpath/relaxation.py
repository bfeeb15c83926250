"""Bounded edge-relaxation finder (Bellman-Ford style)."""

from __future__ import annotations

from typing import Dict

from .arith import INFINITY, Distance, checked_add
from .finder import BaseFinder
from .graph import Graph, PointId


class RelaxationPathFinder(BaseFinder):
    """Shortest distance by a fixed number of relaxation passes.

    Runs exactly ``N`` passes, ``N`` being the number of registered points,
    with no early stop and no negative-cycle detection. The answer is exact
    when ``N`` round-robin passes reach a fixpoint, which holds for graphs
    with nonnegative weights and no negative cycles.

    Neither identifier is validated: an unregistered source still starts at
    distance 0, so ``distance(g, s, s)`` is 0 for any ``s``. Only registered
    points are relaxed *from*; an identifier that appears solely as a
    connection endpoint can be reached but never propagates further.

    Examples:
        ```python
        >>> from pointpath.graph import Connection, Graph, Point
        >>> g = Graph.from_connections([Point(1), Point(2)], [Connection(1, 2, 10)])
        >>> RelaxationPathFinder().distance(g, 2, 1)
        10
        ```
    """

    name = "relaxation"
    _counter_names = ("edges_relaxed", "passes", "updates")

    def distance(self, graph: Graph, source_id: PointId, dest_id: PointId) -> Distance:
        self._begin(graph)
        overflow = self.cfg.overflow
        dist: Dict[PointId, Distance] = {source_id: 0}

        for pass_no in range(len(graph.points)):
            self.counters["passes"] += 1
            updated = 0
            for u in graph.points:
                if u not in dist:
                    continue
                for conn in graph.adjacency.get(u, ()):
                    self.counters["edges_relaxed"] += 1
                    # re-read: a self-loop may have lowered dist[u] in this loop
                    cand = checked_add(dist[u], conn.weight, overflow)
                    if cand < dist.get(conn.target, INFINITY):
                        dist[conn.target] = cand
                        updated += 1
            self.counters["updates"] += updated
            if self.cfg.log_passes:
                self.logger.debug("pass", index=pass_no, updates=updated, known=len(dist))

        result = dist.get(dest_id, INFINITY)
        self.logger.info(
            "distance",
            source=source_id,
            dest=dest_id,
            result=result,
            **self.counters,
        )
        return result


__all__ = ["RelaxationPathFinder"]
