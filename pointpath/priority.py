"""Priority-queue frontier expansion finder (Dijkstra style)."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Dict, List, Tuple

from .arith import INFINITY, Distance, checked_add
from .finder import BaseFinder
from .graph import Graph, PointId


class PriorityPathFinder(BaseFinder):
    """Shortest distance by expanding a min-cost frontier.

    Both identifiers must be registered points; otherwise the sentinel is
    returned without searching. Weights are assumed nonnegative and are not
    checked. The whole reachable component is expanded; the search does not
    stop when the destination is popped.
    """

    name = "priority"
    _counter_names = ("edges_relaxed", "pops", "stale_pops", "max_frontier_size")

    def distance(self, graph: Graph, source_id: PointId, dest_id: PointId) -> Distance:
        self._begin(graph)
        if source_id not in graph.points or dest_id not in graph.points:
            self.logger.info("distance", source=source_id, dest=dest_id, result=INFINITY, unknown=True)
            return INFINITY

        overflow = self.cfg.overflow
        dist: Dict[PointId, Distance] = {source_id: 0}
        # (cost, seq, point); seq keeps ties in insertion order
        seq = count()
        pq: List[Tuple[Distance, int, PointId]] = [(0, next(seq), source_id)]
        max_frontier = 1

        while pq:
            max_frontier = max(max_frontier, len(pq))
            cost, _, position = heapq.heappop(pq)
            self.counters["pops"] += 1
            # lazy deletion
            if cost > dist[position]:
                self.counters["stale_pops"] += 1
                continue
            for conn in graph.adjacency.get(position, ()):
                self.counters["edges_relaxed"] += 1
                nd = checked_add(cost, conn.weight, overflow)
                if nd < dist.get(conn.target, INFINITY):
                    dist[conn.target] = nd
                    heapq.heappush(pq, (nd, next(seq), conn.target))

        self.counters["max_frontier_size"] = max_frontier
        result = dist.get(dest_id, INFINITY)
        self.logger.info(
            "distance",
            source=source_id,
            dest=dest_id,
            result=result,
            **self.counters,
        )
        return result


__all__ = ["PriorityPathFinder"]
