"""
Deterministic graph builders for tests, benchmarks and the CLI.

GRAPH FAMILIES
--------------
1. random
   Points ``0 .. n-1`` with random coordinates and ``m`` distinct undirected
   connections. ``connected=True`` first lays a chain backbone ``i -- i+1``
   so every point is reachable.

2. grid
   ``rows x cols`` lattice; a point's coordinates are its grid position and
   connections join horizontal and vertical neighbours.

3. chain
   A path ``0 -- 1 -- ... -- k`` with caller-supplied weights.

WEIGHT DISTRIBUTIONS
--------------------
- uniform: evenly distributed integer weights
- small_int: many equal or similar weights (stresses tie handling)
- log_uniform / exp: heavy-tailed distributions

All families produce nonnegative weights, so both finders must agree on them.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Literal, Optional, Set, Tuple

from .exceptions import InputError
from .graph import Connection, Graph, Point

WeightDist = Literal["uniform", "small_int", "log_uniform", "exp"]
WEIGHT_DISTS = ("uniform", "small_int", "log_uniform", "exp")


@dataclass(frozen=True)
class GeneratedGraph:
    graph: Graph
    n: int
    m: int
    metadata: Dict[str, object] = field(default_factory=dict)


def _sample_weight(rng: random.Random, dist: str, w_min: int, w_max: int) -> int:
    if w_min < 0:
        raise InputError("w_min must be >= 0 for generated graphs.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")

    if dist == "uniform":
        return rng.randint(w_min, w_max)

    if dist == "small_int":
        hi = min(w_max, w_min + 10)
        return rng.randint(w_min, hi)

    if dist == "log_uniform":
        # shift by one to avoid log(0)
        a = max(1, w_min + 1)
        b = max(a, w_max + 1)
        x = math.exp(rng.uniform(math.log(a), math.log(b)))
        return max(w_min, min(w_max, int(round(x - 1))))

    if dist == "exp":
        if w_max == w_min:
            return w_min
        lam = 1.0 / max(1.0, (w_max - w_min) / 4.0)
        x = rng.expovariate(lam)
        return int(w_min + min(w_max - w_min, round(x)))

    raise InputError(f"unknown weight distribution: {dist}")


def random_graph(
    *,
    n: int,
    m: Optional[int] = None,
    seed: Optional[int] = 0,
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    connected: bool = True,
    coord_range: int = 1000,
) -> GeneratedGraph:
    """Generate a random undirected graph on points ``0 .. n-1``.

    Args:
        n: Number of points (may be 0).
        m: Target number of distinct undirected connections, capped at
            ``n*(n-1)/2``. Defaults to ``2*n``.
        seed: Seed for :class:`random.Random`.
        weight_dist: One of :data:`WEIGHT_DISTS`.
        w_min: Smallest weight (nonnegative).
        w_max: Largest weight.
        connected: Add a chain backbone before sampling random connections.
        coord_range: Coordinates are drawn from ``[0, coord_range)``.

    Raises:
        InputError: For negative sizes or invalid weight bounds.
    """
    if n < 0:
        raise InputError("n must be >= 0.")
    if m is None:
        m = 2 * n
    if m < 0:
        raise InputError("m must be >= 0.")
    if weight_dist not in WEIGHT_DISTS:
        raise InputError(f"unknown weight distribution: {weight_dist}")
    if w_min < 0 or w_max < w_min:
        raise InputError(f"invalid weight bounds [{w_min}, {w_max}]")

    rng = random.Random(seed)
    g = Graph()
    for i in range(n):
        g.add_point(Point(i, rng.randrange(coord_range), rng.randrange(coord_range)))

    seen: Set[Tuple[int, int]] = set()

    def add(u: int, v: int) -> None:
        key = (min(u, v), max(u, v))
        if u == v or key in seen:
            return
        seen.add(key)
        g.add_connection(Connection(u, v, _sample_weight(rng, weight_dist, w_min, w_max)))

    if connected:
        for i in range(n - 1):
            add(i, i + 1)

    target = min(m, n * (n - 1) // 2)
    while len(seen) < target:
        add(rng.randrange(n), rng.randrange(n))

    return GeneratedGraph(
        graph=g,
        n=n,
        m=len(seen),
        metadata={
            "family": "random",
            "weight_dist": weight_dist,
            "w_min": w_min,
            "w_max": w_max,
            "seed": seed,
            "connected": connected,
        },
    )


def grid_graph(
    rows: int,
    cols: int,
    *,
    seed: Optional[int] = None,
    w_min: int = 1,
    w_max: int = 1,
) -> GeneratedGraph:
    """Build a ``rows x cols`` lattice with point id ``r * cols + c``.

    With the default ``w_min == w_max == 1`` the distance between two cells
    is their Manhattan distance.
    """
    if rows <= 0 or cols <= 0:
        raise InputError("grid_graph needs positive rows and cols.")
    if w_min < 0 or w_max < w_min:
        raise InputError(f"invalid weight bounds [{w_min}, {w_max}]")
    rng = random.Random(seed)
    g = Graph()
    idx = lambda r, c: r * cols + c
    for r in range(rows):
        for c in range(cols):
            g.add_point(Point(idx(r, c), c, r))
    m = 0
    for r in range(rows):
        for c in range(cols):
            if c + 1 < cols:
                g.add_connection(Connection(idx(r, c), idx(r, c + 1), rng.randint(w_min, w_max)))
                m += 1
            if r + 1 < rows:
                g.add_connection(Connection(idx(r, c), idx(r + 1, c), rng.randint(w_min, w_max)))
                m += 1
    return GeneratedGraph(
        graph=g,
        n=rows * cols,
        m=m,
        metadata={"family": "grid", "rows": rows, "cols": cols, "seed": seed},
    )


def chain_graph(weights: Iterable[int]) -> GeneratedGraph:
    """Build the path ``0 -- 1 -- ... -- k`` where edge ``i`` has ``weights[i]``."""
    ws = list(weights)
    g = Graph()
    for i in range(len(ws) + 1):
        g.add_point(Point(i, i, 0))
    for i, w in enumerate(ws):
        g.add_connection(Connection(i, i + 1, w))
    return GeneratedGraph(graph=g, n=len(ws) + 1, m=len(ws), metadata={"family": "chain"})


def scenario_graph() -> Graph:
    """Four points with a short detour: ``1-2-3-4`` costs 18, ``1-4`` costs 20."""
    return Graph.from_connections(
        [Point(1, 0, 0), Point(2, 1, 1), Point(3, 2, 2), Point(4, 3, 3)],
        [(1, 2, 5), (2, 3, 10), (3, 4, 3), (1, 4, 20)],
    )


__all__ = [
    "GeneratedGraph",
    "WEIGHT_DISTS",
    "random_graph",
    "grid_graph",
    "chain_graph",
    "scenario_graph",
]
