"""Micro-benchmark comparing the relaxation and priority finders.

Run this module as a script to time both strategies on random graphs and
check that they agree:

```bash
python -m pointpath.bench --trials 5 --sizes 200,800 500,2000
```
"""

from __future__ import annotations

import argparse
import random
import statistics
import time
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .exceptions import InputError
from .finder import FinderMetrics
from .generator import random_graph
from .priority import PriorityPathFinder
from .relaxation import RelaxationPathFinder


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    relaxation: FinderMetrics
    priority: FinderMetrics
    queries: int
    mismatches: int


def run_once(n: int, m: int, seed: int = 0, queries: int = 5) -> BenchResult:
    """Time both finders on one random graph.

    Args:
        n: Number of points.
        m: Number of undirected connections.
        seed: Seed for the graph and the sampled query pairs.
        queries: Number of random ``(source, dest)`` pairs to answer.

    Returns:
        Metrics of the last query per finder (with ``wall_ms`` summed over
        all queries) and the number of pairs on which they disagreed.
    """
    if n <= 0:
        raise InputError("benchmark graphs need at least one point.")
    gen = random_graph(n=n, m=m, seed=seed)
    G = gen.graph
    rnd = random.Random(seed)
    pairs = [(rnd.randrange(n), rnd.randrange(n)) for _ in range(queries)]

    relax = RelaxationPathFinder()
    prio = PriorityPathFinder()
    relax_ms = 0.0
    prio_ms = 0.0
    mismatches = 0
    for s, d in pairs:
        t0 = time.perf_counter()
        a = relax.distance(G, s, d)
        t1 = time.perf_counter()
        b = prio.distance(G, s, d)
        t2 = time.perf_counter()
        relax_ms += (t1 - t0) * 1000.0
        prio_ms += (t2 - t1) * 1000.0
        if a != b:
            mismatches += 1

    return BenchResult(
        relaxation=relax.metrics(wall_ms=relax_ms),
        priority=prio.metrics(wall_ms=prio_ms),
        queries=queries,
        mismatches=mismatches,
    )


def _p95(xs: List[float]) -> float:
    if len(xs) > 1:
        return statistics.quantiles(xs, n=100, method="inclusive")[94]
    return xs[0]


def main(argv: List[str] | None = None) -> int:
    """Run benchmarking trials and print a summary table.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per size")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["20,40", "50,120"],
        help="Size pairs as n,m (e.g. 200,800). Defaults to a small demo.",
    )
    parser.add_argument("--queries", type=int, default=5, help="Query pairs per trial")
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error("--trials must be >= 1")

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size specification '{spec}'")

    aggregates: Dict[Tuple[int, int], Dict[str, List[float]]] = {}
    total_mismatches = 0
    for n, m in sizes:
        agg: Dict[str, List[float]] = {"relax_ms": [], "prio_ms": [], "relax_edges": [], "prio_edges": []}
        for trial in range(args.trials):
            res = run_once(n, m, seed=args.seed_base + trial, queries=args.queries)
            agg["relax_ms"].append(res.relaxation.wall_ms)
            agg["prio_ms"].append(res.priority.wall_ms)
            agg["relax_edges"].append(res.relaxation.counters["edges_relaxed"])
            agg["prio_edges"].append(res.priority.counters["edges_relaxed"])
            total_mismatches += res.mismatches
        aggregates[(n, m)] = agg

    print(
        f"{'n':>6} {'m':>7} {'relax_edges':>12} {'prio_edges':>11}"
        f" {'relax_med':>10} {'relax_p95':>10} {'prio_med':>10} {'prio_p95':>10}"
    )
    for (n, m), agg in aggregates.items():
        print(
            f"{n:6d} {m:7d}"
            f" {int(statistics.median(agg['relax_edges'])):12d}"
            f" {int(statistics.median(agg['prio_edges'])):11d}"
            f" {statistics.median(agg['relax_ms']):10.2f} {_p95(agg['relax_ms']):10.2f}"
            f" {statistics.median(agg['prio_ms']):10.2f} {_p95(agg['prio_ms']):10.2f}"
        )
    if total_mismatches:
        print(f"WARNING: strategies disagreed on {total_mismatches} queries")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
