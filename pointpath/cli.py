"""Command-line interface for running distance queries."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from typing import Any, Dict, List, Optional, Tuple

from .arith import as_optional
from .exceptions import ConfigError, DistanceOverflowError, InputError
from .finder import FinderConfig
from .generator import grid_graph, random_graph, scenario_graph
from .graph import Graph
from .logger import StdLogger
from .strategies import STRATEGIES, get_finder, resolve

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATA = 65
EXIT_INTERNAL = 70


def _parse_grid(spec: str) -> Tuple[int, int]:
    try:
        rows, cols = (int(x) for x in spec.split(","))
    except ValueError as exc:
        raise InputError(f"invalid --grid '{spec}' (expected ROWS,COLS)") from exc
    return rows, cols


def _build_graph(args: argparse.Namespace) -> Graph:
    if args.example:
        return scenario_graph()
    if args.grid is not None:
        rows, cols = _parse_grid(args.grid)
        return grid_graph(rows, cols, seed=args.seed, w_min=args.w_min, w_max=args.w_max).graph
    return random_graph(n=args.n, m=args.m, seed=args.seed, w_min=args.w_min, w_max=args.w_max).graph


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``pointpath`` command-line tool."""
    examples = (
        "Examples:\n"
        "  pointpath --example --source 1 --target 4\n"
        "  pointpath --random --n 100 --m 300 --source 0 --target 42 --strategy both\n"
        "  pointpath --grid 5,5 --w-max 1 --source 0 --target 24 --strategy bellman-ford\n"
    )
    p = argparse.ArgumentParser(
        prog="pointpath",
        description="Shortest distance between two points",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument("--grid", type=str, default=None, metavar="ROWS,COLS", help="Use a grid graph")
    src.add_argument("--example", action="store_true", help="Use the built-in four-point graph")

    p.add_argument("--n", type=int, default=10, help="Points (random mode)")
    p.add_argument("--m", type=int, default=20, help="Connections (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling graph generation")
    p.add_argument("--w-min", type=int, default=1, help="Smallest generated weight")
    p.add_argument("--w-max", type=int, default=100, help="Largest generated weight")

    p.add_argument("--source", type=int, default=None, help="Source point id")
    p.add_argument("--target", type=int, default=None, help="Destination point id")
    p.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES) + ["bellman-ford", "dijkstra", "both"],
        default="priority",
    )
    p.add_argument("--overflow", choices=["saturate", "raise"], default="saturate")

    args = p.parse_args(argv)

    try:
        cfg = FinderConfig(overflow=args.overflow, log_passes=args.log_level == "debug")
        G = _build_graph(args)

        ids = list(G.points)
        source = args.source if args.source is not None else (ids[0] if ids else 0)
        target = args.target if args.target is not None else (ids[-1] if ids else 0)

        stream = sys.stdout if args.log_json else sys.stderr
        level = "info" if args.log_json and args.log_level == "warning" else args.log_level
        logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)

        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: points={G.point_count} connections={G.connection_count} "
                f"strategy={args.strategy} overflow={args.overflow} seed={args.seed}\n"
            )

        names = sorted(STRATEGIES) if args.strategy == "both" else [resolve(args.strategy)]
        results: Dict[str, Dict[str, Any]] = {}
        for name in names:
            finder = get_finder(name, config=cfg, logger=logger)
            t0 = time.perf_counter()
            d = finder.distance(G, source, target)
            wall_ms = (time.perf_counter() - t0) * 1000.0
            results[name] = {
                "distance": as_optional(d),
                "wall_ms": round(wall_ms, 4),
                "counters": finder.summary(),
            }

        out: Dict[str, Any] = {
            "source": source,
            "target": target,
            "points": G.point_count,
            "connections": G.connection_count,
            "results": results,
        }
        if len(results) > 1:
            out["agree"] = len({r["distance"] for r in results.values()}) == 1

        if not args.log_json:
            print(json.dumps(out))
        else:
            logger.info("run", **out)
        return EXIT_OK

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_USAGE
    except DistanceOverflowError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_DATA
    except Exception as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
