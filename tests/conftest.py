"""
Pytest configuration and shared fixtures.

Provides the small hand-built graphs used across the test modules and a
parametrized ``finder`` fixture so property tests run against both
strategies.
"""

import pytest

from pointpath import Connection, Graph, Point, PriorityPathFinder, RelaxationPathFinder
from pointpath.generator import scenario_graph


@pytest.fixture
def single_point() -> Graph:
    """One point, no connections."""
    g = Graph()
    g.add_point(Point(1, 0, 0))
    return g


@pytest.fixture
def two_points() -> Graph:
    """Points 1 and 2 joined by a connection of weight 10."""
    g = Graph()
    g.add_point(Point(1, 0, 0))
    g.add_point(Point(2, 1, 1))
    g.add_connection(Connection(1, 2, 10))
    return g


@pytest.fixture
def four_points() -> Graph:
    """1-2 (5), 2-3 (10), 3-4 (3), 1-4 (20)."""
    return scenario_graph()


@pytest.fixture
def split_graph() -> Graph:
    """Two components: {1, 2} and {3, 4}."""
    return Graph.from_connections(
        [Point(i) for i in (1, 2, 3, 4)],
        [(1, 2, 4), (3, 4, 6)],
    )


@pytest.fixture(params=[RelaxationPathFinder, PriorityPathFinder], ids=["relaxation", "priority"])
def finder(request):
    """A fresh finder of each strategy."""
    return request.param()
