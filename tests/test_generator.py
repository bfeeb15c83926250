"""Tests for the graph builders."""

import pytest

from pointpath import InputError, RelaxationPathFinder
from pointpath.generator import WEIGHT_DISTS, chain_graph, grid_graph, random_graph


def test_random_graph_sizes():
    gen = random_graph(n=20, m=40, seed=1)
    assert gen.n == 20
    assert gen.m == 40
    assert gen.graph.point_count == 20
    assert gen.graph.connection_count == 40


def test_random_graph_is_deterministic():
    a = random_graph(n=15, m=30, seed=7).graph
    b = random_graph(n=15, m=30, seed=7).graph
    assert a == b


def test_random_graph_caps_connections():
    gen = random_graph(n=4, m=100, seed=0)
    assert gen.m == 6


def test_connected_backbone_reaches_every_point():
    g = random_graph(n=12, m=0, seed=2).graph
    finder = RelaxationPathFinder()
    assert all(finder.lookup(g, 0, d) is not None for d in g.points)


def test_empty_graph():
    gen = random_graph(n=0, seed=0)
    assert gen.graph.point_count == 0
    assert gen.m == 0


@pytest.mark.parametrize("weight_dist", WEIGHT_DISTS)
def test_weights_within_bounds(weight_dist):
    g = random_graph(n=30, m=80, seed=4, weight_dist=weight_dist, w_min=3, w_max=40).graph
    assert all(3 <= c.weight <= 40 for c in g.iter_connections())


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": -1},
        {"n": 5, "m": -1},
        {"n": 5, "w_min": -1},
        {"n": 5, "w_min": 10, "w_max": 2},
        {"n": 5, "weight_dist": "gaussian"},
    ],
)
def test_random_graph_rejects_bad_input(kwargs):
    with pytest.raises(InputError):
        random_graph(**kwargs)


def test_grid_coordinates():
    gen = grid_graph(2, 3)
    assert gen.n == 6
    assert gen.m == 7
    assert gen.graph.points[5].x == 2
    assert gen.graph.points[5].y == 1


def test_grid_rejects_empty():
    with pytest.raises(InputError):
        grid_graph(0, 3)


def test_chain_graph():
    g = chain_graph([1, 2, 3]).graph
    assert g.point_count == 4
    assert g.distance(0, 3) == 6
    assert g.distance(3, 1, strategy="relaxation") == 5
