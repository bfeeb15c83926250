"""Unit tests for :mod:`pointpath.graph`."""

import networkx as nx
import numpy as np
import pytest

from pointpath import Connection, Graph, InputError, Point


class TestPoint:
    def test_defaults(self):
        p = Point(3)
        assert (p.id, p.x, p.y) == (3, 0, 0)

    def test_rejects_non_integer_id(self):
        with pytest.raises(InputError):
            Point("a")

    def test_rejects_bool(self):
        with pytest.raises(InputError):
            Point(True)

    def test_negative_ids_and_coordinates_allowed(self):
        p = Point(-5, -1, -2)
        assert p.id == -5

    def test_numpy_integers_become_int(self):
        p = Point(np.int64(4), np.int32(1), np.int16(2))
        assert p == Point(4, 1, 2)
        assert type(p.id) is int
        assert type(p.x) is int

    def test_rejects_numpy_float(self):
        with pytest.raises(InputError):
            Point(np.float64(1.0))


class TestConnection:
    def test_reversed_keeps_weight(self):
        c = Connection(1, 2, 7)
        assert c.reversed() == Connection(2, 1, 7)

    def test_rejects_float_weight(self):
        with pytest.raises(InputError):
            Connection(1, 2, 1.5)

    def test_graph_from_numpy_arrays(self):
        ids = np.arange(3)
        weights = np.array([4, 6], dtype=np.int32)
        g = Graph.from_connections(
            [Point(i) for i in ids],
            [(ids[0], ids[1], weights[0]), (ids[1], ids[2], weights[1])],
        )
        assert all(type(pid) is int for pid in g.points)
        assert all(type(c.weight) is int for c in g.iter_connections())
        assert g.distance(0, 2, strategy="priority") == 10
        assert g.distance(0, 2, strategy="relaxation") == 10


class TestAddPoint:
    def test_overwrite_replaces_payload(self):
        g = Graph()
        g.add_point(Point(1, 0, 0))
        g.add_point(Point(1, 9, 9))
        assert len(g) == 1
        assert g.points[1] == Point(1, 9, 9)

    def test_rejects_non_point(self):
        with pytest.raises(InputError):
            Graph().add_point((1, 0, 0))


class TestAddConnection:
    def test_stores_both_directions(self):
        g = Graph()
        g.add_connection(Connection(1, 2, 10))
        assert g.connections_from(1) == (Connection(1, 2, 10),)
        assert g.connections_from(2) == (Connection(2, 1, 10),)

    def test_adjacency_stays_symmetric(self, four_points):
        entries = {(c.source, c.target, c.weight) for c in four_points.iter_connections()}
        assert entries == {(b, a, w) for a, b, w in entries}

    def test_unknown_endpoints_accepted(self):
        g = Graph()
        g.add_connection(Connection(5, 6, 1))
        assert g.point_count == 0
        assert g.out_degree(5) == 1
        assert 5 not in g

    def test_self_loop_stored_twice(self):
        g = Graph()
        g.add_connection(Connection(1, 1, 3))
        assert g.connections_from(1) == (Connection(1, 1, 3), Connection(1, 1, 3))

    def test_insertion_order_preserved(self):
        g = Graph()
        g.add_connection(Connection(1, 2, 1))
        g.add_connection(Connection(1, 3, 2))
        assert [c.target for c in g.connections_from(1)] == [2, 3]

    def test_rejects_tuple(self):
        with pytest.raises(InputError):
            Graph().add_connection((1, 2, 3))


class TestReadHelpers:
    def test_counts(self, four_points):
        assert four_points.point_count == 4
        assert four_points.connection_count == 4
        assert four_points.out_degree(1) == 2
        assert four_points.out_degree(99) == 0

    def test_connections_from_unknown_is_empty(self, single_point):
        assert single_point.connections_from(1) == ()

    def test_has_point(self, single_point):
        assert single_point.has_point(1)
        assert not single_point.has_point(2)

    def test_from_connections_accepts_objects_and_tuples(self):
        g = Graph.from_connections([Point(1), Point(2)], [Connection(1, 2, 3), (2, 1, 4)])
        assert g.connection_count == 2
        assert [c.weight for c in g.connections_from(1)] == [3, 4]

    def test_to_networkx(self, four_points):
        G = four_points.to_networkx()
        assert isinstance(G, nx.MultiGraph)
        assert set(G.nodes) == {1, 2, 3, 4}
        assert G.nodes[4] == {"x": 3, "y": 3}
        assert nx.dijkstra_path_length(G, 1, 4) == 18

    def test_to_networkx_includes_unregistered_endpoints(self):
        g = Graph()
        g.add_point(Point(1))
        g.add_connection(Connection(1, 2, 5))
        assert set(g.to_networkx().nodes) == {1, 2}

    def test_distance_convenience(self, four_points):
        assert four_points.distance(1, 4) == 18
        assert four_points.distance(1, 4, strategy="relaxation") == 18

    def test_lookup_convenience(self, split_graph):
        assert split_graph.lookup(1, 2) == 4
        assert split_graph.lookup(1, 3) is None
