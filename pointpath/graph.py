"""Undirected weighted graph shared by every path finder."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import InputError

if TYPE_CHECKING:  # pragma: no cover
    import networkx as nx

PointId = int


def _as_int(name: str, value: object) -> int:
    """Return ``value`` as a plain ``int``; numpy integers are accepted."""
    if isinstance(value, bool):
        raise InputError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InputError(f"{name} must be an integer, got {value!r}") from exc


@dataclass(frozen=True)
class Point:
    """A labeled location.

    Attributes:
        id: Unique identifier.
        x: Caller payload, never read by the finders.
        y: Caller payload, never read by the finders.
    """

    id: PointId
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", _as_int("Point.id", self.id))
        object.__setattr__(self, "x", _as_int("Point.x", self.x))
        object.__setattr__(self, "y", _as_int("Point.y", self.y))


@dataclass(frozen=True)
class Connection:
    """A weighted link from ``source`` to ``target``."""

    source: PointId
    target: PointId
    weight: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", _as_int("Connection.source", self.source))
        object.__setattr__(self, "target", _as_int("Connection.target", self.target))
        object.__setattr__(self, "weight", _as_int("Connection.weight", self.weight))

    def reversed(self) -> "Connection":
        """Return the mirrored connection with the same weight."""
        return Connection(self.target, self.source, self.weight)


@dataclass
class Graph:
    """Insert-only undirected graph stored as directed adjacency lists.

    Every call to :meth:`add_connection` stores the connection and its
    reverse, so ``adjacency`` is always symmetric. Connections may name
    identifiers that were never added as points.

    Attributes:
        points: Registered points keyed by identifier.
        adjacency: Outgoing connections keyed by identifier, in insertion order.
    """

    points: Dict[PointId, Point] = field(default_factory=dict)
    adjacency: Dict[PointId, List[Connection]] = field(default_factory=dict)

    def add_point(self, point: Point) -> None:
        """Insert ``point``, silently replacing any point with the same id."""
        if not isinstance(point, Point):
            raise InputError(f"expected a Point, got {point!r}")
        self.points[point.id] = point

    def add_connection(self, connection: Connection) -> None:
        """Insert ``connection`` and its reverse.

        Examples:
            ```python
            >>> g = Graph()
            >>> g.add_connection(Connection(1, 2, 7))
            >>> g.connections_from(2)
            (Connection(source=2, target=1, weight=7),)
            ```
        """
        if not isinstance(connection, Connection):
            raise InputError(f"expected a Connection, got {connection!r}")
        self.adjacency.setdefault(connection.source, []).append(connection)
        reverse = connection.reversed()
        self.adjacency.setdefault(reverse.source, []).append(reverse)

    @classmethod
    def from_connections(
        cls,
        points: Iterable[Point],
        connections: Iterable[Connection | Tuple[PointId, PointId, int]],
    ) -> "Graph":
        """Create a graph from points and ``Connection`` objects or ``(a, b, w)`` tuples."""
        g = cls()
        for p in points:
            g.add_point(p)
        for c in connections:
            if not isinstance(c, Connection):
                a, b, w = c
                c = Connection(a, b, w)
            g.add_connection(c)
        return g

    # ---------- read helpers ---------------------------------------------

    def has_point(self, point_id: PointId) -> bool:
        return point_id in self.points

    def connections_from(self, point_id: PointId) -> Tuple[Connection, ...]:
        """Return the outgoing connections of ``point_id`` (empty if none)."""
        return tuple(self.adjacency.get(point_id, ()))

    def out_degree(self, point_id: PointId) -> int:
        return len(self.adjacency.get(point_id, ()))

    def iter_connections(self) -> Iterator[Connection]:
        """Yield every stored directed entry, reverses included."""
        for conns in self.adjacency.values():
            yield from conns

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def connection_count(self) -> int:
        """Number of undirected connections inserted."""
        return sum(len(conns) for conns in self.adjacency.values()) // 2

    def __len__(self) -> int:
        return len(self.points)

    def __contains__(self, point_id: object) -> bool:
        return point_id in self.points

    def to_networkx(self) -> "nx.MultiGraph":
        """Return an undirected :class:`networkx.MultiGraph` copy.

        Points keep ``x``/``y`` as node attributes; every stored entry becomes
        an edge with a ``weight`` attribute. Parallel copies carry equal
        weights, so shortest distances are unchanged.
        """
        import networkx as nx

        G = nx.MultiGraph()
        for pid, p in self.points.items():
            G.add_node(pid, x=p.x, y=p.y)
        for c in self.iter_connections():
            G.add_edge(c.source, c.target, weight=c.weight)
        return G

    def distance(
        self,
        source_id: PointId,
        dest_id: PointId,
        strategy: str = "priority",
    ) -> int:
        """Shortest distance using the named strategy (see :mod:`pointpath.strategies`)."""
        from .strategies import distance

        return distance(self, source_id, dest_id, strategy=strategy)

    def lookup(
        self,
        source_id: PointId,
        dest_id: PointId,
        strategy: str = "priority",
    ) -> Optional[int]:
        """Like :meth:`distance` but ``None`` when unreachable."""
        from .strategies import shortest_distance

        return shortest_distance(self, source_id, dest_id, strategy=strategy)


__all__ = ["PointId", "Point", "Connection", "Graph"]
