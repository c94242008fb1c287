"""Insertion-only simple undirected graph over the vertices ``0..n-1``.

The store wraps a NetworkX graph so the analysis helpers can hand it to
NetworkX routines, while keeping the invariants the analyses rely on: the
vertex set is fixed at construction, edges are only ever added, and self-loops
or parallel edges are rejected with explicit exceptions instead of being
silently merged.
"""

from __future__ import annotations

from numbers import Integral
from typing import Iterable, List, Tuple

import networkx as nx


class GraphError(ValueError):
    """Base class for invalid graph construction or edge insertion."""


class InvalidSize(GraphError):
    """Raised when a graph is created with a non-positive vertex count."""


class VertexOutOfRange(GraphError):
    """Raised when a vertex index is outside ``0..n-1``."""


class SelfLoop(GraphError):
    """Raised when an edge would join a vertex to itself."""


class DuplicateEdge(GraphError):
    """Raised when an edge is inserted twice."""


Edge = Tuple[int, int]


class Graph:
    """Simple undirected graph with a fixed vertex count."""

    __slots__ = ("_graph", "_n_vertices", "_n_edges")

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, Integral) or n <= 0:
            raise InvalidSize(f"Vertex count must be a positive integer, got {n!r}")
        self._graph = nx.Graph()
        self._graph.add_nodes_from(range(n))
        self._n_vertices = int(n)
        self._n_edges = 0

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        """Build a graph with ``n`` vertices and insert every edge of ``edges``."""

        graph = cls(n)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":
        """Copy ``G`` into a store, relabelling its nodes to ``0..n-1``.

        Nodes are relabelled in sorted order when they are sortable, otherwise
        in insertion order. Self-loops of ``G`` are rejected.
        """

        if G.is_directed() or G.is_multigraph():
            raise GraphError("Only simple undirected graphs can be imported")
        try:
            relabelled = nx.convert_node_labels_to_integers(G, ordering="sorted")
        except TypeError:
            relabelled = nx.convert_node_labels_to_integers(G, ordering="default")
        return cls.from_edges(relabelled.number_of_nodes(), sorted(relabelled.edges()))

    @classmethod
    def from_graph6(cls, text: str) -> "Graph":
        """Decode a graph6 string (without header) into a store."""

        return cls.from_networkx(nx.from_graph6_bytes(text.strip().encode("ascii")))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, u: int, v: int) -> None:
        """Insert the undirected edge ``uv``.

        The store is left untouched when the insertion is rejected.
        """

        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise SelfLoop(f"Self-loops are not allowed (vertex {u})")
        if self._graph.has_edge(u, v):
            raise DuplicateEdge(f"Edge ({u}, {v}) already exists")
        self._graph.add_edge(u, v)
        self._n_edges += 1

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def vertex_count(self) -> int:
        return self._n_vertices

    def edge_count(self) -> int:
        return self._n_edges

    def degree(self, v: int) -> int:
        """Return the number of edges incident to ``v``."""

        self._check_vertex(v)
        return self._graph.degree(v)

    def degree_sequence(self) -> List[int]:
        """Return the degrees indexed by vertex."""

        return [self._graph.degree(v) for v in range(self._n_vertices)]

    def has_edge(self, u: int, v: int) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return self._graph.has_edge(u, v)

    def neighbors(self, v: int) -> List[int]:
        """Return the neighbours of ``v`` in increasing order."""

        self._check_vertex(v)
        return sorted(self._graph.neighbors(v))

    def edges(self) -> List[Edge]:
        """Return every edge as an ordered pair ``(u, v)`` with ``u < v``."""

        return sorted((min(u, v), max(u, v)) for u, v in self._graph.edges())

    def vertices(self) -> range:
        return range(self._n_vertices)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def copy(self) -> "Graph":
        return Graph.from_edges(self._n_vertices, self.edges())

    def to_networkx(self) -> nx.Graph:
        """Return an independent NetworkX copy of the graph."""

        return self._graph.copy()

    def to_graph6(self) -> str:
        return nx.to_graph6_bytes(self._graph, header=False).decode("ascii").strip()

    @property
    def nx_view(self) -> nx.Graph:
        """Read-only view of the underlying NetworkX graph."""

        return self._graph.copy(as_view=True)

    # ------------------------------------------------------------------

    def _check_vertex(self, v: int) -> None:
        if isinstance(v, bool) or not isinstance(v, Integral) or not 0 <= v < self._n_vertices:
            raise VertexOutOfRange(
                f"Vertex {v!r} is out of range for a graph with {self._n_vertices} vertices"
            )

    def __len__(self) -> int:
        return self._n_vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._n_vertices == other._n_vertices and self.edges() == other.edges()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Graph(n={self._n_vertices}, m={self._n_edges})"


__all__ = [
    "DuplicateEdge",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidSize",
    "SelfLoop",
    "VertexOutOfRange",
]
