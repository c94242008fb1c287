"""Degree-based invariants and structural predicates for :class:`Graph`.

The module gathers the Zagreb-index computations together with a handful of
helpers used by the Hamiltonicity classifiers: recognising well-known
families (complete graphs, cycles, paths, stars, the Petersen graph), a greedy
approximation of the independence number and the Theorem 3 upper bound on the
first Zagreb index. Every routine here is polynomial; the combinatorial
connectivity checks live in :mod:`zagreb.connectivity`.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import networkx as nx

from .graph import Graph


# Degree and index calculator


def first_zagreb_index(G: Graph) -> int:
    """Return ``Z1(G)``, the sum of the squared vertex degrees."""

    return sum(degree * degree for degree in G.degree_sequence())


def minimum_degree(G: Graph) -> int:
    """Return the minimum vertex degree of ``G``."""

    return min(G.degree_sequence())


def maximum_degree(G: Graph) -> int:
    """Return the maximum vertex degree of ``G``."""

    return max(G.degree_sequence())


# Short names matching the analysis snapshot fields.
min_degree = minimum_degree
max_degree = maximum_degree


def average_degree(G: Graph) -> float:
    return 2 * G.edge_count() / G.vertex_count()


# Property predicates


def is_connected(G: Graph) -> bool:
    """Return ``True`` when every vertex is reachable from vertex ``0``."""

    return nx.is_connected(G.nx_view)


def is_complete(G: Graph) -> bool:
    """Return ``True`` when every pair of vertices is adjacent."""

    n = G.vertex_count()
    return G.edge_count() == n * (n - 1) // 2


def is_regular(G: Graph) -> bool:
    return minimum_degree(G) == maximum_degree(G)


def is_cycle(G: Graph) -> bool:
    """Return ``True`` when ``G`` is a single cycle through every vertex."""

    n = G.vertex_count()
    if n < 3 or G.edge_count() != n:
        return False
    # 2-regular graphs are disjoint unions of cycles.
    return minimum_degree(G) == 2 and maximum_degree(G) == 2 and is_connected(G)


def is_path(G: Graph) -> bool:
    """Return ``True`` when ``G`` is a simple path through every vertex."""

    n = G.vertex_count()
    if n == 1:
        return True
    if G.edge_count() != n - 1:
        return False
    degrees = G.degree_sequence()
    if degrees.count(1) != 2 or degrees.count(2) != n - 2:
        return False
    # n-1 edges with these degrees may still be a path plus disjoint cycles.
    return is_connected(G)


def is_star(G: Graph) -> bool:
    """Return ``True`` when ``G`` is ``K_{1,n-1}`` with ``n >= 2``."""

    n = G.vertex_count()
    if n < 2:
        return False
    degrees = G.degree_sequence()
    if n == 2:
        return G.edge_count() == 1
    return degrees.count(n - 1) == 1 and degrees.count(1) == n - 1


def is_petersen(G: Graph) -> bool:
    """Return ``True`` when ``G`` is isomorphic to the Petersen graph.

    The Petersen graph is the unique cubic graph on 10 vertices with girth 5,
    so the test only checks the order, 3-regularity and the absence of
    triangles and 4-cycles.
    """

    if G.vertex_count() != 10 or G.edge_count() != 15:
        return False
    if not (minimum_degree(G) == 3 and maximum_degree(G) == 3):
        return False
    for u in G.vertices():
        neighbours = set(G.neighbors(u))
        for v in neighbours:
            # A shared neighbour closes a triangle (w adjacent to u) or a square.
            for w in G.neighbors(v):
                if w == u:
                    continue
                if w in neighbours:
                    return False
                if any(x != v and x in neighbours for x in G.neighbors(w)):
                    return False
    return True


def complete_bipartite_parts(G: Graph) -> Optional[Tuple[int, int]]:
    """Return the part sizes (smaller first) when ``G`` is some ``K_{a,b}``, else ``None``."""

    if G.vertex_count() < 2 or not is_connected(G):
        return None
    view = G.nx_view
    if not nx.is_bipartite(view):
        return None
    top, bottom = nx.bipartite.sets(view)
    a, b = sorted((len(top), len(bottom)))
    # A connected bipartite graph with a * b edges has every cross edge.
    if G.edge_count() != a * b:
        return None
    return a, b


# Independence number


def greedy_independent_set(G: Graph) -> List[int]:
    """Return an independent set built by the minimum-degree greedy rule.

    At every step the remaining vertex with the fewest remaining neighbours is
    selected (ties go to the lowest index), then it and its neighbours leave
    the candidate pool. The result is maximal but not necessarily maximum.
    """

    remaining = set(G.vertices())
    chosen: List[int] = []
    while remaining:
        vertex = min(
            remaining,
            key=lambda v: (sum(1 for u in G.neighbors(v) if u in remaining), v),
        )
        chosen.append(vertex)
        remaining.discard(vertex)
        remaining.difference_update(G.neighbors(vertex))
    return sorted(chosen)


def independence_number_approx(G: Graph) -> int:
    """Return the size of the greedy independent set (a lower bound on alpha)."""

    return len(greedy_independent_set(G))


# Zagreb bounds


def zagreb_upper_bound(G: Graph) -> float:
    """Return the Theorem 3 upper bound on ``Z1(G)``.

    ``(n - beta) * Delta^2 + e^2 / beta + (sqrt(n - beta) - sqrt(delta))^2 * e``
    where ``beta`` is the greedy independence number, ``e`` the edge count and
    ``delta``/``Delta`` the minimum and maximum degree.
    """

    n = G.vertex_count()
    e = G.edge_count()
    beta = independence_number_approx(G)
    delta = minimum_degree(G)
    delta_max = maximum_degree(G)

    spread = math.sqrt(n - beta) - math.sqrt(delta)
    return (n - beta) * delta_max ** 2 + e ** 2 / beta + spread ** 2 * e


def zagreb_efficiency(G: Graph) -> float:
    """Return ``Z1(G)`` as a fraction of :func:`zagreb_upper_bound`."""

    bound = zagreb_upper_bound(G)
    if bound == 0:
        return 0.0
    return first_zagreb_index(G) / bound


def low_connectivity_vertices(G: Graph, slack: int = 1) -> List[int]:
    """Return the vertices whose degree is at most ``min_degree + slack``."""

    if slack < 0:
        raise ValueError(f"slack must be non-negative, got {slack}")
    threshold = minimum_degree(G) + slack
    return [v for v, degree in enumerate(G.degree_sequence()) if degree <= threshold]


# Mapping invariant names to implementation functions
invariants_functions = {
    "order": lambda G: G.vertex_count(),
    "size": lambda G: G.edge_count(),
    "zagreb_index": first_zagreb_index,
    "minimum_degree": minimum_degree,
    "maximum_degree": maximum_degree,
    "average_degree": average_degree,
    "independence_number_approx": independence_number_approx,
    "zagreb_upper_bound": zagreb_upper_bound,
    "zagreb_efficiency": zagreb_efficiency,
}

# Mapping names of boolean properties to predicate functions
binary_properties_functions = {
    "connected": is_connected,
    "complete": is_complete,
    "regular": is_regular,
    "cycle": is_cycle,
    "path": is_path,
    "star": is_star,
    "petersen": is_petersen,
    "complete_bipartite": lambda G: complete_bipartite_parts(G) is not None,
}


def lookup_invariant(name: str):
    try:
        return invariants_functions[name]
    except KeyError as exc:
        raise KeyError(f"Unknown invariant '{name}'") from exc


__all__ = [
    "average_degree",
    "binary_properties_functions",
    "complete_bipartite_parts",
    "first_zagreb_index",
    "greedy_independent_set",
    "independence_number_approx",
    "invariants_functions",
    "is_complete",
    "is_connected",
    "is_cycle",
    "is_path",
    "is_petersen",
    "is_regular",
    "is_star",
    "lookup_invariant",
    "low_connectivity_vertices",
    "max_degree",
    "maximum_degree",
    "min_degree",
    "minimum_degree",
    "zagreb_efficiency",
    "zagreb_upper_bound",
]
