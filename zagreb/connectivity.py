"""Vertex-connectivity checks, exact and approximate.

A graph on ``n`` vertices is *k-connected* when it stays connected after the
removal of any ``k - 1`` vertices (and ``k < n``). Two modes are offered:

* exact: every ``(k-1)``-subset of vertices is removed in turn and the
  remainder is tested for connectivity. The cost is ``C(n, k-1)`` traversals,
  which is only practical for small graphs (roughly ``n <= 50`` and small
  ``k``). Above ``max_subsets`` removals the check is delegated to the
  max-flow based :func:`networkx.node_connectivity`, which gives the same
  answer in polynomial time.
* approximate: ``min_degree >= k`` on a connected graph is reported as
  "likely k-connected". The minimum-degree bound is a necessary condition, so
  the approximation never rejects a k-connected graph but may accept graphs
  that have a cut of fewer than ``k`` vertices.
"""

from __future__ import annotations

import math
from itertools import combinations
from typing import List, Tuple

import networkx as nx

from .graph import Graph
from .invariants import is_connected, minimum_degree

DEFAULT_MAX_SUBSETS = 250_000


def _is_connected_without(H: nx.Graph, removed: Tuple[int, ...]) -> bool:
    view = nx.restricted_view(H, removed, [])
    return nx.is_connected(view)


def is_k_connected_exact(G: Graph, k: int, max_subsets: int = DEFAULT_MAX_SUBSETS) -> bool:
    """Return ``True`` when ``G`` is k-connected, by exhaustive vertex removal."""

    n = G.vertex_count()
    if k <= 0:
        return True
    if k >= n:
        return False
    # Deleting the neighbours of a vertex of degree d < k isolates it.
    if minimum_degree(G) < k:
        return False
    if k == 1:
        return is_connected(G)

    H = G.nx_view
    if math.comb(n, k - 1) > max_subsets:
        return nx.node_connectivity(H) >= k
    return all(_is_connected_without(H, removed) for removed in combinations(range(n), k - 1))


def is_k_connected_approx(G: Graph, k: int) -> bool:
    """Return ``True`` when ``G`` is *likely* k-connected (minimum-degree proxy)."""

    n = G.vertex_count()
    if k <= 0:
        return True
    if k >= n:
        return False
    if minimum_degree(G) < k:
        return False
    return is_connected(G)


def is_k_connected(
    G: Graph,
    k: int,
    *,
    exact: bool = False,
    max_subsets: int = DEFAULT_MAX_SUBSETS,
) -> bool:
    """Return whether ``G`` is k-connected using the requested mode."""

    if exact:
        return is_k_connected_exact(G, k, max_subsets=max_subsets)
    return is_k_connected_approx(G, k)


def vertex_connectivity(
    G: Graph,
    *,
    exact: bool = False,
    max_subsets: int = DEFAULT_MAX_SUBSETS,
) -> int:
    """Return the largest ``k`` for which :func:`is_k_connected` holds.

    k-connectivity is monotone in ``k`` and bounded by the minimum degree, so
    the search walks upwards from 1 and stops at the first failure.
    """

    n = G.vertex_count()
    if G.edge_count() == n * (n - 1) // 2:
        return n - 1
    kappa = 0
    for k in range(1, min(minimum_degree(G), n - 1) + 1):
        if not is_k_connected(G, k, exact=exact, max_subsets=max_subsets):
            break
        kappa = k
    return kappa


def connectivity_profile(
    G: Graph,
    max_k: int,
    *,
    exact: bool = False,
) -> List[Tuple[int, bool]]:
    """Return ``[(k, is_k_connected(G, k)), ...]`` for ``k = 1..max_k``."""

    return [(k, is_k_connected(G, k, exact=exact)) for k in range(1, max_k + 1)]


__all__ = [
    "DEFAULT_MAX_SUBSETS",
    "connectivity_profile",
    "is_k_connected",
    "is_k_connected_approx",
    "is_k_connected_exact",
    "vertex_connectivity",
]
