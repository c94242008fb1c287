"""Zagreb-index sufficient conditions for Hamiltonian and traceable graphs.

Both classifiers are one-sided. ``True`` means the graph satisfies a
condition that guarantees the property (a known family, Dirac's bound or the
Zagreb-index inequality of Theorem 1 / Theorem 2 applied with the graph's
vertex connectivity). ``False`` is inconclusive: the graph may still be
Hamiltonian or traceable.

Theorem 1: a k-connected graph (``k >= 2``) with ``n`` vertices, ``e`` edges,
minimum degree ``delta`` and maximum degree ``Delta`` is Hamiltonian when

    Z1 >= (n - k - 1) Delta^2 + e^2 / (k + 1) + (sqrt(n - k - 1) - sqrt(delta))^2 e

unless it is ``K_{k,k+1}``, which meets the bound with equality.

Theorem 2: a k-connected graph (``k >= 1``, ``n >= 9``) is traceable when

    Z1 >= (n - k - 2) Delta^2 + e^2 / (k + 2) + (sqrt(n - k - 2) - sqrt(delta))^2 e

unless it is ``K_{k,k+2}``.

Both extremal graphs belong to a wider rule checked before either inequality:
a complete bipartite graph with unequal parts has no Hamiltonian cycle, and
one whose parts differ by two or more has no Hamiltonian path.
"""

from __future__ import annotations

import math
from typing import Optional

from .connectivity import DEFAULT_MAX_SUBSETS, vertex_connectivity
from .graph import Graph
from .invariants import (
    complete_bipartite_parts,
    first_zagreb_index,
    is_complete,
    is_cycle,
    is_path,
    is_petersen,
    is_star,
    maximum_degree,
    minimum_degree,
)

TRACEABLE_MIN_ORDER = 9


def _zagreb_threshold(G: Graph, slack: int, divisor: int) -> float:
    e = G.edge_count()
    delta = minimum_degree(G)
    delta_max = maximum_degree(G)
    slack = max(0, slack)
    spread = math.sqrt(slack) - math.sqrt(delta)
    return slack * delta_max ** 2 + e ** 2 / divisor + spread ** 2 * e


def hamiltonian_threshold(G: Graph, k: int) -> float:
    """Return the right-hand side of the Theorem 1 inequality for ``k``.

    The value is not monotone in ``k``: the spread term grows again once
    ``n - k - 1`` drops below ``delta``.
    """

    return _zagreb_threshold(G, G.vertex_count() - k - 1, k + 1)


def traceable_threshold(G: Graph, k: int) -> float:
    """Return the right-hand side of the Theorem 2 inequality for ``k``."""

    return _zagreb_threshold(G, G.vertex_count() - k - 2, k + 2)


def _bipartite_imbalance(G: Graph) -> Optional[int]:
    parts = complete_bipartite_parts(G)
    if parts is None:
        return None
    small, large = parts
    return large - small


def is_likely_hamiltonian(
    G: Graph,
    *,
    exact: bool = False,
    max_subsets: int = DEFAULT_MAX_SUBSETS,
    connectivity: Optional[int] = None,
) -> bool:
    """Return ``True`` when ``G`` is guaranteed Hamiltonian by a sufficient condition.

    ``exact`` selects how the vertex connectivity fed to Theorem 1 is computed
    (see :func:`zagreb.connectivity.vertex_connectivity`). Callers that already
    know it may pass it as ``connectivity`` so it is not recomputed.
    """

    n = G.vertex_count()
    if n < 3:
        return False

    if is_complete(G) or is_cycle(G):
        return True
    if is_star(G) or is_petersen(G):
        return False
    imbalance = _bipartite_imbalance(G)
    if imbalance is not None and imbalance > 0:
        return False

    kappa = connectivity
    if kappa is None:
        kappa = vertex_connectivity(G, exact=exact, max_subsets=max_subsets)
    if kappa < 2:
        return False

    # Dirac
    if 2 * minimum_degree(G) >= n:
        return True

    return first_zagreb_index(G) >= hamiltonian_threshold(G, kappa)


def is_likely_traceable(
    G: Graph,
    *,
    exact: bool = False,
    max_subsets: int = DEFAULT_MAX_SUBSETS,
    connectivity: Optional[int] = None,
) -> bool:
    """Return ``True`` when ``G`` is guaranteed traceable by a sufficient condition.

    Every graph accepted by :func:`is_likely_hamiltonian` is accepted here.
    """

    n = G.vertex_count()
    if n < 2:
        return False

    kappa = connectivity
    if kappa is None:
        kappa = vertex_connectivity(G, exact=exact, max_subsets=max_subsets)

    if is_likely_hamiltonian(G, exact=exact, max_subsets=max_subsets, connectivity=kappa):
        return True
    # Stars on three or fewer vertices are paths.
    if is_complete(G) or is_path(G) or is_petersen(G):
        return True
    imbalance = _bipartite_imbalance(G)
    if imbalance is not None and imbalance > 1:
        return False

    if kappa < 1:
        return False

    if 2 * minimum_degree(G) >= n - 1:
        return True
    if n < TRACEABLE_MIN_ORDER:
        return False

    return first_zagreb_index(G) >= traceable_threshold(G, kappa)


__all__ = [
    "TRACEABLE_MIN_ORDER",
    "hamiltonian_threshold",
    "is_likely_hamiltonian",
    "is_likely_traceable",
    "traceable_threshold",
]
