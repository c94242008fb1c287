"""Deterministic graph families and randomized network topologies.

Deterministic builders insert a fixed edge set and surface the usual
:class:`~zagreb.graph.Graph` errors when misused (``cycle_graph(2)`` would add
the same edge twice, ``cycle_graph(1)`` a self-loop).

Randomized builders take a ``seed`` that may be ``None``, an ``int`` or a
``random.Random`` instance (resolved with
:func:`networkx.utils.create_py_random_state`). Equal integer seeds reproduce
the same topology; calls with fresh random sources produce structurally
different graphs, so unseeded calls are only meant for interactive use.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

import networkx as nx
from networkx.utils import create_py_random_state

from .graph import Edge, Graph, InvalidSize

PETERSEN_EDGES: Tuple[Edge, ...] = (
    # outer pentagon
    (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
    # spokes
    (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
    # inner pentagram
    (5, 7), (7, 9), (9, 6), (6, 8), (8, 5),
)


# ---------------------------------------------------------------------------
# Deterministic families
# ---------------------------------------------------------------------------


def complete_graph(n: int) -> Graph:
    """Return ``K_n``."""

    graph = Graph(n)
    for u in range(n):
        for v in range(u + 1, n):
            graph.add_edge(u, v)
    return graph


def cycle_graph(n: int) -> Graph:
    """Return ``C_n``; requires ``n >= 3``."""

    graph = Graph(n)
    for u in range(n):
        graph.add_edge(u, (u + 1) % n)
    return graph


def path_graph(n: int) -> Graph:
    graph = Graph(n)
    for u in range(n - 1):
        graph.add_edge(u, u + 1)
    return graph


def star_graph(n: int) -> Graph:
    """Return ``K_{1,n-1}`` centred on vertex ``0``."""

    graph = Graph(n)
    for leaf in range(1, n):
        graph.add_edge(0, leaf)
    return graph


def petersen_graph() -> Graph:
    return Graph.from_edges(10, PETERSEN_EDGES)


def complete_bipartite_graph(m: int, n: int) -> Graph:
    """Return ``K_{m,n}`` with parts ``0..m-1`` and ``m..m+n-1``."""

    if m < 1 or n < 1:
        raise InvalidSize(f"Both parts of K_(m,n) need at least one vertex, got m={m}, n={n}")
    graph = Graph(m + n)
    for u in range(m):
        for v in range(m, m + n):
            graph.add_edge(u, v)
    return graph


def residue_graph(n: int, density_factor: int) -> Graph:
    """Return the graph joining ``i < j`` whenever ``(i + j) % density_factor == 0``.

    Larger factors give sparser graphs; used as a reproducible benchmark input.
    """

    if density_factor < 1:
        raise ValueError(f"density_factor must be positive, got {density_factor}")
    graph = Graph(n)
    for u in range(n):
        for v in range(u + 1, n):
            if (u + v) % density_factor == 0:
                graph.add_edge(u, v)
    return graph


def tetrahedral_graph() -> Graph:
    return Graph.from_networkx(nx.tetrahedral_graph())


def cubical_graph() -> Graph:
    return Graph.from_networkx(nx.cubical_graph())


def octahedral_graph() -> Graph:
    return Graph.from_networkx(nx.octahedral_graph())


def dodecahedral_graph() -> Graph:
    return Graph.from_networkx(nx.dodecahedral_graph())


def icosahedral_graph() -> Graph:
    return Graph.from_networkx(nx.icosahedral_graph())


PLATONIC_SOLIDS: Dict[str, Callable[[], Graph]] = {
    "tetrahedron": tetrahedral_graph,
    "cube": cubical_graph,
    "octahedron": octahedral_graph,
    "dodecahedron": dodecahedral_graph,
    "icosahedron": icosahedral_graph,
}


# ---------------------------------------------------------------------------
# Randomized topologies
# ---------------------------------------------------------------------------


def _check_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must lie in [0, 1], got {value}")


def barabasi_albert_graph(n: int, m: int = 2, *, seed=None) -> Graph:
    """Return a scale-free graph grown by preferential attachment.

    The process starts from ``K_{m+1}`` (a triangle for the default ``m=2``);
    each later vertex attaches to ``m`` distinct earlier vertices chosen with
    probability proportional to their current degree.
    """

    if m < 1:
        raise ValueError(f"m must be at least 1, got {m}")
    if n < m + 1:
        raise InvalidSize(f"Preferential attachment with m={m} needs at least {m + 1} vertices, got {n}")
    rng = create_py_random_state(seed)
    grown = nx.barabasi_albert_graph(n, m, seed=rng, initial_graph=nx.complete_graph(m + 1))
    return Graph.from_networkx(grown)


def gossip_network(
    n: int,
    p: float,
    *,
    coordinator_fraction: float = 0.1,
    coordinator_p: float = 0.7,
    seed=None,
) -> Graph:
    """Return a gossip-style overlay.

    A base cycle guarantees connectivity, every non-adjacent pair receives a
    long-range link with probability ``p``, and ``max(1, n * coordinator_fraction)``
    distinct coordinator vertices are linked to each other vertex with
    probability ``coordinator_p``.
    """

    if n < 3:
        raise InvalidSize(f"A gossip network needs at least 3 vertices, got {n}")
    _check_probability("p", p)
    _check_probability("coordinator_fraction", coordinator_fraction)
    _check_probability("coordinator_p", coordinator_p)
    rng = create_py_random_state(seed)

    graph = cycle_graph(n)
    for u, v in nx.gnp_random_graph(n, p, seed=rng).edges():
        if not graph.has_edge(u, v):
            graph.add_edge(u, v)

    coordinator_count = max(1, int(n * coordinator_fraction))
    coordinators = rng.sample(range(n), coordinator_count)
    for coordinator in coordinators:
        for v in range(n):
            if v == coordinator or graph.has_edge(coordinator, v):
                continue
            if rng.random() < coordinator_p:
                graph.add_edge(coordinator, v)
    return graph


def shard_ranges(n: int, num_shards: int) -> List[range]:
    """Split ``0..n-1`` into ``num_shards`` contiguous, near-equal ranges."""

    base, remainder = divmod(n, num_shards)
    ranges: List[range] = []
    start = 0
    for index in range(num_shards):
        size = base + (1 if index < remainder else 0)
        ranges.append(range(start, start + size))
        start += size
    return ranges


def sharded_network(
    n: int,
    num_shards: int,
    intra_p: float,
    inter_p: float,
    *,
    seed=None,
) -> Graph:
    """Return a sharded topology that is connected whatever the random draws.

    Vertex pairs inside a shard are linked with probability ``intra_p`` and
    pairs across shards with probability ``inter_p``. A final pass chains the
    components of every shard together and then links the last vertex of each
    shard to the first vertex of the next one.
    """

    if num_shards < 1:
        raise ValueError(f"num_shards must be at least 1, got {num_shards}")
    if n < num_shards:
        raise InvalidSize(f"{num_shards} shards need at least {num_shards} vertices, got {n}")
    _check_probability("intra_p", intra_p)
    _check_probability("inter_p", inter_p)
    rng = create_py_random_state(seed)

    graph = Graph(n)
    shards = shard_ranges(n, num_shards)

    for shard in shards:
        local = nx.gnp_random_graph(len(shard), intra_p, seed=rng)
        for u, v in local.edges():
            graph.add_edge(shard[u], shard[v])

    for index, shard_a in enumerate(shards):
        for shard_b in shards[index + 1:]:
            # Nodes 0..len(shard_a)-1 form the first side of the bipartite draw.
            cross = nx.bipartite.random_graph(len(shard_a), len(shard_b), inter_p, seed=rng)
            offset = len(shard_a)
            for u, v in cross.edges():
                if u > v:
                    u, v = v, u
                graph.add_edge(shard_a[u], shard_b[v - offset])

    _connect_shards(graph, shards)
    return graph


def _connect_shards(graph: Graph, shards: List[range]) -> None:
    view = graph.nx_view
    for shard in shards:
        components = sorted(
            (min(component) for component in nx.connected_components(view.subgraph(shard))),
        )
        # Representatives of distinct components are never adjacent.
        for previous, current in zip(components, components[1:]):
            graph.add_edge(previous, current)

    for shard_a, shard_b in zip(shards, shards[1:]):
        boundary = (shard_a[-1], shard_b[0])
        if not graph.has_edge(*boundary):
            graph.add_edge(*boundary)


# ---------------------------------------------------------------------------
# Family registry
# ---------------------------------------------------------------------------

RANDOM_FAMILIES = ("scale-free", "gossip", "sharded")


def build_family(
    name: str,
    *,
    n: int = 10,
    m: int = 3,
    p: float = 0.3,
    attachment: int = 2,
    shards: int = 3,
    intra_p: float = 0.7,
    inter_p: float = 0.2,
    density_factor: int = 3,
    seed: Optional[int] = None,
) -> Graph:
    """Build the graph family ``name`` from the keyword parameters it uses.

    ``n`` is the vertex count (the second part size for ``bipartite``); ``m``
    the first part size of ``bipartite``; ``attachment`` the edges added per
    vertex by ``scale-free``.
    """

    generators: Dict[str, Callable[[], Graph]] = {
        "complete": lambda: complete_graph(n),
        "cycle": lambda: cycle_graph(n),
        "path": lambda: path_graph(n),
        "star": lambda: star_graph(n),
        "petersen": petersen_graph,
        "bipartite": lambda: complete_bipartite_graph(m, n),
        "residue": lambda: residue_graph(n, density_factor),
        "scale-free": lambda: barabasi_albert_graph(n, attachment, seed=seed),
        "gossip": lambda: gossip_network(n, p, seed=seed),
        "sharded": lambda: sharded_network(n, shards, intra_p, inter_p, seed=seed),
    }
    generators.update(PLATONIC_SOLIDS)
    try:
        builder = generators[name]
    except KeyError as exc:
        raise KeyError(f"Unknown graph family '{name}'") from exc
    return builder()


FAMILY_NAMES: Tuple[str, ...] = (
    "complete",
    "cycle",
    "path",
    "star",
    "petersen",
    "bipartite",
    "residue",
    *PLATONIC_SOLIDS,
    *RANDOM_FAMILIES,
)


__all__ = [
    "FAMILY_NAMES",
    "PETERSEN_EDGES",
    "PLATONIC_SOLIDS",
    "RANDOM_FAMILIES",
    "barabasi_albert_graph",
    "build_family",
    "complete_bipartite_graph",
    "complete_graph",
    "cubical_graph",
    "cycle_graph",
    "dodecahedral_graph",
    "gossip_network",
    "icosahedral_graph",
    "octahedral_graph",
    "path_graph",
    "petersen_graph",
    "residue_graph",
    "shard_ranges",
    "sharded_network",
    "star_graph",
    "tetrahedral_graph",
]
