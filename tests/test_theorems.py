import math

import networkx as nx
import pytest

from zagreb import Graph
from zagreb.generators import (
    build_family,
    complete_bipartite_graph,
    complete_graph,
    cycle_graph,
    path_graph,
    petersen_graph,
    star_graph,
)
from zagreb.invariants import first_zagreb_index
from zagreb.theorems import (
    hamiltonian_threshold,
    is_likely_hamiltonian,
    is_likely_traceable,
    traceable_threshold,
)


def two_cliques_sharing_a_vertex():
    edges = [(u, v) for u in range(4) for v in range(u + 1, 4)]
    edges += [(u, v) for u in range(3, 7) for v in range(u + 1, 7)]
    return Graph.from_edges(7, edges)


@pytest.mark.parametrize("n", [3, 4, 7, 12])
def test_complete_graphs_are_hamiltonian(n):
    assert is_likely_hamiltonian(complete_graph(n))
    assert is_likely_traceable(complete_graph(n))


@pytest.mark.parametrize("n", [3, 5, 10, 20])
def test_cycles_are_hamiltonian(n):
    assert is_likely_hamiltonian(cycle_graph(n))
    assert is_likely_traceable(cycle_graph(n))


def test_three_vertex_star_is_a_traceable_path():
    assert not is_likely_hamiltonian(star_graph(3))
    assert is_likely_traceable(star_graph(3))


@pytest.mark.parametrize("n", [4, 5, 10, 15])
@pytest.mark.parametrize("exact", [True, False])
def test_stars_with_three_or_more_leaves_are_rejected(n, exact):
    assert not is_likely_hamiltonian(star_graph(n), exact=exact)
    assert not is_likely_traceable(star_graph(n), exact=exact)


@pytest.mark.parametrize("n", [2, 4, 9, 15])
def test_paths_are_traceable(n):
    assert not is_likely_hamiltonian(path_graph(n))
    assert is_likely_traceable(path_graph(n))


@pytest.mark.parametrize("exact", [True, False])
def test_petersen_graph(exact):
    graph = petersen_graph()
    assert not is_likely_hamiltonian(graph, exact=exact)
    assert is_likely_traceable(graph, exact=exact)


def test_tiny_graphs():
    assert not is_likely_hamiltonian(Graph(1))
    assert not is_likely_traceable(Graph(1))
    assert not is_likely_hamiltonian(complete_graph(2))
    assert is_likely_traceable(complete_graph(2))
    assert not is_likely_traceable(Graph(2))


@pytest.mark.parametrize("exact", [True, False])
def test_disconnected_graphs_are_rejected(exact):
    graph = Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
    assert not is_likely_hamiltonian(graph, exact=exact)
    assert not is_likely_traceable(graph, exact=exact)


@pytest.mark.parametrize("k", range(2, 8))
def test_near_balanced_bipartite_graphs_are_not_hamiltonian(k):
    # K_(k,k+1) meets the Theorem 1 bound with equality.
    graph = complete_bipartite_graph(k, k + 1)
    assert first_zagreb_index(graph) == pytest.approx(hamiltonian_threshold(graph, k))
    assert not is_likely_hamiltonian(graph, exact=True)
    assert not is_likely_hamiltonian(graph)
    assert is_likely_traceable(graph, exact=True)


@pytest.mark.parametrize("k", range(1, 8))
def test_bipartite_graphs_with_parts_two_apart_are_not_traceable(k):
    graph = complete_bipartite_graph(k, k + 2)
    assert not is_likely_traceable(graph, exact=True)
    assert not is_likely_traceable(graph)


def test_dirac_condition_accepts_balanced_bipartite_graph():
    assert is_likely_hamiltonian(complete_bipartite_graph(3, 3))
    assert not is_likely_hamiltonian(complete_bipartite_graph(2, 4))


@pytest.mark.parametrize("exact", [True, False])
def test_cut_vertex_blocks_hamiltonicity(exact):
    graph = two_cliques_sharing_a_vertex()
    assert not is_likely_hamiltonian(graph, exact=exact)


def test_exact_connectivity_enables_traceability_through_cut_vertex():
    assert is_likely_traceable(two_cliques_sharing_a_vertex(), exact=True)


@pytest.mark.parametrize(
    "name, options",
    [
        ("complete", {"n": 8}),
        ("cycle", {"n": 12}),
        ("path", {"n": 12}),
        ("star", {"n": 9}),
        ("petersen", {}),
        ("bipartite", {"m": 4, "n": 5}),
        ("residue", {"n": 15, "density_factor": 2}),
        ("cube", {}),
        ("dodecahedron", {}),
        ("icosahedron", {}),
        ("scale-free", {"n": 25, "seed": 3}),
        ("gossip", {"n": 20, "p": 0.4, "seed": 3}),
        ("sharded", {"n": 24, "seed": 3}),
    ],
)
def test_hamiltonian_implies_traceable(name, options):
    graph = build_family(name, **options)
    for exact in (True, False):
        if is_likely_hamiltonian(graph, exact=exact):
            assert is_likely_traceable(graph, exact=exact)


def test_hamiltonian_threshold_values():
    # n - k - 1 = 0, so only the e^2 / (k + 1) and spread terms remain.
    assert hamiltonian_threshold(complete_graph(4), 3) == pytest.approx(9 + 3 * 6)
    expected = 6 * 9 + 15 ** 2 / 4 + (math.sqrt(6) - math.sqrt(3)) ** 2 * 15
    assert hamiltonian_threshold(petersen_graph(), 3) == pytest.approx(expected)


def test_traceable_threshold_values():
    expected = 5 * 9 + 15 ** 2 / 5 + (math.sqrt(5) - math.sqrt(3)) ** 2 * 15
    assert traceable_threshold(petersen_graph(), 3) == pytest.approx(expected)


def test_thresholds_are_not_monotone_in_connectivity():
    graph = petersen_graph()
    assert hamiltonian_threshold(graph, 3) < hamiltonian_threshold(graph, 2)
    assert traceable_threshold(graph, 3) < traceable_threshold(graph, 2)
    # Once n - k - 1 drops below delta the spread term grows again.
    assert hamiltonian_threshold(complete_graph(4), 3) > hamiltonian_threshold(complete_graph(4), 2)


def test_known_connectivity_is_used_as_given():
    balanced = complete_bipartite_graph(3, 3)
    assert is_likely_hamiltonian(balanced)
    assert not is_likely_hamiltonian(balanced, connectivity=1)
    assert not is_likely_hamiltonian(two_cliques_sharing_a_vertex(), connectivity=3)
    assert not is_likely_traceable(Graph.from_edges(6, [(0, 1), (2, 3), (4, 5)]), connectivity=0)


def _has_spanning_walk(graph, closed):
    """Return whether ``graph`` has a Hamiltonian cycle (``closed``) or path."""

    n = graph.vertex_count()
    neighbours = [graph.neighbors(v) for v in range(n)]
    full = (1 << n) - 1
    for start in ([0] if closed else range(n)):
        frontier = {(1 << start, start)}
        for _ in range(n - 1):
            frontier = {
                (mask | 1 << w, w)
                for mask, v in frontier
                for w in neighbours[v]
                if not mask >> w & 1
            }
        for mask, end in frontier:
            if mask == full and (not closed or start in neighbours[end]):
                return True
    return False


def test_positive_answers_hold_on_every_small_graph():
    for atlas_graph in nx.graph_atlas_g():
        if atlas_graph.number_of_nodes() == 0:
            continue
        graph = Graph.from_networkx(atlas_graph)
        if is_likely_hamiltonian(graph, exact=True):
            assert _has_spanning_walk(graph, closed=True), graph.to_graph6()
        if is_likely_traceable(graph, exact=True):
            assert _has_spanning_walk(graph, closed=False), graph.to_graph6()
