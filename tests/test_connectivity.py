import networkx as nx
import pytest

from zagreb import Graph
from zagreb.connectivity import (
    connectivity_profile,
    is_k_connected,
    is_k_connected_approx,
    is_k_connected_exact,
    vertex_connectivity,
)
from zagreb.generators import (
    complete_bipartite_graph,
    complete_graph,
    cubical_graph,
    cycle_graph,
    dodecahedral_graph,
    icosahedral_graph,
    octahedral_graph,
    path_graph,
    petersen_graph,
    star_graph,
)


def triangular_prism():
    return Graph.from_edges(
        6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3), (0, 3), (1, 4), (2, 5)]
    )


def two_cliques_sharing_a_vertex():
    edges = [(u, v) for u in range(4) for v in range(u + 1, 4)]
    edges += [(u, v) for u in range(3, 7) for v in range(u + 1, 7)]
    return Graph.from_edges(7, edges)


@pytest.mark.parametrize("exact", [True, False])
def test_complete_graph_is_n_minus_one_connected(exact):
    graph = complete_graph(6)
    for k in range(1, 6):
        assert is_k_connected(graph, k, exact=exact)
    assert not is_k_connected(graph, 6, exact=exact)
    assert vertex_connectivity(graph, exact=exact) == 5


def test_cycle_is_two_connected_only():
    graph = cycle_graph(5)
    assert is_k_connected_exact(graph, 1)
    assert is_k_connected_exact(graph, 2)
    assert not is_k_connected_exact(graph, 3)
    for k in (1, 2, 3):
        assert is_k_connected_approx(graph, k) == is_k_connected_exact(graph, k)


def test_path_is_one_connected_only():
    graph = path_graph(5)
    assert is_k_connected_exact(graph, 1)
    assert not is_k_connected_exact(graph, 2)
    assert is_k_connected_approx(graph, 1)
    assert not is_k_connected_approx(graph, 2)


def test_triangular_prism_is_three_connected():
    graph = triangular_prism()
    assert is_k_connected_exact(graph, 3)
    assert not is_k_connected_exact(graph, 4)


def test_trivial_and_oversized_k():
    disconnected = Graph.from_edges(4, [(0, 1)])
    assert is_k_connected(disconnected, 0, exact=True)
    assert is_k_connected(disconnected, 0)
    assert not is_k_connected(complete_graph(4), 4, exact=True)
    assert not is_k_connected(complete_graph(4), 9)


def test_disconnected_graph_has_zero_connectivity():
    graph = Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
    assert not is_k_connected(graph, 1, exact=True)
    assert not is_k_connected(graph, 1)
    assert vertex_connectivity(graph, exact=True) == 0
    assert vertex_connectivity(graph) == 0


def test_single_vertex_has_zero_connectivity():
    assert vertex_connectivity(Graph(1), exact=True) == 0
    assert not is_k_connected(Graph(1), 1)


def test_approximation_may_overestimate_connectivity():
    graph = two_cliques_sharing_a_vertex()
    # Vertex 3 is a cut vertex but every degree is at least 3.
    assert is_k_connected_approx(graph, 2)
    assert not is_k_connected_exact(graph, 2)
    assert vertex_connectivity(graph, exact=True) == 1
    assert vertex_connectivity(graph) == 3


@pytest.mark.parametrize(
    "graph",
    [
        petersen_graph(),
        cubical_graph(),
        octahedral_graph(),
        icosahedral_graph(),
        dodecahedral_graph(),
        complete_bipartite_graph(3, 4),
        star_graph(6),
        triangular_prism(),
        two_cliques_sharing_a_vertex(),
    ],
)
def test_exact_connectivity_matches_networkx(graph):
    assert vertex_connectivity(graph, exact=True) == nx.node_connectivity(graph.to_networkx())


def test_approximation_never_rejects_a_k_connected_graph():
    for graph in (petersen_graph(), cubical_graph(), icosahedral_graph(), triangular_prism()):
        kappa = vertex_connectivity(graph, exact=True)
        for k in range(1, kappa + 1):
            assert is_k_connected_approx(graph, k)


def test_flow_fallback_agrees_with_enumeration():
    graph = petersen_graph()
    assert is_k_connected_exact(graph, 3, max_subsets=1)
    assert not is_k_connected_exact(graph, 4, max_subsets=1)
    assert vertex_connectivity(graph, exact=True, max_subsets=1) == 3


def test_connectivity_profile():
    assert connectivity_profile(cycle_graph(5), 3, exact=True) == [(1, True), (2, True), (3, False)]
