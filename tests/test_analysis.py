import dataclasses
import math

import pytest

from zagreb import (
    AnalysisConfig,
    AnalysisResult,
    Graph,
    analyze,
    format_result,
    interpret,
    recommend_improvements,
)
from zagreb.generators import (
    complete_bipartite_graph,
    complete_graph,
    cycle_graph,
    petersen_graph,
    star_graph,
)


def test_petersen_snapshot():
    result = analyze(petersen_graph())
    bound = 6 * 9 + 15 ** 2 / 4 + (math.sqrt(6) - math.sqrt(3)) ** 2 * 15
    assert result.vertex_count == 10
    assert result.edge_count == 15
    assert result.zagreb_index == 90
    assert result.min_degree == result.max_degree == 3
    assert not result.is_likely_hamiltonian
    assert result.is_likely_traceable
    assert result.independence_number == 4
    assert result.zagreb_upper_bound == pytest.approx(bound)
    assert result.zagreb_efficiency == pytest.approx(90 / bound)


def test_exact_and_approximate_configs_agree_on_petersen():
    exact = analyze(petersen_graph(), AnalysisConfig(exact_connectivity=True))
    assert exact == analyze(petersen_graph())


def test_analysis_is_idempotent():
    graph = cycle_graph(9)
    edges = graph.edges()
    assert analyze(graph) == analyze(graph)
    assert graph.edges() == edges


def test_result_is_frozen():
    result = analyze(complete_graph(4))
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.zagreb_index = 0


def test_as_dict_lists_every_field():
    values = analyze(complete_graph(4)).as_dict()
    assert list(values) == AnalysisResult.field_names()
    assert values["zagreb_index"] == 36
    assert values["zagreb_upper_bound"] == pytest.approx(63.0)


def test_interpret_hamiltonian_graph():
    remarks = interpret(analyze(complete_graph(4)))
    assert "Hamiltonian cycle" in remarks[0]
    assert "57.1%" in remarks[1]
    assert remarks[2] == "The graph is 3-regular."


def test_interpret_traceable_graph():
    remarks = interpret(analyze(petersen_graph()))
    assert "Hamiltonian path" in remarks[0]
    assert "below the extremal value" in remarks[1]


def test_interpret_star_reaches_its_bound():
    remarks = interpret(analyze(star_graph(5)))
    assert "inconclusive" in remarks[0]
    assert "100.0%" in remarks[1]
    assert "highly concentrated" in remarks[1]
    assert remarks[2].startswith("Degrees range from 1 to 4")


def test_interpret_inconclusive_graph():
    disconnected = analyze(Graph.from_edges(6, [(0, 1), (2, 3), (4, 5)]))
    assert "inconclusive" in interpret(disconnected)[0]


def test_supplied_connectivity_is_shared_by_both_classifiers():
    graph = complete_bipartite_graph(3, 3)
    assert analyze(graph).is_likely_hamiltonian
    result = analyze(graph, connectivity=1)
    assert not result.is_likely_hamiltonian
    # 2 * delta >= n - 1 still holds once connectivity is at least one.
    assert result.is_likely_traceable


def two_cliques_sharing_a_vertex():
    edges = [(u, v) for u in range(4) for v in range(u + 1, 4)]
    edges += [(u, v) for u in range(3, 7) for v in range(u + 1, 7)]
    return Graph.from_edges(7, edges)


def test_recommendations_name_cut_vertices():
    remarks = recommend_improvements(two_cliques_sharing_a_vertex(), exact=True)
    assert remarks[0] == "Vertices with the fewest connections should gain neighbours: 0, 1, 2 and 3 more."
    assert remarks[1] == "The graph is not 2-connected; single points of failure: 3."
    assert remarks[2].startswith("Average degree 3.4 is below 4.0")


def test_recommendations_for_two_connected_sparse_graph():
    remarks = recommend_improvements(petersen_graph())
    assert len(remarks) == 2
    assert remarks[0].endswith("0, 1, 2 and 7 more.")
    assert remarks[1].startswith("Average degree 3.0 is below 4.0")


def test_recommendations_average_degree_band():
    assert recommend_improvements(complete_graph(7))[-1] == "Average degree 6.0 is within the target range."
    assert "above 8.0" in recommend_improvements(complete_graph(10))[-1]
    assert "above 5.0" in recommend_improvements(complete_graph(7), dense_degree=5.0)[-1]


def test_recommendations_for_disconnected_graph():
    remarks = recommend_improvements(Graph.from_edges(4, [(0, 1), (2, 3)]))
    assert "disconnected" in remarks[1]


def test_format_result_table():
    table = format_result(analyze(petersen_graph()))
    lines = table.splitlines()
    assert len(lines) == 9
    assert lines[2].startswith("Zagreb index")
    assert lines[2].endswith(": 90")
    assert "Likely Hamiltonian" in table
    assert len({line.index(":") for line in lines}) == 1
