from . import connectivity, generators, invariants, theorems
from .analysis import (
    AnalysisConfig,
    AnalysisResult,
    analyze,
    format_result,
    interpret,
    recommend_improvements,
)
from .connectivity import is_k_connected, vertex_connectivity
from .graph import DuplicateEdge, Graph, GraphError, InvalidSize, SelfLoop, VertexOutOfRange
from .invariants import (
    first_zagreb_index,
    independence_number_approx,
    low_connectivity_vertices,
    max_degree,
    min_degree,
    zagreb_upper_bound,
)
from .theorems import is_likely_hamiltonian, is_likely_traceable

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "DuplicateEdge",
    "Graph",
    "GraphError",
    "InvalidSize",
    "SelfLoop",
    "VertexOutOfRange",
    "analyze",
    "connectivity",
    "first_zagreb_index",
    "format_result",
    "generators",
    "independence_number_approx",
    "interpret",
    "invariants",
    "is_k_connected",
    "is_likely_hamiltonian",
    "is_likely_traceable",
    "low_connectivity_vertices",
    "max_degree",
    "min_degree",
    "recommend_improvements",
    "theorems",
    "vertex_connectivity",
    "zagreb_upper_bound",
]
