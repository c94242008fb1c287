"""One-shot analysis snapshot combining every invariant of a graph."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List, Optional

import networkx as nx

from .connectivity import DEFAULT_MAX_SUBSETS, is_k_connected, vertex_connectivity
from .graph import Graph
from .invariants import (
    average_degree,
    first_zagreb_index,
    independence_number_approx,
    is_connected,
    low_connectivity_vertices,
    maximum_degree,
    minimum_degree,
    zagreb_upper_bound,
)
from .theorems import is_likely_hamiltonian, is_likely_traceable


@dataclass(slots=True)
class AnalysisConfig:
    """Parameters controlling how :func:`analyze` computes connectivity."""

    exact_connectivity: bool = False
    max_exact_subsets: int = DEFAULT_MAX_SUBSETS


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable snapshot of the invariants of one graph."""

    vertex_count: int
    edge_count: int
    zagreb_index: int
    min_degree: int
    max_degree: int
    is_likely_hamiltonian: bool
    is_likely_traceable: bool
    independence_number: int
    zagreb_upper_bound: float

    @property
    def zagreb_efficiency(self) -> float:
        """Return the Zagreb index as a fraction of its upper bound."""

        if self.zagreb_upper_bound == 0:
            return 0.0
        return self.zagreb_index / self.zagreb_upper_bound

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def field_names(cls) -> List[str]:
        return [field.name for field in fields(cls)]


def analyze(
    G: Graph,
    config: Optional[AnalysisConfig] = None,
    *,
    connectivity: Optional[int] = None,
) -> AnalysisResult:
    """Return the :class:`AnalysisResult` of ``G``.

    The graph is only read; analysing an unmodified graph twice yields equal
    snapshots. The vertex connectivity is computed once (or taken from
    ``connectivity``) and shared by both classifiers.
    """

    config = config or AnalysisConfig()
    if connectivity is None:
        connectivity = vertex_connectivity(
            G, exact=config.exact_connectivity, max_subsets=config.max_exact_subsets
        )
    options = {
        "exact": config.exact_connectivity,
        "max_subsets": config.max_exact_subsets,
        "connectivity": connectivity,
    }
    return AnalysisResult(
        vertex_count=G.vertex_count(),
        edge_count=G.edge_count(),
        zagreb_index=first_zagreb_index(G),
        min_degree=minimum_degree(G),
        max_degree=maximum_degree(G),
        is_likely_hamiltonian=is_likely_hamiltonian(G, **options),
        is_likely_traceable=is_likely_traceable(G, **options),
        independence_number=independence_number_approx(G),
        zagreb_upper_bound=zagreb_upper_bound(G),
    )


def interpret(result: AnalysisResult) -> List[str]:
    """Return human-readable remarks on ``result``, one paragraph per entry."""

    remarks: List[str] = []
    if result.is_likely_hamiltonian:
        remarks.append(
            "The graph satisfies a sufficient condition for a Hamiltonian cycle: "
            "a closed walk can visit every vertex exactly once."
        )
    elif result.is_likely_traceable:
        remarks.append(
            "The graph satisfies a sufficient condition for a Hamiltonian path, "
            "but none of the tested conditions guarantees a Hamiltonian cycle."
        )
    else:
        remarks.append(
            "No tested sufficient condition applies. This is inconclusive: the "
            "graph may still be Hamiltonian or traceable."
        )

    percent = 100.0 * result.zagreb_efficiency
    quality = "highly concentrated" if percent > 80 else "below the extremal value"
    remarks.append(
        f"The Zagreb index ({result.zagreb_index}) is {percent:.1f}% of its upper bound "
        f"{result.zagreb_upper_bound:.2f}; the degree distribution is {quality}."
    )

    if result.min_degree == result.max_degree:
        remarks.append(f"The graph is {result.min_degree}-regular.")
    else:
        remarks.append(
            f"Degrees range from {result.min_degree} to {result.max_degree}; the graph is not regular."
        )
    return remarks


def recommend_improvements(
    G: Graph,
    *,
    exact: bool = False,
    slack: int = 1,
    sparse_degree: float = 4.0,
    dense_degree: float = 8.0,
    shown: int = 3,
) -> List[str]:
    """Return suggestions for making ``G`` more resilient.

    The weakest vertices are named first, then missing 2-connectivity (with
    the cut vertices that are single points of failure) and finally the
    average degree against the ``[sparse_degree, dense_degree]`` target band.
    """

    remarks: List[str] = []
    weak = low_connectivity_vertices(G, slack=slack)
    listed = ", ".join(str(v) for v in weak[:shown])
    if len(weak) > shown:
        listed += f" and {len(weak) - shown} more"
    remarks.append(f"Vertices with the fewest connections should gain neighbours: {listed}.")

    if not is_k_connected(G, 2, exact=exact):
        cut_vertices = sorted(nx.articulation_points(G.nx_view))
        if not is_connected(G):
            remarks.append("The graph is disconnected; link its components before anything else.")
        elif cut_vertices:
            names = ", ".join(str(v) for v in cut_vertices)
            remarks.append(f"The graph is not 2-connected; single points of failure: {names}.")
        else:
            remarks.append("The graph may not be 2-connected; add redundant links between clusters.")

    average = average_degree(G)
    if average < sparse_degree:
        remarks.append(
            f"Average degree {average:.1f} is below {sparse_degree:.1f}; add edges to speed up propagation."
        )
    elif average > dense_degree:
        remarks.append(
            f"Average degree {average:.1f} is above {dense_degree:.1f}; some links may be redundant overhead."
        )
    else:
        remarks.append(f"Average degree {average:.1f} is within the target range.")
    return remarks


def format_result(result: AnalysisResult) -> str:
    """Return ``result`` as an aligned two-column table."""

    rows = [
        ("Vertices", str(result.vertex_count)),
        ("Edges", str(result.edge_count)),
        ("Zagreb index", str(result.zagreb_index)),
        ("Minimum degree", str(result.min_degree)),
        ("Maximum degree", str(result.max_degree)),
        ("Likely Hamiltonian", "yes" if result.is_likely_hamiltonian else "no"),
        ("Likely traceable", "yes" if result.is_likely_traceable else "no"),
        ("Independence number (approx)", str(result.independence_number)),
        ("Zagreb upper bound", f"{result.zagreb_upper_bound:.2f}"),
    ]
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}} : {value}" for label, value in rows)


__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "analyze",
    "format_result",
    "interpret",
    "recommend_improvements",
]
