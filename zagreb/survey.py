"""Batch survey of graph families against the Zagreb-index classifiers.

The runner builds every requested family at every requested size (random
families once per repetition, each with its own derived seed), analyses the
graphs and writes the outcomes to ``results.csv`` and ``summary.txt`` inside a
fresh timestamped directory. Graphs are independent, so they may be analysed
in a worker pool; each worker owns the graph it builds.
"""

from __future__ import annotations

import argparse
import csv
import hashlib
import time
from dataclasses import dataclass
from datetime import datetime
from itertools import count
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .analysis import AnalysisConfig, AnalysisResult, analyze
from .connectivity import vertex_connectivity
from .generators import FAMILY_NAMES, PLATONIC_SOLIDS, RANDOM_FAMILIES, build_family

FIXED_ORDER_FAMILIES = ("petersen", *PLATONIC_SOLIDS)


@dataclass(slots=True)
class SurveyConfig:
    """Configuration of a survey run."""

    families: Tuple[str, ...] = ("complete", "cycle", "star", "petersen", "gossip", "sharded")
    sizes: Tuple[int, ...] = (10, 20)
    repetitions: int = 3
    p: float = 0.3
    attachment: int = 2
    shards: int = 3
    intra_p: float = 0.7
    inter_p: float = 0.2
    exact: bool = False
    seed: Optional[int] = None
    verbose: bool = False


@dataclass(slots=True)
class SurveyTask:
    family: str
    size: int
    repetition: int
    seed: Optional[int]


@dataclass(slots=True)
class SurveyOutcome:
    """Analysis of a single generated graph."""

    task: SurveyTask
    graph6: str
    connectivity: int
    result: AnalysisResult
    elapsed: float


CSV_HEADER = [
    "family",
    "size",
    "repetition",
    "seed",
    "graph6",
    *AnalysisResult.field_names(),
    "zagreb_efficiency",
    "connectivity",
    "elapsed",
]


def _task_seed(family: str, size: int, repetition: int, base_seed: int) -> int:
    """Return a 32-bit seed that depends only on the task coordinates and ``base_seed``."""

    digest = hashlib.blake2b(f"{base_seed}/{family}/{size}/{repetition}".encode("utf-8"), digest_size=4)
    return int(digest.hexdigest(), 16)


def build_tasks(config: SurveyConfig) -> List[SurveyTask]:
    """Expand ``config`` into the list of graphs to build."""

    unknown = [name for name in config.families if name not in FAMILY_NAMES]
    if unknown:
        raise KeyError(f"Unknown graph family name(s): {', '.join(unknown)}")

    tasks: List[SurveyTask] = []
    for family in config.families:
        sizes = config.sizes[:1] if family in FIXED_ORDER_FAMILIES else config.sizes
        for size in sizes:
            repetitions = config.repetitions if family in RANDOM_FAMILIES else 1
            for repetition in range(repetitions):
                seed = None
                if family in RANDOM_FAMILIES and config.seed is not None:
                    seed = _task_seed(family, size, repetition, config.seed)
                tasks.append(SurveyTask(family, size, repetition, seed))
    return tasks


def run_task(task: SurveyTask, config: SurveyConfig) -> SurveyOutcome:
    """Build and analyse the graph described by ``task``."""

    n, m = task.size, task.size
    if task.family == "bipartite":
        # Split ``size`` across both parts so K_(m,n) has exactly ``size`` vertices.
        m = task.size // 2
        n = task.size - m
    graph = build_family(
        task.family,
        n=n,
        m=m,
        p=config.p,
        attachment=config.attachment,
        shards=config.shards,
        intra_p=config.intra_p,
        inter_p=config.inter_p,
        seed=task.seed,
    )
    start = time.perf_counter()
    connectivity = vertex_connectivity(graph, exact=config.exact)
    result = analyze(graph, AnalysisConfig(exact_connectivity=config.exact), connectivity=connectivity)
    elapsed = time.perf_counter() - start
    return SurveyOutcome(
        task=task,
        graph6=graph.to_graph6(),
        connectivity=connectivity,
        result=result,
        elapsed=elapsed,
    )


def _worker_entry(arguments: Tuple[SurveyTask, SurveyConfig]) -> SurveyOutcome:
    """Entry point for multiprocessing workers."""

    task, config = arguments
    return run_task(task, config)


def make_run_directory(base: Path = Path("out")) -> Path:
    """Create and return a fresh ``survey_<timestamp>`` directory under ``base``."""

    stamp = datetime.now().strftime("survey_%Y-%m-%dT%H%M%S")
    base.mkdir(parents=True, exist_ok=True)
    for attempt in count():
        run_dir = base / (stamp if attempt == 0 else f"{stamp}.{attempt}")
        try:
            run_dir.mkdir()
        except FileExistsError:
            continue
        return run_dir


def write_results_csv(path: Path, outcomes: Sequence[SurveyOutcome]) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for outcome in outcomes:
            task = outcome.task
            values = outcome.result.as_dict()
            writer.writerow(
                [
                    task.family,
                    task.size,
                    task.repetition,
                    "" if task.seed is None else task.seed,
                    outcome.graph6,
                    *(values[name] for name in AnalysisResult.field_names()),
                    f"{outcome.result.zagreb_efficiency:.6f}",
                    outcome.connectivity,
                    f"{outcome.elapsed:.6f}",
                ]
            )


def summarize(outcomes: Sequence[SurveyOutcome]) -> Dict[str, Dict[str, float]]:
    """Aggregate the outcomes per family."""

    grouped: Dict[str, List[SurveyOutcome]] = {}
    for outcome in outcomes:
        grouped.setdefault(outcome.task.family, []).append(outcome)

    summary: Dict[str, Dict[str, float]] = {}
    for family, items in grouped.items():
        efficiency = np.array([item.result.zagreb_efficiency for item in items])
        hamiltonian = np.array([item.result.is_likely_hamiltonian for item in items], dtype=float)
        traceable = np.array([item.result.is_likely_traceable for item in items], dtype=float)
        summary[family] = {
            "graphs": float(len(items)),
            "hamiltonian_rate": float(hamiltonian.mean()),
            "traceable_rate": float(traceable.mean()),
            "efficiency_mean": float(efficiency.mean()),
            "efficiency_std": float(efficiency.std()),
            "mean_connectivity": float(np.mean([item.connectivity for item in items])),
        }
    return summary


def write_summary_txt(
    path: Path,
    outcomes: Sequence[SurveyOutcome],
    config: SurveyConfig,
    cpus: int,
) -> None:
    lines = [
        "Zagreb survey summary",
        "=====================",
        f"Families       : {', '.join(config.families)}",
        f"Sizes          : {', '.join(str(size) for size in config.sizes)}",
        f"Repetitions    : {config.repetitions}",
        f"Connectivity   : {'exact' if config.exact else 'approximate'}",
        f"Base seed      : {config.seed}",
        f"CPUs           : {cpus}",
        f"Graphs         : {len(outcomes)}",
        "",
    ]
    for family, stats in summarize(outcomes).items():
        lines.append(f"[{family}]")
        lines.append(f"  Graphs         : {int(stats['graphs'])}")
        lines.append(f"  Hamiltonian    : {100 * stats['hamiltonian_rate']:.1f}%")
        lines.append(f"  Traceable      : {100 * stats['traceable_rate']:.1f}%")
        lines.append(
            f"  Efficiency     : {stats['efficiency_mean']:.4f} +/- {stats['efficiency_std']:.4f}"
        )
        lines.append(f"  Connectivity   : {stats['mean_connectivity']:.2f}")
        lines.append("")

    with path.open("w", encoding="utf-8") as handle:
        handle.write("\n".join(lines).strip() + "\n")


def _maybe_log_outcome(outcome: SurveyOutcome, verbose: bool) -> None:
    if not verbose:
        return
    task = outcome.task
    result = outcome.result
    print(
        f"family={task.family} size={task.size} rep={task.repetition} "
        f"n={result.vertex_count} m={result.edge_count} z1={result.zagreb_index} "
        f"kappa={outcome.connectivity} ham={result.is_likely_hamiltonian} "
        f"trace={result.is_likely_traceable} time={outcome.elapsed:.3f}s"
    )


def run_survey(config: SurveyConfig, output_dir: Path, *, cpus: int = 1) -> Path:
    """Run the survey described by ``config`` and return the run directory."""

    tasks = build_tasks(config)
    if not tasks:
        raise ValueError("The survey configuration produces no graphs.")

    effective_cpus = 1
    if cpus > 1:
        effective_cpus = min(cpus, cpu_count())
    elif cpus < 0:
        effective_cpus = cpu_count()

    outcomes: List[SurveyOutcome] = []
    if effective_cpus == 1:
        for task in tasks:
            outcome = run_task(task, config)
            _maybe_log_outcome(outcome, config.verbose)
            outcomes.append(outcome)
    else:
        payloads = [(task, config) for task in tasks]
        with Pool(processes=effective_cpus) as pool:
            for outcome in pool.imap(_worker_entry, payloads, chunksize=1):
                _maybe_log_outcome(outcome, config.verbose)
                outcomes.append(outcome)

    run_dir = make_run_directory(output_dir)
    write_results_csv(run_dir / "results.csv", outcomes)
    write_summary_txt(run_dir / "summary.txt", outcomes, config, effective_cpus)
    return run_dir


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the survey runner."""

    parser = argparse.ArgumentParser(description="Survey graph families with Zagreb-index criteria")
    parser.add_argument(
        "families",
        nargs="*",
        help="Graph families to survey (available: " + ", ".join(FAMILY_NAMES) + ")",
    )
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 20], help="Vertex counts to generate")
    parser.add_argument("--repetitions", type=int, default=3, help="Samples per size for random families")
    parser.add_argument("--p", type=float, default=0.3, help="Long-range link probability (gossip)")
    parser.add_argument("--attachment", type=int, default=2, help="Edges per new vertex (scale-free)")
    parser.add_argument("--shards", type=int, default=3, help="Number of shards (sharded)")
    parser.add_argument("--intra-p", type=float, default=0.7, help="Intra-shard link probability")
    parser.add_argument("--inter-p", type=float, default=0.2, help="Inter-shard link probability")
    parser.add_argument("--exact", action="store_true", help="Use exact vertex connectivity")
    parser.add_argument("--output", type=Path, default=Path("out"), help="Base directory for run artefacts")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--cpus", type=int, default=1, help="Number of worker processes (<=1 disables multiprocessing)")
    parser.add_argument("--verbose", action="store_true", help="Print one line per analysed graph")
    return parser.parse_args(argv)


def config_from_arguments(args: argparse.Namespace) -> SurveyConfig:
    families = tuple(args.families) if args.families else SurveyConfig().families
    return SurveyConfig(
        families=families,
        sizes=tuple(args.sizes),
        repetitions=args.repetitions,
        p=args.p,
        attachment=args.attachment,
        shards=args.shards,
        intra_p=args.intra_p,
        inter_p=args.inter_p,
        exact=args.exact,
        seed=args.seed,
        verbose=args.verbose,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    config = config_from_arguments(args)
    try:
        run_dir = run_survey(config, args.output, cpus=args.cpus)
    except (KeyError, ValueError) as exc:
        raise SystemExit(f"Survey failed: {exc}") from exc
    print(f"Results written to {run_dir}")


if __name__ == "__main__":
    main()
