from multiprocessing import cpu_count
from pathlib import Path

from zagreb.survey import SurveyConfig, run_survey


def main() -> None:
    config = SurveyConfig(
        families=(
            "complete",
            "cycle",
            "star",
            "path",
            "bipartite",
            "petersen",
            "cube",
            "dodecahedron",
            "icosahedron",
            "scale-free",
            "gossip",
            "sharded",
        ),
        sizes=(10, 20, 40),
        repetitions=5,
        p=0.3,
        attachment=2,
        shards=4,
        intra_p=0.7,
        inter_p=0.1,
        exact=False,
        seed=42,
        verbose=True,
    )

    output_dir = Path("out")
    cpus = max(1, cpu_count())

    run_dir = run_survey(config, output_dir, cpus=cpus)
    print(f"Results written to {run_dir}")


if __name__ == "__main__":
    main()
