"""
CLI to run route queries over a road network.

Reads a YAML config (./data/route_planner.yml by default), loads the road
map, runs every search strategy for every query and prints one line per
result. Rows can also be written to CSV for downstream analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence
import csv
import sys
import time

from junctions import weight_function
from road_map import RoadMap, load_road_map, summarize
from searcher import build_engines


@dataclass(frozen=True)
class QueryConfig:
    start: str
    target: str


@dataclass(frozen=True)
class PlannerConfig:
    junctions: Path
    roads: Path
    weight: str
    queries: Sequence[QueryConfig]
    results_csv: Optional[Path] = None


# Resolved against the working directory.
DEFAULT_CONFIG = Path("data") / "route_planner.yml"

RESULT_FIELDS = [
    "start",
    "target",
    "algorithm",
    "found",
    "length",
    "total_weight",
    "visited",
    "path",
    "duration_sec",
]


def load_config(path: Path) -> PlannerConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    base = path.parent
    try:
        queries = [QueryConfig(start=str(q["start"]), target=str(q["target"])) for q in data["queries"]]
        results_csv = data.get("results_csv")
        cfg = PlannerConfig(
            junctions=base / data["junctions"],
            roads=base / data["roads"],
            weight=str(data.get("weight", "length")),
            queries=queries,
            results_csv=base / results_csv if results_csv else None,
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed route planner config {path}: missing {exc}") from exc
    # Fail on an unknown weight before any data is loaded.
    weight_function(cfg.weight)
    return cfg


def run_queries(config_path: Path) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    graph = load_road_map(cfg.junctions, cfg.roads)
    counts = summarize(graph)
    print(f"[route] loaded {counts['junctions']} junctions and {counts['roads']} directed roads")

    results = plan_routes(graph, cfg.queries, cfg.weight)

    if cfg.results_csv:
        write_results_csv(results, cfg.results_csv)

    elapsed = time.time() - start
    print(f"[route] completed {len(results)} searches in {elapsed:.2f}s")
    return results


def plan_routes(graph: RoadMap, queries: Iterable[QueryConfig], weight: str) -> List[Dict[str, object]]:
    """
    Run every strategy for every query; one result row per (query, algorithm).
    """
    engines = build_engines(weight_function(weight))
    rows: List[Dict[str, object]] = []
    for query in queries:
        for name, engine in engines.items():
            t0 = time.time()
            path = engine.find_path(graph, query.start, query.target)
            row: Dict[str, object] = {
                "start": query.start,
                "target": query.target,
                "algorithm": name,
                "found": path is not None,
                "length": len(path) if path is not None else 0,
                "total_weight": path.total_weight if path is not None else None,
                "visited": len(path.visited) if path is not None else 0,
                "path": " -> ".join(path.ids()) if path is not None else "",
                "duration_sec": time.time() - t0,
            }
            rows.append(row)
            if path is None:
                print(f"[route] {name} {query.start} -> {query.target}: no path")
            else:
                print(f"[route] {name} {query.start} -> {query.target}: {path}")
    return rows


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-search results to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key, "") for key in RESULT_FIELDS})


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = Path(args[0]) if args else DEFAULT_CONFIG

    results = run_queries(config_path)
    found = sum(1 for res in results if res["found"])
    print(f"[route] {found}/{len(results)} searches found a path")


if __name__ == "__main__":
    main()
