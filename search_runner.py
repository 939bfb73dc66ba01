"""
CLI to run shortest-path queries described in a YAML graph file.

Loads the graph and queries (see config.py), runs every query through the
best-first search engine, prints one line per query and optionally writes a
CSV with the results and search counters.

    python search_runner.py configs/reference_graph.yml --verify --csv out/results.csv
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
import argparse
import csv
import logging
import math

from config import GraphConfig, build_graph, load_config
from dijkstra_engine import HeapqDijkstraEngine
from errors import HeapGraphError
from heuristics import get_heuristic
from search_engine import BestFirstSearchEngine

RESULT_FIELDS = [
    "query",
    "heuristic",
    "strict_decrease_key",
    "found",
    "cost",
    "path",
    "heap_pops",
    "heap_pushes",
    "relaxed",
    "stale_skipped",
    "verified",
    "error",
]


def run_queries(
    cfg: GraphConfig,
    strict_decrease_key: Optional[bool] = None,
    verify: bool = False,
) -> List[Dict[str, object]]:
    """
    Run every configured query and return one result row per query.

    A query that fails with a HeapGraphError yields a row with ``error`` set;
    the remaining queries still run. ``verified`` is None unless verify is
    requested, then True when the cost matches the reference Dijkstra.
    """
    search_cfg = cfg.search
    if strict_decrease_key is not None:
        search_cfg = replace(search_cfg, strict_decrease_key=strict_decrease_key)

    graph, by_name = build_graph(cfg)
    engine = BestFirstSearchEngine(search_cfg)
    reference = HeapqDijkstraEngine() if verify else None

    results: List[Dict[str, object]] = []
    for query in cfg.queries:
        origin = by_name[query.origin]
        destination = by_name[query.destination]
        row: Dict[str, object] = {
            "query": query.label,
            "heuristic": query.heuristic,
            "strict_decrease_key": search_cfg.strict_decrease_key,
            "found": False,
            "cost": None,
            "path": "",
            "verified": None,
            "error": "",
        }
        try:
            path = engine.search(graph, origin, destination, get_heuristic(query.heuristic))
        except HeapGraphError as exc:
            row["error"] = f"{type(exc).__name__}: {exc}"
            results.append(row)
            continue

        row.update(
            {
                "heap_pops": engine.last_heap_pops,
                "heap_pushes": engine.last_heap_pushes,
                "relaxed": engine.last_relaxed,
                "stale_skipped": engine.last_stale_skipped,
            }
        )
        if path is not None:
            row["found"] = True
            row["cost"] = path.cost
            row["path"] = " ".join(node.id for node in path)

        if reference is not None:
            expected = reference.shortest_path_costs(graph, origin).get(destination)
            if path is None:
                row["verified"] = expected is None
            else:
                row["verified"] = expected is not None and math.isclose(path.cost, expected, rel_tol=1e-9, abs_tol=1e-9)
        results.append(row)

    return results


def write_results_csv(results: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write per-query results to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({name: res.get(name, "") for name in RESULT_FIELDS})


def _describe(row: Mapping[str, object]) -> str:
    if row.get("error"):
        return f"failed: {row['error']}"
    if not row.get("found"):
        return "no path"
    text = f"cost={row['cost']:g} path={row['path']}"
    if row.get("verified") is False:
        text += " (MISMATCH with reference)"
    return text


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run shortest-path queries from a YAML graph description.")
    parser.add_argument("config", type=Path, help="YAML graph and query file")
    parser.add_argument("--csv", type=Path, default=None, help="write per-query results to this CSV file")
    parser.add_argument("--strict", action="store_true", default=None, help="use the indexed decrease-key queue")
    parser.add_argument("--verify", action="store_true", help="check costs against the heapq reference Dijkstra")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="logging level for library output",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = load_config(args.config)
        results = run_queries(cfg, strict_decrease_key=args.strict, verify=args.verify)
    except (HeapGraphError, OSError) as exc:
        print(f"[search] cannot load {args.config}: {exc}")
        return 1

    print(f"[search] {len(results)} queries on {len(cfg.nodes)} nodes / {len(cfg.edges)} edges")
    for row in results:
        print(f"[search] {row['query']} ({row['heuristic']}): {_describe(row)}")

    if args.csv:
        write_results_csv(results, args.csv)
        print(f"[search] wrote results to {args.csv}")

    failed = any(row.get("error") or row.get("verified") is False for row in results)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
