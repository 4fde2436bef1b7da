from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Hashable, List, Optional, Tuple

from config import build_graph, load_config, parse_queries, resolve_node
from dijkstra import DijkstraGraph
from errors import GraphError


logger = logging.getLogger(__name__)


def format_path(path: List[Hashable]) -> str:
    return " -> ".join(str(node) for node in path)


def answer_queries(
    graph: DijkstraGraph, queries: List[Tuple[Hashable, Hashable]]
) -> Tuple[List[Tuple[Hashable, Hashable, float, List[Hashable]]], int]:
    """Print one line per query and return the solved ones with a failure count."""
    solved: List[Tuple[Hashable, Hashable, float, List[Hashable]]] = []
    failures = 0

    for start, end in queries:
        try:
            cost, path = graph.shortest_path(start, end)
        except GraphError as exc:
            failures += 1
            print(f"{start} -> {end}: {type(exc).__name__}: {exc}")
            continue
        solved.append((start, end, cost, path))
        print(f"{start} -> {end}: {format_path(path)} (cost {cost:g})")

    return solved, failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Answer shortest-path queries on a directed weighted graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("lecture_graph.yaml"),
        help="Path to the YAML graph instance.",
    )
    parser.add_argument("--start", help="Start node (overrides configured queries).")
    parser.add_argument("--end", help="End node (overrides configured queries).")
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Draw the first solved shortest path with matplotlib.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Save the visualisation to this file instead of showing it.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log search details at DEBUG level."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if (args.start is None) != (args.end is None):
        parser.error("--start and --end must be given together.")

    config = load_config(args.config)
    graph = build_graph(config["graph"])
    logger.debug(
        "Loaded graph with %d nodes and %d edges from %s.",
        graph.get_node_count(),
        graph.get_edge_count(),
        args.config,
    )

    if args.start is not None:
        queries = [(resolve_node(graph, args.start), resolve_node(graph, args.end))]
    else:
        queries = parse_queries(config)
    if not queries:
        parser.error("No queries configured; pass --start and --end.")

    solved, failures = answer_queries(graph, queries)

    if args.visualize:
        from visualize import draw_path

        if not solved:
            raise RuntimeError("Visualisation requested but no path was found.")
        _, _, cost, path = solved[0]
        draw_path(graph, path, cost, output=args.output, show=args.output is None)
        if args.output is not None:
            print(f"Visualisation stored at: {args.output}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
