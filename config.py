from __future__ import annotations

from pathlib import Path
from typing import Dict, Hashable, List, Tuple

import yaml

from dijkstra import DijkstraGraph


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        config = yaml.safe_load(handle)

    if not isinstance(config, dict):
        raise ValueError(f"{path}: expected a YAML mapping at the top level.")
    if "graph" not in config:
        raise ValueError(f"{path}: missing required 'graph' section.")
    if not isinstance(config["graph"], dict):
        raise ValueError(f"{path}: the 'graph' section must be a mapping.")
    return config


def build_graph(graph_config: Dict) -> DijkstraGraph:
    if not isinstance(graph_config, dict):
        raise ValueError(f"Graph section must be a mapping, got {graph_config!r}.")

    edges: List[Tuple[Hashable, Hashable, float]] = []
    for entry in graph_config.get("edges") or []:
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise ValueError(
                f"Edge entries must be [origin, target, weight], got {entry!r}."
            )
        origin, target, weight = entry
        edges.append((origin, target, weight))

    return DijkstraGraph(graph_config.get("nodes") or [], edges)


def parse_queries(config: Dict) -> List[Tuple[Hashable, Hashable]]:
    queries: List[Tuple[Hashable, Hashable]] = []
    for entry in config.get("queries") or []:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"Query entries must be [start, end], got {entry!r}.")
        queries.append((entry[0], entry[1]))
    return queries


def resolve_node(graph: DijkstraGraph, argument: str) -> Hashable:
    """Map a command line string onto the node it names.

    YAML instances may use non-string nodes (1, 2.5), so an argument that is
    not itself a node matches the node whose ``str()`` equals it. Unmatched
    or ambiguous arguments are returned unchanged and fail the query.
    """
    if graph.contains_node(argument):
        return argument
    matches = [node for node in graph.nodes if str(node) == argument]
    if len(matches) == 1:
        return matches[0]
    return argument
