import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config import build_graph, load_config, parse_queries, resolve_node
from dijkstra import DijkstraGraph
from errors import NegativeWeightError


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def write(tmp_path, text):
    path = tmp_path / "instance.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_lecture_instance_loads():
    config = load_config(Path(ROOT) / "lecture_graph.yaml")
    graph = build_graph(config["graph"])
    assert isinstance(graph, DijkstraGraph)
    assert graph.get_node_count() == 10
    assert graph.get_edge_count() == 15
    assert parse_queries(config) == [("D", "I"), ("I", "E"), ("L", "M")]


def test_load_config_requires_mapping(tmp_path):
    with pytest.raises(ValueError):
        load_config(write(tmp_path, "- just\n- a list\n"))


def test_load_config_requires_graph_section(tmp_path):
    with pytest.raises(ValueError):
        load_config(write(tmp_path, "queries: []\n"))


@pytest.mark.parametrize("section", ["graph:\n  - a\n  - b\n", "graph: 3\n", "graph:\n"])
def test_load_config_requires_graph_mapping(tmp_path, section):
    with pytest.raises(ValueError):
        load_config(write(tmp_path, section))


@pytest.mark.parametrize("graph_config", [["a", "b"], "a", None])
def test_build_graph_requires_mapping(graph_config):
    with pytest.raises(ValueError):
        build_graph(graph_config)


def test_build_graph_rejects_malformed_edge():
    with pytest.raises(ValueError):
        build_graph({"nodes": ["a", "b"], "edges": [["a", "b"]]})


def test_build_graph_rejects_negative_weight():
    with pytest.raises(NegativeWeightError):
        build_graph({"nodes": ["a", "b"], "edges": [["a", "b", -2]]})


def test_integer_nodes_and_missing_queries(tmp_path):
    config = load_config(
        write(tmp_path, "graph:\n  nodes: [1, 2, 3]\n  edges:\n    - [1, 2, 1.5]\n")
    )
    graph = build_graph(config["graph"])
    assert graph.get_edge(1, 2) == 1.5
    assert parse_queries(config) == []


def test_parse_queries_rejects_malformed_entry():
    with pytest.raises(ValueError):
        parse_queries({"queries": [["a", "b", "c"]]})


def test_resolve_node_matches_non_string_nodes():
    graph = build_graph({"nodes": [1, 2.5, "x"], "edges": []})
    assert resolve_node(graph, "1") == 1
    assert resolve_node(graph, "2.5") == 2.5
    assert resolve_node(graph, "x") == "x"
    assert resolve_node(graph, "missing") == "missing"


def test_resolve_node_prefers_exact_string_node():
    graph = build_graph({"nodes": ["1", 1, 2], "edges": []})
    resolved = resolve_node(graph, "1")
    assert resolved == "1"
    assert isinstance(resolved, str)
    assert resolve_node(graph, "2") == 2
