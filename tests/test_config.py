"""
Tests for YAML graph / query loading.
"""

from pathlib import Path

import pytest

from config import EdgeConfig, NodeConfig, QueryConfig, build_graph, load_config, parse_config
from errors import ConfigurationError, InvalidWeightError
from search_engine import SearchConfig, search

REFERENCE_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "reference_graph.yml"


def minimal(**overrides):
    data = {
        "nodes": [{"name": "a", "x": 0, "y": 0}, {"name": "b", "x": 1, "y": 0}],
        "edges": [{"from": "a", "to": "b", "weight": 2}],
        "queries": [{"origin": "a", "destination": "b"}],
    }
    data.update(overrides)
    return data


def test_parse_minimal_config():
    cfg = parse_config(minimal())

    assert cfg.nodes == (NodeConfig("a", 0.0, 0.0), NodeConfig("b", 1.0, 0.0))
    assert cfg.edges == (EdgeConfig("a", "b", 2.0, directed=False),)
    assert cfg.queries == (QueryConfig("a", "b", "zero"),)
    assert cfg.search == SearchConfig()
    assert cfg.directed is False


def test_load_reference_config_and_search():
    cfg = load_config(REFERENCE_CONFIG)
    assert len(cfg.nodes) == 7
    assert len(cfg.edges) == 7
    assert cfg.search.check_heuristic is True
    assert cfg.queries[0] == QueryConfig("a", "e", "euclidean")

    graph, by_name = build_graph(cfg)
    assert graph.edge_count() == 14
    path = search(graph, by_name["a"], by_name["e"], config=cfg.search)
    assert [node.id for node in path] == ["a", "d", "e"]
    assert path.cost == 5


def test_directed_default_and_per_edge_override():
    data = minimal(
        directed=True,
        edges=[
            {"from": "a", "to": "b", "weight": 1},
            {"from": "b", "to": "a", "weight": 3, "directed": False},
        ],
    )
    cfg = parse_config(data)
    assert [e.directed for e in cfg.edges] == [True, False]

    graph, n = build_graph(cfg)
    assert graph.outgoing(n["a"]) == {n["b"]: 3.0}
    assert graph.outgoing(n["b"]) == {n["a"]: 3.0}


def test_search_section():
    cfg = parse_config(minimal(search={"strict_decrease_key": True, "tolerance": 1e-6}))
    assert cfg.search == SearchConfig(strict_decrease_key=True, tolerance=1e-6)


def test_negative_weight_surfaces_from_graph():
    cfg = parse_config(minimal(edges=[{"from": "a", "to": "b", "weight": -1}]))
    with pytest.raises(InvalidWeightError):
        build_graph(cfg)


@pytest.mark.parametrize(
    "data, field",
    [
        (["not", "a", "mapping"], None),
        (minimal(nodes=None), "nodes"),
        (minimal(nodes=[{"name": "a"}, {"name": "a"}]), "nodes[1].name"),
        (minimal(nodes=[{"x": 1}]), "nodes[0].name"),
        (minimal(nodes=[{"name": "a", "x": "far"}, {"name": "b"}]), "nodes[0].x"),
        (minimal(edges=[{"from": "a", "to": "zz", "weight": 1}]), "edges[0].to"),
        (minimal(edges=[{"from": "a", "to": "b"}]), "edges[0].weight"),
        (minimal(edges=[{"from": "a", "to": "b", "weight": 1, "directed": "yes"}]), "edges[0].directed"),
        (minimal(queries=[{"origin": "a", "destination": "b", "heuristic": "psychic"}]), "queries[0].heuristic"),
        (minimal(queries=[{"origin": "q", "destination": "b"}]), "queries[0].origin"),
        (minimal(search={"fast": True}), "search"),
        (minimal(search={"check_heuristic": 1}), "search.check_heuristic"),
    ],
)
def test_malformed_config_raises(data, field):
    with pytest.raises(ConfigurationError) as excinfo:
        parse_config(data)
    assert excinfo.value.field == field


def test_yaml_syntax_error(tmp_path):
    bad = tmp_path / "bad.yml"
    bad.write_text("nodes: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_config(bad)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        parse_config(minimal(edges="nope"))
