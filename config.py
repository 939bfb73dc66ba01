"""
YAML graph and query descriptions.

Layout::

    directed: false              # default for edges without their own flag
    search:                      # optional, fields of SearchConfig
      strict_decrease_key: false
      check_heuristic: true
    nodes:
      - {name: a, x: 0, y: 0}
    edges:
      - {from: a, to: b, weight: 1}
      - {from: b, to: c, weight: 2, directed: true}
    queries:
      - {origin: a, destination: c, heuristic: euclidean}

Structural problems raise ConfigurationError naming the offending field.
Weight signs are left to the graph, which raises InvalidWeightError.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Tuple
import numbers

from adjacency_list_graph import AdjacencyListGraph
from errors import ConfigurationError
from heuristics import HEURISTICS
from nodes import PlanarNode
from search_engine import SearchConfig


@dataclass(frozen=True)
class NodeConfig:
    name: str
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class EdgeConfig:
    src: str
    dst: str
    weight: float
    directed: bool = False


@dataclass(frozen=True)
class QueryConfig:
    origin: str
    destination: str
    heuristic: str = "zero"

    @property
    def label(self) -> str:
        return f"{self.origin}->{self.destination}"


@dataclass(frozen=True)
class GraphConfig:
    nodes: Sequence[NodeConfig]
    edges: Sequence[EdgeConfig]
    queries: Sequence[QueryConfig] = ()
    search: SearchConfig = field(default_factory=SearchConfig)
    directed: bool = False


def load_config(path: Path) -> GraphConfig:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"cannot parse {path}: {exc}") from exc
    return parse_config(data)


def parse_config(data: Any) -> GraphConfig:
    """Validate an already-parsed mapping and turn it into a GraphConfig."""
    if not isinstance(data, Mapping):
        raise ConfigurationError("top level must be a mapping")

    default_directed = _flag(data.get("directed", False), "directed")
    search = _search_config(data.get("search") or {})

    nodes: List[NodeConfig] = []
    names = set()
    for i, raw in enumerate(_list(data.get("nodes"), "nodes")):
        where = f"nodes[{i}]"
        raw = _mapping(raw, where)
        name = _name(raw.get("name"), f"{where}.name")
        if name in names:
            raise ConfigurationError(f"duplicate node name {name!r}", field=f"{where}.name")
        names.add(name)
        nodes.append(
            NodeConfig(
                name=name,
                x=_number(raw.get("x", 0.0), f"{where}.x"),
                y=_number(raw.get("y", 0.0), f"{where}.y"),
            )
        )

    edges: List[EdgeConfig] = []
    for i, raw in enumerate(_list(data.get("edges", []), "edges")):
        where = f"edges[{i}]"
        raw = _mapping(raw, where)
        edges.append(
            EdgeConfig(
                src=_known(raw.get("from"), names, f"{where}.from"),
                dst=_known(raw.get("to"), names, f"{where}.to"),
                weight=_number(raw.get("weight"), f"{where}.weight"),
                directed=_flag(raw.get("directed", default_directed), f"{where}.directed"),
            )
        )

    queries: List[QueryConfig] = []
    for i, raw in enumerate(_list(data.get("queries", []), "queries")):
        where = f"queries[{i}]"
        raw = _mapping(raw, where)
        heuristic = raw.get("heuristic", "zero")
        if not isinstance(heuristic, str) or heuristic not in HEURISTICS:
            raise ConfigurationError(f"unknown heuristic {heuristic!r}", field=f"{where}.heuristic")
        queries.append(
            QueryConfig(
                origin=_known(raw.get("origin"), names, f"{where}.origin"),
                destination=_known(raw.get("destination"), names, f"{where}.destination"),
                heuristic=heuristic,
            )
        )

    return GraphConfig(
        nodes=tuple(nodes),
        edges=tuple(edges),
        queries=tuple(queries),
        search=search,
        directed=default_directed,
    )


def build_graph(cfg: GraphConfig) -> Tuple[AdjacencyListGraph, Dict[str, PlanarNode]]:
    """
    Materialise the configured graph.

    Returns the graph and a name -> node lookup. Raises InvalidWeightError on
    negative or non-finite weights.
    """
    by_name: Dict[str, PlanarNode] = {}
    graph = AdjacencyListGraph()
    for node_cfg in cfg.nodes:
        node = PlanarNode(node_cfg.name, node_cfg.x, node_cfg.y)
        by_name[node_cfg.name] = node
        graph.add_node(node)

    for edge in cfg.edges:
        src, dst = by_name[edge.src], by_name[edge.dst]
        if edge.directed:
            graph.connect(src, dst, edge.weight)
        else:
            graph.connect_undirected(src, dst, edge.weight)
    return graph, by_name


# --- field helpers -----------------------------------------------------------


def _search_config(raw: Any) -> SearchConfig:
    raw = _mapping(raw, "search")
    allowed = {f.name: f for f in fields(SearchConfig)}
    kwargs: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in allowed:
            raise ConfigurationError(f"unknown option {key!r}", field="search")
        if key == "tolerance":
            kwargs[key] = _number(value, "search.tolerance")
        else:
            kwargs[key] = _flag(value, f"search.{key}")
    return SearchConfig(**kwargs)


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError("expected a mapping", field=where)
    return value


def _list(value: Any, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise ConfigurationError("expected a list", field=where)
    return value


def _name(value: Any, where: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)) or value == "":
        raise ConfigurationError("expected a non-empty name", field=where)
    return str(value)


def _known(value: Any, names: set, where: str) -> str:
    name = _name(value, where)
    if name not in names:
        raise ConfigurationError(f"unknown node {name!r}", field=where)
    return name


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"expected a number, got {value!r}", field=where)
    return float(value)


def _flag(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"expected true/false, got {value!r}", field=where)
    return value
