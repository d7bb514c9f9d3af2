# utils/graph_reader.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# JSON graph dump reader for exploration back end snapshots

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from core.graph import TransitionGraph
from core.node import Edge, Node, NodeInfo, NodeKind
from utils.logger import get_logger


class GraphFormatError(Exception):
    """Exception raised when graph dumps contain invalid format or data."""

    pass


def read_graph(filepath: str) -> TransitionGraph:
    """Read a graph snapshot from a JSON dump file.

    Expected JSON format:
        {
          "nodes": [
            {"id": 0, "isTau": false, "info": {"kind": "tau", "debug": "init"},
             "selected": true, "can_step": true},
            {"id": 1, "isTau": true, "info": {"kind": "done", "debug": ""}}
          ],
          "edges": [
            {"from": 0, "to": 1, "isTau": true}
          ]
        }

    Args:
        filepath: Path to the JSON graph file

    Returns:
        TransitionGraph holding the parsed nodes and edges

    Raises:
        GraphFormatError: If the file is missing or its content is invalid
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise GraphFormatError(f"Graph file not found: {filepath}")

    logger.debug(f"Reading graph file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"Invalid JSON in graph file: {e}")
    except OSError as e:
        raise GraphFormatError(f"Cannot open graph file: {e}")

    graph = load_graph(data)
    logger.graph_loaded(path.name, len(graph.nodes), len(graph.edges))
    return graph


def load_graph(data: Any) -> TransitionGraph:
    """Build a graph from an already decoded dump document.

    Args:
        data: Mapping with ``nodes`` and ``edges`` lists

    Returns:
        TransitionGraph holding the parsed nodes and edges

    Raises:
        GraphFormatError: If the document structure or a record is invalid
    """
    if not isinstance(data, Mapping):
        raise GraphFormatError("Graph document must be a JSON object")

    raw_nodes = data.get("nodes", [])
    raw_edges = data.get("edges", [])
    if not isinstance(raw_nodes, list):
        raise GraphFormatError("'nodes' must be a list")
    if not isinstance(raw_edges, list):
        raise GraphFormatError("'edges' must be a list")

    nodes: List[Node] = []
    for position, record in enumerate(raw_nodes):
        try:
            nodes.append(_parse_node(record))
        except (KeyError, TypeError, ValueError) as e:
            raise GraphFormatError(f"Error parsing node {position}: {e}")

    edges: List[Edge] = []
    for position, record in enumerate(raw_edges):
        try:
            edges.append(_parse_edge(record))
        except (KeyError, TypeError, ValueError) as e:
            raise GraphFormatError(f"Error parsing edge {position}: {e}")

    return TransitionGraph(nodes, edges)


def validate_graph_file(filepath: str) -> TransitionGraph:
    """Validate graph dump format and references.

    Parses the whole file and checks that node ids are unique and every edge
    endpoint names a known node, so queries later on cannot hit dangling
    references.

    Args:
        filepath: Path to the graph file to validate

    Returns:
        The validated graph

    Raises:
        GraphFormatError: If validation fails
    """
    logger = get_logger()
    graph = read_graph(filepath)

    known = set()
    for position, node in enumerate(graph.nodes):
        if node.id in known:
            raise GraphFormatError(f"Duplicate node id {node.id} at node {position}")
        known.add(node.id)

    for position, edge in enumerate(graph.edges):
        for endpoint in (edge.source, edge.target):
            if endpoint not in known:
                raise GraphFormatError(
                    f"Edge {position} references unknown node {endpoint}"
                )

    selected = [node.id for node in graph.nodes if node.selected]
    if len(selected) > 1:
        logger.warning(f"⚠️  Multiple selected nodes {selected}, first one wins")

    logger.validation_result(True, f"Graph file {filepath} is valid")
    return graph


def _parse_node(record: Dict[str, Any]) -> Node:
    """Parse a single node record."""
    if not isinstance(record, Mapping):
        raise TypeError("node record must be an object")

    info_record = record["info"]
    if not isinstance(info_record, Mapping):
        raise TypeError("'info' must be an object")

    return Node(
        id=_parse_id(record["id"], "id"),
        info=NodeInfo(
            kind=NodeKind.from_label(info_record["kind"]),
            debug=str(info_record.get("debug", "")),
        ),
        state=record.get("state"),
        is_visible=_parse_flag(record, "isVisible", True),
        is_tau=_parse_flag(record, "isTau", False),
        location=record.get("loc"),
        memory=record.get("mem"),
        environment=str(record.get("env", "")),
        arena=str(record.get("arena", "")),
        selected=_parse_flag(record, "selected", False),
        can_step=_parse_flag(record, "can_step", False),
    )


def _parse_edge(record: Dict[str, Any]) -> Edge:
    """Parse a single edge record."""
    if not isinstance(record, Mapping):
        raise TypeError("edge record must be an object")

    return Edge(
        source=_parse_id(record["from"], "from"),
        target=_parse_id(record["to"], "to"),
        is_tau=_parse_flag(record, "isTau", False),
    )


def _parse_id(value: Any, key: str) -> int:
    """Parse a non-negative integer node id."""
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"'{key}' must be non-negative, got {value}")
    return value


def _parse_flag(record: Mapping, key: str, default: bool) -> bool:
    """Parse an optional boolean flag."""
    value = record.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean, got {value!r}")
    return value
