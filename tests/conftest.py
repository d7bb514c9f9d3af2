# tests/conftest.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Taurus graph exploration tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common graph fixtures (tau chains, tau cycles, JSON dumps)
"""

import sys
import json
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import query
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def tau_chain_graph():
    """Graph n0 -(tau)-> n1 -(tau)-> n2 -(tau)-> n3 with tau targets.

    Returns:
        TransitionGraph: Four node tau chain
    """
    from core import Edge, Node, NodeInfo, NodeKind, TransitionGraph

    nodes = [Node(0, NodeInfo(NodeKind.TAU), selected=True)]
    nodes += [Node(i, NodeInfo(NodeKind.TAU), is_tau=True) for i in (1, 2)]
    nodes.append(Node(3, NodeInfo(NodeKind.DONE), is_tau=True))
    edges = [Edge(i, i + 1, is_tau=True) for i in range(3)]
    return TransitionGraph(nodes, edges)


@pytest.fixture
def tau_cycle_graph():
    """Graph n0 -(tau)-> n1 -(tau)-> n0 with both nodes tau.

    Returns:
        TransitionGraph: Two node tau cycle
    """
    from core import Edge, Node, NodeInfo, NodeKind, TransitionGraph

    nodes = [
        Node(0, NodeInfo(NodeKind.TAU), is_tau=True),
        Node(1, NodeInfo(NodeKind.TAU), is_tau=True),
    ]
    edges = [Edge(0, 1, is_tau=True), Edge(1, 0, is_tau=True)]
    return TransitionGraph(nodes, edges)


@pytest.fixture
def graph_dump():
    """Back end style dump: a root offering an action, a tau step and two leaves.

    Returns:
        dict: JSON-compatible graph document
    """
    return {
        "nodes": [
            {
                "id": 0,
                "state": "s0",
                "isVisible": True,
                "isTau": False,
                "loc": None,
                "mem": {"x": 1},
                "info": {"kind": "action request", "debug": "main"},
                "env": "env0",
                "arena": "arena0",
                "selected": False,
                "can_step": True,
            },
            {
                "id": 1,
                "isTau": True,
                "isVisible": False,
                "info": {"kind": "tau", "debug": "internal"},
                "selected": True,
                "can_step": True,
            },
            {"id": 2, "isTau": True, "info": {"kind": "done"}},
            {"id": 3, "info": {"kind": "done", "debug": "output"}},
        ],
        "edges": [
            {"from": 0, "to": 1, "isTau": True},
            {"from": 1, "to": 2, "isTau": True},
            {"from": 0, "to": 3, "isTau": False},
        ],
    }


@pytest.fixture
def graph_file(tmp_path, graph_dump):
    """Write ``graph_dump`` to a temporary JSON file.

    Returns:
        Path: Location of the written graph file
    """
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(graph_dump), encoding="utf-8")
    return path
