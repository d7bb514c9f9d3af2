# core/__init__.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Core module public API for the transition graph model

"""Core data model for labelled transition system exploration.

A labelled transition system (LTS) is a graph of execution states connected
by transitions, some observable and some unobservable (tau). This package
holds the in-memory representation an exploration front end uses to track
the current state, query parents and children, and collapse runs of tau
steps into their transitive closure.

Nodes are produced elsewhere (an interpreter, stepper or debugger back end)
and are consumed here as already-constructed records. Payloads such as the
serialized state, memory snapshot and source location are never inspected.

Primary Components:
    Node: One execution state with its flags and opaque payloads
    NodeInfo: Outgoing step kind and debug label of a node
    NodeKind: Step kinds (tau, action request, done)
    Edge: Directed transition between two node ids
    TransitionGraph: Owned node/edge collection with traversal queries
    UnknownNodeError: Raised for node ids the graph does not contain

Example:
    >>> from core import Edge, Node, NodeInfo, NodeKind, TransitionGraph
    >>> n0 = Node(0, NodeInfo(NodeKind.TAU))
    >>> n1 = Node(1, NodeInfo(NodeKind.DONE), is_tau=True)
    >>> graph = TransitionGraph([n0, n1], [Edge(0, 1, is_tau=True)])
    >>> graph.tau_children_trans_closure(0)
    [1]
"""

from .exceptions import UnknownNodeError
from .graph import TransitionGraph
from .node import Edge, Node, NodeInfo, NodeKind

__all__ = [
    "Node",
    "NodeInfo",
    "NodeKind",
    "Edge",
    "TransitionGraph",
    "UnknownNodeError",
]

__version__ = "1.0.0"
__description__ = "Core components for labelled transition system exploration"
