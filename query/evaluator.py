# query/evaluator.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Query evaluation against a transition graph

"""Evaluates parsed graph queries against a :class:`TransitionGraph`.

Each query function maps onto one graph operation:

    empty()              -> TransitionGraph.is_empty
    selected()           -> TransitionGraph.get_selected
    node(n)              -> TransitionGraph.get_node
    parent(n)            -> TransitionGraph.get_parent_by_id
    child(n)             -> TransitionGraph.get_child_by_id
    is_tau(n)            -> TransitionGraph.is_tau
    children(n)          -> TransitionGraph.children
    non_tau_children(n)  -> TransitionGraph.non_tau_children
    tau_children(n)      -> TransitionGraph.tau_children
    tau_closure(n)       -> TransitionGraph.tau_children_trans_closure

A nested query used as an argument stands for the id of the node it returns.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Tuple

from . import ast_nodes as ast
from .exceptions import QueryError
from core.exceptions import UnknownNodeError
from core.graph import TransitionGraph
from core.node import Node
from utils.logger import get_logger


FUNCTIONS: Dict[str, Tuple[int, Callable[..., Any]]] = {
    "empty": (0, TransitionGraph.is_empty),
    "selected": (0, TransitionGraph.get_selected),
    "node": (1, TransitionGraph.get_node),
    "parent": (1, TransitionGraph.get_parent_by_id),
    "child": (1, TransitionGraph.get_child_by_id),
    "is_tau": (1, TransitionGraph.is_tau),
    "children": (1, TransitionGraph.children),
    "non_tau_children": (1, TransitionGraph.non_tau_children),
    "tau_children": (1, TransitionGraph.tau_children),
    "tau_closure": (1, TransitionGraph.tau_children_trans_closure),
}


class QueryEvaluator(ast.Visitor):
    """Evaluates query ASTs over one graph.

    The evaluator only reads from the graph, so evaluating the same query
    twice without mutating the graph in between yields equal results.

    Attributes:
        graph: Graph the queries are answered from
    """

    def __init__(self, graph: TransitionGraph):
        self.graph = graph

    def evaluate(self, query: ast.Query) -> Any:
        """Evaluate a single query.

        Args:
            query: Parsed query AST

        Returns:
            The graph operation's result: a node, None, a bool or a list of ids

        Raises:
            QueryError: If the query cannot be answered from this graph
        """
        logger = get_logger()
        logger.debug(f"Evaluating query: {query}")

        result = query.accept(self)

        logger.debug(f"Query {query} evaluated to {format_result(result)}")
        return result

    def visit_int(self, n: ast.IntLiteral) -> int:
        return n.value

    def visit_call(self, n: ast.Call) -> Any:
        try:
            arity, operation = FUNCTIONS[n.name]
        except KeyError:
            known = ", ".join(sorted(FUNCTIONS))
            raise QueryError(f"Unknown query function '{n.name}' (known: {known})") from None

        if len(n.args) != arity:
            raise QueryError(
                f"{n.name}() takes {arity} argument{'s' if arity != 1 else ''}, "
                f"got {len(n.args)}"
            )

        node_ids = [self._node_id(n.name, arg) for arg in n.args]

        try:
            return operation(self.graph, *node_ids)
        except UnknownNodeError as e:
            raise QueryError(f"{n}: {e}") from e

    def _node_id(self, function: str, arg: ast.Query) -> int:
        """Reduce an argument expression to a node id."""
        value = arg.accept(self)

        if isinstance(value, Node):
            return value.id
        # bool is an int subclass but names no node
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if value is None:
            raise QueryError(f"Argument {arg} of {function}() names no node")
        raise QueryError(
            f"Argument {arg} of {function}() must be a node id or a node, "
            f"got {format_result(value)}"
        )


def format_result(value: Any) -> str:
    """Render a query result for display.

    Args:
        value: Result returned by :meth:`QueryEvaluator.evaluate`

    Returns:
        ``-`` for no result, ``true``/``false`` for flags, ``[a, b]`` for id
        lists and the node summary for nodes
    """
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return f"[{', '.join(str(v) for v in value)}]"
    return str(value)
