# tests/query_tests/test_query_evaluator.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Test suite for evaluating graph queries against transition graphs

"""Test suite for QueryEvaluator and result formatting."""

import pytest
from core import Edge, Node, NodeInfo, NodeKind, TransitionGraph
from query import QueryError, QueryEvaluator, evaluate, format_result, parse
from utils.graph_reader import load_graph


def results(graph: TransitionGraph, text: str) -> list:
    """Evaluate query text and keep only the results."""
    return [result for _, result in evaluate(graph, text)]


@pytest.fixture
def dump_graph(graph_dump):
    return load_graph(graph_dump)


class TestQueryEvaluation:
    """Each query function maps onto its graph operation."""

    def test_empty(self, dump_graph):
        assert results(dump_graph, "empty()") == [False]
        assert results(TransitionGraph(), "empty()") == [True]

    def test_selected(self, dump_graph):
        (selected,) = results(dump_graph, "selected()")

        assert selected is dump_graph.get_node(1)

    def test_node(self, dump_graph):
        (node,) = results(dump_graph, "node(3)")

        assert node.id == 3
        assert node.info.debug == "output"

    def test_parent_and_child(self, dump_graph):
        parent, child = results(dump_graph, "parent(3); child(0)")

        assert parent.id == 0
        assert child.id == 1

    def test_absent_relatives(self, dump_graph):
        assert results(dump_graph, "parent(0); child(3)") == [None, None]

    def test_is_tau(self, dump_graph):
        assert results(dump_graph, "is_tau(0); is_tau(1)") == [False, True]

    def test_child_id_queries(self, dump_graph):
        assert results(dump_graph, "children(0)") == [[1, 3]]
        assert results(dump_graph, "non_tau_children(0)") == [[3]]
        assert results(dump_graph, "tau_children(0)") == [[1]]

    def test_tau_closure(self, dump_graph):
        assert results(dump_graph, "tau_closure(0)") == [[1, 2]]

    def test_nested_node_argument_uses_its_id(self, dump_graph):
        assert results(dump_graph, "tau_closure(parent(1))") == [[1, 2]]
        assert results(dump_graph, "children(parent(selected()))") == [[1, 3]]

    def test_evaluation_is_repeatable(self, dump_graph):
        evaluator = QueryEvaluator(dump_graph)
        (q,) = parse("tau_closure(0)")

        assert evaluator.evaluate(q) == evaluator.evaluate(q)

    def test_evaluating_on_cycle_terminates(self, tau_cycle_graph):
        assert results(tau_cycle_graph, "tau_closure(0)") == [[1]]


class TestQueryErrors:
    """Queries that cannot be answered raise QueryError."""

    def test_unknown_function(self, dump_graph):
        with pytest.raises(QueryError, match="Unknown query function 'siblings'"):
            results(dump_graph, "siblings(0)")

    @pytest.mark.parametrize("text", ["children()", "selected(0)", "empty(1)"])
    def test_wrong_arity(self, dump_graph, text):
        with pytest.raises(QueryError, match="takes"):
            results(dump_graph, text)

    def test_unknown_node_id(self, dump_graph):
        with pytest.raises(QueryError, match="No node with id 9"):
            results(dump_graph, "node(9)")

    def test_absent_argument(self, dump_graph):
        with pytest.raises(QueryError, match="names no node"):
            results(dump_graph, "children(parent(0))")

    def test_list_argument_rejected(self, dump_graph):
        with pytest.raises(QueryError, match="must be a node id or a node"):
            results(dump_graph, "children(children(0))")

    def test_bool_argument_rejected(self, dump_graph):
        with pytest.raises(QueryError, match="must be a node id or a node"):
            results(dump_graph, "node(is_tau(1))")


class TestFormatResult:
    """Display text for query results."""

    def test_none(self):
        assert format_result(None) == "-"

    def test_flags(self):
        assert format_result(True) == "true"
        assert format_result(False) == "false"

    def test_id_lists(self):
        assert format_result([]) == "[]"
        assert format_result([1, 2, 3]) == "[1, 2, 3]"

    def test_node(self):
        node = Node(2, NodeInfo(NodeKind.DONE), is_tau=True)

        assert format_result(node) == "n2<done> [tau]"


def test_graph_built_by_hand_matches_reader(graph_dump):
    """Queries give the same answers on a hand-built equivalent graph."""
    nodes = [
        Node(0, NodeInfo(NodeKind.ACTION_REQUEST)),
        Node(1, NodeInfo(NodeKind.TAU), is_tau=True, selected=True),
        Node(2, NodeInfo(NodeKind.DONE), is_tau=True),
        Node(3, NodeInfo(NodeKind.DONE)),
    ]
    edges = [Edge(0, 1, is_tau=True), Edge(1, 2, is_tau=True), Edge(0, 3)]
    text = "children(0); tau_closure(0); non_tau_children(0); is_tau(2)"

    assert results(TransitionGraph(nodes, edges), text) == results(load_graph(graph_dump), text)
