# query/__init__.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Query parsing and evaluation components for transition graphs

"""Graph query language for transition graph exploration.

Queries are small function calls over node ids, separated by ``;``:

    children(0); tau_closure(selected()); parent(child(2))

The text is tokenized and parsed with SLY into an AST, which a
:class:`QueryEvaluator` answers from a :class:`core.TransitionGraph`.

Core Functions:
    parse: Converts query text into a list of ASTs
    evaluate: Parses and evaluates query text against a graph

Example:
    >>> from query import evaluate
    >>> for q, result in evaluate(graph, "children(0); selected()"):
    ...     print(q, format_result(result))
"""

from typing import Any, List, Tuple

from .ast_nodes import Query
from .evaluator import QueryEvaluator, format_result
from .exceptions import ParseError, QueryError
from .grammar import _QueryParser
from core.graph import TransitionGraph
from utils.logger import get_logger


def parse(source: str) -> List[Query]:
    """Parse query text into ASTs.

    Uses a fresh parser instance for each invocation.

    Args:
        source: One or more ``;``-separated queries

    Returns:
        Query ASTs in source order

    Raises:
        ParseError: Query text is malformed
    """
    logger = get_logger()
    parser = _QueryParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during query parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def evaluate(graph: TransitionGraph, source: str) -> List[Tuple[Query, Any]]:
    """Parse query text and evaluate every query against a graph.

    Args:
        graph: Graph to answer the queries from
        source: One or more ``;``-separated queries

    Returns:
        (query, result) pairs in source order

    Raises:
        ParseError: Query text is malformed
        QueryError: A query cannot be answered from this graph
    """
    evaluator = QueryEvaluator(graph)
    return [(q, evaluator.evaluate(q)) for q in parse(source)]


__all__ = [
    "parse",
    "evaluate",
    "format_result",
    "QueryEvaluator",
    "ParseError",
    "QueryError",
]
