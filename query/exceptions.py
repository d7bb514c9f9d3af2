# query/exceptions.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Custom exceptions for graph query parsing and evaluation

"""Domain-specific exceptions for graph query processing.

Parsing failures and evaluation failures are kept apart so that callers can
tell a malformed query from a well-formed one that asks about something the
graph cannot answer.
"""


class ParseError(RuntimeError):
    """Exception raised when query parsing fails due to syntax errors."""

    pass


class QueryError(RuntimeError):
    """Exception raised when a parsed query cannot be evaluated.

    Covers unknown function names, wrong argument counts, arguments that
    evaluate to no node, and node ids the graph does not contain.
    """

    pass
