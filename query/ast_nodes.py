# query/ast_nodes.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Abstract Syntax Tree node classes for graph queries

"""AST node classes for representing parsed graph queries.

A query is a function call whose argument is either a node id or another
query, e.g. ``tau_closure(parent(4))``.

Node Types:
    IntLiteral: A literal node id
    Call: A named query function applied to its arguments

All nodes support the visitor design pattern for evaluation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern."""

    def visit_int(self, n: IntLiteral): ...

    def visit_call(self, n: Call): ...


@dataclass(frozen=True, slots=True)
class Query:
    """Base class for all query AST nodes."""

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class IntLiteral(Query):
    """Literal node id.

    Attributes:
        value: The integer written in the query
    """

    value: int

    def accept(self, v: Visitor):
        return v.visit_int(self)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Call(Query):
    """Application of a query function.

    Attributes:
        name: Function name, e.g. ``children``
        args: Argument expressions, at most one in the current grammar
    """

    name: str
    args: Tuple[Query, ...] = ()

    def accept(self, v: Visitor):
        return v.visit_call(self)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(str(a) for a in self.args)})"
