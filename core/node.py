# core/node.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Node and edge records of a labelled transition system

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class NodeKind(Enum):
    """Kind of the step a node offers next.

    Values mirror the labels used by exploration back ends, so a node record
    can be mapped with ``NodeKind(label)`` or :meth:`from_label`.

    Values:
        TAU: The next step is unobservable
        ACTION_REQUEST: The system offers a choice of observable actions
        DONE: Terminal node, no further steps
    """

    TAU = "tau"
    ACTION_REQUEST = "action request"
    DONE = "done"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> NodeKind:
        """Map a wire label to its kind.

        Args:
            label: Step kind label, e.g. ``"action request"``

        Returns:
            Matching NodeKind member

        Raises:
            ValueError: If the label names no known kind
        """
        for kind in cls:
            if kind.value == label:
                return kind
        raise ValueError(f"Unknown node kind: {label!r}")


@dataclass(frozen=True)
class NodeInfo:
    """Classification of a node's outgoing step plus a debug label."""

    kind: NodeKind
    debug: str = ""


@dataclass
class Node:
    """A single execution state in a transition graph.

    Nodes are produced by an exploration back end and consumed as-is. The
    ``state``, ``memory`` and ``location`` payloads are passed through
    untouched. ``selected`` is the only field consumers are expected to
    toggle after construction.

    Attributes:
        id: Identifier, unique within one graph snapshot
        info: Kind of the outgoing step and a free-text label
        state: Serialized execution state, or None
        is_visible: Whether consumers should display this node
        is_tau: Whether the incoming step was unobservable
        location: Source position annotation, or None
        memory: Memory snapshot payload
        environment: Execution context tag
        arena: Memory arena tag
        selected: Whether this node is the current focus
        can_step: Whether further stepping is possible from here
    """

    id: int
    info: NodeInfo
    state: Optional[str] = None
    is_visible: bool = True
    is_tau: bool = False
    location: Optional[Any] = None
    memory: Any = None
    environment: str = ""
    arena: str = ""
    selected: bool = False
    can_step: bool = False

    @property
    def kind(self) -> NodeKind:
        return self.info.kind

    def is_terminal(self) -> bool:
        """True iff the node's outgoing step kind is DONE."""
        return self.info.kind is NodeKind.DONE

    def __str__(self) -> str:
        flags = []
        if self.is_tau:
            flags.append("tau")
        if self.selected:
            flags.append("selected")
        if not self.is_visible:
            flags.append("hidden")
        if self.can_step:
            flags.append("can_step")
        flags_str = f" [{', '.join(flags)}]" if flags else ""
        return f"n{self.id}<{self.info.kind}>{flags_str}"


@dataclass(frozen=True)
class Edge:
    """Directed transition between two nodes.

    Attributes:
        source: Id of the node the transition leaves
        target: Id of the node the transition enters
        is_tau: Whether this transition is unobservable
    """

    source: int
    target: int
    is_tau: bool = False

    def __str__(self) -> str:
        arrow = "-(tau)->" if self.is_tau else "->"
        return f"n{self.source} {arrow} n{self.target}"

