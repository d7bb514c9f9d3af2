# core/graph.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Transition graph with selection tracking and tau closure queries

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Set

from .exceptions import UnknownNodeError
from .node import Edge, Node
from utils.logger import get_logger


class TransitionGraph:
    """Owned, mutable collection of nodes and directed edges of an LTS.

    The graph keeps the node and edge sequences it is given and never copies
    or validates their content. Nodes are looked up by id through a table
    built whenever the sequences are installed, so storage order does not
    have to match node ids. The graph is only mutated wholesale through
    :meth:`replace` and :meth:`clear`; the sequences must not be mutated
    behind its back.

    Queries never fail on "not found": a missing parent, child or selection
    is reported as None and a missing edge set as an empty list. Unknown node
    ids are caller errors and raise :class:`UnknownNodeError`.

    Attributes:
        nodes: Node sequence, in producer order
        edges: Edge sequence, in producer order
    """

    def __init__(
        self, nodes: Optional[List[Node]] = None, edges: Optional[List[Edge]] = None
    ) -> None:
        self.nodes: List[Node] = []
        self.edges: List[Edge] = []
        self._index: Dict[int, Node] = {}
        self._install(nodes if nodes is not None else [], edges if edges is not None else [])

    def _install(self, nodes: List[Node], edges: List[Edge]) -> None:
        self.nodes = nodes
        self.edges = edges
        # Later duplicates never shadow the first node with an id
        index: Dict[int, Node] = {}
        for node in nodes:
            index.setdefault(node.id, node)
        self._index = index

        get_logger().debug(
            f"Graph installed with {len(nodes)} nodes and {len(edges)} edges"
        )

    # Lifecycle

    def is_empty(self) -> bool:
        return len(self.nodes) == 0

    def clear(self) -> None:
        """Discard every node and edge."""
        get_logger().debug("Clearing graph")
        self._install([], [])

    def replace(self, nodes: List[Node], edges: List[Edge]) -> None:
        """Swap in a new snapshot of nodes and edges.

        Args:
            nodes: New node sequence, owned by the graph from now on
            edges: New edge sequence, owned by the graph from now on
        """
        get_logger().debug("Replacing graph contents")
        self._install(nodes, edges)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    # Node lookup

    def get_node(self, node_id: int) -> Node:
        """Return the node with the given id.

        Raises:
            UnknownNodeError: If no node has this id
        """
        try:
            return self._index[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def get_selected(self) -> Optional[Node]:
        """Return the focused node, or None if nothing is selected.

        Exclusivity of the ``selected`` flag is not checked. When several
        nodes carry it, the first one in sequence order wins.
        """
        for node in self.nodes:
            if node.selected:
                return node
        return None

    def is_tau(self, node_id: int) -> bool:
        return self.get_node(node_id).is_tau

    # Edge queries

    def _first_edge(self, *, source: Optional[int] = None, target: Optional[int] = None) -> Optional[Edge]:
        for edge in self.edges:
            if source is not None and edge.source != source:
                continue
            if target is not None and edge.target != target:
                continue
            return edge
        return None

    def get_parent_by_id(self, node_id: int) -> Optional[Node]:
        """Return the source node of the first edge entering ``node_id``.

        Args:
            node_id: Id of the child node

        Returns:
            Parent node, or None when no edge enters ``node_id``
        """
        edge = self._first_edge(target=node_id)
        if edge is None:
            return None
        return self.get_node(edge.source)

    def get_child_by_id(self, node_id: int) -> Optional[Node]:
        """Return the target node of the first edge leaving ``node_id``.

        Args:
            node_id: Id of the parent node

        Returns:
            Child node, or None when no edge leaves ``node_id``
        """
        edge = self._first_edge(source=node_id)
        if edge is None:
            return None
        return self.get_node(edge.target)

    def children(self, node_id: int) -> List[int]:
        """Ids of all edge targets leaving ``node_id``, in edge order.

        Parallel edges yield repeated ids.
        """
        return [e.target for e in self.edges if e.source == node_id]

    def non_tau_children(self, node_id: int) -> List[int]:
        """Children reached through edges that are not themselves tau."""
        return [e.target for e in self.edges if e.source == node_id and not e.is_tau]

    def tau_children(self, node_id: int) -> List[int]:
        """Children whose own node is flagged tau.

        Unlike :meth:`non_tau_children`, this filters on the target node's
        ``is_tau`` flag and ignores the edge flag.
        """
        return [
            e.target
            for e in self.edges
            if e.source == node_id and self.is_tau(e.target)
        ]

    def tau_children_trans_closure(self, node_id: int) -> List[int]:
        """Every node reachable from ``node_id`` through tau children.

        Uses an explicit worklist, so tau cycles terminate and the stack
        depth does not grow with the graph. Immediate tau children come first
        in edge order, followed by nodes discovered further down. The origin
        is never part of the result, even when a tau cycle leads back to it.

        Args:
            node_id: Id of the node to start from

        Returns:
            Ids of reachable tau nodes without duplicates
        """
        logger = get_logger()

        seen: Set[int] = {node_id}
        closure: List[int] = []
        worklist: List[int] = [node_id]

        while worklist:
            current = worklist.pop()
            discovered = []
            for child in self.tau_children(current):
                if child in seen:
                    continue
                seen.add(child)
                discovered.append(child)

            if discovered:
                logger.closure_expanded(current, discovered)
            closure.extend(discovered)
            # Reverse so the first discovered child is expanded first
            worklist.extend(reversed(discovered))

        logger.debug(f"Tau closure of n{node_id}: {closure}")
        return closure

    def __str__(self) -> str:
        return f"TransitionGraph({len(self.nodes)} nodes, {len(self.edges)} edges)"
