# core/exceptions.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Exceptions raised by the transition graph model


class UnknownNodeError(IndexError):
    """Raised when a node id does not name a node of the graph.

    Passing an unknown id, or querying through an edge whose endpoint names
    no node, is a caller contract violation. It belongs to the index error
    family so callers that guard list indexing keep working.
    """

    def __init__(self, node_id: int):
        super().__init__(f"No node with id {node_id} in graph")
        self.node_id = node_id
