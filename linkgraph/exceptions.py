"""
Exception types raised by the linkgraph package.

Every error derives from GraphError so callers can catch the whole family.
Lookup failures also derive from KeyError, and the loopback rejection from
ValueError, so code written against plain containers keeps working.
"""

from typing import Any, Hashable


class GraphError(Exception):
    pass


class NodeNotFoundError(GraphError, KeyError):
    """Raised when an operation references a node that is not in the graph."""

    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(f"The node {node!r} is not part of the graph.")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]


class AlreadyExistsError(GraphError):
    """Raised when explicitly adding a node that is already present."""

    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(f"The node {node!r} already exists in the graph.")


class LinkExistsError(GraphError):
    def __init__(self, start: Hashable, end: Hashable):
        self.start = start
        self.end = end
        super().__init__(f"Cannot add link {start!r} -> {end!r}; link already exists.")


class LinkNotFoundError(GraphError, KeyError):
    def __init__(self, start: Hashable, end: Hashable):
        self.start = start
        self.end = end
        super().__init__(f"The link {start!r} -> {end!r} does not exist.")

    def __str__(self) -> str:
        return self.args[0]


class LoopbackNotAllowedError(GraphError, ValueError):
    def __init__(self, node: Hashable):
        self.node = node
        super().__init__(f"Cannot add a bidirectional link from {node!r} to itself.")


class CorruptedStateError(GraphError, RuntimeError):
    """
    Raised when the outlink and inlink views of a link disagree.

    This never happens in correct single-threaded use. It points at a bug in
    the package or at unsynchronized concurrent mutation, and should not be
    caught and retried.
    """

    def __init__(self, start: Hashable, end: Hashable, detail: Any = None):
        self.start = start
        self.end = end
        message = f"Graph internal state is corrupted at link {start!r} -> {end!r}."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class CostFunctionMissingError(GraphError):
    def __init__(self):
        super().__init__("Path operations need a cost function; the graph was built without one.")
