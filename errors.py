from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for errors raised by the graph and its shortest-path search."""


class NodeNotFoundError(GraphError, LookupError):
    def __init__(self, value: Hashable) -> None:
        super().__init__(f"Node {value!r} does not exist in the graph.")
        self.value = value


class NoPathFoundError(GraphError, LookupError):
    def __init__(self, start: Hashable, end: Hashable) -> None:
        super().__init__(f"No path between {start!r} and {end!r}.")
        self.start = start
        self.end = end


class InvalidWeightError(GraphError, ValueError):
    def __init__(self, predecessor: Hashable, successor: Hashable, weight: float) -> None:
        super().__init__(
            f"Edge {predecessor!r}->{successor!r} has weight {weight}; "
            "shortest paths require finite, non-negative weights."
        )
        self.weight = weight


class NegativeWeightError(InvalidWeightError):
    pass
