from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Iterator, List, Tuple

import networkx as nx

from errors import InvalidWeightError, NegativeWeightError, NodeNotFoundError


Weight = numbers.Number


@dataclass(eq=False)
class GraphNode:
    data: Hashable
    edges_leaving: List["GraphEdge"] = field(default_factory=list)
    edges_entering: List["GraphEdge"] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"GraphNode({self.data!r})"


@dataclass(eq=False)
class GraphEdge:
    predecessor: GraphNode
    successor: GraphNode
    weight: Weight


class Graph:
    """Directed weighted graph keyed by node value.

    Nodes are unique by equality of their data; at most one edge exists per
    ordered pair of nodes, so inserting it again only updates its weight.
    """

    def __init__(
        self,
        nodes: Iterable[Hashable] = (),
        edges: Iterable[Tuple[Hashable, Hashable, Weight]] = (),
    ) -> None:
        self._nodes: Dict[Hashable, GraphNode] = {}
        self._edge_count = 0

        for node in nodes:
            self.insert_node(node)
        for origin, target, weight in edges:
            for endpoint in (origin, target):
                if endpoint not in self._nodes:
                    raise NodeNotFoundError(endpoint)
            self.insert_edge(origin, target, weight)

    @property
    def nodes(self) -> List[Hashable]:
        return list(self._nodes)

    def insert_node(self, data: Hashable) -> bool:
        if data in self._nodes:
            return False
        self._nodes[data] = GraphNode(data)
        return True

    def remove_node(self, data: Hashable) -> bool:
        node = self._nodes.pop(data, None)
        if node is None:
            return False

        for edge in node.edges_leaving:
            if edge.successor is not node:
                edge.successor.edges_entering.remove(edge)
        for edge in node.edges_entering:
            if edge.predecessor is not node:
                edge.predecessor.edges_leaving.remove(edge)
        removed = {id(edge) for edge in node.edges_leaving + node.edges_entering}
        self._edge_count -= len(removed)
        return True

    def contains_node(self, data: Hashable) -> bool:
        return data in self._nodes

    def get_node(self, data: Hashable) -> GraphNode:
        try:
            return self._nodes[data]
        except KeyError:
            raise NodeNotFoundError(data) from None

    def get_node_count(self) -> int:
        return len(self._nodes)

    def is_empty(self) -> bool:
        return not self._nodes

    def _find_edge(self, origin: GraphNode, target: GraphNode) -> GraphEdge | None:
        return next(
            (edge for edge in origin.edges_leaving if edge.successor is target), None
        )

    def insert_edge(self, pred: Hashable, succ: Hashable, weight: Weight) -> bool:
        """Insert the edge pred->succ or update its weight if it already exists.

        Returns False when either endpoint is not a node of the graph. The
        weight may be any number ``float()`` converts (int, float, Decimal,
        Fraction); it must be finite and non-negative.
        """
        if isinstance(weight, bool) or not isinstance(weight, numbers.Number):
            raise TypeError(f"Edge weight must be a number, got {weight!r}.")
        try:
            value = float(weight)
        except TypeError:
            raise TypeError(f"Edge weight {weight!r} is not convertible to float.") from None
        except ValueError:
            raise InvalidWeightError(pred, succ, weight) from None
        if not math.isfinite(value):
            raise InvalidWeightError(pred, succ, weight)
        if value < 0:
            raise NegativeWeightError(pred, succ, weight)

        origin = self._nodes.get(pred)
        target = self._nodes.get(succ)
        if origin is None or target is None:
            return False

        existing = self._find_edge(origin, target)
        if existing is not None:
            existing.weight = weight
            return True

        edge = GraphEdge(predecessor=origin, successor=target, weight=weight)
        origin.edges_leaving.append(edge)
        target.edges_entering.append(edge)
        self._edge_count += 1
        return True

    def remove_edge(self, pred: Hashable, succ: Hashable) -> bool:
        origin = self._nodes.get(pred)
        target = self._nodes.get(succ)
        if origin is None or target is None:
            return False

        edge = self._find_edge(origin, target)
        if edge is None:
            return False
        origin.edges_leaving.remove(edge)
        target.edges_entering.remove(edge)
        self._edge_count -= 1
        return True

    def contains_edge(self, pred: Hashable, succ: Hashable) -> bool:
        origin = self._nodes.get(pred)
        target = self._nodes.get(succ)
        if origin is None or target is None:
            return False
        return self._find_edge(origin, target) is not None

    def get_edge(self, pred: Hashable, succ: Hashable) -> Weight:
        edge = self._find_edge(self.get_node(pred), self.get_node(succ))
        if edge is None:
            raise KeyError(f"Edge {pred!r}->{succ!r} not present in graph.")
        return edge.weight

    def get_edge_count(self) -> int:
        return self._edge_count

    def edges_leaving(self, data: Hashable) -> List[GraphEdge]:
        return list(self.get_node(data).edges_leaving)

    def successors(self, data: Hashable) -> List[Tuple[Hashable, Weight]]:
        return [(edge.successor.data, edge.weight) for edge in self.edges_leaving(data)]

    def edges(self) -> Iterator[Tuple[Hashable, Hashable, Weight]]:
        for node in self._nodes.values():
            for edge in node.edges_leaving:
                yield node.data, edge.successor.data, edge.weight

    def path_cost(self, path: List[Hashable]) -> float:
        """Return the total cost of walking along the given node sequence."""
        if len(path) < 2:
            return 0.0

        total_cost = 0.0
        for u, v in zip(path[:-1], path[1:]):
            if not self.contains_edge(u, v):
                raise ValueError(f"Edge {u}->{v} not present in graph.")
            total_cost += float(self.get_edge(u, v))
        return total_cost

    def to_networkx(self) -> nx.DiGraph:
        g = nx.DiGraph()
        g.add_nodes_from(self._nodes)
        for origin, target, weight in self.edges():
            g.add_edge(origin, target, weight=weight)
        return g
