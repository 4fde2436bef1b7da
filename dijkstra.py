from __future__ import annotations

import logging
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, Hashable, List, Optional, Tuple

from errors import NodeNotFoundError, NoPathFoundError
from graph import Graph, GraphNode


logger = logging.getLogger(__name__)


@dataclass(order=True)
class SearchNode:
    """One candidate path found while searching.

    ``node`` is the last graph node of the path, ``cost`` the summed edge
    weights from the start node, and ``predecessor`` the search node of the
    path one edge shorter (None for the start). Ordering uses ``cost`` only,
    so the cheapest candidate is popped first from a heap.
    """

    cost: float
    node: GraphNode = field(compare=False)
    predecessor: Optional["SearchNode"] = field(default=None, compare=False)


class DijkstraGraph(Graph):
    """Graph with single-pair shortest paths computed by Dijkstra's algorithm.

    Edge weights must be non-negative, which the base graph enforces on
    insertion.
    """

    def compute_shortest_path(self, start: Hashable, end: Hashable) -> SearchNode:
        """Return the search node ending the cheapest path from start to end.

        Raises NodeNotFoundError if start or end is not in the graph and
        NoPathFoundError if end cannot be reached from start.
        """
        for value in (start, end):
            if not self.contains_node(value):
                raise NodeNotFoundError(value)

        end_node = self.get_node(end)
        frontier: List[SearchNode] = [SearchNode(0.0, self.get_node(start))]
        finalized: Dict[GraphNode, SearchNode] = {}

        while frontier:
            current = heappop(frontier)
            if current.node is end_node:
                logger.debug(
                    "Shortest path %r->%r found with cost %s after finalizing %d nodes.",
                    start,
                    end,
                    current.cost,
                    len(finalized),
                )
                return current

            # Stale entry: a cheaper path to this node was already expanded.
            if current.node in finalized:
                continue

            finalized[current.node] = current
            for edge in current.node.edges_leaving:
                candidate = current.cost + float(edge.weight)
                heappush(frontier, SearchNode(candidate, edge.successor, current))

        logger.debug(
            "Frontier exhausted after finalizing %d nodes without reaching %r from %r.",
            len(finalized),
            end,
            start,
        )
        raise NoPathFoundError(start, end)

    def shortest_path(self, start: Hashable, end: Hashable) -> Tuple[float, List[Hashable]]:
        """Recover both length and explicit path between start and end."""
        search_node: Optional[SearchNode] = self.compute_shortest_path(start, end)
        cost = search_node.cost

        path: List[Hashable] = []
        while search_node is not None:
            path.append(search_node.node.data)
            search_node = search_node.predecessor
        path.reverse()
        return cost, path

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Hashable]:
        return self.shortest_path(start, end)[1]

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> float:
        return self.compute_shortest_path(start, end).cost
