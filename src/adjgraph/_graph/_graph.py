"""Mutable in-memory graph container."""

import logging
from collections.abc import Iterator
from typing import Self

from adjgraph._config import GraphOptions

from ._algorithms import bfs, dfs, topological_sort
from ._types import Adjacency, Edge, Node, TopologicalOrder

logger = logging.getLogger(__name__)


class Graph[T]:
    """A directed or undirected, weighted or unweighted graph.

    Nodes are kept in insertion order and every node's `index` is its current
    position in that order. Edges live only as adjacency entries owned by
    their source node; an undirected edge is stored as two independent
    entries, one on each endpoint.

    Mutations involving nodes or edges that are not in the graph are no-ops.

    Example:
        >>> graph = Graph[str](directed=True)
        >>> a, b = graph.add_node("a"), graph.add_node("b")
        >>> graph.add_edge(a, b)
        >>> [n.value for n in graph.topological_sort().order]
        ['a', 'b']

    """

    __slots__ = ("_directed", "_nodes", "_weighted")

    def __init__(self, *, directed: bool = True, weighted: bool = False) -> None:
        self._directed = directed
        self._weighted = weighted
        self._nodes: list[Node[T]] = []

    @classmethod
    def from_options(cls, options: GraphOptions) -> Self:
        """Create an empty graph configured by `options`."""
        return cls(directed=options.directed, weighted=options.weighted)

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    @property
    def nodes(self) -> tuple[Node[T], ...]:
        """All nodes in index order."""
        return tuple(self._nodes)

    def _reindex(self) -> None:
        for i, node in enumerate(self._nodes):
            node.index = i

    def _owns(self, node: Node[T]) -> bool:
        return 0 <= node.index < len(self._nodes) and self._nodes[node.index] is node

    def add_node(self, value: T) -> Node[T]:
        """Append a new node holding `value` and return it."""
        node = Node(value)
        self._nodes.append(node)
        self._reindex()
        logger.debug(f"Added node {node!r}")
        return node

    def remove_node(self, node: Node[T]) -> None:
        """Remove `node` and every adjacency entry pointing at it.

        Does nothing if `node` is not in the graph.
        """
        if not self._owns(node):
            logger.debug(f"Ignoring removal of foreign node {node!r}")
            return

        del self._nodes[node.index]
        node.index = -1
        self._reindex()

        for other in self._nodes:
            other.adjacency = [entry for entry in other.adjacency if entry.node is not node]
        logger.debug(f"Removed node {node!r}")

    def add_edge(self, source: Node[T], target: Node[T], weight: int = 0) -> None:
        """Add an edge from `source` to `target`.

        Undirected graphs also get the reverse entry with the same weight.
        Duplicate edges are kept as separate entries. In an unweighted graph
        `weight` is ignored and stored as 0.

        Args:
            source: Node the edge starts from.
            target: Node the edge leads to.
            weight: Edge weight, used only by weighted graphs.

        """
        if not (self._owns(source) and self._owns(target)):
            logger.warning(f"Ignoring edge {source!r} -> {target!r}: endpoint not in graph")
            return

        if not self._weighted:
            weight = 0
        source.adjacency.append(Adjacency(target, weight))
        if not self._directed:
            target.adjacency.append(Adjacency(source, weight))
        logger.debug(f"Added edge {source!r} -> {target!r} (weight={weight})")

    def remove_edge(self, source: Node[T], target: Node[T]) -> bool:
        """Remove the first adjacency entry of `source` pointing at `target`.

        Only `source`'s adjacency list is touched, also for undirected graphs:
        removing both directions takes a second call with the endpoints
        swapped.

        Returns:
            True if an entry was removed, False if there was none.

        """
        for i, entry in enumerate(source.adjacency):
            if entry.node is target:
                del source.adjacency[i]
                logger.debug(f"Removed edge {source!r} -> {target!r}")
                return True
        logger.debug(f"No edge {source!r} -> {target!r} to remove")
        return False

    def node(self, index: int) -> Node[T] | None:
        """Get the node at `index`, or None if the index is out of range."""
        if 0 <= index < len(self._nodes):
            return self._nodes[index]
        return None

    def edge(self, source_index: int, target_index: int) -> Edge[T] | None:
        """Look up the edge between the nodes at two positions.

        Args:
            source_index: Position of the source node.
            target_index: Position of the target node.

        Returns:
            An Edge for the first adjacency entry of the source pointing at the
            target, or None if either index is out of range or no such entry
            exists.

        """
        source = self.node(source_index)
        target = self.node(target_index)
        if source is None or target is None:
            return None

        for entry in source.adjacency:
            if entry.node is target:
                return Edge(source, target, entry.weight)
        return None

    def edges(self) -> list[Edge[T]]:
        """List one Edge per adjacency entry, in node order then adjacency order.

        Undirected edges appear once in each direction.
        """
        return [Edge(node, entry.node, entry.weight) for node in self._nodes for entry in node.adjacency]

    def dfs(self, start: Node[T] | None = None) -> list[Node[T]]:
        """Depth-first pre-order from `start` (default: the first node).

        Raises:
            EmptyGraphError: If the graph has no nodes.
            NodeNotFoundError: If `start` is not in the graph.

        """
        return dfs(self._nodes, start)

    def bfs(self, start: Node[T] | None = None) -> list[Node[T]]:
        """Breadth-first order from `start` (default: the first node).

        Raises:
            EmptyGraphError: If the graph has no nodes.
            NodeNotFoundError: If `start` is not in the graph.

        """
        return bfs(self._nodes, start)

    def topological_sort(self) -> TopologicalOrder[T]:
        """Order all nodes so that every edge points forward.

        Returns:
            `(order, True)` for an acyclic graph, `(None, False)` otherwise.

        """
        return topological_sort(self._nodes)

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        """Check if a node belongs to the graph."""
        return isinstance(node, Node) and self._owns(node)

    def __iter__(self) -> Iterator[Node[T]]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(directed={self._directed}, weighted={self._weighted}, nodes={len(self._nodes)})"
