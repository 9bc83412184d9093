"""Value types shared by the graph container and its algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(eq=False, slots=True)
class Node[T]:
    """A graph vertex holding a payload value and its outgoing adjacency list.

    Nodes compare and hash by identity, so two nodes holding equal values are
    still distinct vertices.

    Attributes:
        value: The payload carried by the node.
        index: Position of the node in its graph's node sequence, or -1 while
            the node does not belong to a graph.
        adjacency: Outgoing entries in insertion order. Each entry pairs a
            neighbor with the weight of the edge leading to it.

    """

    value: T
    index: int = -1
    adjacency: list[Adjacency[T]] = field(default_factory=list, repr=False)

    @property
    def neighbors(self) -> list[Node[T]]:
        """Neighbor nodes in adjacency order."""
        return [entry.node for entry in self.adjacency]

    @property
    def weights(self) -> list[int]:
        """Edge weights in adjacency order, parallel to `neighbors`."""
        return [entry.weight for entry in self.adjacency]

    @property
    def degree(self) -> int:
        """Number of outgoing adjacency entries."""
        return len(self.adjacency)


@dataclass(frozen=True, slots=True)
class Adjacency[T]:
    """One outgoing entry of a node's adjacency list."""

    node: Node[T]
    weight: int = 0


@dataclass(frozen=True, slots=True)
class Edge[T]:
    """A derived view of a single adjacency entry.

    Edges are produced on demand and are never stored by the graph.
    """

    source: Node[T]
    target: Node[T]
    weight: int = 0


class TopologicalOrder[T](NamedTuple):
    """Result of a topological sort.

    `order` is None exactly when `possible` is False, i.e. the graph has a cycle.
    """

    order: list[Node[T]] | None
    possible: bool
