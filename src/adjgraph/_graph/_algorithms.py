"""Traversal algorithms over an indexed node sequence.

Every function takes the graph's node sequence and relies on each node's
`index` matching its position in that sequence.
"""

import logging
from collections import deque
from collections.abc import Iterator, Sequence

from adjgraph._errors import EmptyGraphError, NodeNotFoundError

from ._types import Node, TopologicalOrder

logger = logging.getLogger(__name__)


def _resolve_start[T](nodes: Sequence[Node[T]], start: Node[T] | None) -> Node[T]:
    if not nodes:
        msg = "Cannot traverse an empty graph"
        raise EmptyGraphError(msg)
    if start is None:
        return nodes[0]
    if not 0 <= start.index < len(nodes) or nodes[start.index] is not start:
        msg = f"Start node {start!r} does not belong to this graph"
        raise NodeNotFoundError(msg)
    return start


def dfs[T](nodes: Sequence[Node[T]], start: Node[T] | None = None) -> list[Node[T]]:
    """Traverse depth-first from a start node, returning nodes in pre-order.

    Neighbors are explored in adjacency order. Only nodes reachable from the
    start node are returned.

    Args:
        nodes: The graph's node sequence.
        start: Node to start from. Defaults to the first node.

    Returns:
        Nodes in the order they were first visited.

    Raises:
        EmptyGraphError: If `nodes` is empty.
        NodeNotFoundError: If `start` is not part of `nodes`.

    """
    root = _resolve_start(nodes, start)
    visited = [False] * len(nodes)
    result: list[Node[T]] = [root]
    visited[root.index] = True
    # One adjacency iterator per node on the current path
    stack: list[Iterator[Node[T]]] = [iter(root.neighbors)]

    while stack:
        for neighbor in stack[-1]:
            if not visited[neighbor.index]:
                visited[neighbor.index] = True
                result.append(neighbor)
                stack.append(iter(neighbor.neighbors))
                break
        else:
            stack.pop()

    return result


def bfs[T](nodes: Sequence[Node[T]], start: Node[T] | None = None) -> list[Node[T]]:
    """Traverse breadth-first from a start node.

    Nodes are marked visited when enqueued, so each node enters the queue at
    most once, and are appended to the result when dequeued.

    Args:
        nodes: The graph's node sequence.
        start: Node to start from. Defaults to the first node.

    Returns:
        Nodes in dequeue order.

    Raises:
        EmptyGraphError: If `nodes` is empty.
        NodeNotFoundError: If `start` is not part of `nodes`.

    """
    root = _resolve_start(nodes, start)
    visited = [False] * len(nodes)
    visited[root.index] = True
    queue = deque([root])
    result: list[Node[T]] = []

    while queue:
        current = queue.popleft()
        result.append(current)
        for neighbor in current.neighbors:
            if not visited[neighbor.index]:
                visited[neighbor.index] = True
                queue.append(neighbor)

    return result


def topological_sort[T](nodes: Sequence[Node[T]]) -> TopologicalOrder[T]:
    """Order all nodes so that every edge points from an earlier to a later node.

    Every node is tried as a root in sequence order, so disconnected parts of
    the graph are covered. A node is finished once all of its neighbors are;
    the returned order is the reverse of finish order.

    Args:
        nodes: The graph's node sequence.

    Returns:
        `TopologicalOrder(order, True)` for an acyclic graph, or
        `TopologicalOrder(None, False)` as soon as a cycle is found.

    """
    visited = [False] * len(nodes)
    in_stack = [False] * len(nodes)
    finished: list[Node[T]] = []

    for root in nodes:
        if visited[root.index]:
            continue

        visited[root.index] = True
        in_stack[root.index] = True
        path: list[Node[T]] = [root]
        stack: list[Iterator[Node[T]]] = [iter(root.neighbors)]

        while stack:
            for neighbor in stack[-1]:
                if not visited[neighbor.index]:
                    visited[neighbor.index] = True
                    in_stack[neighbor.index] = True
                    path.append(neighbor)
                    stack.append(iter(neighbor.neighbors))
                    break
                if in_stack[neighbor.index]:
                    logger.debug(f"Cycle detected: {path[-1]!r} -> {neighbor!r}")
                    return TopologicalOrder(order=None, possible=False)
            else:
                stack.pop()
                done = path.pop()
                in_stack[done.index] = False
                finished.append(done)

    finished.reverse()
    return TopologicalOrder(order=finished, possible=True)
