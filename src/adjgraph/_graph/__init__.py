"""Graph module providing the graph container and its traversals.

This module contains:
- Graph[T]: A mutable, indexed adjacency-list graph
- Node[T], Adjacency, Edge[T]: Vertex, adjacency entry and derived edge types
- dfs, bfs, topological_sort: Traversals over an indexed node sequence
"""

from ._algorithms import bfs, dfs, topological_sort
from ._graph import Graph
from ._types import Adjacency, Edge, Node, TopologicalOrder

__all__ = [
    "Adjacency",
    "Edge",
    "Graph",
    "Node",
    "TopologicalOrder",
    "bfs",
    "dfs",
    "topological_sort",
]
