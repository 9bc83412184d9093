"""In-memory graph container with DFS, BFS and topological ordering."""

__all__ = [
    "Adjacency",
    "ConfigError",
    "Edge",
    "EmptyGraphError",
    "Graph",
    "GraphError",
    "GraphOptions",
    "Node",
    "NodeNotFoundError",
    "TopologicalOrder",
    "bfs",
    "dfs",
    "find_pyproject_toml",
    "get_options",
    "load_options",
    "topological_sort",
]

from ._config import GraphOptions, find_pyproject_toml, get_options, load_options
from ._errors import ConfigError, EmptyGraphError, GraphError, NodeNotFoundError
from ._graph import Adjacency, Edge, Graph, Node, TopologicalOrder, bfs, dfs, topological_sort
