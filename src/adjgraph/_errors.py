"""Exception hierarchy for adjgraph."""


class GraphError(Exception):
    """Base class for all adjgraph errors."""


class EmptyGraphError(GraphError, IndexError):
    """A traversal needs a start node but the graph has no nodes."""


class NodeNotFoundError(GraphError, LookupError):
    """A node passed to the graph does not belong to it."""


class ConfigError(GraphError):
    """Error in adjgraph configuration."""
