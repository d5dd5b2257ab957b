"""
Error taxonomy for the graph metrics engine.
"""

__all__ = [
    "GraphMetricsError",
    "UnsupportedGraphKindError",
    "NumericInstabilityError",
]


class GraphMetricsError(Exception):
    """Base error for metric computation."""

    pass


class UnsupportedGraphKindError(GraphMetricsError):
    """Metric is not defined for this kind of graph (e.g. clustering on a digraph)."""

    pass


class NumericInstabilityError(GraphMetricsError):
    """Dense eigensolve failed or produced no usable real dominant eigenpair."""

    def __init__(self, message: str, node_count: int, directed: bool):
        self.node_count = node_count
        self.directed = directed
        kind = "directed" if directed else "undirected"
        super().__init__(f"{message} (nodes={node_count}, {kind})")
