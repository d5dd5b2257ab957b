"""
Local clustering coefficients for undirected, unweighted graphs.
"""

from typing import Optional, Tuple

import numpy as np

from .errors import UnsupportedGraphKindError
from .graph import Graph


def clustering_coefficients(graph: Graph, adjacency: Optional[np.ndarray] = None) -> np.ndarray:
    """Compute the local clustering coefficient of every node.

    The number of triangles through node i is the i-th diagonal entry of
    A @ triu(A) @ A, where A has no self-loops. Nodes of degree 0 or 1 cannot
    close a triangle and get 0.

    Args:
        graph: Undirected graph
        adjacency: Precomputed self-loop-free adjacency matrix (optional)

    Returns:
        Float array of length N with values in [0, 1]

    Raises:
        UnsupportedGraphKindError: If the graph is directed
    """
    if graph.directed:
        raise UnsupportedGraphKindError("Clustering coefficients require an undirected graph")

    adj = graph.adjacency_matrix() if adjacency is None else adjacency
    degrees = adj.sum(axis=1)
    triangles = np.diag(adj @ np.triu(adj) @ adj).astype(float)
    possible = degrees * (degrees - 1) / 2.0

    coefficients = np.zeros(graph.node_count)
    mask = degrees > 1
    coefficients[mask] = triangles[mask] / possible[mask]
    return coefficients


def average_clustering(
    graph: Graph, adjacency: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, float]:
    """Return local coefficients and their arithmetic mean (0.0 for an empty graph)."""
    coefficients = clustering_coefficients(graph, adjacency)
    mean = float(coefficients.mean()) if coefficients.size else 0.0
    return coefficients, mean
