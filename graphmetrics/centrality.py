"""
Degree and closeness centrality derived from degrees and distances.
"""

import numpy as np


def degree_centralities(degrees: np.ndarray) -> np.ndarray:
    """Divide each degree by N-1, the largest degree possible in a simple graph.

    Returns zeros when N <= 1.
    """
    n = len(degrees)
    if n <= 1:
        return np.zeros(n)
    return np.asarray(degrees, dtype=float) / (n - 1)


def closeness_centralities(distances: np.ndarray) -> np.ndarray:
    """Reciprocal of the mean distance from each node to all others.

    A node that cannot reach every other node has an infinite distance sum
    and gets 0, as does the single node of a one-node graph.
    """
    n = distances.shape[0]
    farness = distances.sum(axis=1)
    closeness = np.zeros(n)
    mask = np.isfinite(farness) & (farness > 0)
    closeness[mask] = (n - 1) / farness[mask]
    return closeness
