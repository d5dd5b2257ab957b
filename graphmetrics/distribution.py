"""
Histogram of shortest path lengths between node pairs.
"""

import logging
from typing import Optional, Tuple

import numpy as np

DistanceDistribution = Tuple[Tuple[int, int], ...]


def distance_distribution(
    distances: np.ndarray,
    directed: bool,
    fully_connected: bool,
    logger: Optional[logging.Logger] = None,
) -> Optional[DistanceDistribution]:
    """Count node pairs at each shortest path length 1..diameter.

    Undirected graphs count each unordered pair once (i < j); directed graphs
    count every ordered pair with i != j. Lengths inside the range with no
    pairs appear with a count of 0.

    Args:
        distances: N x N distance matrix
        directed: Whether the distances came from a directed graph
        fully_connected: Whether every pair is reachable
        logger: Logger instance (optional)

    Returns:
        Tuple of (distance, pair_count) pairs in ascending distance, or None
        when the graph is not fully connected (the distribution is undefined)
    """
    if not fully_connected:
        if logger:
            logger.info("Graph is not fully connected, distance distribution undefined")
        return None

    n = distances.shape[0]
    if n <= 1:
        return ()

    if directed:
        values = distances[~np.eye(n, dtype=bool)]
    else:
        values = distances[np.triu_indices(n, k=1)]

    counts = np.bincount(values.astype(np.int64))
    return tuple((d, int(counts[d])) for d in range(1, len(counts)))
