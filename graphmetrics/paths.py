"""
All-pairs shortest path lengths by breadth-first search from every node.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import networkx as nx
import numpy as np

from .graph import Graph


def _fill_row(G: nx.Graph, source: int, distances: np.ndarray) -> None:  # noqa: N803
    # Each call owns row `source` exclusively
    for target, length in nx.single_source_shortest_path_length(G, source).items():
        distances[source, target] = length


def distance_matrix(
    graph: Graph, workers: int = 1, logger: Optional[logging.Logger] = None
) -> np.ndarray:
    """Compute unweighted shortest path lengths between all ordered pairs.

    Edge direction is respected for directed graphs. Unreachable pairs are
    inf; the diagonal is always 0 whether or not the node has a self-loop.

    Args:
        graph: Graph to traverse
        workers: Number of threads running BFS sources in parallel
        logger: Logger instance (optional)

    Returns:
        N x N float array of distances
    """
    n = graph.node_count
    distances = np.full((n, n), np.inf)
    G = graph.to_networkx()  # noqa: N806

    if logger:
        logger.info(f"Computing shortest paths from {n} sources (workers={workers})")

    if workers > 1 and n > 1:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="bfs") as executor:
            futures = [executor.submit(_fill_row, G, source, distances) for source in range(n)]
            for future in futures:
                future.result()
    else:
        for source in range(n):
            _fill_row(G, source, distances)

    np.fill_diagonal(distances, 0.0)
    return distances


def diameter(distances: np.ndarray) -> float:
    """Largest entry of the distance matrix; inf if any pair is unreachable, 0 when empty."""
    if distances.size == 0:
        return 0.0
    return float(distances.max())


def average_path_length(distances: np.ndarray) -> float:
    """Mean distance over ordered pairs of distinct nodes.

    Any unreachable pair makes the average inf. With fewer than two nodes
    there are no pairs and the result is nan.
    """
    n = distances.shape[0]
    pairs = n * (n - 1)
    if pairs == 0:
        return math.nan
    return float(distances.sum() / pairs)
