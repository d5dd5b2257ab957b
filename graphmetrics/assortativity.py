"""
Degree-degree assortativity through average neighbour degree.
"""

from typing import Dict

import numpy as np


def assortativity_by_node(adjacency: np.ndarray, degrees: np.ndarray) -> np.ndarray:
    """Average degree of each node's neighbours.

    Nodes without neighbours get 0: their divisor is replaced by 1 while the
    numerator is already 0.
    """
    divisor = np.where(degrees == 0, 1, degrees)
    return (adjacency @ degrees) / divisor


def assortativity_by_degree(adjacency: np.ndarray, degrees: np.ndarray) -> Dict[int, float]:
    """Average neighbour degree of the nodes having each degree.

    Every edge incident to a node of degree d contributes its neighbour's
    degree once, so a node of degree d carries d incidences. Only degrees
    d >= 1 present in the graph get an entry; keys are ascending.

    Args:
        adjacency: N x N self-loop-free adjacency matrix
        degrees: Row sums of the adjacency matrix

    Returns:
        Mapping from degree to mean neighbour degree
    """
    neighbor_degree_sums = adjacency @ degrees
    incidences = adjacency.sum(axis=1)

    result: Dict[int, float] = {}
    for d in np.unique(degrees):
        d = int(d)
        if d == 0:
            continue
        mask = degrees == d
        total = int(incidences[mask].sum())
        result[d] = float(neighbor_degree_sums[mask].sum() / total)
    return result
