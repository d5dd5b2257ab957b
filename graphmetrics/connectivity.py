"""
Connected components of a Graph.

Undirected graphs use plain reachability. Directed graphs support weak
(direction ignored) and strong (mutual reachability) components; a directed
graph is fully connected only when it is strongly connected.
"""

import logging
from typing import List, Optional, Set

import networkx as nx
import numpy as np

from .graph import Graph

WEAK = "weak"
STRONG = "strong"


def _component_sets(graph: Graph, kind: str) -> List[Set[int]]:
    G = graph.to_networkx()  # noqa: N806
    if not graph.directed:
        return list(nx.connected_components(G))
    if kind == WEAK:
        return list(nx.weakly_connected_components(G))
    if kind == STRONG:
        return list(nx.strongly_connected_components(G))
    raise ValueError(f"Unknown component kind: {kind!r} (expected 'weak' or 'strong')")


def connected_components(
    graph: Graph, kind: str = STRONG, logger: Optional[logging.Logger] = None
) -> np.ndarray:
    """Label every node with its component.

    Components are numbered 0.. in order of their smallest node index, so the
    labelling is deterministic for a given graph.

    Args:
        graph: Graph to analyse
        kind: "weak" or "strong"; ignored for undirected graphs
        logger: Logger instance (optional)

    Returns:
        Integer array of length N with one label per node

    Raises:
        ValueError: If kind is not recognised
    """
    components = _component_sets(graph, kind)
    components.sort(key=min)

    labels = np.zeros(graph.node_count, dtype=np.int64)
    for label, component in enumerate(components):
        for node in component:
            labels[node] = label

    if logger:
        mode = kind if graph.directed else "undirected"
        logger.debug(f"Found {len(components)} components ({mode})")

    return labels


def is_fully_connected(graph: Graph) -> bool:
    """True when every node reaches every other (strongly, for digraphs).

    Graphs with zero or one node are trivially connected.
    """
    if graph.node_count <= 1:
        return True
    labels = connected_components(graph, STRONG)
    return bool(np.all(labels == labels[0]))


def component_sizes(labels: np.ndarray) -> np.ndarray:
    """Number of nodes carrying each label, indexed by label."""
    if len(labels) == 0:
        return np.zeros(0, dtype=np.int64)
    return np.bincount(labels)


def largest_component(graph: Graph, rank: int = 1, weak: bool = True) -> Graph:
    """Extract the rank-th largest component as its own graph.

    Args:
        graph: Source graph
        rank: 1 for the largest component, 2 for the runner-up, and so on
        weak: For directed graphs, use weak (True) or strong (False) components

    Returns:
        Induced subgraph on the component's nodes, relabelled 0..k-1

    Raises:
        ValueError: If rank is not between 1 and the number of components
    """
    labels = connected_components(graph, WEAK if weak else STRONG)
    sizes = component_sizes(labels)
    if not 1 <= rank <= len(sizes):
        raise ValueError(f"rank must be between 1 and {len(sizes)}, got {rank}")

    # Largest first; equal sizes keep the lower label first
    order = sorted(range(len(sizes)), key=lambda label: (-sizes[label], label))
    chosen = order[rank - 1]
    return graph.subgraph(np.flatnonzero(labels == chosen))
