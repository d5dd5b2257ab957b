"""
Shared pytest fixtures: small graphs with known metrics.
"""

import pytest

from graphmetrics.graph import Graph


@pytest.fixture
def triangle():
    """Undirected triangle 0-1-2."""
    return Graph.from_edges(3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def single_edge():
    """Undirected path on two nodes."""
    return Graph.from_edges(2, [(0, 1)])


@pytest.fixture
def two_disjoint_edges():
    """Undirected 0-1 and 2-3 with nothing between them."""
    return Graph.from_edges(4, [(0, 1), (2, 3)])


@pytest.fixture
def path4():
    """Undirected path 0-1-2-3."""
    return Graph.from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def star4():
    """Undirected star with hub 0 and leaves 1, 2, 3."""
    return Graph.from_edges(4, [(0, 1), (0, 2), (0, 3)])


@pytest.fixture
def directed_cycle3():
    """Directed cycle 0->1->2->0."""
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], directed=True)


@pytest.fixture
def directed_chain3():
    """Directed chain 0->1->2 (weakly but not strongly connected)."""
    return Graph.from_edges(3, [(0, 1), (1, 2)], directed=True)


@pytest.fixture
def empty_graph():
    return Graph(node_count=0)
