"""
Tests for weak/strong component labelling and full connectivity.
"""

import numpy as np
import pytest

from graphmetrics.connectivity import (component_sizes, connected_components,
                                       is_fully_connected, largest_component)
from graphmetrics.graph import Graph


@pytest.mark.metrics
def test_undirected_components(two_disjoint_edges):
    labels = connected_components(two_disjoint_edges)
    assert list(labels) == [0, 0, 1, 1]
    assert not is_fully_connected(two_disjoint_edges)


@pytest.mark.metrics
def test_labels_follow_smallest_node():
    graph = Graph.from_edges(5, [(3, 4), (0, 2)])
    # Components {0, 2}, {1}, {3, 4} numbered by their smallest member
    assert list(connected_components(graph)) == [0, 1, 0, 2, 2]


@pytest.mark.metrics
def test_directed_chain_weak_but_not_strong(directed_chain3):
    weak = connected_components(directed_chain3, "weak")
    strong = connected_components(directed_chain3, "strong")
    assert len(np.unique(weak)) == 1
    assert len(np.unique(strong)) == 3
    assert not is_fully_connected(directed_chain3)


@pytest.mark.metrics
def test_directed_cycle_strongly_connected(directed_cycle3):
    assert is_fully_connected(directed_cycle3)


@pytest.mark.metrics
def test_unknown_kind_rejected(directed_chain3):
    with pytest.raises(ValueError, match="Unknown component kind"):
        connected_components(directed_chain3, "sideways")


@pytest.mark.metrics
def test_trivial_graphs_fully_connected(empty_graph):
    assert is_fully_connected(empty_graph)
    assert is_fully_connected(Graph(node_count=1))
    assert len(connected_components(empty_graph)) == 0


@pytest.mark.metrics
def test_self_loops_do_not_connect():
    graph = Graph.from_edges(2, [(0, 0), (1, 1)])
    assert not is_fully_connected(graph)


@pytest.mark.metrics
class TestLargestComponent:
    """Extraction of the n-th largest component."""

    def setup_method(self):
        # Sizes: {0,1,2} -> 3, {3,4} -> 2, {5} -> 1
        self.graph = Graph.from_edges(6, [(0, 1), (1, 2), (3, 4)])

    def test_component_sizes(self):
        labels = connected_components(self.graph)
        assert list(component_sizes(labels)) == [3, 2, 1]

    def test_rank_one_is_largest(self):
        sub = largest_component(self.graph)
        assert sub.node_count == 3
        assert sub.edge_count == 2

    def test_rank_two(self):
        sub = largest_component(self.graph, rank=2)
        assert sub.node_count == 2
        assert sub.edges == frozenset({(0, 1)})

    def test_rank_out_of_range(self):
        with pytest.raises(ValueError, match="rank"):
            largest_component(self.graph, rank=4)

    def test_equal_sizes_prefer_lower_label(self, two_disjoint_edges):
        sub = largest_component(two_disjoint_edges, rank=1)
        assert sub.node_count == 2

    def test_strong_component_of_digraph(self):
        # 0<->1 cycle plus a tail 1->2
        graph = Graph.from_edges(3, [(0, 1), (1, 0), (1, 2)], directed=True)
        assert largest_component(graph, weak=True).node_count == 3
        strong = largest_component(graph, weak=False)
        assert strong.node_count == 2
        assert strong.directed
