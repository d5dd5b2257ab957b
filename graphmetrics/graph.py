"""
Immutable unweighted graph over a dense 0..N-1 node index space.

Undirected edges are stored canonically as (min, max) pairs, so (u, v) and
(v, u) name the same edge. Self-loops are kept in the edge set but never
appear on the diagonal of the derived adjacency matrix.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Tuple

import networkx as nx
import numpy as np

Edge = Tuple[int, int]


def _canonical_edges(node_count: int, edges: Iterable[Edge], directed: bool) -> FrozenSet[Edge]:
    result = set()
    for edge in edges:
        u, v = (int(x) for x in edge)
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise ValueError(f"Edge ({u}, {v}) references a node outside 0..{node_count - 1}")
        if not directed and u > v:
            u, v = v, u
        result.add((u, v))
    return frozenset(result)


@dataclass(frozen=True)
class Graph:
    """Unweighted graph value.

    Attributes:
        node_count: Number of nodes N; nodes are 0..N-1
        edges: Set of (u, v) pairs; canonical u <= v for undirected graphs
        directed: Whether edges are directed
    """

    node_count: int
    edges: FrozenSet[Edge] = field(default_factory=frozenset)
    directed: bool = False

    def __post_init__(self):
        if self.node_count < 0:
            raise ValueError(f"node_count must be non-negative, got {self.node_count}")
        object.__setattr__(
            self, "edges", _canonical_edges(self.node_count, self.edges, self.directed)
        )

    @classmethod
    def from_edges(cls, node_count: int, edges: Iterable[Edge], directed: bool = False) -> "Graph":
        """Build a graph from an edge iterable (mirrored undirected edges collapse)."""
        edge_set = frozenset(tuple(e) for e in edges)
        return cls(node_count=node_count, edges=edge_set, directed=directed)

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "Graph":  # noqa: N803
        """Convert a NetworkX graph, relabelling nodes 0..N-1 in iteration order."""
        index = {node: i for i, node in enumerate(G.nodes())}
        edges = [(index[u], index[v]) for u, v in G.edges()]
        return cls.from_edges(len(index), edges, directed=G.is_directed())

    def to_networkx(self) -> nx.Graph:
        """Return a fresh NetworkX graph (DiGraph if directed) with all nodes and edges."""
        G = nx.DiGraph() if self.directed else nx.Graph()  # noqa: N806
        G.add_nodes_from(range(self.node_count))
        G.add_edges_from(sorted(self.edges))
        return G

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def has_self_loops(self) -> bool:
        return any(u == v for u, v in self.edges)

    def self_loop_count(self) -> int:
        return sum(1 for u, v in self.edges if u == v)

    def adjacency_matrix(self) -> np.ndarray:
        """Return the read-only {0,1} adjacency matrix with a zero diagonal.

        Row i, column j is 1 when an edge leads from i to j. For undirected
        graphs the matrix is symmetric.
        """
        n = self.node_count
        adj = np.zeros((n, n), dtype=np.int64)
        for u, v in self.edges:
            if u == v:
                continue
            adj[u, v] = 1
            if not self.directed:
                adj[v, u] = 1
        adj.flags.writeable = False
        return adj

    def degrees(self) -> np.ndarray:
        """Row sums of the self-loop-free adjacency matrix (out-degree when directed)."""
        return self.adjacency_matrix().sum(axis=1)

    def to_undirected(self) -> "Graph":
        """Return the undirected graph with an edge wherever either direction exists."""
        if not self.directed:
            return self
        return Graph.from_edges(self.node_count, self.edges, directed=False)

    def subgraph(self, nodes: Iterable[int]) -> "Graph":
        """Return the induced subgraph, relabelled 0..k-1 in ascending index order."""
        kept = sorted(set(int(n) for n in nodes))
        for node in kept:
            if not 0 <= node < self.node_count:
                raise ValueError(f"Node {node} is outside 0..{self.node_count - 1}")
        index = {node: i for i, node in enumerate(kept)}
        edges = [(index[u], index[v]) for u, v in self.edges if u in index and v in index]
        return Graph.from_edges(len(kept), edges, directed=self.directed)
