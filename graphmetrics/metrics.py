"""
metrics.py - Compute the full structural metrics bundle of a Graph.

compute_metrics runs the calculators in dependency order (connectivity,
distances, clustering and degrees, spectral, closeness, distance
distribution, assortativity) and returns one immutable MetricsResult.
"""

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import numpy as np

from .assortativity import assortativity_by_degree, assortativity_by_node
from .centrality import closeness_centralities, degree_centralities
from .clustering import average_clustering
from .connectivity import STRONG, WEAK, connected_components
from .distribution import DistanceDistribution, distance_distribution
from .errors import UnsupportedGraphKindError
from .graph import Graph
from .paths import average_path_length, diameter, distance_matrix
from .spectral import dominant_eigenpair
from .utils.config import get_engine_settings

_ARRAY_FIELDS = (
    "distances",
    "clusterings",
    "eigen_centralities",
    "degrees",
    "degree_centralities",
    "closeness_centralities",
    "assortativity_by_node",
    "component_labels",
)


@dataclass(frozen=True, eq=False)
class MetricsResult:
    """Immutable metrics of one graph snapshot.

    Arrays are read-only. Fields that are undefined for the graph are None:
    clusterings/avg_clustering for directed graphs, distance_distribution
    when the graph is not fully connected.
    """

    is_directed: bool
    is_fully_connected: bool
    node_count: int
    edge_count: int
    distances: np.ndarray
    diameter: float
    avg_path_length: float
    clusterings: Optional[np.ndarray]
    avg_clustering: Optional[float]
    max_eigenvalue: float
    eigen_centralities: np.ndarray
    degrees: np.ndarray
    degree_centralities: np.ndarray
    closeness_centralities: np.ndarray
    distance_distribution: Optional[DistanceDistribution]
    assortativity_by_node: np.ndarray
    assortativity_by_degree: Mapping[int, float]
    component_labels: np.ndarray
    weak_component_count: int

    def __post_init__(self):
        for name in _ARRAY_FIELDS:
            value = getattr(self, name)
            if value is not None:
                value.flags.writeable = False
        if not isinstance(self.assortativity_by_degree, MappingProxyType):
            frozen = MappingProxyType(dict(self.assortativity_by_degree))
            object.__setattr__(self, "assortativity_by_degree", frozen)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe snapshot: inf as "Infinity", nan as None, undefined fields omitted."""
        data: Dict[str, Any] = {
            "is_directed": self.is_directed,
            "is_fully_connected": self.is_fully_connected,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "distances": [[_json_number(x) for x in row] for row in self.distances],
            "diameter": _json_number(self.diameter),
            "avg_path_length": _json_number(self.avg_path_length),
            "max_eigenvalue": _json_number(self.max_eigenvalue),
            "eigen_centralities": [_json_number(x) for x in self.eigen_centralities],
            "degrees": [int(x) for x in self.degrees],
            "degree_centralities": [_json_number(x) for x in self.degree_centralities],
            "closeness_centralities": [_json_number(x) for x in self.closeness_centralities],
            "assortativity_by_node": [_json_number(x) for x in self.assortativity_by_node],
            # JSON object keys are strings
            "assortativity_by_degree": {
                str(d): _json_number(v) for d, v in self.assortativity_by_degree.items()
            },
            "component_labels": [int(x) for x in self.component_labels],
            "weak_component_count": self.weak_component_count,
        }
        if self.clusterings is not None:
            data["clusterings"] = [_json_number(x) for x in self.clusterings]
            data["avg_clustering"] = _json_number(self.avg_clustering)
        if self.distance_distribution is not None:
            data["distance_distribution"] = [
                {"distance": d, "pair_count": c} for d, c in self.distance_distribution
            ]
        return data


def _json_number(value: Any) -> Any:
    value = float(value)
    if math.isnan(value):
        return None
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return int(value)
    return value


def compute_metrics(
    graph: Graph,
    config: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> MetricsResult:
    """Compute every metric of the graph in dependency order.

    The graph is never modified. Clustering on a directed graph is reported
    and skipped rather than failing the whole computation.

    Args:
        graph: Graph to analyse
        config: Configuration dictionary with an optional [graphmetrics] section
        logger: Logger instance (optional)

    Returns:
        MetricsResult for the graph

    Raises:
        NumericInstabilityError: If the eigendecomposition fails
        ConfigValidationError: If the configuration is invalid
    """
    settings = get_engine_settings(config)
    n = graph.node_count

    if logger:
        kind = "directed" if graph.directed else "undirected"
        logger.info(f"Computing metrics for {kind} graph: {n} nodes, {graph.edge_count} edges")
        if graph.has_self_loops():
            logger.info(f"Ignoring {graph.self_loop_count()} self-loops in adjacency matrix")

    adjacency = graph.adjacency_matrix()

    # 1. Connectivity
    labels = connected_components(graph, STRONG, logger)
    fully_connected = n <= 1 or bool(np.all(labels == labels[0]))
    if graph.directed:
        weak_labels = connected_components(graph, WEAK, logger)
        weak_count = len(np.unique(weak_labels))
    else:
        weak_count = len(np.unique(labels))

    # 2. Distances
    distances = distance_matrix(graph, settings["bfs_workers"], logger)
    graph_diameter = diameter(distances)
    avg_path = average_path_length(distances)

    # 3. Clustering and degrees
    try:
        clusterings, avg_clust = average_clustering(graph, adjacency)
    except UnsupportedGraphKindError as e:
        if logger:
            logger.info(f"Skipping clustering: {e}")
        clusterings, avg_clust = None, None

    degrees = adjacency.sum(axis=1)
    degree_cent = degree_centralities(degrees)

    # 4. Spectral
    max_eigenvalue, eigen_cent = dominant_eigenpair(
        adjacency,
        graph.directed,
        tie_tolerance=settings["eigen_tie_tolerance"],
        imag_tolerance=settings["eigen_imag_tolerance"],
        logger=logger,
    )

    # 5. Closeness
    closeness = closeness_centralities(distances)

    # 6. Distance distribution
    distribution = distance_distribution(distances, graph.directed, fully_connected, logger)

    # 7. Assortativity
    by_node = assortativity_by_node(adjacency, degrees)
    by_degree = assortativity_by_degree(adjacency, degrees)

    if logger:
        logger.info(f"Fully connected: {fully_connected}, diameter: {graph_diameter}")
        logger.info(f"Average path length: {avg_path}")
        if avg_clust is not None:
            logger.info(f"Average clustering: {avg_clust:.6f}")
        logger.info(f"Maximum eigenvalue: {max_eigenvalue:.6f}")

    return MetricsResult(
        is_directed=graph.directed,
        is_fully_connected=fully_connected,
        node_count=n,
        edge_count=graph.edge_count,
        distances=distances,
        diameter=graph_diameter,
        avg_path_length=avg_path,
        clusterings=clusterings,
        avg_clustering=avg_clust,
        max_eigenvalue=max_eigenvalue,
        eigen_centralities=eigen_cent,
        degrees=degrees,
        degree_centralities=degree_cent,
        closeness_centralities=closeness,
        distance_distribution=distribution,
        assortativity_by_node=by_node,
        assortativity_by_degree=by_degree,
        component_labels=labels,
        weak_component_count=weak_count,
    )
