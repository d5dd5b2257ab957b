"""
graphmetrics - structural metrics of unweighted graphs.

Distances, connectivity, clustering, spectral/degree/closeness centrality,
distance distributions and assortativity, bundled into one immutable
MetricsResult by compute_metrics.
"""

from .connectivity import (component_sizes, connected_components,
                           is_fully_connected, largest_component)
from .errors import (GraphMetricsError, NumericInstabilityError,
                     UnsupportedGraphKindError)
from .graph import Graph
from .metrics import MetricsResult, compute_metrics

__all__ = [
    "Graph",
    "MetricsResult",
    "compute_metrics",
    "connected_components",
    "component_sizes",
    "is_fully_connected",
    "largest_component",
    "GraphMetricsError",
    "UnsupportedGraphKindError",
    "NumericInstabilityError",
]
