"""Graph Providers consumed by the cycle basis driver."""

from cyclebasis.graph.generators import cycle_graph, grid_graph, path_graph
from cyclebasis.graph.multigraph import MultiGraph
from cyclebasis.graph.nx_adapter import NetworkXGraph
from cyclebasis.graph.provider import GraphProvider
from cyclebasis.graph.views import ConsumedEdgeView

__all__ = [
    "ConsumedEdgeView",
    "GraphProvider",
    "MultiGraph",
    "NetworkXGraph",
    "cycle_graph",
    "grid_graph",
    "path_graph",
]
