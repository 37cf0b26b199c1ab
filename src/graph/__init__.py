"""
Road graph: edge model, tag predicates and GeoJSON loading.
"""

from graph.model import Edge, RoadGraph, UnresolvedEdgeError
from graph.tags import is_roundabout
from graph.loader import GraphLoadError, load_graph, graph_from_geojson

__all__ = [
    "Edge",
    "RoadGraph",
    "UnresolvedEdgeError",
    "is_roundabout",
    "GraphLoadError",
    "load_graph",
    "graph_from_geojson",
]
