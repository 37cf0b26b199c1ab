"""
GeoJSON road graph loader.

Each feature of the FeatureCollection is a LineString road segment:

    {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": [[lon, lat], ...]},
        "properties": {"id": 127006500001, "parent_id": 1270065, "junction": "roundabout"}
    }

`parent_id` defaults to `id` (with a warning for roundabout edges, which are
then treated as features of their own). Every other property becomes a
string tag.
Segments sharing an endpoint coordinate share a node.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from core.utils import debug, warn
from graph.model import Edge, RoadGraph
from graph.tags import is_roundabout

# Endpoint coordinates are rounded to this many decimals to form node keys
NODE_PRECISION = 7

RESERVED_PROPERTIES = ("id", "parent_id")


class GraphLoadError(Exception):
    """Raised when a graph file cannot be turned into a RoadGraph."""

    pass


def _node_key(coordinate: Tuple[float, float]) -> Tuple[float, float]:
    return (round(coordinate[0], NODE_PRECISION), round(coordinate[1], NODE_PRECISION))


def _parse_coordinates(raw: Any, index: int) -> List[Tuple[float, float]]:
    if not isinstance(raw, list) or len(raw) < 2:
        raise GraphLoadError(f"Feature {index}: a LineString needs at least two coordinates")
    coordinates = []
    for position, c in enumerate(raw):
        try:
            if isinstance(c, str) or len(c) < 2:
                raise ValueError("expected [lon, lat]")
            coordinates.append((float(c[0]), float(c[1])))
        except (TypeError, ValueError, IndexError):
            raise GraphLoadError(f"Feature {index}: invalid coordinate {position}: {c!r}") from None
    return coordinates


def _parse_int(value: Any, what: str, index: int) -> int:
    if isinstance(value, bool):
        raise GraphLoadError(f"Feature {index}: {what} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise GraphLoadError(f"Feature {index}: {what} must be an integer, got {value!r}") from None


def edge_from_feature(feature: Dict[str, Any], index: int) -> Edge:
    """Build an Edge from one GeoJSON feature (index is used in error messages)."""
    if not isinstance(feature, dict):
        raise GraphLoadError(f"Feature {index}: expected a JSON object, got {type(feature).__name__}")

    geometry = feature.get("geometry") or {}
    if not isinstance(geometry, dict) or geometry.get("type") != "LineString":
        kind = geometry.get("type") if isinstance(geometry, dict) else type(geometry).__name__
        raise GraphLoadError(f"Feature {index}: expected LineString geometry, got {kind!r}")

    coordinates = _parse_coordinates(geometry.get("coordinates"), index)

    properties = feature.get("properties") or {}
    if not isinstance(properties, dict):
        raise GraphLoadError(f"Feature {index}: properties must be a JSON object")
    if "id" not in properties:
        raise GraphLoadError(f"Feature {index}: missing 'id' property")

    edge_id = _parse_int(properties["id"], "id", index)
    tags = {str(k): str(v) for k, v in properties.items() if k not in RESERVED_PROPERTIES and v is not None}

    if properties.get("parent_id") is not None:
        parent_id = _parse_int(properties["parent_id"], "parent_id", index)
    else:
        parent_id = edge_id
        if is_roundabout(tags):
            warn(f"Feature {index}: roundabout edge {edge_id} has no parent_id, treating it as its own feature")

    return Edge(
        id=edge_id,
        parent_id=parent_id,
        start_node=_node_key(coordinates[0]),
        end_node=_node_key(coordinates[-1]),
        tags=tags,
        coordinates=coordinates,
    )


def graph_from_geojson(data: Dict[str, Any]) -> RoadGraph:
    """Build a RoadGraph from a parsed GeoJSON FeatureCollection."""
    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise GraphLoadError("Expected a GeoJSON FeatureCollection")

    features = data.get("features", [])
    if not isinstance(features, list):
        raise GraphLoadError("FeatureCollection 'features' must be a list")

    graph = RoadGraph()
    for index, feature in enumerate(features):
        edge = edge_from_feature(feature, index)
        try:
            graph.add_edge(edge)
        except ValueError as e:
            raise GraphLoadError(f"Feature {index}: {e}") from e

    debug(f"Loaded road graph with {len(graph)} edges")
    return graph


def load_graph(path: str) -> RoadGraph:
    """Read a GeoJSON file from disk into a RoadGraph."""
    file_path = Path(path)
    if not file_path.is_file():
        raise GraphLoadError(f"Graph file not found: {path}")
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise GraphLoadError(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise GraphLoadError(f"Cannot read {path}: {e}") from e
    return graph_from_geojson(data)
