"""
Road graph IR - directed road segments connected through shared nodes.

We care about:
- Edge identity and the parent feature (way) each edge was cut from
- Tags, for the roundabout predicate
- Which edges meet at a node

We deliberately ignore:
- Turn restrictions and travel direction
- Geometry beyond the coordinates carried along for reporting
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from graph.tags import is_roundabout

NodeKey = Hashable
Coordinate = Tuple[float, float]


class UnresolvedEdgeError(Exception):
    """Raised when the graph has no record of an edge or one of its nodes."""

    pass


@dataclass(eq=False)
class Edge:
    """
    A digitized road segment.

    Segment ids conventionally nest the parent id as a prefix
    (parent 1270065 -> segments 127006500001, 127006500002, ...).
    Nothing in the graph enforces it.
    """

    id: int
    parent_id: int
    start_node: NodeKey
    end_node: NodeKey
    tags: Dict[str, str] = field(default_factory=dict)
    coordinates: List[Coordinate] = field(default_factory=list)

    @property
    def is_roundabout(self) -> bool:
        return is_roundabout(self.tags)

    @property
    def nodes(self) -> Tuple[NodeKey, NodeKey]:
        return (self.start_node, self.end_node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Edge({self.id}, parent={self.parent_id})"


class RoadGraph:
    """
    Edges indexed by id and by the nodes they touch.

    Edges are kept in insertion order so that runs over the same input visit
    seeds in the same order.
    """

    def __init__(self, edges: Optional[List[Edge]] = None):
        self._edges: Dict[int, Edge] = {}
        self._node_index: Dict[NodeKey, List[Edge]] = {}
        for edge in edges or []:
            self.add_edge(edge)

    def add_edge(self, edge: Edge) -> None:
        if edge.id in self._edges:
            raise ValueError(f"Duplicate edge id: {edge.id}")
        self._edges[edge.id] = edge
        for node in set(edge.nodes):
            self._node_index.setdefault(node, []).append(edge)

    def edge(self, identifier: int) -> Edge:
        try:
            return self._edges[identifier]
        except KeyError:
            raise UnresolvedEdgeError(f"Unknown edge id: {identifier}") from None

    def edges(self) -> Iterator[Edge]:
        return iter(self._edges.values())

    def connected_edges(self, edge: Edge) -> List[Edge]:
        """
        Edges sharing a start or end node with `edge`, excluding `edge` itself.

        Raises UnresolvedEdgeError if `edge` is not part of this graph.
        """
        if edge.id not in self._edges:
            raise UnresolvedEdgeError(f"Edge {edge.id} is not part of the graph")

        connected: List[Edge] = []
        seen = {edge.id}
        for node in edge.nodes:
            for other in self._node_index.get(node, []):
                if other.id not in seen:
                    seen.add(other.id)
                    connected.append(other)
        return connected

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, edge: object) -> bool:
        return isinstance(edge, Edge) and edge.id in self._edges
