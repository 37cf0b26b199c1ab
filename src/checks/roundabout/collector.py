"""
Roundabout component discovery.

Starting from a seed edge, walks the roundabout-tagged edges reachable
through shared nodes. Every edge it takes is claimed in the processed-marker
set, so no later seed can pull it into another component.
"""

from typing import Callable, List, Set, Tuple

from core.context import ProcessedMarkers
from core.utils import debug
from graph.model import Edge, UnresolvedEdgeError

ConnectedEdges = Callable[[Edge], List[Edge]]


def _neighbours(edge: Edge, connected_edges: ConnectedEdges) -> List[Edge]:
    try:
        return connected_edges(edge)
    except UnresolvedEdgeError as e:
        debug(f"  [collect] no adjacency for edge {edge.id}: {e}")
        return []


def collect(
    seed: Edge,
    connected_edges: ConnectedEdges,
    processed: ProcessedMarkers,
) -> Tuple[Set[Edge], List[int]]:
    """
    Collect the roundabout edges connected to `seed`.

    Args:
        seed: Roundabout edge to start from
        connected_edges: Adjacency accessor (edges sharing a node with its argument)
        processed: Run-scoped processed-marker set

    Returns:
        (component, parent_ids) - the reachable edges excluding the seed, and the
        parent id of each edge in the order it was discovered. Both are empty if
        the seed was already processed.
    """
    component: Set[Edge] = set()
    parent_ids: List[int] = []

    if not processed.claim(seed.id):
        debug(f"  [collect] seed {seed.id} already processed")
        return component, parent_ids

    stack = [seed]
    while stack:
        current = stack.pop()
        for neighbour in _neighbours(current, connected_edges):
            if not neighbour.is_roundabout:
                continue
            if neighbour.id == current.id or neighbour in component:
                continue
            # claim() is the processed check and the insert in one step
            if not processed.claim(neighbour.id):
                continue
            component.add(neighbour)
            parent_ids.append(neighbour.parent_id)
            stack.append(neighbour)

    debug(f"  [collect] seed {seed.id}: {len(component)} connected roundabout edge(s)")
    return component, parent_ids
