"""
Flags roundabouts made of more than one feature.

A roundabout should be exactly one way. One way cut into several edges is
fine; several distinct ways meeting at shared nodes is flagged so they can
be merged.
"""

from typing import Optional

from checks.base import BaseCheck
from checks.flag import CheckFlag
from checks.roundabout import Classification, classify, collect
from core.utils import debug
from graph.model import Edge


class MultiFeatureRoundaboutCheck(BaseCheck):
    """Detect roundabouts represented by multiple features."""

    name = "MultiFeatureRoundaboutCheck"
    description = "Roundabout edges belong to more than one feature"
    fallback_instructions = [
        "This is a multi-feature roundabout. Merge roundabout edges to create one feature.",
    ]

    def valid_check_for_object(self, obj: object) -> bool:
        return isinstance(obj, Edge) and obj.is_roundabout and not self.is_flagged(obj.id)

    def flag(self, obj: object) -> Optional[CheckFlag]:
        # Runners normally filter through valid_check_for_object first
        if not self.valid_check_for_object(obj):
            return None
        seed: Edge = obj  # type: ignore[assignment]

        component, parent_ids = collect(seed, self.ctx.graph.connected_edges, self.processed)

        if classify(seed.parent_id, parent_ids) is Classification.SUPPRESS:
            debug(f"  [{self.name}] {seed.id}: single feature ({len(component)} connected edge(s))")
            return None

        debug(f"  [{self.name}] {seed.id}: multi-feature, parents {sorted(set(parent_ids))}")
        self.mark_as_flagged(seed.id)
        edges = [seed] + sorted(component, key=lambda edge: edge.id)
        return self.create_flag(edges, self.get_localized_instruction(0))
