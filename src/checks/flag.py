"""
Flags produced by checks.
"""

from dataclasses import dataclass, field
from typing import List

from graph.model import Edge
from instructions import numbered


@dataclass
class CheckFlag:
    """One reported issue: the check that raised it, the edges involved and what to do."""

    check_name: str
    edges: List[Edge] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)

    @property
    def edge_ids(self) -> List[int]:
        return [edge.id for edge in self.edges]

    @property
    def parent_ids(self) -> List[int]:
        return [edge.parent_id for edge in self.edges]

    @property
    def numbered_instructions(self) -> str:
        return numbered(self.instructions)
