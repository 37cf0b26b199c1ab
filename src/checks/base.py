"""
Base class for checks.

A check is offered every object of the graph once. The evaluation flow:
1. valid_check_for_object(obj) -> is this object a candidate at all
2. flag(obj) -> Optional[CheckFlag]

Checks share the run's processed-marker set through `is_flagged` and
`mark_as_flagged`, which keeps them from reporting the same edge twice.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, TYPE_CHECKING

from checks.flag import CheckFlag
from core.utils import debug
from graph.model import Edge

if TYPE_CHECKING:
    from core.context import RunContext


class BaseCheck(ABC):
    """
    Abstract base class for checks.

    Subclasses must implement:
    - valid_check_for_object(): Candidate filter
    - flag(): The check itself, returning a CheckFlag or None

    and should set:
    - name: Check identifier used in configuration keys and reports
    - description: One-line summary for --list-checks
    - fallback_instructions: Used when the configuration has none
    """

    name: str = "unknown"
    description: str = ""
    fallback_instructions: List[str] = []

    def __init__(self, ctx: "RunContext"):
        self.ctx = ctx
        self.configuration = ctx.configuration
        self.processed = ctx.processed
        # Read eagerly so a bad value fails before the run starts
        self.enabled = self.configuration.get_bool(self.name, "enabled", True)
        self.instructions = self.configuration.get_strings(self.name, "instructions") or list(
            self.fallback_instructions
        )

    def get_localized_instruction(self, index: int, *args) -> str:
        """Instruction `index` with `args` substituted into its {} placeholders."""
        instruction = self.instructions[index]
        if not args:
            return instruction
        return instruction.format(*args)

    def is_flagged(self, identifier: int) -> bool:
        return self.processed.is_processed(identifier)

    def mark_as_flagged(self, identifier: int) -> None:
        self.processed.mark_processed(identifier)

    @abstractmethod
    def valid_check_for_object(self, obj: object) -> bool:
        """True if `obj` should be handed to flag()."""
        pass

    @abstractmethod
    def flag(self, obj: object) -> Optional[CheckFlag]:
        """Evaluate a valid object; return a flag if it has an issue."""
        pass

    def check(self, obj: object) -> Optional[CheckFlag]:
        """Run flag() on `obj` if it is a valid candidate."""
        if not self.valid_check_for_object(obj):
            return None
        return self.flag(obj)

    def create_flag(self, edges: Iterable[Edge], instruction: str) -> CheckFlag:
        flagged = list(edges)
        debug(f"Check[{self.name}]: flagging {len(flagged)} edge(s)")
        return CheckFlag(check_name=self.name, edges=flagged, instructions=[instruction])
