"""
Check runner.

Offers every graph object to every enabled check and collects the flags.
"""

from typing import Iterable, List, Optional, TYPE_CHECKING

from checks.base import BaseCheck
from checks.flag import CheckFlag
from core.utils import debug, error

if TYPE_CHECKING:
    from core.context import RunContext


class CheckRunner:
    """Orchestrates checks over one run context."""

    def __init__(self, ctx: "RunContext", checks: List[BaseCheck]):
        self.ctx = ctx
        self.checks = checks

    def run(self, objects: Optional[Iterable[object]] = None) -> List[CheckFlag]:
        """
        Run all enabled checks.

        Args:
            objects: Objects to offer; defaults to the edges of the context graph

        Returns:
            Flags in the order they were raised
        """
        candidates = list(objects) if objects is not None else list(self.ctx.graph.edges())
        flags: List[CheckFlag] = []

        for check in self.checks:
            if not check.enabled:
                debug(f"Skipping check: {check.name} (disabled)")
                continue

            debug(f"Running check: {check.name} over {len(candidates)} object(s)")
            before = len(flags)
            for obj in candidates:
                try:
                    flag = check.check(obj)
                except Exception as e:
                    error(f"Check '{check.name}' failed on {obj!r}: {e}")
                    raise
                if flag is not None:
                    flags.append(flag)
            debug(f"  -> {len(flags) - before} flag(s)")

        return flags
