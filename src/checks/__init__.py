"""
Checks over the road graph.
"""

from typing import Dict, List, Optional, Type, TYPE_CHECKING

from checks.base import BaseCheck
from checks.flag import CheckFlag
from checks.runner import CheckRunner
from checks.multi_feature_roundabout import MultiFeatureRoundaboutCheck

if TYPE_CHECKING:
    from core.context import RunContext

# Every check the CLI knows about, by name
ALL_CHECKS: Dict[str, Type[BaseCheck]] = {
    MultiFeatureRoundaboutCheck.name: MultiFeatureRoundaboutCheck,
}


def build_checks(ctx: "RunContext", names: Optional[List[str]] = None) -> List[BaseCheck]:
    """Instantiate the named checks (all checks if `names` is empty)."""
    selected = names or list(ALL_CHECKS)
    return [ALL_CHECKS[name](ctx) for name in selected]


__all__ = [
    "ALL_CHECKS",
    "BaseCheck",
    "CheckFlag",
    "CheckRunner",
    "MultiFeatureRoundaboutCheck",
    "build_checks",
]
