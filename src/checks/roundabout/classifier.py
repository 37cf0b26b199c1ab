"""
Single-feature vs multi-feature classification of a roundabout component.
"""

from enum import Enum
from typing import Iterable


class Classification(Enum):
    SUPPRESS = "suppress"  # one feature, possibly cut into segments
    REPORT = "report"  # several features glued at shared nodes


def same_feature(seed_parent_id: int, parent_id: int) -> bool:
    """
    True if `parent_id` looks like it belongs to the seed's feature.

    Segment ids nest their parent id as a prefix, so textual containment is
    used as a proxy for feature identity. Unrelated ids that happen to contain
    the seed's digits pass as well; that limitation is kept on purpose for
    compatibility with existing results.
    """
    return str(seed_parent_id) in str(parent_id)


def classify(seed_parent_id: int, component_parent_ids: Iterable[int]) -> Classification:
    parent_ids = list(component_parent_ids)
    if not parent_ids:
        return Classification.SUPPRESS
    if all(same_feature(seed_parent_id, parent_id) for parent_id in parent_ids):
        return Classification.SUPPRESS
    return Classification.REPORT
