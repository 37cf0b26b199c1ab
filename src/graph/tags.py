"""
Tag predicates over edge tag maps.
"""

from typing import Mapping

JUNCTION_KEY = "junction"
ROUNDABOUT_VALUES = frozenset({"roundabout"})


def is_roundabout(tags: Mapping[str, str]) -> bool:
    """True if the tags mark the edge as a roundabout segment (junction=roundabout)."""
    value = tags.get(JUNCTION_KEY)
    if value is None:
        return False
    return str(value).strip().lower() in ROUNDABOUT_VALUES
