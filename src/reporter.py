import json
import os
from enum import Enum
from typing import Any, Dict, List, Optional, TextIO

from checks.flag import CheckFlag
from core.utils import format_ids


_USE_COLOR = not os.environ.get("RONDO_NO_COLORS")


class _C:
    """ANSI color codes."""

    RESET = "\033[0m" if _USE_COLOR else ""
    BOLD = "\033[1m" if _USE_COLOR else ""
    DIM = "\033[2m" if _USE_COLOR else ""
    YELLOW = "\033[33m" if _USE_COLOR else ""


class OutputMode(Enum):
    """Flag output verbosity modes."""

    SHORT = "short"  # Check name, edge ids, first instruction
    FULL = "full"  # + numbered instructions, parent ids per edge
    JSON = "json"  # GeoJSON FeatureCollection


def report_flags(
    flags: List[CheckFlag],
    output_mode: OutputMode = OutputMode.SHORT,
    output_file: Optional[TextIO] = None,
) -> int:
    """
    Report flags with configurable verbosity.

    Args:
        flags: Flags collected by the runner
        output_mode: SHORT (default), FULL or JSON
        output_file: Optional file handle to write output to (in addition to stdout)

    Returns: Number of flags reported
    """
    if output_mode == OutputMode.JSON:
        return report_flags_json(flags, output_file)

    def _print(msg: str = ""):
        print(msg)
        if output_file:
            print(msg, file=output_file)

    if not flags:
        _print("No flags raised")
        return 0

    _print(f"\nFound {len(flags)} flag(s):\n")

    for flag in flags:
        _report_single_flag(flag, output_mode, _print)

    return len(flags)


def _report_single_flag(flag: CheckFlag, output_mode: OutputMode, _print) -> None:
    check_tag = f"{_C.BOLD}{flag.check_name}{_C.RESET}"
    first = flag.instructions[0] if flag.instructions else ""
    _print(f"[{check_tag}][{format_ids(flag.edge_ids)}] {first}")

    if output_mode == OutputMode.FULL:
        _print(f"  {_C.DIM}Instructions:{_C.RESET}")
        for line in flag.numbered_instructions.split("\n"):
            _print(f"    {line}")
        _print(f"  {_C.DIM}Edges:{_C.RESET}")
        for edge in flag.edges:
            _print(f"    {edge.id} {_C.YELLOW}(parent {edge.parent_id}){_C.RESET}")

    _print()


# =============================================================================
# JSON Output
# =============================================================================


def _flag_to_feature(flag: CheckFlag) -> Dict[str, Any]:
    """Convert a flag to a GeoJSON feature."""
    lines = [[list(c) for c in edge.coordinates] for edge in flag.edges if edge.coordinates]
    return {
        "type": "Feature",
        "geometry": {"type": "MultiLineString", "coordinates": lines},
        "properties": {
            "check": flag.check_name,
            "instructions": flag.numbered_instructions,
            "edge_ids": flag.edge_ids,
            "parent_ids": flag.parent_ids,
        },
    }


def report_flags_json(flags: List[CheckFlag], output_file: Optional[TextIO] = None) -> int:
    """Report flags as a GeoJSON FeatureCollection."""
    output = {
        "type": "FeatureCollection",
        "features": [_flag_to_feature(flag) for flag in flags],
        "total": len(flags),
    }

    json_str = json.dumps(output, indent=2)
    print(json_str)
    if output_file:
        print(json_str, file=output_file)

    return len(flags)
