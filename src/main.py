"""
Main entry point: load the graph, run the checks, report flags.
"""

import sys
import os
import argparse
from typing import List, Optional

from dotenv import load_dotenv

from checks import ALL_CHECKS, CheckRunner, build_checks
from core.config import Configuration, ConfigurationError
from core.context import RunContext
from core.utils import debug, error, info
from graph.loader import GraphLoadError, load_graph
from reporter import OutputMode, report_flags


def main(
    graph_path: str,
    config_path: Optional[str] = None,
    output_mode: OutputMode = OutputMode.SHORT,
    output_dir: Optional[str] = None,
    selected_checks: Optional[List[str]] = None,
) -> int:
    """Main entry point for a check run."""
    if selected_checks:
        unknown = set(selected_checks) - set(ALL_CHECKS)
        if unknown:
            error(f"Check(s) not found: {', '.join(sorted(unknown))}. Use --list-checks to see available checks.")
            return 1

    try:
        configuration = Configuration.from_file(config_path) if config_path else Configuration.empty()
        graph = load_graph(graph_path)
        ctx = RunContext(graph, configuration)
        checks = build_checks(ctx, selected_checks)
    except (ConfigurationError, GraphLoadError) as e:
        error(str(e))
        return 1

    if len(checks) > 1:
        info(f"Enabled {len(checks)} checks")

    flags = CheckRunner(ctx, checks).run()
    debug(f"{len(ctx.processed)} edge(s) processed, {len(flags)} flag(s)")

    output_file = None
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        graph_name = os.path.splitext(os.path.basename(os.path.normpath(graph_path)))[0]
        ext = ".json" if output_mode == OutputMode.JSON else ".txt"
        output_path = os.path.join(output_dir, f"FLAGS-{graph_name}{ext}")
        output_file = open(output_path, "w", encoding="utf-8")
        print(f"Writing results to: {output_path}")

    try:
        num_flags = report_flags(flags, output_mode, output_file)
    finally:
        if output_file:
            output_file.close()

    return 1 if num_flags > 0 else 0


if __name__ == "__main__":
    load_dotenv()

    parser = argparse.ArgumentParser(description="Road graph checks for multi-feature roundabouts")
    parser.add_argument("graph_path", nargs="?", help="GeoJSON road graph")
    parser.add_argument("-c", "--config", metavar="PATH", help="JSON check configuration")
    parser.add_argument(
        "--check",
        action="append",
        metavar="NAME",
        help="Run only the specified check(s) (can be specified multiple times)",
    )
    parser.add_argument("--list-checks", action="store_true", help="List all checks with descriptions")
    parser.add_argument("-o", "--output", choices=["short", "full", "json"], default="short", help="Output verbosity")
    parser.add_argument("-O", "--output-dir", metavar="DIR", help="Save results to files in DIR")
    args = parser.parse_args()

    if args.list_checks:
        print(f"Available checks ({len(ALL_CHECKS)}):\n")
        for name, check_cls in sorted(ALL_CHECKS.items()):
            print(f"  {name}")
            print(f"    {check_cls.description or '(no description)'}\n")
        sys.exit(0)

    if not args.graph_path:
        parser.error("graph_path is required (or use --list-checks)")

    sys.exit(
        main(
            args.graph_path,
            config_path=args.config,
            output_mode=OutputMode(args.output),
            output_dir=args.output_dir,
            selected_checks=args.check,
        )
    )
