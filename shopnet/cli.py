"""Command-line entry point: read a road map and print its reduction.

    shopnet roads.txt
    shopnet roads.txt --debug        # trace network and thresholds on stderr
    shopnet roads.txt --json         # print the full reduction report

Only the result is written to stdout. Every diagnostic, including the debug
trace enabled by ``--debug`` or ``SHOPNET_DEBUG=1``, goes to stderr.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .exceptions import ShopnetError
from .loader import RoadMapLoader, build_network
from .logging_utils import Diagnostics
from .network import ShopNetwork, analyze


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="shopnet",
        description="Reduce a shop/road network to its most connected hubs.",
    )
    parser.add_argument("input", type=Path, help="Road-map file: header line, then one road per line.")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=Config.DEBUG,
        help="Trace network construction and reduction thresholds on stderr.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full reduction report as JSON instead of the bare count.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in diagnostics (same as SHOPNET_NO_COLOR=1).",
    )
    return parser.parse_args(argv)


def trace_network(network: ShopNetwork, diagnostics: Diagnostics) -> None:
    for line in network.describe_connections():
        diagnostics.trace(line)
    diagnostics.trace(f"network size: {network.total_edge_endpoints()}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    diagnostics = Diagnostics(enabled=args.debug, color=not args.no_color)

    try:
        Config.validate()
    except ValueError as exc:
        diagnostics.error(f"config error: {exc}")
        return 1

    if args.debug:
        for line in Config.display().splitlines():
            diagnostics.info(line)

    try:
        road_map = RoadMapLoader(diagnostics=diagnostics).load(args.input)
        network = build_network(road_map, diagnostics=diagnostics)
        trace_network(network, diagnostics)
        report = analyze(network)
    except ShopnetError as exc:
        diagnostics.error(f"{exc.kind} error: {exc}")
        return 1

    diagnostics.trace(f"reducing with threshold value of {report.threshold}")
    diagnostics.trace(f"hubs {report.hub_ids} need an impact of {report.required_impact}")
    diagnostics.success(f"{len(report.survivor_ids)} shop(s) survived, result {report.result}")

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(report.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
