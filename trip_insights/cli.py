"""Summarize or compare trip JSON files from the command line.

Usage:
    trip-insights insights trips/morning.json
    trip-insights compare trips/morning.json trips/evening.json --output data/reports/cmp.json

Output:
    Summary JSON on stdout, and at --output when given.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from trip_insights.analysis import compare_trips, compute_insights, format_duration
from trip_insights.errors import TripInsightsError
from trip_insights.ingestion import load_trip
from trip_insights.utils.io_utils import write_report
from trip_insights.utils.logging_utils import get_logger, setup_logger

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def run_insights(trip_path: Path, output: Optional[Path] = None) -> dict:
    """Compute and optionally save the insight summary of one trip file."""
    trip = load_trip(trip_path)
    summary = compute_insights(trip)
    payload = summary.to_payload()

    logger.info(f"Trip {trip.id}: duration {format_duration(summary.total_time)}")

    if output is not None:
        write_report(payload, output)
        logger.info(f"Insights saved to {output}")

    return payload


def run_comparison(
    current_path: Path, comparison_path: Path, output: Optional[Path] = None
) -> dict:
    """Compute and optionally save the comparison of two trip files."""
    current = load_trip(current_path)
    comparison = load_trip(comparison_path)
    summary = compare_trips(current, comparison)
    payload = summary.to_payload()

    if output is not None:
        write_report(payload, output)
        logger.info(f"Comparison saved to {output}")

    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trip-insights",
        description="Trip insights and trip comparison for telemetry uploads",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: from settings)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    insights = subparsers.add_parser("insights", help="Summarize one trip")
    insights.add_argument("trip", type=Path, help="Trip JSON file")
    insights.add_argument("--output", type=Path, help="Write summary JSON here")

    compare = subparsers.add_parser("compare", help="Compare a trip against a baseline trip")
    compare.add_argument("current", type=Path, help="Trip JSON file to inspect")
    compare.add_argument("comparison", type=Path, help="Baseline trip JSON file")
    compare.add_argument("--output", type=Path, help="Write comparison JSON here")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logger("trip_insights", log_level=args.log_level)

    try:
        if args.command == "insights":
            payload = run_insights(args.trip, args.output)
        else:
            payload = run_comparison(args.current, args.comparison, args.output)
    except (TripInsightsError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
