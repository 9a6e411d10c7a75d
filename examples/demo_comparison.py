"""Demo script for trip insights and trip comparison on the sample trips."""

from pathlib import Path

from trip_insights.analysis import compare_trips, compute_insights, format_duration
from trip_insights.ingestion import load_trip
from trip_insights.utils.logging_utils import setup_logger

# Setup logging
logger = setup_logger("demo_comparison", log_level="INFO")

SAMPLE_DIR = Path(__file__).parent / "sample_trips"


def main():
    """Summarize every sample trip, then compare the two commutes."""

    logger.info("=" * 60)
    logger.info("Trip Insights Demo")
    logger.info("=" * 60)

    for trip_file in sorted(SAMPLE_DIR.glob("*.json")):
        trip = load_trip(trip_file)
        summary = compute_insights(trip)

        logger.info(f"{trip_file.name}:")
        if not summary.has_data:
            logger.info("  (no telemetry points)")
            continue

        logger.info(f"  Distance: {summary.total_distance:.2f} km")
        logger.info(f"  Duration: {format_duration(summary.total_time)}")
        logger.info(
            f"  Speed: avg {summary.average_speed:.2f} / "
            f"min {summary.min_speed:.2f} / max {summary.max_speed:.2f} km/h"
        )

    morning = load_trip(SAMPLE_DIR / "morning_commute.json")
    evening = load_trip(SAMPLE_DIR / "evening_commute.json")
    comparison = compare_trips(morning, evening)

    logger.info("")
    logger.info("Morning vs evening commute:")
    for name, metric in comparison.metrics().items():
        pct = "n/a" if metric.percentage_diff is None else f"{metric.percentage_diff:+.2f}%"
        logger.info(
            f"  {name}: {metric.current} vs {metric.comparison} "
            f"(diff {metric.difference:+.2f}, {pct})"
        )


if __name__ == "__main__":
    main()
