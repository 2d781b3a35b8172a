"""Compute a pool's unicorn team from its CSV exports.

Usage:
    python -m src.data_pipeline.run_unicorn [data_dir] [min_tier_points] [output_dir]

Examples:
    python -m src.data_pipeline.run_unicorn
    python -m src.data_pipeline.run_unicorn data/raw/masters 21
    python -m src.data_pipeline.run_unicorn data/raw/masters 24 /tmp/out
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from src.data_pipeline.config import OUTPUT_FILENAME, PROCESSED_DATA_DIR, RAW_DATA_DIR
from src.data_pipeline.ingestion import GolfPoolIngester
from src.data_pipeline.transformation import TierMapBuilder
from src.golf_pool.config import DEFAULT_MIN_TIER_POINTS
from src.golf_pool.models import UnicornGolfer
from src.golf_pool.scoring import format_round_score, format_to_par, thru_display
from src.golf_pool.unicorn import find_unicorn_team
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def format_golfer_line(golfer: UnicornGolfer) -> str:
    """One leaderboard row: counted marker, tier, name, to-par, thru, rounds."""
    rounds = (golfer.round1, golfer.round2, golfer.round3, golfer.round4)
    round_cells = " ".join(
        format_round_score(score, round_num, golfer.made_cut)
        for round_num, score in enumerate(rounds, start=1)
    )
    return "%s T%d %-24s %4s %4s  %s" % (
        "*" if golfer.counted else " ",
        golfer.tier,
        golfer.golfer_name,
        format_to_par(golfer.score),
        thru_display(golfer),
        round_cells,
    )


def run_unicorn(
    data_dir: Path | None = None,
    min_tier_points: int = DEFAULT_MIN_TIER_POINTS,
    output_dir: Path | None = None,
) -> Path:
    """Read the exports, find the unicorn team and write it as JSON.

    Args:
        data_dir: Directory containing ``tier_assignments.csv`` and
            (optionally) ``golfer_results.csv``. Defaults to ``data/raw``.
        min_tier_points: The pool's minimum tier points.
        output_dir: Directory for JSON output. Defaults to ``data/processed``.

    Returns:
        Path to the generated JSON file. ``unicorn_team`` is null in the
        output when no valid team exists.

    Raises:
        FileNotFoundError: If the data directory doesn't exist.
    """
    if data_dir is None:
        data_dir = RAW_DATA_DIR
    if output_dir is None:
        output_dir = PROCESSED_DATA_DIR
    data_dir = Path(data_dir)
    output_dir = Path(output_dir)

    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    logger.info(
        "Finding unicorn team (data: %s, min tier points: %d)",
        data_dir, min_tier_points,
    )

    # 1. Ingest
    logger.info("Step 1/3: Ingesting CSV files...")
    raw = GolfPoolIngester(data_dir).read_all()
    logger.info(
        "Loaded: %d tier assignments, %d results",
        len(raw["tier_assignments"]), len(raw["results"]),
    )

    # 2. Transform
    logger.info("Step 2/3: Building tier map...")
    golfers_by_tier = TierMapBuilder().build(raw["tier_assignments"], raw["results"])

    # 3. Optimize
    logger.info("Step 3/3: Searching tier combinations...")
    team = find_unicorn_team(golfers_by_tier, min_tier_points)

    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "min_tier_points": min_tier_points,
            "total_golfers": sum(len(g) for g in golfers_by_tier.values()),
        },
        "unicorn_team": team.to_dict() if team else None,
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / OUTPUT_FILENAME

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    if team:
        logger.info(
            "Unicorn team: %s (%d tier points, %d alternatives)",
            format_to_par(team.total_score),
            team.total_tier_points,
            team.alternative_count,
        )
        for g in team.golfers:
            logger.info("  %s", format_golfer_line(g))
    else:
        logger.info("Not enough data for a valid team")

    logger.info("Output: %s", output_file)
    return output_file


if __name__ == "__main__":
    setup_logging()

    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    min_points = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_MIN_TIER_POINTS
    output_dir = Path(sys.argv[3]) if len(sys.argv) > 3 else None

    try:
        output = run_unicorn(data_dir, min_points, output_dir)
        print(f"Unicorn team written: {output}")
    except Exception:
        logger.exception("Unicorn team run failed")
        sys.exit(1)
