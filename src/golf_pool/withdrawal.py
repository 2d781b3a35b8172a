"""Replacement lookup for golfers who withdraw from the tournament.

A withdrawn golfer is replaced by the best available golfer in the same
tier, ranked by Official World Golf Ranking (lower is better).
"""

import logging
from typing import Iterable, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def find_best_replacement(
    tier_assignments: pd.DataFrame,
    tier: int,
    exclude_golfer_ids: Iterable[str],
    active_golfer_ids: Iterable[str],
) -> Optional[dict]:
    """Find the best available replacement golfer in *tier*.

    Args:
        tier_assignments: One row per golfer with columns ``golfer_id``,
            ``golfer_name``, ``tier_value`` and ``owgr_rank`` (may be NaN).
        tier: Tier the replacement must come from.
        exclude_golfer_ids: Golfers already on the entry, plus the
            withdrawn golfer.
        active_golfer_ids: Golfers still in the tournament field.

    Returns:
        Dict with ``golfer_id``, ``golfer_name`` and ``owgr_rank`` (None when
        unranked), or None if nobody in the tier is available.
    """
    excluded = set(exclude_golfer_ids)
    active = set(active_golfer_ids)

    candidates = tier_assignments[
        (tier_assignments["tier_value"] == tier)
        & ~tier_assignments["golfer_id"].isin(excluded)
        & tier_assignments["golfer_id"].isin(active)
    ]

    if candidates.empty:
        logger.info("No replacement available in tier %d", tier)
        return None

    # Stable sort keeps input order among equal ranks; unranked golfers last
    best = candidates.sort_values(
        "owgr_rank", ascending=True, na_position="last", kind="mergesort"
    ).iloc[0]

    owgr = best["owgr_rank"]
    replacement = {
        "golfer_id": best["golfer_id"],
        "golfer_name": best["golfer_name"],
        "owgr_rank": None if pd.isna(owgr) else int(owgr),
    }
    logger.info(
        "Tier %d replacement: %s (OWGR %s)",
        tier, replacement["golfer_name"], replacement["owgr_rank"],
    )
    return replacement
