"""Build the tier -> golfers mapping consumed by the unicorn optimizer.

Joins tier assignments with golfer results, fills in defaults for golfers
without a result yet, and sorts each tier best score first.
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from src.data_pipeline.config import RESULT_DEFAULTS
from src.golf_pool.models import GolferWithScore

logger = logging.getLogger(__name__)


def _optional_int(val) -> Optional[int]:
    """Convert *val* to int, returning None for NaN/None/pd.NA."""
    if val is None or pd.isna(val):
        return None
    return int(val)


class TierMapBuilder:
    """Merges pool exports into sorted per-tier golfer lists."""

    def merge_results(
        self, tier_assignments: pd.DataFrame, results: pd.DataFrame
    ) -> pd.DataFrame:
        """Left-join results onto tier assignments and apply result defaults.

        Every tier assignment row is kept; result rows for golfers without a
        tier are ignored.
        """
        results = results.drop_duplicates(subset="golfer_id", keep="last")
        merged = tier_assignments.merge(
            results, on="golfer_id", how="left", validate="many_to_one"
        )

        no_result = ~merged["golfer_id"].isin(results["golfer_id"])
        if no_result.any():
            logger.debug("%d golfers have no result yet", no_result.sum())

        merged["to_par"] = (
            pd.to_numeric(merged["to_par"], errors="coerce")
            .fillna(RESULT_DEFAULTS["to_par"])
            .astype(int)
        )
        merged["position"] = (
            merged["position"].astype("string").fillna(RESULT_DEFAULTS["position"])
        )
        merged["made_cut"] = (
            merged["made_cut"].astype("boolean").fillna(RESULT_DEFAULTS["made_cut"])
        )
        return merged

    def sort_by_tier(self, merged: pd.DataFrame) -> pd.DataFrame:
        """Sort by tier, then by to_par ascending (best first).

        Stable, so golfers level on score keep their export order.
        """
        return merged.sort_values(
            ["tier_value", "to_par"], kind="mergesort"
        ).reset_index(drop=True)

    @staticmethod
    def _row_to_golfer(row: pd.Series) -> GolferWithScore:
        return GolferWithScore(
            golfer_id=str(row["golfer_id"]),
            golfer_name=str(row["golfer_name"]),
            tier=int(row["tier_value"]),
            to_par=int(row["to_par"]),
            position=str(row["position"]),
            made_cut=bool(row["made_cut"]),
            thru=_optional_int(row.get("thru")),
            round1=_optional_int(row.get("round_1")),
            round2=_optional_int(row.get("round_2")),
            round3=_optional_int(row.get("round_3")),
            round4=_optional_int(row.get("round_4")),
        )

    def build(
        self, tier_assignments: pd.DataFrame, results: pd.DataFrame
    ) -> Dict[int, List[GolferWithScore]]:
        """Full transform: merge -> defaults -> sort -> group by tier.

        Returns:
            Dict mapping tier value to that tier's golfers, best first.
            Tiers with no golfers are absent.
        """
        merged = self.sort_by_tier(self.merge_results(tier_assignments, results))

        golfers_by_tier: Dict[int, List[GolferWithScore]] = {}
        for _, row in merged.iterrows():
            golfer = self._row_to_golfer(row)
            golfers_by_tier.setdefault(golfer.tier, []).append(golfer)

        logger.info(
            "Built tier map: %s",
            ", ".join(
                f"T{tier}={len(golfers)}"
                for tier, golfers in sorted(golfers_by_tier.items())
            ),
        )
        return golfers_by_tier
