"""Unicorn team optimizer.

Finds the best possible 6-golfer roster that meets the pool's tier point
minimum under "best 4 of 6" scoring.

Brute force over the field is on the order of 13 billion rosters. Instead
every valid tier multiset (how many golfers come from each tier) is
enumerated, a few hundred at most, and each multiset is filled greedily with
the best golfers of each tier. The best-4-of-6 total never gets worse when a
golfer is swapped for a better one, so the greedy roster is optimal for its
multiset and the best over all multisets is the global optimum.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Tuple

from src.golf_pool.config import (
    DEFAULT_MIN_TIER_POINTS,
    MAX_TIER,
    MIN_TIER,
    REQUIRED_PICKS,
)
from src.golf_pool.models import (
    GolferEntryScore,
    GolferWithScore,
    UnicornGolfer,
    UnicornTeam,
)
from src.golf_pool.scoring import calculate_entry_score

logger = logging.getLogger(__name__)


def generate_valid_multisets(min_points: int) -> List[Tuple[int, ...]]:
    """Generate every 6-element tier multiset whose sum is at least *min_points*.

    Multisets are produced as non-decreasing tuples in ascending
    lexicographic order, e.g. ``(1, 1, 2, 3, 4, 6)``. For ``min_points=0``
    this is all C(12, 6) = 924 combinations; above 36 it is empty.
    """
    results: List[Tuple[int, ...]] = []
    current: List[int] = []

    def generate(start_tier: int, remaining: int, current_sum: int) -> None:
        if remaining == 0:
            if current_sum >= min_points:
                results.append(tuple(current))
            return

        # Prune when even all-top-tier picks can't reach the minimum
        if current_sum + remaining * MAX_TIER < min_points:
            return

        # Starting at the previous tier (not tier + 1) allows repetition
        for tier in range(start_tier, MAX_TIER + 1):
            current.append(tier)
            generate(tier, remaining - 1, current_sum + tier)
            current.pop()

    generate(MIN_TIER, REQUIRED_PICKS, 0)
    return results


def _build_team(
    golfers_by_tier: Dict[int, List[GolferWithScore]],
    tier_counts: Dict[int, int],
) -> Optional[List[GolferWithScore]]:
    """Take the top golfers of each tier, or None if a tier is too thin."""
    for tier, count in tier_counts.items():
        if len(golfers_by_tier.get(tier) or []) < count:
            return None

    team: List[GolferWithScore] = []
    for tier, count in tier_counts.items():
        team.extend(golfers_by_tier[tier][:count])
    return team


def _to_entry_scores(team: List[GolferWithScore]) -> List[GolferEntryScore]:
    return [
        GolferEntryScore(
            golfer_id=g.golfer_id,
            golfer_name=g.golfer_name,
            tier=g.tier,
            total_score=g.to_par,
            made_cut=g.made_cut,
        )
        for g in team
    ]


def _to_unicorn_golfer(original: GolferWithScore, counted: bool) -> UnicornGolfer:
    return UnicornGolfer(
        golfer_id=original.golfer_id,
        golfer_name=original.golfer_name,
        tier=original.tier,
        score=original.to_par,
        position=original.position,
        made_cut=original.made_cut,
        thru=original.thru,
        round1=original.round1,
        round2=original.round2,
        round3=original.round3,
        round4=original.round4,
        counted=counted,
    )


def find_unicorn_team(
    golfers_by_tier: Dict[int, List[GolferWithScore]],
    min_tier_points: int = DEFAULT_MIN_TIER_POINTS,
) -> Optional[UnicornTeam]:
    """Find the optimal "unicorn" team for the current leaderboard.

    Args:
        golfers_by_tier: Tier -> golfers, each list sorted by ``to_par``
            ascending (best first). The order is trusted, not re-checked.
            A missing tier is treated as an empty one.
        min_tier_points: Minimum tier points a roster must spend.

    Returns:
        The optimal :class:`UnicornTeam`, or None when no roster can be
        built (too few golfers, or the minimum is unreachable).

    When several tier multisets tie for the best score, the first one in
    generation order is shown and the rest are reported through
    ``alternative_count``.
    """
    valid_multisets = generate_valid_multisets(min_tier_points)

    best_team: Optional[List[GolferWithScore]] = None
    best_score: Optional[int] = None
    best_tier_points = 0
    teams_at_best_score = 0
    feasible = 0

    for multiset in valid_multisets:
        team = _build_team(golfers_by_tier, Counter(multiset))
        if team is None:
            continue
        feasible += 1

        total_score = calculate_entry_score(_to_entry_scores(team)).total_score

        if best_score is None or total_score < best_score:
            best_score = total_score
            best_team = team
            best_tier_points = sum(multiset)
            teams_at_best_score = 1
        elif total_score == best_score:
            teams_at_best_score += 1

    logger.debug(
        "Unicorn search: %d multisets (min %d pts), %d feasible, best=%s, ties=%d",
        len(valid_multisets), min_tier_points, feasible, best_score,
        teams_at_best_score,
    )

    if best_team is None:
        logger.info(
            "No valid unicorn team for minimum of %d tier points", min_tier_points
        )
        return None

    # Second pass: counted/dropped flags come from the scoring rule, display
    # fields from the original golfer records.
    scored = calculate_entry_score(_to_entry_scores(best_team))
    originals = {g.golfer_id: g for g in best_team}

    golfers = [
        _to_unicorn_golfer(originals[g.golfer_id], counted=True)
        for g in scored.counted_golfers
    ] + [
        _to_unicorn_golfer(originals[g.golfer_id], counted=False)
        for g in scored.dropped_golfers
    ]

    return UnicornTeam(
        golfers=golfers,
        total_score=best_score,
        total_tier_points=best_tier_points,
        alternative_count=teams_at_best_score - 1,
    )
