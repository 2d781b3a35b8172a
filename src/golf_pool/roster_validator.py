"""Entry roster validation and tier point accounting."""

from typing import Dict, List, Optional, Tuple

from src.golf_pool.config import (
    DEFAULT_MIN_TIER_POINTS,
    OVER_MINIMUM_WARNING,
    REQUIRED_PICKS,
    TIER_INFO,
)
from src.golf_pool.models import EntryPick, ValidationResult


def get_tier_points(tier: int) -> int:
    """Point cost of a tier (the tier value itself for unknown tiers)."""
    info = TIER_INFO.get(tier)
    return info["points"] if info else tier


def get_tier_label(tier: int) -> str:
    info = TIER_INFO.get(tier)
    return info["label"] if info else f"Tier {tier}"


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


class RosterValidator:
    """Validates a golf entry against the pool's roster rules."""

    def __init__(self, min_tier_points: int = DEFAULT_MIN_TIER_POINTS):
        self.min_tier_points = min_tier_points

    def total_tier_points(self, picks: List[EntryPick]) -> int:
        return sum(get_tier_points(p.tier) for p in picks)

    def validate_roster(self, picks: List[EntryPick]) -> ValidationResult:
        """
        Validate a full roster of picks.

        Checks pick count, duplicate golfers and the tier point minimum.
        Spending well over the minimum is a warning, not an error.
        """
        errors = []
        warnings = []

        picks_count = len(picks)
        if picks_count < REQUIRED_PICKS:
            errors.append(f"Need {_plural(REQUIRED_PICKS - picks_count, 'more golfer')}")
        elif picks_count > REQUIRED_PICKS:
            errors.append(
                f"Too many golfers selected ({picks_count}/{REQUIRED_PICKS})"
            )

        seen = set()
        for pick in picks:
            if pick.golfer_id in seen:
                errors.append(f"Duplicate golfer: {pick.golfer_name}")
            seen.add(pick.golfer_id)

        total = self.total_tier_points(picks)
        if total < self.min_tier_points:
            needed = self.min_tier_points - total
            errors.append(
                f"Need {_plural(needed, 'more tier point')} "
                f"({total}/{self.min_tier_points})"
            )

        if total > self.min_tier_points + OVER_MINIMUM_WARNING:
            warnings.append(
                f"You're at {total} points. "
                "Consider picking a lower-tier golfer for better value."
            )

        return ValidationResult(
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            total_tier_points=total,
            min_tier_points=self.min_tier_points,
            picks_count=picks_count,
        )

    def can_add_golfer(
        self, current_picks: List[EntryPick], golfer_id: str
    ) -> Tuple[bool, Optional[str]]:
        """
        Check whether a golfer can be added to an in-progress roster.

        Returns:
            (can_add, reason) - (True, None) if allowed
        """
        if len(current_picks) >= REQUIRED_PICKS:
            return False, f"Roster is full ({REQUIRED_PICKS} golfers)"

        if any(p.golfer_id == golfer_id for p in current_picks):
            return False, "Golfer already selected"

        return True, None

    def get_tier_points_summary(self, picks: List[EntryPick]) -> Dict:
        """Summarize tier points spent against the pool minimum."""
        current = self.total_tier_points(picks)
        minimum = self.min_tier_points

        if current < minimum:
            status = "below"
            message = f"Need {_plural(minimum - current, 'more point')}"
        elif current == minimum:
            status = "at"
            message = "Minimum tier points met"
        else:
            status = "above"
            message = f"{_plural(current - minimum, 'point')} over minimum"

        return {
            "current": current,
            "minimum": minimum,
            "status": status,
            "message": message,
        }
