"""Golf scoring calculations.

The entry-scoring rule (:func:`calculate_entry_score`) is shared by the pool
standings and the unicorn team optimizer, so it must stay deterministic: ties
in golfer score keep their input order.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Union

from src.golf_pool.config import COUNTED_GOLFERS, DEFAULT_PAR, MISSED_CUT_PENALTY
from src.golf_pool.models import (
    EntryScoreResult,
    EntryStanding,
    GolferEntryScore,
    GolferWithScore,
    LockCountdown,
    UnicornGolfer,
)


def calculate_golfer_score(
    round1: Optional[int],
    round2: Optional[int],
    round3: Optional[int],
    round4: Optional[int],
    made_cut: bool,
) -> int:
    """Calculate a golfer's total strokes for the tournament.

    Rounds not yet played count as 0. A golfer who missed the cut is charged
    ``MISSED_CUT_PENALTY`` for each of R3 and R4 regardless of what was
    recorded for those rounds.
    """
    r1 = round1 or 0
    r2 = round2 or 0

    if not made_cut:
        return r1 + r2 + MISSED_CUT_PENALTY + MISSED_CUT_PENALTY

    return r1 + r2 + (round3 or 0) + (round4 or 0)


def calculate_entry_score(golfer_scores: List[GolferEntryScore]) -> EntryScoreResult:
    """Score an entry using "best 4 of 6".

    Golfers are sorted by ``total_score`` ascending (stable), the first four
    are counted and summed, the rest are dropped. The input records are not
    mutated; counted/dropped copies are returned.
    """
    if not golfer_scores:
        return EntryScoreResult(total_score=0, counted_golfers=[], dropped_golfers=[])

    ordered = sorted(golfer_scores, key=lambda g: g.total_score)

    counted = [replace(g, counted=True) for g in ordered[:COUNTED_GOLFERS]]
    dropped = [replace(g, counted=False) for g in ordered[COUNTED_GOLFERS:]]

    total = sum(g.total_score for g in counted)
    return EntryScoreResult(
        total_score=total, counted_golfers=counted, dropped_golfers=dropped
    )


def format_to_par(value: int) -> str:
    """Format a score already relative to par: 0 -> "E", 3 -> "+3", -4 -> "-4"."""
    if value == 0:
        return "E"
    if value > 0:
        return f"+{value}"
    return str(value)


def format_score_to_par(score: int, par: int = DEFAULT_PAR) -> str:
    """Format a stroke total relative to par, e.g. 280 with par 288 -> "-8"."""
    return format_to_par(score - par)


def format_round_score(
    score: Optional[int], round_num: Optional[int] = None, made_cut: bool = True
) -> str:
    """Format a single round score; unplayed rounds show as "-".

    R3 and R4 of a golfer who missed the cut show the penalty strokes that
    :func:`calculate_golfer_score` charges, whatever was recorded.
    """
    if not made_cut and round_num in (3, 4):
        return str(MISSED_CUT_PENALTY)
    if score is None:
        return "-"
    return str(score)


def thru_display(golfer: Union[GolferWithScore, UnicornGolfer]) -> str:
    """Progress column for a golfer: CUT, F, the current hole, or "-"."""
    if not golfer.made_cut:
        return "CUT"
    if golfer.thru == 18:
        return "F"
    if golfer.thru is None:
        rounds = (golfer.round1, golfer.round2, golfer.round3, golfer.round4)
        # A completed round with no hole count means the golfer has finished
        if any(r is not None for r in rounds):
            return "F"
        return "-"
    return str(golfer.thru)


def calculate_standings(entries: List[EntryStanding]) -> List[EntryStanding]:
    """Rank entries by score (lowest first) with competition-style ties.

    Entries without a score sort last. Tied entries share a rank and the next
    distinct score skips ahead (1, 1, 3). ``tied`` is set on every entry whose
    score equals the entry ranked directly above it.
    """
    ordered = sorted(
        entries,
        key=lambda e: (e.score is None, e.score if e.score is not None else 0),
    )

    ranked = []
    current_rank = 1
    previous_score = None

    for index, entry in enumerate(ordered):
        tied = previous_score is not None and entry.score == previous_score
        if not tied:
            current_rank = index + 1
        previous_score = entry.score
        ranked.append(replace(entry, rank=current_rank, tied=tied))

    return ranked


def _parse_lock_time(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        lock_time = value
    else:
        lock_time = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if lock_time.tzinfo is None:
        lock_time = lock_time.replace(tzinfo=timezone.utc)
    return lock_time


def _utc_now(now: Optional[datetime]) -> datetime:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now


def are_picks_locked(
    picks_lock_at: Optional[Union[str, datetime]],
    demo_mode: bool = False,
    now: Optional[datetime] = None,
) -> bool:
    """Whether picks are locked.

    Demo pools never lock, and neither do pools without a lock time.
    """
    if demo_mode:
        return False
    if not picks_lock_at:
        return False
    return _utc_now(now) >= _parse_lock_time(picks_lock_at)


def get_time_until_lock(
    picks_lock_at: Optional[Union[str, datetime]],
    now: Optional[datetime] = None,
) -> LockCountdown:
    """Describe how long until picks lock, with an urgency level."""
    if not picks_lock_at:
        return LockCountdown(locked=False, time_string=None, urgency="none")

    remaining = (_parse_lock_time(picks_lock_at) - _utc_now(now)).total_seconds()
    if remaining <= 0:
        return LockCountdown(locked=True, time_string="Locked", urgency="danger")

    hours = int(remaining // 3600)
    minutes = int((remaining % 3600) // 60)

    if hours > 24:
        days = hours // 24
        time_string = f"{days} day{'s' if days != 1 else ''}"
        urgency = "none"
    elif hours > 0:
        time_string = f"{hours}h {minutes}m"
        urgency = "warning" if hours < 2 else "none"
    else:
        time_string = f"{minutes}m"
        urgency = "danger"

    return LockCountdown(locked=False, time_string=time_string, urgency=urgency)
