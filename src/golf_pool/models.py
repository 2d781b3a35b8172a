"""Golf pool data models.

Scoring records (``GolferEntryScore``) and display records
(``GolferWithScore`` / ``UnicornGolfer``) are kept as separate types. The
entry-scoring rule only ever sees the narrow shape; display fields are joined
back on ``golfer_id`` afterwards.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class GolferWithScore:
    """A golfer in the field with a tier and current tournament score."""

    golfer_id: str
    golfer_name: str
    tier: int
    to_par: int  # Score relative to par (e.g. -6, 0, +3)
    position: str = "-"
    made_cut: bool = True
    thru: Optional[int] = None
    round1: Optional[int] = None
    round2: Optional[int] = None
    round3: Optional[int] = None
    round4: Optional[int] = None


@dataclass
class GolferEntryScore:
    """Minimal golfer record consumed by the entry-scoring rule."""

    golfer_id: str
    golfer_name: str
    tier: int
    total_score: int
    made_cut: bool
    counted: bool = False
    round1: Optional[int] = None
    round2: Optional[int] = None
    round3: Optional[int] = None
    round4: Optional[int] = None


@dataclass
class EntryScoreResult:
    """Outcome of best-4-of-6 scoring for a single entry."""

    total_score: int
    counted_golfers: List[GolferEntryScore]
    dropped_golfers: List[GolferEntryScore]


@dataclass
class UnicornGolfer:
    """A golfer on the optimal team, tagged counted or dropped."""

    golfer_id: str
    golfer_name: str
    tier: int
    score: int  # to_par
    position: str
    made_cut: bool
    thru: Optional[int]
    round1: Optional[int]
    round2: Optional[int]
    round3: Optional[int]
    round4: Optional[int]
    counted: bool

    def to_dict(self) -> dict:
        return {
            "golfer_id": self.golfer_id,
            "golfer_name": self.golfer_name,
            "tier": self.tier,
            "score": self.score,
            "position": self.position,
            "made_cut": self.made_cut,
            "thru": self.thru,
            "round1": self.round1,
            "round2": self.round2,
            "round3": self.round3,
            "round4": self.round4,
            "counted": self.counted,
        }


@dataclass
class UnicornTeam:
    """The best possible 6-golfer roster for the current leaderboard."""

    golfers: List[UnicornGolfer]
    total_score: int
    total_tier_points: int
    alternative_count: int  # OTHER tier combinations achieving the same score

    @property
    def counted_golfers(self) -> List[UnicornGolfer]:
        return [g for g in self.golfers if g.counted]

    @property
    def dropped_golfers(self) -> List[UnicornGolfer]:
        return [g for g in self.golfers if not g.counted]

    def to_dict(self) -> dict:
        return {
            "golfers": [g.to_dict() for g in self.golfers],
            "total_score": self.total_score,
            "total_tier_points": self.total_tier_points,
            "alternative_count": self.alternative_count,
        }


@dataclass
class EntryPick:
    """One golfer picked on a user's entry."""

    golfer_id: str
    golfer_name: str
    tier: int


@dataclass
class EntryStanding:
    """An entry's place on the pool leaderboard."""

    entry_id: str
    entry_name: Optional[str]
    user_name: Optional[str]
    score: Optional[int]  # None until the entry has scored picks
    golfer_scores: List[GolferEntryScore] = field(default_factory=list)
    rank: int = 0
    tied: bool = False


@dataclass
class ValidationResult:
    """Result of validating an entry's roster of picks."""

    valid: bool
    errors: List[str]
    warnings: List[str]
    total_tier_points: int
    min_tier_points: int
    picks_count: int


@dataclass
class LockCountdown:
    """Time remaining until picks lock, formatted for display."""

    locked: bool
    time_string: Optional[str]
    urgency: str  # "none", "warning" or "danger"
