from src.golf_pool.models import (
    EntryPick,
    EntryScoreResult,
    EntryStanding,
    GolferEntryScore,
    GolferWithScore,
    UnicornGolfer,
    UnicornTeam,
    ValidationResult,
)
from src.golf_pool.roster_validator import RosterValidator
from src.golf_pool.scoring import calculate_entry_score, calculate_standings
from src.golf_pool.unicorn import find_unicorn_team, generate_valid_multisets

__all__ = [
    "EntryPick",
    "EntryScoreResult",
    "EntryStanding",
    "GolferEntryScore",
    "GolferWithScore",
    "RosterValidator",
    "UnicornGolfer",
    "UnicornTeam",
    "ValidationResult",
    "calculate_entry_score",
    "calculate_standings",
    "find_unicorn_team",
    "generate_valid_multisets",
]
