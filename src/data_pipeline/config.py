from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"
PROCESSED_DATA_DIR = DATA_DIR / "processed"

# Pool export file names
FILE_PATTERNS = {
    "tier_assignments": "tier_assignments.csv",
    "results": "golfer_results.csv",
}
OUTPUT_FILENAME = "unicorn_team.json"

# Required columns per export (owgr_rank is optional in tier assignments)
TIER_ASSIGNMENT_COLUMNS = ["golfer_id", "golfer_name", "tier_value"]
RESULT_COLUMNS = [
    "golfer_id", "to_par", "position", "made_cut", "thru",
    "round_1", "round_2", "round_3", "round_4",
]

# Nullable integer columns in the results export
RESULT_INT_COLUMNS = ["to_par", "thru", "round_1", "round_2", "round_3", "round_4"]

# Values used when a golfer has no result row yet (or a blank cell)
RESULT_DEFAULTS = {
    "to_par": 0,
    "position": "-",
    "made_cut": True,
}
