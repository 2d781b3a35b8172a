"""CSV ingestion for golf pool exports.

Handles the quirks of the exported files:
- Golfer IDs that look numeric but must stay strings
- Blank cells for rounds not yet played
- ``made_cut`` written as true/false, yes/no or 1/0
- A results file that doesn't exist yet before the first tee time
"""

import logging
from pathlib import Path

import pandas as pd

from src.data_pipeline.config import (
    FILE_PATTERNS,
    RESULT_COLUMNS,
    RESULT_INT_COLUMNS,
    TIER_ASSIGNMENT_COLUMNS,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "t", "yes", "y", "1"}
_FALSE_VALUES = {"false", "f", "no", "n", "0"}


class IngestionError(Exception):
    """Raised when CSV ingestion fails."""


def _parse_bool(value):
    """Parse a loosely formatted boolean, returning pd.NA for blanks/unknowns."""
    if value is None or value is pd.NA:
        return pd.NA
    if pd.api.types.is_bool(value):
        return bool(value)
    if pd.api.types.is_number(value):
        # 1/0 columns with a blank cell are read as float (1.0, 0.0, NaN)
        if pd.isna(value) or value not in (0, 1):
            return pd.NA
        return bool(value)
    s = str(value).strip().lower()
    if s in _TRUE_VALUES:
        return True
    if s in _FALSE_VALUES:
        return False
    return pd.NA


class GolfPoolIngester:
    """Reads a pool's tier assignment and golfer result exports.

    Each read method returns a pandas DataFrame with:
    - String ``golfer_id`` values
    - Nullable integer score columns
    - Rows without a golfer ID removed
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, file_key: str) -> Path:
        return self.data_dir / FILE_PATTERNS[file_key]

    @staticmethod
    def _check_columns(df: pd.DataFrame, required: list[str], filename: str) -> None:
        missing = [c for c in required if c not in df.columns]
        if missing:
            raise IngestionError(f"{filename} is missing columns: {missing}")

    # ------------------------------------------------------------------
    # Tier assignments
    # ------------------------------------------------------------------
    def read_tier_assignments(self) -> pd.DataFrame:
        """Read the tier assignments file.

        Returns DataFrame with columns:
            golfer_id, golfer_name, tier_value, owgr_rank
        """
        filepath = self._path("tier_assignments")
        if not filepath.exists():
            raise FileNotFoundError(f"Expected file not found: {filepath}")
        logger.info("Reading tier assignments: %s", filepath.name)

        df = pd.read_csv(filepath, dtype={"golfer_id": str})
        self._check_columns(df, TIER_ASSIGNMENT_COLUMNS, filepath.name)

        df["golfer_id"] = df["golfer_id"].str.strip()
        df["golfer_name"] = df["golfer_name"].astype(str).str.strip()
        df = df[df["golfer_id"].notna() & (df["golfer_id"] != "")].copy()

        df["tier_value"] = pd.to_numeric(df["tier_value"], errors="coerce")
        unassigned = df["tier_value"].isna()
        if unassigned.any():
            logger.warning(
                "Dropping %d golfers with no tier: %s",
                unassigned.sum(),
                df.loc[unassigned, "golfer_name"].tolist(),
            )
            df = df[~unassigned].copy()
        df["tier_value"] = df["tier_value"].astype(int)

        if "owgr_rank" not in df.columns:
            df["owgr_rank"] = None
        df["owgr_rank"] = pd.to_numeric(df["owgr_rank"], errors="coerce").astype("Int64")

        df = df.reset_index(drop=True)
        logger.info("Loaded %d tier assignments", len(df))
        return df

    # ------------------------------------------------------------------
    # Golfer results
    # ------------------------------------------------------------------
    def read_results(self) -> pd.DataFrame:
        """Read the golfer results file.

        A missing file yields an empty DataFrame: nobody has teed off yet,
        so every golfer takes the default result.

        Returns DataFrame with columns:
            golfer_id, to_par, position, made_cut, thru,
            round_1, round_2, round_3, round_4
        """
        filepath = self._path("results")
        if not filepath.exists():
            logger.warning("No results file at %s; using defaults", filepath)
            return pd.DataFrame(columns=RESULT_COLUMNS)
        logger.info("Reading golfer results: %s", filepath.name)

        df = pd.read_csv(filepath, dtype={"golfer_id": str, "position": str})
        self._check_columns(df, ["golfer_id"], filepath.name)

        for col in RESULT_COLUMNS:
            if col not in df.columns:
                df[col] = None

        df["golfer_id"] = df["golfer_id"].str.strip()
        df = df[df["golfer_id"].notna() & (df["golfer_id"] != "")].copy()

        for col in RESULT_INT_COLUMNS:
            df[col] = pd.to_numeric(df[col], errors="coerce").astype("Int64")
        df["made_cut"] = df["made_cut"].apply(_parse_bool).astype("boolean")

        df = df[RESULT_COLUMNS].reset_index(drop=True)
        logger.info("Loaded %d golfer results", len(df))
        return df

    def read_all(self) -> dict[str, pd.DataFrame]:
        """Read both exports.

        Returns:
            dict with keys: 'tier_assignments', 'results'

        Raises:
            IngestionError: if either file cannot be read.
        """
        try:
            return {
                "tier_assignments": self.read_tier_assignments(),
                "results": self.read_results(),
            }
        except IngestionError:
            raise
        except Exception as e:
            raise IngestionError(f"Failed to read CSV files: {e}") from e
