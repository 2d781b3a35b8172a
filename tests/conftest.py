"""Shared fixtures for the golf pool test suite."""

import textwrap

import pytest

from src.data_pipeline.ingestion import GolfPoolIngester
from src.data_pipeline.transformation import TierMapBuilder
from src.golf_pool.roster_validator import RosterValidator

TIER_ASSIGNMENTS_CSV = textwrap.dedent("""\
    golfer_id,golfer_name,tier_value,owgr_rank
    001,Alpha Golfer,1,3
    002,Bravo Golfer,1,7
    003,Charlie Golfer,2,18
    004,Delta Golfer,3,44
    005,Echo Golfer,4,90
    006,Foxtrot Golfer,5,150
    007,Golf Golfer,6,
""")

GOLFER_RESULTS_CSV = textwrap.dedent("""\
    golfer_id,to_par,position,made_cut,thru,round_1,round_2,round_3,round_4
    001,-2,T1,true,18,70,68,,
    002,-1,T3,true,16,71,68,,
    003,0,T8,true,18,72,72,,
    004,1,T12,true,,73,72,,
    005,2,T20,true,9,72,74,,
    006,3,T33,false,,75,72,,
    007,4,T40,false,,76,72,,
""")


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def validator():
    return RosterValidator(min_tier_points=21)


@pytest.fixture(scope="module")
def builder():
    return TierMapBuilder()


# ------------------------------------------------------------------
# File fixtures – a small pool export written to a temp directory
# ------------------------------------------------------------------

@pytest.fixture
def pool_dir(tmp_path):
    """Directory holding a seven-golfer tier assignment and results export."""
    (tmp_path / "tier_assignments.csv").write_text(TIER_ASSIGNMENTS_CSV)
    (tmp_path / "golfer_results.csv").write_text(GOLFER_RESULTS_CSV)
    return tmp_path


@pytest.fixture
def ingester(pool_dir):
    return GolfPoolIngester(pool_dir)
