"""Tests for golf scoring, standings and pick-lock helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from src.golf_pool.models import EntryStanding, GolferEntryScore, UnicornGolfer
from src.golf_pool.scoring import (
    are_picks_locked,
    calculate_entry_score,
    calculate_golfer_score,
    calculate_standings,
    format_round_score,
    format_score_to_par,
    format_to_par,
    get_time_until_lock,
    thru_display,
)

NOW = datetime(2025, 4, 10, 12, 0, tzinfo=timezone.utc)


# ── Helpers ──────────────────────────────────────────────────────────

def _entry_score(golfer_id, total_score, made_cut=True):
    return GolferEntryScore(
        golfer_id=golfer_id,
        golfer_name=f"Golfer {golfer_id}",
        tier=1,
        total_score=total_score,
        made_cut=made_cut,
    )


def _standing(entry_id, score):
    return EntryStanding(
        entry_id=entry_id, entry_name=f"Entry {entry_id}", user_name=None, score=score
    )


def _display_golfer(made_cut=True, thru=None, rounds=(None, None, None, None)):
    return UnicornGolfer(
        golfer_id="g1", golfer_name="Golfer", tier=1, score=0, position="-",
        made_cut=made_cut, thru=thru,
        round1=rounds[0], round2=rounds[1], round3=rounds[2], round4=rounds[3],
        counted=True,
    )


# ── Golfer score ─────────────────────────────────────────────────────

class TestCalculateGolferScore:
    def test_sums_four_rounds(self):
        assert calculate_golfer_score(70, 68, 71, 69, True) == 278

    def test_unplayed_rounds_count_zero(self):
        assert calculate_golfer_score(70, 68, None, None, True) == 138

    def test_missed_cut_penalty(self):
        assert calculate_golfer_score(75, 78, None, None, False) == 75 + 78 + 160

    def test_missed_cut_ignores_weekend_scores(self):
        assert calculate_golfer_score(75, 78, 70, 70, False) == 313


# ── Entry score (best 4 of 6) ────────────────────────────────────────

class TestCalculateEntryScore:
    def test_empty_entry(self):
        result = calculate_entry_score([])
        assert result.total_score == 0
        assert result.counted_golfers == []
        assert result.dropped_golfers == []

    def test_best_four_counted(self):
        scores = [_entry_score(str(i), s) for i, s in enumerate([5, -3, 2, 0, 8, -1])]
        result = calculate_entry_score(scores)
        assert result.total_score == -3 + -1 + 0 + 2
        assert [g.total_score for g in result.counted_golfers] == [-3, -1, 0, 2]
        assert [g.total_score for g in result.dropped_golfers] == [5, 8]

    def test_flags_set_on_copies(self):
        scores = [_entry_score(str(i), s) for i, s in enumerate(range(6))]
        result = calculate_entry_score(scores)
        assert all(g.counted for g in result.counted_golfers)
        assert not any(g.counted for g in result.dropped_golfers)
        assert not any(g.counted for g in scores)

    def test_ties_keep_input_order(self):
        scores = [_entry_score(gid, 0) for gid in "abcdef"]
        result = calculate_entry_score(scores)
        assert [g.golfer_id for g in result.counted_golfers] == list("abcd")
        assert [g.golfer_id for g in result.dropped_golfers] == list("ef")

    def test_fewer_than_four_all_counted(self):
        scores = [_entry_score("a", 3), _entry_score("b", -1)]
        result = calculate_entry_score(scores)
        assert result.total_score == 2
        assert result.dropped_golfers == []

    def test_deterministic(self):
        scores = [_entry_score(str(i), s) for i, s in enumerate([1, 1, 0, 2, 2, 0])]
        assert calculate_entry_score(scores) == calculate_entry_score(scores)


# ── Formatting ───────────────────────────────────────────────────────

class TestFormatting:
    @pytest.mark.parametrize("value, expected", [(0, "E"), (3, "+3"), (-4, "-4")])
    def test_format_to_par(self, value, expected):
        assert format_to_par(value) == expected

    def test_format_score_to_par_default_par(self):
        assert format_score_to_par(280) == "-8"
        assert format_score_to_par(288) == "E"
        assert format_score_to_par(291) == "+3"

    def test_format_score_to_par_custom_par(self):
        assert format_score_to_par(140, par=142) == "-2"

    def test_format_round_score(self):
        assert format_round_score(None) == "-"
        assert format_round_score(68) == "68"

    @pytest.mark.parametrize("round_num", [3, 4])
    def test_missed_cut_weekend_rounds_show_penalty(self, round_num):
        assert format_round_score(None, round_num, made_cut=False) == "80"
        assert format_round_score(74, round_num, made_cut=False) == "80"

    @pytest.mark.parametrize("round_num", [1, 2])
    def test_missed_cut_opening_rounds_unchanged(self, round_num):
        assert format_round_score(75, round_num, made_cut=False) == "75"
        assert format_round_score(None, round_num, made_cut=False) == "-"

    def test_made_cut_weekend_rounds_unchanged(self):
        assert format_round_score(None, 3) == "-"
        assert format_round_score(69, 4, made_cut=True) == "69"


class TestThruDisplay:
    def test_missed_cut(self):
        assert thru_display(_display_golfer(made_cut=False, thru=18)) == "CUT"

    def test_finished(self):
        assert thru_display(_display_golfer(thru=18)) == "F"

    def test_in_progress(self):
        assert thru_display(_display_golfer(thru=7)) == "7"

    def test_unknown_thru_with_round_scores(self):
        golfer = _display_golfer(rounds=(70, None, None, None))
        assert thru_display(golfer) == "F"

    def test_no_data(self):
        assert thru_display(_display_golfer()) == "-"


# ── Standings ────────────────────────────────────────────────────────

class TestCalculateStandings:
    def test_sorted_lowest_first(self):
        ranked = calculate_standings([_standing("a", 5), _standing("b", -2), _standing("c", 0)])
        assert [e.entry_id for e in ranked] == ["b", "c", "a"]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_ties_share_rank_and_skip(self):
        ranked = calculate_standings([
            _standing("a", -1), _standing("b", -3), _standing("c", -3), _standing("d", 4),
        ])
        assert [(e.entry_id, e.rank, e.tied) for e in ranked] == [
            ("b", 1, False), ("c", 1, True), ("a", 3, False), ("d", 4, False),
        ]

    def test_unscored_entries_last(self):
        ranked = calculate_standings([_standing("a", None), _standing("b", 2)])
        assert [e.entry_id for e in ranked] == ["b", "a"]
        assert ranked[1].rank == 2

    def test_unscored_entries_never_marked_tied(self):
        ranked = calculate_standings([
            _standing("a", None), _standing("b", 1), _standing("c", None),
        ])
        assert [(e.entry_id, e.rank) for e in ranked] == [("b", 1), ("a", 2), ("c", 3)]

    def test_input_not_mutated(self):
        entries = [_standing("a", 1)]
        calculate_standings(entries)
        assert entries[0].rank == 0

    def test_empty(self):
        assert calculate_standings([]) == []


# ── Pick locking ─────────────────────────────────────────────────────

class TestPicksLocked:
    def test_no_lock_time(self):
        assert are_picks_locked(None, now=NOW) is False

    def test_demo_mode_never_locks(self):
        past = (NOW - timedelta(days=1)).isoformat()
        assert are_picks_locked(past, demo_mode=True, now=NOW) is False

    def test_locked_after_lock_time(self):
        assert are_picks_locked("2025-04-10T11:00:00Z", now=NOW) is True

    def test_locked_at_exact_lock_time(self):
        assert are_picks_locked(NOW, now=NOW) is True

    def test_open_before_lock_time(self):
        assert are_picks_locked("2025-04-10T13:00:00+00:00", now=NOW) is False

    def test_naive_lock_time_treated_as_utc(self):
        assert are_picks_locked("2025-04-10T11:59:00", now=NOW) is True


class TestTimeUntilLock:
    def test_no_lock_time(self):
        countdown = get_time_until_lock(None, now=NOW)
        assert countdown.locked is False
        assert countdown.time_string is None
        assert countdown.urgency == "none"

    def test_already_locked(self):
        countdown = get_time_until_lock(NOW - timedelta(minutes=1), now=NOW)
        assert countdown.locked is True
        assert countdown.time_string == "Locked"
        assert countdown.urgency == "danger"

    def test_days_away(self):
        countdown = get_time_until_lock(NOW + timedelta(days=3, hours=2), now=NOW)
        assert countdown.time_string == "3 days"
        assert countdown.urgency == "none"

    def test_one_day_singular(self):
        countdown = get_time_until_lock(NOW + timedelta(hours=30), now=NOW)
        assert countdown.time_string == "1 day"

    def test_hours_away(self):
        countdown = get_time_until_lock(NOW + timedelta(hours=5, minutes=15), now=NOW)
        assert countdown.time_string == "5h 15m"
        assert countdown.urgency == "none"

    def test_under_two_hours_warns(self):
        countdown = get_time_until_lock(NOW + timedelta(hours=1, minutes=30), now=NOW)
        assert countdown.time_string == "1h 30m"
        assert countdown.urgency == "warning"

    def test_under_an_hour_is_danger(self):
        countdown = get_time_until_lock(NOW + timedelta(minutes=42), now=NOW)
        assert countdown.locked is False
        assert countdown.time_string == "42m"
        assert countdown.urgency == "danger"
