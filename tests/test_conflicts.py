"""Tests for pairwise validation of explicit team patterns."""

from shiftsim.conflicts import (
    conflict_summary,
    daily_pattern_coverage,
    find_conflicts,
    find_insufficient_coverage,
    validate_no_overlaps,
)
from shiftsim.models import DayConflict

ROTATING_FOUR = ("MTNF", "TNFM", "NFMT", "FMTN")


class TestDailyPatternCoverage:
    """Tests for per-pattern-day shift counts."""

    def test_full_rotation_has_one_team_per_shift(self):
        coverage = daily_pattern_coverage(ROTATING_FOUR)

        assert len(coverage) == 4
        for day in coverage:
            assert (day.morning, day.afternoon, day.night, day.off) == (1, 1, 1, 1)
            assert day.working == 3

    def test_shorter_pattern_has_no_assignment(self):
        """Days past the end of a shorter pattern count for nobody."""
        coverage = daily_pattern_coverage(("MTN", "M"))

        assert len(coverage) == 3
        assert coverage[0].morning == 2
        assert coverage[1].working == 1
        assert coverage[2].night == 1

    def test_no_patterns(self):
        assert daily_pattern_coverage(()) == []


class TestFindConflicts:
    """Tests for same-shift collisions."""

    def test_clean_rotation(self):
        report = find_conflicts(ROTATING_FOUR)

        assert not report.has_conflicts
        assert report.conflicts == []
        assert len(report.coverage) == 4
        assert validate_no_overlaps(ROTATING_FOUR)

    def test_collision_lists_team_letters(self):
        report = find_conflicts(("MMF", "MTF"))

        assert report.has_conflicts
        assert report.conflicts == [DayConflict(day=0, shift="M", teams=["A", "B"])]
        assert not validate_no_overlaps(("MMF", "MTF"))

    def test_one_conflict_per_shift(self):
        """Three teams on the same shift are a single conflict."""
        report = find_conflicts(("MM", "MT", "MN"))

        assert len(report.conflicts) == 1
        assert report.conflicts[0].teams == ["A", "B", "C"]

    def test_off_days_never_conflict(self):
        assert not find_conflicts(("FFF", "FFF")).has_conflicts

    def test_iterates_over_first_pattern(self):
        """The first pattern's length bounds the comparison."""
        report = find_conflicts(("M", "MNNN"))

        assert len(report.coverage) == 1
        assert [c.day for c in report.conflicts] == [0]

    def test_no_patterns(self):
        report = find_conflicts(())

        assert not report.has_conflicts
        assert report.coverage == []


class TestInsufficientCoverage:
    """Tests for days missing a work shift."""

    def test_full_rotation_is_covered(self):
        assert find_insufficient_coverage(ROTATING_FOUR) == []

    def test_missing_shifts_reported(self):
        assert find_insufficient_coverage(("MMF", "MTF")) == [0, 1, 2]

    def test_partial_gap(self):
        assert find_insufficient_coverage(("MTNN", "TNMF", "NMTT")) == [3]


class TestConflictSummary:
    """Tests for the one-line summary."""

    def test_no_conflicts(self):
        assert conflict_summary(find_conflicts(ROTATING_FOUR)) == "No conflicts - full coverage"

    def test_counts_conflicts_and_days(self):
        report = find_conflicts(("M", "M", "T", "T"))
        assert conflict_summary(report) == "2 conflict(s) on 1 day(s)"

    def test_conflicts_over_several_days(self):
        report = find_conflicts(("MN", "MN"))
        assert conflict_summary(report) == "2 conflict(s) on 2 day(s)"
