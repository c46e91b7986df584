"""Tests for advanced streak, social-time and holiday metrics."""

import pytest
from datetime import date

from shiftsim.metrics import (
    StreakState,
    calculate_advanced_metrics,
    flush,
    fold_streaks,
    generate_advanced_insights,
    step,
)
from shiftsim.models import AdvancedMetrics, Scenario
from shiftsim.rotation import generate_year_calendar


class TestOffStreaks:
    """Tests for consecutive off-day detection."""

    def test_mini_vacation_and_isolated_day(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("MFFFMFM"))

        assert metrics.max_consecutive_off_days == 3
        assert metrics.mini_vacations == 1
        assert metrics.isolated_off_days == 1

    def test_two_day_streak_is_neither(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("MFFM"))

        assert metrics.max_consecutive_off_days == 2
        assert metrics.mini_vacations == 0
        assert metrics.isolated_off_days == 0

    def test_streak_open_at_end_is_flushed(self, make_calendar):
        """A streak still running on the last day is counted."""
        metrics = calculate_advanced_metrics(make_calendar("MMFFFF"))

        assert metrics.max_consecutive_off_days == 4
        assert metrics.mini_vacations == 1

    def test_isolated_day_at_end_is_flushed(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("MMF"))
        assert metrics.isolated_off_days == 1


class TestWorkStreaks:
    """Tests for consecutive work-day detection."""

    def test_any_work_shift_extends_streak(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("MMMFTTTTN"))
        assert metrics.max_consecutive_work_days == 5

    def test_all_off_has_no_work_streak(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("FFFF"))
        assert metrics.max_consecutive_work_days == 0


class TestNightStreaks:
    """Night runs end only on a morning or afternoon shift."""

    def test_off_days_do_not_break_night_run(self, make_calendar):
        """NN FF NN counts as one run of four nights."""
        metrics = calculate_advanced_metrics(make_calendar("NNFFNNM"))
        assert metrics.max_consecutive_night_shifts == 4

    def test_off_days_do_not_add_to_night_run(self, make_calendar):
        """Off days are skipped, not counted as nights."""
        metrics = calculate_advanced_metrics(make_calendar("NFFFFN"))
        assert metrics.max_consecutive_night_shifts == 2

    @pytest.mark.parametrize("breaker", ["M", "T"])
    def test_day_shift_breaks_night_run(self, make_calendar, breaker: str):
        metrics = calculate_advanced_metrics(make_calendar(f"NN{breaker}NN"))
        assert metrics.max_consecutive_night_shifts == 2

    def test_night_run_open_at_end_is_flushed(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("MNNN"))
        assert metrics.max_consecutive_night_shifts == 3

    def test_repeating_nights_and_offs_never_reset(self):
        """A year of NNFF contains no M/T, so every night belongs to one run."""
        scenario = Scenario(teams=1, shift_duration=8, pattern="NNFF")
        metrics = calculate_advanced_metrics(generate_year_calendar(scenario, 2024))

        assert metrics.max_consecutive_night_shifts == metrics.total_night_shifts == 184

    def test_night_totals(self, make_calendar):
        metrics = calculate_advanced_metrics(make_calendar("NNMNTN"))

        assert metrics.total_night_shifts == 4
        assert metrics.night_shifts_per_month == pytest.approx(4 / 12)


class TestSocialTime:
    """Tests for Friday/Saturday evening and Sunday morning counts."""

    def test_night_and_morning_shifts_block_social_slots(self, make_calendar):
        # 2024-01-01 is a Monday: Fri=N, Sat=N, Sun=M
        metrics = calculate_advanced_metrics(make_calendar("MMMMNNM"))

        assert metrics.friday_nights_off == 0
        assert metrics.saturday_nights_off == 0
        assert metrics.sunday_mornings_off == 0

    def test_non_conflicting_shifts_count_as_free(self, make_calendar):
        # Fri=M, Sat=T, Sun=N: all three slots free
        metrics = calculate_advanced_metrics(make_calendar("NNNNMTN"))

        assert metrics.friday_nights_off == 1
        assert metrics.saturday_nights_off == 1
        assert metrics.sunday_mornings_off == 1

    def test_full_year_counts(self):
        scenario = Scenario(teams=1, shift_duration=8, pattern="F")
        metrics = calculate_advanced_metrics(generate_year_calendar(scenario, 2024))

        assert metrics.friday_nights_off == 52
        assert metrics.saturday_nights_off == 52
        assert metrics.sunday_mornings_off == 52


class TestHolidayMetrics:
    """Tests for holiday cross-reference."""

    def test_holidays_off_listed_by_name(self):
        scenario = Scenario(teams=1, shift_duration=8, pattern="F")
        metrics = calculate_advanced_metrics(generate_year_calendar(scenario, 2024))

        assert metrics.holidays_off == 13
        assert metrics.holidays_worked == 0
        assert metrics.holidays_list[0] == "New Year's Day"
        assert "Corpus Christi" in metrics.holidays_list

    def test_holidays_worked(self):
        scenario = Scenario(teams=1, shift_duration=8, pattern="T")
        metrics = calculate_advanced_metrics(generate_year_calendar(scenario, 2025))

        assert metrics.holidays_off == 0
        assert metrics.holidays_worked == 13
        assert metrics.holidays_list == []

    def test_year_taken_from_calendar(self, make_calendar):
        """Only the days present are checked: Jan 1 off, nothing else."""
        metrics = calculate_advanced_metrics(make_calendar("FMM", start=date(2030, 1, 1)))

        assert metrics.holidays_off == 1
        assert metrics.holidays_list == ["New Year's Day"]

    def test_empty_calendar(self):
        assert calculate_advanced_metrics([]) == AdvancedMetrics()


class TestFold:
    """Tests for the explicit fold and flush steps."""

    def test_fold_matches_manual_steps(self, make_calendar):
        calendar = make_calendar("FFNNM")
        state = StreakState()
        for day in calendar:
            state = step(state, day)

        # off streak was closed by the first N
        assert state.max_off == 2
        assert state.night_streak == 0
        assert state.max_night == 2
        assert flush(state) == fold_streaks(calendar)

    def test_flush_without_open_streaks_is_noop(self):
        state = StreakState(max_off=3, max_night=2)
        assert flush(state) == StreakState(max_off=3, max_night=2)


class TestInsights:
    """Tests for generated insight strings."""

    def test_risky_schedule_flags(self):
        metrics = AdvancedMetrics(
            max_consecutive_off_days=1,
            max_consecutive_work_days=9,
            max_consecutive_night_shifts=7,
            mini_vacations=0,
            isolated_off_days=25,
            night_shifts_per_month=12.0,
            holidays_worked=1,
        )
        insights = " ".join(generate_advanced_insights(metrics))

        assert "Short rest periods" in insights
        assert "No mini-vacation" in insights
        assert "isolated off-days (25)" in insights
        assert "Long work stretches: up to 9" in insights
        assert "High night shift load: 12.0" in insights
        assert "up to 7 consecutive nights" in insights
        assert "Few paid holidays" in insights

    def test_comfortable_schedule_flags(self):
        metrics = AdvancedMetrics(
            max_consecutive_off_days=6,
            max_consecutive_work_days=4,
            mini_vacations=5,
            night_shifts_per_month=2.0,
            friday_nights_off=45,
            sunday_mornings_off=50,
            holidays_worked=11,
        )
        insights = " ".join(generate_advanced_insights(metrics))

        assert "Excellent rest periods" in insights
        assert "5 mini-vacations" in insights
        assert "Reasonable work stretches" in insights
        assert "Moderate night shift load" in insights
        assert "45 Friday nights free" in insights
        assert "50 Sunday mornings free" in insights
        assert "Excellent earnings potential: 11" in insights
