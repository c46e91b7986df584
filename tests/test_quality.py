"""Tests for quality-of-life scoring and critical-period detection."""

import pytest
from datetime import date

from shiftsim.analysis import calculate_analysis
from shiftsim.models import CriticalPeriod, PeriodType, Scenario, Severity
from shiftsim.quality import (
    _holiday_dates,
    calculate_quality_of_life_score,
    detect_critical_periods,
    grade_for,
)


def score(scenario: Scenario, year: int = 2024, custom_holidays=()):
    analysis = calculate_analysis(scenario, year, years=1)
    return calculate_quality_of_life_score(
        scenario, analysis, year, custom_holidays=custom_holidays
    )


class TestGrades:
    """Tests for letter grade cutoffs."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (100, "A+"),
            (90, "A+"),
            (89.99, "A"),
            (80, "A"),
            (75, "B"),
            (60, "C"),
            (50, "D"),
            (49.9, "F"),
            (0, "F"),
        ],
    )
    def test_cutoffs(self, value: float, expected: str):
        assert grade_for(value) == expected


class TestQualityOfLifeScore:
    """Tests for the weighted composite score."""

    def test_office_week_breakdown(self, weekend_scenario: Scenario):
        """Mon-Fri work, weekends off, no contract hours."""
        result = score(weekend_scenario)

        assert result.breakdown == {
            "weekends_coverage": 100,  # 52 of an ideal 26, capped
            "work_life_balance": 70,  # no contract
            "consecutive_rest": 14,  # 2 / 14 days, no mini-vacations
            "night_shift_impact": 100,
            "holidays_coverage": 31,  # 4 of 13 holidays on a weekend
        }

    def test_grade_uses_unrounded_score(self, weekend_scenario: Scenario):
        """69.93 rounds to 70 but stays a C."""
        result = score(weekend_scenario)

        assert result.overall == 70
        assert result.grade == "C"

    def test_office_week_insights(self, weekend_scenario: Scenario):
        insights = score(weekend_scenario).insights

        assert "✅ Excellent weekend coverage for social and family life." in insights
        assert "⚠️ No extended rest periods. Consider adjusting the pattern." in insights
        assert not any("night shifts" in i for i in insights)

    def test_contract_hours_met(self):
        scenario = Scenario(
            teams=1, shift_duration=8, pattern="MMMMMFF", weekly_hours_contract=40
        )
        result = score(scenario)

        assert result.work_life_balance == 100
        assert "✅ Weekly hours in line with the contract." in result.insights

    def test_contract_hours_missed(self):
        """Two and a half hours over contract costs 25 points."""
        scenario = Scenario(
            teams=1, shift_duration=8, pattern="MMMMMFF", weekly_hours_contract=37.5
        )
        result = score(scenario)

        assert result.work_life_balance == 75
        assert not any("in line with the contract" in i for i in result.insights)

    def test_night_heavy_rotation(self):
        scenario = Scenario(teams=1, shift_duration=8, pattern="NNNNNNNF")
        result = score(scenario)

        assert result.night_shift_impact == 0
        assert (
            "⚠️ High share of night shifts may affect health and circadian rhythm."
            in result.insights
        )

    def test_custom_holidays_extend_the_total(self, weekend_scenario: Scenario):
        """A worked Thursday holiday lowers coverage to 4 of 14."""
        result = score(weekend_scenario, custom_holidays=["06-13"])
        assert result.holidays_coverage == 29

    def test_scores_are_bounded(self, reference_scenario: Scenario):
        result = score(reference_scenario)

        assert 0 <= result.overall <= 100
        for value in result.breakdown.values():
            assert 0 <= value <= 100

    def test_degenerate_scenario(self):
        scenario = Scenario(teams=1, shift_duration=8, pattern="")
        result = score(scenario)

        assert result.overall == 0
        assert result.grade == "F"
        assert result.insights == []


class TestHolidayDates:
    """Tests for national plus custom holiday dates."""

    def test_national_only(self):
        assert len(_holiday_dates(2024, ())) == 13

    def test_leap_day_outside_leap_years_skipped(self):
        assert len(_holiday_dates(2023, ["02-29"])) == 13
        assert date(2024, 2, 29) in _holiday_dates(2024, ["02-29"])

    def test_duplicate_of_national_holiday(self):
        assert len(_holiday_dates(2024, ["12-25"])) == 13

    @pytest.mark.parametrize("entry", ["christmas", "12/24", "24-12"])
    def test_malformed_entries_skipped(self, entry: str):
        assert len(_holiday_dates(2024, [entry, "06-13"])) == 14


class TestCriticalPeriods:
    """Tests for work, night and weekend-less run detection."""

    def test_year_long_runs_are_flushed(self):
        """Runs still open on Dec 31 are reported."""
        scenario = Scenario(teams=1, shift_duration=8, pattern="M")
        periods = detect_critical_periods(scenario, 2024)

        assert [p.type for p in periods] == [PeriodType.LOW_REST, PeriodType.NO_WEEKENDS]
        work, weekendless = periods

        assert work.start_date == date(2024, 1, 1)
        assert work.end_date == date(2024, 12, 31)
        assert work.days_affected == 366
        assert work.severity == Severity.HIGH

        assert weekendless.start_date == date(2024, 1, 1)
        assert weekendless.end_date == date(2024, 12, 31)
        assert weekendless.days_affected == 52 * 7

    def test_low_severity_work_runs(self):
        """Eleven-day work runs are flagged with low severity."""
        scenario = Scenario(teams=1, shift_duration=8, pattern="MMMMMMMMMMMFFF")
        periods = detect_critical_periods(scenario, 2024)

        assert len(periods) == 26
        assert all(p.type == PeriodType.LOW_REST for p in periods)
        assert all(p.severity == Severity.LOW for p in periods)
        assert periods[0].start_date == date(2024, 1, 1)
        assert periods[0].end_date == date(2024, 1, 11)
        assert periods[0].days_affected == 11

    @pytest.mark.parametrize(
        "pattern,severity",
        [
            ("MMMMMMMMMMMMFF", Severity.MEDIUM),
            ("MMMMMMMMMMMMMMFF", Severity.HIGH),
        ],
    )
    def test_work_run_severity(self, pattern: str, severity: Severity):
        periods = detect_critical_periods(
            Scenario(teams=1, shift_duration=8, pattern=pattern), 2024
        )
        assert periods[0].type == PeriodType.LOW_REST
        assert periods[0].severity == severity

    def test_nine_day_runs_not_flagged(self):
        scenario = Scenario(teams=1, shift_duration=8, pattern="MMMMMFFMMMMFFFF")
        periods = detect_critical_periods(scenario, 2024)
        assert not any(p.type == PeriodType.LOW_REST for p in periods)

    def test_night_runs_sorted_by_severity(self):
        """Seven-night runs are high; the six-night tail on Dec 31 is medium."""
        scenario = Scenario(teams=1, shift_duration=8, pattern="NNNNNNNF")
        periods = detect_critical_periods(scenario, 2024)

        nights = [p for p in periods if p.type == PeriodType.CONSECUTIVE_NIGHTS]
        assert len(nights) == 46
        assert periods[45].type == PeriodType.NO_WEEKENDS

        tail = periods[-1]
        assert tail.type == PeriodType.CONSECUTIVE_NIGHTS
        assert tail.severity == Severity.MEDIUM
        assert tail.end_date == date(2024, 12, 31)
        assert tail.days_affected == 6

    def test_weekendless_spans(self):
        """Four weeks without a weekend, then one weekend off, repeated."""
        pattern = "MMMFMMM" * 4 + "MMMMMFF"
        scenario = Scenario(teams=1, shift_duration=8, pattern=pattern)
        periods = detect_critical_periods(scenario, 2024)

        assert len(periods) == 10
        assert all(p.type == PeriodType.NO_WEEKENDS for p in periods)
        assert all(p.severity == Severity.MEDIUM for p in periods)
        assert periods[0].start_date == date(2024, 1, 1)
        assert periods[0].end_date == date(2024, 2, 3)
        assert periods[0].days_affected == 28
        assert periods[1].start_date == date(2024, 2, 4)

    def test_comfortable_rotation_has_none(self, weekend_scenario: Scenario):
        assert detect_critical_periods(weekend_scenario, 2024) == []

    def test_scenario_without_teams_has_none(self):
        """Long work runs are not reported when there is no team to work them."""
        scenario = Scenario(teams=0, shift_duration=8, pattern="MMMMMMMMMMMMMMF")
        assert detect_critical_periods(scenario, 2024) == []

    def test_team_parameter(self, weekend_scenario: Scenario):
        """Team D is shifted by three days and gets Wednesdays and Thursdays off."""
        periods = detect_critical_periods(weekend_scenario, 2024, team=3)

        assert len(periods) == 1
        assert periods[0].type == PeriodType.NO_WEEKENDS
        assert periods[0].severity == Severity.HIGH

    def test_period_range_is_validated(self):
        with pytest.raises(ValueError):
            CriticalPeriod(
                start_date=date(2024, 3, 2),
                end_date=date(2024, 3, 1),
                type=PeriodType.LOW_REST,
                severity=Severity.LOW,
                description="",
                days_affected=0,
            )
