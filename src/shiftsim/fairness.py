"""
Cross-team fairness comparison and daily coverage analysis.
"""

import logging
from datetime import date
from typing import List

from .analyzer import analyze_year_calendar
from .holidays import holidays_for_year, holidays_off, holidays_worked
from .models import (
    CoverageAnalysis,
    DailyCoverage,
    FairnessAnalysis,
    Scenario,
    ShiftType,
    TeamAnalysis,
)
from .policies import (
    FAIRNESS_MAX_SPREAD,
    LARGE_ROSTER_MIN_TEAMS,
    REQUIRED_OFF_LARGE_ROSTER,
    REQUIRED_OFF_SMALL_ROSTER,
)
from .rotation import generate_team_calendars, generate_year_calendar

logger = logging.getLogger(__name__)


def analyze_team_fairness(scenario: Scenario, year: int) -> FairnessAnalysis:
    """
    Compare weekends, off-days and holidays across every team of a scenario.

    Each team's calendar is analysed independently; the spread (max - min)
    of each figure decides whether the rotation is balanced.
    """
    if scenario.is_degenerate:
        return FairnessAnalysis(
            is_balanced=True,
            max_difference=0,
            weekend_difference=0,
            off_day_difference=0,
            holiday_difference=0,
            hours_difference=0.0,
            team_analyses=[],
            insights=[],
        )

    holidays = holidays_for_year(year)
    team_analyses: List[TeamAnalysis] = []

    for team in range(scenario.teams):
        calendar = generate_year_calendar(scenario, year, team)
        work_days = sum(1 for day in calendar if day.is_work)
        team_analysis = TeamAnalysis(
            team_index=team,
            yearly_analysis=analyze_year_calendar(calendar, year),
            holidays_worked=len(holidays_worked(calendar, holidays)),
            holidays_off=len(holidays_off(calendar, holidays)),
            work_days=work_days,
            hours_worked=work_days * scenario.shift_duration,
        )
        logger.debug(
            "Team %s %d: %d weekends off, %d off-days, %d holidays worked",
            team_analysis.label,
            year,
            team_analysis.yearly_analysis.total_weekends,
            team_analysis.yearly_analysis.total_off_days,
            team_analysis.holidays_worked,
        )
        team_analyses.append(team_analysis)

    weekend_counts = [t.yearly_analysis.total_weekends for t in team_analyses]
    off_day_counts = [t.yearly_analysis.total_off_days for t in team_analyses]
    holiday_counts = [t.holidays_worked for t in team_analyses]
    hours = [t.hours_worked for t in team_analyses]

    weekend_diff = max(weekend_counts) - min(weekend_counts)
    off_day_diff = max(off_day_counts) - min(off_day_counts)
    holiday_diff = max(holiday_counts) - min(holiday_counts)

    is_balanced = all(
        diff <= FAIRNESS_MAX_SPREAD for diff in (weekend_diff, off_day_diff, holiday_diff)
    )

    insights = []
    if is_balanced:
        insights.append("✅ Excellent balance: all teams have similar schedules.")
    else:
        if weekend_diff > FAIRNESS_MAX_SPREAD:
            best = _team_with(team_analyses, weekend_counts, max(weekend_counts))
            worst = _team_with(team_analyses, weekend_counts, min(weekend_counts))
            insights.append(
                f"⚠️ Weekend imbalance: Team {best.label} has {weekend_diff} more "
                f"weekends off than Team {worst.label}."
            )

        if off_day_diff > FAIRNESS_MAX_SPREAD:
            insights.append(
                f"⚠️ Off-day imbalance: {off_day_diff} days difference between teams."
            )

        if holiday_diff > FAIRNESS_MAX_SPREAD:
            most = _team_with(team_analyses, holiday_counts, max(holiday_counts))
            least = _team_with(team_analyses, holiday_counts, min(holiday_counts))
            insights.append(
                f"💰 Holiday imbalance: Team {most.label} works {holiday_diff} more "
                f"holidays than Team {least.label}."
            )

    if scenario.pattern_length % scenario.teams != 0:
        insights.append(
            "ℹ️ Pattern length is not divisible by team count. "
            "This may cause rotation imbalances over time."
        )

    return FairnessAnalysis(
        is_balanced=is_balanced,
        max_difference=max(weekend_diff, off_day_diff, holiday_diff),
        weekend_difference=weekend_diff,
        off_day_difference=off_day_diff,
        holiday_difference=holiday_diff,
        hours_difference=max(hours) - min(hours),
        team_analyses=team_analyses,
        insights=insights,
    )


def _team_with(team_analyses: List[TeamAnalysis], values: List[int], target: int) -> TeamAnalysis:
    """First team whose value equals ``target``."""
    return team_analyses[values.index(target)]


def required_teams_off(teams: int) -> int:
    """Minimum number of teams that should be off on any given day."""
    if teams >= LARGE_ROSTER_MIN_TEAMS:
        return REQUIRED_OFF_LARGE_ROSTER
    return REQUIRED_OFF_SMALL_ROSTER


def analyze_coverage(scenario: Scenario, year: int) -> CoverageAnalysis:
    """
    Count, for each day of the year, how many teams work and how many are off.

    Flags days where nobody works and days where fewer teams than required
    are off at the same time.
    """
    required_off = required_teams_off(scenario.teams)
    if scenario.is_degenerate:
        return CoverageAnalysis(
            year=year,
            required_off=required_off,
            daily=[],
            zero_coverage_days=[],
            low_off_days=[],
        )

    calendars = generate_team_calendars(scenario, year)
    daily: List[DailyCoverage] = []
    zero_coverage: List[date] = []
    low_off: List[date] = []

    # all team calendars cover the same year, day for day
    for day_index, days in enumerate(zip(*calendars)):
        coverage = DailyCoverage(day=day_index, date=days[0].date)
        for day in days:
            if day.shift == ShiftType.MORNING:
                coverage.morning += 1
            elif day.shift == ShiftType.AFTERNOON:
                coverage.afternoon += 1
            elif day.shift == ShiftType.NIGHT:
                coverage.night += 1
            elif day.shift == ShiftType.OFF:
                coverage.off += 1

        if coverage.working == 0:
            zero_coverage.append(coverage.date)
        if coverage.off < required_off:
            low_off.append(coverage.date)
        daily.append(coverage)

    return CoverageAnalysis(
        year=year,
        required_off=required_off,
        daily=daily,
        zero_coverage_days=zero_coverage,
        low_off_days=low_off,
    )
