"""
Streak, social-time and holiday metrics for a team calendar.

The day sequence is folded through a small state record; the in-progress
streaks are flushed explicitly once the sequence ends so that a run still
open on December 31 is counted.
"""

from dataclasses import dataclass
from typing import List

from .holidays import holidays_for_year, holidays_off, holidays_worked
from .models import AdvancedMetrics, DayRecord, ShiftType
from .policies import ISOLATED_OFF_DAY_LENGTH, MINI_VACATION_MIN_DAYS

FRIDAY = 4
SATURDAY = 5
SUNDAY = 6


@dataclass
class StreakState:
    """Running counters threaded through the fold."""

    off_streak: int = 0
    work_streak: int = 0
    night_streak: int = 0
    max_off: int = 0
    max_work: int = 0
    max_night: int = 0
    mini_vacations: int = 0
    isolated_off_days: int = 0
    total_nights: int = 0
    friday_nights_off: int = 0
    saturday_nights_off: int = 0
    sunday_mornings_off: int = 0


def _close_off_streak(state: StreakState) -> None:
    if state.off_streak > 0:
        state.max_off = max(state.max_off, state.off_streak)
        if state.off_streak >= MINI_VACATION_MIN_DAYS:
            state.mini_vacations += 1
        if state.off_streak == ISOLATED_OFF_DAY_LENGTH:
            state.isolated_off_days += 1
    state.off_streak = 0


def _close_night_streak(state: StreakState) -> None:
    if state.night_streak > 0:
        state.max_night = max(state.max_night, state.night_streak)
    state.night_streak = 0


def step(state: StreakState, day: DayRecord) -> StreakState:
    """Advance the streak state by one day."""
    if day.is_off:
        state.off_streak += 1
        state.work_streak = 0
        # an off day neither extends nor breaks a night run
    else:
        _close_off_streak(state)
        state.work_streak += 1
        state.max_work = max(state.max_work, state.work_streak)

        if day.is_night:
            state.total_nights += 1
            state.night_streak += 1
        else:
            _close_night_streak(state)

    weekday = day.weekday
    if weekday == FRIDAY and day.shift != ShiftType.NIGHT:
        state.friday_nights_off += 1
    elif weekday == SATURDAY and day.shift != ShiftType.NIGHT:
        state.saturday_nights_off += 1
    elif weekday == SUNDAY and day.shift != ShiftType.MORNING:
        state.sunday_mornings_off += 1

    return state


def flush(state: StreakState) -> StreakState:
    """Record streaks still open at the end of the sequence."""
    _close_off_streak(state)
    _close_night_streak(state)
    return state


def fold_streaks(calendar: List[DayRecord]) -> StreakState:
    state = StreakState()
    for day in calendar:
        state = step(state, day)
    return flush(state)


def calculate_advanced_metrics(calendar: List[DayRecord]) -> AdvancedMetrics:
    """
    Compute streak, social-time and holiday metrics for one calendar year.

    Args:
        calendar: A team calendar as produced by generate_year_calendar

    Returns:
        AdvancedMetrics; all zeros for an empty calendar
    """
    if not calendar:
        return AdvancedMetrics()

    state = fold_streaks(calendar)

    holidays = holidays_for_year(calendar[0].date.year)
    off_holidays = holidays_off(calendar, holidays)
    worked_holidays = holidays_worked(calendar, holidays)

    return AdvancedMetrics(
        max_consecutive_off_days=state.max_off,
        max_consecutive_work_days=state.max_work,
        max_consecutive_night_shifts=state.max_night,
        mini_vacations=state.mini_vacations,
        isolated_off_days=state.isolated_off_days,
        total_night_shifts=state.total_nights,
        night_shifts_per_month=state.total_nights / 12,
        friday_nights_off=state.friday_nights_off,
        saturday_nights_off=state.saturday_nights_off,
        sunday_mornings_off=state.sunday_mornings_off,
        holidays_off=len(off_holidays),
        holidays_worked=len(worked_holidays),
        holidays_list=[h.name for h in off_holidays],
    )


def generate_advanced_insights(metrics: AdvancedMetrics) -> List[str]:
    """Human-readable flags derived from the metrics."""
    insights = []

    # Worked holidays are paid at a premium
    if metrics.holidays_worked >= 10:
        insights.append(
            f"💰 Excellent earnings potential: {metrics.holidays_worked} holidays worked at premium pay."
        )
    elif metrics.holidays_worked >= 6:
        insights.append(
            f"💰 Good earnings: {metrics.holidays_worked} holidays worked with extra pay."
        )
    elif metrics.holidays_worked < 3:
        insights.append(
            f"ℹ️ Few paid holidays worked: only {metrics.holidays_worked}."
        )

    if metrics.holidays_off > 10:
        insights.append(
            f"ℹ️ Many holidays off: {metrics.holidays_off} (less premium income)."
        )

    if metrics.max_consecutive_off_days >= 5:
        insights.append(
            f"✅ Excellent rest periods: up to {metrics.max_consecutive_off_days} consecutive days off."
        )
    elif metrics.max_consecutive_off_days <= 2:
        insights.append(
            f"⚠️ Short rest periods: maximum {metrics.max_consecutive_off_days} consecutive days off."
        )

    if metrics.mini_vacations >= 4:
        insights.append(
            f"✅ {metrics.mini_vacations} mini-vacations (3+ days off) per year."
        )
    elif metrics.mini_vacations == 0:
        insights.append("⚠️ No mini-vacation opportunities (3+ consecutive days off).")

    if metrics.isolated_off_days > 20:
        insights.append(
            f"⚠️ Many isolated off-days ({metrics.isolated_off_days}). Less effective for recovery."
        )

    if metrics.max_consecutive_work_days > 7:
        insights.append(
            f"⚠️ Long work stretches: up to {metrics.max_consecutive_work_days} consecutive days. Risk of burnout."
        )
    elif metrics.max_consecutive_work_days <= 5:
        insights.append(
            f"✅ Reasonable work stretches: maximum {metrics.max_consecutive_work_days} consecutive days."
        )

    if metrics.night_shifts_per_month > 10:
        insights.append(
            f"⚠️ High night shift load: {metrics.night_shifts_per_month:.1f} per month. Monitor health impacts."
        )
    elif metrics.night_shifts_per_month < 5:
        insights.append(
            f"✅ Moderate night shift load: {metrics.night_shifts_per_month:.1f} per month."
        )

    if metrics.max_consecutive_night_shifts > 5:
        insights.append(
            f"⚠️ Long night shift sequences: up to {metrics.max_consecutive_night_shifts} consecutive nights."
        )

    if metrics.friday_nights_off >= 40:
        insights.append(
            f"✅ Good social life potential: {metrics.friday_nights_off} Friday nights free."
        )

    if metrics.sunday_mornings_off >= 45:
        insights.append(
            f"✅ Family-friendly: {metrics.sunday_mornings_off} Sunday mornings free."
        )

    return insights
