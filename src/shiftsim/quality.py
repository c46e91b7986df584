"""
Quality-of-life scoring and detection of critical schedule periods.
"""

import math
from datetime import date
from typing import Iterable, List, Optional, Set

from .holidays import holidays_for_year
from .metrics import fold_streaks
from .models import (
    AnalysisResult,
    CriticalPeriod,
    DayRecord,
    PeriodType,
    QualityOfLifeScore,
    Scenario,
    Severity,
)
from .policies import (
    DEFAULT_WORK_LIFE_BALANCE,
    FAILING_GRADE,
    GRADE_CUTOFFS,
    HOURS_PENALTY_PER_HOUR,
    IDEAL_WEEKENDS_OFF,
    LONG_NIGHT_RUN_DAYS,
    LONG_NIGHT_RUN_HIGH_DAYS,
    LONG_WORK_RUN_DAYS,
    LONG_WORK_RUN_HIGH_DAYS,
    LONG_WORK_RUN_MEDIUM_DAYS,
    MINI_VACATION_BONUS,
    NIGHT_RATIO_PENALTY,
    QOL_WEIGHTS,
    REST_STREAK_CEILING_DAYS,
    WEEKENDLESS_HIGH_WEEKS,
    WEEKENDLESS_WEEKS,
)
from .rotation import SUNDAY, generate_year_calendar


def _round(value: float) -> int:
    """Round half up, so 72.5 scores as 73."""
    return int(math.floor(value + 0.5))


def grade_for(score: float) -> str:
    for cutoff, grade in GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return FAILING_GRADE


def _holiday_dates(year: int, custom_holidays: Iterable[str]) -> Set[date]:
    """National holidays plus recurring "MM-DD" extras that exist in ``year``."""
    dates = {h.date for h in holidays_for_year(year)}
    for month_day in custom_holidays:
        try:
            month, day = (int(part) for part in month_day.split("-"))
            dates.add(date(year, month, day))
        except ValueError:
            # malformed entries, or 02-29 outside leap years
            continue
    return dates


def calculate_quality_of_life_score(
    scenario: Scenario,
    analysis: AnalysisResult,
    year: int,
    team: int = 0,
    custom_holidays: Iterable[str] = (),
) -> QualityOfLifeScore:
    """
    Score a scenario's quality of life on a 0-100 scale.

    Args:
        scenario: The rotation scenario
        analysis: Headline analysis of the scenario (weekends off and the
            difference between worked and contracted weekly hours)
        year: Year whose calendar is scored
        team: Team whose calendar is scored
        custom_holidays: Extra "MM-DD" holidays counted for holiday coverage

    Returns:
        QualityOfLifeScore with rounded sub-scores, grade and insights
    """
    calendar = generate_year_calendar(scenario, year, team)
    if scenario.is_degenerate or not calendar:
        return QualityOfLifeScore(
            overall=0,
            weekends_coverage=0,
            work_life_balance=0,
            consecutive_rest=0,
            night_shift_impact=0,
            holidays_coverage=0,
            grade=FAILING_GRADE,
        )

    weekends_coverage = min(100.0, analysis.weekends_off_per_year / IDEAL_WEEKENDS_OFF * 100)

    if analysis.weekly_hours_difference is not None:
        work_life_balance = max(
            0.0, 100 - abs(analysis.weekly_hours_difference) * HOURS_PENALTY_PER_HOUR
        )
    else:
        work_life_balance = float(DEFAULT_WORK_LIFE_BALANCE)

    streaks = fold_streaks(calendar)
    consecutive_rest = min(
        100.0,
        streaks.max_off / REST_STREAK_CEILING_DAYS * 100
        + streaks.mini_vacations * MINI_VACATION_BONUS,
    )

    night_ratio = streaks.total_nights / len(calendar)
    night_shift_impact = max(0.0, 100 - night_ratio * NIGHT_RATIO_PENALTY)

    holiday_dates = _holiday_dates(year, custom_holidays)
    holidays_off = sum(1 for day in calendar if day.is_off and day.date in holiday_dates)
    holidays_coverage = holidays_off / len(holiday_dates) * 100 if holiday_dates else 0.0

    overall = (
        weekends_coverage * QOL_WEIGHTS["weekends_coverage"]
        + work_life_balance * QOL_WEIGHTS["work_life_balance"]
        + consecutive_rest * QOL_WEIGHTS["consecutive_rest"]
        + night_shift_impact * QOL_WEIGHTS["night_shift_impact"]
        + holidays_coverage * QOL_WEIGHTS["holidays_coverage"]
    )

    insights = []
    if weekends_coverage >= 80:
        insights.append("✅ Excellent weekend coverage for social and family life.")
    elif weekends_coverage < 50:
        insights.append("⚠️ Few free weekends may affect quality of life.")

    if abs(analysis.weekly_hours_difference or 0) <= 1:
        insights.append("✅ Weekly hours in line with the contract.")

    if streaks.mini_vacations >= 4:
        insights.append(
            f"✅ {streaks.mini_vacations} extended rest periods (3+ days) per year."
        )
    elif streaks.mini_vacations == 0:
        insights.append("⚠️ No extended rest periods. Consider adjusting the pattern.")

    if night_ratio > 0.25:
        insights.append("⚠️ High share of night shifts may affect health and circadian rhythm.")

    if holidays_coverage >= 70:
        insights.append("✅ Good coverage of national holidays.")
    elif holidays_coverage < 30:
        insights.append("⚠️ Low holiday coverage may reduce family time.")

    return QualityOfLifeScore(
        overall=_round(overall),
        weekends_coverage=_round(weekends_coverage),
        work_life_balance=_round(work_life_balance),
        consecutive_rest=_round(consecutive_rest),
        night_shift_impact=_round(night_shift_impact),
        holidays_coverage=_round(holidays_coverage),
        grade=grade_for(overall),
        insights=insights,
    )


def _work_run_severity(days: int) -> Severity:
    if days >= LONG_WORK_RUN_HIGH_DAYS:
        return Severity.HIGH
    if days >= LONG_WORK_RUN_MEDIUM_DAYS:
        return Severity.MEDIUM
    return Severity.LOW


def _find_work_runs(calendar: List[DayRecord]) -> List[CriticalPeriod]:
    periods = []
    run_start: Optional[int] = None

    # a sentinel index past the end closes a run still open on Dec 31
    for i in range(len(calendar) + 1):
        working = i < len(calendar) and calendar[i].is_work
        if working:
            if run_start is None:
                run_start = i
            continue
        if run_start is not None:
            length = i - run_start
            if length >= LONG_WORK_RUN_DAYS:
                periods.append(
                    CriticalPeriod(
                        start_date=calendar[run_start].date,
                        end_date=calendar[i - 1].date,
                        type=PeriodType.LOW_REST,
                        severity=_work_run_severity(length),
                        description=f"{length} consecutive work days without a day off",
                        days_affected=length,
                    )
                )
            run_start = None
    return periods


def _find_night_runs(calendar: List[DayRecord]) -> List[CriticalPeriod]:
    periods = []
    run_start: Optional[int] = None

    for i in range(len(calendar) + 1):
        night = i < len(calendar) and calendar[i].is_night
        if night:
            if run_start is None:
                run_start = i
            continue
        if run_start is not None:
            length = i - run_start
            if length >= LONG_NIGHT_RUN_DAYS:
                periods.append(
                    CriticalPeriod(
                        start_date=calendar[run_start].date,
                        end_date=calendar[i - 1].date,
                        type=PeriodType.CONSECUTIVE_NIGHTS,
                        severity=(
                            Severity.HIGH
                            if length >= LONG_NIGHT_RUN_HIGH_DAYS
                            else Severity.MEDIUM
                        ),
                        description=f"{length} consecutive night shifts",
                        days_affected=length,
                    )
                )
            run_start = None
    return periods


def _weekendless_period(start: date, end: date, weeks: int) -> CriticalPeriod:
    return CriticalPeriod(
        start_date=start,
        end_date=end,
        type=PeriodType.NO_WEEKENDS,
        severity=Severity.HIGH if weeks >= WEEKENDLESS_HIGH_WEEKS else Severity.MEDIUM,
        description=f"{weeks} weeks without a full weekend off",
        days_affected=weeks * 7,
    )


def _find_weekendless_spans(calendar: List[DayRecord]) -> List[CriticalPeriod]:
    """
    Spans of WEEKENDLESS_WEEKS or more Sundays passed without a full weekend off.

    The span runs from the last full weekend off (or January 1) to the next
    one (or December 31).
    """
    periods = []
    if not calendar:
        return periods

    weeks = 0
    anchor = calendar[0].date

    for day in calendar:
        if day.is_weekend_off:
            if weeks >= WEEKENDLESS_WEEKS:
                periods.append(_weekendless_period(anchor, day.date, weeks))
            weeks = 0
            anchor = day.date
        elif day.weekday == SUNDAY:
            weeks += 1

    if weeks >= WEEKENDLESS_WEEKS:
        periods.append(_weekendless_period(anchor, calendar[-1].date, weeks))

    return periods


def detect_critical_periods(scenario: Scenario, year: int, team: int = 0) -> List[CriticalPeriod]:
    """
    Flag long work runs, long night runs and long spans without a weekend off.

    Returns:
        CriticalPeriods sorted by descending severity; periods of equal
        severity keep their detection order.
    """
    calendar = generate_year_calendar(scenario, year, team)

    periods = (
        _find_work_runs(calendar)
        + _find_night_runs(calendar)
        + _find_weekendless_spans(calendar)
    )
    return sorted(periods, key=lambda p: p.severity.rank, reverse=True)
