"""
Yearly weekend and off-day aggregation of generated calendars.
"""

from typing import List

from .models import DayRecord, MonthlyBreakdown, MonthlyWorkload, Scenario, YearlyAnalysis
from .policies import MULTI_YEAR_HORIZON
from .rotation import SATURDAY, SUNDAY, generate_year_calendar

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def analyze_year_calendar(calendar: List[DayRecord], year: int) -> YearlyAnalysis:
    """
    Count weekends and off-days of one calendar, per month and for the year.

    A full weekend off is counted once, in the month of its Saturday. A
    Saturday or Sunday off whose weekend partner is worked counts as a
    Saturday-only or Sunday-only day; the three counts never overlap.
    """
    months = [
        MonthlyBreakdown(month=m + 1, month_name=MONTH_NAMES[m]) for m in range(12)
    ]

    for day in calendar:
        bucket = months[day.date.month - 1]

        if not day.is_off:
            continue

        bucket.total_off_days += 1

        if day.weekday == SATURDAY:
            if day.is_weekend_off:
                bucket.weekends_off += 1
            else:
                bucket.saturdays_off += 1
        elif day.weekday == SUNDAY and not day.is_weekend_off:
            bucket.sundays_off += 1

    return YearlyAnalysis(
        year=year,
        total_weekends=sum(m.weekends_off for m in months),
        total_saturdays_off=sum(m.saturdays_off for m in months),
        total_sundays_off=sum(m.sundays_off for m in months),
        total_off_days=sum(m.total_off_days for m in months),
        monthly_breakdown=months,
    )


def generate_multi_year_analysis(
    scenario: Scenario,
    start_year: int,
    years: int = MULTI_YEAR_HORIZON,
    team: int = 0,
) -> List[YearlyAnalysis]:
    """Yearly analyses for ``years`` consecutive years starting at ``start_year``."""
    analyses = []
    for year in range(start_year, start_year + years):
        calendar = generate_year_calendar(scenario, year, team)
        analyses.append(analyze_year_calendar(calendar, year))
    return analyses


def monthly_workload(calendar: List[DayRecord]) -> List[MonthlyWorkload]:
    """Work, off and night counts per month with a 0-100 intensity figure."""
    counts = {m: {"work": 0, "off": 0, "nights": 0} for m in range(1, 13)}

    for day in calendar:
        month = counts[day.date.month]
        if day.is_off:
            month["off"] += 1
        else:
            month["work"] += 1
            if day.is_night:
                month["nights"] += 1

    workload = []
    for month, c in counts.items():
        total = c["work"] + c["off"]
        work_ratio = c["work"] / total if total else 0.0
        night_bonus = c["nights"] / c["work"] * 0.3 if c["work"] else 0.0
        workload.append(
            MonthlyWorkload(
                month=month,
                work_days=c["work"],
                off_days=c["off"],
                night_shifts=c["nights"],
                intensity=min(100.0, (work_ratio + night_bonus) * 100),
            )
        )
    return workload
