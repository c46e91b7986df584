"""
Scenario-level analysis combining calendars, metrics, fairness and scoring.
"""

from typing import Iterable, List

from .analyzer import analyze_year_calendar, generate_multi_year_analysis
from .conflicts import find_conflicts
from .fairness import analyze_coverage, analyze_team_fairness
from .metrics import calculate_advanced_metrics, generate_advanced_insights
from .models import AnalysisResult, Scenario, ScenarioReport
from .policies import (
    FEW_WEEKENDS_OFF,
    HIGH_WEEKLY_HOURS,
    IDEAL_WEEKENDS_OFF,
    LOW_TOTAL_OFF_DAYS,
    LOW_WEEKLY_HOURS,
    MULTI_YEAR_HORIZON,
)
from .quality import calculate_quality_of_life_score, detect_critical_periods
from .rotation import generate_year_calendar


def _empty_result() -> AnalysisResult:
    return AnalysisResult(
        avg_weekly_hours=0.0,
        total_annual_hours=0.0,
        weekends_off_per_year=0,
        weekends_off_per_month_avg=0.0,
        total_off_days_per_year=0,
        qualitative=[],
        multi_year_analysis=[],
    )


def calculate_analysis(
    scenario: Scenario, year: int, years: int = MULTI_YEAR_HORIZON
) -> AnalysisResult:
    """
    Headline figures of a scenario, seen from team A.

    Hours are derived from the shared pattern: work days per cycle times
    shift duration, spread over the cycle length in weeks (or over 365
    days for the annual total).

    Args:
        scenario: The rotation scenario
        year: Year used for the calendar-based figures
        years: Horizon of the multi-year weekend analysis

    Returns:
        AnalysisResult; zero-valued when the scenario has no pattern or
        no teams
    """
    if scenario.is_degenerate:
        return _empty_result()

    cycle_days = scenario.pattern_length
    shifts_per_cycle = scenario.work_days_per_cycle

    avg_weekly_hours = shifts_per_cycle * scenario.shift_duration / (cycle_days / 7)
    total_annual_hours = 365 / cycle_days * shifts_per_cycle * scenario.shift_duration

    weekly_hours_difference = None
    if scenario.weekly_hours_contract is not None:
        weekly_hours_difference = avg_weekly_hours - scenario.weekly_hours_contract

    calendar = generate_year_calendar(scenario, year)
    year_analysis = analyze_year_calendar(calendar, year)
    weekends_off = year_analysis.total_weekends
    total_off_days = year_analysis.total_off_days

    advanced_metrics = calculate_advanced_metrics(calendar)
    qualitative = generate_advanced_insights(advanced_metrics)

    if avg_weekly_hours > HIGH_WEEKLY_HOURS:
        qualitative.append("⚠️ High average weekly hours. Consider reducing shift load.")
    elif avg_weekly_hours < LOW_WEEKLY_HOURS:
        qualitative.append("ℹ️ Low average weekly hours. May need additional coverage.")

    if weekends_off < FEW_WEEKENDS_OFF:
        qualitative.append("⚠️ Few weekends off. May impact work-life balance.")
    elif weekends_off >= IDEAL_WEEKENDS_OFF:
        qualitative.append("✅ Good weekend coverage for rest and family time.")

    if total_off_days < LOW_TOTAL_OFF_DAYS:
        qualitative.append("⚠️ Low total off-days. Ensure adequate rest periods.")

    return AnalysisResult(
        avg_weekly_hours=avg_weekly_hours,
        total_annual_hours=total_annual_hours,
        weekends_off_per_year=weekends_off,
        weekends_off_per_month_avg=weekends_off / 12,
        total_off_days_per_year=total_off_days,
        qualitative=qualitative,
        multi_year_analysis=generate_multi_year_analysis(scenario, year, years),
        advanced_metrics=advanced_metrics,
        weekly_hours_difference=weekly_hours_difference,
    )


def analyze_scenario(
    scenario: Scenario,
    year: int,
    years: int = MULTI_YEAR_HORIZON,
    custom_holidays: Iterable[str] = (),
) -> ScenarioReport:
    """Run every analysis of one scenario for one year."""
    analysis = calculate_analysis(scenario, year, years)
    return ScenarioReport(
        scenario=scenario,
        year=year,
        analysis=analysis,
        fairness=analyze_team_fairness(scenario, year),
        coverage=analyze_coverage(scenario, year),
        conflicts=find_conflicts(scenario.team_patterns),
        quality=calculate_quality_of_life_score(
            scenario, analysis, year, custom_holidays=custom_holidays
        ),
        critical_periods=detect_critical_periods(scenario, year),
    )


def analyze_scenarios(
    scenarios: Iterable[Scenario],
    year: int,
    years: int = MULTI_YEAR_HORIZON,
    custom_holidays: Iterable[str] = (),
) -> List[ScenarioReport]:
    custom = list(custom_holidays)
    return [analyze_scenario(s, year, years, custom) for s in scenarios]
