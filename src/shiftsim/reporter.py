"""
Reporting and output formatting for scenario analyses.
"""

import pandas as pd
from typing import List

from .analyzer import monthly_workload
from .conflicts import conflict_summary
from .models import ScenarioReport
from .rotation import generate_year_calendar


def _print_title(title: str) -> None:
    print("=" * 80)
    print(title)
    print("=" * 80)


class ScenarioReporter:
    """Formats and displays the analysis of one scenario."""

    def __init__(self, report: ScenarioReport, team: int = 0):
        self.report = report
        self.team = team

    def print_report(self, quiet: bool) -> None:
        """Print complete scenario report."""
        self._print_header()

        if self.report.scenario.is_degenerate:
            print("\nNothing to analyse: the scenario has no pattern or no teams.")
            return

        self._print_quality_score()

        if not quiet:
            self._print_multi_year_table()
            self._print_advanced_metrics()
            self._print_workload()
            self._print_team_fairness()
            self._print_coverage()
            self._print_critical_periods()
            self._print_insights()

    def _print_header(self) -> None:
        scenario = self.report.scenario
        analysis = self.report.analysis

        _print_title(f"SCENARIO: {scenario.name} ({self.report.year})")

        print(f"\nTeams: {scenario.teams}")
        print(f"Pattern: {scenario.pattern} ({scenario.pattern_length}-day cycle)")
        if scenario.start_date is not None:
            print(f"Pattern Anchor: {scenario.start_date.isoformat()}")
        print(f"Shift Duration: {scenario.shift_duration:.2f}h")
        print(f"Average Weekly Hours: {analysis.avg_weekly_hours:.2f}")
        if analysis.weekly_hours_difference is not None:
            print(
                f"Contract: {scenario.weekly_hours_contract:.2f}h "
                f"(difference {analysis.weekly_hours_difference:+.2f}h)"
            )
        print(f"Total Annual Hours: {analysis.total_annual_hours:.0f}")
        print(f"Full Weekends Off: {analysis.weekends_off_per_year}")
        print(f"Total Off Days: {analysis.total_off_days_per_year}")
        print()

    def _print_quality_score(self) -> None:
        _print_title("QUALITY OF LIFE")

        quality = self.report.quality
        print(f"\nOverall: {quality.overall}/100 (grade {quality.grade})")

        df = pd.DataFrame(
            [{"Component": k.replace("_", " ").title(), "Score": v}
             for k, v in quality.breakdown.items()]
        ).set_index("Component")
        print(df.to_string())

        for insight in quality.insights:
            print(f"  {insight}")
        print()

    def _print_multi_year_table(self) -> None:
        _print_title("WEEKENDS OFF BY YEAR")

        data = []
        for year_analysis in self.report.analysis.multi_year_analysis:
            row = {
                "Year": year_analysis.year,
                "Weekends": year_analysis.total_weekends,
                "Sat only": year_analysis.total_saturdays_off,
                "Sun only": year_analysis.total_sundays_off,
                "Off days": year_analysis.total_off_days,
            }
            for month in year_analysis.monthly_breakdown:
                row[month.month_name] = month.weekends_off
            data.append(row)

        df = pd.DataFrame(data).set_index("Year")
        print(df.to_string())
        print()

    def _print_advanced_metrics(self) -> None:
        _print_title("ADVANCED METRICS")

        metrics = self.report.analysis.advanced_metrics
        if metrics is None:
            print("\n  No metrics available")
            return

        rows = [
            ("Max consecutive off days", metrics.max_consecutive_off_days),
            ("Max consecutive work days", metrics.max_consecutive_work_days),
            ("Max consecutive nights", metrics.max_consecutive_night_shifts),
            ("Mini-vacations (3+ days)", metrics.mini_vacations),
            ("Isolated off days", metrics.isolated_off_days),
            ("Night shifts", metrics.total_night_shifts),
            ("Night shifts per month", round(metrics.night_shifts_per_month, 1)),
            ("Friday nights off", metrics.friday_nights_off),
            ("Saturday nights off", metrics.saturday_nights_off),
            ("Sunday mornings off", metrics.sunday_mornings_off),
            ("Holidays off", metrics.holidays_off),
            ("Holidays worked", metrics.holidays_worked),
        ]
        df = pd.DataFrame(rows, columns=["Metric", "Value"]).set_index("Metric")
        print(df.to_string())

        if metrics.holidays_list:
            print(f"\n  Holidays off: {', '.join(metrics.holidays_list)}")
        print()

    def _print_workload(self) -> None:
        _print_title("MONTHLY WORKLOAD")

        calendar = generate_year_calendar(self.report.scenario, self.report.year, self.team)
        df = pd.DataFrame(
            [
                {
                    "Month": w.month,
                    "Work": w.work_days,
                    "Off": w.off_days,
                    "Nights": w.night_shifts,
                    "Intensity %": w.intensity,
                }
                for w in monthly_workload(calendar)
            ]
        ).set_index("Month")
        pd.options.display.float_format = "{:.0f}".format
        print(df.to_string())
        print()

    def _print_team_fairness(self) -> None:
        _print_title("TEAM FAIRNESS")

        fairness = self.report.fairness
        data = [
            {
                "Team": t.label,
                "Weekends": t.yearly_analysis.total_weekends,
                "Off days": t.yearly_analysis.total_off_days,
                "Holidays worked": t.holidays_worked,
                "Holidays off": t.holidays_off,
                "Hours": t.hours_worked,
            }
            for t in fairness.team_analyses
        ]
        df = pd.DataFrame(data).set_index("Team")
        pd.options.display.float_format = "{:.1f}".format
        print(df.to_string())

        verdict = "balanced" if fairness.is_balanced else "unbalanced"
        print(f"\n  Verdict: {verdict} (max spread {fairness.max_difference})")
        for insight in fairness.insights:
            print(f"  {insight}")
        print()

    def _print_coverage(self) -> None:
        _print_title("COVERAGE")

        coverage = self.report.coverage
        print(f"\n  Required teams off per day: {coverage.required_off}")
        print(f"  Days without any team working: {len(coverage.zero_coverage_days)}")
        print(f"  Days with too few teams off: {len(coverage.low_off_days)}")

        for day in coverage.zero_coverage_days[:10]:
            print(f"    • {day.strftime('%Y-%m-%d (%a)')} nobody working")

        if self.report.scenario.team_patterns:
            conflicts = self.report.conflicts
            print(f"\n  Pattern check: {conflict_summary(conflicts)}")
            for conflict in conflicts.conflicts:
                print(
                    f"    Day {conflict.day + 1:3d}: shift {conflict.shift} "
                    f"held by teams {', '.join(conflict.teams)}"
                )
        print()

    def _print_critical_periods(self) -> None:
        _print_title("CRITICAL PERIODS")

        periods = self.report.critical_periods
        if not periods:
            print("\n✓ No critical periods")
            print()
            return

        for period in periods:
            print(
                f"  [{period.severity.value:6s}] "
                f"{period.start_date.strftime('%Y-%m-%d')} to "
                f"{period.end_date.strftime('%Y-%m-%d')}: {period.description}"
            )
        print()

    def _print_insights(self) -> None:
        _print_title("INSIGHTS")

        for insight in self.report.analysis.qualitative:
            print(f"  {insight}")
        print()


def comparison_frame(reports: List[ScenarioReport]) -> pd.DataFrame:
    """Side-by-side headline figures of several scenarios."""
    data = []
    for report in reports:
        analysis = report.analysis
        metrics = analysis.advanced_metrics
        data.append(
            {
                "Scenario": report.scenario.name,
                "Teams": report.scenario.teams,
                "Cycle": report.scenario.pattern_length,
                "Weekly h": analysis.avg_weekly_hours,
                "Annual h": analysis.total_annual_hours,
                "Weekends": analysis.weekends_off_per_year,
                "Off days": analysis.total_off_days_per_year,
                "Nights": metrics.total_night_shifts if metrics else 0,
                "Holidays worked": metrics.holidays_worked if metrics else 0,
                "QoL": report.quality.overall,
                "Grade": report.quality.grade,
                "Balanced": report.fairness.is_balanced,
            }
        )
    columns = [
        "Scenario", "Teams", "Cycle", "Weekly h", "Annual h", "Weekends",
        "Off days", "Nights", "Holidays worked", "QoL", "Grade", "Balanced",
    ]
    return pd.DataFrame(data, columns=columns).set_index("Scenario")


def print_comparison(reports: List[ScenarioReport]) -> None:
    """Print a comparison table of several scenarios."""
    _print_title("SCENARIO COMPARISON")
    pd.options.display.float_format = "{:.1f}".format
    print(comparison_frame(reports).to_string())
    print()
