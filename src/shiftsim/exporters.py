"""
Export strategies for simulated rotations.

This module implements the Strategy Pattern for exporting scenario results
to CSV. Each exporter encapsulates a specific layout.
"""

import csv
import logging
from abc import ABC, abstractmethod
from datetime import date

from .models import DayRecord, ScenarioReport, team_label
from .rotation import generate_team_calendars, generate_year_calendar

logger = logging.getLogger(__name__)


class ExportStrategy(ABC):
    """Abstract base class for scenario export strategies.

    Subclasses implement specific layouts. Common helpers for calendar
    generation are provided here.
    """

    def __init__(self, report: ScenarioReport):
        """Initialize the export strategy.

        Args:
            report: The scenario report to export
        """
        self.report = report

    @abstractmethod
    def export(self, filepath: str) -> None:
        """Export the report to the specified file.

        Args:
            filepath: Path to the output file
        """
        pass

    def _team_calendar(self, team: int) -> list[DayRecord]:
        return generate_year_calendar(self.report.scenario, self.report.year, team)

    def _get_date_range(self) -> list[date]:
        """Every date of the report year, in order."""
        return [day.date for day in self._team_calendar(0)]

    def _write_rows(self, filepath: str, rows: list[list]) -> None:
        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        logger.info("Exported %d rows to %s", len(rows), filepath)


class CalendarCSVExporter(ExportStrategy):
    """Exports one team's year as a day-per-row CSV.

    Output format: Date, Day_of_Week, Shift, Is_Weekend, Is_Weekend_Off
    """

    FIELDNAMES = ["Date", "Day_of_Week", "Shift", "Is_Weekend", "Is_Weekend_Off"]

    def __init__(self, report: ScenarioReport, team: int = 0):
        super().__init__(report)
        self.team = team

    def export(self, filepath: str) -> None:
        rows = []
        for day in self._team_calendar(self.team):
            rows.append(
                {
                    "Date": day.date.isoformat(),
                    "Day_of_Week": day.date.strftime("%A"),
                    "Shift": day.shift,
                    "Is_Weekend": "Yes" if day.is_weekend else "No",
                    "Is_Weekend_Off": "Yes" if day.is_weekend_off else "No",
                }
            )

        with open(filepath, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)

        logger.info("Exported %d days to %s", len(rows), filepath)
        print(f"\n✓ Calendar exported to {filepath}")


class TeamMatrixCSVExporter(ExportStrategy):
    """Exports every team's shifts as a matrix.

    Output format:
    - First column: team label
    - Subsequent columns: one per date
    - A bottom row of COUNTIF formulas counting teams off on each date
    """

    def __init__(self, report: ScenarioReport, off_marker: str = "F"):
        """Initialize the matrix CSV exporter.

        Args:
            report: The scenario report to export
            off_marker: Shift token counted by the bottom formulas
        """
        super().__init__(report)
        self.off_marker = off_marker

    def export(self, filepath: str) -> None:
        calendars = generate_team_calendars(self.report.scenario, self.report.year)
        dates = self._get_date_range()

        rows: list[list[str]] = [self._build_header_row(dates)]

        for team_index, calendar in enumerate(calendars):
            rows.append([f"Team {team_label(team_index)}"] + [day.shift for day in calendar])

        # Header is row 1, teams start at row 2
        rows.append(self._build_total_row(len(dates), len(calendars) + 2))

        self._write_rows(filepath, rows)
        print(f"\n✓ Team matrix exported to {filepath}")

    def _build_header_row(self, dates: list[date]) -> list[str]:
        header = ["Team"]
        for d in dates:
            header.append(f"{d.strftime('%Y-%m-%d')} {d.strftime('%a')}")
        return header

    def _build_total_row(self, num_date_cols: int, next_row: int) -> list[str]:
        """Build the TEAMS OFF row with COUNTIF formulas.

        Args:
            num_date_cols: Number of date columns
            next_row: The row number after the last team row (1-indexed)
        """
        total_row = ["TEAMS OFF"]
        last_data_row = next_row - 1

        for col_idx in range(num_date_cols):
            col_letter = self._col_index_to_excel_letter(col_idx + 1)
            formula = f'=COUNTIF({col_letter}2:{col_letter}{last_data_row},"{self.off_marker}")'
            total_row.append(formula)

        return total_row

    def _col_index_to_excel_letter(self, index: int) -> str:
        """Convert 0-based column index to Excel column letter (A, ..., Z, AA, ...)."""
        result = ""
        index += 1
        while index > 0:
            index -= 1
            result = chr(index % 26 + ord("A")) + result
            index //= 26
        return result


class MultiYearCSVExporter(ExportStrategy):
    """Exports the multi-year weekend analysis, one row per year."""

    def export(self, filepath: str) -> None:
        analyses = self.report.analysis.multi_year_analysis

        header = ["Year", "Full_Weekends_Off", "Saturdays_Only", "Sundays_Only", "Total_Off_Days"]
        if analyses:
            header += [m.month_name for m in analyses[0].monthly_breakdown]

        rows = [header]
        for year_analysis in analyses:
            rows.append(
                [
                    year_analysis.year,
                    year_analysis.total_weekends,
                    year_analysis.total_saturdays_off,
                    year_analysis.total_sundays_off,
                    year_analysis.total_off_days,
                ]
                + [m.weekends_off for m in year_analysis.monthly_breakdown]
            )

        self._write_rows(filepath, rows)
        print(f"\n✓ Multi-year summary exported to {filepath}")
