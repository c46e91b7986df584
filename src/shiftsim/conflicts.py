"""
Pairwise validation of explicit per-team patterns.

Patterns are compared day by day over the length of the first pattern. A
shorter pattern simply has no assignment on the missing days.
"""

from typing import Dict, List, Sequence

from .models import WORK_SHIFTS, ConflictReport, DailyCoverage, DayConflict, ShiftType, team_label


def _shift_on(pattern: str, day: int) -> str | None:
    return pattern[day] if day < len(pattern) else None


def daily_pattern_coverage(team_patterns: Sequence[str]) -> List[DailyCoverage]:
    """Number of teams on each shift for every pattern day."""
    if not team_patterns:
        return []

    coverage = []
    for day in range(len(team_patterns[0])):
        day_coverage = DailyCoverage(day=day)
        for pattern in team_patterns:
            shift = _shift_on(pattern, day)
            if shift == ShiftType.MORNING:
                day_coverage.morning += 1
            elif shift == ShiftType.AFTERNOON:
                day_coverage.afternoon += 1
            elif shift == ShiftType.NIGHT:
                day_coverage.night += 1
            elif shift == ShiftType.OFF:
                day_coverage.off += 1
        coverage.append(day_coverage)
    return coverage


def validate_no_overlaps(team_patterns: Sequence[str]) -> bool:
    """True when no pattern day has two teams on the same work shift."""
    return not any(
        c.morning > 1 or c.afternoon > 1 or c.night > 1
        for c in daily_pattern_coverage(team_patterns)
    )


def find_conflicts(team_patterns: Sequence[str]) -> ConflictReport:
    """
    Find every pattern day where more than one team holds the same work shift.

    Returns:
        ConflictReport with one DayConflict per (day, shift) collision,
        listing the team letters involved, plus the per-day coverage.
    """
    if not team_patterns:
        return ConflictReport(has_conflicts=False, conflicts=[], coverage=[])

    conflicts = []
    for day in range(len(team_patterns[0])):
        teams_per_shift: Dict[str, List[str]] = {s.value: [] for s in WORK_SHIFTS}

        for team_index, pattern in enumerate(team_patterns):
            shift = _shift_on(pattern, day)
            if shift in teams_per_shift:
                teams_per_shift[shift].append(team_label(team_index))

        for shift, teams in teams_per_shift.items():
            if len(teams) > 1:
                conflicts.append(DayConflict(day=day, shift=shift, teams=teams))

    return ConflictReport(
        has_conflicts=bool(conflicts),
        conflicts=conflicts,
        coverage=daily_pattern_coverage(team_patterns),
    )


def find_insufficient_coverage(team_patterns: Sequence[str]) -> List[int]:
    """Pattern days on which at least one of M/T/N has nobody assigned."""
    return [
        c.day
        for c in daily_pattern_coverage(team_patterns)
        if c.morning == 0 or c.afternoon == 0 or c.night == 0
    ]


def conflict_summary(report: ConflictReport) -> str:
    if not report.has_conflicts:
        return "No conflicts - full coverage"

    conflict_days = {c.day for c in report.conflicts}
    return f"{len(report.conflicts)} conflict(s) on {len(conflict_days)} day(s)"
