"""
Projection of a repeating shift pattern onto calendar years.
"""

from datetime import date, timedelta
from typing import List, Tuple

from .models import DayRecord, Scenario, ShiftType

SATURDAY = 5
SUNDAY = 6


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def resolve_pattern(scenario: Scenario, team: int) -> Tuple[str, int]:
    """
    Pattern a team follows and the phase shift applied to it.

    Returns:
        (pattern, team_shift). With explicit team patterns the shift is 0;
        otherwise the shared pattern is shifted by the team index.
    """
    explicit = scenario.pattern_for_team(team)
    if explicit is not None:
        return explicit, 0
    return scenario.pattern, team


def date_offset(start_date: date | None, year: int, pattern_length: int) -> int:
    """
    Pattern index that falls on January 1 of ``year``.

    The anchor date carries pattern index 0. Without an anchor, index 0 is
    January 1 of every queried year. ``date`` subtraction counts calendar
    days, so daylight-saving transitions cannot shift the result.
    """
    if start_date is None or pattern_length == 0:
        return 0
    elapsed = (date(year, 1, 1) - start_date).days
    return elapsed % pattern_length


def generate_year_calendar(scenario: Scenario, year: int, team: int = 0) -> List[DayRecord]:
    """
    Generate a full year of shift assignments for one team.

    Args:
        scenario: The rotation scenario
        year: Calendar year to project onto
        team: Team index (selects an explicit pattern, or the phase shift
            of the shared pattern)

    Returns:
        One DayRecord per day of the year, January 1 first. Empty when the
        resolved pattern is empty or the scenario has no teams.
    """
    if scenario.is_degenerate:
        return []

    pattern, team_shift = resolve_pattern(scenario, team)
    pattern_length = len(pattern)
    if pattern_length == 0:
        return []

    base = date_offset(scenario.start_date, year, pattern_length) + team_shift

    def shift_at(day_index: int) -> str:
        # day_index may step one day outside the year at either end
        return pattern[(base + day_index) % pattern_length]

    jan_first = date(year, 1, 1)
    calendar = []

    for i in range(days_in_year(year)):
        current = jan_first + timedelta(days=i)
        weekday = current.weekday()
        shift = shift_at(i)
        is_off = shift == ShiftType.OFF

        is_weekend_off = False
        if weekday == SATURDAY:
            is_weekend_off = is_off and shift_at(i + 1) == ShiftType.OFF
        elif weekday == SUNDAY:
            is_weekend_off = is_off and shift_at(i - 1) == ShiftType.OFF

        calendar.append(
            DayRecord(
                date=current,
                shift=shift,
                is_weekend=weekday in (SATURDAY, SUNDAY),
                is_weekend_off=is_weekend_off,
            )
        )

    return calendar


def generate_team_calendars(scenario: Scenario, year: int) -> List[List[DayRecord]]:
    """Calendars for every team of the scenario, team A first."""
    return [generate_year_calendar(scenario, year, team) for team in range(scenario.teams)]
