"""
National holiday calendar: fixed dates plus Easter-based movable feasts.
"""

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from .models import DayRecord, Holiday

# (month, day, name, category)
FIXED_HOLIDAYS = [
    (1, 1, "New Year's Day", "national"),
    (4, 25, "Freedom Day", "national"),
    (5, 1, "Labour Day", "national"),
    (6, 10, "Portugal Day", "national"),
    (8, 15, "Assumption of Mary", "religious"),
    (10, 5, "Republic Day", "national"),
    (11, 1, "All Saints' Day", "religious"),
    (12, 1, "Restoration of Independence", "national"),
    (12, 8, "Immaculate Conception", "religious"),
    (12, 25, "Christmas Day", "religious"),
]

# (days relative to Easter Sunday, name)
MOVABLE_HOLIDAYS = [
    (-2, "Good Friday"),
    (0, "Easter Sunday"),
    (60, "Corpus Christi"),
]


def calculate_easter(year: int) -> date:
    """
    Date of Easter Sunday in the Gregorian calendar.

    Anonymous Gregorian computus (Meeus/Jones/Butcher). Valid from 1583.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def holidays_for_year(year: int) -> List[Holiday]:
    """All national holidays of a year, sorted by date."""
    holidays = [
        Holiday(name=name, date=date(year, month, day), category=category, is_fixed=True)
        for month, day, name, category in FIXED_HOLIDAYS
    ]

    easter = calculate_easter(year)
    for delta, name in MOVABLE_HOLIDAYS:
        holidays.append(
            Holiday(
                name=name,
                date=easter + timedelta(days=delta),
                category="religious",
                is_fixed=False,
            )
        )

    # sort is stable: a fixed holiday keeps precedence on a shared date
    holidays.sort(key=lambda h: h.date)
    return holidays


def _index_by_date(holidays: Iterable[Holiday]) -> Dict[date, Holiday]:
    index: Dict[date, Holiday] = {}
    for holiday in holidays:
        index.setdefault(holiday.date, holiday)
    return index


def holiday_on(day: date, holidays: Iterable[Holiday]) -> Optional[Holiday]:
    """The holiday falling on a calendar date, if any."""
    for holiday in holidays:
        if holiday.date == day:
            return holiday
    return None


def holiday_name(day: date, holidays: Iterable[Holiday]) -> Optional[str]:
    holiday = holiday_on(day, holidays)
    return holiday.name if holiday else None


def holidays_off(calendar: Iterable[DayRecord], holidays: Iterable[Holiday]) -> List[Holiday]:
    """Holidays that land on an off day, one entry per calendar day."""
    index = _index_by_date(holidays)
    return [index[day.date] for day in calendar if day.is_off and day.date in index]


def holidays_worked(
    calendar: Iterable[DayRecord], holidays: Iterable[Holiday]
) -> List[Holiday]:
    """Holidays that land on a worked day, one entry per calendar day."""
    index = _index_by_date(holidays)
    return [index[day.date] for day in calendar if day.is_work and day.date in index]
