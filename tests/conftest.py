"""Shared fixtures for shiftsim tests."""

import pytest
from datetime import date, timedelta

from shiftsim.models import DayRecord, Scenario


@pytest.fixture
def reference_scenario() -> Scenario:
    """Four teams on a 10-day rotation, no calendar anchor."""
    return Scenario(name="Reference", teams=4, shift_duration=8, pattern="MMTTNNFFFF")


@pytest.fixture
def weekend_scenario() -> Scenario:
    """One team working weekdays with every weekend off."""
    return Scenario(name="Office", teams=1, shift_duration=8, pattern="MMMMMFF")


@pytest.fixture
def explicit_scenario() -> Scenario:
    """Two teams with explicit, complementary patterns."""
    return Scenario(
        name="Explicit",
        teams=2,
        shift_duration=12,
        pattern="MF",
        team_patterns=("MF", "FM"),
    )


@pytest.fixture
def make_calendar():
    """Build a calendar from a token string, one day per token."""

    def _make(tokens: str, start: date = date(2024, 1, 1)) -> list[DayRecord]:
        calendar = []
        for i, token in enumerate(tokens):
            day = start + timedelta(days=i)
            calendar.append(
                DayRecord(
                    date=day,
                    shift=token,
                    is_weekend=day.weekday() >= 5,
                    is_weekend_off=False,
                )
            )
        return calendar

    return _make
