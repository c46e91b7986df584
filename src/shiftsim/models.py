"""
Data models for the shift rotation simulator.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple


class ShiftType(str, Enum):
    """Shift tokens used in rotation patterns."""

    MORNING = "M"
    AFTERNOON = "T"
    NIGHT = "N"
    OFF = "F"

    @classmethod
    def tokens(cls) -> str:
        """All valid pattern characters, in declaration order."""
        return "".join(member.value for member in cls)


WORK_SHIFTS = (ShiftType.MORNING, ShiftType.AFTERNOON, ShiftType.NIGHT)


def team_label(team_index: int) -> str:
    """Letter used to name a team (0 -> A, 1 -> B, ...)."""
    return chr(ord("A") + team_index)


@dataclass(frozen=True)
class Scenario:
    """A rotation scenario: pattern, team count and optional calendar anchor.

    ``team_patterns`` holds one explicit rotation per team. When it is empty
    every team shares ``pattern`` and is phase-shifted by its team index.
    """

    teams: int
    shift_duration: float
    pattern: str
    name: str = "Scenario"
    weekly_hours_contract: Optional[float] = None
    team_patterns: Tuple[str, ...] = ()
    start_date: Optional[date] = None

    def __post_init__(self):
        # Lists are accepted for convenience but stored as a tuple
        if not isinstance(self.team_patterns, tuple):
            object.__setattr__(self, "team_patterns", tuple(self.team_patterns))

    @property
    def pattern_length(self) -> int:
        return len(self.pattern)

    @property
    def is_degenerate(self) -> bool:
        """True when there is nothing to simulate (no pattern or no teams)."""
        return self.pattern_length == 0 or self.teams < 1

    @property
    def work_days_per_cycle(self) -> int:
        """Number of non-off days in one repetition of the main pattern."""
        return sum(1 for token in self.pattern if token != ShiftType.OFF.value)

    def pattern_for_team(self, team_index: int) -> Optional[str]:
        """Explicit pattern for a team, or None when running in offset mode."""
        if 0 <= team_index < len(self.team_patterns):
            return self.team_patterns[team_index]
        return None


@dataclass
class DayRecord:
    """One calendar day of a team's rotation."""

    date: date
    shift: str
    is_weekend: bool
    is_weekend_off: bool

    @property
    def weekday(self) -> int:
        """Day of week (0=Mon, 6=Sun)."""
        return self.date.weekday()

    @property
    def is_off(self) -> bool:
        return self.shift == ShiftType.OFF

    @property
    def is_night(self) -> bool:
        return self.shift == ShiftType.NIGHT

    @property
    def is_work(self) -> bool:
        """Any shift other than Off (unknown tokens count as work)."""
        return not self.is_off


@dataclass(frozen=True)
class Holiday:
    """A public holiday dated for a specific year."""

    name: str
    date: date
    category: str  # "national" or "religious"
    is_fixed: bool


@dataclass
class MonthlyBreakdown:
    """Weekend and off-day counts scoped to one month."""

    month: int  # 1-12
    month_name: str
    weekends_off: int = 0
    saturdays_off: int = 0
    sundays_off: int = 0
    total_off_days: int = 0


@dataclass
class YearlyAnalysis:
    """Weekend and off-day totals for one year, with a monthly breakdown."""

    year: int
    total_weekends: int
    total_saturdays_off: int
    total_sundays_off: int
    total_off_days: int
    monthly_breakdown: List[MonthlyBreakdown]


@dataclass
class AdvancedMetrics:
    """Streak, social-time and holiday statistics for one team-year."""

    max_consecutive_off_days: int = 0
    max_consecutive_work_days: int = 0
    max_consecutive_night_shifts: int = 0
    mini_vacations: int = 0
    isolated_off_days: int = 0
    total_night_shifts: int = 0
    night_shifts_per_month: float = 0.0
    friday_nights_off: int = 0
    saturday_nights_off: int = 0
    sunday_mornings_off: int = 0
    holidays_off: int = 0
    holidays_worked: int = 0
    holidays_list: List[str] = field(default_factory=list)


@dataclass
class MonthlyWorkload:
    """Work intensity for one month of a team calendar."""

    month: int
    work_days: int
    off_days: int
    night_shifts: int
    intensity: float  # 0-100


@dataclass
class TeamAnalysis:
    """Per-team yearly figures used for fairness comparison."""

    team_index: int
    yearly_analysis: YearlyAnalysis
    holidays_worked: int
    holidays_off: int
    work_days: int = 0
    hours_worked: float = 0.0

    @property
    def team_number(self) -> int:
        return self.team_index + 1

    @property
    def label(self) -> str:
        return team_label(self.team_index)


@dataclass
class FairnessAnalysis:
    """Cross-team spread of weekends, off-days and holidays."""

    is_balanced: bool
    max_difference: int
    weekend_difference: int
    off_day_difference: int
    holiday_difference: int
    hours_difference: float
    team_analyses: List[TeamAnalysis]
    insights: List[str]


@dataclass
class DailyCoverage:
    """How many teams hold each shift on one day (or pattern day)."""

    day: int
    morning: int = 0
    afternoon: int = 0
    night: int = 0
    off: int = 0
    date: Optional[date] = None

    @property
    def working(self) -> int:
        return self.morning + self.afternoon + self.night


@dataclass
class CoverageAnalysis:
    """Per-day staffing across the whole team set for one year."""

    year: int
    required_off: int
    daily: List[DailyCoverage]
    zero_coverage_days: List[date]
    low_off_days: List[date]

    @property
    def has_gaps(self) -> bool:
        return bool(self.zero_coverage_days)


@dataclass
class DayConflict:
    """Several teams assigned the same work shift on the same pattern day."""

    day: int
    shift: str
    teams: List[str]


@dataclass
class ConflictReport:
    """Result of checking explicit team patterns against each other."""

    has_conflicts: bool
    conflicts: List[DayConflict]
    coverage: List[DailyCoverage]


@dataclass
class QualityOfLifeScore:
    """Weighted 0-100 score over five sub-scores, with a letter grade."""

    overall: int
    weekends_coverage: int
    work_life_balance: int
    consecutive_rest: int
    night_shift_impact: int
    holidays_coverage: int
    grade: str
    insights: List[str] = field(default_factory=list)

    @property
    def breakdown(self) -> dict:
        return {
            "weekends_coverage": self.weekends_coverage,
            "work_life_balance": self.work_life_balance,
            "consecutive_rest": self.consecutive_rest,
            "night_shift_impact": self.night_shift_impact,
            "holidays_coverage": self.holidays_coverage,
        }


class PeriodType(str, Enum):
    """Risk categories flagged by the critical-period detector."""

    LOW_REST = "low-rest"
    CONSECUTIVE_NIGHTS = "consecutive-nights"
    NO_WEEKENDS = "no-weekends"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return {"low": 1, "medium": 2, "high": 3}[self.value]


@dataclass
class CriticalPeriod:
    """A contiguous date range flagged for one risk type."""

    start_date: date
    end_date: date
    type: PeriodType
    severity: Severity
    description: str
    days_affected: int

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValueError(
                f"End date {self.end_date} cannot be before start date {self.start_date}"
            )


@dataclass
class AnalysisResult:
    """Headline figures for one scenario (team A's view of the year)."""

    avg_weekly_hours: float
    total_annual_hours: float
    weekends_off_per_year: int
    weekends_off_per_month_avg: float
    total_off_days_per_year: int
    qualitative: List[str]
    multi_year_analysis: List[YearlyAnalysis]
    advanced_metrics: Optional[AdvancedMetrics] = None
    weekly_hours_difference: Optional[float] = None


@dataclass
class ScenarioReport:
    """Every analysis of one scenario for one year."""

    scenario: Scenario
    year: int
    analysis: AnalysisResult
    fairness: FairnessAnalysis
    coverage: CoverageAnalysis
    conflicts: ConflictReport
    quality: QualityOfLifeScore
    critical_periods: List[CriticalPeriod]
