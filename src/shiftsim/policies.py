"""
Product-policy constants for scoring, fairness and risk detection.

These are heuristics, not values derived from a pattern. Tune them here.
"""

# Streak classification
MINI_VACATION_MIN_DAYS = 3
ISOLATED_OFF_DAY_LENGTH = 1

# Team fairness: a spread above this is reported as an imbalance
FAIRNESS_MAX_SPREAD = 1

# Coverage: teams that must be off at the same time
REQUIRED_OFF_LARGE_ROSTER = 2
REQUIRED_OFF_SMALL_ROSTER = 1
LARGE_ROSTER_MIN_TEAMS = 4

# Quality-of-life score
IDEAL_WEEKENDS_OFF = 26
HOURS_PENALTY_PER_HOUR = 10
DEFAULT_WORK_LIFE_BALANCE = 70
REST_STREAK_CEILING_DAYS = 14
MINI_VACATION_BONUS = 10
NIGHT_RATIO_PENALTY = 300

QOL_WEIGHTS = {
    "weekends_coverage": 0.30,
    "work_life_balance": 0.20,
    "consecutive_rest": 0.20,
    "night_shift_impact": 0.20,
    "holidays_coverage": 0.10,
}

# Lowest overall score for each grade, best first
GRADE_CUTOFFS = [
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
]
FAILING_GRADE = "F"

# Critical periods
LONG_WORK_RUN_DAYS = 10
LONG_WORK_RUN_MEDIUM_DAYS = 12
LONG_WORK_RUN_HIGH_DAYS = 14

LONG_NIGHT_RUN_DAYS = 5
LONG_NIGHT_RUN_HIGH_DAYS = 7

WEEKENDLESS_WEEKS = 4
WEEKENDLESS_HIGH_WEEKS = 6

# Headline qualitative thresholds
HIGH_WEEKLY_HOURS = 42
LOW_WEEKLY_HOURS = 35
FEW_WEEKENDS_OFF = 20
LOW_TOTAL_OFF_DAYS = 150

MULTI_YEAR_HORIZON = 5
