"""
ShiftSim - Shift rotation simulation with quality-of-life and fairness metrics.
"""

__version__ = "0.1.0"

from .analysis import analyze_scenario, calculate_analysis
from .analyzer import analyze_year_calendar, generate_multi_year_analysis
from .config import ConfigLoader, ConfigurationError, InvalidDateFormatError, SimulationConfig
from .conflicts import find_conflicts
from .fairness import analyze_coverage, analyze_team_fairness
from .holidays import calculate_easter, holidays_for_year
from .metrics import calculate_advanced_metrics, generate_advanced_insights
from .models import (
    AdvancedMetrics,
    AnalysisResult,
    CoverageAnalysis,
    CriticalPeriod,
    DayRecord,
    FairnessAnalysis,
    Holiday,
    QualityOfLifeScore,
    Scenario,
    ScenarioReport,
    ShiftType,
    YearlyAnalysis,
)
from .quality import calculate_quality_of_life_score, detect_critical_periods
from .reporter import ScenarioReporter
from .rotation import generate_year_calendar

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "InvalidDateFormatError",
    "SimulationConfig",
    "Scenario",
    "ShiftType",
    "DayRecord",
    "Holiday",
    "YearlyAnalysis",
    "AdvancedMetrics",
    "FairnessAnalysis",
    "CoverageAnalysis",
    "QualityOfLifeScore",
    "CriticalPeriod",
    "AnalysisResult",
    "ScenarioReport",
    "holidays_for_year",
    "calculate_easter",
    "generate_year_calendar",
    "analyze_year_calendar",
    "generate_multi_year_analysis",
    "calculate_advanced_metrics",
    "generate_advanced_insights",
    "analyze_team_fairness",
    "analyze_coverage",
    "find_conflicts",
    "calculate_quality_of_life_score",
    "detect_critical_periods",
    "calculate_analysis",
    "analyze_scenario",
    "ScenarioReporter",
]
