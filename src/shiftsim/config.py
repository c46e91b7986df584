"""
Configuration loader for parsing YAML scenario files.
"""

import logging
import yaml
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Any, List

from .models import Scenario, ShiftType
from .policies import MULTI_YEAR_HORIZON
from .presets import get_preset, preset_names

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""

    pass


class InvalidDateFormatError(ConfigurationError):
    """Raised when a date is not in ISO 8601 format (YYYY-MM-DD)."""

    pass


@dataclass
class SimulationConfig:
    """Scenarios to simulate and the period to simulate them over."""

    year: int
    years: int
    scenarios: List[Scenario]
    custom_holidays: List[str] = field(default_factory=list)

    @property
    def scenario_names(self) -> List[str]:
        return [s.name for s in self.scenarios]

    def get_scenario(self, name: str) -> Scenario:
        """Get a scenario by name."""
        for scenario in self.scenarios:
            if scenario.name == name:
                return scenario
        raise ValueError(f"Scenario '{name}' not found")


class ConfigLoader:
    """Loads and validates simulation configuration from YAML files."""

    VALID_TOKENS = ShiftType.tokens()

    def __init__(self, config_path: str | Path):
        """
        Initialize the ConfigLoader with a configuration file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        self.config_path = Path(config_path)

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        self._raw_config: Dict[str, Any] | None = None
        self._config: SimulationConfig | None = None

    def load(self) -> SimulationConfig:
        """
        Load and parse the configuration file.

        Returns:
            SimulationConfig object with all parsed data

        Raises:
            InvalidDateFormatError: If dates are not in ISO 8601 format
            ConfigurationError: If configuration is invalid
        """
        with open(self.config_path, "r") as f:
            self._raw_config = yaml.safe_load(f) or {}

        if not isinstance(self._raw_config, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(self._raw_config).__name__}"
            )

        self._config = self._parse_config()
        self._validate()

        logger.info(
            "Loaded %d scenario(s) from %s", len(self._config.scenarios), self.config_path
        )
        return self._config

    def reload(self) -> SimulationConfig:
        """
        Reload the configuration from the file.

        Useful if the file has been modified.
        """
        return self.load()

    @property
    def config(self) -> SimulationConfig:
        """
        Get the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    @property
    def raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        if self._raw_config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._raw_config

    def _parse_config(self) -> SimulationConfig:
        """Parse raw YAML data into SimulationConfig object."""
        raw = self._raw_config

        analysis = raw.get("analysis", {}) or {}
        year = analysis.get("year", date.today().year)
        years = analysis.get("years", MULTI_YEAR_HORIZON)

        if not isinstance(year, int) or year < 1583:
            raise ConfigurationError(
                f"analysis.year must be a Gregorian year (1583 or later), got: {year}"
            )
        if not isinstance(years, int) or years < 1:
            raise ConfigurationError(f"analysis.years must be a positive integer, got: {years}")

        scenarios = [
            self._parse_scenario(entry, position)
            for position, entry in enumerate(raw.get("scenarios", []) or [])
        ]

        custom_holidays = self._parse_custom_holidays(raw.get("custom_holidays", []) or [])

        return SimulationConfig(
            year=year,
            years=years,
            scenarios=scenarios,
            custom_holidays=custom_holidays,
        )

    def _parse_scenario(self, entry: Dict[str, Any], position: int) -> Scenario:
        """Parse one scenario entry, either a preset reference or a full definition."""
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Scenario #{position + 1} must be a mapping")

        if "preset" in entry:
            preset_name = str(entry["preset"])
            try:
                return get_preset(preset_name).scenario
            except ValueError:
                raise ConfigurationError(
                    f"Unknown preset: '{preset_name}'. "
                    f"Available presets: {', '.join(preset_names())}"
                )

        name = str(entry.get("name", f"Scenario {position + 1}"))

        start_date = entry.get("start_date")
        if start_date is not None and not isinstance(start_date, date):
            raise InvalidDateFormatError(
                f"start_date of scenario '{name}' must be in ISO 8601 format "
                f"(YYYY-MM-DD), got: {start_date}. Example: 2025-01-01"
            )

        contract = entry.get("weekly_hours_contract")

        return Scenario(
            name=name,
            teams=entry.get("teams", 0),
            shift_duration=entry.get("shift_duration", 0),
            pattern=self._parse_pattern(entry.get("pattern"), name),
            weekly_hours_contract=float(contract) if contract is not None else None,
            team_patterns=tuple(
                self._parse_pattern(p, name) for p in entry.get("team_patterns", []) or []
            ),
            start_date=start_date,
        )

    def _parse_pattern(self, pattern: Any, scenario_name: str) -> str:
        if isinstance(pattern, str):
            pattern = pattern.strip().upper()
        if not isinstance(pattern, str) or not pattern:
            raise ConfigurationError(
                f"Scenario '{scenario_name}' needs a non-empty pattern string, got: {pattern!r}"
            )

        invalid = sorted({token for token in pattern if token not in self.VALID_TOKENS})
        if invalid:
            raise ConfigurationError(
                f"Invalid shift token(s) {', '.join(invalid)} in pattern of '{scenario_name}'. "
                f"Valid tokens: {', '.join(self.VALID_TOKENS)}"
            )
        return pattern

    def _parse_custom_holidays(self, holidays_raw: List[Any]) -> List[str]:
        """Parse recurring "MM-DD" holidays."""
        holidays = []

        for entry in holidays_raw:
            text = str(entry)
            try:
                month, day = (int(part) for part in text.split("-"))
                # leap year so 02-29 is accepted
                date(2000, month, day)
            except ValueError:
                raise ConfigurationError(
                    f"Custom holiday must be in MM-DD format, got: {text}. Example: 12-24"
                )
            holidays.append(f"{month:02d}-{day:02d}")

        return holidays

    def _validate(self) -> None:
        """
        Validate that the configuration is internally consistent.

        Raises:
            ConfigurationError: If configuration has issues
        """
        config = self._config

        if not config.scenarios:
            raise ConfigurationError("Configuration defines no scenarios")

        seen = set()
        for scenario in config.scenarios:
            if scenario.name in seen:
                raise ConfigurationError(f"Duplicate scenario name: '{scenario.name}'")
            seen.add(scenario.name)

            if not isinstance(scenario.teams, int) or scenario.teams < 1:
                raise ConfigurationError(
                    f"Scenario '{scenario.name}' must have at least one team, "
                    f"got: {scenario.teams}"
                )

            if not isinstance(scenario.shift_duration, (int, float)) or scenario.shift_duration <= 0:
                raise ConfigurationError(
                    f"Scenario '{scenario.name}' needs a positive shift_duration, "
                    f"got: {scenario.shift_duration}"
                )

            if scenario.team_patterns and len(scenario.team_patterns) != scenario.teams:
                raise ConfigurationError(
                    f"Scenario '{scenario.name}' has {len(scenario.team_patterns)} team "
                    f"patterns for {scenario.teams} teams"
                )

            self._check_rotation(scenario)

    def _check_rotation(self, scenario: Scenario) -> None:
        """Warn about legal but unusual rotations."""
        if scenario.pattern_length % scenario.teams != 0:
            logger.warning(
                "Scenario '%s': pattern length %d is not divisible by %d teams",
                scenario.name,
                scenario.pattern_length,
                scenario.teams,
            )

        lengths = {len(p) for p in scenario.team_patterns}
        if len(lengths) > 1:
            logger.warning(
                "Scenario '%s': team patterns have different lengths %s",
                scenario.name,
                sorted(lengths),
            )

    def get_summary(self) -> str:
        """
        Get a summary of the loaded configuration.

        Raises:
            RuntimeError: If load() hasn't been called yet
        """
        config = self.config

        lines = [
            f"Configuration from: {self.config_path}",
            f"Analysis Year: {config.year} ({config.years}-year horizon)",
            f"Scenarios: {len(config.scenarios)}",
        ]

        for scenario in config.scenarios:
            mode = "explicit team patterns" if scenario.team_patterns else "shared pattern"
            lines.append(
                f"  - {scenario.name}: {scenario.teams} teams, "
                f"{scenario.pattern_length}-day cycle ({mode})"
            )

        if config.custom_holidays:
            lines.append(f"Custom Holidays: {', '.join(config.custom_holidays)}")

        return "\n".join(lines)
