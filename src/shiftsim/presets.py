"""
Bundled rotation scenarios used as starting points.
"""

from dataclasses import dataclass
from datetime import date
from typing import List

from .models import Scenario


@dataclass(frozen=True)
class PresetScenario:
    """A named scenario with a short description."""

    description: str
    scenario: Scenario

    @property
    def name(self) -> str:
        return self.scenario.name


PRESET_SCENARIOS: List[PresetScenario] = [
    PresetScenario(
        description=(
            "5 teams - 4 mornings, 2 off, 4 afternoons, 2 off, 4 nights, 4 off"
        ),
        scenario=Scenario(
            name="4.2.4.2.4.4",
            teams=5,
            shift_duration=8.93,
            weekly_hours_contract=37.5,
            pattern="MMMMFFTTTTFFNNNNFFFF",
            start_date=date(2024, 1, 1),
            team_patterns=(
                "MMMMFFTTTTFFNNNNFFFF",
                "FFTTTTFFNNNNFFFFMMMM",
                "TTFFNNNNFFFFMMMMFFTT",
                "NNFFFFMMMMFFTTTTFFNN",
                "FFFFMMMMFFTTTTFFNNNN",
            ),
        ),
    ),
    PresetScenario(
        description=(
            "5 teams - 3 nights, 2 off, 3 afternoons, 2 off, 3 mornings, 2 off"
        ),
        scenario=Scenario(
            name="3.2",
            teams=5,
            shift_duration=8.93,
            weekly_hours_contract=37.5,
            pattern="NNNFFTTTFFMMMFF",
            start_date=date(2024, 1, 1),
            team_patterns=(
                "NNNFFTTTFFMMMFF",
                "FFTTTFFMMMFFNNN",
                "TTFFMMMFFNNNFFT",
                "FMMMFFNNNFFTTTF",
                "MFFNNNFFTTTFFMM",
            ),
        ),
    ),
    PresetScenario(
        description="5 teams - 70-day cycle with variable rotation",
        scenario=Scenario(
            name="Veralia",
            teams=5,
            shift_duration=8.93,
            weekly_hours_contract=37.5,
            pattern=(
                "FFFFFFFFFFFFFFNNNNFTTTTFFMMMFNNNNFFTTTTFMMMFFNNNNFTTTTFFMMMFNNNNFTTTTT"
            ),
        ),
    ),
    PresetScenario(
        description="4 teams - 28-day cycle (mornings, afternoons, nights)",
        scenario=Scenario(
            name="Current",
            teams=4,
            shift_duration=8,
            weekly_hours_contract=40,
            pattern="TFNNNNMFMMMMMFMTTTTFNNNFFFTT",
            start_date=date(2025, 1, 1),
            team_patterns=(
                "TFNNNNMFMMMMMFMTTTTFNNNFFFTT",
                "NNFFFTTTFNNNNMFMMMMMFMTTTTFN",
                "MTTTTFNNNFFFTTTFNNNNMFMMMMMF",
                "FMMMMMFMTTTTFNNNFFFTTTFNNNNM",
            ),
        ),
    ),
]


def preset_names() -> List[str]:
    return [preset.name for preset in PRESET_SCENARIOS]


def get_preset(name: str) -> PresetScenario:
    """Get a preset by name."""
    for preset in PRESET_SCENARIOS:
        if preset.name == name:
            return preset
    raise ValueError(f"Preset '{name}' not found")
