"""
Main entry point for the shift rotation simulator.
"""

import sys
import logging
import argparse
from datetime import date

from .analysis import analyze_scenarios
from .config import ConfigLoader, ConfigurationError, InvalidDateFormatError, SimulationConfig
from .exporters import CalendarCSVExporter, MultiYearCSVExporter, TeamMatrixCSVExporter
from .policies import MULTI_YEAR_HORIZON
from .presets import get_preset, preset_names
from .reporter import ScenarioReporter, print_comparison


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shiftsim",
        description="Simulate shift rotations and score their quality of life and fairness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report for every scenario in a file
  shiftsim config/scenarios.yaml

  # Bundled preset, specific year
  shiftsim --preset Current --year 2026

  # Export team B's calendar
  shiftsim config/scenarios.yaml --team 1 --export-calendar team_b.csv
        """,
    )

    parser.add_argument("config", nargs="?", help="Path to YAML configuration file")
    parser.add_argument(
        "--preset",
        choices=preset_names(),
        help="Analyse a bundled preset instead of a configuration file",
    )
    parser.add_argument("--year", type=int, help="Year to analyse (overrides the config)")
    parser.add_argument(
        "--team", type=int, default=0, help="Team index for calendar export (0 = team A)"
    )
    parser.add_argument("--export-calendar", type=str, help="Export a team calendar to CSV")
    parser.add_argument("--export-matrix", type=str, help="Export all teams as a CSV matrix")
    parser.add_argument(
        "--export-summary", type=str, help="Export the multi-year summary to CSV"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress detailed output (only show summary)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Build the simulation config from a preset or a YAML file."""
    if args.preset:
        return SimulationConfig(
            year=date.today().year,
            years=MULTI_YEAR_HORIZON,
            scenarios=[get_preset(args.preset).scenario],
        )

    print(f"Loading configuration from: {args.config}")
    loader = ConfigLoader(args.config)
    config = loader.load()

    print("✓ Configuration loaded successfully")
    print(loader.get_summary())
    print()
    return config


def check_team(team: int, config: SimulationConfig) -> None:
    """Reject a team index that some scenario does not have."""
    for scenario in config.scenarios:
        if not 0 <= team < scenario.teams:
            raise ValueError(
                f"--team {team} is out of range for scenario '{scenario.name}' "
                f"({scenario.teams} teams, valid 0-{scenario.teams - 1})"
            )


def main():
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.config and not args.preset:
        parser.error("either a configuration file or --preset is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
        year = args.year if args.year is not None else config.year
        check_team(args.team, config)

        reports = analyze_scenarios(config.scenarios, year, config.years, config.custom_holidays)

        for report in reports:
            ScenarioReporter(report, team=args.team).print_report(args.quiet)

        if len(reports) > 1:
            print_comparison(reports)

        # Exports cover the first scenario
        first = reports[0]
        if args.export_calendar:
            CalendarCSVExporter(first, team=args.team).export(args.export_calendar)
        if args.export_matrix:
            TeamMatrixCSVExporter(first).export(args.export_matrix)
        if args.export_summary:
            MultiYearCSVExporter(first).export(args.export_summary)

        sys.exit(0)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except InvalidDateFormatError as e:
        print(f"Date Format Error: {e}", file=sys.stderr)
        print(
            "\n Tip: Use ISO 8601 format (YYYY-MM-DD) for all dates.", file=sys.stderr
        )
        print("   Example: 2025-01-01", file=sys.stderr)
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Unexpected Error: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
