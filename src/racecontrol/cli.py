"""Command-line interface for the race outcome simulator."""

import argparse
import logging
import sys

from pydantic import ValidationError

from racecontrol.data import create_demo_roster, get_circuit, load_roster
from racecontrol.errors import InvalidRosterError
from racecontrol.models import Circuit, SimulatorConfig
from racecontrol.output import ConsoleOutput, Exporter
from racecontrol.simulation import IncidentGenerator, RaceSimulator

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="racecontrol",
        description="Simulate a race outcome for the league roster",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  racecontrol --circuit monaco --seed 42
  racecontrol --laps 20 --incidents
  racecontrol --roster drivers.json --config sim.json --export
        """,
    )

    circuit_group = parser.add_mutually_exclusive_group()
    circuit_group.add_argument(
        "--circuit",
        metavar="NAME",
        help="Demo circuit name, partial match allowed (default: Silverstone)",
    )
    circuit_group.add_argument(
        "--laps",
        type=int,
        help="Race length in laps (0 or negative uses the default of 50)",
    )

    parser.add_argument(
        "--roster",
        metavar="FILE",
        help="JSON roster file (default: built-in demo league)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="JSON simulator configuration file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible race",
    )
    parser.add_argument(
        "--incidents",
        action="store_true",
        help="Generate random incidents for the stewards",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Export results to CSV/JSON",
    )
    parser.add_argument(
        "--output-dir",
        default="output",
        help="Output directory for exports (default: output)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Run one simulation and print the results.

    Returns:
        Process exit code
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        config = SimulatorConfig.from_file(args.config) if args.config else SimulatorConfig()
        roster = load_roster(args.roster) if args.roster else create_demo_roster()

        if args.laps is not None:
            circuit = Circuit(name="Custom", laps=args.laps)
        else:
            circuit = get_circuit(args.circuit or "Silverstone")

        simulator = RaceSimulator(rng=args.seed, config=config)
        result = simulator.simulate_race(roster, circuit)
    except InvalidRosterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValidationError, ValueError) as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        return 1
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot read file: {e}", file=sys.stderr)
        return 1

    print(f"Circuit: {circuit.name or 'Custom'}")
    print(f"Competitors: {len(roster)}")

    ConsoleOutput.print_grid(result.grid)
    ConsoleOutput.print_race_results(result)

    if args.incidents:
        incidents = IncidentGenerator(rng=simulator.rng).generate(result.standings, result.total_laps)
        ConsoleOutput.print_incidents(incidents)

    if args.export:
        exporter = Exporter(output_dir=args.output_dir)
        files = exporter.export_all(result)
        print("\nExported files:")
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
