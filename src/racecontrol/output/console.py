"""Console output formatting."""

from racecontrol.simulation.incidents import RaceIncident
from racecontrol.simulation.qualifying import GridSlot
from racecontrol.simulation.race import RaceSimulationResult
from racecontrol.simulation.timing import format_lap_time


class ConsoleOutput:
    """Formats simulation results for console display."""

    @staticmethod
    def print_grid(grid: list[GridSlot]) -> None:
        """Print the starting grid.

        Args:
            grid: Grid slots sorted pole first
        """
        print("\n" + "=" * 60)
        print("STARTING GRID")
        print("=" * 60)
        print(f"{'Pos':<4} {'No':<4} {'Driver':<22} {'Team':<15} {'Time':<10}")
        print("-" * 60)

        for pos, slot in enumerate(grid, 1):
            competitor = slot.competitor
            print(
                f"{pos:<4} "
                f"{competitor.number:<4} "
                f"{competitor.name:<22} "
                f"{competitor.team.name:<15} "
                f"{format_lap_time(slot.qualifying_time):<10}"
            )

        print("=" * 60)

    @staticmethod
    def print_race_results(result: RaceSimulationResult) -> None:
        """Print race results to console.

        Args:
            result: Simulated (optionally penalized) race
        """
        print("\n" + "=" * 92)
        print(f"RACE RESULTS ({result.total_laps} laps)")
        print("=" * 92)
        print(
            f"{'Pos':<4} {'Grid':<5} {'Driver':<22} {'Team':<15} "
            f"{'Time':<12} {'Gap':<11} {'Best lap':<13} {'Pits':<5} {'Pen':<5}"
        )
        print("-" * 92)

        for row in result.standings:
            best = f"{row.fastest_lap} L{row.fastest_lap_number}"
            print(
                f"{row.position:<4} "
                f"{row.start_position:<5} "
                f"{row.competitor_name:<22} "
                f"{row.team_name:<15} "
                f"{row.total_time:<12} "
                f"{row.gap:<11} "
                f"{best:<13} "
                f"{row.pit_stops:<5} "
                f"{row.penalty:<5}"
            )

        fastest = result.fastest_lap
        print("-" * 92)
        print(f"Fastest lap: {fastest.competitor_name} {fastest.time} (lap {fastest.lap})")
        print("=" * 92)

    @staticmethod
    def print_incidents(incidents: list[RaceIncident]) -> None:
        """Print incidents reported to the stewards."""
        print("\nINCIDENTS:")
        print("-" * 60)
        if not incidents:
            print("  None")
        for incident in incidents:
            print(f"  Lap {incident.lap:<3} {incident.competitor_name:<22} {incident.description}")
