"""Export simulation results to CSV and JSON."""

import csv
import json
from pathlib import Path

from racecontrol.simulation.race import RaceSimulationResult

STANDINGS_COLUMNS = [
    "position", "competitor_id", "competitor_name", "competitor_number",
    "team_id", "team_name", "start_position", "total_time", "gap",
    "fastest_lap", "fastest_lap_number", "pit_stops", "penalty",
    "laps_completed", "total_seconds",
]


class Exporter:
    """Exports a race result to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_standings_csv(
        self,
        result: RaceSimulationResult,
        filename: str = "standings.csv",
    ) -> Path:
        """Export final standings to CSV.

        Args:
            result: Simulated race
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(STANDINGS_COLUMNS)
            for row in result.standings:
                writer.writerow([
                    row.position,
                    row.competitor_id,
                    row.competitor_name,
                    row.competitor_number,
                    row.team_id,
                    row.team_name,
                    row.start_position,
                    row.total_time,
                    row.gap,
                    row.fastest_lap,
                    row.fastest_lap_number,
                    row.pit_stops,
                    row.penalty,
                    row.laps_completed,
                    f"{row.total_seconds:.3f}",
                ])

        return filepath

    def export_result_json(
        self,
        result: RaceSimulationResult,
        filename: str = "result.json",
    ) -> Path:
        """Export the result in its wire shape to JSON."""
        filepath = self.output_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

        return filepath

    def export_all(
        self,
        result: RaceSimulationResult,
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export all result formats.

        Args:
            result: Simulated race
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "standings_csv": self.export_standings_csv(result, f"{prefix}standings.csv"),
            "result_json": self.export_result_json(result, f"{prefix}result.json"),
        }
