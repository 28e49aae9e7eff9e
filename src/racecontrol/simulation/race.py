"""Race outcome simulation engine."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from racecontrol.errors import InvalidRosterError
from racecontrol.models import Circuit, Competitor, SimulatorConfig
from racecontrol.simulation.lap import LapTimeModel
from racecontrol.simulation.pit_stops import PitStopPolicy
from racecontrol.simulation.qualifying import GridGenerator, GridSlot
from racecontrol.simulation.rng import resolve_rng
from racecontrol.simulation.timing import format_gap, format_lap_time

logger = logging.getLogger(__name__)

NO_PENALTY = "0s"


@dataclass
class StandingEntry:
    """Tracks a competitor's state during the race."""

    competitor: Competitor
    team_performance: float
    position: int
    start_position: int
    total_time: float = 0.0
    fastest_lap: float = float("inf")
    fastest_lap_number: int = 0
    pit_stops: int = 0
    pit_laps: list[int] = field(default_factory=list)
    lap_times: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class RaceResultRow:
    """Final race result for a competitor."""

    position: int
    competitor_id: int
    competitor_name: str
    competitor_number: int
    team_id: int
    team_name: str
    start_position: int
    total_time: str
    gap: str
    fastest_lap: str
    fastest_lap_number: int
    pit_stops: int
    penalty: str
    laps_completed: int
    total_seconds: float
    fastest_lap_seconds: float
    penalty_seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Wire representation (camelCase keys, formatted strings)."""
        return {
            "position": self.position,
            "competitorId": self.competitor_id,
            "competitorName": self.competitor_name,
            "competitorNumber": self.competitor_number,
            "teamId": self.team_id,
            "teamName": self.team_name,
            "startPosition": self.start_position,
            "totalTime": self.total_time,
            "gap": self.gap,
            "fastestLap": self.fastest_lap,
            "fastestLapNumber": self.fastest_lap_number,
            "pitStops": self.pit_stops,
            "penalty": self.penalty,
            "lapsCompleted": self.laps_completed,
        }

    def summary(self) -> str:
        """One-line race log entry."""
        return (
            f"Final position: P{self.position}. Total time: {self.total_time}. "
            f"Fastest lap: {self.fastest_lap} (Lap {self.fastest_lap_number})"
        )


@dataclass(frozen=True)
class FastestLap:
    """Fastest lap of the race."""

    competitor_id: int
    competitor_name: str
    time: str
    lap: int
    seconds: float

    def to_dict(self) -> dict[str, Any]:
        return {"competitorName": self.competitor_name, "time": self.time, "lap": self.lap}


@dataclass
class RaceSimulationResult:
    """Complete output of a simulated race."""

    standings: list[RaceResultRow]
    total_laps: int
    fastest_lap: FastestLap
    grid: list[GridSlot] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "standings": [row.to_dict() for row in self.standings],
            "totalLaps": self.total_laps,
            "fastestLap": self.fastest_lap.to_dict(),
        }

    def row_for(self, competitor_id: int) -> RaceResultRow | None:
        """Result row of a competitor, if they raced."""
        for row in self.standings:
            if row.competitor_id == competitor_id:
                return row
        return None


class RaceSimulator:
    """Simulates a full race from roster and circuit."""

    def __init__(
        self,
        rng: np.random.Generator | int | None = None,
        config: SimulatorConfig | None = None,
    ):
        """Initialize race simulator.

        Args:
            rng: Random number generator or integer seed
            config: Simulator constants and team performance table
        """
        self.rng = resolve_rng(rng)
        self.config = config if config is not None else SimulatorConfig()
        self.lap_model = LapTimeModel(self.config, rng=self.rng)
        self.grid_generator = GridGenerator(self.config, rng=self.rng, lap_model=self.lap_model)
        self.pit_policy = PitStopPolicy.from_config(self.config)

    def simulate_race(
        self,
        competitors: Iterable[Competitor | Mapping[str, Any]] | None,
        circuit: Circuit | Mapping[str, Any] | None = None,
    ) -> RaceSimulationResult:
        """Simulate a complete race.

        Args:
            competitors: Race roster (models or plain mappings)
            circuit: Circuit; only its lap count is used

        Returns:
            RaceSimulationResult with standings sorted by finishing position

        Raises:
            InvalidRosterError: If no competitors are supplied
        """
        roster = _coerce_roster(competitors)
        total_laps = _coerce_circuit(circuit).race_laps(self.config.default_laps)

        grid = self.grid_generator.generate_grid(roster)
        entries = [
            StandingEntry(
                competitor=slot.competitor,
                team_performance=slot.team_performance,
                position=pos,
                start_position=pos,
            )
            for pos, slot in enumerate(grid, 1)
        ]

        for lap in range(1, total_laps + 1):
            self._simulate_lap(entries, lap, total_laps)

        standings = self._build_results(entries, total_laps)
        fastest = find_fastest_lap(standings)

        logger.info(
            "Simulated %d laps for %d competitors; winner %s, fastest lap %s by %s",
            total_laps,
            len(standings),
            standings[0].competitor_name,
            fastest.time,
            fastest.competitor_name,
        )

        return RaceSimulationResult(
            standings=standings,
            total_laps=total_laps,
            fastest_lap=fastest,
            grid=grid,
        )

    def _simulate_lap(self, entries: list[StandingEntry], lap: int, total_laps: int) -> None:
        """Advance every entry by one lap, then re-rank by total time."""
        for entry in entries:
            lap_time = self.lap_model.calculate_lap_time(entry.team_performance, lap, total_laps)

            if self.pit_policy.should_pit(lap, entry.pit_stops, total_laps, self.rng):
                lap_time += self.lap_model.calculate_pit_stop_time()
                entry.pit_stops += 1
                entry.pit_laps.append(lap)
                logger.debug("Lap %d: %s pits (stop %d)", lap, entry.competitor.name, entry.pit_stops)

            if lap_time < entry.fastest_lap:
                entry.fastest_lap = lap_time
                entry.fastest_lap_number = lap

            entry.total_time += lap_time
            entry.lap_times.append(lap_time)

        self._update_positions(entries)

    @staticmethod
    def _update_positions(entries: list[StandingEntry]) -> None:
        """Sort by accumulated time and renumber positions from 1."""
        entries.sort(key=lambda e: e.total_time)
        for pos, entry in enumerate(entries, 1):
            entry.position = pos

    @staticmethod
    def _build_results(entries: list[StandingEntry], total_laps: int) -> list[RaceResultRow]:
        leader_time = entries[0].total_time

        results = []
        for pos, entry in enumerate(entries, 1):
            competitor = entry.competitor
            results.append(RaceResultRow(
                position=pos,
                competitor_id=competitor.id,
                competitor_name=competitor.name,
                competitor_number=competitor.number,
                team_id=competitor.team.id,
                team_name=competitor.team.name,
                start_position=entry.start_position,
                total_time=format_lap_time(entry.total_time),
                gap=format_gap(entry.total_time - leader_time, is_leader=pos == 1),
                fastest_lap=format_lap_time(entry.fastest_lap),
                fastest_lap_number=entry.fastest_lap_number,
                pit_stops=entry.pit_stops,
                penalty=NO_PENALTY,
                laps_completed=total_laps,
                total_seconds=entry.total_time,
                fastest_lap_seconds=entry.fastest_lap,
            ))

        return results


def find_fastest_lap(standings: list[RaceResultRow]) -> FastestLap:
    """Overall fastest lap; ties go to the lowest competitor id."""
    best = min(standings, key=lambda r: (r.fastest_lap_seconds, r.competitor_id))
    return FastestLap(
        competitor_id=best.competitor_id,
        competitor_name=best.competitor_name,
        time=best.fastest_lap,
        lap=best.fastest_lap_number,
        seconds=best.fastest_lap_seconds,
    )


def simulate_race(
    competitors: Iterable[Competitor | Mapping[str, Any]] | None,
    circuit: Circuit | Mapping[str, Any] | None = None,
    rng: np.random.Generator | int | None = None,
    config: SimulatorConfig | None = None,
) -> RaceSimulationResult:
    """Simulate a race with a one-off RaceSimulator."""
    return RaceSimulator(rng=rng, config=config).simulate_race(competitors, circuit)


def _coerce_roster(competitors) -> list[Competitor]:
    if competitors is None:
        raise InvalidRosterError("No competitors provided for race simulation")

    roster = [
        c if isinstance(c, Competitor) else Competitor.model_validate(c)
        for c in competitors
    ]
    if not roster:
        raise InvalidRosterError("No competitors provided for race simulation")
    return roster


def _coerce_circuit(circuit) -> Circuit:
    if circuit is None:
        return Circuit()
    if isinstance(circuit, Circuit):
        return circuit
    return Circuit.model_validate(circuit)
