"""Random race incident generation."""

from dataclasses import dataclass

import numpy as np

from racecontrol.errors import InvalidRosterError
from racecontrol.simulation.race import RaceResultRow
from racecontrol.simulation.rng import resolve_rng

INCIDENT_TYPES = [
    "Collision with another car",
    "Exceeded track limits",
    "Unsafe release from pit box",
    "Causing a collision",
    "Ignoring blue flags",
]


@dataclass(frozen=True)
class RaceIncident:
    """An incident reported to the stewards."""

    competitor_id: int
    competitor_name: str
    lap: int
    description: str


class IncidentGenerator:
    """Generates a handful of plausible incidents for a finished race."""

    MIN_INCIDENTS = 2
    MAX_INCIDENTS = 4
    TURNS = 10

    def __init__(self, rng: np.random.Generator | int | None = None):
        """Initialize the incident generator.

        Args:
            rng: Random number generator or integer seed
        """
        self.rng = resolve_rng(rng)

    def generate(self, standings: list[RaceResultRow], total_laps: int) -> list[RaceIncident]:
        """Generate incidents for drivers in ``standings``.

        Args:
            standings: Race result rows
            total_laps: Race length; incident laps fall in 1..total_laps

        Returns:
            Incidents sorted by lap
        """
        if not standings:
            raise InvalidRosterError("Cannot generate incidents for an empty race")

        count = int(self.rng.integers(self.MIN_INCIDENTS, self.MAX_INCIDENTS + 1))
        incidents = []
        for _ in range(count):
            row = standings[int(self.rng.integers(0, len(standings)))]
            lap = int(self.rng.integers(1, total_laps + 1))
            kind = INCIDENT_TYPES[int(self.rng.integers(0, len(INCIDENT_TYPES)))]
            turn = int(self.rng.integers(1, self.TURNS + 1))

            incidents.append(RaceIncident(
                competitor_id=row.competitor_id,
                competitor_name=row.competitor_name,
                lap=lap,
                description=f"{kind} at Turn {turn}",
            ))

        incidents.sort(key=lambda i: i.lap)
        return incidents
