"""Race outcome simulation for the league race-control dashboard."""

from .errors import InvalidRosterError
from .simulation import RaceSimulationResult, RaceSimulator, simulate_race

__all__ = [
    "InvalidRosterError",
    "RaceSimulationResult",
    "RaceSimulator",
    "simulate_race",
]

__version__ = "0.1.0"
