"""Simulation engine components."""

from .incidents import IncidentGenerator, RaceIncident
from .lap import LapTimeModel
from .penalties import Penalty, PenaltyType, apply_penalties
from .pit_stops import PitStopPolicy
from .qualifying import GridGenerator, GridSlot
from .race import (
    FastestLap,
    RaceResultRow,
    RaceSimulationResult,
    RaceSimulator,
    StandingEntry,
    simulate_race,
)

__all__ = [
    "FastestLap",
    "GridGenerator",
    "GridSlot",
    "IncidentGenerator",
    "LapTimeModel",
    "Penalty",
    "PenaltyType",
    "PitStopPolicy",
    "RaceIncident",
    "RaceResultRow",
    "RaceSimulationResult",
    "RaceSimulator",
    "StandingEntry",
    "simulate_race",
]
