"""Data models for race simulation."""

from .circuit import DEFAULT_RACE_LAPS, Circuit
from .competitor import Competitor, Team
from .config import DEFAULT_TEAM_PERFORMANCE, SimulatorConfig, TeamPerformanceTable

__all__ = [
    "Circuit",
    "Competitor",
    "DEFAULT_RACE_LAPS",
    "DEFAULT_TEAM_PERFORMANCE",
    "SimulatorConfig",
    "Team",
    "TeamPerformanceTable",
]
