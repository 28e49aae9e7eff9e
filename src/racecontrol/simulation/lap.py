"""Lap time calculation."""

import numpy as np

from racecontrol.models import SimulatorConfig
from racecontrol.simulation.rng import resolve_rng


class LapTimeModel:
    """Calculates qualifying laps, race laps and pit stop losses."""

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        """Initialize the lap time model.

        Args:
            config: Simulator constants (defaults if None)
            rng: Random number generator (creates new if None)
        """
        self.config = config if config is not None else SimulatorConfig()
        self.rng = resolve_rng(rng)

    def calculate_qualifying_lap(self, team_performance: float) -> float:
        """Calculate a single-lap qualifying time.

        Args:
            team_performance: Team lap time multiplier

        Returns:
            Lap time in seconds
        """
        low, high = self.config.skill_factor_range
        driver_skill = self.rng.uniform(low, high)
        return self.config.base_lap_time * team_performance * driver_skill

    def calculate_lap_time(
        self,
        team_performance: float,
        lap_number: int,
        total_laps: int,
    ) -> float:
        """Calculate a race lap time, excluding any pit stop loss.

        Args:
            team_performance: Team lap time multiplier
            lap_number: Current lap (1-indexed)
            total_laps: Total race laps

        Returns:
            Lap time in seconds
        """
        lap_time = self.config.base_lap_time * team_performance

        # Traffic and driver variance
        jitter = self.config.lap_jitter
        lap_time += self.rng.uniform(-jitter, jitter)

        # Tire degradation grows linearly to its full value on the last lap
        lap_time += (lap_number / total_laps) * self.config.tire_degradation

        return lap_time

    def calculate_pit_stop_time(self) -> float:
        """Time lost to a pit stop, in seconds."""
        low, high = self.config.pit_loss_range
        return self.rng.uniform(low, high)
