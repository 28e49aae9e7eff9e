"""Pit stop scheduling."""

from dataclasses import dataclass

import numpy as np

from racecontrol.models import SimulatorConfig


@dataclass(frozen=True)
class PitStopPolicy:
    """Stochastic pit stop schedule.

    The state is the number of stops taken so far. The first stop can happen
    inside ``first_window`` whenever a fresh draw exceeds
    ``first_threshold``; the second only in races longer than
    ``second_min_race_laps``, inside ``second_window``, on a draw above
    ``second_threshold``. Nothing happens after ``max_stops``.
    """

    first_window: tuple[int, int] = (15, 30)
    first_threshold: float = 0.85
    second_window: tuple[int, int] = (40, 55)
    second_threshold: float = 0.90
    second_min_race_laps: int = 50
    max_stops: int = 2

    @classmethod
    def from_config(cls, config: SimulatorConfig) -> "PitStopPolicy":
        return cls(
            first_window=config.first_stop_window,
            first_threshold=config.first_stop_threshold,
            second_window=config.second_stop_window,
            second_threshold=config.second_stop_threshold,
            second_min_race_laps=config.second_stop_min_race_laps,
            max_stops=config.max_pit_stops,
        )

    def window_for(self, pit_stops: int, total_laps: int) -> tuple[tuple[int, int], float] | None:
        """Return the (window, threshold) reachable from ``pit_stops``, if any."""
        if pit_stops >= self.max_stops:
            return None
        if pit_stops == 0:
            return self.first_window, self.first_threshold
        if pit_stops == 1 and total_laps > self.second_min_race_laps:
            return self.second_window, self.second_threshold
        return None

    def should_pit(
        self,
        lap: int,
        pit_stops: int,
        total_laps: int,
        rng: np.random.Generator,
    ) -> bool:
        """Decide whether a driver pits on ``lap``.

        A random draw is only consumed while the driver is inside an open
        window.
        """
        window = self.window_for(pit_stops, total_laps)
        if window is None:
            return False

        (start, end), threshold = window
        if not start <= lap <= end:
            return False

        return bool(rng.random() > threshold)
