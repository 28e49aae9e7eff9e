"""Starting grid generation from synthetic qualifying laps."""

import logging
from dataclasses import dataclass

import numpy as np

from racecontrol.models import Competitor, SimulatorConfig
from racecontrol.simulation.lap import LapTimeModel
from racecontrol.simulation.rng import resolve_rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridSlot:
    """A competitor paired with their qualifying time."""

    competitor: Competitor
    qualifying_time: float
    team_performance: float


class GridGenerator:
    """Builds the starting grid from one qualifying lap per competitor."""

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        rng: np.random.Generator | None = None,
        lap_model: LapTimeModel | None = None,
    ):
        """Initialize grid generator.

        Args:
            config: Simulator constants
            rng: Random number generator
            lap_model: Lap time model to share with the race (built if None)
        """
        self.config = config if config is not None else SimulatorConfig()
        self.rng = resolve_rng(rng)
        self.lap_model = lap_model if lap_model is not None else LapTimeModel(self.config, rng=self.rng)

    def generate_grid(self, competitors: list[Competitor]) -> list[GridSlot]:
        """Simulate qualifying and return slots sorted pole first.

        Args:
            competitors: Race roster

        Returns:
            GridSlots in ascending qualifying time
        """
        slots = []
        for competitor in competitors:
            team_performance = self.config.team_performance.factor(competitor.team.name)
            slots.append(GridSlot(
                competitor=competitor,
                qualifying_time=self.lap_model.calculate_qualifying_lap(team_performance),
                team_performance=team_performance,
            ))

        slots.sort(key=lambda s: s.qualifying_time)

        if slots:
            logger.debug(
                "Pole position: %s (%.3fs)",
                slots[0].competitor.name,
                slots[0].qualifying_time,
            )

        return slots

    @staticmethod
    def get_starting_grid(slots: list[GridSlot]) -> list[int]:
        """Competitor ids in grid order."""
        return [slot.competitor.id for slot in slots]
