import numpy as np
import pytest

from racecontrol.data import create_demo_roster
from racecontrol.models import Competitor, SimulatorConfig, Team, TeamPerformanceTable


class FixedRandom:
    """Deterministic stand-in for numpy's Generator.

    ``uniform`` returns the point ``fraction`` of the way through the range,
    ``random`` always returns ``draw`` and ``integers`` returns ``low``.
    """

    def __init__(self, fraction=0.5, draw=0.0):
        self.fraction = fraction
        self.draw = draw
        self.random_calls = 0

    def uniform(self, low, high):
        return low + (high - low) * self.fraction

    def random(self):
        self.random_calls += 1
        return self.draw

    def integers(self, low, high=None):
        return low


@pytest.fixture()
def fixed_rng():
    return FixedRandom()


@pytest.fixture()
def pitting_rng():
    # Every draw clears the pit stop thresholds
    return FixedRandom(draw=0.99)


@pytest.fixture()
def two_team_config():
    return SimulatorConfig(
        team_performance=TeamPerformanceTable(factors={"Team A": 1.0, "Team B": 0.90}),
    )


@pytest.fixture()
def two_team_roster():
    return [
        Competitor(id=1, name="Alice Able", number=7, team=Team(id=10, name="Team A")),
        Competitor(id=2, name="Bruno Baker", number=22, team=Team(id=20, name="Team B")),
    ]


@pytest.fixture()
def demo_roster():
    return create_demo_roster()


@pytest.fixture()
def seeded_rng():
    return np.random.default_rng(2024)
