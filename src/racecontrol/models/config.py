"""Simulator configuration: team performance table and tunable constants."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .circuit import DEFAULT_RACE_LAPS

# Lap time multiplier per team (applied to the base lap time)
DEFAULT_TEAM_PERFORMANCE: dict[str, float] = {
    "Red Bull": 1.000,
    "Ferrari": 0.985,
    "McLaren": 0.980,
    "Mercedes": 0.975,
    "Aston Martin": 0.965,
    "Alpine": 0.955,
    "Williams": 0.945,
    "AlphaTauri": 0.940,
    "Alfa Romeo": 0.935,
    "Haas": 0.930,
}

DEFAULT_TEAM_FACTOR = 0.92


class TeamPerformanceTable(BaseModel):
    """Maps team names to a fixed lap time multiplier."""

    factors: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_TEAM_PERFORMANCE),
        description="Multiplier by team name",
    )
    default: float = Field(
        default=DEFAULT_TEAM_FACTOR,
        gt=0.0,
        description="Multiplier for teams missing from the table",
    )

    @field_validator("factors")
    @classmethod
    def _positive_factors(cls, value: dict[str, float]) -> dict[str, float]:
        for team, factor in value.items():
            if factor <= 0:
                raise ValueError(f"performance factor for {team!r} must be positive")
        return value

    def factor(self, team_name: str) -> float:
        """Multiplier for ``team_name``, or the default for unknown teams."""
        return self.factors.get(team_name, self.default)


def _ordered_pair(value: tuple, name: str) -> tuple:
    low, high = value
    if low > high:
        raise ValueError(f"{name} lower bound {low} exceeds upper bound {high}")
    return value


class SimulatorConfig(BaseModel):
    """Tunable constants of the race outcome simulator."""

    base_lap_time: float = Field(
        default=90.0,
        gt=0,
        description="Reference lap time in seconds",
    )
    skill_factor_range: tuple[float, float] = Field(
        default=(0.98, 1.02),
        description="Uniform range of the per-driver qualifying skill factor",
    )
    lap_jitter: float = Field(
        default=1.0,
        ge=0.0,
        description="Lap time noise is drawn from [-lap_jitter, +lap_jitter)",
    )
    tire_degradation: float = Field(
        default=0.5,
        ge=0.0,
        description="Seconds added on the final lap; scales linearly with race progress",
    )
    pit_loss_range: tuple[float, float] = Field(
        default=(22.0, 24.0),
        description="Uniform range of time lost in a pit stop (seconds)",
    )
    first_stop_window: tuple[int, int] = Field(
        default=(15, 30),
        description="Inclusive lap window for the first pit stop",
    )
    first_stop_threshold: float = Field(
        default=0.85,
        ge=0.0,
        le=1.0,
        description="A draw above this value triggers the first stop",
    )
    second_stop_window: tuple[int, int] = Field(
        default=(40, 55),
        description="Inclusive lap window for the second pit stop",
    )
    second_stop_threshold: float = Field(
        default=0.90,
        ge=0.0,
        le=1.0,
        description="A draw above this value triggers the second stop",
    )
    second_stop_min_race_laps: int = Field(
        default=50,
        ge=0,
        description="Second stops only happen in races longer than this",
    )
    max_pit_stops: int = Field(
        default=2,
        ge=0,
        le=2,
        description="Number of modeled pit stops",
    )
    default_laps: int = Field(
        default=DEFAULT_RACE_LAPS,
        gt=0,
        description="Race length used when the circuit has no lap count",
    )
    team_performance: TeamPerformanceTable = Field(
        default_factory=TeamPerformanceTable,
        description="Team performance lookup",
    )

    @field_validator("skill_factor_range", "pit_loss_range", "first_stop_window", "second_stop_window")
    @classmethod
    def _check_range(cls, value: tuple, info) -> tuple:
        return _ordered_pair(value, info.field_name)

    @classmethod
    def from_file(cls, path: str | Path) -> "SimulatorConfig":
        """Load a configuration from a JSON file.

        Missing keys keep their defaults.
        """
        return cls.model_validate_json(Path(path).read_text())
