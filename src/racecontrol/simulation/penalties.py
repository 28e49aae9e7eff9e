"""Steward penalties applied on top of a simulated result."""

import logging
import re
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import replace
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from racecontrol.simulation.race import NO_PENALTY, RaceSimulationResult
from racecontrol.simulation.timing import format_gap

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+(?:\.\d+)?")


class PenaltyType(str, Enum):
    """Penalty kinds issued by the stewards."""

    TIME = "TimePenalty"
    GRID = "GridPenalty"
    WARNING = "Warning"


class Penalty(BaseModel):
    """A penalty handed to a competitor for an incident."""

    competitor_id: int = Field(..., description="Penalized competitor")
    type: PenaltyType = Field(..., description="Penalty kind")
    value: str = Field(default="", description="Free text, e.g. '5s' or '3 grid places'")
    lap: int | None = Field(default=None, ge=1, description="Lap of the incident")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value):
        # Accept the dashboard spelling ("Time Penalty")
        if isinstance(value, str):
            return value.replace(" ", "")
        return value

    def seconds(self) -> float:
        """Seconds added to race time (0 for non-time penalties)."""
        if self.type != PenaltyType.TIME:
            return 0.0
        match = _NUMBER.search(self.value)
        if match is None:
            logger.warning(
                "Ignoring time penalty for competitor %d with no duration: %r",
                self.competitor_id,
                self.value,
            )
            return 0.0
        return float(match.group())


def penalty_seconds_by_competitor(penalties: Iterable[Penalty]) -> dict[int, float]:
    """Total time penalty per competitor id."""
    totals: dict[int, float] = defaultdict(float)
    for penalty in penalties:
        totals[penalty.competitor_id] += penalty.seconds()
    return dict(totals)


def format_penalty(seconds: float) -> str:
    """Format a time penalty, e.g. ``+5s`` or ``0s``."""
    if seconds <= 0:
        return NO_PENALTY
    return f"+{seconds:g}s"


def apply_penalties(
    result: RaceSimulationResult,
    penalties: Iterable[Penalty],
) -> RaceSimulationResult:
    """Re-rank a race after adding time penalties.

    Standings are re-sorted by total time plus penalty seconds, positions
    renumbered and gaps recomputed against the new leader. The input result
    is left untouched.

    Args:
        result: Simulated race
        penalties: Penalties for any competitors in the race

    Returns:
        New RaceSimulationResult with adjusted standings
    """
    totals = penalty_seconds_by_competitor(penalties)

    unknown = set(totals) - {row.competitor_id for row in result.standings}
    if unknown:
        logger.warning("Penalties for competitors not in the race: %s", sorted(unknown))

    def adjusted(row) -> float:
        return row.total_seconds + totals.get(row.competitor_id, 0.0)

    ranked = sorted(result.standings, key=adjusted)
    leader_time = adjusted(ranked[0])

    standings = []
    for pos, row in enumerate(ranked, 1):
        penalty = totals.get(row.competitor_id, 0.0)
        standings.append(replace(
            row,
            position=pos,
            gap=format_gap(adjusted(row) - leader_time, is_leader=pos == 1),
            penalty=format_penalty(penalty),
            penalty_seconds=penalty,
        ))

    return replace(result, standings=standings)
