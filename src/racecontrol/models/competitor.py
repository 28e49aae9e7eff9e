"""Competitor and team models."""

from pydantic import BaseModel, Field


class Team(BaseModel):
    """A league team, referenced by its competitors."""

    id: int = Field(..., description="Team identifier")
    name: str = Field(..., description="Team name (keys the performance table)")


class Competitor(BaseModel):
    """Represents a driver entered in a race."""

    id: int = Field(..., description="Unique driver identifier")
    name: str = Field(..., description="Full name")
    number: int = Field(..., ge=0, description="Car number")
    team: Team = Field(..., description="Team the driver races for")

    @property
    def team_name(self) -> str:
        """Name of the competitor's team."""
        return self.team.name
