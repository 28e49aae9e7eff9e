"""Circuit model."""

from pydantic import BaseModel, Field, field_validator

DEFAULT_RACE_LAPS = 50


class Circuit(BaseModel):
    """Represents a race circuit.

    Only the lap count matters to the simulator. A missing, zero or negative
    lap count is stored as ``None`` and replaced by the default at race time.
    """

    name: str = Field(default="", description="Circuit name")
    laps: int | None = Field(default=None, description="Number of laps in race")

    @field_validator("laps", mode="before")
    @classmethod
    def _normalize_laps(cls, value):
        if value is None or value == "":
            return None
        laps = int(value)
        return laps if laps > 0 else None

    def race_laps(self, default: int = DEFAULT_RACE_LAPS) -> int:
        """Lap count to simulate, falling back to ``default``."""
        return self.laps if self.laps is not None else default
