"""Exceptions raised by the simulator."""


class InvalidRosterError(ValueError):
    """Raised when a race is simulated without any competitors."""
