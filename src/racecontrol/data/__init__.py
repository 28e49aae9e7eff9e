"""Bundled league data."""

from .roster import create_demo_roster, get_circuit, list_circuits, load_roster

__all__ = ["create_demo_roster", "get_circuit", "list_circuits", "load_roster"]
