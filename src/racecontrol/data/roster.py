"""Demo league roster, circuits and roster loading."""

import json
from pathlib import Path

from pydantic import TypeAdapter

from racecontrol.models import Circuit, Competitor, Team

# (team_id, team_name)
TEAMS_DATA = [
    (1, "Red Bull"),
    (2, "Ferrari"),
    (3, "McLaren"),
    (4, "Mercedes"),
    (5, "Aston Martin"),
    (6, "Alpine"),
    (7, "Williams"),
    (8, "AlphaTauri"),
    (9, "Alfa Romeo"),
    (10, "Haas"),
]

# (driver_id, name, car number, team_id)
DRIVERS_DATA = [
    (1, "Max Verstappen", 1, 1),
    (2, "Sergio Pérez", 11, 1),
    (3, "Lando Norris", 4, 3),
    (4, "Oscar Piastri", 81, 3),
    (5, "Charles Leclerc", 16, 2),
    (6, "Carlos Sainz Jr.", 55, 2),
    (7, "Lewis Hamilton", 44, 4),
    (8, "George Russell", 63, 4),
    (9, "Fernando Alonso", 14, 5),
    (10, "Lance Stroll", 18, 5),
    (11, "Pierre Gasly", 10, 6),
    (12, "Esteban Ocon", 31, 6),
    (13, "Alexander Albon", 23, 7),
    (14, "Logan Sargeant", 2, 7),
    (15, "Yuki Tsunoda", 22, 8),
    (16, "Daniel Ricciardo", 3, 8),
    (17, "Valtteri Bottas", 77, 9),
    (18, "Zhou Guanyu", 24, 9),
    (19, "Nico Hülkenberg", 27, 10),
    (20, "Kevin Magnussen", 20, 10),
]

# (name, laps)
CIRCUITS_DATA = [
    ("Monaco Grand Prix", 78),
    ("Silverstone Circuit", 52),
    ("Spa-Francorchamps", 44),
    ("Monza Circuit", 53),
    ("Suzuka Circuit", 53),
    ("Interlagos Circuit", 71),
    ("Circuit of the Americas", 56),
    ("Red Bull Ring", 71),
    ("Hungaroring", 70),
    ("Bahrain International Circuit", 57),
]

_ROSTER_ADAPTER = TypeAdapter(list[Competitor])


def create_demo_roster() -> list[Competitor]:
    """Two drivers for each team of the demo league."""
    teams = {team_id: Team(id=team_id, name=name) for team_id, name in TEAMS_DATA}
    return [
        Competitor(id=driver_id, name=name, number=number, team=teams[team_id])
        for driver_id, name, number, team_id in DRIVERS_DATA
    ]


def list_circuits() -> list[Circuit]:
    return [Circuit(name=name, laps=laps) for name, laps in CIRCUITS_DATA]


def get_circuit(name: str) -> Circuit:
    """Find a demo circuit by case-insensitive (partial) name.

    Raises:
        KeyError: If no circuit matches
    """
    wanted = name.strip().casefold()
    circuits = list_circuits()

    for circuit in circuits:
        if circuit.name.casefold() == wanted:
            return circuit
    for circuit in circuits:
        if wanted and wanted in circuit.name.casefold():
            return circuit

    raise KeyError(f"Unknown circuit: {name}")


def load_roster(path: str | Path) -> list[Competitor]:
    """Load a JSON list of competitors.

    Each entry has the shape ``{id, name, number, team: {id, name}}``.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return _ROSTER_ADAPTER.validate_python(data)
