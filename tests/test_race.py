import numpy as np
import pytest

from racecontrol import InvalidRosterError, simulate_race
from racecontrol.models import Circuit, Competitor, Team
from racecontrol.simulation import RaceSimulator
from racecontrol.simulation.timing import parse_gap, parse_lap_time

from conftest import FixedRandom


def test_two_team_race_exact_times(two_team_roster, two_team_config, fixed_rng):
    result = simulate_race(two_team_roster, {"laps": 10}, rng=fixed_rng, config=two_team_config)

    assert result.total_laps == 10
    leader, second = result.standings

    assert leader.competitor_id == 2
    assert leader.position == 1
    assert leader.start_position == 1
    assert leader.total_time == "13:32.750"
    assert leader.gap == "0s"
    assert leader.fastest_lap == "1:21.050"
    assert leader.fastest_lap_number == 1

    assert second.competitor_id == 1
    assert second.position == 2
    assert second.start_position == 2
    assert second.total_time == "15:02.750"
    assert second.gap == "+90.000s"
    assert second.fastest_lap == "1:30.050"

    for row in result.standings:
        assert row.laps_completed == 10
        assert row.pit_stops == 0
        assert row.penalty == "0s"

    assert result.fastest_lap.to_dict() == {"competitorName": "Bruno Baker", "time": "1:21.050", "lap": 1}


def test_wire_shape(two_team_roster, two_team_config, fixed_rng):
    result = simulate_race(two_team_roster, Circuit(laps=10), rng=fixed_rng, config=two_team_config)

    data = result.to_dict()

    assert data["totalLaps"] == 10
    assert data["standings"][0] == {
        "position": 1,
        "competitorId": 2,
        "competitorName": "Bruno Baker",
        "competitorNumber": 22,
        "teamId": 20,
        "teamName": "Team B",
        "startPosition": 1,
        "totalTime": "13:32.750",
        "gap": "0s",
        "fastestLap": "1:21.050",
        "fastestLapNumber": 1,
        "pitStops": 0,
        "penalty": "0s",
        "lapsCompleted": 10,
    }


def test_accepts_plain_mappings(two_team_config, fixed_rng):
    roster = [
        {"id": 1, "name": "Alice Able", "number": 7, "team": {"id": 10, "name": "Team A"}},
        {"id": 2, "name": "Bruno Baker", "number": 22, "team": {"id": 20, "name": "Team B"}},
    ]

    result = simulate_race(roster, {"laps": 3}, rng=fixed_rng, config=two_team_config)

    assert [row.competitor_id for row in result.standings] == [2, 1]


def test_summary_line(two_team_roster, two_team_config, fixed_rng):
    result = simulate_race(two_team_roster, {"laps": 10}, rng=fixed_rng, config=two_team_config)

    assert result.standings[0].summary() == (
        "Final position: P1. Total time: 13:32.750. Fastest lap: 1:21.050 (Lap 1)"
    )


@pytest.mark.parametrize("competitors", [[], None, iter([])])
def test_empty_roster_raises(competitors):
    with pytest.raises(InvalidRosterError):
        simulate_race(competitors, {"laps": 10}, rng=1)


def test_empty_roster_consumes_no_randomness():
    rng = FixedRandom()
    with pytest.raises(InvalidRosterError):
        RaceSimulator(rng=rng).simulate_race([], {"laps": 10})
    assert rng.random_calls == 0


@pytest.mark.parametrize("circuit", [None, {}, {"laps": 0}, {"laps": -3}, {"laps": None}, Circuit()])
def test_default_lap_count(two_team_roster, circuit):
    result = simulate_race(two_team_roster, circuit, rng=7)

    assert result.total_laps == 50
    assert all(row.laps_completed == 50 for row in result.standings)


def test_single_competitor_race():
    solo = [Competitor(id=9, name="Solo Driver", number=99, team=Team(id=1, name="Ferrari"))]

    result = simulate_race(solo, {"laps": 5}, rng=3)

    assert len(result.standings) == 1
    row = result.standings[0]
    assert row.position == 1
    assert row.gap == "0s"
    assert row.laps_completed == 5
    assert result.fastest_lap.competitor_name == "Solo Driver"


def test_pit_stops_with_always_firing_draws(two_team_roster, two_team_config, pitting_rng):
    simulator = RaceSimulator(rng=pitting_rng, config=two_team_config)

    long_race = simulator.simulate_race(two_team_roster, {"laps": 60})
    short_race = simulator.simulate_race(two_team_roster, {"laps": 50})
    sprint = simulator.simulate_race(two_team_roster, {"laps": 14})

    assert [row.pit_stops for row in long_race.standings] == [2, 2]
    assert [row.pit_stops for row in short_race.standings] == [1, 1]
    assert [row.pit_stops for row in sprint.standings] == [0, 0]


def test_pit_stop_adds_loss_to_total(two_team_roster, two_team_config):
    no_stop = simulate_race(two_team_roster, {"laps": 20}, rng=FixedRandom(draw=0.0), config=two_team_config)
    one_stop = simulate_race(two_team_roster, {"laps": 20}, rng=FixedRandom(draw=0.99), config=two_team_config)

    for before, after in zip(no_stop.standings, one_stop.standings):
        assert after.total_seconds - before.total_seconds == pytest.approx(23.0)
        assert after.fastest_lap == before.fastest_lap


def test_fastest_lap_tie_goes_to_lowest_id(fixed_rng):
    team = Team(id=4, name="Mercedes")
    roster = [
        Competitor(id=7, name="Lewis Hamilton", number=44, team=team),
        Competitor(id=3, name="George Russell", number=63, team=team),
    ]

    result = simulate_race(roster, {"laps": 5}, rng=fixed_rng)

    assert [row.competitor_id for row in result.standings] == [7, 3]
    assert result.standings[0].gap == "0s"
    assert result.standings[1].gap == "+0.000s"
    assert result.fastest_lap.competitor_id == 3


def test_same_seed_reproduces_race(demo_roster):
    first = simulate_race(demo_roster, {"laps": 53}, rng=np.random.default_rng(42))
    second = simulate_race(demo_roster, {"laps": 53}, rng=np.random.default_rng(42))

    assert first.to_dict() == second.to_dict()


def test_integer_seed_matches_generator(demo_roster):
    from_seed = simulate_race(demo_roster, {"laps": 20}, rng=11)
    from_generator = simulate_race(demo_roster, {"laps": 20}, rng=np.random.default_rng(11))

    assert from_seed.to_dict() == from_generator.to_dict()


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("laps", [10, 50, 70])
def test_result_properties(demo_roster, seed, laps):
    result = simulate_race(demo_roster, {"laps": laps}, rng=seed)
    rows = result.standings

    # every competitor exactly once
    ids = [row.competitor_id for row in rows]
    assert sorted(ids) == sorted(c.id for c in demo_roster)

    # contiguous positions in order
    assert [row.position for row in rows] == list(range(1, len(demo_roster) + 1))
    assert sorted(row.start_position for row in rows) == list(range(1, len(demo_roster) + 1))

    # leader gap and non-decreasing gaps
    assert rows[0].gap == "0s"
    gaps = [parse_gap(row.gap) for row in rows]
    assert gaps == sorted(gaps)
    totals = [row.total_seconds for row in rows]
    assert totals == sorted(totals)

    assert result.total_laps == laps
    for row in rows:
        assert row.laps_completed == laps
        assert row.pit_stops in (0, 1, 2)
        assert 1 <= row.fastest_lap_number <= laps
        if laps <= 50:
            assert row.pit_stops < 2

    best = min(parse_lap_time(row.fastest_lap) for row in rows)
    assert parse_lap_time(result.fastest_lap.time) == best


def test_identity_preserved(demo_roster):
    result = simulate_race(demo_roster, {"laps": 12}, rng=5)
    by_id = {c.id: c for c in demo_roster}

    for row in result.standings:
        competitor = by_id[row.competitor_id]
        assert row.competitor_name == competitor.name
        assert row.competitor_number == competitor.number
        assert row.team_id == competitor.team.id
        assert row.team_name == competitor.team.name
