from types import SimpleNamespace

import pytest

from esports_backend.core.standings import (
    StandingsCalculator,
    compute_detailed_standings,
    compute_standings,
    is_league_match,
)
from esports_backend.models.result_model import Result


def match(match_day, blue, red, score_blue, score_red):
    winner, loser = (blue, red) if score_blue > score_red else (red, blue)
    return Result(
        match_id=f"{match_day}_{blue}_vs_{red}",
        match_day=match_day,
        team_blue=blue,
        team_red=red,
        score_blue=score_blue,
        score_red=score_red,
        winner=winner,
        loser=loser,
    )


def bye(match_day, winner, loser, score_blue=0, score_red=0):
    return Result(
        match_id=f"{match_day}_{winner}_vs_{loser}",
        match_day=match_day,
        team_blue=winner,
        team_red=loser,
        score_blue=score_blue,
        score_red=score_red,
        winner=winner,
        loser=loser,
        is_bye_win=True,
    )


def as_dict(rows):
    return {row.team_name: row for row in rows}


# ---------------------------------------------
# Scenarios
# ---------------------------------------------
def test_single_league_match():
    rows = compute_standings({"A", "B"}, [match(1, "A", "B", 2, 0)])

    assert [row.team_name for row in rows] == ["A", "B"]
    a, b = rows
    assert (a.played, a.won, a.lost, a.goal_difference, a.points) == (1, 1, 0, 2, 3)
    assert (b.played, b.won, b.lost, b.goal_difference, b.points) == (1, 0, 1, -2, 0)


def test_knockout_match_is_excluded():
    rows = compute_standings({"A", "B"}, [match(90, "A", "B", 2, 1)])

    for row in rows:
        assert row.played == 0
        assert row.points == 0
        assert row.goal_difference == 0


def test_bye_win_counts_without_goal_difference():
    rows = as_dict(compute_standings({"A", "B"}, [bye(3, "A", "B")]))

    assert (rows["A"].played, rows["A"].won, rows["A"].goal_difference, rows["A"].points) == (1, 1, 0, 3)
    assert (rows["B"].played, rows["B"].lost, rows["B"].goal_difference, rows["B"].points) == (1, 1, 0, 0)


def test_bye_scores_are_ignored():
    rows = as_dict(compute_standings({"A", "B"}, [bye(3, "A", "B", score_blue=2, score_red=0)]))

    assert rows["A"].goal_difference == 0
    assert rows["B"].goal_difference == 0


def test_no_results_sorts_alphabetically():
    rows = compute_standings({"C", "A", "B"}, [])

    assert [row.team_name for row in rows] == ["A", "B", "C"]
    assert all(row.played == row.points == row.goal_difference == 0 for row in rows)


def test_goal_difference_accumulates_across_matches():
    results = [match(1, "A", "B", 2, 0), match(2, "B", "A", 1, 2)]
    rows = compute_standings({"A", "B"}, results)

    assert rows[0].team_name == "A"
    assert rows[0].goal_difference == 3
    assert rows[0].points == 6
    assert rows[1].goal_difference == -3


# ---------------------------------------------
# Properties
# ---------------------------------------------
def test_one_row_per_team_regardless_of_results():
    results = [
        match(1, "A", "Ghost", 2, 0),
        match(2, "Ghost", "Phantom", 2, 1),
        match(95, "A", "B", 2, 0),
    ]
    rows = compute_standings({"A", "B", "C"}, results)

    assert sorted(row.team_name for row in rows) == ["A", "B", "C"]


def test_unknown_team_only_skips_that_side():
    rows = as_dict(compute_standings({"A"}, [match(1, "A", "Ghost", 2, 1)]))

    assert rows["A"].played == 1
    assert rows["A"].points == 3
    assert rows["A"].goal_difference == 1


def test_repeated_calls_give_identical_output():
    teams = {"A", "B", "C", "D"}
    results = [
        match(1, "A", "B", 2, 1),
        match(1, "C", "D", 0, 2),
        match(2, "A", "C", 1, 2),
        bye(2, "D", "B"),
    ]

    first = [row.model_dump() for row in compute_standings(teams, results)]
    second = [row.model_dump() for row in compute_standings(set(teams), list(results))]
    assert first == second


def test_each_played_match_awards_three_points():
    teams = {"A", "B", "C"}
    results = [match(1, "A", "B", 2, 1), match(2, "B", "C", 0, 2), match(3, "C", "A", 1, 2)]

    rows = compute_standings(teams, results)

    assert sum(row.points for row in rows) == 3 * len(results)


def test_ordering_points_then_goal_difference_then_name():
    teams = {"A", "B", "C", "D"}
    results = [
        match(1, "B", "D", 2, 0),   # B +2
        match(1, "C", "D", 2, 1),   # C +1
        match(2, "A", "D", 2, 1),   # A +1
    ]

    rows = compute_standings(teams, results)

    assert [row.team_name for row in rows] == ["B", "A", "C", "D"]


def test_missing_fields_count_as_zero():
    sparse = SimpleNamespace(team_blue="A", team_red="B", score_blue=None, score_red=1)
    rows = as_dict(compute_standings({"A", "B"}, [sparse]))

    # No match_day means league phase; no is_bye_win means a normal match
    assert rows["B"].won == 1
    assert rows["A"].goal_difference == -1


def test_is_league_match_boundary():
    assert is_league_match(SimpleNamespace(match_day=89))
    assert not is_league_match(SimpleNamespace(match_day=90))
    assert is_league_match(SimpleNamespace(match_day="7"))
    assert is_league_match(SimpleNamespace())


def test_empty_inputs_give_empty_table():
    assert compute_standings(set(), []) == []
    assert compute_detailed_standings(set(), []) == []


# ---------------------------------------------
# Detailed standings
# ---------------------------------------------
def test_detailed_standings_games_and_form():
    results = [
        match(1, "A", "B", 2, 1),
        match(2, "B", "A", 2, 0),
        bye(3, "A", "B", score_blue=2, score_red=0),
        match(91, "A", "B", 2, 0),
    ]

    rows = as_dict(compute_detailed_standings({"A", "B"}, results))

    assert (rows["A"].games_for, rows["A"].games_against) == (2, 3)
    assert (rows["B"].games_for, rows["B"].games_against) == (3, 2)
    assert rows["A"].form == ["W", "L", "W"]
    assert rows["B"].form == ["L", "W", "L"]


def test_form_keeps_last_five_newest_first():
    results = [match(day, "A", "B", 2, 0 if day % 2 else 1) for day in range(1, 8)]
    results.append(match(6, "B", "A", 2, 0))

    rows = as_dict(compute_detailed_standings({"A", "B"}, results))

    assert rows["A"].form == ["W", "W", "L", "W", "W"]
    assert len(rows["B"].form) == 5


def test_detailed_tie_break_uses_games_for():
    teams = {"A", "B", "C"}
    results = [
        match(1, "A", "C", 2, 0),   # A +2, 2 games for
        match(1, "B", "C", 3, 1),   # B +2, 3 games for
    ]

    rows = compute_detailed_standings(teams, results)

    assert [row.team_name for row in rows] == ["B", "A", "C"]
    # The basic table stops at goal difference and falls back to the name
    assert [row.team_name for row in compute_standings(teams, results)] == ["A", "B", "C"]


@pytest.mark.parametrize("match_day", [90, 95, 99, 120])
def test_knockout_days_never_reach_detailed_table(match_day):
    rows = compute_detailed_standings({"A", "B"}, [match(match_day, "A", "B", 2, 0)])
    assert all(row.played == 0 and row.form == [] for row in rows)


def test_calculator_instance_keeps_no_state_between_calls():
    calculator = StandingsCalculator()
    calculator.compute_standings({"A", "B"}, [match(1, "A", "B", 2, 0)])

    rows = calculator.compute_standings({"A", "B"}, [])
    assert all(row.played == 0 for row in rows)
