# esports_backend/core/standings.py
"""
standings.py
------------
League table calculation from recorded match results.

Rules:
- Only league matches count: match_day >= KNOCKOUT_MATCH_DAY is bracket play.
- A win is worth POINTS_PER_WIN, a loss nothing. Best-of-N series cannot end
  level, so there is no draw rule.
- Bye wins count as played/won for the winner and played/lost for the loser,
  but their scores never touch goal difference.
- Ranking: points, then goal difference, then team name (A-Z).

Results naming a team outside the given team set are ignored for that side.
Nothing in here raises on malformed rows; missing numbers count as 0.
"""

import logging
from typing import Any, Dict, Iterable, List, Tuple

from esports_backend.core.league_config import FORM_LENGTH, KNOCKOUT_MATCH_DAY, POINTS_PER_WIN
from esports_backend.models.standing_model import DetailedStandingRow, StandingRow

logger = logging.getLogger(__name__)


def _int_field(result: Any, name: str) -> int:
    value = getattr(result, name, None)
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def is_league_match(result: Any) -> bool:
    """True when the result belongs to the league phase (not the knockout bracket)."""
    return _int_field(result, "match_day") < KNOCKOUT_MATCH_DAY


class StandingsCalculator:
    """
    Stateless calculator; every call builds its own accumulator, so one
    instance can be shared between requests.
    """

    def compute_standings(self, teams: Iterable[str], results: Iterable[Any]) -> List[StandingRow]:
        table = self._tally(teams, results)
        rows = [
            StandingRow(
                team_name=name,
                played=stats["played"],
                won=stats["won"],
                lost=stats["lost"],
                goal_difference=stats["goal_difference"],
                points=stats["points"],
            )
            for name, stats in table.items()
        ]
        rows.sort(key=lambda row: (-row.points, -row.goal_difference, row.team_name))
        logger.debug(f"Calculated standings for {len(rows)} teams")
        return rows

    def compute_detailed_standings(self, teams: Iterable[str], results: Iterable[Any]) -> List[DetailedStandingRow]:
        """
        Same accounting as compute_standings, plus games for/against (bye
        scores excluded) and the last FORM_LENGTH outcomes, newest first.
        Games for is an extra tie-break after goal difference.
        """
        table = self._tally(teams, results)
        rows = [
            DetailedStandingRow(
                team_name=name,
                played=stats["played"],
                won=stats["won"],
                lost=stats["lost"],
                goal_difference=stats["goal_difference"],
                points=stats["points"],
                games_for=stats["games_for"],
                games_against=stats["games_against"],
                form=self._form(stats["outcomes"]),
            )
            for name, stats in table.items()
        ]
        rows.sort(key=lambda row: (-row.points, -row.goal_difference, -row.games_for, row.team_name))
        logger.debug(f"Calculated detailed standings for {len(rows)} teams")
        return rows

    # ---------------------------------------------
    # Accumulation
    # ---------------------------------------------
    def _tally(self, teams: Iterable[str], results: Iterable[Any]) -> Dict[str, Dict[str, Any]]:
        # sorted() keeps the accumulator order independent of set iteration order
        table = {
            name: {
                "played": 0,
                "won": 0,
                "lost": 0,
                "goal_difference": 0,
                "points": 0,
                "games_for": 0,
                "games_against": 0,
                "outcomes": [],
            }
            for name in sorted(set(teams))
        }

        for index, result in enumerate(results):
            if not is_league_match(result):
                continue

            match_day = _int_field(result, "match_day")

            if getattr(result, "is_bye_win", False):
                self._record(table, getattr(result, "winner", None), won=True, match_day=match_day, index=index)
                self._record(table, getattr(result, "loser", None), won=False, match_day=match_day, index=index)
                continue

            score_blue = _int_field(result, "score_blue")
            score_red = _int_field(result, "score_red")
            self._record(
                table, getattr(result, "team_blue", None),
                won=score_blue > score_red, match_day=match_day, index=index,
                scored=score_blue, conceded=score_red,
            )
            self._record(
                table, getattr(result, "team_red", None),
                won=score_red > score_blue, match_day=match_day, index=index,
                scored=score_red, conceded=score_blue,
            )

        return table

    @staticmethod
    def _record(table, team, won: bool, match_day: int, index: int, scored: int = 0, conceded: int = 0):
        """Adds one match to a team's line. Unknown teams are skipped."""
        stats = table.get(team)
        if stats is None:
            return

        stats["played"] += 1
        if won:
            stats["won"] += 1
            stats["points"] += POINTS_PER_WIN
        else:
            stats["lost"] += 1

        # Bye wins pass 0/0, so goal difference stays untouched
        stats["goal_difference"] += scored - conceded
        stats["games_for"] += scored
        stats["games_against"] += conceded
        stats["outcomes"].append((match_day, index, "W" if won else "L"))

    @staticmethod
    def _form(outcomes: List[Tuple[int, int, str]]) -> List[str]:
        # Newest match day first; results of the same day keep input order
        recent = sorted(outcomes, key=lambda item: (-item[0], item[1]))
        return [outcome for _, _, outcome in recent[:FORM_LENGTH]]


calculator = StandingsCalculator()


def compute_standings(teams: Iterable[str], results: Iterable[Any]) -> List[StandingRow]:
    """Ranked league table: one row per team in `teams`."""
    return calculator.compute_standings(teams, results)


def compute_detailed_standings(teams: Iterable[str], results: Iterable[Any]) -> List[DetailedStandingRow]:
    """Ranked league table with games for/against and recent form."""
    return calculator.compute_detailed_standings(teams, results)
