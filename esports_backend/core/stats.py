# esports_backend/core/stats.py
"""
stats.py
--------
Player, team, hero and season statistics from per-game stat lines.

Stat lines are recorded under the IGN used in that game. Players change IGNs,
so every line is mapped back to a real name through the player pool: a line
belongs to the first player whose name, current IGN or one of whose previous
IGNs equals the line's player_name. Unknown IGNs keep their own name.

Team numbers divide by PLAYERS_PER_TEAM: each game produces one stat line per
player, so five lines of a team are one game for that team.
"""

import logging
import math
from typing import Any, Dict, Iterable, List, Optional, Tuple

from esports_backend.core.league_config import (
    MIN_HERO_PICKS_FOR_WIN_RATE,
    MIN_TEAM_GAMES_FOR_BEST_TEAM,
    PLAYERS_PER_TEAM,
    TOP_HEROES_PER_PLAYER,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------
# Helpers
# ---------------------------------------------
def build_ign_index(players: Iterable[Any]) -> Dict[str, str]:
    """Maps every known name/IGN to the player's real name. First player wins."""
    index = {}
    for player in players:
        aliases = [player.name, player.in_game_name, *(player.previous_igns or [])]
        for alias in aliases:
            if alias:
                index.setdefault(alias, player.name)
    return index


def _percent(part: float, whole: float) -> float:
    return 0 if whole == 0 else round(part / whole * 100, 1)


def _per_game(total: float, games: float) -> float:
    return 0 if games == 0 else round(total / games, 1)


def _kda(kills: int, assists: int, deaths: int) -> float:
    if deaths == 0:
        return kills + assists
    return round((kills + assists) / deaths, 2)


# ---------------------------------------------
# Player stats
# ---------------------------------------------
def compute_player_stats(stats: Iterable[Any], players: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    One entry per (real name, team). Sorted by KDA, total kills, MVP count
    (all descending), then real name.
    """
    index = build_ign_index(players)
    grouped: Dict[Tuple[str, str], Dict[str, Any]] = {}

    for stat in stats:
        real_name = index.get(stat.player_name, stat.player_name)
        entry = grouped.setdefault((real_name, stat.team_name), {
            "real_name": real_name,
            "team_name": stat.team_name,
            "total_kills": 0,
            "total_deaths": 0,
            "total_assists": 0,
            "games_played": 0,
            "mvp_count": 0,
            "wins": 0,
        })
        entry["player_name"] = stat.player_name  # Latest IGN seen
        entry["total_kills"] += stat.kills
        entry["total_deaths"] += stat.deaths
        entry["total_assists"] += stat.assists
        entry["games_played"] += 1
        entry["mvp_count"] += 1 if stat.mvp else 0
        entry["wins"] += 1 if stat.win else 0

    rows = []
    for entry in grouped.values():
        games = entry["games_played"]
        rows.append({
            **entry,
            "win_rate": _percent(entry["wins"], games),
            "avg_kills_per_game": _per_game(entry["total_kills"], games),
            "avg_deaths_per_game": _per_game(entry["total_deaths"], games),
            "avg_assists_per_game": _per_game(entry["total_assists"], games),
            "mvp_rate": _percent(entry["mvp_count"], games),
            "kda": _kda(entry["total_kills"], entry["total_assists"], entry["total_deaths"]),
        })

    rows.sort(key=lambda row: (-row["kda"], -row["total_kills"], -row["mvp_count"], row["real_name"]))
    return rows


# ---------------------------------------------
# Team stats
# ---------------------------------------------
def _team_totals(stats: Iterable[Any]) -> Dict[str, Dict[str, Any]]:
    teams: Dict[str, Dict[str, Any]] = {}
    for stat in stats:
        entry = teams.setdefault(stat.team_name, {
            "team_name": stat.team_name,
            "total_kills": 0,
            "total_deaths": 0,
            "total_assists": 0,
            "mvp_count": 0,
            "lines": 0,
            "winning_lines": 0,
            "total_duration": 0.0,
        })
        entry["total_kills"] += stat.kills
        entry["total_deaths"] += stat.deaths
        entry["total_assists"] += stat.assists
        entry["mvp_count"] += 1 if stat.mvp else 0
        entry["lines"] += 1
        entry["winning_lines"] += 1 if stat.win else 0
        entry["total_duration"] += stat.game_duration or 0
    return teams


def compute_team_stats(stats: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    One entry per team. Sorted by win rate, wins, KDA, total kills (all
    descending), then team name.
    """
    rows = []
    for entry in _team_totals(stats).values():
        games = entry["lines"] / PLAYERS_PER_TEAM
        games_played = math.ceil(games)
        wins = math.ceil(entry["winning_lines"] / PLAYERS_PER_TEAM)
        rows.append({
            "team_name": entry["team_name"],
            "total_kills": entry["total_kills"],
            "total_deaths": entry["total_deaths"],
            "total_assists": entry["total_assists"],
            "mvp_count": entry["mvp_count"],
            "games_played": games_played,
            "wins": wins,
            "losses": games_played - wins,
            "win_rate": _percent(wins, games_played),
            "avg_kills_per_game": _per_game(entry["total_kills"], games),
            "avg_deaths_per_game": _per_game(entry["total_deaths"], games),
            "avg_assists_per_game": _per_game(entry["total_assists"], games),
            "avg_duration": _per_game(entry["total_duration"], games),
            "kda": _kda(entry["total_kills"], entry["total_assists"], entry["total_deaths"]),
        })

    rows.sort(key=lambda row: (-row["win_rate"], -row["wins"], -row["kda"], -row["total_kills"], row["team_name"]))
    return rows


# ---------------------------------------------
# Hero stats
# ---------------------------------------------
def _hero_picks(stats: Iterable[Any]) -> List[Dict[str, Any]]:
    heroes: Dict[str, Dict[str, Any]] = {}
    for stat in stats:
        entry = heroes.setdefault(stat.hero_name, {"name": stat.hero_name, "picks": 0, "wins": 0})
        entry["picks"] += 1
        entry["wins"] += 1 if stat.win else 0
    for entry in heroes.values():
        entry["win_rate"] = _percent(entry["wins"], entry["picks"])
    return list(heroes.values())


def compute_player_hero_stats(stats: Iterable[Any], players: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    Each player's most played heroes (TOP_HEROES_PER_PLAYER of them, most
    games first), sorted by real name.
    """
    index = build_ign_index(players)
    per_player: Dict[str, Dict[str, Any]] = {}

    for stat in stats:
        real_name = index.get(stat.player_name, stat.player_name)
        player = per_player.setdefault(real_name, {"real_name": real_name, "heroes": {}})
        player["player_name"] = stat.player_name
        hero = player["heroes"].setdefault(stat.hero_name, {
            "hero_name": stat.hero_name,
            "games_played": 0,
            "wins": 0,
            "total_kills": 0,
            "total_deaths": 0,
            "total_assists": 0,
        })
        hero["games_played"] += 1
        hero["wins"] += 1 if stat.win else 0
        hero["total_kills"] += stat.kills
        hero["total_deaths"] += stat.deaths
        hero["total_assists"] += stat.assists

    rows = []
    for real_name in sorted(per_player):
        player = per_player[real_name]
        heroes = sorted(player["heroes"].values(), key=lambda h: (-h["games_played"], h["hero_name"]))
        rows.append({
            "real_name": real_name,
            "player_name": player["player_name"],
            "top_heroes": heroes[:TOP_HEROES_PER_PLAYER],
        })
    return rows


# ---------------------------------------------
# Season overview
# ---------------------------------------------
def _match_label(match_id: str) -> str:
    # "3_PhuketPhantoms_vs_KhonKaenKings" -> "3 PhuketPhantoms vs. KhonKaenKings"
    return match_id.replace("_", " ").replace("vs", "vs.", 1)


def _top_by_real_name(stats: List[Any], index: Dict[str, str], value) -> Optional[Dict[str, Any]]:
    totals: Dict[str, Dict[str, Any]] = {}
    for stat in stats:
        real_name = index.get(stat.player_name, stat.player_name)
        entry = totals.setdefault(real_name, {"name": real_name, "value": 0})
        entry["value"] += value(stat)
        entry["team"] = stat.team_name
    candidates = [entry for entry in totals.values() if entry["value"] > 0]
    if not candidates:
        return None
    return min(candidates, key=lambda entry: (-entry["value"], entry["name"]))


def compute_season_stats(results: Iterable[Any], stats: Iterable[Any], players: Iterable[Any]) -> Dict[str, Any]:
    """Headline numbers for the season overview page."""
    results = [r for r in results if not getattr(r, "is_bye_win", False)]
    stats = list(stats)
    index = build_ign_index(players)

    total_games = 0
    longest_game = {"match": "-", "duration": 0}
    for result in results:
        details = result.game_details or []
        total_games += len(details) or ((result.score_blue or 0) + (result.score_red or 0))
        for number, game in enumerate(details, start=1):
            duration = game.get("duration") if isinstance(game, dict) else None
            if duration and duration > longest_game["duration"]:
                longest_game = {
                    "match": f"{result.team_blue} vs {result.team_red}",
                    "duration": duration,
                    "game_number": number,
                }

    # Per game (match + game number): average duration and total kills
    games: Dict[Tuple[str, int], Dict[str, Any]] = {}
    for stat in stats:
        game = games.setdefault((stat.match_id, stat.game_number), {"kills": 0, "durations": []})
        game["kills"] += stat.kills
        if stat.game_duration and stat.game_duration > 0:
            game["durations"].append(stat.game_duration)

    game_durations = [sum(g["durations"]) / len(g["durations"]) for g in games.values() if g["durations"]]
    avg_game_duration = sum(game_durations) / len(game_durations) if game_durations else 0

    highest_kill_game = {"match": "-", "kills": 0}
    if games:
        (match_id, game_number), game = min(games.items(), key=lambda item: (-item[1]["kills"], item[0]))
        highest_kill_game = {"match": _match_label(match_id), "kills": game["kills"], "game_number": game_number}

    top_mvp = _top_by_real_name(stats, index, lambda stat: 1 if stat.mvp else 0)
    top_killer = _top_by_real_name(stats, index, lambda stat: stat.kills)

    best_team = None
    eligible_teams = [
        row for row in compute_team_stats(stats) if row["games_played"] >= MIN_TEAM_GAMES_FOR_BEST_TEAM
    ]
    if eligible_teams:
        team = eligible_teams[0]
        best_team = {"name": team["team_name"], "win_rate": team["win_rate"], "wins": team["wins"], "games": team["games_played"]}

    heroes = _hero_picks(stats)
    most_picked_hero = None
    if heroes:
        most_picked_hero = min(heroes, key=lambda h: (-h["picks"], h["name"]))

    best_win_rate_hero = None
    eligible_heroes = [h for h in heroes if h["picks"] >= MIN_HERO_PICKS_FOR_WIN_RATE]
    if eligible_heroes:
        best_win_rate_hero = min(eligible_heroes, key=lambda h: (-h["win_rate"], -h["picks"], h["name"]))

    logger.debug(f"Season stats over {len(results)} matches and {len(stats)} stat lines")
    return {
        "total_matches": len(results),
        "total_games": total_games,
        "avg_game_duration": round(avg_game_duration, 1),
        "highest_kill_game": highest_kill_game,
        "longest_game": longest_game,
        "top_mvp_player": {"name": top_mvp["name"], "team": top_mvp["team"], "count": top_mvp["value"]} if top_mvp else None,
        "top_killer_player": {"name": top_killer["name"], "team": top_killer["team"], "kills": top_killer["value"]} if top_killer else None,
        "best_team": best_team,
        "most_picked_hero": most_picked_hero,
        "best_win_rate_hero": best_win_rate_hero,
    }
