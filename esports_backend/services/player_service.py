# player_service.py
# Player pool management: bulk import, clearing, and keeping IGNs in sync
# with the names that show up in game stats.

import logging
from typing import Any, Dict, List

from sqlmodel import Session, select

from esports_backend.core.exceptions import PlayerNotFoundError
from esports_backend.models.game_stat_model import GameStat
from esports_backend.models.player_model import Player, PlayerCreate

logger = logging.getLogger(__name__)


def _new_player(payload: PlayerCreate) -> Player:
    return Player(
        name=payload.name,
        grade=payload.grade,
        team=payload.team or None,
        in_game_name=payload.in_game_name or None,
        previous_igns=list(payload.previous_igns),
    )


def create_player(session: Session, payload: PlayerCreate) -> Player:
    player = _new_player(payload)
    session.add(player)
    session.commit()
    session.refresh(player)
    return player


def import_players(session: Session, payloads: List[PlayerCreate]) -> int:
    """Adds a batch of players (e.g. a registration sheet). Returns the count."""
    for payload in payloads:
        session.add(_new_player(payload))
    session.commit()
    logger.info(f"Imported {len(payloads)} players")
    return len(payloads)


def clear_all_players(session: Session) -> int:
    players = session.exec(select(Player)).all()
    for player in players:
        session.delete(player)
    session.commit()
    logger.warning(f"Cleared {len(players)} players")
    return len(players)


def get_player_or_raise(session: Session, player_id: int) -> Player:
    player = session.get(Player, player_id)
    if not player:
        raise PlayerNotFoundError(player_id)
    return player


def delete_player(session: Session, player_id: int) -> None:
    player = get_player_or_raise(session, player_id)
    session.delete(player)
    session.commit()


def find_unmatched_igns(session: Session) -> List[Dict[str, Any]]:
    """
    IGNs in game stats that no player in the pool answers to (by name,
    current IGN or previous IGN). Admins link these via add_previous_ign.
    """
    known = set()
    for player in session.exec(select(Player)).all():
        known.add(player.name)
        if player.in_game_name:
            known.add(player.in_game_name)
        known.update(player.previous_igns or [])

    unmatched: Dict[str, Dict[str, Any]] = {}
    for stat in session.exec(select(GameStat).order_by(GameStat.id)).all():
        if stat.player_name in known:
            continue
        entry = unmatched.setdefault(stat.player_name, {"ign": stat.player_name, "games_count": 0, "team": stat.team_name or "Unknown"})
        entry["games_count"] += 1

    return [unmatched[ign] for ign in sorted(unmatched)]


def add_previous_ign(session: Session, player_id: int, previous_ign: str) -> Player:
    """Links an old IGN to a player. Adding a known IGN again is a no-op."""
    player = get_player_or_raise(session, player_id)
    if previous_ign not in (player.previous_igns or []):
        # Reassign so the JSON column is marked dirty
        player.previous_igns = [*(player.previous_igns or []), previous_ign]
        session.add(player)
        session.commit()
        session.refresh(player)
    return player


def update_ign(session: Session, player_id: int, new_ign: str) -> Player:
    """
    Sets the player's current IGN. The replaced IGN moves to previous_igns,
    so stats recorded under it still count for this player.
    """
    player = get_player_or_raise(session, player_id)
    previous = list(player.previous_igns or [])
    if player.in_game_name and player.in_game_name != new_ign and player.in_game_name not in previous:
        previous.append(player.in_game_name)

    player.previous_igns = previous
    player.in_game_name = new_ign
    session.add(player)
    session.commit()
    session.refresh(player)
    logger.info(f"Player {player_id} IGN updated to {new_ign}")
    return player
