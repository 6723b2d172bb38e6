# stats_service.py
# Storage side of game statistics: saving a match's stat sheet and loading
# the rows the aggregations in core/stats.py work on.

import logging
from typing import List

from sqlmodel import Session, select

from esports_backend.core.exceptions import InvalidStatsError
from esports_backend.models.game_stat_model import GameStat, GameStatCreate
from esports_backend.models.player_model import Player

logger = logging.getLogger(__name__)


def save_stats(session: Session, lines: List[GameStatCreate]) -> int:
    """
    Stores a stat sheet. Every match appearing in the upload has its old
    lines replaced, so re-submitting a corrected sheet never duplicates.
    """
    if not lines:
        raise InvalidStatsError("Data must be a non-empty array")

    match_ids = {line.match_id for line in lines}
    old_lines = session.exec(select(GameStat).where(GameStat.match_id.in_(list(match_ids)))).all()
    for old in old_lines:
        session.delete(old)

    for line in lines:
        session.add(GameStat(**line.model_dump()))
    session.commit()

    logger.info(f"Saved {len(lines)} stat lines for {len(match_ids)} matches (replaced {len(old_lines)})")
    return len(lines)


def get_match_stats(session: Session, match_id: str) -> List[GameStat]:
    return list(session.exec(
        select(GameStat)
        .where(GameStat.match_id == match_id)
        .order_by(GameStat.game_number, GameStat.team_name, GameStat.id)
    ).all())


def list_game_stats(session: Session) -> List[GameStat]:
    return list(session.exec(select(GameStat).order_by(GameStat.id)).all())


def list_player_pool(session: Session) -> List[Player]:
    """Players in insertion order; IGN resolution gives the oldest entry priority."""
    return list(session.exec(select(Player).order_by(Player.id)).all())
