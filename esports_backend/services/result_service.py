# result_service.py
# Service for saving, deleting and resetting match results, with an audit trail.

import logging
import re
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from esports_backend.core.exceptions import ResultNotFoundError
from esports_backend.models.game_stat_model import GameStat
from esports_backend.models.result_model import HistoryAction, Result, ResultCreate, ResultHistory
from esports_backend.models.schedule_model import Schedule

logger = logging.getLogger(__name__)

# Columns copied into history snapshots
SNAPSHOT_FIELDS = (
    "match_id", "match_day", "team_blue", "team_red", "score_blue", "score_red",
    "winner", "loser", "is_bye_win", "game_details",
)


def build_match_id(match_day: int, team_blue: str, team_red: str) -> str:
    """
    Stable key for a fixture, e.g. (3, "Phuket Phantoms", "Khon Kaen Kings")
    -> "3_PhuketPhantoms_vs_KhonKaenKings".
    """
    return re.sub(r"\s+", "", f"{match_day}_{team_blue}_vs_{team_red}")


def _snapshot(result: Result) -> Dict[str, Any]:
    return {field: getattr(result, field) for field in SNAPSHOT_FIELDS}


def save_result(session: Session, payload: ResultCreate, changed_by: str = "admin") -> Result:
    """
    Creates or replaces the result for a fixture.
    - Team names are trimmed.
    - Normal matches: winner/loser follow the scores, blue only wins with the
      higher score.
    - Bye wins: the winner comes from the payload, the other team is the loser.
    - An existing result with the same match_id is overwritten (upsert).
    """
    team_blue = payload.team_blue.strip()
    team_red = payload.team_red.strip()

    if payload.is_bye_win:
        winner = payload.winner
        loser = team_red if winner == team_blue else team_blue
    elif payload.score_blue > payload.score_red:
        winner, loser = team_blue, team_red
    else:
        winner, loser = team_red, team_blue

    match_id = build_match_id(payload.match_day, team_blue, team_red)

    result = session.exec(select(Result).where(Result.match_id == match_id)).first()
    previous = _snapshot(result) if result else None

    if result is None:
        result = Result(match_id=match_id, team_blue=team_blue, team_red=team_red)

    result.match_day = payload.match_day
    result.team_blue = team_blue
    result.team_red = team_red
    result.score_blue = payload.score_blue
    result.score_red = payload.score_red
    result.winner = winner
    result.loser = loser
    result.game_details = payload.game_details or []
    result.is_bye_win = bool(payload.is_bye_win)

    session.add(result)
    session.add(ResultHistory(
        match_id=match_id,
        action=HistoryAction.UPDATE if previous else HistoryAction.CREATE,
        previous_data=previous,
        new_data=_snapshot(result),
        changed_by=changed_by,
    ))
    session.commit()
    session.refresh(result)

    logger.info(f"Saved result {match_id}: {winner} beat {loser} ({result.score_blue}-{result.score_red})")
    return result


def _remove_results(session: Session, results: List[Result], changed_by: str, reason: Optional[str] = None) -> int:
    """
    Deletes results together with their game stats and writes one delete
    history row per result. The caller commits.
    """
    for result in results:
        stats = session.exec(select(GameStat).where(GameStat.match_id == result.match_id)).all()
        for stat in stats:
            session.delete(stat)

        session.add(ResultHistory(
            match_id=result.match_id,
            action=HistoryAction.DELETE,
            previous_data=_snapshot(result),
            changed_by=changed_by,
            reason=reason,
        ))
        session.delete(result)
    return len(results)


def delete_result(session: Session, match_id: str, changed_by: str = "admin") -> None:
    """Deletes one result and its game stats; raises ResultNotFoundError if there is none."""
    result = session.exec(select(Result).where(Result.match_id == match_id)).first()
    if not result:
        raise ResultNotFoundError(match_id)

    _remove_results(session, [result], changed_by)
    session.commit()
    logger.info(f"Deleted result {match_id}")


def reset_day_results(session: Session, match_day: int, changed_by: str = "admin") -> int:
    """Deletes every result of a match day. Returns how many were removed."""
    results = session.exec(select(Result).where(Result.match_day == match_day)).all()
    deleted = _remove_results(session, list(results), changed_by, reason=f"Match day {match_day} reset")
    session.commit()

    logger.info(f"Cleared {deleted} results for match day {match_day}")
    return deleted


def clear_all_data(session: Session, changed_by: str = "admin") -> Dict[str, int]:
    """
    Start the season over: removes every schedule and every result (with
    their game stats). The history keeps a delete entry per result.
    """
    schedules = session.exec(select(Schedule)).all()
    for schedule in schedules:
        session.delete(schedule)

    results = session.exec(select(Result)).all()
    deleted = _remove_results(session, list(results), changed_by, reason="Season reset")
    session.commit()

    logger.warning(f"Cleared {len(schedules)} schedules and {deleted} results")
    return {"schedules": len(schedules), "results": deleted}


def list_result_history(session: Session, limit: Optional[int] = 100) -> List[ResultHistory]:
    """Audit trail, newest change first."""
    statement = select(ResultHistory).order_by(ResultHistory.changed_at.desc(), ResultHistory.id.desc())
    if limit:
        statement = statement.limit(limit)
    return list(session.exec(statement).all())
