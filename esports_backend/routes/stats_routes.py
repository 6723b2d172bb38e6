# esports_backend/routes/stats_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from esports_backend.core.database import get_session
from esports_backend.core.exceptions import InvalidStatsError
from esports_backend.core.stats import (
    compute_player_hero_stats,
    compute_player_stats,
    compute_season_stats,
    compute_team_stats,
)
from esports_backend.models.game_stat_model import GameStat, GameStatCreate
from esports_backend.services.league_data import ResultStore
from esports_backend.services.stats_service import (
    get_match_stats,
    list_game_stats,
    list_player_pool,
    save_stats,
)

router = APIRouter()


@router.post("", status_code=201)
def save_stats_endpoint(payload: List[GameStatCreate], session: Session = Depends(get_session)):
    """
    Save the stat sheet of one or more matches (one line per player per game).
    Earlier lines of the same matches are replaced.
    """
    try:
        count = save_stats(session, payload)
    except InvalidStatsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": f"Saved {count} stats", "count": count}


@router.get("/match", response_model=List[GameStat])
def get_match_stats_endpoint(match_id: str = Query(min_length=1), session: Session = Depends(get_session)):
    return get_match_stats(session, match_id)


@router.get("/player-stats")
def get_player_stats(session: Session = Depends(get_session)):
    """Per-player totals, averages, win/MVP rates and KDA, best KDA first."""
    return compute_player_stats(list_game_stats(session), list_player_pool(session))


@router.get("/team-stats")
def get_team_stats(session: Session = Depends(get_session)):
    """Per-team totals and per-game averages, best win rate first."""
    return compute_team_stats(list_game_stats(session))


@router.get("/season-stats")
def get_season_stats(session: Session = Depends(get_session)):
    """Season overview: match/game counts, records, top players, heroes."""
    return compute_season_stats(
        ResultStore(session).list_results(),
        list_game_stats(session),
        list_player_pool(session),
    )


@router.get("/player-hero-stats")
def get_player_hero_stats(session: Session = Depends(get_session)):
    """Each player's three most played heroes."""
    return compute_player_hero_stats(list_game_stats(session), list_player_pool(session))
