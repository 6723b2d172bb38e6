# esports_backend/routes/standings_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from esports_backend.core.config import CACHE_MAX_AGE
from esports_backend.core.database import get_session
from esports_backend.core.standings import compute_detailed_standings, compute_standings
from esports_backend.models.standing_model import DetailedStandingRow, StandingRow
from esports_backend.services.league_data import ResultStore, TeamRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


def load_league_snapshot(session: Session):
    """
    Fetches (teams, results) for the calculator.
    A failing read degrades to an empty league instead of an error page.
    """
    try:
        teams = TeamRegistry(session).list_teams()
        results = ResultStore(session).list_results()
    except SQLAlchemyError as e:
        logger.error(f"Could not load league data for standings: {e}")
        return set(), []
    return teams, results


# =========================================
# GET LEAGUE STANDINGS
# =========================================
@router.get("", response_model=List[StandingRow])
def get_standings(response: Response, session: Session = Depends(get_session)):
    """
    Calculate the league table from recorded results.
    Knockout matches (match day 90+) are excluded.
    """
    response.headers["Cache-Control"] = f"public, max-age={CACHE_MAX_AGE}"
    teams, results = load_league_snapshot(session)
    return compute_standings(teams, results)


@router.get("/detailed", response_model=List[DetailedStandingRow])
def get_detailed_standings(response: Response, session: Session = Depends(get_session)):
    """
    League table with games for/against and the last five results per team.
    """
    response.headers["Cache-Control"] = f"public, max-age={CACHE_MAX_AGE}"
    teams, results = load_league_snapshot(session)
    return compute_detailed_standings(teams, results)
