# esports_backend/routes/team_routes.py
# Teams and their logos. Mounted twice: /teams for the registry and
# /team-logos for logo CRUD.

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from esports_backend.core.database import get_session
from esports_backend.models.team_logo_model import TeamLogo, TeamLogoCreate
from esports_backend.services.league_data import TeamRegistry

logger = logging.getLogger(__name__)

teams_router = APIRouter()
logos_router = APIRouter()


@teams_router.get("", response_model=List[str])
def list_teams(session: Session = Depends(get_session)):
    """
    Names of every team in the league (logos, player rosters and the
    published schedule combined), sorted A-Z.
    """
    return sorted(TeamRegistry(session).list_teams())


# =========================================
# TEAM LOGOS
# =========================================
@logos_router.get("", response_model=List[TeamLogo])
def get_team_logos(session: Session = Depends(get_session)):
    return session.exec(select(TeamLogo).order_by(TeamLogo.team_name)).all()


@logos_router.post("", response_model=TeamLogo, status_code=201)
def save_team_logo(payload: TeamLogoCreate, session: Session = Depends(get_session)):
    """Add a logo for a team, or replace the URL of an existing one."""
    team_name = payload.team_name.strip()
    logo = session.exec(select(TeamLogo).where(TeamLogo.team_name == team_name)).first()

    if logo:
        logo.logo_url = payload.logo_url
    else:
        logo = TeamLogo(team_name=team_name, logo_url=payload.logo_url)

    session.add(logo)
    session.commit()
    session.refresh(logo)
    logger.info(f"Saved logo for {team_name}")
    return logo


@logos_router.delete("/{team_name}")
def delete_team_logo(team_name: str, session: Session = Depends(get_session)):
    logo = session.exec(select(TeamLogo).where(TeamLogo.team_name == team_name)).first()
    if not logo:
        raise HTTPException(status_code=404, detail=f"No logo found for team {team_name}.")

    session.delete(logo)
    session.commit()
    return {"message": "Logo deleted"}
