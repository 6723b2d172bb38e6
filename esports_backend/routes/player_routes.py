# esports_backend/routes/player_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from esports_backend.core.database import get_session
from esports_backend.core.exceptions import PlayerNotFoundError
from esports_backend.models.player_model import Player, PlayerCreate, PreviousIGNRequest, UpdateIGNRequest
from esports_backend.services import player_service

router = APIRouter()


@router.get("", response_model=List[Player])
def list_players(team: Optional[str] = None, session: Session = Depends(get_session)):
    """
    Retrieve the player pool, optionally filtered to one team.
    """
    statement = select(Player)
    if team:
        statement = statement.where(Player.team == team)
    return session.exec(statement.order_by(Player.team, Player.name)).all()


@router.post("", response_model=Player, status_code=201)
def create_player(payload: PlayerCreate, session: Session = Depends(get_session)):
    return player_service.create_player(session, payload)


@router.post("/import", status_code=201)
def import_players(payload: List[PlayerCreate], session: Session = Depends(get_session)):
    """Bulk-add players from a registration sheet."""
    if not payload:
        raise HTTPException(status_code=400, detail="Player list must not be empty")
    count = player_service.import_players(session, payload)
    return {"message": f"Imported {count} players", "count": count}


@router.delete("/all/clear")
def clear_all_players(session: Session = Depends(get_session)):
    deleted = player_service.clear_all_players(session)
    return {"message": "All players cleared", "deleted": deleted}


@router.get("/unmatched-igns")
def get_unmatched_igns(session: Session = Depends(get_session)):
    """
    IGNs found in game stats that no registered player answers to.
    Each entry: ign, games_count, team.
    """
    return player_service.find_unmatched_igns(session)


@router.post("/{player_id}/add-previous-ign")
def add_previous_ign(player_id: int, payload: PreviousIGNRequest, session: Session = Depends(get_session)):
    try:
        player = player_service.add_previous_ign(session, player_id, payload.previous_ign)
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f'Added "{payload.previous_ign}" to {player.name}\'s previous IGNs', "player": player}


@router.patch("/{player_id}/update-ign")
def update_ign(player_id: int, payload: UpdateIGNRequest, session: Session = Depends(get_session)):
    try:
        player = player_service.update_ign(session, player_id, payload.new_ign)
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f'Updated IGN to "{payload.new_ign}"', "player": player}


@router.delete("/{player_id}")
def delete_player(player_id: int, session: Session = Depends(get_session)):
    try:
        player_service.delete_player(session, player_id)
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"Player {player_id} deleted"}
