# esports_backend/routes/result_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlmodel import Session

from esports_backend.core.config import CACHE_MAX_AGE
from esports_backend.core.database import get_session
from esports_backend.core.exceptions import ResultNotFoundError
from esports_backend.models.result_model import Result, ResultCreate, ResultHistory
from esports_backend.services.league_data import ResultStore
from esports_backend.services.result_service import (
    delete_result,
    list_result_history,
    reset_day_results,
    save_result,
)

router = APIRouter()


@router.get("", response_model=List[Result])
def get_results(response: Response, session: Session = Depends(get_session)):
    """All recorded results, ordered by match day."""
    response.headers["Cache-Control"] = f"public, max-age={CACHE_MAX_AGE}"
    return ResultStore(session).list_results()


@router.post("", response_model=Result, status_code=201)
def save_result_endpoint(payload: ResultCreate, session: Session = Depends(get_session)):
    """
    Save a match result. Re-submitting the same fixture (match day + teams)
    replaces the earlier result.
    """
    return save_result(session, payload)


@router.get("/history", response_model=List[ResultHistory])
def get_result_history(limit: int = Query(default=100, ge=1, le=1000), session: Session = Depends(get_session)):
    """Audit trail of result changes, newest first."""
    return list_result_history(session, limit=limit)


@router.delete("/reset/{day}")
def reset_day(day: int, session: Session = Depends(get_session)):
    """Remove every result recorded for a match day."""
    deleted = reset_day_results(session, day)
    return {"message": f"Results for day {day} cleared", "deleted": deleted}


@router.delete("/{match_id}")
def delete_result_endpoint(match_id: str, session: Session = Depends(get_session)):
    try:
        delete_result(session, match_id)
    except ResultNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"Result {match_id} deleted"}
