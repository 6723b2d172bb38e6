# esports_backend/routes/schedule_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from esports_backend.core.database import get_session
from esports_backend.core.exceptions import ScheduleNotFoundError
from esports_backend.models.schedule_model import Schedule, ScheduleCreate
from esports_backend.services.league_data import get_latest_schedule
from esports_backend.services.result_service import clear_all_data

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/latest", response_model=Schedule)
def get_latest_schedule_endpoint(session: Session = Depends(get_session)):
    """The most recently published schedule."""
    try:
        return get_latest_schedule(session)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=Schedule, status_code=201)
def create_schedule(payload: ScheduleCreate, session: Session = Depends(get_session)):
    """Publish a new schedule (draw result). Older schedules are kept."""
    schedule = Schedule(
        teams=[name.strip() for name in payload.teams],
        pot_a=payload.pot_a,
        pot_b=payload.pot_b,
        schedule=payload.schedule,
    )
    session.add(schedule)
    session.commit()
    session.refresh(schedule)
    logger.info(f"Published schedule {schedule.id} with {len(schedule.teams)} teams")
    return schedule


@router.delete("")
def clear_all_data_endpoint(session: Session = Depends(get_session)):
    """
    Start the season over: removes every schedule and every result.
    """
    cleared = clear_all_data(session)
    return {"message": "All data cleared successfully", **cleared}
