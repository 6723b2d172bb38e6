# esports_backend/routes/hero_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session, select

from esports_backend.core.config import HERO_CACHE_MAX_AGE
from esports_backend.core.database import get_session
from esports_backend.models.hero_model import Hero, HeroCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Hero])
def get_heroes(response: Response, session: Session = Depends(get_session)):
    response.headers["Cache-Control"] = f"public, max-age={HERO_CACHE_MAX_AGE}"
    return session.exec(select(Hero).order_by(Hero.name)).all()


@router.post("", response_model=List[Hero], status_code=201)
def save_heroes(payload: List[HeroCreate], session: Session = Depends(get_session)):
    """
    Add heroes or update their image URLs, matched by name.
    Images must already be hosted; this endpoint stores only the URL.
    """
    saved = []
    for item in payload:
        hero = session.exec(select(Hero).where(Hero.name == item.name)).first()
        if hero:
            hero.image_url = item.image_url
        else:
            hero = Hero(name=item.name, image_url=item.image_url)
        session.add(hero)
        saved.append(hero)
    session.commit()
    for hero in saved:
        session.refresh(hero)

    logger.info(f"Saved {len(saved)} heroes")
    return saved


@router.delete("/all/clear")
def clear_all_heroes(session: Session = Depends(get_session)):
    heroes = session.exec(select(Hero)).all()
    for hero in heroes:
        session.delete(hero)
    session.commit()
    return {"message": "All heroes cleared", "deleted": len(heroes)}
