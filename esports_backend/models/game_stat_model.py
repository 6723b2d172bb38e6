# game_stat_model.py
# Per-player, per-game statistics of a match (one row per player per game).

from typing import Optional
from datetime import datetime
from pydantic import field_validator
from sqlmodel import SQLModel, Field

from .common import strip_text, utc_now


class GameStat(SQLModel, table=True):
    """
    One player's line in one game of a best-of-N match.
    `match_id` is the Result key the game belongs to; `player_name` is the
    IGN shown in the game client at the time.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: str = Field(index=True)
    game_number: int = Field(ge=1)              # 1-based game inside the series

    team_name: str = Field(index=True)
    player_name: str = Field(index=True)
    hero_name: str

    kills: int = Field(default=0, ge=0)
    deaths: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    mvp: bool = Field(default=False)
    game_duration: float = Field(default=0, ge=0)   # Minutes
    win: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now)


class GameStatCreate(SQLModel):
    match_id: str = Field(min_length=1)
    game_number: int = Field(gt=0)
    team_name: str = Field(min_length=1)
    player_name: str = Field(min_length=1)
    hero_name: str = Field(min_length=1)
    kills: int = Field(ge=0)
    deaths: int = Field(ge=0)
    assists: int = Field(ge=0)
    mvp: bool
    game_duration: float = Field(ge=0)
    win: bool

    @field_validator("match_id", "team_name", "player_name", "hero_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        return strip_text(value)
