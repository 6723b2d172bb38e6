# player_model.py
# Defines the Player table (the registered player pool) and the request bodies
# for adding players and managing in-game names (IGNs).

from typing import Optional, List
from datetime import datetime
from pydantic import field_validator
from sqlmodel import SQLModel, Field, JSON, Column

from .common import strip_text, utc_now


class Player(SQLModel, table=True):
    """
    A registered player. `team` links the player to a team by name, which is
    also how the team registry discovers teams without a logo yet.
    Game stats are recorded under an IGN; `name`, `in_game_name` and
    `previous_igns` are all used to map them back to this player.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str                                   # Real name
    grade: Optional[str] = None
    team: Optional[str] = Field(default=None, index=True)
    in_game_name: Optional[str] = None          # Current IGN
    previous_igns: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utc_now)


class PlayerCreate(SQLModel):
    name: str = Field(min_length=1)
    grade: Optional[str] = None
    team: Optional[str] = None
    in_game_name: Optional[str] = None
    previous_igns: List[str] = Field(default_factory=list)

    @field_validator("name", "team", "in_game_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        return strip_text(value)


class PreviousIGNRequest(SQLModel):
    previous_ign: str = Field(min_length=1)

    @field_validator("previous_ign", mode="before")
    @classmethod
    def strip_ign(cls, value):
        return strip_text(value)


class UpdateIGNRequest(SQLModel):
    new_ign: str = Field(min_length=1)

    @field_validator("new_ign", mode="before")
    @classmethod
    def strip_ign(cls, value):
        return strip_text(value)
