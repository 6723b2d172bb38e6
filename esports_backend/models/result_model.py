# result_model.py
# Defines the Result table (recorded match outcomes), the request schema used to
# save one, and ResultHistory (audit trail of result changes).

from typing import Optional, List, Dict, Any
from datetime import datetime
from enum import Enum
from pydantic import field_validator, model_validator
from sqlmodel import SQLModel, Field, JSON, Column

from .common import strip_text, utc_now


class Result(SQLModel, table=True):
    """
    A completed match between a blue and a red team.
    Scores are game wins inside a best-of-N series (e.g. 2-0, 2-1).
    """
    id: Optional[int] = Field(default=None, primary_key=True)

    # "{match_day}_{team_blue}_vs_{team_red}" without whitespace; one row per key
    match_id: str = Field(index=True, unique=True)

    # Round number; 90 and above are knockout rounds
    match_day: int = Field(default=0, index=True)

    team_blue: str
    team_red: str
    score_blue: int = Field(default=0, ge=0)
    score_red: int = Field(default=0, ge=0)

    # Redundant with the scores except for bye wins
    winner: Optional[str] = None
    loser: Optional[str] = None

    # Walkover: the winner advances without playing
    is_bye_win: bool = Field(default=False)

    # Per-game details (heroes, durations, ...) kept as opaque JSON
    game_details: List[Any] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now)


class ResultCreate(SQLModel):
    """
    Request body for saving (creating or replacing) a result.
    `winner` is only read for bye wins, where the scores say nothing; it must
    name one of the two teams. Normal matches take the winner from the scores.
    """
    match_day: int
    team_blue: str = Field(min_length=1)
    team_red: str = Field(min_length=1)
    score_blue: int = Field(ge=0)
    score_red: int = Field(ge=0)
    winner: Optional[str] = None
    game_details: Optional[List[Any]] = None
    is_bye_win: Optional[bool] = None

    @field_validator("team_blue", "team_red", "winner", mode="before")
    @classmethod
    def strip_names(cls, value):
        return strip_text(value)

    @model_validator(mode="after")
    def bye_needs_winner(self):
        if self.is_bye_win and self.winner not in (self.team_blue, self.team_red):
            raise ValueError("A bye win needs winner set to team_blue or team_red")
        return self


class HistoryAction(str, Enum):
    """What happened to a result"""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ResultHistory(SQLModel, table=True):
    """
    One entry per change to a result, so admins can see who changed what.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    match_id: str = Field(index=True)
    action: HistoryAction

    # Snapshots of the result before/after the change
    previous_data: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    new_data: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))

    changed_by: str = Field(default="admin")
    changed_at: datetime = Field(default_factory=utc_now, index=True)
    reason: Optional[str] = None
