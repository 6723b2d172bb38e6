# standing_model.py
# Response shapes for the league table. These are derived on every request
# and never stored, so none of them is a table.

from typing import List
from sqlmodel import SQLModel, Field


class StandingRow(SQLModel):
    """One team's line in the league table."""
    team_name: str
    played: int = 0
    won: int = 0
    lost: int = 0
    goal_difference: int = 0
    points: int = 0


class DetailedStandingRow(StandingRow):
    """League table line with game totals and recent form."""
    games_for: int = 0
    games_against: int = 0
    form: List[str] = Field(default_factory=list)  # "W"/"L", newest first
