# schedule_model.py
# Defines the Schedule table. Every publish creates a new row; the newest one
# is the schedule shown on the site.

from typing import Optional, List, Any
from datetime import datetime
from sqlmodel import SQLModel, Field, JSON, Column

from .common import utc_now


class Schedule(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Teams in the draw and the two seeding pots
    teams: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    pot_a: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    pot_b: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Fixture list as produced by the draw tool
    schedule: List[Any] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, index=True)


class ScheduleCreate(SQLModel):
    teams: List[str] = Field(default_factory=list)
    pot_a: List[str] = Field(default_factory=list)
    pot_b: List[str] = Field(default_factory=list)
    schedule: List[Any] = Field(default_factory=list)
