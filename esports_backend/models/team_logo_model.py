# team_logo_model.py
# Team logos double as the registry of teams taking part in the league.

from typing import Optional
from datetime import datetime
from pydantic import field_validator
from sqlmodel import SQLModel, Field

from .common import strip_text, utc_now


class TeamLogo(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    team_name: str = Field(index=True, unique=True)
    logo_url: str
    created_at: datetime = Field(default_factory=utc_now)


class TeamLogoCreate(SQLModel):
    """Request body for adding or replacing a team logo."""
    team_name: str = Field(min_length=1)
    logo_url: str

    @field_validator("team_name", mode="before")
    @classmethod
    def strip_team_name(cls, value):
        return strip_text(value)

    @field_validator("logo_url")
    @classmethod
    def logo_url_must_be_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("logo_url must be a valid URL")
        return value
