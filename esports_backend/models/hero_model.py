# hero_model.py
# Playable heroes, used for hero pick statistics and the admin stats form.

from typing import Optional
from datetime import datetime
from pydantic import field_validator
from sqlmodel import SQLModel, Field

from .common import strip_text, utc_now


class Hero(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)


class HeroCreate(SQLModel):
    """Register a hero by name with an already hosted image URL."""
    name: str = Field(min_length=1)
    image_url: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return strip_text(value)
