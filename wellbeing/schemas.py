from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from wellbeing.constants import GRATITUDE_MAX_LENGTH, GRATITUDE_MIN_LENGTH


class Profile(BaseModel):
    user_id: str
    username: Optional[str] = None
    language_pref: Optional[str] = "en"
    onboarding_completed: bool = False
    referral_source: Optional[str] = None
    objectives: List[str] = Field(default_factory=list)

    @field_validator("onboarding_completed", mode="before")
    @classmethod
    def _none_is_false(cls, value):
        return bool(value) if value is not None else False

    @field_validator("objectives", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return value or []


class ProfileUpdate(BaseModel):
    username: Optional[str] = None
    language_pref: Optional[str] = None
    onboarding_completed: Optional[bool] = None
    referral_source: Optional[str] = None
    objectives: Optional[List[str]] = None


class MoodLogCreate(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    tags: List[str] = Field(default_factory=list)


class MoodLog(BaseModel):
    id: str
    user_id: str
    rating: int = Field(..., ge=1, le=5)
    tags: List[str] = Field(default_factory=list)
    created_at: datetime

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _stringify(cls, value):
        return str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return value or []


class GratitudeEntryCreate(BaseModel):
    content: str = Field(..., min_length=GRATITUDE_MIN_LENGTH, max_length=GRATITUDE_MAX_LENGTH)

    @field_validator("content", mode="before")
    @classmethod
    def _strip(cls, value):
        return str(value or "").strip()


class GratitudeEntry(BaseModel):
    id: str
    user_id: str
    content: str
    created_at: datetime

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _stringify(cls, value):
        return str(value)
