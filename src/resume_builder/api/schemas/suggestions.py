"""Pydantic schemas for suggestion endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SuggestionsResponse(BaseModel):
    """Improvement hints for a resume, in display order."""

    suggestions: list[str] = Field(default_factory=list)


class ActionVerbsResponse(BaseModel):
    """The fixed action-verb lexicon."""

    verbs: list[str]


class AchievementRequest(BaseModel):
    """Request schema for rewriting a single achievement line."""

    achievement: str = Field(..., description="Achievement text to improve")


class AchievementResponse(BaseModel):
    improved: str


class SummaryTemplateRequest(BaseModel):
    """Request schema for a starter professional summary."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    role: str = Field(..., description="Target role, e.g. Data Engineer")
    years_experience: int | None = Field(None, ge=0, description="Years of experience")


class SummaryTemplateResponse(BaseModel):
    summary: str
