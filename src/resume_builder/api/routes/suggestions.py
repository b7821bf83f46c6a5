"""Resume improvement suggestion routes.

These only analyze the posted content and never touch storage, so they do
not require authentication.
"""

from __future__ import annotations

from fastapi import APIRouter

from resume_builder.api.schemas.suggestions import (
    AchievementRequest,
    AchievementResponse,
    ActionVerbsResponse,
    SuggestionsResponse,
    SummaryTemplateRequest,
    SummaryTemplateResponse,
)
from resume_builder.constants import ACTION_VERBS
from resume_builder.models.resume import Resume
from resume_builder.services.suggestions import (
    analyze_resume,
    generate_summary_template,
    improve_achievement,
)

router = APIRouter(tags=["suggestions"])


@router.post("/suggestions", response_model=SuggestionsResponse)
def suggestions_endpoint(data: Resume) -> SuggestionsResponse:
    """Analyze a resume and return improvement hints."""
    return SuggestionsResponse(suggestions=analyze_resume(data))


@router.post("/suggestions/achievement", response_model=AchievementResponse)
def improve_achievement_endpoint(data: AchievementRequest) -> AchievementResponse:
    """Rewrite one achievement with an action verb and a sample metric."""
    return AchievementResponse(improved=improve_achievement(data.achievement))


@router.post("/suggestions/summary", response_model=SummaryTemplateResponse)
def summary_template_endpoint(data: SummaryTemplateRequest) -> SummaryTemplateResponse:
    """Return a starter professional summary for a role."""
    return SummaryTemplateResponse(
        summary=generate_summary_template(data.role, data.years_experience)
    )


@router.get("/action-verbs", response_model=ActionVerbsResponse)
def action_verbs_endpoint() -> ActionVerbsResponse:
    return ActionVerbsResponse(verbs=list(ACTION_VERBS))
