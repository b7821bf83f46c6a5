"""Resume routes for the API.

Every authenticated user owns at most one resume, so none of these routes
take a resume id.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from resume_builder.api.dependencies import get_current_user_id
from resume_builder.models.resume import Resume
from resume_builder.services.resume import delete_resume, get_resume, save_resume
from resume_builder.utils.export import export_to_text, resume_filename

router = APIRouter(prefix="/resume", tags=["resumes"])


def _get_or_404(user_id: int) -> Resume:
    resume = get_resume(user_id)
    if resume is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return resume


@router.get("", response_model=Resume)
def get_resume_endpoint(
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> Resume:
    """Return the caller's resume."""
    return _get_or_404(user_id)


@router.post("", response_model=Resume)
def save_resume_endpoint(
    data: Resume,
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> Resume:
    """Create the caller's resume or replace the existing one."""
    saved = save_resume(user_id, data)
    if saved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return saved


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_resume_endpoint(
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> None:
    """Delete the caller's resume."""
    if not delete_resume(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")


@router.get(
    "/export/text",
    responses={200: {"content": {"text/plain": {}}}},
)
def export_text_endpoint(
    user_id: Annotated[int, Depends(get_current_user_id)],
) -> Response:
    """Download the caller's resume as plain text."""
    resume = _get_or_404(user_id)
    filename = resume_filename(resume.personal_info.full_name, "txt")
    return Response(
        content=export_to_text(resume),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
