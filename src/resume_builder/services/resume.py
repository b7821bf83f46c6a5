"""Server-side storage of each user's single resume document."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from resume_builder.data.db import get_session
from resume_builder.data.models.resume import ResumeRecord
from resume_builder.data.models.user import User
from resume_builder.models.resume import Resume

logger = logging.getLogger(__name__)

# Sections stored as JSON text, keyed by ORM column / wire name.
_JSON_SECTIONS = {
    "personal_info": "personalInfo",
    "work_experience": "workExperience",
    "education": "education",
    "skills": "skills",
    "certifications": "certifications",
    "projects": "projects",
}


def _record_to_resume(record: ResumeRecord) -> Resume:
    data = {wire: json.loads(getattr(record, column)) for column, wire in _JSON_SECTIONS.items()}
    data.update(
        id=str(record.id),
        userId=str(record.user_id),
        title=record.title,
        templateStyle=record.template_style,
        targetRole=record.target_role,
        professionalSummary=record.professional_summary,
        createdAt=record.created_at,
        updatedAt=record.updated_at,
    )
    return Resume.model_validate(data)


def _apply(record: ResumeRecord, resume: Resume) -> None:
    content = resume.content()
    record.title = resume.title
    record.template_style = resume.template_style.value
    record.target_role = resume.target_role
    record.professional_summary = resume.professional_summary
    for column, wire in _JSON_SECTIONS.items():
        setattr(record, column, json.dumps(content[wire]))


def save_resume(user_id: int, resume: Resume) -> Resume | None:
    """
    Create the user's resume or replace the one already stored.

    A user never has more than one resume: saving again overwrites every
    section of the existing row.

    Args:
        user_id: Owner of the resume
        resume: Document to store; its id, owner and timestamps are ignored

    Returns:
        The stored resume, or None if the user does not exist
    """
    with get_session() as session:
        if session.get(User, user_id) is None:
            return None

        record = session.query(ResumeRecord).filter(ResumeRecord.user_id == user_id).first()
        if record is None:
            record = ResumeRecord(user_id=user_id)
            session.add(record)
        else:
            record.updated_at = datetime.now(UTC)

        _apply(record, resume)
        session.flush()
        logger.debug("Saved resume %s for user %s", record.id, user_id)
        return _record_to_resume(record)


def get_resume(user_id: int) -> Resume | None:
    """Return the user's resume, or None if they have not saved one."""
    with get_session() as session:
        record = session.query(ResumeRecord).filter(ResumeRecord.user_id == user_id).first()
        if record is None:
            return None
        return _record_to_resume(record)


def delete_resume(user_id: int) -> bool:
    """Delete the user's resume. Returns False if there was nothing to delete."""
    with get_session() as session:
        record = session.query(ResumeRecord).filter(ResumeRecord.user_id == user_id).first()
        if record is None:
            return False
        session.delete(record)
        return True
