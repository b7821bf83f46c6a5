"""Editing session for a single user's resume.

The session owns the current :class:`Resume`. Every edit replaces it with a
new validated value, recomputes the suggestions, refreshes the preview when
one is mounted and restarts the autosave quiet window.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any, TypeVar

from pydantic import BaseModel

from resume_builder.models.exceptions import (
    AuthorizationError,
    GatewayError,
    SaveUnavailableError,
)
from resume_builder.models.resume import (
    Certification,
    Education,
    Project,
    Resume,
    TemplateStyle,
    WorkExperience,
    coerce_template_style,
    demo_resume,
    empty_resume,
)
from resume_builder.services.autosave import (
    AUTOSAVE_DELAY_SECONDS,
    DebouncedAutosave,
    TimerFactory,
)
from resume_builder.services.gateway import ResumeGateway
from resume_builder.services.preview import ResumePreview
from resume_builder.services.suggestions import analyze_resume
from resume_builder.utils.export import export_to_text

logger = logging.getLogger(__name__)

__all__ = ["ENTRY_SECTIONS", "LOAD_FAILED_MESSAGE", "SAVE_UNAVAILABLE_MESSAGE", "ResumeEditor"]

SAVE_UNAVAILABLE_MESSAGE = (
    "Save is unavailable for demo users. Please sign in to save your resume."
)

LOAD_FAILED_MESSAGE = (
    "Your saved resume could not be loaded. Reload it before saving so it is not overwritten."
)

ENTRY_SECTIONS: dict[str, type[BaseModel]] = {
    "work_experience": WorkExperience,
    "education": Education,
    "certifications": Certification,
    "projects": Project,
}

M = TypeVar("M", bound=BaseModel)


def _replace(model: M, **fields: Any) -> M:
    """Return a validated copy of *model* with *fields* replaced."""
    return type(model).model_validate({**model.model_dump(), **fields})


def _entry_class(section: str) -> type[BaseModel]:
    try:
        return ENTRY_SECTIONS[section]
    except KeyError:
        available = ", ".join(ENTRY_SECTIONS)
        raise ValueError(f"Unknown section '{section}'. Available: {available}") from None


class ResumeEditor:
    """Single-writer editing session.

    Args:
        gateway: Persistence gateway; without one the session can only be
            used anonymously.
        autosave_delay: Quiet window before an edit is saved.
        preview: Preview surface refreshed after every edit.
        timer_factory: Passed through to :class:`DebouncedAutosave`.
    """

    def __init__(
        self,
        gateway: ResumeGateway | None = None,
        autosave_delay: float = AUTOSAVE_DELAY_SECONDS,
        preview: ResumePreview | None = None,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        self.gateway = gateway
        self.preview = preview or ResumePreview()
        self.autosave: DebouncedAutosave[Resume] = DebouncedAutosave(
            self._persist, delay=autosave_delay, timer_factory=timer_factory
        )
        self.user_id: str | None = None
        self.is_demo = False
        self.load_error: GatewayError | None = None
        self.resume: Resume = empty_resume()
        self.suggestions: list[str] = analyze_resume(self.resume)

    @property
    def can_save(self) -> bool:
        return (
            self.user_id is not None
            and not self.is_demo
            and self.gateway is not None
            and self.load_error is None
        )

    @property
    def template_style(self) -> TemplateStyle:
        return self.resume.template_style

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def hydrate(self, user_id: str | None, demo: bool = False) -> Resume:
        """Load the document for *user_id*.

        Demo sessions get the sample resume, anonymous sessions and users
        without a saved document get the empty one. Hydration never
        schedules an autosave.

        Raises:
            AuthorizationError: If the backend rejects the credential.
            GatewayError: If the saved document could not be loaded. The
                session then shows the empty document with saving disabled
                until a later hydrate succeeds.
        """
        self.autosave.cancel()
        self.user_id = user_id
        self.is_demo = demo
        self.load_error = None

        if user_id is None:
            resume = empty_resume()
        elif demo:
            resume = demo_resume()
        else:
            try:
                resume = self._load() or empty_resume()
            except GatewayError as exc:
                self.load_error = exc
                self._set(empty_resume(), schedule=False)
                raise

        self._set(resume, schedule=False)
        return self.resume

    def logout(self) -> None:
        """Drop any pending save and reset to the empty document."""
        self.autosave.cancel()
        if self.gateway is not None:
            self.gateway.logout()
        self.user_id = None
        self.is_demo = False
        self.load_error = None
        self.autosave.last_saved = None
        self.preview.unmount()
        self._set(empty_resume(), schedule=False)

    def close(self) -> None:
        """Tear the session down without saving pending edits."""
        self.autosave.cancel()
        self.user_id = None
        self.is_demo = False
        self.load_error = None
        self._set(empty_resume(), schedule=False)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def update(self, **fields: Any) -> Resume:
        """Replace top-level fields (``title``, ``target_role`` ...)."""
        if "template_style" in fields:
            fields["template_style"] = coerce_template_style(fields["template_style"])
        return self._set(_replace(self.resume, **fields))

    def set_template_style(self, style: str | TemplateStyle) -> Resume:
        return self.update(template_style=style)

    def update_personal_info(self, **fields: Any) -> Resume:
        return self.update(personal_info=_replace(self.resume.personal_info, **fields))

    def update_skills(self, **fields: Any) -> Resume:
        return self.update(skills=_replace(self.resume.skills, **fields))

    def add_entry(self, section: str, entry: BaseModel | None = None, **fields: Any) -> BaseModel:
        """Append an entry to one of the list sections and return it.

        Pass either a ready-made *entry* or the *fields* to build one from.
        """
        entry_class = _entry_class(section)
        if entry is None:
            entry = entry_class.model_validate(fields)
        elif not isinstance(entry, entry_class):
            raise TypeError(f"{section} entries must be {entry_class.__name__}")

        self.update(**{section: (*getattr(self.resume, section), entry)})
        return entry

    def update_entry(self, section: str, entry_id: str, **fields: Any) -> BaseModel:
        """Replace fields of the entry with *entry_id*.

        Raises:
            KeyError: If no entry in *section* has that id.
        """
        _entry_class(section)
        entries = getattr(self.resume, section)
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                updated = _replace(entry, **fields)
                self.update(**{section: (*entries[:index], updated, *entries[index + 1 :])})
                return updated
        raise KeyError(entry_id)

    def remove_entry(self, section: str, entry_id: str) -> bool:
        """Remove the entry with *entry_id*. Returns False if it was not found."""
        _entry_class(section)
        entries = getattr(self.resume, section)
        kept = tuple(entry for entry in entries if entry.id != entry_id)
        if len(kept) == len(entries):
            return False
        self.update(**{section: kept})
        return True

    # ------------------------------------------------------------------
    # Saving and export
    # ------------------------------------------------------------------

    def save_now(self) -> None:
        """Save the current document immediately.

        Raises:
            SaveUnavailableError: For demo and anonymous sessions, and after
                the saved document failed to load.
            GatewayError: If the backend rejects the save.
        """
        if self.load_error is not None:
            raise SaveUnavailableError(LOAD_FAILED_MESSAGE)
        if not self.can_save:
            raise SaveUnavailableError(SAVE_UNAVAILABLE_MESSAGE)

        self.autosave.cancel()
        self.autosave.is_saving = True
        try:
            self.gateway.save(self.resume)
        finally:
            self.autosave.is_saving = False
        self.autosave.last_saved = datetime.now(UTC)

    def export_text(self) -> str:
        return export_to_text(self.resume)

    # ------------------------------------------------------------------
    # internal helpers
    # ------------------------------------------------------------------

    def _set(self, resume: Resume, schedule: bool = True) -> Resume:
        self.resume = resume
        self.suggestions = analyze_resume(resume)
        self.preview.refresh(resume)
        if schedule and self.can_save:
            self.autosave.schedule(resume)
        return resume

    def _load(self) -> Resume | None:
        if self.gateway is None:
            return None
        try:
            return self.gateway.load()
        except AuthorizationError:
            logger.warning("Loading resume was not authorized")
            raise
        except GatewayError:
            logger.exception("Error loading resume")
            raise

    def _persist(self, resume: Resume) -> None:
        self.gateway.save(resume)
