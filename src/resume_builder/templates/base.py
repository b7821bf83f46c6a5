"""Abstract base class for the resume preview templates."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from pylatex import Document

from resume_builder.models.resume import Resume, TemplateStyle

__all__ = ["SECTION_ORDER", "RenderedResume", "ResumeTemplate"]

# Sections every template emits, in this order.
SECTION_ORDER: tuple[str, ...] = (
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
)

# Characters that have special meaning in LaTeX.
_LATEX_SPECIAL = re.compile(r"([&%$#_{}])")
_LATEX_TILDE = re.compile(r"~")
_LATEX_CARET = re.compile(r"\^")
_LATEX_BACKSLASH = re.compile(r"\\")

_PLACEHOLDER_NAME = "Your Name"


@dataclass(frozen=True, slots=True)
class RenderedResume:
    """A resume rendered with one template, ready to display or capture.

    Attributes:
        style: Template the document was built with.
        resume: The resume value that was rendered.
        document: The PyLaTeX document.
        sections: Keys of the sections present, in display order.
    """

    style: TemplateStyle
    resume: Resume
    document: Document
    sections: tuple[str, ...]

    def dumps(self) -> str:
        """Return the LaTeX source of the rendered document."""
        return self.document.dumps()


class ResumeTemplate(ABC):
    """Interface that every resume template must implement.

    Templates only differ in presentation. Which sections appear is decided
    here, from the data alone, so switching templates never adds or drops a
    section.
    """

    style: ClassVar[TemplateStyle]

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    def build(self, resume: Resume) -> Document:
        """Construct a PyLaTeX ``Document`` from *resume*."""
        doc = self._create_document()
        for key in self.present_sections(resume):
            getattr(self, f"_add_{key}")(doc, resume)
        return doc

    def render(self, resume: Resume) -> RenderedResume:
        """Build *resume* and bundle it with its section keys."""
        return RenderedResume(
            style=self.style,
            resume=resume,
            document=self.build(resume),
            sections=self.present_sections(resume),
        )

    @staticmethod
    def present_sections(resume: Resume) -> tuple[str, ...]:
        """Return the keys of the sections that have data to show."""
        has_data = {
            "contact": True,
            "summary": bool(resume.professional_summary.strip()),
            "experience": bool(resume.work_experience),
            "education": bool(resume.education),
            "skills": not resume.skills.is_empty(),
            "projects": bool(resume.projects),
            "certifications": bool(resume.certifications),
        }
        return tuple(key for key in SECTION_ORDER if has_data[key])

    # ------------------------------------------------------------------
    # Per-template hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _create_document(self) -> Document: ...

    @abstractmethod
    def _add_contact(self, doc: Document, resume: Resume) -> None: ...

    @abstractmethod
    def _add_summary(self, doc: Document, resume: Resume) -> None: ...

    @abstractmethod
    def _add_experience(self, doc: Document, resume: Resume) -> None: ...

    @abstractmethod
    def _add_education(self, doc: Document, resume: Resume) -> None: ...

    @abstractmethod
    def _add_skills(self, doc: Document, resume: Resume) -> None: ...

    @abstractmethod
    def _add_projects(self, doc: Document, resume: Resume) -> None: ...

    @abstractmethod
    def _add_certifications(self, doc: Document, resume: Resume) -> None: ...

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def escape_latex(text: str) -> str:
        r"""Escape LaTeX special characters in *text*.

        Handles: ``& % $ # _ { } ~ ^ \``
        """
        # Order matters: backslash first so we don't double-escape.
        result = _LATEX_BACKSLASH.sub(r"\\textbackslash{}", text)
        result = _LATEX_SPECIAL.sub(r"\\\1", result)
        result = _LATEX_TILDE.sub(r"\\textasciitilde{}", result)
        result = _LATEX_CARET.sub(r"\\textasciicircum{}", result)
        return result

    @classmethod
    def format_date_range(cls, start: str, end_label: str) -> str:
        """Return ``start -- end`` with both sides escaped."""
        return f"{cls.escape_latex(start)} -- {cls.escape_latex(end_label)}"

    @staticmethod
    def non_blank(items: Iterable[str]) -> list[str]:
        """Drop empty and whitespace-only entries."""
        return [item for item in items if item.strip()]

    @staticmethod
    def stacked_lines(parts: Iterable[str]) -> str:
        r"""Join the non-blank *parts* with ``\\`` line breaks.

        A ``\\`` with nothing before it on the line is a LaTeX error, so
        blank parts must never reach the output.
        """
        return " \\\\\n".join(part for part in parts if part.strip())

    @staticmethod
    def display_name(resume: Resume) -> str:
        return resume.personal_info.full_name or _PLACEHOLDER_NAME

    @staticmethod
    def contact_values(resume: Resume) -> list[str]:
        """Return the non-empty contact fields in display order."""
        info = resume.personal_info
        values = [info.email, info.phone, info.location, info.linkedin, info.website]
        return [value for value in values if value]
