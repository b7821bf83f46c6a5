"""Resume document model.

A ``Resume`` is an immutable value: every edit produces a new instance
(``model_copy``) instead of mutating the current one. The JSON form uses the
camelCase keys the browser client and the REST API exchange
(``fullName``, ``workExperience`` ...); Python code uses snake_case.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

__all__ = [
    "Certification",
    "Education",
    "PersonalInfo",
    "Project",
    "Resume",
    "Skills",
    "TemplateStyle",
    "WorkExperience",
    "coerce_template_style",
    "demo_resume",
    "empty_resume",
]


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


class TemplateStyle(StrEnum):
    """Visual template used for the preview and PDF export."""

    PROFESSIONAL = "professional"
    MODERN = "modern"
    MINIMAL = "minimal"


def coerce_template_style(value: str | TemplateStyle | None) -> TemplateStyle:
    """Return *value* as a :class:`TemplateStyle`, defaulting to professional.

    Unknown values are never rendered as-is; they fall back to the default
    style and a warning is logged.
    """
    if isinstance(value, TemplateStyle):
        return value
    try:
        return TemplateStyle((value or "").strip().lower())
    except ValueError:
        logger.warning("Unknown template style %r, using %s", value, TemplateStyle.PROFESSIONAL)
        return TemplateStyle.PROFESSIONAL


class _ResumeModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class PersonalInfo(_ResumeModel):
    """Name and contact details shown in the resume header."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    website: str | None = None


class WorkExperience(_ResumeModel):
    """A single position held.

    Dates are free text and never parsed. When ``current`` is true the end
    date is ignored and every consumer shows ``Present`` instead.
    """

    id: str = Field(default_factory=_new_id)
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    achievements: tuple[str, ...] = ()

    @property
    def end_label(self) -> str:
        return "Present" if self.current else self.end_date


class Education(_ResumeModel):
    """A degree or diploma."""

    id: str = Field(default_factory=_new_id)
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: str | None = None


class Skills(_ResumeModel):
    """Skill lists by category.

    A missing list and an empty list mean the same thing to every consumer.
    """

    technical: tuple[str, ...] | None = None
    soft: tuple[str, ...] | None = None
    languages: tuple[str, ...] | None = None
    tools: tuple[str, ...] | None = None

    def category(self, name: str) -> tuple[str, ...]:
        """Return the skills stored under *name*, or an empty tuple."""
        return getattr(self, name) or ()

    def is_empty(self) -> bool:
        return not any(self.category(name) for name in ("technical", "tools", "soft", "languages"))


class Certification(_ResumeModel):
    """A professional certification."""

    id: str = Field(default_factory=_new_id)
    name: str = ""
    issuer: str = ""
    date: str = ""
    expiry_date: str | None = None


class Project(_ResumeModel):
    """A personal or professional project."""

    id: str = Field(default_factory=_new_id)
    name: str = ""
    description: str = ""
    technologies: tuple[str, ...] = ()
    link: str | None = None
    highlights: tuple[str, ...] = ()


class Resume(_ResumeModel):
    """Root aggregate edited by a single session and persisted per user."""

    id: str | None = None
    user_id: str | None = None
    title: str = "My Resume"
    template_style: TemplateStyle = TemplateStyle.PROFESSIONAL
    target_role: str = ""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    professional_summary: str = ""
    work_experience: tuple[WorkExperience, ...] = ()
    education: tuple[Education, ...] = ()
    skills: Skills = Field(default_factory=Skills)
    certifications: tuple[Certification, ...] = ()
    projects: tuple[Project, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def content(self) -> dict:
        """Return the user-editable fields in wire (camelCase) form.

        Identity and timestamps are left out; this is the payload the
        persistence backend accepts on save.
        """
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude={"id", "user_id", "created_at", "updated_at"},
        )


def empty_resume() -> Resume:
    """Return the blank document used on first use and after logout."""
    return Resume(personal_info=PersonalInfo(linkedin="", website=""))


def demo_resume() -> Resume:
    """Return the sample document shown to demo users."""
    return Resume(
        title="Senior Frontend Engineer",
        template_style=TemplateStyle.MODERN,
        target_role="Frontend Engineer",
        personal_info=PersonalInfo(
            full_name="Avery Johnson",
            email="avery.johnson@example.com",
            phone="+1 (555) 213-8899",
            location="Seattle, WA",
            linkedin="linkedin.com/in/averyjohnson",
            website="avery.dev",
        ),
        professional_summary=(
            "Frontend engineer with 7+ years building fast, accessible web apps. "
            "Led design system adoption, improved Lighthouse scores by 30%, and shipped "
            "AI-powered resume tooling used by 50k+ users."
        ),
        work_experience=(
            WorkExperience(
                id="exp-1",
                company="Nimbus Labs",
                position="Senior Frontend Engineer",
                location="Remote",
                start_date="2021",
                end_date="Present",
                current=True,
                achievements=(
                    "Redesigned resume builder UI, increasing conversion by 18% and "
                    "reducing time-to-first-export by 35%",
                    "Implemented component library with Storybook and Vite, cutting new "
                    "feature delivery time by 25%",
                ),
            ),
            WorkExperience(
                id="exp-2",
                company="Brightview",
                position="Frontend Engineer",
                location="Seattle, WA",
                start_date="2018",
                end_date="2021",
                achievements=(
                    "Built collaborative document editor with CRDT-based syncing for "
                    "10k monthly active users",
                    "Optimized critical user journeys, improving Core Web Vitals (LCP) "
                    "from 3.1s to 1.5s",
                ),
            ),
        ),
        education=(
            Education(
                id="edu-1",
                institution="University of Washington",
                degree="B.S.",
                field="Computer Science",
                location="Seattle, WA",
                graduation_date="2018",
                gpa="3.7",
            ),
        ),
        skills=Skills(
            technical=("React", "TypeScript", "Node.js", "GraphQL", "Tailwind", "Playwright"),
            tools=("Vite", "Storybook", "Jest", "GitHub Actions"),
            languages=("English", "Spanish"),
            soft=("Product thinking", "Mentoring", "System design"),
        ),
        certifications=(
            Certification(
                id="cert-1",
                name="AWS Certified Cloud Practitioner",
                issuer="Amazon Web Services",
                date="2023",
                expiry_date="2026",
            ),
        ),
        projects=(
            Project(
                id="proj-1",
                name="AI Resume Builder",
                description=(
                    "Full-stack resume builder with AI suggestions, PDF export, and "
                    "template switching."
                ),
                technologies=("React", "TypeScript", "Vite", "Node.js", "MySQL"),
                link="https://github.com/avery/resume-builder",
                highlights=(
                    "Designed scalable component architecture with reusable UI primitives",
                    "Integrated AI-based resume critique delivering 25% faster editing",
                ),
            ),
        ),
    )
