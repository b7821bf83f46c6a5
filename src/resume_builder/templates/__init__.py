"""Template registry for the resume preview."""

from __future__ import annotations

from resume_builder.models.resume import TemplateStyle
from resume_builder.templates.base import SECTION_ORDER, RenderedResume, ResumeTemplate
from resume_builder.templates.minimal import MinimalResumeTemplate
from resume_builder.templates.modern import ModernResumeTemplate
from resume_builder.templates.professional import ProfessionalResumeTemplate

__all__ = [
    "SECTION_ORDER",
    "RenderedResume",
    "ResumeTemplate",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[TemplateStyle, ResumeTemplate] = {
    TemplateStyle.PROFESSIONAL: ProfessionalResumeTemplate(),
    TemplateStyle.MODERN: ModernResumeTemplate(),
    TemplateStyle.MINIMAL: MinimalResumeTemplate(),
}


def get_template(style: TemplateStyle | str) -> ResumeTemplate:
    """Return the template registered under *style*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[TemplateStyle(style)]
    except (KeyError, ValueError):
        available = ", ".join(list_templates())
        msg = f"Unknown template {style!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted names of all registered templates."""
    return sorted(str(style) for style in _REGISTRY)
