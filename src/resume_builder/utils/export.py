"""Plain-text export of a resume.

The layout produced by :func:`export_to_text` is a fixed contract: header
and contact lines, then summary, work experience, education, skills,
projects and certifications, each section left out entirely when it has
nothing to show.
"""

from __future__ import annotations

import re
from pathlib import Path

from resume_builder.models.resume import Resume

__all__ = [
    "export_to_text",
    "resume_filename",
    "write_text_export",
]

_BULLET = "  • "

# Skill categories in export order with their labels.
_SKILL_LABELS = (
    ("technical", "Technical"),
    ("tools", "Tools"),
    ("soft", "Soft Skills"),
    ("languages", "Languages"),
)


def _sanitize_filename(name: str) -> str:
    """Replace characters that are invalid in filenames."""
    return re.sub(r'[<>:"/\\|?*]', "_", name)


def resume_filename(full_name: str, extension: str) -> str:
    """Return the download filename for a resume owned by *full_name*.

    Whitespace runs become underscores and nothing else is trimmed, so
    ``"John Smith Jr."`` gives ``John_Smith_Jr..pdf``. A blank or
    whitespace-only name falls back to ``resume``.

    Args:
        full_name: The person's full name.
        extension: File extension without the dot (``txt`` or ``pdf``).
    """
    if not full_name.strip():
        return f"resume.{extension}"
    base = _sanitize_filename(re.sub(r"\s+", "_", full_name))
    return f"{base}.{extension}"


def _heading(title: str) -> str:
    return f"{title}\n{'-' * len(title)}\n"


def _bullets(items: tuple[str, ...]) -> str:
    # Only truly empty strings are dropped here; whitespace-only bullets are
    # exported as typed.
    return "".join(f"{_BULLET}{item}\n" for item in items if item != "")


def _header(resume: Resume) -> str:
    info = resume.personal_info
    text = ""
    if info.full_name.strip():
        text += f"{info.full_name.upper()}\n"
        text += f"{'=' * len(info.full_name)}\n\n"

    contact = [info.email, info.phone, info.location, info.linkedin, info.website]
    lines = "".join(f"{value}\n" for value in contact if value)
    if lines:
        text += f"{lines}\n"
    return text


def _summary(resume: Resume) -> str:
    if not resume.professional_summary.strip():
        return ""
    return f"{_heading('PROFESSIONAL SUMMARY')}{resume.professional_summary}\n\n"


def _work_experience(resume: Resume) -> str:
    if not resume.work_experience:
        return ""
    text = _heading("WORK EXPERIENCE")
    for job in resume.work_experience:
        text += f"{job.position}\n"
        text += f"{job.company} | {job.location}\n"
        text += f"{job.start_date} - {job.end_label}\n"
        text += _bullets(job.achievements)
        text += "\n"
    return text


def _education(resume: Resume) -> str:
    if not resume.education:
        return ""
    text = _heading("EDUCATION")
    for edu in resume.education:
        text += f"{edu.degree} in {edu.field}\n"
        text += f"{edu.institution} | {edu.location}\n"
        text += f"{edu.graduation_date}\n"
        if edu.gpa:
            text += f"GPA: {edu.gpa}\n"
        text += "\n"
    return text


def _skills(resume: Resume) -> str:
    lines = [
        f"{label}: {', '.join(resume.skills.category(name))}\n"
        for name, label in _SKILL_LABELS
        if resume.skills.category(name)
    ]
    if not lines:
        return ""
    return _heading("SKILLS") + "".join(lines) + "\n"


def _projects(resume: Resume) -> str:
    if not resume.projects:
        return ""
    text = _heading("PROJECTS")
    for project in resume.projects:
        text += f"{project.name}\n"
        text += f"{project.description}\n"
        if project.technologies:
            text += f"Technologies: {', '.join(project.technologies)}\n"
        if project.link:
            text += f"Link: {project.link}\n"
        text += _bullets(project.highlights)
        text += "\n"
    return text


def _certifications(resume: Resume) -> str:
    if not resume.certifications:
        return ""
    text = _heading("CERTIFICATIONS")
    for cert in resume.certifications:
        text += f"{cert.name}\n"
        text += f"{cert.issuer} | {cert.date}"
        if cert.expiry_date:
            text += f" | Expires: {cert.expiry_date}"
        text += "\n\n"
    return text


def export_to_text(resume: Resume) -> str:
    """Serialize *resume* to the plain-text download format.

    Args:
        resume: The resume to export.

    Returns:
        The full text; an empty resume yields an empty string.
    """
    sections = (
        _header,
        _summary,
        _work_experience,
        _education,
        _skills,
        _projects,
        _certifications,
    )
    return "".join(section(resume) for section in sections)


def write_text_export(resume: Resume, directory: Path) -> Path:
    """Write the text export of *resume* into *directory*.

    Returns:
        Path to the created ``.txt`` file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    output_path = directory / resume_filename(resume.personal_info.full_name, "txt")
    output_path.write_text(export_to_text(resume), encoding="utf-8")
    return output_path
