"""Heuristic writing suggestions for a resume.

Every function here is advisory: it inspects part of a resume and returns
human-readable tips. Nothing is validated or rejected, and empty input
simply yields the generic "add more" advice.
"""

from __future__ import annotations

import random
import re
from collections.abc import Iterable

from resume_builder.constants.action_verbs import ACTION_VERBS, IMPACT_PHRASES, WEAK_PHRASES
from resume_builder.models.resume import Resume, Skills, WorkExperience

__all__ = [
    "analyze_resume",
    "analyze_skills",
    "analyze_summary",
    "analyze_work_experience",
    "generate_summary_template",
    "improve_achievement",
    "starts_with_action_verb",
]

_DIGIT = re.compile(r"\d", re.ASCII)

_SUMMARY_MIN_LENGTH = 50
_SUMMARY_MAX_LENGTH = 300
_MIN_ACHIEVEMENTS = 3
_ACHIEVEMENT_MIN_LENGTH = 20
_PREFIX_LENGTH = 30
_MIN_SKILLS = 5
_MAX_SKILLS = 20

_SUMMARY_TEMPLATES = (
    "Results-driven {role} with {years} years of experience delivering high-impact "
    "solutions. Proven track record of [key achievement]. Skilled in [key skills] with "
    "expertise in [specialty area]. Seeking to leverage [strength] to drive [outcome] at "
    "[target company type].",
    "Dynamic {role} specializing in [specialty] with {years}+ years of progressive "
    "experience. Successfully [major achievement] resulting in [quantifiable impact]. "
    "Expert in [key technologies/skills] with strong focus on [value proposition]. "
    "Committed to [professional goal].",
    "Accomplished {role} with expertise in [domain] and {years} years driving [outcome]. "
    "Led [initiative] that achieved [result]. Proficient in [skills/tools] with "
    "demonstrated ability to [strength]. Passionate about [area of interest] and "
    "continuous improvement.",
)


def _has_digit(text: str) -> bool:
    return _DIGIT.search(text) is not None


def starts_with_action_verb(text: str) -> bool:
    """Return True if *text* opens with one of :data:`ACTION_VERBS`."""
    lowered = text.strip().lower()
    return any(lowered.startswith(verb.lower()) for verb in ACTION_VERBS)


def analyze_summary(summary: str) -> list[str]:
    """Return tips for the professional summary.

    The four checks are independent, so any combination may fire.
    """
    suggestions: list[str] = []

    if len(summary) < _SUMMARY_MIN_LENGTH:
        suggestions.append(
            "Professional summary is too short. Aim for 3-4 compelling sentences that "
            "highlight your key achievements and value proposition."
        )

    if len(summary) > _SUMMARY_MAX_LENGTH:
        suggestions.append(
            "Professional summary is too long. Keep it concise and impactful (150-250 words)."
        )

    if not _has_digit(summary):
        suggestions.append(
            'Add quantifiable metrics to your summary (e.g., "increased sales by 30%").'
        )

    lowered = summary.lower()
    found = [phrase for phrase in WEAK_PHRASES if phrase in lowered]
    if found:
        joined = '", "'.join(found)
        suggestions.append(f'Replace weak phrases like "{joined}" with strong action verbs.')

    return suggestions


def analyze_work_experience(entries: Iterable[WorkExperience]) -> list[str]:
    """Return tips for each work entry and each of its achievements.

    Messages follow entry order, then achievement order, then the brevity,
    quantification and action-verb checks for each achievement.
    """
    suggestions: list[str] = []
    examples = ", ".join(ACTION_VERBS[:5])

    for job in entries:
        if len(job.achievements) < _MIN_ACHIEVEMENTS:
            suggestions.append(
                f"Add more bullet points to {job.position} at {job.company} "
                "(aim for 3-5 achievements per role)."
            )

        for index, achievement in enumerate(job.achievements, start=1):
            prefix = achievement[:_PREFIX_LENGTH]

            if len(achievement) < _ACHIEVEMENT_MIN_LENGTH:
                suggestions.append(
                    f'Bullet point {index} in {job.position} ("{prefix}...") is too brief. '
                    "Add more details and context."
                )

            if not _has_digit(achievement):
                suggestions.append(
                    f'Add quantifiable results to "{prefix}..." '
                    "(e.g., percentages, dollar amounts, time saved)."
                )

            if not starts_with_action_verb(achievement):
                suggestions.append(
                    f'Start "{prefix}..." with a strong action verb ({examples}, etc.).'
                )

    return suggestions


def analyze_skills(skills: Skills) -> list[str]:
    """Return tips about the number and mix of skills.

    Only technical skills and tools count towards the total.
    """
    suggestions: list[str] = []
    total = len(skills.category("technical")) + len(skills.category("tools"))

    if total < _MIN_SKILLS:
        suggestions.append("Add more technical skills and tools relevant to your target role.")

    if total > _MAX_SKILLS:
        suggestions.append(
            "Too many skills listed. Focus on the most relevant 10-15 skills for your "
            "target role."
        )

    if not skills.category("soft"):
        suggestions.append(
            "Consider adding 3-4 key soft skills (e.g., Leadership, Communication, "
            "Problem-solving)."
        )

    return suggestions


def analyze_resume(resume: Resume) -> list[str]:
    """Run every analysis: summary, then work experience, then skills."""
    return [
        *analyze_summary(resume.professional_summary),
        *analyze_work_experience(resume.work_experience),
        *analyze_skills(resume.skills),
    ]


def improve_achievement(achievement: str, rng: random.Random | None = None) -> str:
    """Return a stronger rewrite of *achievement*.

    A random action verb is prepended when the bullet does not start with
    one, and a sample quantified outcome is appended when it has no number.
    The placeholders are meant to be edited by the user.
    """
    rng = rng or random.Random()
    improved = achievement

    if not starts_with_action_verb(improved):
        improved = f"{rng.choice(ACTION_VERBS)} {improved}"

    if not _has_digit(improved):
        improved += rng.choice(IMPACT_PHRASES)

    return improved


def generate_summary_template(
    role: str,
    years_experience: int | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return a fill-in-the-blanks summary for *role*."""
    rng = rng or random.Random()
    years = years_experience or "X"
    return rng.choice(_SUMMARY_TEMPLATES).format(role=role, years=years)
