"""Route handlers for the API."""

from resume_builder.api.routes import auth, health, resumes, suggestions

__all__ = [
    "auth",
    "health",
    "resumes",
    "suggestions",
]
