from __future__ import annotations

from resume_builder.constants.action_verbs import ACTION_VERBS, IMPACT_PHRASES, WEAK_PHRASES

__all__ = [
    "ACTION_VERBS",
    "IMPACT_PHRASES",
    "WEAK_PHRASES",
]
