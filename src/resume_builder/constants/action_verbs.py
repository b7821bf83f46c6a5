"""Reference word lists used by the suggestion analyzer.

``ACTION_VERBS`` is also what the editor's verb browser shows, so its order
matters: the first five verbs are quoted as examples in suggestions.
"""

from __future__ import annotations

__all__ = [
    "ACTION_VERBS",
    "IMPACT_PHRASES",
    "WEAK_PHRASES",
]

ACTION_VERBS: tuple[str, ...] = (
    "Achieved",
    "Accelerated",
    "Accomplished",
    "Advised",
    "Analyzed",
    "Built",
    "Collaborated",
    "Created",
    "Decreased",
    "Delivered",
    "Designed",
    "Developed",
    "Directed",
    "Drove",
    "Enhanced",
    "Established",
    "Exceeded",
    "Executed",
    "Expanded",
    "Generated",
    "Grew",
    "Implemented",
    "Improved",
    "Increased",
    "Initiated",
    "Launched",
    "Led",
    "Managed",
    "Optimized",
    "Orchestrated",
    "Reduced",
    "Redesigned",
    "Resolved",
    "Spearheaded",
    "Streamlined",
    "Strengthened",
    "Transformed",
)

WEAK_PHRASES: tuple[str, ...] = (
    "responsible for",
    "worked on",
    "helped with",
    "duties included",
)

# Appended by ``improve_achievement`` when a bullet has no number in it.
IMPACT_PHRASES: tuple[str, ...] = (
    " resulting in 25% efficiency improvement",
    " impacting 500+ users",
    " saving 15 hours per week",
    " increasing revenue by $50K",
    " reducing costs by 30%",
)
