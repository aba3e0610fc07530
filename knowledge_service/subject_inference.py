"""
Subject inference from free-text subject names.
"""

from typing import Optional

# subject code -> keywords, checked in order; matching is case-insensitive substring
SUBJECT_KEYWORDS = (
    ("math", ("数学", "math")),
    ("physics", ("物理", "physics")),
    ("chemistry", ("化学", "chemistry")),
    ("english", ("英语", "english")),
)


def infer_subject_from_name(name: Optional[str]) -> Optional[str]:
    """Map a subject name such as "高等数学" or "Physics" to its subject code."""
    if not name:
        return None
    lowered = name.lower()
    for code, keywords in SUBJECT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return code
    return None
