"""
Custom tag models and data structures.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# Subject codes in declaration order; flattening and stats follow this order
CUSTOM_TAG_SUBJECTS = ("math", "english", "physics", "chemistry", "other")

DEFAULT_CATEGORY = "default"


@dataclass
class CustomTag:
    """A user-defined knowledge-point tag."""
    name: str
    category: str = DEFAULT_CATEGORY

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {"name": self.name, "category": self.category}

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["CustomTag"]:
        """Decode one stored element.

        Legacy payloads store plain strings; current payloads store
        ``{"name", "category"}`` objects. Anything else is dropped.
        """
        if isinstance(raw, str):
            return cls(name=raw)
        if isinstance(raw, dict) and isinstance(raw.get("name"), str):
            category = raw.get("category")
            if not isinstance(category, str) or not category:
                category = DEFAULT_CATEGORY
            return cls(name=raw["name"], category=category)
        return None


CustomTagsData = Dict[str, List[CustomTag]]


def empty_custom_tags() -> CustomTagsData:
    """Default structure: every subject present, no tags."""
    return {subject: [] for subject in CUSTOM_TAG_SUBJECTS}


def migrate_custom_tags(raw: Any) -> CustomTagsData:
    """Build ``CustomTagsData`` from a decoded blob of any known vintage.

    Shape:
    {
      "math": [{"name": str, "category": str}, ...] | [str, ...],
      "english": ..., "physics": ..., "chemistry": ..., "other": ...
    }
    Unknown subjects are ignored and missing ones come back empty. A name
    repeated within one subject keeps its first occurrence.
    """
    data = empty_custom_tags()
    if not isinstance(raw, dict):
        return data

    for subject in CUSTOM_TAG_SUBJECTS:
        values = raw.get(subject)
        if not isinstance(values, list):
            continue
        seen = set()
        for value in values:
            tag = CustomTag.from_raw(value)
            if tag is None or tag.name in seen:
                continue
            seen.add(tag.name)
            data[subject].append(tag)
    return data


def custom_tags_to_dict(data: CustomTagsData) -> Dict[str, List[Dict[str, str]]]:
    """JSON-ready view of ``CustomTagsData``."""
    return {subject: [tag.to_dict() for tag in data.get(subject, [])] for subject in CUSTOM_TAG_SUBJECTS}
