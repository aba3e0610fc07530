"""
Curriculum data models.

This module contains the immutable dataclasses that make up a subject's
curriculum catalog: grade label -> chapters -> sections (canonical tags).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class CurriculumEntry:
    """A canonical knowledge-point tag and where it sits in the curriculum."""
    name: str
    grade: int
    semester: int       # 1 = 上 (autumn term), 2 = 下 (spring term)
    chapter: str
    aliases: Tuple[str, ...] = ()
    subject: Optional[str] = None

    def matches(self, text: str) -> bool:
        """Exact match against the canonical name or one of the aliases."""
        return text == self.name or text in self.aliases

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "grade": self.grade,
            "semester": self.semester,
            "chapter": self.chapter,
            "aliases": list(self.aliases),
        }


@dataclass(frozen=True)
class ChapterSections:
    """One chapter of a grade label with its ordered sections."""
    chapter: str
    sections: Tuple[CurriculumEntry, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chapter": self.chapter,
            "sections": [entry.to_dict() for entry in self.sections],
        }
