"""
Curriculum catalog for canonical knowledge-point tags.

The catalog is built once per process from the static tables in
``math_data`` and ``subjects_data`` and is read-only afterwards. Traversal
order (subject order, then grade label, chapter, section) is stable, which the
tag normalizer relies on for first-match-wins alias resolution.
"""

from functools import lru_cache
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..grade_calculator import parse_grade_label
from ..models import ChapterSections, CurriculumEntry
from .math_data import MATH_CURRICULUM_DATA
from .subjects_data import (
    CHEMISTRY_CURRICULUM_DATA,
    ENGLISH_CURRICULUM_DATA,
    PHYSICS_CURRICULUM_DATA,
)

Curriculum = Dict[str, Tuple[ChapterSections, ...]]

# Catalog subjects in traversal order
CATALOG_SUBJECTS: Tuple[str, ...] = ("math", "english", "physics", "chemistry")

_RAW_CURRICULA: Dict[str, Mapping[str, Sequence[Any]]] = {
    "math": MATH_CURRICULUM_DATA,
    "english": ENGLISH_CURRICULUM_DATA,
    "physics": PHYSICS_CURRICULUM_DATA,
    "chemistry": CHEMISTRY_CURRICULUM_DATA,
}


def build_curriculum(subject: str, raw: Mapping[str, Sequence[Any]]) -> Curriculum:
    """Turn a ``label -> [(chapter, [(name, aliases), ...]), ...]`` table into entries."""
    curriculum: Curriculum = {}
    for label, chapters in raw.items():
        grade_semester = parse_grade_label(label)
        if grade_semester is None:
            raise ValueError(f"Unknown grade label in {subject} curriculum: {label!r}")
        grade, semester = grade_semester

        built_chapters = []
        for chapter, sections in chapters:
            entries = tuple(
                CurriculumEntry(
                    name=name,
                    grade=grade,
                    semester=semester,
                    chapter=chapter,
                    aliases=tuple(aliases),
                    subject=subject,
                )
                for name, aliases in sections
            )
            built_chapters.append(ChapterSections(chapter=chapter, sections=entries))
        curriculum[label] = tuple(built_chapters)
    return curriculum


class CurriculumCatalog:
    """Read-only, multi-subject catalog of canonical tags."""

    def __init__(self, curricula: Mapping[str, Curriculum]):
        self._curricula: Dict[str, Curriculum] = dict(curricula)
        self._by_name: Dict[str, Dict[str, CurriculumEntry]] = {}
        for subject, curriculum in self._curricula.items():
            index: Dict[str, CurriculumEntry] = {}
            for entry in self._iter_curriculum(curriculum):
                index.setdefault(entry.name, entry)
            self._by_name[subject] = index

    @staticmethod
    def _iter_curriculum(curriculum: Curriculum) -> Iterator[CurriculumEntry]:
        for chapters in curriculum.values():
            for chapter in chapters:
                yield from chapter.sections

    @property
    def subjects(self) -> List[str]:
        return list(self._curricula.keys())

    def iter_entries(self, subject: Optional[str] = None) -> Iterator[CurriculumEntry]:
        """Yield entries in traversal order, for one subject or all of them."""
        subjects = [subject] if subject is not None else self.subjects
        for name in subjects:
            curriculum = self._curricula.get(name)
            if curriculum:
                yield from self._iter_curriculum(curriculum)

    def get_curriculum(self, subject: str) -> Curriculum:
        """Full label -> chapters mapping; empty for unknown subjects."""
        return dict(self._curricula.get(subject, {}))

    def get_all_standard_tags(self) -> List[str]:
        return [entry.name for entry in self.iter_entries()]

    def get_subject_tags(self, subject: str) -> List[str]:
        return [entry.name for entry in self.iter_entries(subject)]

    def get_tags_by_grade(self, subject: str, grade: int, semester: Optional[int] = None) -> List[str]:
        return [
            entry.name
            for entry in self.iter_entries(subject)
            if entry.grade == grade and (semester is None or entry.semester == semester)
        ]

    def get_tags_by_chapter(self, subject: str, chapter_label: str) -> List[str]:
        return [entry.name for entry in self.iter_entries(subject) if entry.chapter == chapter_label]

    def get_tag_info(self, subject: str, name: str) -> Optional[CurriculumEntry]:
        return self._by_name.get(subject, {}).get(name)


@lru_cache(maxsize=1)
def get_catalog() -> CurriculumCatalog:
    """Process-wide catalog, built on first use."""
    return CurriculumCatalog(
        {subject: build_curriculum(subject, _RAW_CURRICULA[subject]) for subject in CATALOG_SUBJECTS}
    )


def get_all_standard_tags() -> List[str]:
    """Canonical tag names of every subject, in catalog traversal order."""
    return get_catalog().get_all_standard_tags()


def get_all_math_tags() -> List[str]:
    """All canonical math tags across grades and chapters."""
    return get_catalog().get_subject_tags("math")


def get_math_tags_by_grade(grade: int, semester: Optional[int] = None) -> List[str]:
    """Math tags taught in ``grade``, optionally limited to one semester."""
    return get_catalog().get_tags_by_grade("math", grade, semester)


def get_math_tags_by_chapter(chapter_label: str) -> List[str]:
    """Math tags of the chapter with exactly this label, e.g. "第1章 有理数"."""
    return get_catalog().get_tags_by_chapter("math", chapter_label)


def get_math_tag_info(name: str) -> Optional[CurriculumEntry]:
    """Metadata for a canonical math tag, or None."""
    return get_catalog().get_tag_info("math", name)


def get_math_curriculum() -> Curriculum:
    """The full math curriculum keyed by grade/semester label."""
    return get_catalog().get_curriculum("math")


def get_subject_tags(subject: str) -> List[str]:
    return get_catalog().get_subject_tags(subject)


def get_subject_curriculum(subject: str) -> Curriculum:
    return get_catalog().get_curriculum(subject)


def curriculum_to_dict(curriculum: Curriculum) -> Dict[str, List[Dict[str, Any]]]:
    """JSON-ready view of a curriculum."""
    return {label: [chapter.to_dict() for chapter in chapters] for label, chapters in curriculum.items()}
