"""
Curriculum catalog package.
"""

from .catalog import (
    CATALOG_SUBJECTS,
    CurriculumCatalog,
    build_curriculum,
    curriculum_to_dict,
    get_all_math_tags,
    get_all_standard_tags,
    get_catalog,
    get_math_curriculum,
    get_math_tag_info,
    get_math_tags_by_chapter,
    get_math_tags_by_grade,
    get_subject_curriculum,
    get_subject_tags,
)

__all__ = [
    "CATALOG_SUBJECTS",
    "CurriculumCatalog",
    "build_curriculum",
    "curriculum_to_dict",
    "get_all_math_tags",
    "get_all_standard_tags",
    "get_catalog",
    "get_math_curriculum",
    "get_math_tag_info",
    "get_math_tags_by_chapter",
    "get_math_tags_by_grade",
    "get_subject_curriculum",
    "get_subject_tags",
]
