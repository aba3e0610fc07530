# Knowledge service package for curriculum tags and tag normalization

from .curriculum import (
    CurriculumCatalog,
    get_catalog,
    get_all_standard_tags,
    get_all_math_tags,
    get_math_tags_by_grade,
    get_math_tags_by_chapter,
    get_math_tag_info,
    get_math_curriculum,
)
from .tag_normalizer import normalize_tag, normalize_tags, is_catalog_tag
from .grade_calculator import (
    calculate_grade,
    current_semester,
    grade_label,
)
from .subject_inference import infer_subject_from_name
from .logging_config import (
    setup_logging,
    stop_logging,
    get_logger,
    ThreadSafeLoggingConfig,
)

__all__ = [
    "CurriculumCatalog",
    "get_catalog",
    "get_all_standard_tags",
    "get_all_math_tags",
    "get_math_tags_by_grade",
    "get_math_tags_by_chapter",
    "get_math_tag_info",
    "get_math_curriculum",
    "normalize_tag",
    "normalize_tags",
    "is_catalog_tag",
    "calculate_grade",
    "current_semester",
    "grade_label",
    "infer_subject_from_name",
    "setup_logging",
    "stop_logging",
    "get_logger",
    "ThreadSafeLoggingConfig",
]
