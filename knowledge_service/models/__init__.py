"""
Models package for curriculum and analysis data.

This package contains the dataclass and Pydantic definitions used by the
knowledge tag engine, plus helpers for decoding stored tag arrays.
"""

from .curriculum_models import CurriculumEntry, ChapterSections
from .analysis_models import AnalysisResult
from .utils import safe_json_loads, parse_tag_array

__all__ = [
    # Curriculum models
    "CurriculumEntry",
    "ChapterSections",

    # Analysis models
    "AnalysisResult",

    # Utilities
    "safe_json_loads",
    "parse_tag_array",
]
