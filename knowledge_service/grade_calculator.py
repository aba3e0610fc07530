"""
Grade calculation from enrollment metadata.

A student's profile stores the education stage and the year they entered it;
the current grade is derived from how many academic years have started since
then. The academic year begins on the first day of ``ACADEMIC_YEAR_START_MONTH``.
"""

from datetime import date
from typing import Any, Dict, Optional, Tuple

ACADEMIC_YEAR_START_MONTH = 9
SPRING_TERM_START_MONTH = 2

# stage -> (first grade, last grade)
STAGE_GRADE_RANGES: Dict[str, Tuple[int, int]] = {
    "junior_high": (7, 9),
    "senior_high": (10, 12),
}

GRADE_SEMESTER_LABELS: Dict[str, Tuple[int, int]] = {
    "七年级上": (7, 1),
    "七年级下": (7, 2),
    "八年级上": (8, 1),
    "八年级下": (8, 2),
    "九年级上": (9, 1),
    "九年级下": (9, 2),
    "高一上": (10, 1),
    "高一下": (10, 2),
    "高二上": (11, 1),
    "高二下": (11, 2),
    "高三上": (12, 1),
    "高三下": (12, 2),
}

_LABELS_BY_GRADE = {value: label for label, value in GRADE_SEMESTER_LABELS.items()}


def _coerce_year(value: Any) -> Optional[int]:
    """Accept ints and integral strings; everything else is not a year."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        # isdecimal() still admits non-ASCII digits such as "２０２４"; int() decides
        if not text.isdecimal():
            return None
        try:
            return int(text)
        except ValueError:
            return None
    return None


def academic_year(now: date, start_month: int = ACADEMIC_YEAR_START_MONTH) -> int:
    """Calendar year in which the academic year containing ``now`` began."""
    return now.year if now.month >= start_month else now.year - 1


def current_semester(now: date, start_month: int = ACADEMIC_YEAR_START_MONTH) -> int:
    """1 for the autumn term (start month through January), 2 for spring."""
    if SPRING_TERM_START_MONTH <= now.month < start_month:
        return 2
    return 1


def calculate_grade(
    stage: Optional[str],
    enrollment_year: Any,
    now: Optional[date] = None,
    start_month: int = ACADEMIC_YEAR_START_MONTH,
) -> Optional[int]:
    """
    Derive the current grade for a student.

    Args:
        stage: ``"junior_high"`` or ``"senior_high"``
        enrollment_year: Year the student entered the stage
        now: Reference date; defaults to today
        start_month: Month in which a new academic year begins

    Returns:
        Grade number (7-9 or 10-12), or None when the stage is unknown, the
        year is missing, or the student has graduated / not yet enrolled.
    """
    grade_range = STAGE_GRADE_RANGES.get(stage) if isinstance(stage, str) else None
    if grade_range is None:
        return None

    year = _coerce_year(enrollment_year)
    if year is None:
        return None

    if now is None:
        now = date.today()

    first_grade, last_grade = grade_range
    grade = first_grade + (academic_year(now, start_month) - year)
    if grade < first_grade or grade > last_grade:
        return None
    return grade


def grade_label(grade: int, semester: int) -> Optional[str]:
    """Curriculum label for a grade and semester, e.g. (7, 1) -> "七年级上"."""
    return _LABELS_BY_GRADE.get((grade, semester))


def parse_grade_label(label: str) -> Optional[Tuple[int, int]]:
    """Inverse of :func:`grade_label`."""
    return GRADE_SEMESTER_LABELS.get(label)
