"""
Tests for grade and semester derivation.
"""
from datetime import date

import pytest

from knowledge_service.grade_calculator import (
    academic_year,
    calculate_grade,
    current_semester,
    grade_label,
    parse_grade_label,
)


class TestAcademicCalendar:
    """Academic year and semester boundaries."""

    @pytest.mark.parametrize("now,expected", [
        (date(2025, 8, 31), 2024),
        (date(2025, 9, 1), 2025),
        (date(2026, 1, 15), 2025),
    ])
    def test_academic_year(self, now, expected):
        assert academic_year(now) == expected

    @pytest.mark.parametrize("now,expected", [
        (date(2025, 9, 1), 1),
        (date(2025, 12, 31), 1),
        (date(2026, 1, 20), 1),
        (date(2026, 2, 1), 2),
        (date(2026, 8, 31), 2),
    ])
    def test_current_semester(self, now, expected):
        assert current_semester(now) == expected

    def test_custom_start_month(self):
        assert academic_year(date(2025, 8, 15), start_month=8) == 2025
        assert current_semester(date(2025, 8, 15), start_month=8) == 1


class TestCalculateGrade:
    """Grade derivation from stage and enrollment year."""

    def test_junior_high_progression(self):
        assert calculate_grade("junior_high", 2024, date(2024, 9, 1)) == 7
        assert calculate_grade("junior_high", 2024, date(2025, 3, 1)) == 7
        assert calculate_grade("junior_high", 2024, date(2025, 9, 1)) == 8
        assert calculate_grade("junior_high", 2024, date(2026, 10, 17)) == 9

    def test_senior_high_progression(self):
        assert calculate_grade("senior_high", 2025, date(2025, 10, 1)) == 10
        assert calculate_grade("senior_high", 2023, date(2026, 5, 1)) == 12

    def test_graduated_is_none(self):
        assert calculate_grade("junior_high", 2021, date(2026, 10, 17)) is None
        assert calculate_grade("senior_high", 2022, date(2026, 10, 17)) is None

    def test_not_yet_enrolled_is_none(self):
        assert calculate_grade("junior_high", 2027, date(2026, 10, 17)) is None
        # Enrolled this calendar year but the academic year has not started
        assert calculate_grade("junior_high", 2026, date(2026, 6, 1)) is None

    @pytest.mark.parametrize("stage", ["bogus_stage", "", None, "primary"])
    def test_unknown_stage(self, stage):
        assert calculate_grade(stage, 2024, date(2026, 10, 17)) is None

    @pytest.mark.parametrize("year", [None, True, "abc", 2024.5, "", "²", "2024²", "-2024", "20 24"])
    def test_invalid_year(self, year):
        assert calculate_grade("junior_high", year, date(2026, 10, 17)) is None

    def test_year_as_string(self):
        assert calculate_grade("junior_high", "2025", date(2026, 10, 17)) == 8

    def test_full_width_digits(self):
        assert calculate_grade("junior_high", "２０２５", date(2026, 10, 17)) == 8

    @pytest.mark.parametrize("year", range(2015, 2030))
    def test_results_stay_in_stage_range(self, year):
        now = date(2026, 10, 17)
        assert calculate_grade("junior_high", year, now) in {7, 8, 9, None}
        assert calculate_grade("senior_high", year, now) in {10, 11, 12, None}

    def test_defaults_to_today(self):
        today = date.today()
        assert calculate_grade("junior_high", academic_year(today)) == 7


class TestGradeLabels:
    """Grade/semester label conversion."""

    def test_grade_label(self):
        assert grade_label(7, 1) == "七年级上"
        assert grade_label(12, 2) == "高三下"
        assert grade_label(6, 1) is None

    def test_parse_grade_label(self):
        assert parse_grade_label("高二下") == (11, 2)
        assert parse_grade_label("大一上") is None
