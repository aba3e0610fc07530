"""
Curriculum routes for browsing catalog tags and deriving grades.
"""
from datetime import date

from flask import Blueprint, jsonify, request

from knowledge_service.curriculum import (
    CATALOG_SUBJECTS,
    curriculum_to_dict,
    get_math_curriculum,
    get_math_tag_info,
    get_math_tags_by_chapter,
    get_math_tags_by_grade,
    get_all_math_tags,
    get_subject_curriculum,
)
from knowledge_service.grade_calculator import calculate_grade, current_semester, grade_label


def create_curriculum_routes(academic_year_start_month: int = 9) -> Blueprint:
    """Create curriculum routes blueprint."""
    bp = Blueprint('curriculum', __name__, url_prefix='/api/curriculum')

    @bp.route('/math', methods=['GET'])
    def math_curriculum():
        """Full math curriculum keyed by grade/semester label."""
        return jsonify(curriculum_to_dict(get_math_curriculum()))

    @bp.route('/<subject>', methods=['GET'])
    def subject_curriculum(subject):
        """Curriculum of any catalog subject (english, physics, chemistry, math)."""
        if subject not in CATALOG_SUBJECTS:
            return jsonify({"message": "Unknown subject"}), 404
        return jsonify(curriculum_to_dict(get_subject_curriculum(subject)))

    @bp.route('/math/tags', methods=['GET'])
    def math_tags():
        """
        List canonical math tags.

        Query parameters:
            - chapter: Exact chapter label, e.g. "第1章 有理数"
            - grade: Grade number (7-12)
            - semester: 1 or 2, only used together with grade
        """
        chapter = request.args.get('chapter')
        grade = request.args.get('grade', type=int)
        semester = request.args.get('semester', type=int)

        if chapter:
            tags = get_math_tags_by_chapter(chapter)
        elif grade is not None:
            tags = get_math_tags_by_grade(grade, semester if semester in (1, 2) else None)
        else:
            tags = get_all_math_tags()

        return jsonify({"tags": tags, "total": len(tags)})

    @bp.route('/math/tags/<path:name>', methods=['GET'])
    def math_tag_info(name):
        """Metadata of one canonical math tag."""
        entry = get_math_tag_info(name)
        if entry is None:
            return jsonify({"message": "Tag not found"}), 404
        return jsonify(entry.to_dict())

    @bp.route('/grade', methods=['GET'])
    def current_grade():
        """
        Derive the student's current grade.

        Query parameters:
            - stage: junior_high | senior_high
            - enrollmentYear: Year the student entered the stage
        """
        stage = request.args.get('stage')
        enrollment_year = request.args.get('enrollmentYear')

        today = date.today()
        grade = calculate_grade(stage, enrollment_year, today, academic_year_start_month)
        semester = current_semester(today, academic_year_start_month)

        return jsonify({
            "grade": grade,
            "semester": semester,
            "label": grade_label(grade, semester) if grade is not None else None
        })

    return bp
