"""
Analysis routes for normalizing AI extraction output.
"""
from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from knowledge_service.models import AnalysisResult

from .services import AnalysisNormalizer


def create_analysis_routes(normalizer: AnalysisNormalizer) -> Blueprint:
    """Create analysis routes blueprint."""
    bp = Blueprint('analysis', __name__, url_prefix='/api/analysis')

    @bp.route('/normalize', methods=['POST'])
    def normalize_analysis():
        """Normalize the subject and knowledge points of one analysis result."""
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"message": "Expected a JSON object"}), 400

        try:
            result = AnalysisResult.model_validate(payload)
        except ValidationError as e:
            return jsonify({"message": "Invalid analysis result", "errors": e.errors(include_url=False, include_context=False)}), 400

        return jsonify(normalizer.normalize(result))

    return bp
