"""
Custom tag routes for managing user-defined knowledge-point tags.
"""
import logging

from flask import Blueprint, jsonify, request, Response

from .models import DEFAULT_CATEGORY, custom_tags_to_dict
from .services import CustomTagService

logger = logging.getLogger(__name__)


def create_custom_tag_routes(custom_tag_service: CustomTagService) -> Blueprint:
    """Create custom tag routes blueprint."""
    bp = Blueprint('custom_tags', __name__, url_prefix='/api/custom-tags')

    @bp.route('', methods=['GET'])
    def list_custom_tags():
        """Get all custom tags of the current user, grouped by subject."""
        try:
            store = custom_tag_service.get_store()
            return jsonify(custom_tags_to_dict(store.get_custom_tags()))
        except Exception as e:
            logger.error(f"Failed to get custom tags: {e}", exc_info=True)
            return jsonify({"message": "Failed to get custom tags"}), 500

    @bp.route('', methods=['POST'])
    def add_custom_tag():
        """
        Add a custom tag.

        JSON body:
            - subject: math | english | physics | chemistry | other
            - name: Tag name (trimmed)
            - category: Optional grouping, defaults to "default"
        """
        payload = request.get_json(silent=True) or {}
        subject = payload.get("subject", "")
        name = payload.get("name", "")
        category = payload.get("category") or DEFAULT_CATEGORY

        try:
            added = custom_tag_service.get_store().add_custom_tag(subject, name, category)
        except Exception as e:
            logger.error(f"Failed to add custom tag: {e}", exc_info=True)
            return jsonify({"message": "Failed to add custom tag"}), 500

        if not added:
            return jsonify({"status": "rejected", "message": "Tag is empty, duplicated or has an unknown subject"}), 409
        return jsonify({"status": "ok", "tag": {"name": name.strip(), "category": category}}), 201

    @bp.route('/<subject>/<path:name>', methods=['DELETE'])
    def remove_custom_tag(subject, name):
        """Remove a custom tag from a subject."""
        try:
            removed = custom_tag_service.get_store().remove_custom_tag(subject, name)
        except Exception as e:
            logger.error(f"Failed to remove custom tag: {e}", exc_info=True)
            return jsonify({"message": "Failed to remove custom tag"}), 500

        if not removed:
            return jsonify({"status": "not_found"}), 404
        return jsonify({"status": "ok"})

    @bp.route('/export', methods=['GET'])
    def export_custom_tags():
        """Download all custom tags as JSON."""
        try:
            exported = custom_tag_service.get_store().export_custom_tags()
        except Exception as e:
            logger.error(f"Failed to export custom tags: {e}", exc_info=True)
            return jsonify({"message": "Failed to export custom tags"}), 500

        response = Response(exported, mimetype="application/json")
        response.headers['Content-Disposition'] = 'attachment; filename=custom_tags.json'
        return response

    @bp.route('/import', methods=['POST'])
    def import_custom_tags():
        """Replace all custom tags with an exported JSON document (raw request body)."""
        json_text = request.get_data(as_text=True)
        try:
            imported = custom_tag_service.get_store().import_custom_tags(json_text)
        except Exception as e:
            logger.error(f"Failed to import custom tags: {e}", exc_info=True)
            return jsonify({"message": "Failed to import custom tags"}), 500

        if not imported:
            return jsonify({"status": "invalid", "message": "Invalid custom tag data"}), 400
        return jsonify({"status": "ok"})

    @bp.route('/clear', methods=['POST'])
    def clear_custom_tags():
        """Delete all custom tags of the current user."""
        try:
            custom_tag_service.get_store().clear_custom_tags()
        except Exception as e:
            logger.error(f"Failed to clear custom tags: {e}", exc_info=True)
            return jsonify({"message": "Failed to clear custom tags"}), 500
        return jsonify({"status": "ok"})

    @bp.route('/stats', methods=['GET'])
    def custom_tag_stats():
        """Count custom tags per subject."""
        try:
            return jsonify(custom_tag_service.get_store().get_custom_tags_stats())
        except Exception as e:
            logger.error(f"Failed to get custom tag stats: {e}", exc_info=True)
            return jsonify({"message": "Failed to get custom tag stats"}), 500

    return bp
