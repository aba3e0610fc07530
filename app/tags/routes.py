"""
Tag routes for usage statistics and suggestions.
"""
import logging

from flask import Blueprint, jsonify, request

from .services import TagAggregator

logger = logging.getLogger(__name__)


def _current_user_id():
    """User ID from the ``uid`` cookie; None means all items."""
    uid = (request.cookies.get("uid") or "").strip()
    return uid or None


def create_tag_routes(tag_aggregator: TagAggregator) -> Blueprint:
    """Create tag routes blueprint."""
    bp = Blueprint('tags', __name__, url_prefix='/api/tags')

    @bp.route('/stats', methods=['GET'])
    def get_tag_stats():
        """Get tag usage frequency across the user's error items."""
        try:
            result = tag_aggregator.get_tag_stats(user_id=_current_user_id())
        except Exception as e:
            logger.error(f"Failed to get tag statistics: {e}", exc_info=True)
            return jsonify({"message": "Failed to get tag statistics"}), 500

        return jsonify(result.to_dict())

    @bp.route('/suggestions', methods=['GET'])
    def get_tag_suggestions():
        """
        Get tag suggestions for an input box.

        Query parameters:
            - q: Search term (case-insensitive substring, default empty)
            - exclude: Tag already attached; may be repeated
        """
        query = request.args.get('q', '')
        existing_tags = request.args.getlist('exclude')

        try:
            suggestions = tag_aggregator.get_tag_suggestions(
                query,
                existing_tags,
                user_id=_current_user_id()
            )
        except Exception as e:
            logger.error(f"Failed to get tag suggestions: {e}", exc_info=True)
            return jsonify({"message": "Failed to get tag suggestions"}), 500

        return jsonify({
            "suggestions": suggestions,
            "total": len(suggestions)
        })

    return bp
