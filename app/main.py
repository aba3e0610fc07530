import argparse
import sys
from pathlib import Path
from typing import Optional

# Import configuration management
sys.path.append(str(Path(__file__).parent.parent))
from config_manager import ConfigManager, TagsConfig

from flask import Flask, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix

from knowledge_service.logging_config import get_logger, setup_logging

from app.analysis.factory import create_analysis_module
from app.curriculum.factory import create_curriculum_module
from app.custom_tags.factory import create_custom_tags_module
from app.custom_tags.services import ANONYMOUS_UID
from app.error_items import ErrorItemRepository
from app.tags.factory import create_tags_module

logger = get_logger(__name__)

BASE_DIR = Path(__file__).parent.parent


def create_app(
    user_data_dir: Path,
    error_items_file: Path,
    tags_config: TagsConfig,
) -> Flask:
    """
    Build the Flask application with all tag subsystems registered.

    Args:
        user_data_dir: Directory of per-user JSON files (custom tags live here)
        error_items_file: JSON file holding the stored error items
        tags_config: Suggestion limit, academic calendar and storage key settings
    """
    flask_app = Flask(__name__)
    flask_app.wsgi_app = ProxyFix(
        flask_app.wsgi_app,
        x_proto=1,     # trust 1 hop for X-Forwarded-Proto
        x_host=1,      # trust 1 hop for X-Forwarded-Host
        x_prefix=1)    # trust 1 hop for X-Forwarded-Prefix

    # Tag names are mostly Chinese; keep them readable and keep catalog order
    flask_app.json.ensure_ascii = False
    flask_app.json.sort_keys = False

    custom_tags_module = create_custom_tags_module(
        user_data_dir=user_data_dir,
        storage_key=tags_config.custom_tags_storage_key
    )
    custom_tag_service = custom_tags_module["service"]

    def custom_tags_for(uid: Optional[str]):
        return custom_tag_service.get_store(uid or ANONYMOUS_UID).get_all_custom_tags_flat()

    tags_module = create_tags_module(
        item_repository=ErrorItemRepository(error_items_file),
        custom_tags_provider=custom_tags_for,
        suggestion_limit=tags_config.suggestion_limit
    )

    curriculum_module = create_curriculum_module(
        academic_year_start_month=tags_config.academic_year_start_month
    )

    analysis_module = create_analysis_module()

    # Register blueprints
    flask_app.register_blueprint(custom_tags_module["blueprint"])
    flask_app.register_blueprint(tags_module["blueprint"])
    flask_app.register_blueprint(curriculum_module["blueprint"])
    flask_app.register_blueprint(analysis_module["blueprint"])

    flask_app.extensions["tag_modules"] = {
        "custom_tags": custom_tags_module,
        "tags": tags_module,
        "curriculum": curriculum_module,
        "analysis": analysis_module,
    }

    @flask_app.get("/actuator/health")
    def actuator_health():
        """Health check endpoint for monitoring tools and cloud platforms."""
        return jsonify({
            "status": "UP",
            "service": "wrong-notebook-tags"
        }), 200

    return flask_app


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

config_manager = ConfigManager()
app_config = config_manager.get_app_config()
paths_config = config_manager.get_paths_config()
tags_config = config_manager.get_tags_config()

USER_DATA_DIR = BASE_DIR / paths_config.user_data_dir
ERROR_ITEMS_FILE = BASE_DIR / paths_config.error_items_file

app = create_app(
    user_data_dir=USER_DATA_DIR,
    error_items_file=ERROR_ITEMS_FILE,
    tags_config=tags_config
)

# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Flask application for knowledge tag services")
    parser.add_argument("--port", type=int, help="Port to run the server on")
    parser.add_argument("--host", type=str, help="Host to bind the server to")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    # Override configuration with command line arguments
    if args.port:
        app_config.port = args.port
    if args.host:
        app_config.host = args.host
    if args.debug:
        app_config.debug = args.debug

    setup_logging(debug=app_config.debug)
    logger.info(f"Serving error items from {ERROR_ITEMS_FILE.resolve()}")
    logger.info(f"User data directory: {USER_DATA_DIR.resolve()}")
    logger.info(f"Suggestion limit: {tags_config.suggestion_limit}")
    logger.info(f"Server: {app_config.host}:{app_config.port}")
    app.run(
        host=app_config.host,
        port=app_config.port,
        debug=app_config.debug
    )
