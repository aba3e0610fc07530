"""
Factory for creating the custom tags module.
"""
from pathlib import Path

from .services import CustomTagService, CUSTOM_TAGS_STORAGE_KEY
from .routes import create_custom_tag_routes


def create_custom_tags_module(
    user_data_dir: Path,
    storage_key: str = CUSTOM_TAGS_STORAGE_KEY
) -> dict:
    """Create custom tags module with service and routes.

    Args:
        user_data_dir: Directory holding the per-user JSON files
        storage_key: Key under which the custom tag blob is stored

    Returns:
        Dictionary containing the service and blueprint
    """
    # The directory is created on first write
    service = CustomTagService(user_data_dir, storage_key)
    blueprint = create_custom_tag_routes(service)

    return {
        "service": service,
        "blueprint": blueprint
    }
