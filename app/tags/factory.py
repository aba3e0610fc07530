"""
Factory for creating the tags module.
"""
from typing import Callable, List, Optional

from .services import TagAggregator, DEFAULT_SUGGESTION_LIMIT
from .routes import create_tag_routes


def create_tags_module(
    item_repository,
    custom_tags_provider: Optional[Callable[[Optional[str]], List[str]]] = None,
    suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
) -> dict:
    """
    Create the tags module with all its components.

    Args:
        item_repository: ErrorItemRepository supplying stored items
        custom_tags_provider: Returns a user's flat custom tag list
        suggestion_limit: Maximum number of suggestions per request

    Returns:
        Dictionary containing:
            - service: TagAggregator instance
            - blueprint: Flask blueprint for routes
    """
    service = TagAggregator(
        item_repository,
        custom_tags_provider=custom_tags_provider,
        suggestion_limit=suggestion_limit
    )
    blueprint = create_tag_routes(service)

    return {
        "service": service,
        "blueprint": blueprint
    }
