"""
Tags module for tag usage statistics and suggestions.
"""

from .models import TagStat, TagStatsResult
from .services import TagAggregator, compute_tag_stats, filter_suggestions
from .routes import create_tag_routes
from .factory import create_tags_module

__all__ = [
    'TagStat',
    'TagStatsResult',
    'TagAggregator',
    'compute_tag_stats',
    'filter_suggestions',
    'create_tag_routes',
    'create_tags_module',
]
