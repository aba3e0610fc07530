"""
Tag aggregation service for usage statistics and tag suggestions.
"""
import logging
from collections import Counter
from typing import Any, Callable, Dict, Iterable, List, Optional

from knowledge_service.curriculum import get_all_standard_tags
from knowledge_service.models import parse_tag_array

from .models import TagStat, TagStatsResult

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 20


def compute_tag_stats(items: Iterable[Dict[str, Any]]) -> TagStatsResult:
    """
    Count how often each tag appears across error items.

    Items whose ``knowledgePoints`` is missing or unparseable contribute no
    tags but still count toward ``total``. Stats are ordered by count,
    highest first; equal counts keep the order in which tags were first seen.
    """
    tag_counter: Counter = Counter()
    total = 0

    for item in items:
        total += 1
        for tag in parse_tag_array(item.get("knowledgePoints")):
            tag_counter[tag] += 1

    # Counter keeps insertion order and sorted() is stable
    ranked = sorted(tag_counter.items(), key=lambda pair: pair[1], reverse=True)
    return TagStatsResult(
        stats=[TagStat(tag=tag, count=count) for tag, count in ranked],
        total=total,
        unique_tags=len(tag_counter),
    )


def filter_suggestions(
    pool: Iterable[str],
    query: str,
    existing_tags: Iterable[str],
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[str]:
    """Deduplicate ``pool``, keep case-insensitive substring matches, drop existing tags."""
    needle = (query or "").lower()
    excluded = set(existing_tags or [])
    seen = set()
    suggestions: List[str] = []

    for tag in pool:
        if tag in seen:
            continue
        seen.add(tag)
        if tag in excluded or needle not in tag.lower():
            continue
        suggestions.append(tag)
        if len(suggestions) >= limit:
            break
    return suggestions


class TagAggregator:
    """Tag statistics and suggestions over stored items, the catalog and custom tags."""

    def __init__(
        self,
        item_repository,
        custom_tags_provider: Optional[Callable[[Optional[str]], List[str]]] = None,
        standard_tags_provider: Callable[[], List[str]] = get_all_standard_tags,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
    ):
        """
        Initialize TagAggregator.

        Args:
            item_repository: Object exposing ``find_many(user_id=...)``
            custom_tags_provider: Returns the flat custom tag list of a user
            standard_tags_provider: Returns the catalog's canonical tags
            suggestion_limit: Maximum number of suggestions returned
        """
        self.item_repository = item_repository
        self.custom_tags_provider = custom_tags_provider
        self.standard_tags_provider = standard_tags_provider
        self.suggestion_limit = suggestion_limit

    def get_tag_stats(self, user_id: Optional[str] = None) -> TagStatsResult:
        """Tag usage statistics for a user's items (all items when None)."""
        items = self.item_repository.find_many(user_id=user_id)
        result = compute_tag_stats(items)
        logger.debug(f"Computed tag stats: items={result.total}, unique_tags={result.unique_tags}")
        return result

    def get_used_tags(self, user_id: Optional[str] = None) -> List[str]:
        """Distinct tags used by stored items, in first-seen order."""
        used: Dict[str, None] = {}
        for item in self.item_repository.find_many(user_id=user_id):
            for tag in parse_tag_array(item.get("knowledgePoints")):
                used.setdefault(tag, None)
        return list(used)

    def get_tag_suggestions(
        self,
        query: str,
        existing_tags: Iterable[str] = (),
        user_id: Optional[str] = None,
    ) -> List[str]:
        """
        Suggest tags matching ``query``.

        The pool is catalog tags, then tags already used by the user's items,
        then the user's custom tags; each tag appears once.

        Args:
            query: Case-insensitive substring; empty matches everything
            existing_tags: Tags already attached, never suggested
            user_id: Whose items and custom tags to include

        Returns:
            At most ``suggestion_limit`` tags in pool order
        """
        pool: List[str] = list(self.standard_tags_provider())
        pool.extend(self.get_used_tags(user_id))
        if self.custom_tags_provider is not None:
            pool.extend(self.custom_tags_provider(user_id))

        return filter_suggestions(pool, query, existing_tags, self.suggestion_limit)
