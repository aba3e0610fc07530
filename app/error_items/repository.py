"""
Error item repository backed by a JSON file.

The file holds a list of item objects:
[
  {"id": str, "userId": str, "subject": str | null,
   "knowledgePoints": str | null, "createdAt": ISO8601, ...},
  ...
]
``knowledgePoints`` is JSON text of a string array, as the relational store
keeps it; this repository hands it over untouched.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ItemStoreError(Exception):
    """The item store could not be read."""


class ErrorItemRepository:
    """Read access to stored error items."""

    def __init__(self, items_file: Path):
        self.items_file = items_file

    def _load_items(self) -> List[Dict[str, Any]]:
        if not self.items_file.exists():
            return []
        try:
            with open(self.items_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ItemStoreError(f"Cannot read error items from {self.items_file}: {e}") from e

        if not isinstance(data, list):
            raise ItemStoreError(f"Error item file {self.items_file} does not contain a list")
        items = [item for item in data if isinstance(item, dict)]
        if len(items) != len(data):
            logger.warning(f"Skipped {len(data) - len(items)} malformed entries in {self.items_file}")
        return items

    def find_many(self, user_id: Optional[str] = None, subject: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get items matching the filter, oldest first.

        Args:
            user_id: Only items owned by this user
            subject: Only items of this subject code

        Returns:
            Matching item dictionaries in creation order; items sharing a
            timestamp keep their file order.
        """
        items = self._load_items()
        if user_id is not None:
            items = [item for item in items if item.get("userId") == user_id]
        if subject is not None:
            items = [item for item in items if item.get("subject") == subject]

        # sorted() is stable, so ties keep file order
        return sorted(items, key=lambda item: str(item.get("createdAt") or ""))
