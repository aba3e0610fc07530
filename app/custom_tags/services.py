"""
Custom tag services: CRUD, import/export and stats over one persisted blob.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from flask import request

from .models import (
    CUSTOM_TAG_SUBJECTS,
    DEFAULT_CATEGORY,
    CustomTag,
    CustomTagsData,
    custom_tags_to_dict,
    empty_custom_tags,
    migrate_custom_tags,
)
from .store import JsonFileKeyValueStore, KeyValueStore, is_safe_uid

logger = logging.getLogger(__name__)

CUSTOM_TAGS_STORAGE_KEY = "wrongnotebook_custom_tags"
ANONYMOUS_UID = "anonymous"


class CustomTagStore:
    """User-defined tags per subject, persisted as a single JSON blob.

    Reads never fail on bad data: a missing or corrupt blob reads as the
    empty structure. Write failures of the underlying store propagate.
    Read-modify-write is last-write-wins.
    """

    def __init__(self, kv_store: KeyValueStore, storage_key: str = CUSTOM_TAGS_STORAGE_KEY):
        self.kv_store = kv_store
        self.storage_key = storage_key

    def _save(self, data: CustomTagsData) -> None:
        self.kv_store.set(self.storage_key, json.dumps(custom_tags_to_dict(data), ensure_ascii=False))

    def get_custom_tags(self) -> CustomTagsData:
        """Load all custom tags, upgrading legacy string lists on the fly."""
        stored = self.kv_store.get(self.storage_key)
        if not stored:
            return empty_custom_tags()
        try:
            raw = json.loads(stored)
        except (TypeError, ValueError) as e:
            logger.warning(f"Custom tag blob is not valid JSON, using empty tags: {e}")
            return empty_custom_tags()
        return migrate_custom_tags(raw)

    def add_custom_tag(self, subject: str, name: str, category: str = DEFAULT_CATEGORY) -> bool:
        """Append a tag; False for blank names, duplicates or unknown subjects."""
        if subject not in CUSTOM_TAG_SUBJECTS or not isinstance(name, str):
            return False
        trimmed = name.strip()
        if not trimmed:
            return False

        data = self.get_custom_tags()
        if any(tag.name == trimmed for tag in data[subject]):
            return False

        data[subject].append(CustomTag(name=trimmed, category=category or DEFAULT_CATEGORY))
        self._save(data)
        return True

    def remove_custom_tag(self, subject: str, name: str) -> bool:
        """Remove the first tag named ``name``; False when there is none."""
        data = self.get_custom_tags()
        tags = data.get(subject)
        if not tags:
            return False
        for index, tag in enumerate(tags):
            if tag.name == name:
                del tags[index]
                self._save(data)
                return True
        return False

    def get_all_custom_tags_flat(self) -> List[str]:
        """Every tag name in subject order; duplicates across subjects are kept."""
        data = self.get_custom_tags()
        return [tag.name for subject in CUSTOM_TAG_SUBJECTS for tag in data[subject]]

    def is_custom_tag(self, name: str) -> bool:
        return name in self.get_all_custom_tags_flat()

    def export_custom_tags(self) -> str:
        return json.dumps(custom_tags_to_dict(self.get_custom_tags()), ensure_ascii=False, indent=2)

    def import_custom_tags(self, json_text: str) -> bool:
        """Replace all tags with an exported blob; False leaves state untouched."""
        try:
            raw = json.loads(json_text)
        except (TypeError, ValueError) as e:
            logger.info(f"Rejected custom tag import: {e}")
            return False
        if not isinstance(raw, dict):
            logger.info("Rejected custom tag import: payload is not an object")
            return False

        self._save(migrate_custom_tags(raw))
        return True

    def clear_custom_tags(self) -> None:
        self._save(empty_custom_tags())

    def get_custom_tags_stats(self) -> Dict[str, int]:
        """Tag count per subject plus ``total``."""
        data = self.get_custom_tags()
        stats = {subject: len(data[subject]) for subject in CUSTOM_TAG_SUBJECTS}
        stats["total"] = sum(stats.values())
        return stats


class CustomTagService:
    """Hands out the custom tag store of the current user."""

    def __init__(self, user_data_dir: Path, storage_key: str = CUSTOM_TAGS_STORAGE_KEY):
        self.user_data_dir = user_data_dir
        self.storage_key = storage_key

    def get_current_user_id(self) -> str:
        """User ID from the ``uid`` cookie, or the shared anonymous ID."""
        uid = (request.cookies.get("uid") or "").strip()
        return uid or ANONYMOUS_UID

    def get_store(self, uid: Optional[str] = None) -> CustomTagStore:
        """Custom tag store for ``uid`` (defaults to the current request's user).

        IDs that are not safe as file names fall back to the anonymous store.
        """
        if uid is None:
            uid = self.get_current_user_id()
        if not is_safe_uid(uid):
            logger.warning(f"Ignoring unsafe user id {uid!r}, using anonymous custom tags")
            uid = ANONYMOUS_UID
        return CustomTagStore(JsonFileKeyValueStore(uid, self.user_data_dir), self.storage_key)
