"""
Custom tags module for user-defined knowledge-point tags.
"""

from .models import CustomTag, CUSTOM_TAG_SUBJECTS, empty_custom_tags, migrate_custom_tags
from .store import KeyValueStore, InMemoryKeyValueStore, JsonFileKeyValueStore, UserDataError, is_safe_uid
from .services import CustomTagStore, CustomTagService
from .factory import create_custom_tags_module

__all__ = [
    'CustomTag',
    'CUSTOM_TAG_SUBJECTS',
    'empty_custom_tags',
    'migrate_custom_tags',
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'JsonFileKeyValueStore',
    'UserDataError',
    'is_safe_uid',
    'CustomTagStore',
    'CustomTagService',
    'create_custom_tags_module',
]
