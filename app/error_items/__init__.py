"""
Error item storage used by the tag statistics and suggestions.
"""

from .repository import ErrorItemRepository, ItemStoreError

__all__ = ['ErrorItemRepository', 'ItemStoreError']
