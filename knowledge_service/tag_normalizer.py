"""
Tag Normalizer & Alias Mapper

- Resolve a tag to its canonical catalog name via exact name/alias lookup
- Fall back to the input unchanged for free-text (custom) tags
- Deduplicate tag lists while preserving the first-seen order
"""

from typing import Iterable, List, Optional

from .curriculum import CurriculumCatalog, get_catalog


def find_entry(text: str, catalog: Optional[CurriculumCatalog] = None):
    """First catalog entry whose name or alias equals ``text``, or None.

    Entries are scanned in catalog traversal order, so the result is
    deterministic when a string is an alias in more than one subject.
    """
    catalog = catalog or get_catalog()
    for entry in catalog.iter_entries():
        # Empty input matches the first entry scanned (long-standing behavior).
        if not text or entry.matches(text):
            return entry
    return None


def normalize_tag(text: str, catalog: Optional[CurriculumCatalog] = None) -> str:
    """Canonical name for ``text``, or ``text`` itself when it is not in the catalog."""
    entry = find_entry(text, catalog)
    return entry.name if entry is not None else text


def normalize_tags(texts: Iterable[str], catalog: Optional[CurriculumCatalog] = None) -> List[str]:
    """Normalize each tag and drop repeats, keeping first occurrences in order."""
    seen = set()
    result: List[str] = []
    for text in texts or []:
        final = normalize_tag(text, catalog)
        if final not in seen:
            seen.add(final)
            result.append(final)
    return result


def is_catalog_tag(text: str, catalog: Optional[CurriculumCatalog] = None) -> bool:
    """True when a non-empty ``text`` is a canonical name or alias somewhere in the catalog."""
    return bool(text) and find_entry(text, catalog) is not None
