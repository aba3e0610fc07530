"""
Utility functions for decoding tag data.

Tag arrays reach us as JSON text stored in a database column, which may be
missing, empty or corrupt. These helpers never raise on bad data.
"""

import json
import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


def safe_json_loads(text: Optional[str], fallback: Any = None) -> Any:
    """Parse JSON text, returning ``fallback`` when it is empty or malformed."""
    if not text:
        return fallback
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        logger.debug(f"Ignoring malformed JSON payload: {e}")
        return fallback


def parse_tag_array(raw: Any) -> List[str]:
    """Decode a ``knowledgePoints`` field into its string tags.

    Accepts JSON text or an already-decoded list. Anything that is not a
    JSON array contributes no tags; non-string elements are skipped.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        raw = safe_json_loads(raw)
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, str)]
