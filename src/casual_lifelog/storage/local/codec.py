"""
Serialization of the local snippet blob.

The blob is a JSON array of snippet objects using camelCase field names
(id, eventName, timestamp, statChanges, comment, type, mediaUrl).
"""

import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from casual_lifelog.models import Snippet

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "cyber_life_snippets"

_snippet_list = TypeAdapter(List[Snippet])


def encode_snippets(snippets: List[Snippet]) -> str:
    """Serialize snippets to the blob format, keeping their order."""
    return _snippet_list.dump_json(list(snippets), by_alias=True, exclude_none=True).decode("utf-8")


def decode_snippets(blob: Optional[str | bytes]) -> List[Snippet]:
    """
    Deserialize a stored blob.

    A missing blob, or one that is not a valid snippet array, decodes to an
    empty list. Corruption is logged, not raised.
    """
    if not blob:
        return []

    try:
        return _snippet_list.validate_json(blob)
    except ValidationError as e:
        logger.warning(f"Discarding corrupt snippet blob ({e.error_count()} errors)")
        return []
