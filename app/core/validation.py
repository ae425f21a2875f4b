"""
Input normalization and identifier rules shared by the services.
"""

import itertools
import os
import re
import time
from typing import Optional, Sequence, Union

from app.core.exceptions import InvalidIdError, ValidationError


OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")
JSON_FILE_URL_PATTERN = re.compile(r"^https?://.+")
TAG_SEPARATOR = ","

# Values a client-side router can leak into an id slot
RESERVED_ID_VALUES = frozenset({"undefined", "new"})

_process_random = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def new_object_id() -> str:
    """
    Generate a 24-character hex identifier.

    Layout matches a 12-byte document object id: 4 bytes of epoch seconds,
    5 bytes fixed per process, 3 bytes of an incrementing counter.
    """
    timestamp = int(time.time()).to_bytes(4, "big")
    counter = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (timestamp + _process_random + counter).hex()


def is_valid_object_id(value: Optional[str]) -> bool:
    """Check the shape of an id without touching the store."""
    if not value or value in RESERVED_ID_VALUES:
        return False
    return bool(OBJECT_ID_PATTERN.match(value))


def require_session_id(value: Optional[str]) -> str:
    """
    Return the normalized session id or raise InvalidIdError.

    Args:
        value: Raw id from the path or request body

    Returns:
        Lowercase 24-character hex id
    """
    if not is_valid_object_id(value):
        raise InvalidIdError(f"Rejected session id {value!r}")
    return value.lower()


def normalize_tags(raw: Union[str, Sequence[str], None]) -> list[str]:
    """
    Normalize tags from a delimited string or a list of strings.

    Pieces are trimmed and empty pieces dropped. Order and duplicates are kept.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        pieces = raw.split(TAG_SEPARATOR)
    else:
        pieces = list(raw)
    return [piece.strip() for piece in pieces if piece and piece.strip()]


def normalize_title(raw: Optional[str]) -> str:
    """Trim a session title; empty titles are rejected."""
    title = (raw or "").strip()
    if not title:
        raise ValidationError("Title is required")
    return title


def normalize_json_file_url(raw: Optional[str]) -> Optional[str]:
    """Trim the JSON file link; None when empty, http(s) required otherwise."""
    url = (raw or "").strip()
    if not url:
        return None
    if not JSON_FILE_URL_PATTERN.match(url):
        raise ValidationError("Please enter a valid URL")
    return url
