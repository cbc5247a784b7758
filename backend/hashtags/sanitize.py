# backend/hashtags/sanitize.py

"""Parsing and validation of provider-proposed hashtags."""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional

from config import MAX_TAGS
from exceptions import TagParseError
from patterns import TAG_PATTERN


def parse_tag_response(raw: Optional[str]) -> List[Any]:
    """
    Parse the provider's answer as a JSON array.

    Raises:
        TagParseError: If the content is not JSON, or is JSON but not an array
    """
    if raw is not None and not isinstance(raw, str):
        raise TagParseError(f"Tag response content is {type(raw).__name__}, expected text")
    content = (raw or "").strip() or "[]"
    try:
        parsed = json.loads(content)
    except (ValueError, RecursionError) as exc:
        raise TagParseError(f"Tag response is not valid JSON: {exc}") from exc
    if not isinstance(parsed, list):
        raise TagParseError(f"Tag response is {type(parsed).__name__}, expected a JSON array")
    return parsed


def normalize_tag(candidate: Any) -> Optional[str]:
    """Return the canonical '#tag' form of a candidate, or None if it is not a valid tag."""
    if not isinstance(candidate, str):
        return None
    tag = candidate.strip().lower()
    if not tag.startswith("#"):
        tag = f"#{tag}"
    if not TAG_PATTERN.match(tag):
        return None
    return tag


def sanitize_tags(candidates: Iterable[Any], limit: int = MAX_TAGS) -> List[str]:
    """
    Normalize, validate and de-duplicate candidates, keeping first-seen order.

    Invalid entries are dropped silently. "happy", "#happy" and " HAPPY "
    collapse to a single "#happy".
    """
    tags: List[str] = []
    seen = set()
    for candidate in candidates:
        tag = normalize_tag(candidate)
        if tag is None or tag in seen:
            continue
        seen.add(tag)
        tags.append(tag)
        if len(tags) >= limit:
            break
    return tags
