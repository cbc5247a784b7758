# backend/hashtags/__init__.py

"""Hashtag extraction: prompt-driven LLM call plus strict output sanitization."""

from .extractor import (
    extract_tags,
    request_tag_completion,
)
from .sanitize import (
    normalize_tag,
    parse_tag_response,
    sanitize_tags,
)

__all__ = [
    "extract_tags",
    "request_tag_completion",
    "normalize_tag",
    "parse_tag_response",
    "sanitize_tags",
]
