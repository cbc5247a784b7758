# backend/hashtags/extractor.py

"""Mood/theme/activity hashtag extraction from a transcript."""

from __future__ import annotations

from typing import Any, List, Optional

from config import TAG_MODEL, TAG_TEMPERATURE
from exceptions import TagParseError
from logger import logger

from .prompts import TAG_SYSTEM_PROMPT, build_tag_prompt
from .sanitize import parse_tag_response, sanitize_tags


def request_tag_completion(client: Any, transcript: str, model: str = TAG_MODEL) -> Optional[str]:
    """Ask the chat model for hashtags and return the first choice's raw content."""
    response = client.chat.completions.create(
        model=model,
        temperature=TAG_TEMPERATURE,
        messages=[
            {"role": "system", "content": TAG_SYSTEM_PROMPT},
            {"role": "user", "content": build_tag_prompt(transcript)},
        ],
    )
    if not response.choices:
        raise TagParseError("Tag response had no choices")
    return response.choices[0].message.content


def extract_tags(client: Any, transcript: str) -> List[str]:
    """
    Extract validated hashtags for a transcript.

    Never raises: tags are an enhancement on top of the transcript, so any
    failure here (provider error, malformed output) yields an empty list.
    An empty transcript is still sent to the provider.
    """
    try:
        raw = request_tag_completion(client, transcript or "")
    except TagParseError as exc:
        logger.warning("Tag extraction returned nothing usable: %s", exc)
        return []
    except Exception as exc:
        logger.warning("Tag extraction call failed: %s", exc)
        return []

    try:
        candidates = parse_tag_response(raw)
        tags = sanitize_tags(candidates)
    except TagParseError as exc:
        logger.warning("Discarding tag response: %s", exc)
        return []
    except Exception as exc:
        logger.warning("Tag response could not be sanitized: %s", exc)
        return []

    if len(tags) < len(candidates):
        logger.info("Kept %s of %s proposed tags", len(tags), len(candidates))
    return tags
