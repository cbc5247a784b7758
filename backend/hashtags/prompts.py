# backend/hashtags/prompts.py

"""Prompt text for hashtag extraction."""

from config import MAX_PROMPT_TAGS, MIN_PROMPT_TAGS

TAG_SYSTEM_PROMPT = "Return valid JSON only."


def build_tag_prompt(transcript: str) -> str:
    return f"""Extract {MIN_PROMPT_TAGS}-{MAX_PROMPT_TAGS} concise hashtags that capture mood, themes, and activities from the journal entry.

Rules:
- lowercase
- single words only (no spaces)
- prefix with "#"
- avoid duplicates
- keep them general (e.g., #happy, #stress, #creative, #exercise)

Return ONLY a JSON array of strings.

Entry:
---
{transcript}
---"""
