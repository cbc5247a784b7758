# backend/providers/clients.py

"""OpenAI client initialization for transcription and tag extraction."""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from config import PROVIDER_TIMEOUT_SECONDS, require_openai_api_key
from logger import logger


def get_openai_client(api_key: Optional[str] = None) -> OpenAI:
    """
    Build an OpenAI client for a single request.

    Not cached: the credential is re-read per request. Retries are disabled so
    one failed call fails the request instead of silently multiplying latency.
    """
    key = api_key or require_openai_api_key()
    logger.debug("Creating OpenAI client (timeout=%ss)", PROVIDER_TIMEOUT_SECONDS)
    return OpenAI(api_key=key, timeout=PROVIDER_TIMEOUT_SECONDS, max_retries=0)
