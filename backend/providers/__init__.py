# backend/providers/__init__.py

"""OpenAI client construction and the speech-to-text call."""

from .clients import get_openai_client
from .transcription import transcribe_audio

__all__ = [
    "get_openai_client",
    "transcribe_audio",
]
