# backend/providers/transcription.py

"""Speech-to-text via the OpenAI audio transcriptions API."""

from __future__ import annotations

from typing import Any, Optional, Union

from config import TRANSCRIPTION_MODEL
from exceptions import TranscriptionError
from logger import logger
from utils import AudioUpload


def transcribe_audio(
    client: Any,
    audio: Union[AudioUpload, bytes],
    filename: Optional[str] = None,
    model: str = TRANSCRIPTION_MODEL,
) -> str:
    """
    Send audio to the transcription model and return the plain transcript.

    Args:
        client: OpenAI client (anything exposing audio.transcriptions.create)
        audio: Uploaded audio, or raw bytes
        filename: Name sent to the provider; it uses the extension to detect the format
        model: Transcription model name

    Returns:
        Transcript text with surrounding whitespace removed (may be empty)

    Raises:
        TranscriptionError: If the provider call fails, with the provider's message
    """
    if isinstance(audio, AudioUpload):
        content = audio.content
        filename = filename or audio.filename
    else:
        content = audio
    filename = filename or "audio.webm"

    try:
        response = client.audio.transcriptions.create(
            model=model,
            file=(filename, content),
        )
    except Exception as exc:
        logger.error("Transcription failed for '%s': %s", filename, exc)
        raise TranscriptionError(str(exc) or "Transcription failed") from exc

    text = (getattr(response, "text", None) or "").strip()
    logger.info("Transcribed '%s' (bytes=%s, chars=%s)", filename, len(content), len(text))
    return text
