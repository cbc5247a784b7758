# backend/services.py

import asyncio
from typing import List, Optional, Protocol

from openai import OpenAI

from hashtags import extract_tags
from logger import logger
from models import TranscriptionResult
from providers import get_openai_client, transcribe_audio
from utils import AudioUpload


class AudioTagger(Protocol):
    """The two provider capabilities the endpoint depends on."""

    def transcribe(self, audio: AudioUpload) -> str:
        ...

    def extract_tags(self, transcript: str) -> List[str]:
        ...


class OpenAIAudioTagger:
    """AudioTagger backed by OpenAI transcription and chat completion models."""

    def __init__(self, client: Optional[OpenAI] = None):
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    def transcribe(self, audio: AudioUpload) -> str:
        return transcribe_audio(self.client, audio)

    def extract_tags(self, transcript: str) -> List[str]:
        return extract_tags(self.client, transcript)


def get_audio_tagger() -> AudioTagger:
    """FastAPI dependency; override it to swap providers in tests."""
    return OpenAIAudioTagger()


async def transcribe_and_tag(audio: AudioUpload, tagger: AudioTagger) -> TranscriptionResult:
    """Transcribe then tag, one call after the other, off the event loop."""
    text = await asyncio.to_thread(tagger.transcribe, audio)
    tags = await asyncio.to_thread(tagger.extract_tags, text)
    logger.info(
        "Processed '%s' (bytes=%s, transcript_chars=%s, tags=%s)",
        audio.filename,
        audio.size,
        len(text),
        len(tags),
    )
    return TranscriptionResult(text=text, tags=tags)
