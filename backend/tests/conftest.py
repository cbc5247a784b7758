"""
Shared fixtures: fake OpenAI clients and a TestClient wired to them.
No test here talks to a real provider.
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient


class FakeOpenAI:
    """Stands in for openai.OpenAI, exposing only the two endpoints the app calls."""

    def __init__(self, transcript="", tag_content="[]", transcribe_error=None, tag_error=None, choices=True):
        self.transcript = transcript
        self.tag_content = tag_content
        self.transcribe_error = transcribe_error
        self.tag_error = tag_error
        self.choices = choices
        self.transcription_calls = []
        self.completion_calls = []
        self.audio = SimpleNamespace(transcriptions=SimpleNamespace(create=self._transcribe))
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._complete))

    def _transcribe(self, **kwargs):
        self.transcription_calls.append(kwargs)
        if self.transcribe_error is not None:
            raise self.transcribe_error
        return SimpleNamespace(text=self.transcript)

    def _complete(self, **kwargs):
        self.completion_calls.append(kwargs)
        if self.tag_error is not None:
            raise self.tag_error
        if not self.choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.tag_content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_openai():
    """Factory for FakeOpenAI instances."""
    return FakeOpenAI


@pytest.fixture
def api(monkeypatch):
    """
    TestClient plus a hook for choosing the fake provider per test.

    Returns (client, use_fake) where use_fake(fake) installs a FakeOpenAI
    behind the AudioTagger dependency.
    """
    from main import app
    from services import OpenAIAudioTagger, get_audio_tagger

    monkeypatch.setenv("OPENAI_API_KEY", "test-key")

    def use_fake(fake):
        app.dependency_overrides[get_audio_tagger] = lambda: OpenAIAudioTagger(client=fake)
        return fake

    with TestClient(app) as client:
        yield client, use_fake

    app.dependency_overrides.clear()
