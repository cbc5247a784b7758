# backend/utils/__init__.py

"""Shared utilities: multipart audio intake."""

from .audio_upload import (
    AudioUpload,
    read_audio_upload,
)

__all__ = [
    "AudioUpload",
    "read_audio_upload",
]
