# backend/exceptions.py

"""Shared exceptions for the application."""


class AudioTaggingError(Exception):
    """Base class for failures that abort a transcription request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInputError(AudioTaggingError):
    """Raised when the upload carries no usable audio file field."""
    pass


class UploadTooLargeError(AudioTaggingError):
    """Raised when the uploaded audio exceeds the configured size limit."""
    pass


class ConfigurationError(AudioTaggingError):
    """Raised when a required provider credential is not configured."""
    pass


class TranscriptionError(AudioTaggingError):
    """Raised when the speech-to-text provider call fails."""
    pass


class TagParseError(ValueError):
    """Provider tag output could not be parsed. Never leaves the tag extractor."""
    pass
