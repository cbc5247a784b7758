# backend/utils/audio_upload.py

from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from starlette.datastructures import UploadFile

from config import AUDIO_FIELD_NAME, MAX_AUDIO_BYTES, MULTIPART_OVERHEAD_BYTES
from exceptions import MissingInputError, UploadTooLargeError
from logger import logger


@dataclass
class AudioUpload:
    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


def _declared_length(request: Request) -> Optional[int]:
    raw = request.headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _too_large_message(max_bytes: int) -> str:
    return f"Audio file too large (max {max_bytes // (1024 * 1024)}MB)"


async def read_audio_upload(
    request: Request,
    field_name: str = AUDIO_FIELD_NAME,
    max_bytes: Optional[int] = None,
) -> AudioUpload:
    """
    Pull the single audio file out of a multipart/form-data request.

    The field may come back from the parser as one file or as several values
    under the same name; the first uploaded file wins. Text fields that happen
    to use the same name are ignored.
    """
    if max_bytes is None:
        max_bytes = MAX_AUDIO_BYTES

    declared = _declared_length(request)
    if declared is not None and declared > max_bytes + MULTIPART_OVERHEAD_BYTES:
        logger.warning("Rejected upload by Content-Length (bytes=%s, limit=%s)", declared, max_bytes)
        raise UploadTooLargeError(_too_large_message(max_bytes))

    form = await request.form()
    try:
        upload = next(
            (value for value in form.getlist(field_name) if isinstance(value, UploadFile)),
            None,
        )
        if upload is None:
            raise MissingInputError(f"Missing '{field_name}' file field")

        # One byte past the limit is enough to know it is too large
        content = await upload.read(max_bytes + 1)
        if len(content) > max_bytes:
            logger.warning("Rejected upload '%s' (larger than %s bytes)", upload.filename, max_bytes)
            raise UploadTooLargeError(_too_large_message(max_bytes))

        return AudioUpload(
            filename=upload.filename or "audio.webm",
            content=content,
            content_type=upload.content_type,
        )
    finally:
        await form.close()
