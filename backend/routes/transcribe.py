# backend/routes/transcribe.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from config import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    allowed_origin,
    require_openai_api_key,
)
from exceptions import AudioTaggingError, ConfigurationError
from logger import logger
from models import ErrorResponse
from services import AudioTagger, get_audio_tagger, transcribe_and_tag
from utils import read_audio_upload

router = APIRouter()


def _cors_headers(request: Request) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin(request.headers.get("origin")),
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


def _json(
    request: Request,
    status_code: int,
    content: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={**_cors_headers(request), **(headers or {})},
    )


def _error(request: Request, status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return _json(request, status_code, ErrorResponse(message=message).model_dump(), headers)


@router.options("")
async def transcribe_preflight(request: Request):
    """CORS preflight for browser callers."""
    return Response(status_code=204, headers=_cors_headers(request))


@router.post("")
async def transcribe(request: Request, tagger: AudioTagger = Depends(get_audio_tagger)):
    """Transcribe an uploaded audio file and tag it with mood/activity hashtags."""
    try:
        require_openai_api_key()
    except ConfigurationError as e:
        logger.error("Rejecting transcription request: %s", e.message)
        return _error(request, 500, e.message)

    try:
        audio = await read_audio_upload(request)
        logger.info(
            "Transcription request received (file=%s, bytes=%s, content_type=%s)",
            audio.filename,
            audio.size,
            audio.content_type,
        )
        result = await transcribe_and_tag(audio, tagger)
    except AudioTaggingError as e:
        logger.warning("Transcription request failed: %s", e.message)
        return _error(request, 500, e.message)
    except Exception as e:
        logger.exception("Unexpected error during transcription request")
        return _error(request, 500, str(e) or "transcription failed")

    return _json(request, 200, result.model_dump())


def method_not_allowed(request: Request) -> JSONResponse:
    return _error(request, 405, "Method not allowed", headers={"Allow": CORS_ALLOW_METHODS})


# Methods outside this list reach method_not_allowed through the app's 405 handler
@router.api_route("", methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE"], include_in_schema=False)
async def transcribe_method_not_allowed(request: Request):
    return method_not_allowed(request)
