# backend/config.py

import os
from dotenv import load_dotenv

from exceptions import ConfigurationError

load_dotenv(override=True)

DEBUG = os.getenv("DEBUG", "false").lower() == "true"

_cors_origins_raw = os.getenv("CORS_ORIGINS")
if _cors_origins_raw:
    CORS_ORIGINS = [origin.strip() for origin in _cors_origins_raw.split(",") if origin.strip()]
else:
    CORS_ORIGINS = ["*"]

CORS_ALLOW_METHODS = "POST, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"

# Provider models
TRANSCRIPTION_MODEL = os.getenv("TRANSCRIPTION_MODEL", "whisper-1")
TAG_MODEL = os.getenv("TAG_MODEL", "gpt-4o-mini")
TAG_TEMPERATURE = float(os.getenv("TAG_TEMPERATURE", "0.2"))

# Applied to each outbound provider call; the SDK default is 10 minutes.
PROVIDER_TIMEOUT_SECONDS = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "60"))

# Upload intake
AUDIO_FIELD_NAME = "audio"
MAX_AUDIO_BYTES = 50 * 1024 * 1024  # 50 MiB
MULTIPART_OVERHEAD_BYTES = 64 * 1024

# Tagging
MIN_PROMPT_TAGS = 3
MAX_PROMPT_TAGS = 7
MAX_TAGS = 10


def get_openai_api_key() -> str | None:
    """Read the provider credential from the environment.

    Read on every request: serverless instances may start without running any
    initialization, so the value is never cached at import time.
    """
    key = (os.getenv("OPENAI_API_KEY") or "").strip()
    return key or None


def require_openai_api_key() -> str:
    key = get_openai_api_key()
    if not key:
        raise ConfigurationError("Server misconfigured: OPENAI_API_KEY not set")
    return key


def allowed_origin(request_origin: str | None = None) -> str:
    """Value for Access-Control-Allow-Origin; the header carries a single origin."""
    if "*" in CORS_ORIGINS:
        return "*"
    if request_origin in CORS_ORIGINS:
        return request_origin
    return CORS_ORIGINS[0]
