# backend/models.py

from typing import List

from pydantic import BaseModel, Field


class TranscriptionResult(BaseModel):
    text: str
    tags: List[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    message: str
