# backend/main.py

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import DEBUG
from routes.transcribe import method_not_allowed, router as transcribe_router
from logger import logger

TRANSCRIBE_PREFIX = "/api/transcribe"

app = FastAPI(debug=DEBUG)
app.include_router(transcribe_router, prefix=TRANSCRIBE_PREFIX, tags=["transcribe"])


@app.exception_handler(StarletteHTTPException)
async def transcribe_http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unrouted methods on the transcribe endpoint get the same 405 body and CORS headers
    if exc.status_code == 405 and request.url.path.rstrip("/") == TRANSCRIBE_PREFIX:
        return method_not_allowed(request)
    return await http_exception_handler(request, exc)


@app.on_event("startup")
async def log_startup():
    logger.info("Mood tagging API ready (debug=%s)", DEBUG)


@app.get("/")
def root():
    return {"message": "Mood tagging API running"}
