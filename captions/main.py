"""Application entry point for the caption service."""
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import init_db
from .routers import posts_router, rich_text_router

logger = logging.getLogger(__name__)

settings = get_settings()
APP_NAME = settings.app_name
API_VERSION = settings.api_version


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Ensure the database schema exists before serving."""

    try:
        init_db()
    except Exception:  # pragma: no cover - best effort logging
        logger.exception("Database initialisation failed")
        raise

    logger.info(
        "Caption defaults: max_characters=%d max_lines=%d policy=%s",
        settings.caption_max_characters,
        settings.caption_max_lines,
        settings.caption_truncation_policy,
    )
    yield


app = FastAPI(title=APP_NAME, version=API_VERSION, lifespan=lifespan)

cors_origins = os.getenv("CORS_ORIGINS")
if cors_origins:
    origins: Iterable[str] = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]
else:
    origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(rich_text_router)
app.include_router(posts_router)


@app.get("/api", tags=["system"])
def api_info() -> dict[str, str]:
    return {"service": APP_NAME, "version": API_VERSION}


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
