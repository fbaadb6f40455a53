# -*- coding: utf-8 -*-
"""
API key ledger HTTP service.

Serves the key management endpoints under ``/api`` plus two static pages:
``/`` (key management) and ``/log`` (action history).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from . import __version__
from .activity.api import router as activity_router
from .config import configure_logging, settings
from .errors import register_exception_handlers
from .keys.api import router as keys_router
from .store import init_store

logger = logging.getLogger(__name__)

app = FastAPI(
    title="API Key Ledger",
    description="Flat-file API key store with expiry, soft delete and an action log.",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
def _startup_init_store() -> None:
    init_store()


# Ensure the store files exist even when lifespan events are not triggered (e.g. some test clients).
init_store()


app.include_router(keys_router)
app.include_router(activity_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


# ---------- static pages ----------

static_dir = settings.static_dir

if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


def _page(name: str) -> FileResponse:
    page = static_dir / name
    if not page.exists():
        raise HTTPException(status_code=404, detail=f"{name} not found")
    return FileResponse(page)


@app.get("/", include_in_schema=False)
def index_page() -> FileResponse:
    return _page("index.html")


@app.get("/log", include_in_schema=False)
def log_page() -> FileResponse:
    return _page("log.html")


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    configure_logging()
    logger.info("Server running on port %s", settings.port)
    logger.info("Access: http://localhost:%s", settings.port)
    uvicorn.run(
        "keyledger.api:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
