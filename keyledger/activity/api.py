# -*- coding: utf-8 -*-
"""Action log: API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from .storage import list_logs

router = APIRouter(prefix="/api", tags=["Logs"])


@router.get("/logs", response_model=None, summary="List the action log in insertion order")
def get_logs() -> Any:
    return list_logs()
