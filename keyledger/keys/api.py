# -*- coding: utf-8 -*-
"""API keys: API endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from ..errors import ValidationError
from .models import AddKeyRequest, KeyStatusResponse, StatusResponse
from .storage import add_key, get_key_status, hard_delete_key, list_keys, soft_delete_key

router = APIRouter(prefix="/api", tags=["API Keys"])

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_add_payload(request: Request) -> AddKeyRequest:
    content_type = request.headers.get("content-type", "")
    payload: Any
    if content_type.startswith(_FORM_TYPES):
        payload = dict(await request.form())
    else:
        body = await request.body()
        if not body.strip():
            payload = {}
        else:
            try:
                payload = await request.json()
            except ValueError:
                payload = None
    if not isinstance(payload, dict):
        raise ValidationError("API key and expired time are required!")
    try:
        return AddKeyRequest.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError("API key and expired time are required!") from exc


@router.get("/keys", response_model=None, summary="List every stored key record")
def get_keys() -> Any:
    return list_keys()


@router.post("/add", response_model=StatusResponse, summary="Add an API key")
async def add(request: Request):
    data = await _read_add_payload(request)
    await run_in_threadpool(add_key, data.api_key, data.expired_time)
    return StatusResponse(status="success", message="API key added!")


@router.get(
    "/get/{api_key}",
    response_model=KeyStatusResponse,
    response_model_exclude_none=True,
    summary="Check whether a key is valid, expired or deleted",
)
def get_key(api_key: str):
    return KeyStatusResponse.model_validate(get_key_status(api_key))


@router.post("/deleted/{api_key}", response_model=StatusResponse, summary="Soft-delete an API key")
def soft_delete(api_key: str):
    soft_delete_key(api_key)
    return StatusResponse(status="success", message="API key marked as deleted!")


@router.delete("/delete/{api_key}", response_model=StatusResponse, summary="Hard-delete an API key")
def hard_delete(api_key: str):
    hard_delete_key(api_key)
    return StatusResponse(status="success", message="API key deleted!")
