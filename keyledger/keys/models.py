# -*- coding: utf-8 -*-
"""API keys: models."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

# Strings, or plain JSON numbers (never booleans).
FieldValue = Union[StrictStr, StrictInt, StrictFloat]


class AddKeyRequest(BaseModel):
    api_key: Optional[FieldValue] = Field(default=None, description="Key, used verbatim as the identifier")
    expired_time: Optional[FieldValue] = Field(
        default=None,
        description="Expiry timestamp (ISO-8601, RFC 2822 or epoch milliseconds)",
    )


class KeyRecord(BaseModel):
    expired: FieldValue
    created_at: str
    deleted: bool = False


class StatusResponse(BaseModel):
    status: str
    message: str


class KeyStatusResponse(BaseModel):
    status: str = Field(..., description="valid | invalid | expired | deleted")
    message: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    expired_time: Optional[Any] = None
